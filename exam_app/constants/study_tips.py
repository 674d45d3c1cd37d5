"""Study techniques listed on the resources page."""

from exam_app.core.models import StudyTip

STUDY_TIPS: tuple[StudyTip, ...] = (
    StudyTip(
        "Spaced Repetition",
        "Instead of cramming, spread your studying over time. Review material at increasing intervals "
        "to improve long-term retention.",
    ),
    StudyTip(
        "Active Recall",
        "Test yourself frequently. Instead of just re-reading notes, try to recall information from memory "
        "to strengthen neural connections.",
    ),
    StudyTip(
        "Pomodoro Technique",
        "Study in focused 25-minute intervals with 5-minute breaks. After 4 intervals, take a longer "
        "15-30 minute break.",
    ),
    StudyTip(
        "Teach What You Learn",
        "Explaining concepts to others (or even to yourself) helps solidify your understanding and "
        "identify knowledge gaps.",
    ),
    StudyTip(
        "Use Multiple Resources",
        "Don't rely on a single textbook or source. Diverse learning materials provide different "
        "perspectives and explanations.",
    ),
)
