"""Static metadata describing ExamPrepQt."""

APP_NAME = "ExamPrepQt"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "ExamPrepQt is a desktop exam-preparation client built with Qt. "
    "Browse exams and subjects, read notes, practice questions and take timed quizzes "
    "graded by the content server."
)

HELP_TEXT = (
    "Pick an exam, then a subject. From the subject page you can read notes, browse past "
    "questions or start a quiz. Every quiz gives you 60 seconds per question; when the "
    "countdown reaches zero your answers are submitted automatically.\n\n"
    "Unanswered questions are graded as incorrect. If grading fails you stay in the quiz "
    "with your answers intact and can submit again."
)
