"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "ExamPrepQt"

NAV_BUTTON_HOME: str = "Home"
NAV_BUTTON_EXAMS: str = "Exams"
NAV_BUTTON_RESOURCES: str = "Study Resources"
NAV_BUTTON_HISTORY: str = "Quiz History"
NAV_BUTTON_ABOUT: str = "About"
NAV_BUTTON_HELP: str = "Help"
NAV_BUTTON_PROFILE: str = "Profile"
NAV_BUTTON_LOGOUT: str = "Log Out"
BACK_BUTTON: str = "Back"

LOGIN_TITLE: str = "Sign in"
LOGIN_BUTTON: str = "Log In"
REGISTER_BUTTON: str = "Register"
LOGIN_MISSING_FIELDS: str = "Please fill in all fields"

EXAMS_EMPTY_STATE: str = "No exams available."
SUBJECTS_EMPTY_STATE: str = "No subjects available for this exam."
NOTES_EMPTY_STATE: str = "No notes for this subject yet."
QUESTIONS_EMPTY_STATE: str = "No questions for this subject yet."
HISTORY_EMPTY_STATE: str = "You have not completed any quizzes yet."

HOME_WELCOME_TEMPLATE: str = "Welcome, {name}!"
HOME_SUBTITLE: str = "Continue your exam preparation journey"
HOME_QUICK_ACTIONS: str = "Quick Actions"
HOME_BROWSE_EXAMS: str = "Browse Exams"
HOME_RECENT_QUIZZES: str = "Recent Quizzes"
HOME_NO_QUIZZES: str = "You haven't taken any quizzes yet."
HOME_START_QUIZ: str = "Start a Quiz"
HOME_VIEW_ALL_QUIZZES: str = "View All Quizzes"
HOME_AVAILABLE_EXAMS: str = "Available Exams"
HOME_NO_EXAMS: str = "No exams available at the moment."
HOME_VIEW_ALL_EXAMS: str = "View All Exams"

RESOURCES_TITLE: str = "Study Resources"
RESOURCES_DESCRIPTION: str = "Explore study materials, tips, and resources to help you prepare for your exams."
RESOURCES_TIPS_TITLE: str = "Effective Study Techniques"
RESOURCES_SUBJECTS_TITLE: str = "Subject Resources"
RESOURCES_NO_SUBJECTS: str = "No subjects available."
RESOURCES_NOTES_BUTTON: str = "Notes"
RESOURCES_QUESTIONS_BUTTON: str = "Questions"
RESOURCES_QUIZ_BUTTON: str = "Quiz"

PROFILE_TITLE: str = "My Profile"
PROFILE_NAME_LABEL: str = "Name"
PROFILE_EMAIL_LABEL: str = "Email"

START_QUIZ_BUTTON: str = "Start Quiz"
QUESTION_COUNT_LABEL: str = "Number of questions:"

QUIZ_PREV_BUTTON: str = "Previous"
QUIZ_NEXT_BUTTON: str = "Next"
QUIZ_SUBMIT_BUTTON: str = "Submit"
QUIZ_EXIT_BUTTON: str = "Exit Quiz"
QUIZ_PROGRESS_TEMPLATE: str = "Question {current} of {total}"
QUIZ_TIMER_TEMPLATE: str = "Time: {time}"
QUIZ_NO_OPTIONS: str = "No options available for this question."
QUIZ_JUMP_LABEL: str = "Go to:"
QUIZ_JUMP_ITEM_TEMPLATE: str = "Question {number}{marker}"
QUIZ_JUMP_ANSWERED_MARKER: str = " ✓"

EXIT_DIALOG_TITLE: str = "Exit Quiz?"
EXIT_DIALOG_MESSAGE: str = "Are you sure you want to exit? Your progress will be lost."
SUBMIT_DIALOG_TITLE: str = "Submit Quiz?"
SUBMIT_DIALOG_MESSAGE: str = "Are you sure you want to submit your answers?"
TIME_UP_TITLE: str = "Time's Up!"
TIME_UP_MESSAGE: str = "Your quiz has been submitted."

RESULTS_TITLE: str = "Your Score"
RESULTS_GO_HOME: str = "Go Home"
RESULTS_ANOTHER_QUIZ: str = "Take Another Quiz"
RESULT_CORRECT: str = "â Correct"
RESULT_INCORRECT: str = "â Incorrect"
