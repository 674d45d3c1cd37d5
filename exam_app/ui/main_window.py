"""Qt main window switching between sign-in, home, browsing, quiz and results pages."""

from __future__ import annotations

from enum import Enum, auto
import logging

from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import (
    QHBoxLayout,
    QMainWindow,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from exam_app.constants.about import APP_ABOUT_TEXT, APP_LICENSE, APP_NAME, APP_VERSION, HELP_TEXT
from exam_app.constants.ui_constants import (
    NAV_BUTTON_ABOUT,
    NAV_BUTTON_EXAMS,
    NAV_BUTTON_HELP,
    NAV_BUTTON_HISTORY,
    NAV_BUTTON_HOME,
    NAV_BUTTON_LOGOUT,
    NAV_BUTTON_PROFILE,
    NAV_BUTTON_RESOURCES,
    TIME_UP_MESSAGE,
    TIME_UP_TITLE,
    WINDOW_TITLE,
)
from exam_app.core.errors import ExamAppError
from exam_app.core.exam_manager import ExamManager
from exam_app.core.models import Exam, GradeResult, Note, Question, Subject, User
from exam_app.core.quiz_session import QuizSessionController
from exam_app.styling.styles import Styles
from exam_app.ui.components.browse_panel import BrowsePanel
from exam_app.ui.components.content_viewer import ContentViewer
from exam_app.ui.components.history_panel import HistoryPanel
from exam_app.ui.components.home_panel import HomePanel
from exam_app.ui.components.login_panel import LoginPanel
from exam_app.ui.components.profile_panel import ProfilePanel
from exam_app.ui.components.quiz_panel import QuizPanel
from exam_app.ui.components.resources_panel import ResourcesPanel
from exam_app.ui.components.results_panel import ResultsPanel
from exam_app.ui.components.subject_panel import SubjectPanel, SubjectSection
from exam_app.ui.countdown_timer import QtTickScheduler
from exam_app.ui.dialog_helpers import confirm_exit_quiz, show_error, show_info
from exam_app.ui.grading_worker import QtGradingDispatcher

logger = logging.getLogger(__name__)


class Page(Enum):
    """Pages held by the central stacked widget."""

    LOGIN = auto()
    HOME = auto()
    BROWSE = auto()
    SUBJECT = auto()
    CONTENT = auto()
    QUIZ = auto()
    RESULTS = auto()
    HISTORY = auto()
    RESOURCES = auto()
    PROFILE = auto()


class ExamMainWindow(QMainWindow):
    """Main window; owns at most one running quiz controller."""

    def __init__(self, exam_manager: ExamManager) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(1024, 720)

        self.exam_manager = exam_manager
        self._grader = QtGradingDispatcher(exam_manager.content_service)
        self._controller: QuizSessionController | None = None
        self._scheduler: QtTickScheduler | None = None
        self._current_subject: Subject | None = None
        self._page = Page.LOGIN

        self._build_ui()
        self.setStyleSheet(Styles.get_main_window_style())
        if self.exam_manager.is_authenticated():
            self._handle_authenticated(self.exam_manager.get_current_user())
        else:
            self._set_page(Page.LOGIN)

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)
        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        self._build_nav_buttons(root_layout)

        self.page_stack = QStackedWidget(self)
        self.login_panel = LoginPanel(self.exam_manager, on_authenticated=self._handle_authenticated, parent=self)
        self.home_panel = HomePanel(
            self.exam_manager,
            on_browse_exams=self._show_exams,
            on_view_history=self._show_history,
            on_open_exam=self._open_exam,
            parent=self,
        )
        self.browse_panel = BrowsePanel(self.exam_manager, on_open_subject=self._open_subject, parent=self)
        self.subject_panel = SubjectPanel(
            self.exam_manager,
            on_open_note=self._open_note,
            on_open_question=self._open_question,
            on_start_quiz=self._start_quiz,
            on_back=lambda: self._set_page(Page.BROWSE),
            parent=self,
        )
        self.content_viewer = ContentViewer(on_back=lambda: self._set_page(Page.SUBJECT), parent=self)
        self.quiz_panel = QuizPanel(on_exited=self._handle_quiz_exited, parent=self)
        self.results_panel = ResultsPanel(
            on_go_home=self._show_home,
            on_another_quiz=self._handle_another_quiz,
            parent=self,
        )
        self.history_panel = HistoryPanel(self.exam_manager, parent=self)
        self.resources_panel = ResourcesPanel(self.exam_manager, on_open_subject=self._open_subject, parent=self)
        self.profile_panel = ProfilePanel(on_logout=self._handle_logout, parent=self)

        self._pages: dict[Page, QWidget] = {
            Page.LOGIN: self.login_panel,
            Page.HOME: self.home_panel,
            Page.BROWSE: self.browse_panel,
            Page.SUBJECT: self.subject_panel,
            Page.CONTENT: self.content_viewer,
            Page.QUIZ: self.quiz_panel,
            Page.RESULTS: self.results_panel,
            Page.HISTORY: self.history_panel,
            Page.RESOURCES: self.resources_panel,
            Page.PROFILE: self.profile_panel,
        }
        for widget in self._pages.values():
            self.page_stack.addWidget(widget)
        root_layout.addWidget(self.page_stack, stretch=1)

    def _build_nav_buttons(self, layout: QVBoxLayout) -> None:
        button_row = QHBoxLayout()

        self.home_button = QPushButton(NAV_BUTTON_HOME, self)
        self.home_button.clicked.connect(self._show_home)
        button_row.addWidget(self.home_button)

        self.exams_button = QPushButton(NAV_BUTTON_EXAMS, self)
        self.exams_button.clicked.connect(self._show_exams)
        button_row.addWidget(self.exams_button)

        self.resources_button = QPushButton(NAV_BUTTON_RESOURCES, self)
        self.resources_button.clicked.connect(self._show_resources)
        button_row.addWidget(self.resources_button)

        self.history_button = QPushButton(NAV_BUTTON_HISTORY, self)
        self.history_button.clicked.connect(self._show_history)
        button_row.addWidget(self.history_button)

        self.about_button = QPushButton(NAV_BUTTON_ABOUT, self)
        self.about_button.clicked.connect(self._handle_about)
        button_row.addWidget(self.about_button)

        self.help_button = QPushButton(NAV_BUTTON_HELP, self)
        self.help_button.clicked.connect(self._handle_help)
        button_row.addWidget(self.help_button)

        button_row.addStretch()
        self.profile_button = QPushButton(NAV_BUTTON_PROFILE, self)
        self.profile_button.clicked.connect(self._show_profile)
        button_row.addWidget(self.profile_button)

        self.logout_button = QPushButton(NAV_BUTTON_LOGOUT, self)
        self.logout_button.clicked.connect(self._handle_logout)
        button_row.addWidget(self.logout_button)

        layout.addLayout(button_row)

    def _set_page(self, page: Page) -> None:
        self._page = page
        self.page_stack.setCurrentWidget(self._pages[page])
        signed_in = page is not Page.LOGIN
        in_quiz = page is Page.QUIZ
        for button in (
            self.home_button,
            self.exams_button,
            self.resources_button,
            self.history_button,
            self.profile_button,
            self.logout_button,
        ):
            button.setEnabled(signed_in and not in_quiz)

    # --- Authentication ---

    def _handle_authenticated(self, user: User | None) -> None:
        self.profile_button.setText(user.name or user.email if user else NAV_BUTTON_PROFILE)
        self._show_home()

    def _handle_logout(self) -> None:
        self.exam_manager.logout()
        self.profile_button.setText(NAV_BUTTON_PROFILE)
        self.profile_panel.show_user(None)
        self._set_page(Page.LOGIN)

    # --- Browsing ---

    def _show_home(self) -> None:
        self.home_panel.refresh_dashboard()
        self._set_page(Page.HOME)

    def _show_exams(self) -> None:
        self.browse_panel.refresh_exams()
        self._set_page(Page.BROWSE)

    def _show_resources(self) -> None:
        self.resources_panel.refresh_subjects()
        self._set_page(Page.RESOURCES)

    def _show_history(self) -> None:
        self.history_panel.refresh_history()
        self._set_page(Page.HISTORY)

    def _show_profile(self) -> None:
        self.profile_panel.show_user(self.exam_manager.get_current_user())
        self._set_page(Page.PROFILE)

    def _open_exam(self, exam: Exam) -> None:
        self._show_exams()
        self.browse_panel.select_exam(exam.id)

    def _open_subject(self, subject: Subject, section: SubjectSection = SubjectSection.NOTES) -> None:
        self._current_subject = subject
        self.subject_panel.show_subject(subject, section)
        self._set_page(Page.SUBJECT)

    def _open_note(self, note: Note) -> None:
        self.content_viewer.show_note(note)
        self._set_page(Page.CONTENT)

    def _open_question(self, question: Question) -> None:
        self.content_viewer.show_question(question)
        self._set_page(Page.CONTENT)

    # --- Quiz ---

    def _start_quiz(self, subject: Subject, question_count: str) -> None:
        self._teardown_controller()
        self._current_subject = subject
        scheduler = QtTickScheduler(self.quiz_panel)
        try:
            controller = self.exam_manager.start_quiz_session(
                subject.id,
                question_count,
                scheduler=scheduler,
                grader=self._grader,
                confirm_exit=lambda: confirm_exit_quiz(self),
                on_change=self.quiz_panel.refresh,
                on_result=self._handle_quiz_result,
                on_error=self.quiz_panel.show_grading_error,
            )
        except ExamAppError as exc:
            logger.warning("Could not start a quiz for subject %s: %s", subject.id, exc)
            scheduler.dispose()
            show_error(self, "Error", str(exc))
            return
        self._controller = controller
        self._scheduler = scheduler
        self.quiz_panel.attach(controller)
        self._set_page(Page.QUIZ)

    def _handle_quiz_result(self, result: GradeResult) -> None:
        timed_out = self.quiz_panel.was_timed_out()
        self.quiz_panel.detach()
        self._controller = None
        self._release_scheduler()
        self.results_panel.show_result(result)
        self._set_page(Page.RESULTS)
        if timed_out:
            show_info(self, TIME_UP_TITLE, TIME_UP_MESSAGE)

    def _handle_quiz_exited(self) -> None:
        self._controller = None
        self._release_scheduler()
        if self._current_subject is not None:
            self._set_page(Page.SUBJECT)
        else:
            self._show_exams()

    def _handle_another_quiz(self) -> None:
        if self._current_subject is None:
            self._show_exams()
            return
        self._open_subject(self._current_subject, SubjectSection.QUIZ_SETUP)

    def _teardown_controller(self) -> None:
        if self._controller is not None:
            self._controller.close()
            self.quiz_panel.detach()
            self._controller = None
        self._release_scheduler()

    def _release_scheduler(self) -> None:
        if self._scheduler is not None:
            self._scheduler.dispose()
            self._scheduler = None

    # --- Info dialogs ---

    def _handle_about(self) -> None:
        details = f"{APP_NAME} v{APP_VERSION}\nLicense: {APP_LICENSE}\n\n{APP_ABOUT_TEXT}"
        show_info(self, f"About {APP_NAME}", details)

    def _handle_help(self) -> None:
        show_info(self, f"{APP_NAME} Help", HELP_TEXT)

    def closeEvent(self, event: QCloseEvent) -> None:
        self._teardown_controller()
        super().closeEvent(event)
