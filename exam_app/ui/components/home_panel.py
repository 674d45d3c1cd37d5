"""Home page shown after sign-in: greeting, recent quizzes and a few exams."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtGui import QBrush, QColor
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QPushButton,
    QTreeWidget,
    QTreeWidgetItem,
    QVBoxLayout,
    QWidget,
)

from exam_app.constants.ui_constants import (
    HOME_AVAILABLE_EXAMS,
    HOME_BROWSE_EXAMS,
    HOME_NO_EXAMS,
    HOME_NO_QUIZZES,
    HOME_QUICK_ACTIONS,
    HOME_RECENT_QUIZZES,
    HOME_START_QUIZ,
    HOME_SUBTITLE,
    HOME_VIEW_ALL_EXAMS,
    HOME_VIEW_ALL_QUIZZES,
    HOME_WELCOME_TEMPLATE,
    NAV_BUTTON_HISTORY,
)
from exam_app.core.errors import ExamAppError
from exam_app.core.exam_manager import ExamManager
from exam_app.core.models import Exam
from exam_app.core.scoring import score_band, score_percentage
from exam_app.styling.color_palette import ColorPalette, Theme
from exam_app.styling.styles import Styles
from exam_app.ui.dialog_helpers import show_error


class HomePanel(QWidget):
    def __init__(
        self,
        exam_manager: ExamManager,
        on_browse_exams: Callable[[], None],
        on_view_history: Callable[[], None],
        on_open_exam: Callable[[Exam], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.exam_manager = exam_manager
        self.on_browse_exams = on_browse_exams
        self.on_view_history = on_view_history
        self.on_open_exam = on_open_exam
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.welcome_label = QLabel("", self)
        self.welcome_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.welcome_label)
        layout.addWidget(QLabel(HOME_SUBTITLE, self))

        # Quick actions
        layout.addWidget(self._section_label(HOME_QUICK_ACTIONS))
        actions = QHBoxLayout()
        browse_button = QPushButton(HOME_BROWSE_EXAMS, self)
        browse_button.clicked.connect(lambda: self.on_browse_exams())
        actions.addWidget(browse_button)
        history_button = QPushButton(NAV_BUTTON_HISTORY, self)
        history_button.clicked.connect(lambda: self.on_view_history())
        actions.addWidget(history_button)
        layout.addLayout(actions)

        # Recent quizzes
        layout.addWidget(self._section_label(HOME_RECENT_QUIZZES))
        self.recent_tree = QTreeWidget(self)
        self.recent_tree.setRootIsDecorated(False)
        self.recent_tree.setHeaderLabels(["Subject", "Score", "Date"])
        self.recent_tree.setColumnWidth(0, 260)
        layout.addWidget(self.recent_tree, stretch=1)
        self.no_quizzes_label = QLabel(HOME_NO_QUIZZES, self)
        self.no_quizzes_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.no_quizzes_label)
        quiz_row = QHBoxLayout()
        quiz_row.addStretch()
        self.start_quiz_button = QPushButton(HOME_START_QUIZ, self)
        self.start_quiz_button.clicked.connect(lambda: self.on_browse_exams())
        quiz_row.addWidget(self.start_quiz_button)
        self.view_all_quizzes_button = QPushButton(HOME_VIEW_ALL_QUIZZES, self)
        self.view_all_quizzes_button.clicked.connect(lambda: self.on_view_history())
        quiz_row.addWidget(self.view_all_quizzes_button)
        layout.addLayout(quiz_row)

        # Featured exams
        layout.addWidget(self._section_label(HOME_AVAILABLE_EXAMS))
        self.exam_list = QListWidget(self)
        self.exam_list.itemActivated.connect(lambda item: self.on_open_exam(item.data(Qt.UserRole)))
        layout.addWidget(self.exam_list, stretch=1)
        self.no_exams_label = QLabel(HOME_NO_EXAMS, self)
        self.no_exams_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.no_exams_label)
        exam_row = QHBoxLayout()
        exam_row.addStretch()
        view_all_exams_button = QPushButton(HOME_VIEW_ALL_EXAMS, self)
        view_all_exams_button.clicked.connect(lambda: self.on_browse_exams())
        exam_row.addWidget(view_all_exams_button)
        layout.addLayout(exam_row)

    def _section_label(self, text: str) -> QLabel:
        label = QLabel(text, self)
        label.setStyleSheet(Styles.get_section_label_style())
        return label

    def refresh_dashboard(self) -> None:
        try:
            dashboard = self.exam_manager.get_dashboard()
        except ExamAppError as exc:
            show_error(self, "Error", str(exc))
            return

        self.welcome_label.setText(HOME_WELCOME_TEMPLATE.format(name=dashboard.display_name))

        self.recent_tree.clear()
        for entry in dashboard.recent_quizzes:
            percentage = score_percentage(entry.score, entry.total_questions)
            finished = entry.end_time or entry.start_time
            item = QTreeWidgetItem(
                [
                    entry.subject.name,
                    f"{entry.score}/{entry.total_questions} ({percentage}%)",
                    finished.strftime("%Y-%m-%d") if finished else "",
                ]
            )
            color = ColorPalette.for_score_band(score_band(percentage)).get(Theme.LIGHT)
            item.setForeground(1, QBrush(QColor(color)))
            self.recent_tree.addTopLevelItem(item)
        has_quizzes = bool(dashboard.recent_quizzes)
        self.recent_tree.setVisible(has_quizzes)
        self.no_quizzes_label.setVisible(not has_quizzes)
        self.start_quiz_button.setVisible(not has_quizzes)
        self.view_all_quizzes_button.setVisible(has_quizzes)

        self.exam_list.clear()
        for exam in dashboard.featured_exams:
            item = QListWidgetItem(exam.name, self.exam_list)
            item.setToolTip(exam.description)
            item.setData(Qt.UserRole, exam)
        self.no_exams_label.setVisible(not dashboard.featured_exams)
