"""Subject page: notes, past questions and quiz setup."""

from __future__ import annotations

from enum import Enum, auto
from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QPushButton,
    QTabWidget,
    QVBoxLayout,
    QWidget,
)

from exam_app.constants.quiz_constants import DEFAULT_QUESTION_COUNT
from exam_app.constants.ui_constants import (
    BACK_BUTTON,
    NOTES_EMPTY_STATE,
    QUESTION_COUNT_LABEL,
    QUESTIONS_EMPTY_STATE,
    START_QUIZ_BUTTON,
)
from exam_app.core.errors import ExamAppError
from exam_app.core.exam_manager import ExamManager
from exam_app.core.models import Note, Question, Subject
from exam_app.styling.styles import Styles
from exam_app.ui.dialog_helpers import show_error


class SubjectSection(Enum):
    """Part of the subject page to bring forward when it opens."""

    NOTES = auto()
    QUESTIONS = auto()
    QUIZ_SETUP = auto()


class SubjectPanel(QWidget):
    """Lists a subject's notes and questions and collects the quiz size."""

    def __init__(
        self,
        exam_manager: ExamManager,
        on_open_note: Callable[[Note], None],
        on_open_question: Callable[[Question], None],
        on_start_quiz: Callable[[Subject, str], None],
        on_back: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.exam_manager = exam_manager
        self.on_open_note = on_open_note
        self.on_open_question = on_open_question
        self.on_start_quiz = on_start_quiz
        self.on_back = on_back
        self._subject: Subject | None = None
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        header = QHBoxLayout()
        self.back_button = QPushButton(BACK_BUTTON, self)
        self.back_button.clicked.connect(lambda: self.on_back())
        header.addWidget(self.back_button)
        self.title_label = QLabel("", self)
        self.title_label.setStyleSheet(Styles.get_large_label_style())
        header.addWidget(self.title_label, stretch=1)
        layout.addLayout(header)

        self.description_label = QLabel("", self)
        self.description_label.setWordWrap(True)
        layout.addWidget(self.description_label)

        quiz_row = QHBoxLayout()
        quiz_row.addWidget(QLabel(QUESTION_COUNT_LABEL, self))
        self.question_count_input = QLineEdit(str(DEFAULT_QUESTION_COUNT), self)
        self.question_count_input.setMaximumWidth(80)
        quiz_row.addWidget(self.question_count_input)
        self.start_quiz_button = QPushButton(START_QUIZ_BUTTON, self)
        self.start_quiz_button.clicked.connect(self._handle_start_quiz)
        quiz_row.addWidget(self.start_quiz_button)
        quiz_row.addStretch()
        layout.addLayout(quiz_row)

        self.tabs = QTabWidget(self)
        self.note_list = QListWidget(self)
        self.note_list.itemActivated.connect(lambda item: self.on_open_note(item.data(Qt.UserRole)))
        self.question_list = QListWidget(self)
        self.question_list.itemActivated.connect(lambda item: self.on_open_question(item.data(Qt.UserRole)))
        self.tabs.addTab(self.note_list, "Notes")
        self.tabs.addTab(self.question_list, "Questions")
        layout.addWidget(self.tabs, stretch=1)

    def show_subject(self, subject: Subject, section: SubjectSection = SubjectSection.NOTES) -> None:
        self._subject = subject
        self.title_label.setText(subject.name)
        self.description_label.setText(subject.description)
        self.question_count_input.setText(str(DEFAULT_QUESTION_COUNT))
        self._load_notes(subject.id)
        self._load_questions(subject.id)
        if section is SubjectSection.QUESTIONS:
            self.tabs.setCurrentWidget(self.question_list)
        else:
            self.tabs.setCurrentWidget(self.note_list)
        if section is SubjectSection.QUIZ_SETUP:
            self.question_count_input.setFocus()
            self.question_count_input.selectAll()

    def _load_notes(self, subject_id: int) -> None:
        self.note_list.clear()
        try:
            notes = self.exam_manager.list_notes(subject_id)
        except ExamAppError as exc:
            show_error(self, "Error", str(exc))
            return
        if not notes:
            self._add_placeholder(self.note_list, NOTES_EMPTY_STATE)
        for note in notes:
            item = QListWidgetItem(note.title, self.note_list)
            item.setData(Qt.UserRole, note)

    def _load_questions(self, subject_id: int) -> None:
        self.question_list.clear()
        try:
            questions = self.exam_manager.list_questions(subject_id)
        except ExamAppError as exc:
            show_error(self, "Error", str(exc))
            return
        if not questions:
            self._add_placeholder(self.question_list, QUESTIONS_EMPTY_STATE)
        for question in questions:
            prefix = f"[{question.year}] " if question.year else ""
            text = question.question_text.strip().splitlines()[0] if question.question_text.strip() else ""
            item = QListWidgetItem(f"{prefix}{text}", self.question_list)
            item.setData(Qt.UserRole, question)

    @staticmethod
    def _add_placeholder(list_widget: QListWidget, text: str) -> None:
        item = QListWidgetItem(text, list_widget)
        item.setFlags(Qt.NoItemFlags)

    def _handle_start_quiz(self) -> None:
        if self._subject is None:
            show_error(self, "Error", "Subject ID is required")
            return
        self.on_start_quiz(self._subject, self.question_count_input.text())
