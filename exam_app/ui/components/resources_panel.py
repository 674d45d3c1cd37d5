"""Study techniques plus shortcuts into the first exam's subjects."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QPushButton,
    QToolBox,
    QVBoxLayout,
    QWidget,
)

from exam_app.constants.ui_constants import (
    RESOURCES_DESCRIPTION,
    RESOURCES_NO_SUBJECTS,
    RESOURCES_NOTES_BUTTON,
    RESOURCES_QUESTIONS_BUTTON,
    RESOURCES_QUIZ_BUTTON,
    RESOURCES_SUBJECTS_TITLE,
    RESOURCES_TIPS_TITLE,
    RESOURCES_TITLE,
)
from exam_app.core.errors import ExamAppError
from exam_app.core.exam_manager import ExamManager
from exam_app.core.models import Subject
from exam_app.styling.styles import Styles
from exam_app.ui.components.subject_panel import SubjectSection
from exam_app.ui.dialog_helpers import show_error


class ResourcesPanel(QWidget):
    """Collapsible study tips above one row of shortcuts per subject."""

    def __init__(
        self,
        exam_manager: ExamManager,
        on_open_subject: Callable[[Subject, SubjectSection], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.exam_manager = exam_manager
        self.on_open_subject = on_open_subject
        self._subject_rows: list[QWidget] = []
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        title = QLabel(RESOURCES_TITLE, self)
        title.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(title)
        description = QLabel(RESOURCES_DESCRIPTION, self)
        description.setWordWrap(True)
        layout.addWidget(description)

        tips_title = QLabel(RESOURCES_TIPS_TITLE, self)
        tips_title.setStyleSheet(Styles.get_section_label_style())
        layout.addWidget(tips_title)
        self.tips_box = QToolBox(self)
        for tip in self.exam_manager.get_study_tips():
            content = QLabel(tip.content, self.tips_box)
            content.setWordWrap(True)
            content.setAlignment(Qt.AlignTop | Qt.AlignLeft)
            self.tips_box.addItem(content, tip.title)
        layout.addWidget(self.tips_box, stretch=1)

        subjects_title = QLabel(RESOURCES_SUBJECTS_TITLE, self)
        subjects_title.setStyleSheet(Styles.get_section_label_style())
        layout.addWidget(subjects_title)
        self.subjects_layout = QVBoxLayout()
        layout.addLayout(self.subjects_layout)
        self.no_subjects_label = QLabel(RESOURCES_NO_SUBJECTS, self)
        self.no_subjects_label.setAlignment(Qt.AlignCenter)
        self.no_subjects_label.setVisible(False)
        layout.addWidget(self.no_subjects_label)
        layout.addStretch()

    def refresh_subjects(self) -> None:
        try:
            subjects = self.exam_manager.list_resource_subjects()
        except ExamAppError as exc:
            show_error(self, "Error", str(exc))
            return

        for row in self._subject_rows:
            self.subjects_layout.removeWidget(row)
            row.deleteLater()
        self._subject_rows = []
        for subject in subjects:
            row = self._build_subject_row(subject)
            self.subjects_layout.addWidget(row)
            self._subject_rows.append(row)
        self.no_subjects_label.setVisible(not subjects)

    def _build_subject_row(self, subject: Subject) -> QWidget:
        row = QWidget(self)
        row_layout = QHBoxLayout()
        row_layout.setContentsMargins(0, 0, 0, 0)
        row.setLayout(row_layout)
        name = QLabel(subject.name, row)
        name.setToolTip(subject.description)
        row_layout.addWidget(name, stretch=1)
        for text, section in (
            (RESOURCES_NOTES_BUTTON, SubjectSection.NOTES),
            (RESOURCES_QUESTIONS_BUTTON, SubjectSection.QUESTIONS),
            (RESOURCES_QUIZ_BUTTON, SubjectSection.QUIZ_SETUP),
        ):
            button = QPushButton(text, row)
            button.clicked.connect(lambda _checked=False, s=section: self.on_open_subject(subject, s))
            row_layout.addWidget(button)
        return row
