"""Exam list with the subjects of the selected exam."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QVBoxLayout,
    QWidget,
)

from exam_app.constants.ui_constants import EXAMS_EMPTY_STATE, SUBJECTS_EMPTY_STATE
from exam_app.core.errors import ExamAppError
from exam_app.core.exam_manager import ExamManager
from exam_app.core.models import Exam, Subject
from exam_app.ui.dialog_helpers import show_error


class BrowsePanel(QWidget):
    """Pick an exam on the left, open one of its subjects on the right."""

    def __init__(
        self,
        exam_manager: ExamManager,
        on_open_subject: Callable[[Subject], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.exam_manager = exam_manager
        self.on_open_subject = on_open_subject
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QHBoxLayout()
        self.setLayout(layout)

        exam_column = QVBoxLayout()
        exam_column.addWidget(QLabel("Exams", self))
        self.exam_list = QListWidget(self)
        self.exam_list.currentItemChanged.connect(self._handle_exam_selected)
        exam_column.addWidget(self.exam_list, stretch=1)
        self.exam_empty_label = QLabel(EXAMS_EMPTY_STATE, self)
        self.exam_empty_label.setAlignment(Qt.AlignCenter)
        self.exam_empty_label.setVisible(False)
        exam_column.addWidget(self.exam_empty_label)
        layout.addLayout(exam_column, stretch=1)

        subject_column = QVBoxLayout()
        subject_column.addWidget(QLabel("Subjects (double-click to open)", self))
        self.subject_list = QListWidget(self)
        self.subject_list.itemActivated.connect(self._handle_subject_activated)
        subject_column.addWidget(self.subject_list, stretch=1)
        self.subject_empty_label = QLabel(SUBJECTS_EMPTY_STATE, self)
        self.subject_empty_label.setAlignment(Qt.AlignCenter)
        self.subject_empty_label.setVisible(False)
        subject_column.addWidget(self.subject_empty_label)
        layout.addLayout(subject_column, stretch=2)

    def refresh_exams(self) -> None:
        try:
            exams = self.exam_manager.list_exams()
        except ExamAppError as exc:
            show_error(self, "Error", str(exc))
            return
        self.exam_list.clear()
        self.subject_list.clear()
        for exam in exams:
            label = exam.name if not exam.description else f"{exam.name}: {exam.description}"
            item = QListWidgetItem(label, self.exam_list)
            item.setData(Qt.UserRole, exam)
        self.exam_empty_label.setVisible(not exams)
        self.subject_empty_label.setVisible(False)

    def select_exam(self, exam_id: int) -> None:
        for row in range(self.exam_list.count()):
            item = self.exam_list.item(row)
            if item.data(Qt.UserRole).id == exam_id:
                self.exam_list.setCurrentItem(item)
                return

    def _handle_exam_selected(self, current: QListWidgetItem | None, _previous: QListWidgetItem | None) -> None:
        self.subject_list.clear()
        if current is None:
            return
        exam: Exam = current.data(Qt.UserRole)
        try:
            subjects = self.exam_manager.list_subjects(exam.id)
        except ExamAppError as exc:
            show_error(self, "Error", str(exc))
            return
        for subject in subjects:
            item = QListWidgetItem(subject.name, self.subject_list)
            item.setToolTip(subject.description)
            item.setData(Qt.UserRole, subject)
        self.subject_empty_label.setVisible(not subjects)

    def _handle_subject_activated(self, item: QListWidgetItem) -> None:
        self.on_open_subject(item.data(Qt.UserRole))
