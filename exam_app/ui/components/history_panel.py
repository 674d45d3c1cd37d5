"""List of the signed-in user's completed quizzes."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtGui import QBrush, QColor
from PySide6.QtWidgets import QLabel, QTreeWidget, QTreeWidgetItem, QVBoxLayout, QWidget

from exam_app.constants.ui_constants import HISTORY_EMPTY_STATE, NAV_BUTTON_HISTORY
from exam_app.core.errors import ExamAppError
from exam_app.core.exam_manager import ExamManager
from exam_app.core.scoring import score_band, score_percentage
from exam_app.styling.color_palette import ColorPalette, Theme
from exam_app.styling.styles import Styles
from exam_app.ui.dialog_helpers import show_error


class HistoryPanel(QWidget):
    def __init__(self, exam_manager: ExamManager, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.exam_manager = exam_manager
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        title = QLabel(NAV_BUTTON_HISTORY, self)
        title.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(title)

        self.history_tree = QTreeWidget(self)
        self.history_tree.setRootIsDecorated(False)
        self.history_tree.setHeaderLabels(["Subject", "Completed", "Score", "Percentage"])
        self.history_tree.setColumnWidth(0, 260)
        layout.addWidget(self.history_tree, stretch=1)

        self.empty_label = QLabel(HISTORY_EMPTY_STATE, self)
        self.empty_label.setAlignment(Qt.AlignCenter)
        self.empty_label.setVisible(False)
        layout.addWidget(self.empty_label)

    def refresh_history(self) -> None:
        try:
            entries = self.exam_manager.list_quiz_history()
        except ExamAppError as exc:
            show_error(self, "Error", str(exc))
            return

        self.history_tree.clear()
        for entry in entries:
            percentage = score_percentage(entry.score, entry.total_questions)
            finished = entry.end_time or entry.start_time
            item = QTreeWidgetItem(
                [
                    entry.subject.name,
                    finished.strftime("%Y-%m-%d %H:%M") if finished else "",
                    f"{entry.score} / {entry.total_questions}",
                    f"{percentage}%",
                ]
            )
            color = ColorPalette.for_score_band(score_band(percentage)).get(Theme.LIGHT)
            item.setForeground(3, QBrush(QColor(color)))
            self.history_tree.addTopLevelItem(item)
        self.empty_label.setVisible(not entries)
