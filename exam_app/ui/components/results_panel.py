"""Score summary and per-question review after grading."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtGui import QBrush, QColor
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QPushButton,
    QTreeWidget,
    QTreeWidgetItem,
    QVBoxLayout,
    QWidget,
)

from exam_app.constants.ui_constants import (
    RESULT_CORRECT,
    RESULT_INCORRECT,
    RESULTS_ANOTHER_QUIZ,
    RESULTS_GO_HOME,
    RESULTS_TITLE,
)
from exam_app.core.models import GradeResult, QuestionResult
from exam_app.core.scoring import option_highlight, score_band, score_percentage
from exam_app.styling.color_palette import ColorPalette, Theme
from exam_app.styling.styles import Styles


class ResultsPanel(QWidget):
    """Shows the graded quiz; each question expands to its options and explanation."""

    def __init__(
        self,
        on_go_home: Callable[[], None],
        on_another_quiz: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.on_go_home = on_go_home
        self.on_another_quiz = on_another_quiz
        self._theme = Theme.LIGHT
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        title = QLabel(RESULTS_TITLE, self)
        title.setAlignment(Qt.AlignCenter)
        title.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(title)

        self.score_label = QLabel("", self)
        self.score_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.score_label)

        self.percentage_label = QLabel("", self)
        self.percentage_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.percentage_label)

        self.review_tree = QTreeWidget(self)
        self.review_tree.setHeaderLabels(["Question", "Your answer", "Result"])
        self.review_tree.setColumnWidth(0, 420)
        layout.addWidget(self.review_tree, stretch=1)

        button_row = QHBoxLayout()
        button_row.addStretch()
        self.home_button = QPushButton(RESULTS_GO_HOME, self)
        self.home_button.clicked.connect(lambda: self.on_go_home())
        button_row.addWidget(self.home_button)
        self.another_button = QPushButton(RESULTS_ANOTHER_QUIZ, self)
        self.another_button.clicked.connect(lambda: self.on_another_quiz())
        button_row.addWidget(self.another_button)
        layout.addLayout(button_row)

    def show_result(self, result: GradeResult) -> None:
        percentage = score_percentage(result.score, result.total_questions)
        color = ColorPalette.for_score_band(score_band(percentage)).get(self._theme)
        self.score_label.setText(f"{result.score} / {result.total_questions}")
        self.score_label.setStyleSheet(Styles.get_score_style(color))
        self.percentage_label.setText(f"{percentage}%")

        self.review_tree.clear()
        for index, question_result in enumerate(result.results, start=1):
            self.review_tree.addTopLevelItem(self._build_item(index, question_result))

    def _build_item(self, index: int, question_result: QuestionResult) -> QTreeWidgetItem:
        question = question_result.question
        prompt = question.question_text.strip().splitlines()[0] if question.question_text.strip() else ""
        item = QTreeWidgetItem(
            [
                f"{index}. {prompt}",
                question_result.user_answer_key or "(no answer)",
                RESULT_CORRECT if question_result.is_correct else RESULT_INCORRECT,
            ]
        )
        status_color = ColorPalette.SUCCESS if question_result.is_correct else ColorPalette.ERROR
        item.setForeground(2, QBrush(QColor(status_color.get(self._theme))))

        for option in question.options:
            child = QTreeWidgetItem([f"{option.key}. {option.text}", "", ""])
            highlight = option_highlight(option.key, question_result.user_answer_key, question.correct_option_key)
            tint = ColorPalette.for_option_highlight(highlight)
            if tint is not None:
                for column in range(3):
                    child.setBackground(column, QBrush(QColor(tint.get(self._theme))))
            if option.key == question.correct_option_key:
                child.setText(2, "Correct answer")
            elif option.key == question_result.user_answer_key:
                child.setText(1, "Your pick")
            item.addChild(child)

        if question.explanation_text:
            explanation = QTreeWidgetItem([f"Explanation: {question.explanation_text}", "", ""])
            explanation.setFirstColumnSpanned(True)
            item.addChild(explanation)
        return item
