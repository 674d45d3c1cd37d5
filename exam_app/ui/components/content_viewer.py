"""Read-only view of a note or a single question."""

from __future__ import annotations

from typing import Callable

from PySide6.QtWebEngineWidgets import QWebEngineView
from PySide6.QtWidgets import QCheckBox, QHBoxLayout, QPushButton, QVBoxLayout, QWidget

from exam_app.constants.ui_constants import BACK_BUTTON
from exam_app.core.markdown_renderer import renderer
from exam_app.core.models import Note, Question


class ContentViewer(QWidget):
    """Renders markdown notes and questions; questions can reveal their answer."""

    def __init__(self, on_back: Callable[[], None], parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.on_back = on_back
        self._question: Question | None = None
        self._font_size: int = 12
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        header = QHBoxLayout()
        self.back_button = QPushButton(BACK_BUTTON, self)
        self.back_button.clicked.connect(lambda: self.on_back())
        header.addWidget(self.back_button)
        header.addStretch()
        self.show_answer_checkbox = QCheckBox("Show answer and explanation", self)
        self.show_answer_checkbox.toggled.connect(self._render_question)
        header.addWidget(self.show_answer_checkbox)
        layout.addLayout(header)

        self.view = QWebEngineView(self)
        layout.addWidget(self.view, stretch=1)

    def show_note(self, note: Note) -> None:
        self._question = None
        self.show_answer_checkbox.setVisible(False)
        self.view.setHtml(renderer.render_note(note, font_size=self._font_size))

    def show_question(self, question: Question) -> None:
        self._question = question
        self.show_answer_checkbox.setVisible(True)
        self.show_answer_checkbox.setChecked(False)
        self._render_question()

    def _render_question(self) -> None:
        if self._question is None:
            return
        html = renderer.render_question(
            self._question,
            font_size=self._font_size,
            show_answer=self.show_answer_checkbox.isChecked(),
        )
        self.view.setHtml(html)
