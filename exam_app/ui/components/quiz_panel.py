"""Component for taking a timed quiz."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtWebEngineWidgets import QWebEngineView
from PySide6.QtWidgets import (
    QComboBox,
    QHBoxLayout,
    QLabel,
    QProgressBar,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from exam_app.constants.ui_constants import (
    QUIZ_EXIT_BUTTON,
    QUIZ_JUMP_ANSWERED_MARKER,
    QUIZ_JUMP_ITEM_TEMPLATE,
    QUIZ_JUMP_LABEL,
    QUIZ_NEXT_BUTTON,
    QUIZ_NO_OPTIONS,
    QUIZ_PREV_BUTTON,
    QUIZ_PROGRESS_TEMPLATE,
    QUIZ_SUBMIT_BUTTON,
    QUIZ_TIMER_TEMPLATE,
)
from exam_app.core.errors import ExamAppError
from exam_app.core.markdown_renderer import renderer
from exam_app.core.models import Question
from exam_app.core.quiz_session import QuizSessionController, QuizState
from exam_app.core.scoring import format_countdown, is_time_warning
from exam_app.styling.styles import Styles
from exam_app.ui.dialog_helpers import confirm_submit_quiz, show_error


class QuizPanel(QWidget):
    """Shows the current question of a running quiz and drives its controller."""

    def __init__(self, on_exited: Callable[[], None], parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.on_exited = on_exited
        self._controller: QuizSessionController | None = None
        self._rendered_question_id: int | None = None
        self._timed_out: bool = False
        self._font_size: int = 13
        self.option_buttons: list[QPushButton] = []
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        # Progress and countdown
        header = QHBoxLayout()
        self.progress_label = QLabel("", self)
        self.progress_label.setStyleSheet(Styles.get_large_label_style())
        header.addWidget(self.progress_label)
        header.addStretch()
        header.addWidget(QLabel(QUIZ_JUMP_LABEL, self))
        self.jump_combo = QComboBox(self)
        self.jump_combo.activated.connect(self._handle_jump)
        header.addWidget(self.jump_combo)
        self.timer_label = QLabel("", self)
        self.timer_label.setStyleSheet(Styles.get_timer_style(False))
        header.addWidget(self.timer_label)
        layout.addLayout(header)

        self.progress_bar = QProgressBar(self)
        self.progress_bar.setTextVisible(False)
        layout.addWidget(self.progress_bar)

        self.question_view = QWebEngineView(self)
        layout.addWidget(self.question_view, stretch=1)

        self.options_layout = QVBoxLayout()
        layout.addLayout(self.options_layout)
        self.no_options_label = QLabel(QUIZ_NO_OPTIONS, self)
        self.no_options_label.setAlignment(Qt.AlignCenter)
        self.no_options_label.setVisible(False)
        layout.addWidget(self.no_options_label)

        self.status_label = QLabel("", self)
        self.status_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.status_label)

        nav_row = QHBoxLayout()
        self.exit_button = QPushButton(QUIZ_EXIT_BUTTON, self)
        self.exit_button.clicked.connect(self._handle_exit)
        nav_row.addWidget(self.exit_button)
        nav_row.addStretch()
        self.prev_button = QPushButton(QUIZ_PREV_BUTTON, self)
        self.prev_button.clicked.connect(self._handle_prev)
        nav_row.addWidget(self.prev_button)
        self.next_button = QPushButton(QUIZ_NEXT_BUTTON, self)
        self.next_button.clicked.connect(self._handle_next)
        nav_row.addWidget(self.next_button)
        self.submit_button = QPushButton(QUIZ_SUBMIT_BUTTON, self)
        self.submit_button.clicked.connect(self._handle_submit)
        nav_row.addWidget(self.submit_button)
        layout.addLayout(nav_row)

    # --- Controller wiring ---

    def attach(self, controller: QuizSessionController) -> None:
        self._controller = controller
        self._rendered_question_id = None
        self._timed_out = False
        self.status_label.clear()
        self.refresh(controller)

    def detach(self) -> None:
        self._controller = None
        self._rendered_question_id = None
        self._clear_options()
        self.jump_combo.clear()

    def was_timed_out(self) -> bool:
        return self._timed_out

    def refresh(self, controller: QuizSessionController) -> None:
        """Change listener handed to the controller."""
        if controller is not self._controller:
            return
        state = controller.get_state()
        if state is QuizState.TIMED_OUT:
            self._timed_out = True
        if state not in (QuizState.ACTIVE, QuizState.SUBMITTING, QuizState.TIMED_OUT):
            return

        question = controller.get_current_question()
        if question is None:
            return
        total = controller.get_question_count()
        current = controller.get_current_index() + 1
        self.progress_label.setText(QUIZ_PROGRESS_TEMPLATE.format(current=current, total=total))
        self.progress_bar.setRange(0, total)
        self.progress_bar.setValue(current)
        self._update_jump_list(controller)

        remaining = controller.get_remaining_seconds()
        self.timer_label.setText(QUIZ_TIMER_TEMPLATE.format(time=format_countdown(remaining)))
        self.timer_label.setStyleSheet(Styles.get_timer_style(is_time_warning(remaining)))

        if question.id != self._rendered_question_id:
            self._display_question(question)

        answer = controller.get_current_answer()
        selected_key = answer.user_answer_key if answer else ""
        for button in self.option_buttons:
            selected = button.property("option_key") == selected_key
            button.setChecked(selected)
            button.setStyleSheet(Styles.get_option_button_style(selected))

        active = state is QuizState.ACTIVE
        for button in self.option_buttons:
            button.setEnabled(active)
        self.jump_combo.setEnabled(active)
        self.prev_button.setEnabled(active and not controller.is_first_question())
        self.next_button.setEnabled(active and not controller.is_last_question())
        self.submit_button.setEnabled(active)
        self.exit_button.setEnabled(active)
        self.status_label.setText("Submitting..." if state is QuizState.SUBMITTING else "")

    def show_grading_error(self, error: ExamAppError) -> None:
        self.status_label.clear()
        show_error(self, "Submission Failed", str(error))

    # --- Rendering ---

    def _display_question(self, question: Question) -> None:
        self._rendered_question_id = question.id
        body = renderer.render_fragment(question.question_text)
        self.question_view.setHtml(
            renderer.wrap_document(body, title=f"Question {question.id}", font_size=self._font_size)
        )
        self._clear_options()
        for option in question.options:
            button = QPushButton(f"{option.key}.  {option.text}", self)
            button.setCheckable(True)
            button.setProperty("option_key", option.key)
            button.clicked.connect(lambda _checked=False, key=option.key: self._handle_option(key))
            self.options_layout.addWidget(button)
            self.option_buttons.append(button)
        self.no_options_label.setVisible(not question.options)

    def _update_jump_list(self, controller: QuizSessionController) -> None:
        answered = {answer.question_id for answer in controller.get_answers() if answer.is_answered}
        labels = [
            QUIZ_JUMP_ITEM_TEMPLATE.format(
                number=number,
                marker=QUIZ_JUMP_ANSWERED_MARKER if question.id in answered else "",
            )
            for number, question in enumerate(controller.get_questions(), start=1)
        ]
        if self.jump_combo.count() != len(labels):
            self.jump_combo.clear()
            self.jump_combo.addItems(labels)
        else:
            for index, label in enumerate(labels):
                if self.jump_combo.itemText(index) != label:
                    self.jump_combo.setItemText(index, label)
        self.jump_combo.setCurrentIndex(controller.get_current_index())

    def _clear_options(self) -> None:
        for button in self.option_buttons:
            self.options_layout.removeWidget(button)
            button.deleteLater()
        self.option_buttons = []

    # --- Actions ---

    def _handle_option(self, option_key: str) -> None:
        controller = self._controller
        question = controller.get_current_question() if controller else None
        if controller is None or question is None:
            return
        self._run(lambda: controller.select_answer(question.id, option_key))

    def _handle_jump(self, index: int) -> None:
        controller = self._controller
        if controller is not None:
            self._run(lambda: controller.go_to(index))

    def _handle_prev(self) -> None:
        if self._controller is not None:
            self._run(self._controller.retreat)

    def _handle_next(self) -> None:
        if self._controller is not None:
            self._run(self._controller.advance)

    def _handle_submit(self) -> None:
        controller = self._controller
        if controller is None:
            return
        unanswered = controller.get_question_count() - controller.get_answered_count()
        if not confirm_submit_quiz(self, unanswered):
            return
        self._run(controller.submit)

    def _handle_exit(self) -> None:
        controller = self._controller
        if controller is None:
            return
        try:
            exited = controller.request_exit()
        except ExamAppError as exc:
            show_error(self, "Error", str(exc))
            return
        if exited:
            self.detach()
            self.on_exited()

    def _run(self, action: Callable[[], None]) -> None:
        try:
            action()
        except ExamAppError as exc:
            show_error(self, "Error", str(exc))
