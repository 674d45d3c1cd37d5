"""Sign-in and registration form."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from exam_app.constants.ui_constants import (
    LOGIN_BUTTON,
    LOGIN_MISSING_FIELDS,
    LOGIN_TITLE,
    REGISTER_BUTTON,
)
from exam_app.core.errors import ExamAppError
from exam_app.core.exam_manager import ExamManager
from exam_app.core.models import User
from exam_app.styling.styles import Styles
from exam_app.ui.dialog_helpers import show_error, show_warning


class LoginPanel(QWidget):
    """Collects credentials and signs the user in through the exam manager."""

    def __init__(
        self,
        exam_manager: ExamManager,
        on_authenticated: Callable[[User], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.exam_manager = exam_manager
        self.on_authenticated = on_authenticated
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)
        layout.addStretch()

        title = QLabel(LOGIN_TITLE, self)
        title.setAlignment(Qt.AlignCenter)
        title.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(title)

        form = QFormLayout()
        self.name_input = QLineEdit(self)
        self.name_input.setPlaceholderText("Only needed to register")
        self.email_input = QLineEdit(self)
        self.email_input.setPlaceholderText("you@example.com")
        self.password_input = QLineEdit(self)
        self.password_input.setEchoMode(QLineEdit.Password)
        self.password_input.returnPressed.connect(self._handle_login)
        form.addRow("Name:", self.name_input)
        form.addRow("Email:", self.email_input)
        form.addRow("Password:", self.password_input)
        layout.addLayout(form)

        button_row = QHBoxLayout()
        self.login_button = QPushButton(LOGIN_BUTTON, self)
        self.login_button.clicked.connect(self._handle_login)
        button_row.addWidget(self.login_button)
        self.register_button = QPushButton(REGISTER_BUTTON, self)
        self.register_button.clicked.connect(self._handle_register)
        button_row.addWidget(self.register_button)
        layout.addLayout(button_row)

        layout.addStretch()

    def _credentials(self) -> tuple[str, str] | None:
        email = self.email_input.text().strip()
        password = self.password_input.text()
        if not email or not password:
            show_warning(self, "Error", LOGIN_MISSING_FIELDS)
            return None
        return email, password

    def _handle_login(self) -> None:
        credentials = self._credentials()
        if credentials is None:
            return
        try:
            user = self.exam_manager.login(*credentials)
        except ExamAppError as exc:
            show_error(self, "Login Failed", str(exc))
            return
        self.reset_state()
        self.on_authenticated(user)

    def _handle_register(self) -> None:
        credentials = self._credentials()
        if credentials is None:
            return
        try:
            user = self.exam_manager.register(self.name_input.text(), *credentials)
        except ExamAppError as exc:
            show_error(self, "Registration Failed", str(exc))
            return
        self.reset_state()
        self.on_authenticated(user)

    def reset_state(self) -> None:
        self.password_input.clear()
