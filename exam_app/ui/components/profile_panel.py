"""Signed-in account details with a logout button."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QFormLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from exam_app.constants.ui_constants import (
    NAV_BUTTON_LOGOUT,
    PROFILE_EMAIL_LABEL,
    PROFILE_NAME_LABEL,
    PROFILE_TITLE,
)
from exam_app.core.models import User
from exam_app.styling.styles import Styles


class ProfilePanel(QWidget):
    def __init__(self, on_logout: Callable[[], None], parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.on_logout = on_logout
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)
        layout.addStretch()

        title = QLabel(PROFILE_TITLE, self)
        title.setAlignment(Qt.AlignCenter)
        title.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(title)

        form = QFormLayout()
        self.name_value = QLabel("", self)
        self.email_value = QLabel("", self)
        form.addRow(f"{PROFILE_NAME_LABEL}:", self.name_value)
        form.addRow(f"{PROFILE_EMAIL_LABEL}:", self.email_value)
        layout.addLayout(form)

        self.logout_button = QPushButton(NAV_BUTTON_LOGOUT, self)
        self.logout_button.clicked.connect(lambda: self.on_logout())
        layout.addWidget(self.logout_button)
        layout.addStretch()

    def show_user(self, user: User | None) -> None:
        self.name_value.setText(user.name if user else "")
        self.email_value.setText(user.email if user else "")
