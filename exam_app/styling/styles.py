"""Centralized Qt stylesheets built from the current theme."""

from .color_palette import ColorPalette, Theme

class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.LIGHT) -> str:
        return f"""
            QMainWindow, QWidget {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                font-family: 'Segoe UI', 'Roboto', sans-serif;
                font-size: 14px;
            }}
            QPushButton {{
                background-color: {ColorPalette.SURFACE_BACKGROUND.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 4px;
                padding: 6px 12px;
            }}
            QPushButton:hover {{
                background-color: {ColorPalette.SURFACE_PRESSED.get(theme)};
            }}
            QPushButton:checked {{
                background-color: {ColorPalette.TINT.get(theme)};
                color: {ColorPalette.TINT_TEXT.get(theme)};
                border: 1px solid {ColorPalette.TINT.get(theme)};
            }}
            QPushButton:disabled {{
                color: {ColorPalette.TEXT_SECONDARY.get(theme)};
            }}
            QLineEdit, QSpinBox {{
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 4px;
                padding: 4px;
            }}
            QListWidget, QTreeWidget {{
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 4px;
            }}
            QProgressBar::chunk {{
                background-color: {ColorPalette.TINT.get(theme)};
            }}
        """

    @staticmethod
    def get_large_label_style() -> str:
        return "font-size: 16pt; font-weight: bold;"

    @staticmethod
    def get_section_label_style() -> str:
        return "font-size: 12pt; font-weight: bold; margin-top: 8px;"

    @staticmethod
    def get_timer_style(warning: bool, theme: Theme = Theme.LIGHT) -> str:
        if warning:
            return f"font-size: 14pt; font-weight: bold; color: {ColorPalette.ERROR.get(theme)};"
        return "font-size: 14pt; font-weight: bold;"

    @staticmethod
    def get_option_button_style(selected: bool, theme: Theme = Theme.LIGHT) -> str:
        border = ColorPalette.TINT.get(theme) if selected else ColorPalette.BORDER_PRIMARY.get(theme)
        background = ColorPalette.SURFACE_PRESSED.get(theme) if selected else ColorPalette.SURFACE_BACKGROUND.get(theme)
        width = 2 if selected else 1
        return (
            f"QPushButton {{ text-align: left; padding: 10px; border-radius: 6px; "
            f"border: {width}px solid {border}; background-color: {background}; }}"
        )

    @staticmethod
    def get_score_style(color: str) -> str:
        return f"font-size: 28pt; font-weight: bold; color: {color};"
