"""Color palette for ExamPrepQt supporting light and dark themes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from exam_app.core.scoring import OptionHighlight, ScoreBand


class Theme(Enum):
    """Application theme options."""
    LIGHT = auto()
    DARK = auto()


@dataclass(frozen=True)
class ThemeColors:
    """Color definitions for a specific theme."""
    light: str
    dark: str

    def get(self, theme: Theme) -> str:
        """Get color value for the specified theme."""
        return self.light if theme == Theme.LIGHT else self.dark


class ColorPalette:
    """Centralized color definitions for the application."""

    TEXT_PRIMARY = ThemeColors(light="#11181C", dark="#ECEDEE")
    TEXT_SECONDARY = ThemeColors(light="#687076", dark="#9BA1A6")

    BACKGROUND_PRIMARY = ThemeColors(light="#FFFFFF", dark="#1A1A1A")
    SURFACE_BACKGROUND = ThemeColors(light="#F8F9FA", dark="#242424")
    SURFACE_PRESSED = ThemeColors(light="#F0F0F0", dark="#2A2A2A")

    BORDER_PRIMARY = ThemeColors(light="#E0E0E0", dark="#333333")

    TINT = ThemeColors(light="#0A7EA4", dark="#60CDFF")
    TINT_TEXT = ThemeColors(light="#FFFFFF", dark="#000000")

    # Status colors
    SUCCESS = ThemeColors(light="#4CAF50", dark="#66BB6A")
    WARNING = ThemeColors(light="#FF9800", dark="#FFB74D")
    ERROR = ThemeColors(light="#F44336", dark="#EF5350")

    # Review tints for graded options
    CORRECT_OPTION_BG = ThemeColors(light="#E8F5E9", dark="#1F3321")
    WRONG_OPTION_BG = ThemeColors(light="#FDECEA", dark="#3A1F1E")

    @classmethod
    def for_score_band(cls, band: ScoreBand) -> ThemeColors:
        if band is ScoreBand.GOOD:
            return cls.SUCCESS
        if band is ScoreBand.AVERAGE:
            return cls.WARNING
        return cls.ERROR

    @classmethod
    def for_option_highlight(cls, highlight: OptionHighlight) -> ThemeColors | None:
        if highlight is OptionHighlight.CORRECT:
            return cls.CORRECT_OPTION_BG
        if highlight is OptionHighlight.SELECTED_WRONG:
            return cls.WRONG_OPTION_BG
        return None
