"""
Enums used across the application.
"""

from enum import Enum


class TextAlign(str, Enum):
    """Horizontal alignment used when an item's body is displayed."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class FontSize(str, Enum):
    """Display font size for an item's body."""

    SMALL = "S"
    MEDIUM = "M"
    LARGE = "L"
    EXTRA_LARGE = "XL"
