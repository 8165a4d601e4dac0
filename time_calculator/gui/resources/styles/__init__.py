"""GUI styling and theme management."""

from ._variables import BORDER_RADIUS, FONT_SIZES, SPACING
from .theme import get_colors, get_stylesheet

__all__ = ["get_colors", "get_stylesheet", "SPACING", "FONT_SIZES", "BORDER_RADIUS"]
