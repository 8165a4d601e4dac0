"""Stylesheet generation for the calculator window.

The selected ColorScheme supplies the accent used by operator keys and
highlights; light and dark palettes supply everything else. There is no
global theme object: the window passes the scheme it was given.
"""

import re
from typing import Literal

from time_calculator.models import ColorScheme

from ._variables import get_variable_dict

PaletteMode = Literal["light", "dark"]

LIGHT_COLORS = {
    "background": "#F2F2F7",
    "surface": "#FFFFFF",
    "display_text": "#000000",
    "trace_text": "#6B7280",
    "number_key": "#E5E5EA",
    "function_key": "#D1D1D6",
    "key_text": "#000000",
    "border": "#E5E7EB",
}

DARK_COLORS = {
    "background": "#000000",
    "surface": "#1C1C1E",
    "display_text": "#FFFFFF",
    "trace_text": "#9CA3AF",
    "number_key": "#3A3A3C",
    "function_key": "#636366",
    "key_text": "#FFFFFF",
    "border": "#38383A",
}

STYLESHEET_TEMPLATE = """
QWidget {
    background-color: ${background};
    color: ${display_text};
    font-size: ${font-size-body}px;
}
QLabel#displayLabel {
    font-size: ${font-size-display}px;
    font-weight: 300;
}
QLabel#traceLabel {
    color: ${trace_text};
    font-size: ${font-size-trace}px;
}
QPushButton {
    border: none;
    border-radius: ${border-radius-key}px;
    font-size: ${font-size-key}px;
    min-height: 56px;
    color: ${key_text};
}
QPushButton#numberKey {
    background-color: ${number_key};
}
QPushButton#functionKey {
    background-color: ${function_key};
}
QPushButton#operatorKey {
    background-color: ${accent};
    color: #FFFFFF;
}
QPushButton:pressed {
    border: 2px solid ${accent};
}
QListWidget {
    background-color: ${surface};
    border: 1px solid ${border};
    border-radius: ${border-radius-default}px;
    padding: ${spacing-xxs}px;
}
QListWidget::item:selected {
    background-color: ${accent};
    color: #FFFFFF;
}
"""


def get_colors(scheme: ColorScheme, mode: PaletteMode = "light") -> dict[str, str]:
    """Get the full color palette for a scheme.

    Args:
        scheme: Accent scheme selected by the user
        mode: Light or dark base palette

    Returns:
        Dictionary of color values, including ``accent``
    """
    base = DARK_COLORS if mode == "dark" else LIGHT_COLORS
    return {**base, "accent": scheme.accent}


def get_stylesheet(scheme: ColorScheme, mode: PaletteMode = "light") -> str:
    """Build the complete stylesheet for a scheme.

    Args:
        scheme: Accent scheme selected by the user
        mode: Light or dark base palette

    Returns:
        Stylesheet text with every ``${...}`` placeholder substituted
    """
    return _substitute_variables(STYLESHEET_TEMPLATE, get_colors(scheme, mode))


def _substitute_variables(template: str, colors: dict[str, str]) -> str:
    """Substitute ``${name}`` placeholders with colors or design variables.

    Unknown placeholders are left as-is.
    """
    variables = {**get_variable_dict(), **colors}

    def replace_var(match: re.Match) -> str:
        var_name = match.group(1)
        return str(variables.get(var_name, match.group(0)))

    return re.sub(r"\$\{([a-z0-9_-]+)\}", replace_var, template)
