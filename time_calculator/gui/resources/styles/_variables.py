"""Design variables for consistent calculator styling.

Tokens are frozen dataclasses so widgets and the generated stylesheet agree:

    from time_calculator.gui.resources.styles._variables import SPACING, FONT_SIZES

    layout.setSpacing(SPACING.md)
    font.setPixelSize(FONT_SIZES.display)

In the stylesheet template the same values appear as ``${spacing-md}``,
``${font-size-display}`` and ``${border-radius-key}``.
"""

from dataclasses import dataclass, fields


@dataclass(frozen=True)
class Spacing:
    """Spacing values based on a 4px grid."""

    xxs: int = 4
    xs: int = 8
    sm: int = 12
    md: int = 16
    lg: int = 24


@dataclass(frozen=True)
class FontSizes:
    """Font size values in pixels."""

    display: int = 56  # Current value readout
    trace: int = 18  # Running expression
    key: int = 24  # Keypad buttons
    body: int = 14
    caption: int = 12


@dataclass(frozen=True)
class BorderRadius:
    """Border radius values in pixels."""

    small: int = 4
    default: int = 8
    key: int = 32  # Round keypad buttons


SPACING = Spacing()
FONT_SIZES = FontSizes()
BORDER_RADIUS = BorderRadius()


def get_variable_dict() -> dict[str, str]:
    """Get all design variables as a dictionary for stylesheet substitution.

    Variable names follow the pattern ``category-name`` (e.g. ``spacing-md``,
    ``font-size-display``).

    Returns:
        Dictionary mapping variable names to their pixel values (as strings)
    """
    variables = {}
    for prefix, tokens in (
        ("spacing", SPACING),
        ("font-size", FONT_SIZES),
        ("border-radius", BORDER_RADIUS),
    ):
        for token in fields(tokens):
            name = token.name.replace("_", "-")
            variables[f"{prefix}-{name}"] = str(getattr(tokens, token.name))
    return variables
