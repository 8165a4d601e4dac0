"""Color schemes and history color tags."""

from enum import Enum


class ColorScheme(Enum):
    """Selectable accent scheme for the calculator.

    Each member maps to ``(display name, accent hex)``.
    """

    ORANGE = ("Orange", "#FF9500")
    BLUE = ("Blue", "#007AFF")
    RED = ("Red", "#FF3B30")

    @property
    def display_name(self) -> str:
        return self.value[0]

    @property
    def accent(self) -> str:
        return self.value[1]

    @classmethod
    def from_name(cls, name: str | None) -> "ColorScheme | None":
        """Look up a scheme by display or member name, case-insensitively."""
        if not name:
            return None
        wanted = name.strip().lower()
        for scheme in cls:
            if scheme.display_name.lower() == wanted:
                return scheme
        return None


class ColorTag(str, Enum):
    """Color a history entry can be tagged with."""

    BLUE = "blue"
    RED = "red"
    ORANGE = "orange"
    PURPLE = "purple"
    TEAL = "teal"
    GREEN = "green"
    MAGENTA = "magenta"


TAG_COLORS = {
    ColorTag.BLUE: "#007AFF",
    ColorTag.RED: "#FF3B30",
    ColorTag.ORANGE: "#FF9500",
    ColorTag.PURPLE: "#AF52DE",
    ColorTag.TEAL: "#30B0C7",
    ColorTag.GREEN: "#34C759",
    ColorTag.MAGENTA: "#FF0080",
}


def resolve_entry_color(color_tag: str, scheme: ColorScheme) -> str:
    """Resolve the hex color used to draw a history entry.

    A tag naming the active scheme uses the scheme accent, a known tag uses its
    own color, and anything else falls back to the scheme accent.

    Args:
        color_tag: Tag stored on the entry
        scheme: Currently selected scheme

    Returns:
        Hex color string
    """
    tag = color_tag.strip().lower()
    if tag == scheme.display_name.lower():
        return scheme.accent
    try:
        return TAG_COLORS[ColorTag(tag)]
    except ValueError:
        return scheme.accent
