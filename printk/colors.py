"""Foreground colors and tinting."""

from enum import Enum

from rich.color import ColorSystem
from rich.style import Style


class Color(str, Enum):
    """Standard terminal foreground colors.

    Values are rich color names, so each member maps to a plain SGR code
    (30-37, 90-97).
    """

    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    WHITE = "white"
    BRIGHT_BLACK = "bright_black"
    BRIGHT_RED = "bright_red"
    BRIGHT_GREEN = "bright_green"
    BRIGHT_YELLOW = "bright_yellow"
    BRIGHT_BLUE = "bright_blue"
    BRIGHT_MAGENTA = "bright_magenta"
    BRIGHT_CYAN = "bright_cyan"
    BRIGHT_WHITE = "bright_white"

    @classmethod
    def parse(cls, value: str) -> "Color":
        """Parse a color name, accepting dashes and any case ("Bright-Red")."""
        normalized = value.strip().lower().replace("-", "_")
        try:
            return cls(normalized)
        except ValueError:
            raise ValueError(f"Unknown color: {value}") from None


def tint(text: str, color: Color | None) -> str:
    """Wrap text in the set/reset codes for a foreground color.

    Args:
        text: Text to color.
        color: Foreground color, or None to leave the text untouched.

    Returns:
        The text, wrapped in ``ESC[<code>m`` ... ``ESC[0m`` when a color is given.
    """
    if color is None:
        return text
    return Style(color=color.value).render(text, color_system=ColorSystem.STANDARD)
