"""One-shot helpers that build a default renderer per call."""

from printk.colors import Color
from printk.renderer import Renderer


def printk(message: str) -> None:
    """Write message at the current cursor position with icons substituted."""
    Renderer().write(message)


def printk_at_row(row: int, message: str) -> None:
    """Write message at (row, column 1)."""
    Renderer().write_at_row(row, message)


def printk_color(color: Color, message: str) -> None:
    """Write message tinted with color."""
    Renderer().with_color(color).write(message)
