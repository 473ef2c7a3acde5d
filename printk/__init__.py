"""printk: terminal messages with Nerd Font icon placeholders.

Placeholders such as ``{info}`` or ``{success}`` are replaced with glyphs,
the result can be tinted with one foreground color, and output can be placed
at an absolute terminal row.
"""

from printk.colors import Color, tint
from printk.exceptions import (
    InvalidCursorError,
    InvalidIconTableError,
    PrintkError,
    TerminalIOError,
)
from printk.icons import IconEntry, IconRegistry, default_registry
from printk.renderer import Renderer, RendererConfig, placeholders
from printk.shortcuts import printk, printk_at_row, printk_color

__version__ = "0.1.0"

__all__ = [
    # Rendering
    "Renderer",
    "RendererConfig",
    "placeholders",
    # Icons
    "IconEntry",
    "IconRegistry",
    "default_registry",
    # Colors
    "Color",
    "tint",
    # Shortcuts
    "printk",
    "printk_at_row",
    "printk_color",
    # Exceptions
    "PrintkError",
    "InvalidCursorError",
    "InvalidIconTableError",
    "TerminalIOError",
]
