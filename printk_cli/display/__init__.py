"""Display module for CLI output.

This module provides renderers for the CLI screens:
- IconListRenderer: Categorised icon listing
- HelpRenderer: Version banner, usage and examples

It also provides:
- console: Shared Rich console instance
"""

from printk_cli.display.console import console
from printk_cli.display.help_renderer import HelpRenderer
from printk_cli.display.icon_renderer import IconListRenderer

__all__ = [
    # Console
    "console",
    # Renderers
    "HelpRenderer",
    "IconListRenderer",
]
