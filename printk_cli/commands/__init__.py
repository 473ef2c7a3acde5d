"""CLI commands package."""

from printk_cli.commands.demo import demo_command
from printk_cli.commands.icons import icons_command
from printk_cli.commands.print import print_command
from printk_cli.commands.print_y import print_y_command

__all__ = [
    "demo_command",
    "icons_command",
    "print_command",
    "print_y_command",
]
