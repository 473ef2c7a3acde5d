"""Help screen renderer."""

from rich.text import Text

from printk.renderer import Renderer
from printk_cli.display.console import console

EXAMPLES = [
    'printk print "{info} Hello, world! {success}"',
    'printk print-y 5 "{warning} Alert on line 5"',
    'printk print "{python} Made with Python {check}"',
]

USAGE = [
    "printk print <message>",
    "printk print-y <line> <message>",
    "printk demo",
    "printk icons",
]


class HelpRenderer:
    """Render the banner shown when printk runs without a command."""

    def __init__(self, renderer: Renderer):
        self.renderer = renderer

    def render(self, version: str) -> None:
        """Render version banner, usage and examples.

        Args:
            version: Package version for the banner.
        """
        console.print()
        console.print(f"[bold]{' ' * 21}Printk v{version}[/bold]")
        self.renderer.write_line("       {help}  Print messages with Nerd Font icons")
        console.print()

        console.print("Use:")
        for line in USAGE:
            console.print(Text(f"  {line}"))
        console.print()

        self.renderer.write_line("{star} Examples:")
        for line in EXAMPLES:
            # Shown as typed, not rendered
            console.print(Text(f"  {line}"))
        console.print()

        self.renderer.write_line(
            "{arrow} Note: unknown keys such as {not-an-icon} are printed as written"
        )
