"""Icon listing renderer."""

from rich.table import Table
from rich.text import Text

from printk.icons import IconEntry
from printk.renderer import Renderer
from printk_cli.display.console import console


class IconListRenderer:
    """Render the icon table grouped by category.

    Headings go through the printk renderer so they carry icons and the
    active color; the key/glyph rows are a Rich table.
    """

    def __init__(self, renderer: Renderer):
        self.renderer = renderer

    def render(self, categories: dict[str, list[IconEntry]], total: int) -> None:
        """Render the full listing.

        Args:
            categories: Entries grouped by category name, in display order.
            total: Number of icons in the registry.
        """
        self.renderer.write_line("{folder} Available icons:")
        self.renderer.write_line("{arrow} ==================")
        console.print()

        for category, entries in categories.items():
            self.render_category(category, entries)

        self.renderer.write_line(f"{{info}} Total: {total} available icons")

    def render_category(self, category: str, entries: list[IconEntry]) -> None:
        """Render one category heading and its key/glyph rows."""
        self.renderer.write_line(f"{{folder}} {category}:")

        table = Table(show_header=False, box=None, padding=(0, 1))
        table.add_column("Key", style="cyan")
        table.add_column("Arrow", style="dim")
        table.add_column("Glyph")

        for entry in entries:
            glyph = self.renderer.get_icon(entry.key)
            if glyph is None:
                continue
            table.add_row(Text(entry.placeholder), "→", Text(glyph))

        console.print(table)
        console.print()

    def render_unknown_category(self, category: str, known: list[str]) -> None:
        console.print(f"[red]Unknown category '{category}'[/red]")
        console.print(f"[dim]Categories: {', '.join(known)}[/dim]")
