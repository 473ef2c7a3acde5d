"""List available icons."""

import logging

import typer
from typing_extensions import Annotated

from printk.exceptions import PrintkError
from printk_cli.context import get_context
from printk_cli.display import IconListRenderer

logger = logging.getLogger(__name__)


def icons_command(
    category: Annotated[
        str | None,
        typer.Option("--category", "-c", help="Only list one category (e.g. Status)"),
    ] = None,
) -> None:
    """List available icons grouped by category."""
    ctx = get_context()
    registry = ctx.registry
    list_renderer = IconListRenderer(ctx.renderer)

    categories = registry.categories()
    if category is not None:
        matches = {
            name: entries
            for name, entries in categories.items()
            if name.lower() == category.lower()
        }
        if not matches:
            list_renderer.render_unknown_category(category, list(categories))
            raise typer.Exit(1)
        categories = matches

    try:
        list_renderer.render(categories, total=len(registry))
    except PrintkError as e:
        logger.error(f"Listing failed: {e}")
        raise typer.Exit(1)
