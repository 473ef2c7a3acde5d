"""Print a message with icons at the current cursor position."""

import logging

import typer
from typing_extensions import Annotated

from printk.exceptions import PrintkError
from printk_cli.context import get_context

logger = logging.getLogger(__name__)


def print_command(
    message: Annotated[
        list[str],
        typer.Argument(help="Message words; placeholders like {info} become icons"),
    ],
) -> None:
    """Print a message, replacing {key} placeholders with icons."""
    ctx = get_context()
    renderer = ctx.renderer
    text = " ".join(message)

    unknown = renderer.unknown_placeholders(text)
    if unknown:
        logger.debug(f"Unknown icon keys left as written: {', '.join(unknown)}")

    try:
        renderer.write_line(text)
    except PrintkError as e:
        logger.error(f"Print failed: {e}")
        raise typer.Exit(1)
