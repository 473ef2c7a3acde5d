"""Print a message at an absolute terminal row."""

import logging

import typer
from typing_extensions import Annotated

from printk.exceptions import InvalidCursorError, PrintkError
from printk_cli.context import get_context

logger = logging.getLogger(__name__)


def print_y_command(
    row: Annotated[
        int,
        typer.Argument(help="Terminal row, counted from 0 at the top"),
    ],
    message: Annotated[
        list[str],
        typer.Argument(help="Message words; placeholders like {info} become icons"),
    ],
) -> None:
    """Print a message at ROW, column 1. The cursor stays after the message.

    Use '--' before a negative row, e.g. printk print-y -- -1 text.
    """
    ctx = get_context()
    text = " ".join(message)

    try:
        ctx.renderer.write_at_row(row, text)
    except InvalidCursorError as e:
        logger.error(str(e))
        raise typer.Exit(1)
    except PrintkError as e:
        logger.error(f"Print failed: {e}")
        raise typer.Exit(1)
