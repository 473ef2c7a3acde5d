"""Typer application and command routing."""

import logging

import typer
from typing_extensions import Annotated

from printk import __version__
from printk.colors import Color
from printk.config import PrintkConfig
from printk_cli import setup_logging
from printk_cli.commands import (
    demo_command,
    icons_command,
    print_command,
    print_y_command,
)
from printk_cli.context import CLIContext, set_context
from printk_cli.display import HelpRenderer

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="printk",
    help="Print terminal messages with Nerd Font icons.",
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"printk {__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show info logging on stderr")
    ] = False,
    quiet: Annotated[
        bool, typer.Option("--quiet", "-q", help="Only log errors")
    ] = False,
    color: Annotated[
        Color | None,
        typer.Option(
            "--color", "-c", case_sensitive=False, help="Foreground color for messages"
        ),
    ] = None,
    no_icons: Annotated[
        bool, typer.Option("--no-icons", help="Print placeholders as written")
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = None,
) -> None:
    """Print terminal messages with Nerd Font icons."""
    config = PrintkConfig.from_env()
    setup_logging(verbose=verbose, quiet=quiet, config=config)

    cli_ctx = CLIContext(
        verbose=verbose, quiet=quiet, color=color, no_icons=no_icons, config=config
    )
    set_context(cli_ctx)

    if ctx.invoked_subcommand is None:
        HelpRenderer(cli_ctx.renderer).render(__version__)


# Register commands
app.command(name="print")(print_command)
app.command(name="print-y")(print_y_command)
app.command(name="demo")(demo_command)
app.command(name="icons")(icons_command)


if __name__ == "__main__":
    app()
