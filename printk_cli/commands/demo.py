"""Full-screen demonstration of icons, colors and row addressing."""

import logging
import time

import typer
from typing_extensions import Annotated

from printk.colors import Color
from printk.exceptions import PrintkError
from printk.renderer import Renderer
from printk_cli.context import get_context

logger = logging.getLogger(__name__)

COLOR_ROW = 15
PROGRESS_ROW = 22
PROGRESS_STEPS = 5


def demo_command(
    delay: Annotated[
        float | None,
        typer.Option(
            "--delay",
            "-d",
            min=0,
            help="Seconds between progress steps (default: PRINTK_DEMO_DELAY or 0.5)",
        ),
    ] = None,
) -> None:
    """Clear the screen and show icons, colors and in-place row updates."""
    ctx = get_context()
    step_delay = ctx.config.demo_delay if delay is None else delay

    try:
        run_demo(ctx.renderer, step_delay)
    except PrintkError as e:
        logger.error(f"Demo failed: {e}")
        raise typer.Exit(1)


def run_demo(renderer: Renderer, step_delay: float) -> None:
    """Draw the demo screen with renderer, pausing step_delay between updates."""
    renderer.clear_screen()

    renderer.write_line("{gear} Example")
    renderer.write_line("{arrow} ======================")
    renderer.write_line("")

    renderer.write_line("{info} Test1")
    renderer.write_line("{success} Successful operation")
    renderer.write_line("{warning} Important warning")
    renderer.write_line("{error} Critical error")
    renderer.write_line("")

    renderer.write_at_row(COLOR_ROW, "")
    renderer.write_line("")

    renderer.with_color(Color.RED).write_line("{heart} Red Color")
    renderer.with_color(Color.GREEN).write_line("{check} Green Color")

    renderer.write_line("")
    renderer.write_line("{rust} File Rust {check}")
    renderer.write_line("{python} Script Python {star}")
    renderer.write_line("{git} Commit {branch}")
    renderer.write_line("")

    renderer.write_line("{clock} Process:")
    for step in range(1, PROGRESS_STEPS + 1):
        renderer.clear_row(PROGRESS_ROW)
        renderer.write_at_row(
            PROGRESS_ROW, f"  {{arrow-right}} Processing... {step}/{PROGRESS_STEPS}"
        )
        logger.debug(f"Demo progress step {step}/{PROGRESS_STEPS}")
        time.sleep(step_delay)

    renderer.clear_row(PROGRESS_ROW)
    renderer.write_line("{success} Demonstration complete!")
    renderer.write_line("")
