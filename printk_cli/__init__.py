"""CLI package for printk."""

import logging
import sys

from printk.config import PrintkConfig


def setup_logging(
    verbose: bool = False, quiet: bool = False, config: PrintkConfig | None = None
) -> None:
    """Configure logging with separate formatters for file and console.

    Console logging goes to stderr so it never mixes with rendered output on
    stdout.

    Args:
        verbose: If True, set console to INFO level
        quiet: If True, set console to ERROR level only
        config: Optional PrintkConfig for log directory/filename settings
    """
    if config is None:
        config = PrintkConfig.from_env()

    # Console formatter: no timestamp, just level and message
    console_formatter = logging.Formatter("%(levelname)s: %(message)s")

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(console_formatter)

    if quiet:
        console_handler.setLevel(logging.ERROR)
    elif verbose:
        console_handler.setLevel(logging.INFO)
    else:
        console_handler.setLevel(logging.WARNING)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()
    root_logger.addHandler(console_handler)

    # File handler (with timestamp) only when a log directory is configured
    if config.log_dir is not None:
        file_formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        config.log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(config.log_dir / config.log_filename)
        file_handler.setFormatter(file_formatter)
        file_handler.setLevel(logging.DEBUG)
        root_logger.addHandler(file_handler)


def main() -> None:
    """Main entry point for the CLI."""
    from printk_cli.main import app

    app()


__all__ = ["main", "setup_logging"]
