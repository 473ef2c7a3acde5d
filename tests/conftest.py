import io
import logging

import pytest
from typer.testing import CliRunner

from printk.icons import IconRegistry
from printk.renderer import Renderer


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove PRINTK_* variables so tests start from defaults."""
    for name in (
        "PRINTK_COLOR",
        "PRINTK_ICONS",
        "PRINTK_LOG_DIR",
        "PRINTK_LOG_FILENAME",
        "PRINTK_DEMO_DELAY",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo handlers installed by setup_logging during a test."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


@pytest.fixture
def stream():
    """In-memory terminal stream."""
    return io.StringIO()


@pytest.fixture
def small_registry():
    """Registry with a few plain-character glyphs."""
    return IconRegistry.from_pairs(
        [
            ("success", "✔"),
            ("error", "✘"),
            ("heart", "♥"),
        ]
    )


@pytest.fixture
def renderer(small_registry, stream):
    """Renderer writing to the in-memory stream."""
    return Renderer(registry=small_registry, stream=stream)


@pytest.fixture
def runner():
    return CliRunner()
