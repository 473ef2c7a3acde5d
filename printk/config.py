"""Configuration for printk."""

import logging
import os
from pathlib import Path

from pydantic import BaseModel, Field

from printk.colors import Color
from printk.renderer import RendererConfig

try:
    from dotenv import load_dotenv
except ImportError:
    load_dotenv = None

logger = logging.getLogger(__name__)

_FALSE_VALUES = {"0", "false", "no", "off"}


class PrintkConfig(BaseModel):
    """printk configuration with Pydantic validation."""

    # Rendering
    default_color: Color | None = None
    icons_enabled: bool = Field(default=True)

    # Logging
    log_dir: Path | None = None
    log_filename: str = Field(default="printk.log")

    # Demo
    demo_delay: float = Field(default=0.5, ge=0)

    def renderer_config(self) -> RendererConfig:
        """Renderer settings derived from this configuration."""
        return RendererConfig(
            active_color=self.default_color, icons_enabled=self.icons_enabled
        )

    @classmethod
    def from_env(cls) -> "PrintkConfig":
        """Load configuration from environment variables and .env file."""
        # Load .env file if python-dotenv is available
        if load_dotenv is not None:
            load_dotenv()

        config_dict = {}

        # Rendering
        if "PRINTK_COLOR" in os.environ:
            try:
                config_dict["default_color"] = Color.parse(os.environ["PRINTK_COLOR"])
            except ValueError:
                logger.warning(
                    f"Ignoring invalid PRINTK_COLOR: {os.environ['PRINTK_COLOR']}"
                )
        if "PRINTK_ICONS" in os.environ:
            config_dict["icons_enabled"] = (
                os.environ["PRINTK_ICONS"].strip().lower() not in _FALSE_VALUES
            )

        # Logging
        if "PRINTK_LOG_DIR" in os.environ:
            config_dict["log_dir"] = Path(os.environ["PRINTK_LOG_DIR"])
        if "PRINTK_LOG_FILENAME" in os.environ:
            config_dict["log_filename"] = os.environ["PRINTK_LOG_FILENAME"]

        # Demo
        if "PRINTK_DEMO_DELAY" in os.environ:
            try:
                delay = float(os.environ["PRINTK_DEMO_DELAY"])
                if delay >= 0:
                    config_dict["demo_delay"] = delay
            except ValueError:
                pass  # Keep default if invalid

        return cls(**config_dict)
