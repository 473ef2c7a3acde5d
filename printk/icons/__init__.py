"""Icon table and registry."""

from printk.icons.registry import (
    KEY_PATTERN,
    PLACEHOLDER_PATTERN,
    IconEntry,
    IconRegistry,
    default_registry,
)

__all__ = [
    "KEY_PATTERN",
    "PLACEHOLDER_PATTERN",
    "IconEntry",
    "IconRegistry",
    "default_registry",
]
