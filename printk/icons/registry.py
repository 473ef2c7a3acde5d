"""Icon registry: ordered, read-only mapping from placeholder key to glyph."""

import logging
import re
from collections.abc import Iterable, Iterator
from functools import lru_cache

from pydantic import BaseModel, ConfigDict

from printk.exceptions import InvalidIconTableError

logger = logging.getLogger(__name__)

KEY_PATTERN = re.compile(r"[A-Za-z0-9\-_]+")
PLACEHOLDER_PATTERN = re.compile(r"\{([A-Za-z0-9\-_]+)\}")


class IconEntry(BaseModel):
    """A single icon: placeholder key, replacement glyph and listing category."""

    model_config = ConfigDict(frozen=True)

    key: str
    glyph: str
    category: str = "Misc"

    @property
    def placeholder(self) -> str:
        """Bracketed form of the key, as written in messages."""
        return f"{{{self.key}}}"


class IconRegistry:
    """Immutable icon table.

    Entries keep their insertion order. Order only matters for listing and for
    the order in which `Renderer.substitute` applies replacements; lookups are
    exact, case-sensitive key matches.

    The table is checked once at construction:
    - every key is a valid placeholder identifier
    - keys are unique
    - no glyph contains a brace

    These rules mean a bracketed key can never overlap another key, and a glyph
    inserted by one replacement never carries a placeholder for a later one.
    """

    def __init__(self, entries: Iterable[IconEntry]):
        self._entries: tuple[IconEntry, ...] = tuple(entries)
        self._glyphs: dict[str, str] = {}

        for entry in self._entries:
            if not KEY_PATTERN.fullmatch(entry.key):
                raise InvalidIconTableError(f"Invalid icon key: {entry.key!r}")
            if entry.key in self._glyphs:
                raise InvalidIconTableError(f"Duplicate icon key: {entry.key!r}")
            if "{" in entry.glyph or "}" in entry.glyph:
                raise InvalidIconTableError(
                    f"Glyph for {entry.key!r} contains a brace: {entry.glyph!r}"
                )
            self._glyphs[entry.key] = entry.glyph

        logger.debug(f"Icon registry built with {len(self._entries)} entries")

    @classmethod
    def from_pairs(
        cls, pairs: Iterable[tuple[str, str]], category: str = "Misc"
    ) -> "IconRegistry":
        """Build a registry from plain (key, glyph) pairs."""
        return cls(
            IconEntry(key=key, glyph=glyph, category=category) for key, glyph in pairs
        )

    def lookup(self, key: str) -> str | None:
        """Return the glyph for key, or None if the key is unknown."""
        return self._glyphs.get(key)

    def contains(self, key: str) -> bool:
        """Check whether key is in the table."""
        return key in self._glyphs

    def entries(self) -> tuple[IconEntry, ...]:
        """All entries in insertion order."""
        return self._entries

    def categories(self) -> dict[str, list[IconEntry]]:
        """Group entries by category, categories in first-seen order."""
        grouped: dict[str, list[IconEntry]] = {}
        for entry in self._entries:
            grouped.setdefault(entry.category, []).append(entry)
        return grouped

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key in self._glyphs

    def __iter__(self) -> Iterator[IconEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def list(self) -> list[tuple[str, str]]:
        """List every (key, glyph) pair in insertion order."""
        return [(entry.key, entry.glyph) for entry in self._entries]


@lru_cache(maxsize=1)
def default_registry() -> IconRegistry:
    """Registry built from the compiled-in icon table, created on first use."""
    from printk.icons.table import ICON_TABLE

    return IconRegistry(ICON_TABLE)
