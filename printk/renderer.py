"""Placeholder substitution and cursor-addressed output."""

from typing import TextIO

from pydantic import BaseModel, ConfigDict

from printk.colors import Color, tint
from printk.icons.registry import PLACEHOLDER_PATTERN, IconRegistry, default_registry
from printk.terminal import (
    CLEAR_SCREEN,
    CURSOR_HOME,
    RESTORE_CURSOR,
    SAVE_CURSOR,
    Terminal,
    clear_row_sequence,
    cursor_row,
    move_to_row,
)


class RendererConfig(BaseModel):
    """Per-renderer settings. Frozen; derive variants with the with_* methods."""

    model_config = ConfigDict(frozen=True)

    active_color: Color | None = None
    icons_enabled: bool = True

    def with_color(self, color: Color | None) -> "RendererConfig":
        return self.model_copy(update={"active_color": color})

    def with_icons(self, enabled: bool) -> "RendererConfig":
        return self.model_copy(update={"icons_enabled": enabled})


class Renderer:
    """Render messages with icon placeholders and write them to the terminal.

    A renderer is one styled output channel: an icon registry, an optional
    foreground color and an icons on/off switch. It keeps no state between
    calls; every output method is a complete write + flush.

    Usage:
        renderer = Renderer().with_color(Color.GREEN)
        renderer.write_line("{success} Done")
        renderer.write_at_row(5, "{info} Status")

    Not thread-safe. Concurrent writers must serialise calls themselves.
    """

    def __init__(
        self,
        config: RendererConfig | None = None,
        registry: IconRegistry | None = None,
        stream: TextIO | None = None,
    ):
        """Initialize renderer.

        Args:
            config: Color and icon settings (defaults: no color, icons on)
            registry: Icon table (defaults to the built-in table)
            stream: Output stream (defaults to the current sys.stdout)
        """
        self.config = config or RendererConfig()
        self.registry = registry if registry is not None else default_registry()
        self._stream = stream
        self.terminal = Terminal(stream)

    def _derive(self, config: RendererConfig) -> "Renderer":
        return Renderer(config, self.registry, self._stream)

    def with_color(self, color: Color | None) -> "Renderer":
        """New renderer with the same table and stream, tinted with color."""
        return self._derive(self.config.with_color(color))

    def with_icons(self, enabled: bool) -> "Renderer":
        """New renderer with icon substitution switched on or off."""
        return self._derive(self.config.with_icons(enabled))

    # ------------------------------------------------------------------
    # Substitution
    # ------------------------------------------------------------------

    def substitute(self, message: str) -> str:
        """Replace every known ``{key}`` in message with its glyph.

        Replacements run once per registry entry, in registry order. Unknown
        keys stay as written, braces included. With icons disabled the message
        is returned unchanged.
        """
        if not self.config.icons_enabled:
            return message

        result = message
        for entry in self.registry:
            result = result.replace(entry.placeholder, entry.glyph)
        return result

    def render(self, message: str) -> str:
        """Substitute placeholders, then apply the renderer's color."""
        return tint(self.substitute(message), self.config.active_color)

    def get_icon(self, key: str) -> str | None:
        """Glyph for key; the literal ``{key}`` when icons are disabled."""
        if not self.config.icons_enabled:
            return f"{{{key}}}"
        return self.registry.lookup(key)

    def list_icons(self) -> list[tuple[str, str]]:
        return self.registry.list()

    def unknown_placeholders(self, message: str) -> list[str]:
        """Keys of placeholder tokens in message that the registry does not know."""
        return [
            key
            for key in placeholders(message)
            if not self.registry.contains(key)
        ]

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def write(self, message: str) -> None:
        """Write the rendered message at the current cursor position."""
        self.terminal.write(self.render(message))
        self.terminal.flush()

    def write_line(self, message: str) -> None:
        """Write the rendered message followed by a newline."""
        self.terminal.write(self.render(message) + "\n")
        self.terminal.flush()

    def write_at_row(self, row: int, message: str) -> None:
        """Write the rendered message at (row, column 1). No trailing newline.

        Raises:
            InvalidCursorError: If row is negative. Nothing is written.
            TerminalIOError: If the stream write or flush fails.
        """
        position = move_to_row(row)
        self.terminal.write(position + self.render(message))
        self.terminal.flush()

    def write_at_row_and_restore(self, row: int, message: str) -> None:
        """Write at row, then put the cursor back where it was."""
        cursor_row(row)
        self.terminal.write(SAVE_CURSOR)
        self.write_at_row(row, message)
        self.terminal.write(RESTORE_CURSOR)
        self.terminal.flush()

    def clear_row(self, row: int) -> None:
        """Erase a row from column 1 to end of line."""
        sequence = clear_row_sequence(row)
        self.terminal.write(sequence)
        self.terminal.flush()

    def clear_rows(self, start_row: int, count: int) -> None:
        """Erase count rows starting at start_row, flushing once at the end.

        Raises:
            InvalidCursorError: If start_row is negative.
            ValueError: If count is negative.
        """
        cursor_row(start_row)
        if count < 0:
            raise ValueError(f"Row count must not be negative: {count}")

        sequences = "".join(
            clear_row_sequence(start_row + offset) for offset in range(count)
        )
        if sequences:
            self.terminal.write(sequences)
        self.terminal.flush()

    def clear_screen(self) -> None:
        """Clear the whole screen and home the cursor."""
        self.terminal.write(CLEAR_SCREEN + CURSOR_HOME)
        self.terminal.flush()


def placeholders(message: str) -> list[str]:
    """Keys of all placeholder tokens in message, in order of appearance."""
    return PLACEHOLDER_PATTERN.findall(message)
