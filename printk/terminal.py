"""ANSI cursor-control sequences and the terminal output stream.

Only the small VT100 subset printk needs:

- absolute position ``ESC[<row+1>;1H`` (column is always 1)
- save / restore cursor ``ESC[s`` / ``ESC[u``
- erase to end of line ``ESC[0K``
- clear screen and home ``ESC[2J`` + ``ESC[1;1H``
"""

import logging
import sys
from typing import TextIO

from printk.exceptions import InvalidCursorError, TerminalIOError

logger = logging.getLogger(__name__)

ESC = "\x1b"
SAVE_CURSOR = f"{ESC}[s"
RESTORE_CURSOR = f"{ESC}[u"
ERASE_TO_END_OF_LINE = f"{ESC}[0K"
CLEAR_SCREEN = f"{ESC}[2J"
CURSOR_HOME = f"{ESC}[1;1H"


def cursor_row(row: int) -> int:
    """Validate a 0-based cursor row.

    Raises:
        InvalidCursorError: If row is negative.
    """
    if row < 0:
        raise InvalidCursorError(row)
    return row


def move_to_row(row: int) -> str:
    """Escape sequence placing the cursor at (row, column 1).

    Rows are 0-based here and 1-based on the wire.
    """
    return f"{ESC}[{cursor_row(row) + 1};1H"


def clear_row_sequence(row: int) -> str:
    """Escape sequence clearing a row from column 1 to end of line."""
    return move_to_row(row) + ERASE_TO_END_OF_LINE


class Terminal:
    """Thin wrapper over a text stream that turns I/O failures into TerminalIOError.

    With no explicit stream, writes go to whatever ``sys.stdout`` is at call
    time, so redirected or captured stdout is honoured.

    Not thread-safe: callers writing from several threads must serialise their
    calls, otherwise escape sequences and text can interleave.
    """

    def __init__(self, stream: TextIO | None = None):
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def write(self, data: str) -> None:
        try:
            self.stream.write(data)
        except (OSError, ValueError) as e:
            logger.debug(f"Terminal write failed: {e}")
            raise TerminalIOError(f"IO error: {e}") from e

    def flush(self) -> None:
        try:
            self.stream.flush()
        except (OSError, ValueError) as e:
            logger.debug(f"Terminal flush failed: {e}")
            raise TerminalIOError(f"IO error: {e}") from e
