"""Exception hierarchy for printk operations."""


class PrintkError(Exception):
    """Base exception for printk operations."""

    pass


class InvalidCursorError(PrintkError):
    """Cursor row is negative."""

    def __init__(self, row: int):
        self.row = row
        super().__init__(f"Invalid cursor position: {row}")


class TerminalIOError(PrintkError):
    """Writing to or flushing the terminal stream failed."""

    pass


class InvalidIconTableError(PrintkError):
    """Icon table rejected at registry construction."""

    pass
