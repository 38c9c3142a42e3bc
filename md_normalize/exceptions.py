"""Package-specific exception types."""

from __future__ import annotations


class NormalizeIOError(OSError):
    """Base class for errors reading or writing documents.

    The formatting pipeline itself never raises; every failure comes from the
    surrounding input and output handling.
    """


class InputError(NormalizeIOError):
    """Raised when the input document cannot be read or decoded."""


class OutputError(NormalizeIOError):
    """Raised when the formatted document cannot be written."""


class FileTooLargeError(InputError):
    """Raised when the input exceeds the configured maximum size.

    Args:
        source: Display name of the input (a path or ``<stdin>``).
        size: Size of the input in bytes.
        max_size: Maximum allowed size in bytes.
    """

    def __init__(self, source: str, size: int, max_size: int):
        self.source = source
        self.size = size
        self.max_size = max_size
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        return (
            f"{self.source} is {self.size} bytes, exceeding the maximum allowed size "
            f"of {self.max_size} bytes."
        )
