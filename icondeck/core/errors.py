"""
Exception types raised by icondeck.
"""


class IconDeckError(Exception):
    """Base class for icondeck errors."""
    pass


class IconNotFoundError(IconDeckError, KeyError):
    """Raised when a name does not match any catalog entry."""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Icon not found: {self.name!r}"


class ClipboardWriteFailed(IconDeckError):
    """Raised by clipboard backends when a write is rejected or unsupported."""

    def __init__(self, message: str, payload: str = ""):
        super().__init__(message)
        self.payload = payload
