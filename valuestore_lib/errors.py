"""Exceptions raised by the value storage engine.

All errors are local and deterministic. Callers are expected to catch them
around `get_value`/`set_value`; `delete_value` never raises them.
"""
from typing import Optional


class StorageError(Exception):
    """Base class for storage errors. Carries the offending `path`."""

    def __init__(self, message: str, path: str = "", partial: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = path
        self.partial = partial

    def __str__(self) -> str:
        return self.message


class KeyFormatException(StorageError, ValueError):
    """Raised when a read or write is attempted with an empty path."""


class KeyNotFound(StorageError, KeyError):
    """Raised when a read hits an absent intermediate container.

    `partial` holds the portion of the path traversed before the gap.
    """


class RawValueDetected(StorageError, TypeError):
    """Raised when a write would have to descend through a scalar value.

    The tree is left untouched when this is raised.
    """
