"""ValueStore: path-addressable storage for nested in-memory data."""

__version__ = "0.1.0"

from valuestore_lib.errors import (  # noqa: E402
    StorageError,
    KeyFormatException,
    KeyNotFound,
    RawValueDetected,
)
from valuestore_lib.storage import KeyValueStorage, create_storage, parse_path  # noqa: E402
from valuestore_lib.state import StorageState  # noqa: E402

__all__ = [
    "__version__",
    "StorageError",
    "KeyFormatException",
    "KeyNotFound",
    "RawValueDetected",
    "KeyValueStorage",
    "create_storage",
    "parse_path",
    "StorageState",
]
