"""Path-addressable storage package for ValueStore."""

from .path import Key, Index, Segment, parse_path, format_path
from .accessor import PathAccessor, AccessorView, deep_clone
from .key_value_storage import KeyValueStorage, KeyValueStore
from .handle import create_storage, get_value, set_value, delete_value, snapshot

__all__ = [
    "Key",
    "Index",
    "Segment",
    "parse_path",
    "format_path",
    "PathAccessor",
    "AccessorView",
    "deep_clone",
    "KeyValueStorage",
    "KeyValueStore",
    "create_storage",
    "get_value",
    "set_value",
    "delete_value",
    "snapshot",
]
