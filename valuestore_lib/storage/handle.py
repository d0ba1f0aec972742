"""Function-style access to a `KeyValueStorage` handle.

These thin wrappers mirror the methods on `KeyValueStorage` for callers that
prefer passing a handle around.
"""
from typing import Any, Optional

from .key_value_storage import KeyValueStorage, KeyValueStore


def create_storage(initial: Optional[KeyValueStore] = None) -> KeyValueStorage:
    return KeyValueStorage(initial if initial is not None else {})


def get_value(handle: KeyValueStorage, path: str) -> Any:
    return handle.get_value(path)


def set_value(handle: KeyValueStorage, path: str, value: Any) -> None:
    handle.set_value(path, value)


def delete_value(handle: KeyValueStorage, path: str, preserve_length: bool = False) -> Any:
    return handle.delete_value(path, preserve_length)


def snapshot(handle: KeyValueStorage) -> KeyValueStorage:
    return handle.snapshot()
