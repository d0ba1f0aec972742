from typing import Protocol, Any, runtime_checkable

from .path import PathLike


class ValueAccessor(Protocol):
    """Protocol to navigate and mutate an in-memory tree by path."""

    def get(self, value: Any, path: PathLike) -> Any: ...

    def set(self, value: Any, path: PathLike, new: Any) -> None: ...

    def delete(self, value: Any, path: PathLike, preserve_length: bool = False) -> Any: ...


@runtime_checkable
class ValueStorageProtocol(Protocol):
    """Public contract of `valuestore_lib.storage.KeyValueStorage`.

    `get_value`/`set_value` raise `KeyFormatException` for empty keys;
    `delete_value` never raises for unreachable or empty keys.
    """

    def get_value(self, key: str) -> Any: ...

    def set_value(self, key: str, value: Any) -> None: ...

    def delete_value(self, key: str, preserve_length: bool = False) -> Any: ...

    def snapshot(self) -> "ValueStorageProtocol": ...
