"""Key/value storage facade over a nested in-memory tree.

`KeyValueStorage` owns a single root mapping and exposes path based access
to it. Keys are paths such as ``"form.values.username"``, ``"items[0].name"``
or ``"items.0.name"``.

Usage:

    storage = KeyValueStorage({'student': {'name': 'Ali'}})
    storage.set_value('student.hobbies[0]', 'Chess')
    storage.get_value('student.hobbies.0')   # 'Chess'
    copy = storage.snapshot()                 # independent deep copy
"""
from __future__ import annotations
import logging
from typing import Any, Dict, List, Optional

from valuestore_lib.errors import KeyFormatException
from .accessor import AccessorView, PathAccessor, deep_clone
from .interfaces import ValueAccessor
from .path import Segment, parse_path

logger = logging.getLogger(__name__)

KeyValueStore = Dict[str, Any]


class KeyValueStorage:
    """Path-addressable storage over one root mapping.

    `get_value` and `set_value` might raise, so call them inside try/except:
    - KeyFormatException when the key is empty (or has no usable segment)
    - KeyNotFound when a read hits a missing intermediate container
    - RawValueDetected when a write would have to nest under a raw value,
      which would lose that value

    `delete_value` never raises; unreachable keys are ignored.
    """

    def __init__(self, initial_values: Optional[KeyValueStore] = None) -> None:
        self._storage: KeyValueStore = initial_values if initial_values is not None else {}
        self._accessor: ValueAccessor = PathAccessor()

    def _segments(self, key: str) -> List[Segment]:
        if not isinstance(key, str) or key.strip() == '':
            raise KeyFormatException('Key must be a non-empty string.', path=str(key))
        segments = parse_path(key.strip())
        if not segments:
            raise KeyFormatException(f'Key {key!r} does not address any value.', path=key)
        return segments

    def get_value(self, key: str) -> Any:
        return self._accessor.get(self._storage, self._segments(key))

    def set_value(self, key: str, value: Any) -> None:
        segments = self._segments(key)
        self._accessor.set(self._storage, segments, value)
        logger.debug("Set value at %s", key.strip())

    def delete_value(self, key: str, preserve_length: bool = False) -> Any:
        if not isinstance(key, str) or key.strip() == '':
            return None
        removed = self._accessor.delete(self._storage, parse_path(key.strip()), preserve_length)
        if removed is not None:
            logger.debug("Deleted value at %s (preserve_length=%s)", key.strip(), preserve_length)
        return removed

    def snapshot(self) -> 'KeyValueStorage':
        """Return a new storage over a deep copy of this one's root."""
        return KeyValueStorage(deep_clone(self._storage))

    get_clone = snapshot

    def view(self, prefix: str = '') -> AccessorView:
        """Return a chained-indexing view rooted at `prefix`."""
        return AccessorView(self._accessor, self._storage, parse_path(prefix))

    def to_dict(self) -> KeyValueStore:
        return deep_clone(self._storage)

    def __contains__(self, key: object) -> bool:
        return key in self._storage

    def __len__(self) -> int:
        return len(self._storage)

    def __repr__(self) -> str:
        return f"KeyValueStorage(keys={list(self._storage.keys())!r})"
