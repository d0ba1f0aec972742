"""State holder keeping one `KeyValueStorage` across calls.

Setting or deleting a value does not notify anybody by default. Observers
are only told about changes when a fresh snapshot is installed, either by
passing ``force_update_state=True`` or by calling `update_storage_state()`.

It is recommended to keep keys as constants to avoid typos:

    class GlobalKeys:
        USER_PREFERRED_NOTIFY_TYPE = "userPreferredNotifyType"
        SELECTED_THEME = "selectedThemeKey"

    state.set_storage_value(GlobalKeys.SELECTED_THEME, "dark")
"""
from __future__ import annotations
import logging
from threading import RLock
from typing import Any, Callable, List, Optional

from valuestore_lib.storage import KeyValueStorage, KeyValueStore

logger = logging.getLogger(__name__)

Listener = Callable[[KeyValueStorage], None]


class StorageState:
    """Holds the current storage and swaps in snapshots on request.

    All operations are serialized by a re-entrant lock, so a single instance
    may be shared between request handlers.
    """

    def __init__(self, initial_values: Optional[KeyValueStore] = None) -> None:
        self._lock = RLock()
        self._storage = KeyValueStorage(initial_values if initial_values is not None else {})
        self._version = 0
        self._listeners: List[Listener] = []

    @property
    def storage(self) -> KeyValueStorage:
        with self._lock:
            return self._storage

    @property
    def version(self) -> int:
        """Number of snapshots installed so far."""
        with self._lock:
            return self._version

    def get_storage_value(self, key: str) -> Any:
        """Read a value by path, e.g. "form.values.username" or "items[0].name"."""
        with self._lock:
            return self._storage.get_value(key)

    def set_storage_value(self, key: str, value: Any, force_update_state: bool = False) -> None:
        """Set a value by path without notifying observers.

        Pass `force_update_state=True` to install a fresh snapshot right away.
        """
        with self._lock:
            self._storage.set_value(key, value)
        # listeners run without the lock held
        if force_update_state:
            self.update_storage_state()

    def delete_storage_value(self, key: str, set_undefined: bool = False,
                             force_update_state: bool = False) -> Any:
        """Remove a value by path. `set_undefined` keeps the slot as None."""
        with self._lock:
            removed = self._storage.delete_value(key, preserve_length=set_undefined)
        if force_update_state:
            self.update_storage_state()
        return removed

    def update_storage_state(self) -> KeyValueStorage:
        """Install a deep copy of the storage as current and notify observers."""
        with self._lock:
            self._storage = self._storage.snapshot()
            self._version += 1
            current = self._storage
            version = self._version
            listeners = list(self._listeners)
        logger.debug("Installed storage snapshot version %d", version)
        for listener in listeners:
            try:
                listener(current)
            except Exception:
                logger.exception("Storage listener %r failed", listener)
        return current

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register `listener`; returns a callable that unregisters it."""
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe
