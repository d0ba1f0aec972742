"""State holders wrapping a `KeyValueStorage`."""

from .local_state import StorageState
from .global_state import (
    GlobalStorageNotProvided,
    provide_global_storage,
    use_global_storage,
)

__all__ = [
    "StorageState",
    "GlobalStorageNotProvided",
    "provide_global_storage",
    "use_global_storage",
]
