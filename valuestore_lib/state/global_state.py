"""Shared `StorageState` registered in a service container.

Call `provide_global_storage` once while composing the application, then
resolve the shared instance anywhere with `use_global_storage(container)`.
"""
from typing import Optional

from valuestore_lib.services.container import ServiceContainer
from valuestore_lib.storage import KeyValueStore
from .local_state import StorageState

GLOBAL_STORAGE_KEY = "global_storage"


class GlobalStorageNotProvided(RuntimeError):
    pass


def provide_global_storage(container: ServiceContainer,
                           initial_values: Optional[KeyValueStore] = None) -> StorageState:
    state = StorageState(initial_values or {})
    container.register_singleton(GLOBAL_STORAGE_KEY, state)
    return state


def use_global_storage(container: Optional[ServiceContainer]) -> StorageState:
    if container is None or GLOBAL_STORAGE_KEY not in container:
        raise GlobalStorageNotProvided(
            'use_global_storage requires provide_global_storage to be called on the container first'
        )
    return container.get(GLOBAL_STORAGE_KEY)
