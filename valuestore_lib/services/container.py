from typing import Any, Callable, Dict


class ServiceContainer:
    """Registry of named singletons and lazily built factories.

    The application factory registers the shared storage state here and
    exposes the container on `app.state.container`; request handlers look
    services up through `valuestore_lib.services.resolver`.
    """

    def __init__(self) -> None:
        self._singletons: Dict[str, Any] = {}
        self._factories: Dict[str, Callable[[], Any]] = {}

    def register_singleton(self, key: str, instance: Any) -> None:
        self._factories.pop(key, None)
        self._singletons[key] = instance

    def register_factory(self, key: str, factory: Callable[[], Any]) -> None:
        self._singletons.pop(key, None)
        self._factories[key] = factory

    def unregister(self, key: str) -> None:
        self._singletons.pop(key, None)
        self._factories.pop(key, None)

    def __contains__(self, key: object) -> bool:
        return key in self._singletons or key in self._factories

    def get(self, key: str) -> Any:
        if key in self._singletons:
            return self._singletons[key]
        if key in self._factories:
            # factories run once, their result is kept as a singleton
            inst = self._factories.pop(key)()
            self._singletons[key] = inst
            return inst
        raise KeyError(f"No service registered for key '{key}'")
