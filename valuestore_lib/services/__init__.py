"""Service registry used to share the storage state between handlers."""
from .container import ServiceContainer

__all__ = ["ServiceContainer"]
