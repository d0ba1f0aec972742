"""Application factory for the ValueStore FastAPI app.

This module exposes `create_app(config: Config) -> FastAPI` which performs
all setup (logging, config loading, shared storage composition and router
registration). Nothing happens at import time so tests can construct
isolated apps.

    from valuestore_lib.main import create_app, Config
    app = create_app(Config())
"""
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from fastapi import FastAPI

from valuestore_lib.config.config import load_server_config
from valuestore_lib.logging_config import configure_logging
from valuestore_lib.services import ServiceContainer
from valuestore_lib.state import provide_global_storage


@dataclass
class Config:
    config_path: Optional[Path] = None
    # When None, `initial_values` from the YAML server config is used
    initial_values: Optional[Dict[str, Any]] = None
    title: str = "ValueStore Server"


def create_app(config: Config) -> FastAPI:
    """Create and return a configured FastAPI application."""
    logger = configure_logging(config.config_path)

    initial_values = config.initial_values
    if initial_values is None:
        initial_values = load_server_config(config.config_path).get('initial_values') or {}

    container = ServiceContainer()
    state = provide_global_storage(container, initial_values)
    logger.info("Shared storage seeded with %d top-level keys", len(state.storage))

    app = FastAPI(title=config.title)
    # Request-time code resolves services from the container only.
    app.state.container = container

    # Import routers here to avoid import-time side-effects
    from valuestore_lib.storage.api import router as storage_router
    app.include_router(storage_router, prefix='/api')

    return app
