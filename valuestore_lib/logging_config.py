from __future__ import annotations
import logging
from pathlib import Path
from typing import Optional

from valuestore_lib.config.config import load_server_config


def configure_logging(config_path: Optional[Path] = None) -> logging.Logger:
    """Configure root logging for the application.

    Establishes an early NOTSET basic config so the server config can be
    read, then reconfigures the root logger at the `log_level` found there
    (WARNING by default). Returns a module logger for the caller.
    """
    # Minimal early config so other imports can emit without error
    logging.basicConfig(level=logging.NOTSET, format='%(asctime)s INFO %(message)s')
    DEFAULT_LOG_LEVEL = logging.WARNING

    try:
        _lvl = load_server_config(config_path).get('log_level')
        if isinstance(_lvl, str):
            _numeric = getattr(logging, _lvl.upper(), None)
            if isinstance(_numeric, int):
                DEFAULT_LOG_LEVEL = _numeric
    except Exception:
        # If config parse fails, fall back to default level
        logging.exception('Failed to load server configuration for logging setup')
        DEFAULT_LOG_LEVEL = logging.WARNING

    logging.log(100, f'[valuestore]: Log level set to: {logging.getLevelName(DEFAULT_LOG_LEVEL)}')

    # Reconfigure root handlers to use the selected level and format
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)
    logging.basicConfig(level=DEFAULT_LOG_LEVEL, format='%(asctime)s %(levelname)s [%(name)s]: %(message)s')
    logger = logging.getLogger(__name__)

    # Keep known noisy libraries quiet by default
    logging.getLogger('uvicorn.access').setLevel(logging.WARNING)
    logging.getLogger('httpx').setLevel(logging.WARNING)
    logger.info("Starting ValueStore server")

    return logger
