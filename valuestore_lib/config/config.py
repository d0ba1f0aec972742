from __future__ import annotations
from pathlib import Path
from typing import Any, Dict, Optional
import logging
import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path('data/config/valuestore_config.yml')


def load_server_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """Load the YAML server configuration.

    Recognised keys:
    - log_level: name of a `logging` level, e.g. "DEBUG"
    - initial_values: mapping used to seed the shared storage

    A missing file yields an empty config. A document that is not a mapping
    raises `ValueError`.
    """
    cfg_path = Path(config_path) if config_path is not None else DEFAULT_CONFIG_PATH
    if not cfg_path.exists():
        logger.debug("No server config at %s; using defaults", cfg_path)
        return {}
    with cfg_path.open('r', encoding='utf-8') as f:
        cfg = yaml.safe_load(f) or {}
    if not isinstance(cfg, dict):
        raise ValueError(f"Server config {cfg_path} must be a mapping, got {type(cfg).__name__}")
    initial = cfg.get('initial_values')
    if initial is not None and not isinstance(initial, dict):
        raise ValueError(f"'initial_values' in {cfg_path} must be a mapping")
    logger.debug("Loaded server config from %s", cfg_path)
    return cfg
