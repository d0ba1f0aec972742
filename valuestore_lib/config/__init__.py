from .config import load_server_config, DEFAULT_CONFIG_PATH

__all__ = ["load_server_config", "DEFAULT_CONFIG_PATH"]
