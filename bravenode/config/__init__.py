"""Configuration module for bravenode."""

from bravenode.config.loader import get_config_path, load_config, save_config
from bravenode.config.schema import BraveSearchConfig, Config, NodeConfig

__all__ = [
    "Config",
    "BraveSearchConfig",
    "NodeConfig",
    "load_config",
    "save_config",
    "get_config_path",
]
