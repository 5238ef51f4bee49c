"""Configuration loading utilities."""

import json
from pathlib import Path

from loguru import logger

from bravenode.config.schema import BRAVE_SEARCH_URL, Config


def get_config_path() -> Path:
    """Get the default configuration file path."""
    return Path.home() / ".bravenode" / "config.json"


def load_config(config_path: Path | None = None) -> Config:
    """
    Load configuration from file or create default.

    Args:
        config_path: Optional path to config file. Uses default if not provided.

    Returns:
        Loaded configuration object.
    """
    path = config_path or get_config_path()

    if path.exists():
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
            data = _migrate_config(data)
            return Config.model_validate(data)
        except (json.JSONDecodeError, ValueError) as e:
            logger.warning("Failed to load config from {}: {}", path, e)
            logger.warning("Using default configuration.")

    return Config()


def save_config(config: Config, config_path: Path | None = None) -> None:
    """
    Save configuration to file.

    Args:
        config: Configuration to save.
        config_path: Optional path to save to. Uses default if not provided.
    """
    path = config_path or get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)

    data = config.model_dump(by_alias=True)

    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)


def _migrate_config(data: dict) -> dict:
    """Migrate old config formats to current."""
    if not isinstance(data, dict):
        raise ValueError("config root must be an object")

    # Move legacy top-level apiKey -> brave.apiKey
    brave_cfg = data.setdefault("brave", {})
    legacy_api_key = data.pop("apiKey", None)
    if legacy_api_key and not (brave_cfg.get("apiKey") or brave_cfg.get("api_key")):
        brave_cfg["apiKey"] = legacy_api_key

    # Move legacy top-level continueOnFail -> node.continueOnFail
    node_cfg = data.setdefault("node", {})
    legacy_continue = data.pop("continueOnFail", None)
    if legacy_continue is not None and "continueOnFail" not in node_cfg:
        node_cfg["continueOnFail"] = legacy_continue

    if not (brave_cfg.get("baseUrl") or brave_cfg.get("base_url")):
        brave_cfg["baseUrl"] = BRAVE_SEARCH_URL

    return data
