"""Configuration loading utilities."""

import json
import re
from pathlib import Path
from typing import Any

from loguru import logger

from webdigest.config.schema import Config
from webdigest.tools.websearch.client import DEFAULT_NEWS_URL, DEFAULT_SEARCH_URL


def get_config_path() -> Path:
    """Get the default configuration file path."""
    return Path.home() / ".webdigest" / "config.json"


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
            return Config.model_validate(convert_keys(data))
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

    data = convert_to_camel(config.model_dump())

    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)


def _migrate_config(data: dict) -> dict:
    """Migrate old config formats to current.

    Sections of the wrong shape are left in place for schema validation to
    reject.
    """
    if not isinstance(data, dict):
        return data

    legacy_section = data.pop("WebSearch", None)
    tools = data.setdefault("tools", {})
    web_cfg = tools.setdefault("web", {}) if isinstance(tools, dict) else None
    if not isinstance(web_cfg, dict):
        return data
    search_cfg = web_cfg.setdefault("search", {})
    if not isinstance(search_cfg, dict):
        return data

    # Move appsettings-style WebSearch.AllowedDomains -> tools.web.search.allowedDomains
    if isinstance(legacy_section, dict):
        legacy_domains = legacy_section.get("AllowedDomains")
        if isinstance(legacy_domains, list) and not search_cfg.get("allowedDomains"):
            search_cfg["allowedDomains"] = list(legacy_domains)

    # Move tools.web.allowedDomains -> tools.web.search.allowedDomains
    flat_domains = web_cfg.pop("allowedDomains", None)
    if isinstance(flat_domains, list) and not search_cfg.get("allowedDomains"):
        search_cfg["allowedDomains"] = list(flat_domains)

    # Fill default endpoints when missing/empty
    if not search_cfg.get("baseUrl"):
        search_cfg["baseUrl"] = DEFAULT_SEARCH_URL
    news_cfg = web_cfg.setdefault("news", {})
    if isinstance(news_cfg, dict) and not news_cfg.get("baseUrl"):
        news_cfg["baseUrl"] = DEFAULT_NEWS_URL

    return data


def camel_to_snake(name: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "_", name).lower()


def snake_to_camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def convert_keys(data: Any) -> Any:
    """Convert camelCase keys to snake_case for Pydantic."""
    if isinstance(data, dict):
        return {camel_to_snake(k): convert_keys(v) for k, v in data.items()}
    if isinstance(data, list):
        return [convert_keys(item) for item in data]
    return data


def convert_to_camel(data: Any) -> Any:
    """Convert snake_case keys to camelCase."""
    if isinstance(data, dict):
        return {snake_to_camel(k): convert_to_camel(v) for k, v in data.items()}
    if isinstance(data, list):
        return [convert_to_camel(item) for item in data]
    return data
