"""Configuration management for tokpreview."""

import json
import os
from pathlib import Path
from typing import Any

# Application name for XDG paths
APP_NAME = "tokpreview"

# Default configuration
DEFAULT_CONFIG: dict[str, Any] = {
    "relay": {
        "base_url": "https://r.jina.ai/",
        "aggregator_endpoint": "https://www.tikwm.com/api/?url=",
        "oembed_endpoint": "https://www.tiktok.com/oembed?url=",
        "user_agent": "Mozilla/5.0 (compatible; TikTokPreview/1.0)",
        "timeout_seconds": None,  # None = httpx default
    },
    "resolver": {
        "ok_code": 0,  # aggregator "code" value meaning success
        "loading_marker": "tiktok-loading",
        "strategies": ["aggregator", "oembed", "page_text"],
    },
    "hydration": {
        "max_concurrency": 8,
        "platform_name": "tiktok",
        "min_title_length": 3,
    },
    "paths": {
        # If not set, XDG defaults are used
        "data_dir": None,
    },
}


def get_xdg_config_home() -> Path:
    """Get XDG config home directory."""
    return Path(os.environ.get("XDG_CONFIG_HOME", os.path.expanduser("~/.config")))


def get_xdg_data_home() -> Path:
    """Get XDG data home directory."""
    return Path(os.environ.get("XDG_DATA_HOME", os.path.expanduser("~/.local/share")))


def get_config_path() -> Path:
    """Get the path to the config file."""
    return get_xdg_config_home() / APP_NAME / "config.json"


def load_config() -> dict[str, Any]:
    """Load configuration, merging with defaults."""
    config = deep_merge(DEFAULT_CONFIG, {})
    config_path = get_config_path()

    if config_path.exists():
        with open(config_path) as f:
            user_config = json.load(f)
            config = deep_merge(config, user_config)

    return config


def save_config(config: dict[str, Any]) -> None:
    """Save configuration to file."""
    config_path = get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "w") as f:
        json.dump(config, f, indent=2)


def deep_merge(base: dict, override: dict) -> dict:
    """Deep merge two dictionaries."""
    result = base.copy()
    for key, value in result.items():
        if isinstance(value, dict):
            result[key] = value.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def get_data_dir() -> Path:
    """
    Get the data directory for tokpreview.

    Priority:
    1. TOKPREVIEW_DATA_DIR environment variable
    2. paths.data_dir in config.json
    3. XDG default: ~/.local/share/tokpreview/
    """
    env_dir = os.environ.get("TOKPREVIEW_DATA_DIR")
    if env_dir:
        return Path(env_dir)

    config = load_config()
    config_dir = config.get("paths", {}).get("data_dir")
    if config_dir:
        return Path(config_dir)

    return get_xdg_data_home() / APP_NAME


def get_catalog_path() -> Path:
    """Get the optional video catalog override path."""
    return get_data_dir() / "videos.json"
