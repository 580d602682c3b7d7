"""Configuration loader for page-specific settings."""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

# Configuration directory
CONFIG_DIR = Path(__file__).parent


def load_config(config_name: str) -> Dict[str, Any]:
    """Load a configuration file by name.

    Args:
        config_name: Name of the config file (without .json extension)

    Returns:
        Dictionary containing the configuration

    Raises:
        FileNotFoundError: If the configuration file doesn't exist
        json.JSONDecodeError: If the configuration file is invalid JSON

    Example:
        >>> config = load_config('budget_rule')
        >>> config['categories']['needs']['title']
        'Needs'
    """
    config_path = CONFIG_DIR / f"{config_name}.json"

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        return json.load(f)


@lru_cache(maxsize=1)
def _cached_budget_rule_config() -> Dict[str, Any]:
    return load_config('budget_rule')


def get_budget_rule_config() -> Dict[str, Any]:
    """Get the UI copy for the 50/30/20 pages (app text, categories, education)."""
    return _cached_budget_rule_config()


def get_copy(*keys: str, default: Any = None) -> Any:
    """Look up UI copy in ``budget_rule.json`` by key path.

    Any missing key along the path yields ``default``, so pages can fall
    back to built-in text when the JSON is edited down.

    Example:
        >>> get_copy('categories', 'wants', 'title')
        'Wants'
        >>> get_copy('app', 'footer', default='')
        ''
    """
    value: Any = get_budget_rule_config()
    for key in keys:
        if not isinstance(value, dict) or key not in value:
            return default
        value = value[key]
    return value
