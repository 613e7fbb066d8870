#!/usr/bin/env python3
"""
proseschema configuration loader.
"""

import copy
import os
from pathlib import Path
from typing import Any, Dict, Final

from proseschema.core.utils import load_json_file, merge_dicts, parse_bool

# --- Defaults & locations --- #

DEFAULT_CONFIG: Final[Dict[str, Any]] = {
    "logging": {"level": "INFO"},
    "schema": {"strict": False},
}

GLOBAL_CONFIG_PATH: Final[Path] = Path.home() / ".config" / "proseschema" / "config.json"

PROJECT_CONFIG_NAME: Final[str] = "proseschema.json"


# --- Public API --- #

def load_config() -> Dict[str, Any]:
    """
    Load proseschema configuration with layered precedence.

    Order:
        1. Built-in defaults
        2. Global config (~/.config/proseschema/config.json)
        3. Project config (./proseschema.json)
        4. Environment overrides:
           - PROSESCHEMA_LOG_LEVEL
           - PROSESCHEMA_STRICT (1/true/yes/on or 0/false/no/off)

    Returns:
        A merged configuration dictionary.

    Raises:
        ValueError: if a config file holds invalid JSON or PROSESCHEMA_STRICT
            is not a boolean literal.
    """
    # 1) start with defaults
    config = copy.deepcopy(DEFAULT_CONFIG)

    # 2) global config
    config = merge_dicts(config, load_json_file(GLOBAL_CONFIG_PATH))

    # 3) project config
    project_path = Path.cwd() / PROJECT_CONFIG_NAME
    config = merge_dicts(config, load_json_file(project_path))

    # 4) environment overrides
    log_level_env = os.getenv("PROSESCHEMA_LOG_LEVEL")
    if log_level_env:
        config.setdefault("logging", {})["level"] = log_level_env

    strict_env = os.getenv("PROSESCHEMA_STRICT")
    if strict_env:
        config.setdefault("schema", {})["strict"] = parse_bool(strict_env)

    return config


def is_strict(config: Dict[str, Any]) -> bool:
    """Return the effective `schema.strict` flag of a loaded config."""
    return bool(config.get("schema", {}).get("strict", False))
