"""Central logging configuration for the library."""
from __future__ import annotations

import logging
from typing import Any, Dict

_DEFAULT_LEVEL = logging.INFO
_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def resolve_level(value: Any) -> int:
    """Translate a level name ('debug', 'WARNING') or number into a logging level."""
    if isinstance(value, int):
        return value
    level = logging.getLevelName(str(value).strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown logging level: {value!r}")
    return level


def configure_logging(config: Dict[str, Any]) -> int:
    """
    Apply `config['logging']['level']` to the package logger.

    The root logger only gets a handler when none is installed yet, so host
    applications keep control of their own logging setup.
    """
    level = resolve_level(config.get("logging", {}).get("level", _DEFAULT_LEVEL))
    if not logging.getLogger().handlers:
        logging.basicConfig(level=level, format=_FORMAT)
    logging.getLogger("proseschema").setLevel(level)
    return level
