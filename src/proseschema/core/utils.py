#!/usr/bin/env python3
"""
Purpose:
    Provides common utility functions such as name validation, mapping
    checks, dictionary merge, and file I/O utilities for proseschema.
"""

import json
from pathlib import Path
from typing import Any, Dict, Mapping

from proseschema.core.constants import (
    ATTRIBUTE_NAME_ALLOWED_RE,
    DEFAULT_TEXT_ENCODING,
    EXTENSION_NAME_ALLOWED_RE,
)


# --- Validation Helpers --- #

def is_valid_extension_name(name: str) -> bool:
    """Return True if the extension name fully matches the allowed pattern."""
    return bool(EXTENSION_NAME_ALLOWED_RE.fullmatch(name))


def is_valid_attribute_name(name: str) -> bool:
    """Return True if the attribute name fully matches the allowed pattern."""
    return bool(ATTRIBUTE_NAME_ALLOWED_RE.fullmatch(name))


def is_empty_mapping(value: Any) -> bool:
    """Return True if value is a mapping with no entries."""
    return isinstance(value, Mapping) and len(value) == 0


def parse_bool(value: str) -> bool:
    """
    Parse a human-friendly boolean string ('1', 'true', 'yes', 'on' / '0', 'false', 'no', 'off').

    Raises:
        ValueError: If the string is not a recognized boolean literal.
    """
    s = str(value).strip().lower()
    if s in {"1", "true", "yes", "on"}:
        return True
    if s in {"0", "false", "no", "off"}:
        return False
    raise ValueError(f"Invalid boolean value: {value!r}")


# --- Generic Utilities --- #

def merge_dicts(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Recursively merge two dictionaries (values from 'override' take precedence).
    Non-dict values are overwritten; dict values are merged depth-first.
    """
    result = dict(base)
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(result.get(k), dict):
            result[k] = merge_dicts(result[k], v)
        else:
            result[k] = v
    return result


# --- File I/O Helpers --- #

def load_json_file(path: Path) -> Dict[str, Any]:
    """
    Load a JSON file from 'path'. Returns an empty dict if the file is missing.

    Raises:
        ValueError: if the file exists but contains invalid JSON.
    """
    if not path.exists():
        return {}
    try:
        with path.open("r", encoding=DEFAULT_TEXT_ENCODING) as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(
            f"Invalid JSON in {str(path)!r}: {e.msg} (line {e.lineno}, col {e.colno})"
        ) from e
