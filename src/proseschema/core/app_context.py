#!/usr/bin/env python3
"""
Purpose:
    Wires together the proseschema application context by merging
    configuration and applying the configured logging level.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from proseschema.core.config import is_strict, load_config
from proseschema.core.logging_setup import configure_logging


# --- Data model --- #

@dataclass(frozen=True)
class AppContext:
    """Immutable container for configuration and derived settings."""
    config: Dict[str, Any]
    strict: bool


# --- Factory --- #

def build_context(
    *,
    config: Optional[Dict[str, Any]] = None,
    strict: Optional[bool] = None,
) -> AppContext:
    """
    Build an `AppContext`.

    Args:
        config:
            Pre-merged configuration. If omitted, `load_config()` is used.
        strict:
            Optional override for `config['schema']['strict']`.

    Returns:
        AppContext: immutable bundle of config and the effective strict flag.
    """
    cfg = config if config is not None else load_config()
    configure_logging(cfg)
    effective = is_strict(cfg) if strict is None else strict
    return AppContext(config=cfg, strict=effective)
