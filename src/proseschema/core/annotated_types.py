#!/usr/bin/env python3
"""
Purpose:
    Provides reusable annotated types and normalization helpers for
    proseschema's Pydantic models such as extension and attribute names.
"""

from typing import Any, Annotated
from pydantic import BeforeValidator

from proseschema.core.constants import ATTRIBUTE_NAME_ALLOWED_RE, EXTENSION_NAME_ALLOWED_RE
from proseschema.core.utils import is_valid_attribute_name, is_valid_extension_name


# --- Normalizers --- #

def _normalize_extension_name(v: Any) -> str:
    """
    Normalize an extension (element type) identifier:
    - coerce to str
    - strip surrounding whitespace
    - validate via fullmatch against EXTENSION_NAME_ALLOWED_RE
    Case is preserved: element names are case-sensitive in the schema engine.
    """
    text = "" if v is None else str(v).strip()
    if not text:
        raise ValueError("Invalid name: must be a non-empty string")
    if not is_valid_extension_name(text):
        raise ValueError(
            f"Invalid name: {text!r}. Allowed pattern: {EXTENSION_NAME_ALLOWED_RE.pattern!r}"
        )
    return text


def _normalize_attribute_name(v: Any) -> str:
    """Like `_normalize_extension_name`, but hyphens are allowed (``data-id``)."""
    text = "" if v is None else str(v).strip()
    if not text:
        raise ValueError("Invalid attribute name: must be a non-empty string")
    if not is_valid_attribute_name(text):
        raise ValueError(
            f"Invalid attribute name: {text!r}. Allowed pattern: {ATTRIBUTE_NAME_ALLOWED_RE.pattern!r}"
        )
    return text


# --- Reusable Annotated types --- #

ExtensionName = Annotated[str, BeforeValidator(_normalize_extension_name)]
AttributeName = Annotated[str, BeforeValidator(_normalize_attribute_name)]
