#!/usr/bin/env python3
"""
Core constants used across proseschema.

- Structural fields: the spec keys copied verbatim from node/mark extensions.
- Schema keys: the keys the schema engine reads from each element spec.
- File handling: default text encoding.
- Regular expressions: compiled patterns used by validators and normalizers.
"""

import re
from typing import Final

# --- Structural fields --- #

# Node extension fields passed through to the node spec (in emission order)
NODE_SPEC_FIELDS: Final[tuple[str, ...]] = (
    "content",
    "marks",
    "group",
    "inline",
    "atom",
    "selectable",
    "draggable",
    "code",
    "defining",
    "isolating",
)

# Mark extension fields passed through to the mark spec (in emission order)
MARK_SPEC_FIELDS: Final[tuple[str, ...]] = (
    "inclusive",
    "excludes",
    "group",
    "spanning",
)


# --- Schema engine keys --- #

ATTRS_KEY: Final[str] = "attrs"
PARSE_RULES_KEY: Final[str] = "parseDOM"
RENDER_HOOK_KEY: Final[str] = "toDOM"
GET_ATTRS_KEY: Final[str] = "getAttrs"
STYLE_RULE_KEY: Final[str] = "style"
TOP_NODE_KEY: Final[str] = "topNode"

# Attribute keys joined (rather than overwritten) when render payloads merge
JOINED_RENDER_ATTRIBUTES: Final[dict[str, str]] = {"class": " ", "style": "; "}


# --- File handling --- #

DEFAULT_TEXT_ENCODING: Final[str] = "utf-8"


# --- Regular Expressions --- #

# Element / extension names: leading letter/underscore, then letters/numbers/underscores
EXTENSION_NAME_ALLOWED_RE: re.Pattern[str] = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")

# Attribute names: like element names, but hyphens are allowed (e.g. data-id)
ATTRIBUTE_NAME_ALLOWED_RE: re.Pattern[str] = re.compile(r"^[A-Za-z_][A-Za-z0-9_-]*$")


# --- Runtime guard --- #
def validate_constants():
    """
    Ensure constants are valid at runtime.
    """
    overlap = set(NODE_SPEC_FIELDS) & {ATTRS_KEY, PARSE_RULES_KEY, RENDER_HOOK_KEY}
    if overlap:
        raise RuntimeError(f"Structural fields collide with reserved spec keys: {sorted(overlap)}")

validate_constants()
