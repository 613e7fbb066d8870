#!/usr/bin/env python3
"""
Purpose:
    Builds the element spec (node or mark) handed to the schema engine for a
    single extension: cleaned structural fields, attribute slots with
    defaults, attribute-injected parse rules, and a wrapped render hook.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List

from proseschema.core.constants import ATTRS_KEY, PARSE_RULES_KEY, RENDER_HOOK_KEY
from proseschema.core.extension.attribute import ExtensionAttribute
from proseschema.core.extension.extension import ElementExtension, MarkExtension, NodeExtension
from proseschema.core.extension.registry import attributes_for, get_rendered_attributes
from proseschema.core.schema.parse_rule import inject_all
from proseschema.core.utils import is_empty_mapping

logger = logging.getLogger(__name__)

ElementSpec = Dict[str, Any]


# --- Cleanup --- #

def clean_up_schema_item(spec: Dict[str, Any]) -> Dict[str, Any]:
    """
    Drop unset entries from an element spec.

    Removes keys whose value is None, and the `attrs` key when it is an empty
    mapping. Falsy but set values (False, 0, "") are kept: the engine treats
    "not set" and "set to a falsy value" differently.
    """
    return {
        key: value
        for key, value in spec.items()
        if value is not None and not (key == ATTRS_KEY and is_empty_mapping(value))
    }


# --- Builders --- #

def build_node_spec(extension: NodeExtension, all_attributes: Iterable[ExtensionAttribute]) -> ElementSpec:
    """Build the node spec for `extension`; `toDOM(node)` receives the node."""
    spec, selected = _build_base_spec(extension, all_attributes)

    if extension.render_html is not None:
        def to_dom(node: Any) -> Any:
            return extension.render(node, get_rendered_attributes(node, selected))
        spec[RENDER_HOOK_KEY] = to_dom

    return spec


def build_mark_spec(extension: MarkExtension, all_attributes: Iterable[ExtensionAttribute]) -> ElementSpec:
    """Build the mark spec for `extension`; `toDOM(mark, inline)` receives the mark."""
    spec, selected = _build_base_spec(extension, all_attributes)

    if extension.render_html is not None:
        def to_dom(mark: Any, inline: bool = True) -> Any:
            return extension.render(mark, get_rendered_attributes(mark, selected))
        spec[RENDER_HOOK_KEY] = to_dom

    return spec


# --- Helpers --- #

def _build_base_spec(
    extension: ElementExtension,
    all_attributes: Iterable[ExtensionAttribute],
) -> tuple[ElementSpec, List[ExtensionAttribute]]:
    selected = attributes_for(extension.name, all_attributes)

    spec = clean_up_schema_item({
        **extension.structural_fields(),
        ATTRS_KEY: {item.name: {"default": item.attribute.default} for item in selected},
    })

    rules = extension.parse_rules()
    if rules:
        spec[PARSE_RULES_KEY] = inject_all(rules, selected)

    logger.debug(
        "Built %s spec %r (%d attrs, %d parse rules)",
        extension.kind.value, extension.name, len(spec.get(ATTRS_KEY, {})), len(rules or []),
    )
    return spec, selected
