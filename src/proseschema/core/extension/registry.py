#!/usr/bin/env python3
"""
Purpose:
    Attribute registry helpers: flattens every extension's attribute
    declarations into ordered `ExtensionAttribute` records, and computes the
    rendered-attribute payload handed to render callbacks.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional

from proseschema.core.constants import JOINED_RENDER_ATTRIBUTES
from proseschema.core.extension.attribute import ExtensionAttribute
from proseschema.core.extension.extension import Extension
from proseschema.core.extension.split import split_extensions

logger = logging.getLogger(__name__)


# --- Registry --- #

def get_attributes_from_extensions(extensions: Iterable[Extension]) -> List[ExtensionAttribute]:
    """
    Collect every attribute declaration across `extensions`.

    Order:
        1. global attributes, in extension order, then `types` order
        2. node attributes, then mark attributes, in extension order

    Global attributes may reference element types that do not exist; those
    records are kept here and simply never match an element.
    """
    extensions = list(extensions)
    split = split_extensions(extensions)
    collected: List[ExtensionAttribute] = []

    for ext in extensions:
        for block in ext.resolve_global_attributes():
            for type_name in block.types:
                for name, attribute in block.attributes.items():
                    collected.append(ExtensionAttribute(type=type_name, name=name, attribute=attribute))

    for ext in [*split.node_extensions, *split.mark_extensions]:
        for name, attribute in ext.resolve_attributes().items():
            collected.append(ExtensionAttribute(type=ext.name, name=name, attribute=attribute))

    logger.debug("Collected %d attribute declarations from %d extensions", len(collected), len(extensions))
    return collected


def attributes_for(type_name: str, all_attributes: Iterable[ExtensionAttribute]) -> List[ExtensionAttribute]:
    """Attribute records owned by `type_name`, in registry order."""
    return [item for item in all_attributes if item.type == type_name]


# --- Rendering --- #

def merge_attributes(*objects: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """
    Merge markup attribute mappings left to right.

    `class` values are joined with a space and `style` values with `"; "`;
    any other key is overwritten by the later mapping. Falsy inputs are skipped.
    """
    merged: Dict[str, Any] = {}
    for item in objects:
        if not item:
            continue
        for key, value in item.items():
            existing = merged.get(key)
            if not existing:
                merged[key] = value
            elif key in JOINED_RENDER_ATTRIBUTES:
                merged[key] = JOINED_RENDER_ATTRIBUTES[key].join([str(existing), str(value)])
            else:
                merged[key] = value
    return merged


def get_rendered_attributes(element: Any, extension_attributes: Iterable[ExtensionAttribute]) -> Dict[str, Any]:
    """
    Compute the markup attributes of a node or mark instance.

    Only attributes flagged `rendered` take part. Each contributes either its
    `render_html(element.attrs)` result or `{name: element.attrs[name]}`.
    """
    values: Mapping[str, Any] = getattr(element, "attrs", None) or {}
    rendered = []
    for item in extension_attributes:
        if not item.attribute.rendered:
            continue
        if item.attribute.render_html is None:
            rendered.append({item.name: values.get(item.name)})
        else:
            rendered.append(item.attribute.render_html(values) or {})
    return merge_attributes(*rendered)
