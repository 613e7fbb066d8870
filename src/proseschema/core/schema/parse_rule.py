#!/usr/bin/env python3
"""
Purpose:
    Injects declared attribute extraction into markup-parsing rules, so
    extension authors never write merge-aware `getAttrs` functions.
"""
from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, List, Mapping, Union

from proseschema.core.constants import GET_ATTRS_KEY, STYLE_RULE_KEY
from proseschema.core.extension.attribute import ExtensionAttribute

ParseRule = Mapping[str, Any]
GetAttrs = Callable[[Any], Union[Mapping[str, Any], None, bool]]


def is_style_rule(rule: ParseRule) -> bool:
    """True for style-selector rules (they match a CSS property, not an element)."""
    return bool(rule.get(STYLE_RULE_KEY))


def inject_extension_attributes(rule: ParseRule, extension_attributes: Iterable[ExtensionAttribute]) -> ParseRule:
    """
    Return `rule` augmented to also extract `extension_attributes` from matched markup.

    - Style rules are returned unchanged (same object).
    - Otherwise a new rule is returned whose `getAttrs` runs the original
      `getAttrs` (if any), then merges every rendered attribute's extraction
      on top. Declared extraction wins over the original for shared keys.
    - A `False` from the original `getAttrs` rejects the match outright.
    """
    if is_style_rule(rule):
        return rule

    rendered = [item for item in extension_attributes if item.attribute.rendered]
    original: GetAttrs | None = rule.get(GET_ATTRS_KEY)

    def get_attrs(element: Any) -> Union[Dict[str, Any], bool]:
        old_attributes = original(element) if original is not None else {}
        if old_attributes is False:
            return False

        new_attributes: Dict[str, Any] = {}
        for item in rendered:
            new_attributes.update(item.parse(element))

        return {**(old_attributes or {}), **new_attributes}

    return {**rule, GET_ATTRS_KEY: get_attrs}


def inject_all(rules: Iterable[ParseRule], extension_attributes: Iterable[ExtensionAttribute]) -> List[ParseRule]:
    """Apply `inject_extension_attributes` to each rule, preserving order."""
    extension_attributes = list(extension_attributes)
    return [inject_extension_attributes(rule, extension_attributes) for rule in rules]
