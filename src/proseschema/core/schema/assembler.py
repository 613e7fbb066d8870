#!/usr/bin/env python3
"""
Purpose:
    Assembles the unified document schema: runs the element spec builder
    over every node and mark extension and hands the resulting tables and
    top node name to the schema engine.

Ordering contract:
    Later entries in the input sequence take precedence. Two elements of the
    same kind sharing a name resolve to the later one; the first node flagged
    `top_node` names the root. In strict mode both ambiguities raise instead.
"""
from __future__ import annotations

import logging
from collections import Counter
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional

from prosemirror.model import Schema

from proseschema.core.constants import TOP_NODE_KEY
from proseschema.core.extension.attribute import ExtensionAttribute
from proseschema.core.extension.extension import ElementExtension, Extension
from proseschema.core.extension.registry import get_attributes_from_extensions
from proseschema.core.extension.split import split_extensions
from proseschema.core.schema.builder import ElementSpec, build_mark_spec, build_node_spec

logger = logging.getLogger(__name__)

SchemaFactory = Callable[[Dict[str, Any]], Any]


class SchemaAssemblyError(ValueError):
    """Raised in strict mode when extension names or top nodes are ambiguous."""


# --- Public API --- #

def build_schema_spec(extensions: Iterable[Extension], *, strict: bool = False) -> Dict[str, Any]:
    """
    Build the `{topNode?, nodes, marks}` mapping consumed by the schema engine.

    Args:
        extensions: plain, node, and mark extensions in precedence order.
        strict: raise `SchemaAssemblyError` on duplicate element names or
            multiple top nodes instead of resolving them.

    Returns:
        A new dict; `topNode` is omitted when no node extension is flagged.
    """
    extensions = list(extensions)
    all_attributes = get_attributes_from_extensions(extensions)
    split = split_extensions(extensions)

    top_node = _resolve_top_node(split.top_node_candidates, strict=strict)

    nodes = _build_table(split.node_extensions, all_attributes, build_node_spec, table="nodes", strict=strict)
    marks = _build_table(split.mark_extensions, all_attributes, build_mark_spec, table="marks", strict=strict)

    result: Dict[str, Any] = {}
    if top_node is not None:
        result[TOP_NODE_KEY] = top_node
    result["nodes"] = nodes
    result["marks"] = marks

    logger.debug("Assembled schema spec: %d nodes, %d marks, top node %r", len(nodes), len(marks), top_node)
    return result


def get_schema(
    extensions: Iterable[Extension],
    *,
    strict: bool = False,
    schema_factory: Optional[SchemaFactory] = None,
) -> Any:
    """
    Assemble `extensions` into a schema.

    `schema_factory` defaults to `prosemirror.model.Schema`; its result is
    returned verbatim and its errors propagate unchanged.
    """
    factory = schema_factory or Schema
    return factory(build_schema_spec(extensions, strict=strict))


# --- Helpers --- #

def _resolve_top_node(candidates: List[str], *, strict: bool) -> Optional[str]:
    if len(candidates) > 1:
        if strict:
            raise SchemaAssemblyError(f"Multiple top nodes declared: {candidates}")
        logger.warning("Multiple top nodes declared %s; using %r", candidates, candidates[0])
    return candidates[0] if candidates else None


def _build_table(
    extensions: List[ElementExtension],
    all_attributes: List[ExtensionAttribute],
    build: Callable[[Any, Iterable[ExtensionAttribute]], ElementSpec],
    *,
    table: str,
    strict: bool,
) -> Dict[str, ElementSpec]:
    _check_duplicates([ext.name for ext in extensions], table=table, strict=strict)
    specs: Dict[str, ElementSpec] = {}
    for ext in extensions:
        specs[ext.name] = build(ext, all_attributes)
    return specs


def _check_duplicates(names: List[str], *, table: str, strict: bool) -> None:
    dups = sorted(n for n, c in Counter(names).items() if c > 1)
    if not dups:
        return
    if strict:
        raise SchemaAssemblyError(f"Duplicate {table} names: {dups}")
    logger.warning("Duplicate %s names %s; later extensions take precedence", table, dups)


def describe_spec(spec: Mapping[str, Any]) -> Dict[str, Any]:
    """
    JSON-friendly copy of a schema spec: callables become ``"<callable>"``.

    Parse rules keep their keys so the injected `getAttrs` stays visible.
    """
    def _describe(value: Any) -> Any:
        if callable(value):
            return "<callable>"
        if isinstance(value, Mapping):
            return {k: _describe(v) for k, v in value.items()}
        if isinstance(value, (list, tuple)):
            return [_describe(v) for v in value]
        return value

    return _describe(spec)
