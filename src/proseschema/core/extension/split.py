#!/usr/bin/env python3
"""
Purpose:
    Partitions an extension sequence into plain, node, and mark extensions,
    preserving input order within each kind.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from proseschema.core.extension.extension import (
    Extension,
    ExtensionKind,
    MarkExtension,
    NodeExtension,
)


@dataclass(frozen=True)
class SplitExtensions:
    """
    Extensions grouped by kind.
    - base_extensions: plain extensions (global attributes only)
    - node_extensions: node-kind extensions, in input order
    - mark_extensions: mark-kind extensions, in input order
    """
    base_extensions: List[Extension] = field(default_factory=list)
    node_extensions: List[NodeExtension] = field(default_factory=list)
    mark_extensions: List[MarkExtension] = field(default_factory=list)

    @property
    def top_node(self) -> Optional[str]:
        """Name of the first node extension flagged as top node, if any."""
        return next((ext.name for ext in self.node_extensions if ext.top_node), None)

    @property
    def top_node_candidates(self) -> List[str]:
        """Names of every node extension flagged as top node."""
        return [ext.name for ext in self.node_extensions if ext.top_node]


def split_extensions(extensions: Iterable[Extension]) -> SplitExtensions:
    """
    Split extensions by `kind`.

    Raises:
        TypeError: if an item is not an `Extension` instance.
    """
    split = SplitExtensions()
    for ext in extensions:
        if not isinstance(ext, Extension):
            raise TypeError(f"Expected an Extension instance, got {type(ext).__name__}")
        if ext.kind == ExtensionKind.NODE:
            split.node_extensions.append(ext)
        elif ext.kind == ExtensionKind.MARK:
            split.mark_extensions.append(ext)
        else:
            split.base_extensions.append(ext)
    return split
