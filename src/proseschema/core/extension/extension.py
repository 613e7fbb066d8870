#!/usr/bin/env python3
"""
Purpose:
    Defines the extension descriptor models: plain `Extension` (contributes
    global attributes only), `NodeExtension` and `MarkExtension` (each
    describing one element type of the document schema).
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, ClassVar, Iterable, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from proseschema.core.annotated_types import AttributeName, ExtensionName
from proseschema.core.constants import MARK_SPEC_FIELDS, NODE_SPEC_FIELDS
from proseschema.core.extension.attribute import Attribute, GlobalAttributes

# Callback signatures (all receive the extension's read-only options first)
GlobalAttributesFactory = Callable[[Mapping[str, Any]], Optional[Iterable[Union[GlobalAttributes, dict]]]]
AttributesFactory = Callable[[Mapping[str, Any]], Optional[Mapping[str, Union[Attribute, dict]]]]
ParseRulesFactory = Callable[[Mapping[str, Any]], Optional[Iterable[Mapping[str, Any]]]]
RenderCallback = Callable[..., Any]


class ExtensionKind(str, Enum):
    """
    Kinds of extension.

    - extension : plain extension, contributes no element of its own
    - node      : block/inline structural content
    - mark      : inline formatting span
    """

    EXTENSION = "extension"
    NODE = "node"
    MARK = "mark"


# --- Models --- #

class Extension(BaseModel):
    """
    Plain extension.

    Plain extensions never become schema elements; they can only attach
    attributes to other element types through `global_attributes` /
    `add_global_attributes`.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")
    kind: ClassVar[ExtensionKind] = ExtensionKind.EXTENSION

    name: ExtensionName = Field(..., description="Unique identifier; the schema table key.")
    options: dict[str, Any] = Field(default_factory=dict, description="Opaque configuration bag.")

    global_attributes: list[GlobalAttributes] = Field(default_factory=list)
    add_global_attributes: Optional[GlobalAttributesFactory] = Field(default=None)

    @property
    def context(self) -> Mapping[str, Any]:
        """Read-only view of `options` handed to every callback."""
        return MappingProxyType(self.options)

    def resolve_global_attributes(self) -> list[GlobalAttributes]:
        """Declared global attributes followed by those produced by `add_global_attributes`."""
        resolved = list(self.global_attributes)
        if self.add_global_attributes is not None:
            produced = self.add_global_attributes(self.context) or []
            resolved.extend(GlobalAttributes.model_validate(g) for g in produced)
        return resolved


class ElementExtension(Extension):
    """
    Shared base for extensions that contribute an element (node or mark).

    Attributes:
        attributes: declared attributes of the element.
        add_attributes: optional factory `(options) -> {name: Attribute}`;
            its entries come after (and override) the declared ones.
        parse_html: optional factory `(options) -> [parse rule, ...]`.
        render_html: optional `(options, *, element, attributes) -> descriptor`.
    """

    SPEC_FIELDS: ClassVar[tuple[str, ...]] = ()

    attributes: dict[AttributeName, Attribute] = Field(default_factory=dict)
    add_attributes: Optional[AttributesFactory] = Field(default=None)

    group: Optional[str] = Field(default=None, description="Group name(s), space separated.")

    parse_html: Optional[ParseRulesFactory] = Field(default=None)
    render_html: Optional[RenderCallback] = Field(default=None)

    def resolve_attributes(self) -> dict[str, Attribute]:
        """Declared attributes merged with the `add_attributes` result."""
        resolved: dict[str, Attribute] = dict(self.attributes)
        if self.add_attributes is not None:
            produced = self.add_attributes(self.context) or {}
            for name, attribute in produced.items():
                resolved[name] = Attribute.model_validate(attribute)
        return resolved

    def structural_fields(self) -> dict[str, Any]:
        """The kind-specific spec fields, in emission order (unset ones are None)."""
        return {field: getattr(self, field) for field in self.SPEC_FIELDS}

    def parse_rules(self) -> Optional[list[Mapping[str, Any]]]:
        """Invoke `parse_html` with read-only options; None when undeclared or empty."""
        if self.parse_html is None:
            return None
        rules = self.parse_html(self.context)
        return list(rules) if rules is not None else None

    def render(self, element: Any, attributes: Mapping[str, Any]) -> Any:
        """Invoke `render_html` with read-only options and the render payload."""
        return self.render_html(self.context, element=element, attributes=attributes)


class NodeExtension(ElementExtension):
    """Extension describing a node type (block or inline structural content)."""

    kind: ClassVar[ExtensionKind] = ExtensionKind.NODE
    SPEC_FIELDS: ClassVar[tuple[str, ...]] = NODE_SPEC_FIELDS

    content: Optional[str] = Field(default=None, description="Content expression.")
    marks: Optional[str] = Field(default=None, description="Allowed marks expression.")
    inline: Optional[bool] = None
    atom: Optional[bool] = None
    selectable: Optional[bool] = None
    draggable: Optional[bool] = None
    code: Optional[bool] = None
    defining: Optional[bool] = None
    isolating: Optional[bool] = None

    top_node: bool = Field(default=False, description="Marks the document root type.")


class MarkExtension(ElementExtension):
    """Extension describing a mark type (inline formatting span)."""

    kind: ClassVar[ExtensionKind] = ExtensionKind.MARK
    SPEC_FIELDS: ClassVar[tuple[str, ...]] = MARK_SPEC_FIELDS

    inclusive: Optional[bool] = None
    excludes: Optional[str] = Field(default=None, description="Excluded marks expression.")
    spanning: Optional[bool] = None
