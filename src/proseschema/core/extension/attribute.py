#!/usr/bin/env python3
"""
Purpose:
    Defines the attribute declaration models used by extensions: the
    per-attribute `Attribute` settings, `GlobalAttributes` blocks that
    attach attributes to other element types, and the flattened
    `ExtensionAttribute` records produced by the attribute registry.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from proseschema.core.annotated_types import AttributeName, ExtensionName

# Extracts attribute values from a matched markup element
AttributeParser = Callable[[Any], Optional[Mapping[str, Any]]]

# Turns an element's attribute values into render-time markup attributes
AttributeRenderer = Callable[[Mapping[str, Any]], Optional[Mapping[str, Any]]]


class Attribute(BaseModel):
    """
    Settings for one attribute of a node or mark.

    Fields
    ------
    default:
        Value used when an element instance omits the attribute.
    rendered:
        Whether the attribute is extracted from parsed markup and
        re-emitted into render output.
    parse_html:
        Optional extractor `(element) -> {name: value, ...}`. When omitted,
        the attribute registry reads the same-named markup attribute.
    render_html:
        Optional renderer `(attrs) -> {markup_attr: value}`. When omitted,
        the attribute is rendered as-is under its own name.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    default: Any = Field(default=None, description="Default value.")
    rendered: bool = Field(default=True, description="Parse from and render to markup.")
    parse_html: Optional[AttributeParser] = Field(default=None, description="Markup extractor.")
    render_html: Optional[AttributeRenderer] = Field(default=None, description="Markup renderer.")


class GlobalAttributes(BaseModel):
    """Attributes a plain extension attaches to other element types, by name."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    types: list[ExtensionName] = Field(..., description="Element names receiving the attributes.")
    attributes: dict[AttributeName, Attribute] = Field(default_factory=dict)

    @field_validator("types")
    @classmethod
    def _validate_types(cls, types: list[str]) -> list[str]:
        if not types:
            raise ValueError("Global attributes must target at least one type")
        return types


class ExtensionAttribute(BaseModel):
    """
    One flattened attribute declaration, tagged with its owning element type.

    `type` is a plain foreign key to an extension name; records pointing at an
    unknown type are never attached to any element.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    type: str
    name: str
    attribute: Attribute

    def parse(self, element: Any) -> Mapping[str, Any]:
        """Extract this attribute from a matched markup element."""
        if self.attribute.parse_html is not None:
            return self.attribute.parse_html(element) or {}
        return {self.name: element.get(self.name)}
