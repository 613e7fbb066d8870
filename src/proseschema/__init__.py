from .core.extension.attribute import Attribute, ExtensionAttribute, GlobalAttributes
from .core.extension.extension import Extension, ExtensionKind, MarkExtension, NodeExtension
from .core.extension.registry import get_attributes_from_extensions, get_rendered_attributes, merge_attributes
from .core.extension.split import SplitExtensions, split_extensions
from .core.schema.assembler import SchemaAssemblyError, build_schema_spec, describe_spec, get_schema
from .core.schema.builder import build_mark_spec, build_node_spec, clean_up_schema_item
from .core.schema.parse_rule import inject_extension_attributes

__all__ = [
    "Attribute",
    "Extension",
    "ExtensionAttribute",
    "ExtensionKind",
    "GlobalAttributes",
    "MarkExtension",
    "NodeExtension",
    "SchemaAssemblyError",
    "SplitExtensions",
    "build_mark_spec",
    "build_node_spec",
    "build_schema_spec",
    "clean_up_schema_item",
    "describe_spec",
    "get_attributes_from_extensions",
    "get_rendered_attributes",
    "get_schema",
    "inject_extension_attributes",
    "merge_attributes",
    "split_extensions",
]
