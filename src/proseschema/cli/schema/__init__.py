# cli/schema/__init__.py
from .tools import register, load_extensions, show_schema, validate_schema

__all__ = ["register", "load_extensions", "show_schema", "validate_schema"]
