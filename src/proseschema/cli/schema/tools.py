#!/usr/bin/env python3

import importlib
import json
from typing import Any, List

import yaml

from proseschema.core.app_context import AppContext
from proseschema.core.extension.extension import Extension
from proseschema.core.schema.assembler import build_schema_spec, describe_spec, get_schema


def register(subparsers):
    sp = subparsers.add_parser("schema", help="Schema utilities")
    sps = sp.add_subparsers(dest="schema_cmd")

    # default when user runs: `proseschema schema`
    def schema_default(args, ctx: AppContext) -> int:
        sp.print_help()
        return 1
    sp.set_defaults(func=schema_default)

    ssp = sps.add_parser("show", help="Show the assembled node/mark tables")
    ssp.add_argument("target", help="Extensions as MODULE:ATTRIBUTE (list or zero-arg callable)")
    ssp.add_argument("--format", choices=("json", "yaml"), default="json", help="Output format")
    ssp.add_argument("--strict", action="store_true", default=None, help="Reject ambiguous extension sets")
    ssp.set_defaults(func=show_schema)

    vsp = sps.add_parser("validate", help="Build the schema and report errors")
    vsp.add_argument("target", help="Extensions as MODULE:ATTRIBUTE (list or zero-arg callable)")
    vsp.add_argument("--strict", action="store_true", default=None, help="Reject ambiguous extension sets")
    vsp.set_defaults(func=validate_schema)


def load_extensions(target: str) -> List[Extension]:
    """
    Import `MODULE:ATTRIBUTE` and return its extensions.

    The attribute may be a sequence of extensions or a zero-argument callable
    returning one.

    Raises:
        ValueError: if the target is malformed.
        TypeError: if the attribute does not yield extensions.
    """
    module_name, sep, attr = target.partition(":")
    if not sep or not module_name or not attr:
        raise ValueError(f"Expected MODULE:ATTRIBUTE, got {target!r}")

    obj: Any = getattr(importlib.import_module(module_name), attr)
    if callable(obj):
        obj = obj()

    extensions = list(obj)
    bad = [type(e).__name__ for e in extensions if not isinstance(e, Extension)]
    if bad:
        raise TypeError(f"{target!r} yielded non-extension items: {bad}")
    return extensions


def _strict(args, ctx: AppContext) -> bool:
    return ctx.strict if args.strict is None else args.strict


def show_schema(args, ctx: AppContext) -> int:
    try:
        extensions = load_extensions(args.target)
        spec = build_schema_spec(extensions, strict=_strict(args, ctx))
    except Exception as e:
        print(f"Could not assemble {args.target!r}: {e}")
        return 1

    data = describe_spec(spec)
    if args.format == "yaml":
        print(yaml.safe_dump(data, sort_keys=False), end="")
    else:
        print(json.dumps(data, indent=2, default=str))
    return 0


def validate_schema(args, ctx: AppContext) -> int:
    try:
        extensions = load_extensions(args.target)
        schema = get_schema(extensions, strict=_strict(args, ctx))
    except Exception as e:
        print(f"Schema invalid: {args.target}\n{e}")
        return 1

    print(f"Valid schema: {args.target} ({len(schema.nodes)} nodes, {len(schema.marks)} marks)")
    return 0
