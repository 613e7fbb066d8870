#!/usr/bin/env python3

import argparse
import sys

from proseschema.core.app_context import build_context
from proseschema.cli import config, schema

def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="proseschema", description="proseschema CLI Toolkit")
    subparsers = parser.add_subparsers(dest="command")

    # Register subcommands (they should accept ctx)
    schema.register(subparsers)
    config.register(subparsers)

    args = parser.parse_args(argv)
    if hasattr(args, "func"):
        ctx = build_context()  # built once
        return args.func(args, ctx)
    parser.print_help()
    return 1

if __name__ == "__main__":
    sys.exit(main())
