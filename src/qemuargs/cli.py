"""
qemuargs command-line interface.

Usage:
    qemuargs object memory-backend-ram mem0 --input props.yaml
    echo '{"data": "abc,def"}' | qemuargs object secret sec0
    qemuargs luks sec0 --input encryption.json
    qemuargs version
"""
from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List, Optional

import yaml

from qemuargs import CommandLineError, __version__, build_object_arg, luks_opts
from qemuargs.serialization import (
    encryption_from_json,
    encryption_from_yaml,
    load_encryption,
    load_props,
    value_from_json,
    value_from_yaml,
)

_LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Configure stdlib logging; falls back to $QEMUARGS_LOG_LEVEL, then WARNING."""
    lvl = (level or os.environ.get("QEMUARGS_LOG_LEVEL") or "WARNING").upper()
    logging.basicConfig(level=getattr(logging, lvl, logging.WARNING), format=_LOG_FORMAT)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="qemuargs",
        description="Build QEMU command-line arguments from JSON or YAML",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command")

    obj_p = sub.add_parser("object", help="Build an -object argument")
    obj_p.add_argument("type", help="QEMU object type (e.g. secret)")
    obj_p.add_argument("alias", help="Object id")
    obj_p.add_argument("--input", "-i", metavar="FILE",
                       help="Read properties from FILE instead of stdin")
    obj_p.add_argument("--format", "-f", choices=["json", "yaml"],
                       help="Input format (default: from file suffix, else json)")

    luks_p = sub.add_parser("luks", help="Build LUKS encryption options")
    luks_p.add_argument("alias", help="Id of the key secret object")
    luks_p.add_argument("--input", "-i", metavar="FILE",
                        help="Read encryption fields from FILE instead of stdin")
    luks_p.add_argument("--format", "-f", choices=["json", "yaml"],
                        help="Input format (default: from file suffix, else json)")

    sub.add_parser("version", help="Print version and exit")

    return parser


def _read_stdin() -> str:
    if sys.stdin.isatty():
        print("qemuargs: reading from stdin (Ctrl-D to end)...", file=sys.stderr)
    return sys.stdin.read()


def _cmd_object(args: argparse.Namespace) -> None:
    if args.input:
        props = load_props(args.input, args.format)
    elif args.format == "yaml":
        props = value_from_yaml(_read_stdin())
    else:
        props = value_from_json(_read_stdin())
    print(build_object_arg(args.type, args.alias, props))


def _cmd_luks(args: argparse.Namespace) -> None:
    if args.input:
        enc = load_encryption(args.input, args.format)
    elif args.format == "yaml":
        enc = encryption_from_yaml(_read_stdin())
    else:
        enc = encryption_from_json(_read_stdin())
    print(luks_opts(enc, args.alias))


def main(argv: Optional[List[str]] = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging("DEBUG" if args.verbose else None)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    if args.command == "version":
        print(f"qemuargs {__version__}")
        return

    try:
        if args.command == "object":
            _cmd_object(args)
        elif args.command == "luks":
            _cmd_luks(args)
    except CommandLineError as e:
        print(f"qemuargs: error [{e.kind.value}]: {e}", file=sys.stderr)
        sys.exit(2)
    except (ValueError, TypeError, yaml.YAMLError) as e:
        # json.JSONDecodeError is a ValueError
        print(f"qemuargs: invalid input: {e}", file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    main()
