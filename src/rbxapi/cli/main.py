# Copyright 2026 rbxapi Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the rbxapi command-line interface."""

import argparse
import logging
import sys
from pathlib import Path

from rbxapi.cli.config import CONFIG_FILE_NAME, ConfigError, ToolConfig, load_config
from rbxapi.export.artifact import ARTIFACT_SUFFIX, write_artifact
from rbxapi.export.properties import format_property_table, property_table
from rbxapi.model.items import Database
from rbxapi.parser.errors import ParseError
from rbxapi.parser.fast import parse_fast
from rbxapi.parser.lexer import lex

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the rbxapi CLI."""
    parser = argparse.ArgumentParser(
        prog="rbxapi",
        description="rbxapi - parse and inspect API dump files",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # check subcommand
    check_parser = subparsers.add_parser(
        "check",
        help="Check that an API dump is well-formed",
        description="Parse a dump with the strict scanner and report the first error.",
    )
    check_parser.add_argument("dump", help="Path to the API dump file")
    _add_config_argument(check_parser)

    # export subcommand
    export_parser = subparsers.add_parser(
        "export",
        help="Write a parsed dump as a JSON artifact",
        description="Parse a dump and write the resulting database as JSON.",
    )
    export_parser.add_argument("dump", help="Path to the API dump file")
    export_parser.add_argument(
        "output",
        nargs="?",
        default=None,
        help=f"Path of the artifact to write (default: the dump path with a '{ARTIFACT_SUFFIX}' suffix)",
    )
    export_parser.add_argument(
        "--fast",
        action="store_true",
        help="Use the fast parser, skipping malformed lines instead of failing",
    )
    _add_config_argument(export_parser)

    # properties subcommand
    properties_parser = subparsers.add_parser(
        "properties",
        help="List the settable properties of every class",
        description="Print each class with its properties and their value types.",
    )
    properties_parser.add_argument("dump", help="Path to the API dump file")
    properties_parser.add_argument(
        "--fast",
        action="store_true",
        help="Use the fast parser, skipping malformed lines instead of failing",
    )
    _add_config_argument(properties_parser)

    args = parser.parse_args()
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


class _CommandError(Exception):
    """Raised by command helpers after an error has been reported to the user."""


def _add_config_argument(subparser: argparse.ArgumentParser) -> None:
    subparser.add_argument(
        "--config",
        default=None,
        help=f"Path to a configuration file (default: {CONFIG_FILE_NAME} in the current directory, if present)",
    )


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    try:
        if args.command == "check":
            return _cmd_check(args)
        if args.command == "export":
            return _cmd_export(args)
        if args.command == "properties":
            return _cmd_properties(args)
    except _CommandError:
        return 1
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    """Handle the check subcommand."""
    # check always uses the strict scanner; the config is still validated.
    _load_config(args)
    database = _parse(_read_dump(Path(args.dump)), args.dump, fast=False)
    print(f"{args.dump}: {len(database)} item(s), no errors found.")
    return 0


def _cmd_export(args: argparse.Namespace) -> int:
    """Handle the export subcommand."""
    config = _load_config(args)
    dump = Path(args.dump)
    database = _parse(_read_dump(dump), args.dump, fast=args.fast or config.parser == "fast")
    output = Path(args.output) if args.output else dump.with_suffix(ARTIFACT_SUFFIX)
    try:
        write_artifact(database, output)
    except OSError as exc:
        print(f"Error: cannot write artifact '{output}': {exc}", file=sys.stderr)
        return 1
    print(f"Wrote {len(database)} item(s) to '{output}'.")
    return 0


def _cmd_properties(args: argparse.Namespace) -> int:
    """Handle the properties subcommand."""
    config = _load_config(args)
    database = _parse(_read_dump(Path(args.dump)), args.dump, fast=args.fast or config.parser == "fast")
    table = property_table(database, exclude_tags=config.exclude_tags)
    if table:
        print(format_property_table(table))
    return 0


def _load_config(args: argparse.Namespace) -> ToolConfig:
    """Load the configuration named by --config, or the default file when present."""
    if args.config is not None:
        path = Path(args.config)
    else:
        path = Path.cwd() / CONFIG_FILE_NAME
        if not path.exists():
            return ToolConfig()
    try:
        return load_config(path)
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise _CommandError from exc


def _read_dump(path: Path) -> str:
    # newline="" keeps \r\n terminators so reported columns match the file.
    try:
        with path.open(encoding="utf-8", newline="") as f:
            return f.read()
    except FileNotFoundError:
        print(f"Error: dump file '{path}' does not exist.", file=sys.stderr)
        raise _CommandError from None
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Error: cannot read dump file '{path}': {exc}", file=sys.stderr)
        raise _CommandError from exc


def _parse(source: str, label: str, *, fast: bool) -> Database:
    """Parse with the selected parser, reporting errors and warnings to the user."""
    if not fast:
        try:
            return lex(source)
        except ParseError as exc:
            print(f"Error: {label}: {exc}", file=sys.stderr)
            raise _CommandError from exc

    # Each skipped line is logged by the fast parser itself.
    result = parse_fast(source)
    if result.diagnostics:
        print(f"Warning: {label}: skipped {len(result.diagnostics)} malformed line(s).", file=sys.stderr)
    return result.database
