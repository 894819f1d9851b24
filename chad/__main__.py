"""
Chad CLI Arguments

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging
import sys
from argparse import ArgumentParser, Namespace, _SubParsersAction
from typing import Any, Sequence

from rich.markup import escape
from rich.table import Table

from chad.config import find_schema_file, load_schema
from chad.console import console
from chad.exceptions import ArgumentParseError, ChadError
from chad.help import HelpRenderer
from chad.logger import logger
from chad.parser import (
    Failure,
    HelpRequested,
    parse_list,
    parse_string,
    split_flags,
    tokenize,
)
from chad.themes import OneColors
from chad.utils import setup_logging
from chad.version import __version__


def get_root_parser(prog: str = "chad") -> ArgumentParser:
    parser = ArgumentParser(
        prog=prog,
        description="Chad - tokenize, split and validate command lines.",
        epilog="Tip: put a chad.yaml next to your program to use 'check' without -s.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help=f"Enable debug logging for {prog}."
    )
    parser.add_argument("--version", action="store_true", help=f"Show {prog} version")
    return parser


def get_subparsers(parser: ArgumentParser) -> _SubParsersAction:
    return parser.add_subparsers(title="Chad Commands", dest="command")


def get_parsers() -> tuple[ArgumentParser, _SubParsersAction]:
    root_parser = get_root_parser()
    subparsers = get_subparsers(root_parser)

    tokenize_parser = subparsers.add_parser(
        "tokenize", help="Split a command string into tokens"
    )
    tokenize_parser.add_argument("text", help="The command string to tokenize")

    split_parser = subparsers.add_parser(
        "split", help="Split tokens into flags and positionals"
    )
    split_parser.add_argument(
        "tokens", nargs="*", help="Tokens to split (use -- before flags)"
    )

    check_parser = subparsers.add_parser(
        "check",
        help="Validate input against a schema file",
        description="Validate tokens or a command string against a YAML/TOML schema.",
        epilog="Without --schema, chad.yaml/chad.toml in the working directory is used.",
    )
    check_parser.add_argument("-s", "--schema", help="Path to the schema file")
    check_parser.add_argument(
        "-c", "--command-string", help="Validate this command string instead of tokens"
    )
    check_parser.add_argument(
        "tokens", nargs="*", help="Tokens to validate (use -- before flags)"
    )
    return root_parser, subparsers


def _print_error(message: str) -> None:
    console.print(f"[{OneColors.DARK_RED}]❌ {escape(message)}[/]", highlight=False)


def tokenize_command(args: Namespace) -> int:
    try:
        tokens = tokenize(args.text)
    except ArgumentParseError as error:
        _print_error(str(error))
        return 1
    for token in tokens:
        console.print(repr(token), markup=False, highlight=False)
    return 0


def split_command(args: Namespace) -> int:
    try:
        parsed = split_flags(args.tokens)
    except ArgumentParseError as error:
        _print_error(str(error))
        return 1
    table = Table(title="Flags")
    table.add_column("Flag")
    table.add_column("Value")
    for name, value in parsed.flags.items():
        table.add_row(escape(name), escape(repr(value)))
    console.print(table)
    console.print(f"Positionals: {parsed.positionals}", markup=False, highlight=False)
    return 0


def check_command(args: Namespace) -> int:
    schema_path = args.schema or find_schema_file()
    if schema_path is None:
        _print_error("No schema file found. Use --schema to point at one.")
        return 1
    try:
        schema = load_schema(schema_path)
    except (OSError, ValueError, ChadError) as error:
        _print_error(f"Could not load schema '{schema_path}': {error}")
        return 1

    if args.command_string is not None:
        outcome = parse_string(args.command_string, schema)
    else:
        outcome = parse_list(args.tokens, schema)

    renderer = HelpRenderer(schema, program="chad check", console=console)
    if isinstance(outcome, HelpRequested):
        renderer.render_help()
        return 0
    if isinstance(outcome, Failure):
        logger.info("Check failed (%s): %s", outcome.kind, outcome.message)
        renderer.render_error(outcome.message)
        return 1

    result = outcome.result
    table = Table(title="Flags")
    table.add_column("Flag")
    table.add_column("Value")
    table.add_column("Source")
    for name, flag in result.flags.items():
        style = "chad.explicit" if flag.explicit else "chad.defaulted"
        table.add_row(
            escape(name), escape(repr(flag.value)), f"[{style}]{flag.provenance}[/]"
        )
    console.print(table)
    console.print(
        f"Positionals: {list(result.positionals)}", markup=False, highlight=False
    )
    return 0


COMMANDS = {
    "tokenize": tokenize_command,
    "split": split_command,
    "check": check_command,
}


def main(argv: Sequence[str] | None = None) -> Any:
    root_parser, _ = get_parsers()
    args = root_parser.parse_args(argv)

    setup_logging(console_log_level=logging.DEBUG if args.verbose else logging.WARNING)

    if args.version:
        console.print(f"chad v{__version__}", markup=False, highlight=False)
        sys.exit(0)

    if not args.command:
        root_parser.print_help()
        sys.exit(1)

    sys.exit(COMMANDS[args.command](args))


if __name__ == "__main__":
    main()
