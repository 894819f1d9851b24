# Chad CLI Arguments — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Entry points that run the whole chain for each input source:

- `parse_string(text, schema)`: tokenize a shell-like string first.
- `parse_list(tokens, schema)`: an explicit list of strings.
- `parse_argv(schema, argv=None)`: the process arguments, program name excluded.

All three return an `Outcome`. Bad user input never raises from here; schema
misuse does.
"""
from __future__ import annotations

import sys
from typing import Sequence

from chad.exceptions import ArgumentParseError
from chad.logger import logger
from chad.parser.flag_splitter import split_flags
from chad.parser.outcome import Failure, HelpRequested, Outcome, Success
from chad.parser.schema import Schema
from chad.parser.tokenizer import tokenize
from chad.parser.validator import validate
from chad.signals import HelpSignal


def parse_list(tokens: Sequence[str], schema: Schema) -> Outcome:
    """Split and validate an explicit token list."""
    try:
        result = validate(split_flags(tokens), schema)
    except HelpSignal:
        return HelpRequested()
    except ArgumentParseError as error:
        logger.debug("Parse failed (%s): %s", error.kind, error)
        return Failure(error)
    return Success(result)


def parse_string(text: str, schema: Schema) -> Outcome:
    """Tokenize, split and validate a shell-like command string."""
    try:
        tokens = tokenize(text)
    except ArgumentParseError as error:
        logger.debug("Tokenizing failed (%s): %s", error.kind, error)
        return Failure(error)
    return parse_list(tokens, schema)


def parse_argv(schema: Schema, argv: Sequence[str] | None = None) -> Outcome:
    """Split and validate `argv`, defaulting to `sys.argv[1:]`."""
    if argv is None:
        argv = sys.argv[1:]
    return parse_list(list(argv), schema)
