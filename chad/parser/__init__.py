"""
Chad CLI Arguments

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .argument import ArgumentDefinition, DefaultKind
from .engine import parse_argv, parse_list, parse_string
from .flag_splitter import split_flags
from .outcome import Failure, HelpRequested, Outcome, Success
from .parse_result import ParseResult
from .schema import Schema
from .tokenizer import tokenize
from .validated_result import FlagValue, Provenance, ValidatedResult
from .validator import validate

__all__ = [
    "ArgumentDefinition",
    "DefaultKind",
    "Failure",
    "FlagValue",
    "HelpRequested",
    "Outcome",
    "ParseResult",
    "Provenance",
    "Schema",
    "Success",
    "ValidatedResult",
    "parse_argv",
    "parse_list",
    "parse_string",
    "split_flags",
    "tokenize",
    "validate",
]
