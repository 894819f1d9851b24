# Chad CLI Arguments — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Chad`, the stateful, exit-on-error front end for small command-line
programs.

Register the arguments once, parse, then read typed values. Bad input and
`--help` are handled here: the error (if any) and the usage are printed and
the process exits, so the program never sees an invalid result.

Usage:
    chad = Chad()
    chad.register_args(
        [ArgumentDefinition("file", "The file to be read", "default.txt", True)],
        ["input"],
    )
    chad.parse()  # or parse_string(...) / parse_list(...)
    path = chad.string_flag("file")
"""
from __future__ import annotations

import sys
from typing import Callable, Iterable, NoReturn, Sequence, TypeVar

from rich.console import Console

from chad.console import console as default_console
from chad.exceptions import NotRegisteredError, ResultAccessError, SchemaRegistrationError
from chad.help import HelpRenderer
from chad.logger import logger
from chad.parser import (
    ArgumentDefinition,
    Failure,
    HelpRequested,
    Outcome,
    Schema,
    ValidatedResult,
    parse_argv,
    parse_list,
    parse_string,
)

T = TypeVar("T")

SHORT_HELP = "h"


class Chad:
    """
    Registers a schema, parses input against it and exposes typed reads.

    Parse methods print help and exit with status 0 when `--help` is supplied,
    or when the program declared a flag named `h` and the user passed it.
    They print the error plus usage and exit with status 1 on invalid input.
    Accessors print and exit with status 1 when a read fails.
    """

    def __init__(self, program: str | None = None, console: Console | None = None):
        self.program: str | None = program
        self.console: Console = console or default_console
        self.schema: Schema | None = None
        self.result: ValidatedResult | None = None

    def register_args(
        self,
        arguments: Iterable[ArgumentDefinition],
        positionals: int | Sequence[str] = 0,
    ) -> Schema:
        """
        Register the flags and positionals to validate against.

        Raises:
            SchemaRegistrationError: If called twice or the definitions conflict.
        """
        if self.schema is not None:
            raise SchemaRegistrationError("Arguments are already registered")
        self.schema = Schema.register(arguments, positionals)
        return self.schema

    def _require_schema(self) -> Schema:
        if self.schema is None:
            raise NotRegisteredError()
        return self.schema

    def _require_result(self) -> ValidatedResult:
        if self.result is None:
            raise NotRegisteredError("Nothing has been parsed yet; call parse() first.")
        return self.result

    @property
    def help(self) -> HelpRenderer:
        return HelpRenderer(self._require_schema(), self.program, self.console)

    def exit_with_help(self, message: str = "", status: int = 1) -> NoReturn:
        self.help.render_error(message)
        sys.exit(status)

    def _handle(self, outcome: Outcome) -> ValidatedResult:
        if isinstance(outcome, HelpRequested):
            logger.info("Help requested.")
            self.help.render_help()
            sys.exit(0)
        if isinstance(outcome, Failure):
            logger.info("Invalid arguments (%s): %s", outcome.kind, outcome.message)
            self.exit_with_help(outcome.message)
        self.result = outcome.result
        if SHORT_HELP in self.result.flags and self.result.flags[SHORT_HELP].explicit:
            logger.info("Help requested through -%s.", SHORT_HELP)
            self.help.render_help()
            sys.exit(0)
        return self.result

    def parse_string(self, text: str) -> ValidatedResult:
        """Parse a shell-like command string."""
        return self._handle(parse_string(text, self._require_schema()))

    def parse_list(self, tokens: Sequence[str]) -> ValidatedResult:
        """Parse an explicit list of tokens."""
        return self._handle(parse_list(tokens, self._require_schema()))

    def parse(self, argv: Sequence[str] | None = None) -> ValidatedResult:
        """Parse `sys.argv[1:]`, or `argv` when given."""
        return self._handle(parse_argv(self._require_schema(), argv))

    def _read(self, getter: Callable[[ValidatedResult], T]) -> T:
        try:
            return getter(self._require_result())
        except ResultAccessError as error:
            self.exit_with_help(error.message)

    def string_index(self, idx: int) -> str:
        return self._read(lambda result: result.get_string_index(idx))

    def int_index(self, idx: int) -> int:
        return self._read(lambda result: result.get_int_index(idx))

    def float_index(self, idx: int) -> float:
        return self._read(lambda result: result.get_float_index(idx))

    def string_pos_name(self, name: str) -> str:
        return self._read(lambda result: result.get_string_positional(name))

    def int_pos_name(self, name: str) -> int:
        return self._read(lambda result: result.get_int_positional(name))

    def float_pos_name(self, name: str) -> float:
        return self._read(lambda result: result.get_float_positional(name))

    def string_flag(self, key: str) -> str:
        return self._read(lambda result: result.get_string_flag(key))

    def int_flag(self, key: str) -> int:
        return self._read(lambda result: result.get_int_flag(key))

    def float_flag(self, key: str) -> float:
        return self._read(lambda result: result.get_float_flag(key))

    def bool_flag(self, key: str) -> bool:
        """Check if a flag was supplied; synonymous with `is_flag_present`."""
        return self.is_flag_present(key)

    def is_flag_present(self, key: str) -> bool:
        return self._require_result().is_flag_present(key)

    def is_flag_default(self, key: str) -> bool:
        return self._require_result().is_flag_default(key)

    def __str__(self) -> str:
        return f"Chad(program={self.program!r}, schema={self.schema})"
