# Chad CLI Arguments — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Validates a `ParseResult` against a `Schema`.

Steps run in order and the first violation wins:
1. `--help` present → `HelpSignal`.
2. Positional count must equal the schema's expectation.
3. Every supplied flag must be declared.
4. Every supplied value must fit its flag's kind (integers and floats only;
   strings and booleans accept anything).
5. Required flags must be supplied; absent optional flags get their
   stringified default.
6. Anything left over is copied through.
7. Positionals are copied verbatim.

The validator performs no output and never exits the process.
"""
from __future__ import annotations

from chad.exceptions import (
    MissingRequiredFlagError,
    PositionalCountMismatchError,
    TypeMismatchError,
    UnknownFlagError,
)
from chad.logger import logger
from chad.parser.argument import RESERVED_HELP, ArgumentDefinition, DefaultKind
from chad.parser.parse_result import ParseResult
from chad.parser.schema import Schema
from chad.parser.utils import is_valid_float, is_valid_int
from chad.parser.validated_result import FlagValue, Provenance, ValidatedResult
from chad.signals import HelpSignal


def is_type_ok(definition: ArgumentDefinition, value: str) -> bool:
    """Check a raw string against the shape implied by the definition's kind."""
    if definition.kind is DefaultKind.INT:
        return is_valid_int(value)
    if definition.kind is DefaultKind.FLOAT:
        return is_valid_float(value)
    return True


def _check_positionals(parsed: ParseResult, schema: Schema) -> None:
    actual = len(parsed.positionals)
    if actual != schema.positional_count:
        raise PositionalCountMismatchError(schema.positional_count, actual)


def _check_unknown_flags(parsed: ParseResult, schema: Schema) -> None:
    for name in parsed.flags:
        if name not in schema:
            raise UnknownFlagError(name)


def _check_types(parsed: ParseResult, schema: Schema) -> None:
    for name, value in parsed.flags.items():
        definition = schema.definitions[name]
        if not is_type_ok(definition, value):
            raise TypeMismatchError(name, definition.kind, value)


def _resolve_flags(parsed: ParseResult, schema: Schema) -> dict[str, FlagValue]:
    resolved: dict[str, FlagValue] = {}
    for definition in schema:
        supplied = parsed.flags.get(definition.name)
        if supplied is not None:
            resolved[definition.name] = FlagValue(supplied, Provenance.EXPLICIT)
        elif definition.required:
            raise MissingRequiredFlagError(definition.name)
        else:
            resolved[definition.name] = FlagValue(
                definition.stringify_default(), Provenance.DEFAULTED
            )

    for name, value in parsed.flags.items():
        if name not in resolved:
            resolved[name] = FlagValue(value, Provenance.EXPLICIT)
    return resolved


def validate(parsed: ParseResult, schema: Schema) -> ValidatedResult:
    """
    Cross-check `parsed` against `schema`, filling defaults.

    Args:
        parsed (ParseResult): Output of the flag splitter.
        schema (Schema): The registered schema.

    Returns:
        ValidatedResult: One entry per declared flag (the reserved `help` flag
        excluded) and exactly the expected number of positionals.

    Raises:
        HelpSignal: If `--help` was supplied.
        PositionalCountMismatchError: If the positional count is wrong.
        UnknownFlagError: If a supplied flag is not declared.
        TypeMismatchError: If a supplied value does not fit its flag's kind.
        MissingRequiredFlagError: If a required flag is absent.
    """
    if RESERVED_HELP in parsed.flags:
        logger.debug("Help flag supplied; skipping validation.")
        raise HelpSignal()

    _check_positionals(parsed, schema)
    _check_unknown_flags(parsed, schema)
    _check_types(parsed, schema)
    flags = _resolve_flags(parsed, schema)
    flags.pop(RESERVED_HELP, None)

    logger.debug(
        "Validated %d flag(s) (%d explicit) and %d positional(s).",
        len(flags),
        sum(flag.explicit for flag in flags.values()),
        len(parsed.positionals),
    )
    return ValidatedResult(
        schema=schema,
        flags=flags,
        positionals=tuple(parsed.positionals),
    )
