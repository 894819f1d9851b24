# Chad CLI Arguments — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Partitions a token sequence into named flags and positionals.

Scheme:
    --file filename.txt -> file: "filename.txt"
    -file filename.txt  -> f: "", i: "", l: "", e: "filename.txt"
        The value goes to `e`, the last flag of the stack.
    -V                  -> V: ""
        Presence-only; a boolean read of `V` reports True.
    anything else       -> positional

A flag only takes the next token as its value when that token exists and does
not start with `-`. There is no `--name=value` form.

Repeated names from different tokens overwrite each other, last one wins.
Repeating a name inside one short-flag stack is an error.
"""
from __future__ import annotations

from typing import Sequence

from chad.exceptions import DuplicateFlagInStackError, MalformedFlagStackError
from chad.logger import logger
from chad.parser.parse_result import ParseResult


def _is_long_flag(token: str) -> bool:
    return token.startswith("--") and len(token) >= 3


def _is_flag_stack(token: str) -> bool:
    return token.startswith("-") and len(token) >= 2


def _takes_value(tokens: Sequence[str], index: int) -> bool:
    """Check whether the token after `index` can be consumed as a value."""
    return index + 1 < len(tokens) and not tokens[index + 1].startswith("-")


def _expand_flag_stack(
    stack: str, value: str | None, flags: dict[str, str]
) -> None:
    """Assign every character of `stack` as a flag; only the last one gets `value`."""
    seen: set[str] = set()
    for position, name in enumerate(stack):
        if name == "-":
            raise MalformedFlagStackError(stack)
        if name in seen:
            raise DuplicateFlagInStackError(name, stack)
        seen.add(name)
        is_last = position == len(stack) - 1
        flags[name] = value if is_last and value is not None else ""


def split_flags(tokens: Sequence[str]) -> ParseResult:
    """
    Classify each token as a long flag, a short-flag stack or a positional.

    Args:
        tokens (Sequence[str]): Tokens from the tokenizer, a list, or argv.

    Returns:
        ParseResult: Flag values (all strings) and positionals in order.

    Raises:
        MalformedFlagStackError: If a short-flag stack contains `-`.
        DuplicateFlagInStackError: If a short-flag stack repeats a character.
    """
    result = ParseResult()
    skip_next = False

    for index, token in enumerate(tokens):
        if skip_next:
            skip_next = False
            continue

        if _is_long_flag(token):
            name = token[2:]
            if _takes_value(tokens, index):
                result.flags[name] = tokens[index + 1]
                skip_next = True
            else:
                result.flags[name] = ""
        elif _is_flag_stack(token):
            value = None
            if _takes_value(tokens, index):
                value = tokens[index + 1]
                skip_next = True
            _expand_flag_stack(token[1:], value, result.flags)
        else:
            result.positionals.append(token)

    logger.debug(
        "Split %d token(s) into %d flag(s) and %d positional(s).",
        len(tokens),
        len(result.flags),
        len(result.positionals),
    )
    return result
