# Chad CLI Arguments — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Numeric shape checks and conversions shared by the validator and the accessors.

The checks live here and the conversions run a check first: Python's `int()`
and `float()` accept surrounding whitespace and digit underscores, which the
command line grammar does not.

Functions:
- is_valid_int: True when every character is an ASCII digit, after an optional
  leading sign. A bare sign or an empty value passes, so a presence-only int
  flag gets through validation and only fails when it is read.
- is_int_literal: Like is_valid_int but requires at least one digit.
- is_valid_float: True for a base-10 floating point literal, `inf` or `nan`.
- coerce_int / coerce_float: Convert after checking, raising ValueError.
"""
import re

INT_PATTERN = re.compile(r"[+-]?[0-9]*")
INT_LITERAL_PATTERN = re.compile(r"[+-]?[0-9]+")
FLOAT_PATTERN = re.compile(
    r"""
    [+-]?
    (?:
        (?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?
        | inf(?:inity)?
        | nan
    )
    """,
    re.VERBOSE | re.IGNORECASE,
)


def is_valid_int(value: str) -> bool:
    return INT_PATTERN.fullmatch(value) is not None


def is_int_literal(value: str) -> bool:
    return INT_LITERAL_PATTERN.fullmatch(value) is not None


def is_valid_float(value: str) -> bool:
    return FLOAT_PATTERN.fullmatch(value) is not None


def coerce_int(value: str) -> int:
    """
    Convert a string to an integer.

    Raises:
        ValueError: If the value is not an optionally signed decimal integer.
    """
    if not is_int_literal(value):
        raise ValueError(f"'{value}' is not a decimal integer")
    return int(value)


def coerce_float(value: str) -> float:
    """
    Convert a string to a float.

    Raises:
        ValueError: If the value is not a base-10 floating point literal.
    """
    if not is_valid_float(value):
        raise ValueError(f"'{value}' is not a floating point number")
    return float(value)
