# Chad CLI Arguments — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by chad.

User-input failures carry a `kind` (a `FailureKind` member) and a `context`
mapping with the structured fields needed to render a precise message, so the
engine can hand them back as `Failure` values instead of raising them further.

Schema errors are programmer errors: they signal a misuse of the API rather than
bad user input and are never converted into a `Failure`.

Exception Hierarchy:
- ChadError
    ├── SchemaError
    │   ├── SchemaRegistrationError
    │   └── NotRegisteredError
    ├── ArgumentParseError
    │   ├── UnterminatedQuoteError
    │   ├── MalformedFlagStackError
    │   ├── DuplicateFlagInStackError
    │   ├── PositionalCountMismatchError
    │   ├── UnknownFlagError
    │   ├── TypeMismatchError
    │   └── MissingRequiredFlagError
    └── ResultAccessError
        ├── IndexOutOfBoundsError
        ├── TypeConversionError
        └── FlagNotFoundError
"""
from __future__ import annotations

from enum import Enum
from typing import Any


class FailureKind(Enum):
    """Tags every user-facing failure the engine and accessors can report."""

    UNTERMINATED_QUOTE = "unterminated_quote"
    MALFORMED_FLAG_STACK = "malformed_flag_stack"
    DUPLICATE_FLAG_IN_STACK = "duplicate_flag_in_stack"
    POSITIONAL_COUNT_MISMATCH = "positional_count_mismatch"
    UNKNOWN_FLAG = "unknown_flag"
    TYPE_MISMATCH = "type_mismatch"
    MISSING_REQUIRED_FLAG = "missing_required_flag"
    INDEX_OUT_OF_BOUNDS = "index_out_of_bounds"
    TYPE_CONVERSION = "type_conversion"
    FLAG_NOT_FOUND = "flag_not_found"

    def __str__(self) -> str:
        return self.value


class ChadError(Exception):
    """Base exception for chad."""


class SchemaError(ChadError):
    """Raised when the schema API is misused."""


class SchemaRegistrationError(SchemaError):
    """Raised when argument definitions cannot be registered."""


class NotRegisteredError(SchemaError):
    """Raised when parsing is attempted before any arguments were registered."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            message
            or "cannot validate parsed args without registering any; "
            "use Chad.register_args(...) to do so."
        )


class _ContextError(ChadError):
    """Shared behaviour for failures that carry structured context."""

    kind: FailureKind

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context: dict[str, Any] = context


class ArgumentParseError(_ContextError):
    """Raised when user input cannot be tokenized, split or validated."""


class UnterminatedQuoteError(ArgumentParseError):
    kind = FailureKind.UNTERMINATED_QUOTE

    def __init__(self, quote: str, position: int) -> None:
        super().__init__(
            f"Unexpected end of input while parsing string opened with {quote} "
            f"at position {position}.",
            quote=quote,
            position=position,
        )
        self.quote = quote
        self.position = position


class MalformedFlagStackError(ArgumentParseError):
    kind = FailureKind.MALFORMED_FLAG_STACK

    def __init__(self, stack: str) -> None:
        super().__init__(
            f"Tried to parse illegal character '-' as a flag name in stack '{stack}'.",
            stack=stack,
        )
        self.stack = stack


class DuplicateFlagInStackError(ArgumentParseError):
    kind = FailureKind.DUPLICATE_FLAG_IN_STACK

    def __init__(self, flag: str, stack: str) -> None:
        super().__init__(
            f"Double definition of flag '{flag}' in flag stack '{stack}'.",
            flag=flag,
            stack=stack,
        )
        self.flag = flag
        self.stack = stack


class PositionalCountMismatchError(ArgumentParseError):
    kind = FailureKind.POSITIONAL_COUNT_MISMATCH

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(
            "Received invalid amount of positional arguments. "
            f"Expected {expected}, got {actual}.",
            expected=expected,
            actual=actual,
        )
        self.expected = expected
        self.actual = actual


class UnknownFlagError(ArgumentParseError):
    kind = FailureKind.UNKNOWN_FLAG

    def __init__(self, name: str) -> None:
        super().__init__(f"An unknown flag '{name}' was supplied.", name=name)
        self.name = name


class TypeMismatchError(ArgumentParseError):
    kind = FailureKind.TYPE_MISMATCH

    def __init__(self, flag: str, expected_kind: Any, value: str) -> None:
        super().__init__(
            f"Flag '{flag}' expects input of type '{expected_kind}' "
            f"but received '{value}'.",
            flag=flag,
            expected_kind=expected_kind,
            value=value,
        )
        self.flag = flag
        self.expected_kind = expected_kind
        self.value = value


class MissingRequiredFlagError(ArgumentParseError):
    kind = FailureKind.MISSING_REQUIRED_FLAG

    def __init__(self, name: str) -> None:
        super().__init__(f"Did not receive required flag '{name}'.", name=name)
        self.name = name


class ResultAccessError(_ContextError):
    """Raised when a typed read on a validated result fails."""


class IndexOutOfBoundsError(ResultAccessError):
    kind = FailureKind.INDEX_OUT_OF_BOUNDS

    def __init__(self, idx: int, length: int) -> None:
        super().__init__(
            f"Index {idx} is out of bounds for length {length}.",
            idx=idx,
            length=length,
        )
        self.idx = idx
        self.length = length


class TypeConversionError(ResultAccessError):
    kind = FailureKind.TYPE_CONVERSION

    def __init__(
        self,
        value: str,
        target: str,
        idx: int | None = None,
        key: str | None = None,
    ) -> None:
        where = f"index '{idx}'" if key is None else f"key '{key}'"
        super().__init__(
            f"Unable to parse value '{value}' at {where} to {target} type.",
            value=value,
            target=target,
            idx=idx,
            key=key,
        )
        self.value = value
        self.target = target
        self.idx = idx
        self.key = key


class FlagNotFoundError(ResultAccessError):
    kind = FailureKind.FLAG_NOT_FOUND

    def __init__(self, key: str) -> None:
        super().__init__(f"No value for key '{key}'.", key=key)
        self.key = key
