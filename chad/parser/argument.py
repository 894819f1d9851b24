# Chad CLI Arguments — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ArgumentDefinition`, the immutable description of one named flag, and
`DefaultKind`, the closed set of value kinds a flag's default can take.

The kind is fixed once, when the definition is created, and everything
downstream (type compatibility checks, default stringification, help output)
dispatches on it instead of inspecting the default value again.

Example:
    ArgumentDefinition("count", "How many", default=5)
    → kind=DefaultKind.INT, stringify_default() == "5"

    ArgumentDefinition("ratio", default="0.5", kind="float")
    → kind=DefaultKind.FLOAT, default == 0.5
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from chad.exceptions import SchemaRegistrationError

DefaultValue = Union[str, bool, int, float]

RESERVED_HELP = "help"


class DefaultKind(Enum):
    """
    The value kind implied by an argument's default.

    Members:
        INT: Signed or unsigned integer, decimal on the command line.
        FLOAT: Base-10 floating point number.
        BOOL: Presence-only flag; any supplied string is accepted.
        STRING: Any string.

    Aliases:
        - "integer", "uint" → "int"
        - "double" → "float"
        - "boolean" → "bool"
        - "string" → "str"
    """

    INT = "int"
    FLOAT = "float"
    BOOL = "bool"
    STRING = "str"

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "integer": "int",
            "uint": "int",
            "double": "float",
            "boolean": "bool",
            "string": "str",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> DefaultKind:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    @classmethod
    def of(cls, value: Any) -> DefaultKind:
        """Return the kind of a Python default value."""
        if isinstance(value, bool):
            return cls.BOOL
        if isinstance(value, int):
            return cls.INT
        if isinstance(value, float):
            return cls.FLOAT
        if isinstance(value, str):
            return cls.STRING
        raise ValueError(
            f"Unsupported default value type '{type(value).__name__}': {value!r}"
        )

    @property
    def label(self) -> str:
        """Human name used in messages."""
        return {
            DefaultKind.INT: "integer",
            DefaultKind.FLOAT: "float",
            DefaultKind.BOOL: "boolean",
            DefaultKind.STRING: "string",
        }[self]

    def __str__(self) -> str:
        return self.label


_ZERO_VALUES: dict[DefaultKind, DefaultValue] = {
    DefaultKind.INT: 0,
    DefaultKind.FLOAT: 0.0,
    DefaultKind.BOOL: False,
    DefaultKind.STRING: "",
}


def _normalize_default(name: str, default: Any, kind: DefaultKind) -> DefaultValue:
    if default is None:
        return _ZERO_VALUES[kind]
    try:
        if kind is DefaultKind.BOOL:
            if isinstance(default, bool):
                return default
            if isinstance(default, str) and default.lower() in ("true", "false"):
                return default.lower() == "true"
        elif kind is DefaultKind.INT:
            if isinstance(default, int) and not isinstance(default, bool):
                return default
            if isinstance(default, str):
                return int(default)
        elif kind is DefaultKind.FLOAT:
            if isinstance(default, (int, float)) and not isinstance(default, bool):
                return float(default)
            if isinstance(default, str):
                return float(default)
        elif isinstance(default, str):
            return default
    except ValueError as error:
        raise SchemaRegistrationError(
            f"Default value {default!r} for '{name}' cannot be coerced to "
            f"{kind.label}: {error}"
        ) from error
    raise SchemaRegistrationError(
        f"Default value {default!r} for '{name}' is not a {kind.label}"
    )


@dataclass(frozen=True)
class ArgumentDefinition:
    """
    Represents one named command-line flag.

    Attributes:
        name (str): Flag name without dashes; `--name` or `-n` on the command line.
        help (str): Help text for usage output.
        default (str | bool | int | float): Value used when the flag is absent.
        required (bool): True if the flag must always be supplied.
        kind (DefaultKind): Value kind, inferred from `default` when omitted.
    """

    name: str
    help: str = ""
    default: DefaultValue | None = None
    required: bool = False
    kind: DefaultKind | str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise SchemaRegistrationError("Argument name must be a non-empty string")
        if self.name.startswith("-"):
            raise SchemaRegistrationError(
                f"Argument name '{self.name}' must be given without leading dashes"
            )
        if any(char.isspace() for char in self.name):
            raise SchemaRegistrationError(
                f"Argument name '{self.name}' must not contain whitespace"
            )

        kind = self.kind
        if kind is None:
            kind = DefaultKind.STRING if self.default is None else None
        try:
            if kind is None:
                kind = DefaultKind.of(self.default)
            elif not isinstance(kind, DefaultKind):
                kind = DefaultKind(kind)
        except ValueError as error:
            raise SchemaRegistrationError(
                f"Invalid kind for argument '{self.name}': {error}"
            ) from error

        object.__setattr__(self, "kind", kind)
        object.__setattr__(
            self, "default", _normalize_default(self.name, self.default, kind)
        )

    def stringify_default(self) -> str:
        """Render the default the way it is stored in a validated result."""
        value = self.default
        if self.kind is DefaultKind.BOOL:
            return "true" if value else "false"
        if self.kind is DefaultKind.INT:
            return f"{value:d}"
        if self.kind is DefaultKind.FLOAT:
            return f"{value:f}"
        return str(value)

    @property
    def flag_text(self) -> str:
        """The flag as typed on the command line."""
        if len(self.name) > 1:
            return f"--{self.name}"
        return f"-{self.name}"
