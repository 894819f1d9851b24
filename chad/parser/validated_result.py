# Chad CLI Arguments — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ValidatedResult`, the schema-checked parse output, and its typed read
layer.

Every flag value is still a string; conversion happens on read and fails per
call. Each flag carries a `Provenance` so callers can tell a value the user
typed from one synthesized from the default.

Typed reads:
- by positional index: `get_string_index`, `get_int_index`, `get_float_index`
- by positional name: `get_string_positional`, `get_int_positional`,
  `get_float_positional`
- by flag name: `get_string_flag`, `get_int_flag`, `get_float_flag`
- presence: `get_bool_flag` / `is_flag_present`, and `is_flag_default`
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from chad.exceptions import (
    FlagNotFoundError,
    IndexOutOfBoundsError,
    TypeConversionError,
)
from chad.parser.schema import Schema
from chad.parser.utils import coerce_float, coerce_int


class Provenance(Enum):
    """Where a validated flag value came from."""

    EXPLICIT = "explicit"
    DEFAULTED = "defaulted"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class FlagValue:
    value: str
    provenance: Provenance

    @property
    def explicit(self) -> bool:
        return self.provenance is Provenance.EXPLICIT


@dataclass
class ValidatedResult:
    """
    Flags and positionals guaranteed to satisfy a `Schema`.

    Attributes:
        schema (Schema): The schema this result was validated against.
        flags (dict[str, FlagValue]): One entry per declared flag.
        positionals (tuple[str, ...]): Exactly `schema.positional_count` values.
    """

    schema: Schema
    flags: dict[str, FlagValue] = field(default_factory=dict)
    positionals: tuple[str, ...] = ()

    def as_dict(self) -> dict[str, str]:
        """Return the flag values as a plain name to string mapping."""
        return {name: flag.value for name, flag in self.flags.items()}

    def explicit_flags(self) -> list[str]:
        """Return the names of the flags the user actually supplied."""
        return [name for name, flag in self.flags.items() if flag.explicit]

    def _positional(self, idx: int) -> str:
        length = len(self.positionals)
        if not 0 <= idx < length:
            raise IndexOutOfBoundsError(idx, length)
        return self.positionals[idx]

    def _flag(self, key: str) -> str:
        if key not in self.flags:
            raise FlagNotFoundError(key)
        return self.flags[key].value

    def _positional_index(self, name: str) -> int:
        idx = self.schema.positional_index(name)
        if idx is None:
            raise FlagNotFoundError(name)
        return idx

    def get_string_index(self, idx: int) -> str:
        return self._positional(idx)

    def get_int_index(self, idx: int) -> int:
        value = self._positional(idx)
        try:
            return coerce_int(value)
        except ValueError:
            raise TypeConversionError(value, "integer", idx=idx) from None

    def get_float_index(self, idx: int) -> float:
        value = self._positional(idx)
        try:
            return coerce_float(value)
        except ValueError:
            raise TypeConversionError(value, "float", idx=idx) from None

    def get_string_positional(self, name: str) -> str:
        return self.get_string_index(self._positional_index(name))

    def get_int_positional(self, name: str) -> int:
        return self.get_int_index(self._positional_index(name))

    def get_float_positional(self, name: str) -> float:
        return self.get_float_index(self._positional_index(name))

    def get_string_flag(self, key: str) -> str:
        return self._flag(key)

    def get_int_flag(self, key: str) -> int:
        value = self._flag(key)
        try:
            return coerce_int(value)
        except ValueError:
            raise TypeConversionError(value, "integer", key=key) from None

    def get_float_flag(self, key: str) -> float:
        value = self._flag(key)
        try:
            return coerce_float(value)
        except ValueError:
            raise TypeConversionError(value, "float", key=key) from None

    def is_flag_present(self, key: str) -> bool:
        """True if the user supplied the flag, whatever its stored value."""
        flag = self.flags.get(key)
        return flag is not None and flag.explicit

    def get_bool_flag(self, key: str) -> bool:
        """Presence-based boolean read; synonymous with `is_flag_present`."""
        return self.is_flag_present(key)

    def is_flag_default(self, key: str) -> bool:
        """True if the stored value equals the stringified default of the flag."""
        flag = self.flags.get(key)
        definition = self.schema.get(key)
        if flag is None or definition is None:
            return False
        return flag.value == definition.stringify_default()
