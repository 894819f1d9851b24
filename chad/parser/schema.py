# Chad CLI Arguments — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Schema`, the immutable set of recognized flags and positionals that
parsed input is validated against.

A schema is created once with `Schema.register()` and read-only afterwards. The
reserved `help` flag is injected first by registration and cannot be declared
by the caller.

Example:
    schema = Schema.register(
        [ArgumentDefinition("file", "Output file", default="out.txt")],
        ["input"],
    )
    schema.positional_count  # 1
    "file" in schema         # True
"""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Sequence

from chad.exceptions import SchemaRegistrationError
from chad.logger import logger
from chad.parser.argument import RESERVED_HELP, ArgumentDefinition

HELP_ARGUMENT = ArgumentDefinition(RESERVED_HELP, "Print help", False, False)


@dataclass(frozen=True)
class Schema:
    """
    Name-keyed, registration-ordered flag definitions plus positional expectations.

    Use `Schema.register()` rather than constructing this directly.

    Attributes:
        definitions (Mapping[str, ArgumentDefinition]): Read-only view, `help` first.
        positional_count (int): Exact number of positionals expected.
        positional_names (tuple[str, ...]): Optional names for the positionals.
    """

    definitions: Mapping[str, ArgumentDefinition]
    positional_count: int = 0
    positional_names: tuple[str, ...] = ()

    @classmethod
    def register(
        cls,
        arguments: Iterable[ArgumentDefinition],
        positionals: int | Sequence[str] = 0,
    ) -> Schema:
        """
        Build a schema from argument definitions and a positional declaration.

        Args:
            arguments (Iterable[ArgumentDefinition]): Flags, in registration order.
            positionals (int | Sequence[str]): Either the expected positional count
                or the ordered positional names (the count is then their number).

        Raises:
            SchemaRegistrationError: On duplicate names, a user-defined `help`, or
                a positional name that collides with a flag name.
        """
        if isinstance(positionals, bool):
            raise SchemaRegistrationError("positionals must be an int or a list of names")
        if isinstance(positionals, int):
            if positionals < 0:
                raise SchemaRegistrationError(
                    f"Positional count must not be negative, got {positionals}"
                )
            names: tuple[str, ...] = ()
            count = positionals
        elif isinstance(positionals, str):
            raise SchemaRegistrationError(
                "positionals must be a list of names, not a single string"
            )
        else:
            names = tuple(positionals)
            count = len(names)

        definitions: dict[str, ArgumentDefinition] = {RESERVED_HELP: HELP_ARGUMENT}
        for argument in arguments:
            if not isinstance(argument, ArgumentDefinition):
                raise SchemaRegistrationError(
                    f"Expected an ArgumentDefinition, got {type(argument).__name__}"
                )
            if argument.name == RESERVED_HELP:
                raise SchemaRegistrationError(
                    f"'{RESERVED_HELP}' is reserved and registered automatically"
                )
            if argument.name in definitions:
                raise SchemaRegistrationError(
                    f"Tried to create flag '{argument.name}' twice"
                )
            definitions[argument.name] = argument

        for name in names:
            if not isinstance(name, str) or not name:
                raise SchemaRegistrationError(
                    f"Positional names must be non-empty strings, got {name!r}"
                )
            if name in definitions:
                raise SchemaRegistrationError(
                    f"Arg '{name}' is present in flags as well as positional args"
                )

        logger.debug(
            "Registered schema with %d flag(s) and %d positional(s).",
            len(definitions) - 1,
            count,
        )
        return cls(
            definitions=MappingProxyType(definitions),
            positional_count=count,
            positional_names=names,
        )

    def __contains__(self, name: object) -> bool:
        return name in self.definitions

    def __iter__(self) -> Iterator[ArgumentDefinition]:
        return iter(self.definitions.values())

    def __len__(self) -> int:
        return len(self.definitions)

    def get(self, name: str) -> ArgumentDefinition | None:
        return self.definitions.get(name)

    @property
    def user_definitions(self) -> list[ArgumentDefinition]:
        """All definitions except the reserved `help` flag."""
        return [arg for arg in self.definitions.values() if arg.name != RESERVED_HELP]

    def positional_index(self, name: str) -> int | None:
        """Return the index of the first positional called `name`, if any."""
        for index, positional_name in enumerate(self.positional_names):
            if positional_name == name:
                return index
        return None

    def __str__(self) -> str:
        required = sum(arg.required for arg in self.definitions.values())
        return (
            f"Schema(flags={len(self.definitions)}, required={required}, "
            f"positional={self.positional_count})"
        )
