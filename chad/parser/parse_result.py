# Chad CLI Arguments — (c) 2025 rtj.dev LLC — MIT Licensed
"""The raw, unvalidated output of the flag splitter."""
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class ParseResult:
    """
    Flags and positionals exactly as they appeared in the input.

    Attributes:
        flags (dict[str, str]): Flag name to raw value, in encounter order.
            Presence-only flags map to "".
        positionals (list[str]): Positional arguments in encounter order.
    """

    flags: dict[str, str] = field(default_factory=dict)
    positionals: list[str] = field(default_factory=list)
