# Chad CLI Arguments — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Tagged results of one parse call.

- `Success(result)`: validation passed.
- `HelpRequested()`: `--help` was supplied; nothing else was checked.
- `Failure(error)`: the first violated rule, with its `kind` and `context`.

Callers branch with `isinstance` or a `match` statement and decide themselves
how to report and whether to exit.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from chad.exceptions import ArgumentParseError, FailureKind
from chad.parser.validated_result import ValidatedResult


@dataclass(frozen=True)
class Success:
    result: ValidatedResult


@dataclass(frozen=True)
class HelpRequested:
    pass


@dataclass(frozen=True)
class Failure:
    error: ArgumentParseError

    @property
    def kind(self) -> FailureKind:
        return self.error.kind

    @property
    def context(self) -> dict[str, Any]:
        return self.error.context

    @property
    def message(self) -> str:
        return self.error.message


Outcome = Union[Success, HelpRequested, Failure]
