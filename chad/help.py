# Chad CLI Arguments — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Renders usage and flag help for a `Schema` using Rich.

Layout:
    usage: PROGRAM <INPUT> <OUTPUT> [Flags]

    Flags:
      --file     The file to be read     [Required]
      -v         Verbose output          [Default = false]
      --help     Print help              [Default = false]

Required flags are listed first, then the optional ones, with `--help` last.
"""
from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from chad.console import console as default_console
from chad.parser.argument import RESERVED_HELP, ArgumentDefinition, DefaultKind
from chad.parser.schema import Schema
from chad.utils import get_program_name


def _default_text(argument: ArgumentDefinition) -> str:
    if argument.kind is DefaultKind.STRING:
        return f'"{argument.default}"'
    return argument.stringify_default()


class HelpRenderer:
    """Formats usage and flag help for one schema."""

    def __init__(
        self,
        schema: Schema,
        program: str | None = None,
        console: Console | None = None,
    ) -> None:
        self.schema: Schema = schema
        self.program: str = program or get_program_name()
        self.console: Console = console or default_console

    def get_positionals_text(self) -> str:
        if self.schema.positional_names:
            names = self.schema.positional_names
        else:
            names = tuple(
                f"arg{index}" for index in range(1, self.schema.positional_count + 1)
            )
        return " ".join(f"<{name.upper()}>" for name in names)

    def get_usage(self) -> str:
        usage = f"usage: {self.program}"
        if self.schema.positional_count > 0:
            usage += f" {self.get_positionals_text()}"
        return f"{usage} [Flags]"

    def get_flag_rows(self) -> list[tuple[str, str, str]]:
        """Return `(flag, help, extra)` rows in display order."""
        required = [arg for arg in self.schema.user_definitions if arg.required]
        optional = [arg for arg in self.schema.user_definitions if not arg.required]
        ordered = required + optional + [self.schema.definitions[RESERVED_HELP]]

        rows = []
        for arg in ordered:
            if arg.required:
                extra = "Required"
            else:
                extra = f"Default = {_default_text(arg)}"
            rows.append((arg.flag_text, arg.help, extra))
        return rows

    def render_help(self) -> None:
        self.console.print(
            escape(self.get_usage()), style="chad.usage", highlight=False
        )
        self.console.print()
        self.console.print("Flags:", style="chad.heading")

        table = Table.grid(padding=(0, 2))
        table.add_column(style="chad.flag", no_wrap=True)
        table.add_column()
        table.add_column()
        for flag, help_text, extra in self.get_flag_rows():
            style = "chad.required" if extra == "Required" else "chad.default"
            table.add_row(
                f"  {flag}", escape(help_text), f"[{style}]{escape(f'[{extra}]')}[/]"
            )
        self.console.print(table)

    def render_error(self, message: str) -> None:
        """Print an error message followed by the full help."""
        if message.strip():
            self.console.print("Error:", style="chad.error", highlight=False)
            self.console.print(f"    {escape(message)}", highlight=False)
            self.console.print()
        self.render_help()
