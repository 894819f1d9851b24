# Chad CLI Arguments — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Loads a `Schema` declaration from a YAML or TOML file.

Schema files declare flags and positionals only; they never supply flag values.

Example (YAML):
    arguments:
      - name: file
        help: Output file
        default: out.txt
      - name: count
        default: 5
        required: true
    positionals: [input]
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from chad.exceptions import SchemaRegistrationError
from chad.logger import logger
from chad.parser import ArgumentDefinition, DefaultKind, Schema


def find_schema_file() -> Path | None:
    candidates = [
        Path.cwd() / "chad.yaml",
        Path.cwd() / "chad.toml",
        Path.cwd() / ".chad.yaml",
        Path.cwd() / ".chad.toml",
        Path(os.environ.get("CHAD_SCHEMA", "chad.yaml")),
        Path.home() / ".config" / "chad" / "chad.yaml",
        Path.home() / ".config" / "chad" / "chad.toml",
    ]
    return next((p for p in candidates if p.is_file()), None)


class RawArgument(BaseModel):
    """Raw flag entry of a schema file."""

    name: str
    help: str = ""
    default: bool | int | float | str | None = None
    required: bool = False
    kind: str | None = None

    @field_validator("kind")
    @classmethod
    def validate_kind(cls, value: str | None) -> str | None:
        if value is None:
            return value
        return DefaultKind(value).value

    def to_definition(self) -> ArgumentDefinition:
        return ArgumentDefinition(
            name=self.name,
            help=self.help,
            default=self.default,
            required=self.required,
            kind=self.kind,
        )


class RawSchema(BaseModel):
    """Schema file model."""

    arguments: list[RawArgument] = Field(default_factory=list)
    positionals: int | list[str] = 0

    def to_schema(self) -> Schema:
        return Schema.register(
            [argument.to_definition() for argument in self.arguments],
            self.positionals,
        )


def schema_from_dict(raw_config: Any) -> Schema:
    """
    Build a `Schema` from an already decoded document.

    Raises:
        ValueError: If the document is not a mapping.
        SchemaRegistrationError: If the document or its definitions are invalid.
    """
    if not isinstance(raw_config, dict):
        raise ValueError(
            "Schema file must contain a dictionary.\n"
            "Example:\n"
            "arguments:\n"
            "  - name: 'file'\n"
            "    help: 'Output file'\n"
            "    default: 'out.txt'\n"
            "positionals: ['input']"
        )
    try:
        raw_schema = RawSchema.model_validate(raw_config)
    except ValidationError as error:
        raise SchemaRegistrationError(f"Invalid schema definition:\n{error}") from error
    return raw_schema.to_schema()


def load_schema(file_path: Path | str) -> Schema:
    """
    Load a schema from a YAML (`.yaml`, `.yml`) or TOML (`.toml`) file.

    Args:
        file_path (Path | str): Path to the schema file.

    Returns:
        Schema: The registered schema.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file format is unsupported or not a mapping.
        SchemaRegistrationError: If the file cannot be parsed or the
            declarations are invalid.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such schema file: {file_path}")

    suffix = path.suffix
    if suffix not in (".yaml", ".yml", ".toml"):
        raise ValueError(f"Unsupported schema format: {suffix}")

    with path.open("r", encoding="UTF-8") as schema_file:
        try:
            if suffix == ".toml":
                raw_config = toml.load(schema_file)
            else:
                raw_config = yaml.safe_load(schema_file)
        except (yaml.YAMLError, toml.TomlDecodeError) as error:
            raise SchemaRegistrationError(
                f"Schema file '{path}' is not valid {suffix[1:].upper()}: {error}"
            ) from error

    logger.debug("Loaded schema file '%s'.", path)
    return schema_from_dict(raw_config)
