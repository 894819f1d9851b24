from dataclasses import FrozenInstanceError

import pytest

from chad.exceptions import SchemaRegistrationError
from chad.parser import ArgumentDefinition, DefaultKind


@pytest.mark.parametrize(
    "value, kind",
    [
        (True, DefaultKind.BOOL),
        (False, DefaultKind.BOOL),
        (5, DefaultKind.INT),
        (-5, DefaultKind.INT),
        (5.0, DefaultKind.FLOAT),
        ("x", DefaultKind.STRING),
    ],
)
def test_default_kind_of(value, kind):
    assert DefaultKind.of(value) is kind


def test_default_kind_of_unsupported():
    with pytest.raises(ValueError):
        DefaultKind.of([1, 2])


@pytest.mark.parametrize(
    "alias, kind",
    [
        ("int", DefaultKind.INT),
        ("integer", DefaultKind.INT),
        ("uint", DefaultKind.INT),
        ("Float", DefaultKind.FLOAT),
        ("double", DefaultKind.FLOAT),
        (" boolean ", DefaultKind.BOOL),
        ("string", DefaultKind.STRING),
        ("str", DefaultKind.STRING),
    ],
)
def test_default_kind_aliases(alias, kind):
    assert DefaultKind(alias) is kind


def test_default_kind_invalid():
    with pytest.raises(ValueError, match="Must be one of"):
        DefaultKind("decimal")


@pytest.mark.parametrize(
    "default, expected",
    [
        (5, "5"),
        (-3, "-3"),
        (2.5, "2.500000"),
        (True, "true"),
        (False, "false"),
        ("out.txt", "out.txt"),
        ("", ""),
    ],
)
def test_stringify_default(default, expected):
    assert ArgumentDefinition("x", default=default).stringify_default() == expected


def test_kind_inferred_once():
    argument = ArgumentDefinition("count", "How many", 5)
    assert argument.kind is DefaultKind.INT
    assert argument.required is False


def test_explicit_kind_coerces_default():
    assert ArgumentDefinition("ratio", default="0.5", kind="float").default == 0.5
    assert ArgumentDefinition("n", default="7", kind=DefaultKind.INT).default == 7
    assert ArgumentDefinition("v", default="TRUE", kind="bool").default is True


def test_float_kind_accepts_int_default():
    argument = ArgumentDefinition("ratio", default=5, kind="float")
    assert argument.default == 5.0
    assert argument.stringify_default() == "5.000000"


def test_missing_default_uses_zero_value():
    assert ArgumentDefinition("name").default == ""
    assert ArgumentDefinition("name").kind is DefaultKind.STRING
    assert ArgumentDefinition("n", kind="int").default == 0
    assert ArgumentDefinition("v", kind="bool").stringify_default() == "false"


@pytest.mark.parametrize(
    "default, kind",
    [
        ("abc", "int"),
        (True, "int"),
        ("maybe", "bool"),
        (1, "bool"),
        ("x.y", "float"),
        (5, "str"),
    ],
)
def test_incompatible_default(default, kind):
    with pytest.raises(SchemaRegistrationError):
        ArgumentDefinition("x", default=default, kind=kind)


def test_invalid_kind():
    with pytest.raises(SchemaRegistrationError, match="Invalid kind"):
        ArgumentDefinition("x", kind="decimal")


def test_unsupported_default_type():
    with pytest.raises(SchemaRegistrationError):
        ArgumentDefinition("x", default=[1])


@pytest.mark.parametrize("name", ["", "-x", "--file", "two words"])
def test_invalid_names(name):
    with pytest.raises(SchemaRegistrationError):
        ArgumentDefinition(name)


def test_flag_text():
    assert ArgumentDefinition("file").flag_text == "--file"
    assert ArgumentDefinition("v").flag_text == "-v"


def test_definition_is_immutable():
    argument = ArgumentDefinition("file")
    with pytest.raises(FrozenInstanceError):
        argument.name = "other"  # type: ignore[misc]
