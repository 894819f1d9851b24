import sys

import pytest

from chad.exceptions import FailureKind, SchemaRegistrationError, TypeConversionError
from chad.parser import (
    ArgumentDefinition,
    Failure,
    HelpRequested,
    Schema,
    Success,
    parse_argv,
    parse_list,
    parse_string,
)


@pytest.fixture
def schema():
    return Schema.register(
        [ArgumentDefinition("file", "Output file", "out.txt", False)], ["input"]
    )


def test_parse_list_success(schema):
    outcome = parse_list(["input.txt", "--file", "result.txt"], schema)
    assert isinstance(outcome, Success)
    assert outcome.result.as_dict() == {"file": "result.txt"}
    assert outcome.result.positionals == ("input.txt",)


def test_parse_list_defaults(schema):
    outcome = parse_list(["input.txt"], schema)
    assert isinstance(outcome, Success)
    assert outcome.result.as_dict() == {"file": "out.txt"}


@pytest.mark.parametrize(
    "tokens, kind, context",
    [
        ([], FailureKind.POSITIONAL_COUNT_MISMATCH, {"expected": 1, "actual": 0}),
        (["input.txt", "--nope", "x"], FailureKind.UNKNOWN_FLAG, {"name": "nope"}),
        (["input.txt", "-a-b"], FailureKind.MALFORMED_FLAG_STACK, {"stack": "a-b"}),
        (
            ["input.txt", "-ff"],
            FailureKind.DUPLICATE_FLAG_IN_STACK,
            {"flag": "f", "stack": "ff"},
        ),
    ],
)
def test_parse_list_failures(schema, tokens, kind, context):
    outcome = parse_list(tokens, schema)
    assert isinstance(outcome, Failure)
    assert outcome.kind is kind
    assert outcome.context == context
    assert outcome.message == str(outcome.error)


def test_help_requested(schema):
    assert isinstance(parse_list(["--help"], schema), HelpRequested)
    assert isinstance(parse_string("a b c --help", schema), HelpRequested)


def test_parse_string(schema):
    outcome = parse_string("'my input.txt' --file \"the result.txt\"", schema)
    assert isinstance(outcome, Success)
    assert outcome.result.get_string_flag("file") == "the result.txt"
    assert outcome.result.get_string_index(0) == "my input.txt"


def test_parse_string_unterminated_quote(schema):
    outcome = parse_string("input.txt --file 'oops", schema)
    assert isinstance(outcome, Failure)
    assert outcome.kind is FailureKind.UNTERMINATED_QUOTE
    assert outcome.context["quote"] == "'"


def test_parse_argv_defaults_to_sys_argv(schema, monkeypatch):
    monkeypatch.setattr(sys, "argv", ["prog", "input.txt", "--file", "x.txt"])
    outcome = parse_argv(schema)
    assert isinstance(outcome, Success)
    assert outcome.result.get_string_flag("file") == "x.txt"


def test_parse_argv_explicit(schema):
    outcome = parse_argv(schema, ("input.txt",))
    assert isinstance(outcome, Success)


def test_match_outcome(schema):
    match parse_list(["input.txt", "--file", "7"], schema):
        case Success(result):
            assert result.get_int_flag("file") == 7
        case _:
            pytest.fail("expected success")


def test_schema_errors_are_raised_not_returned():
    with pytest.raises(SchemaRegistrationError):
        Schema.register([ArgumentDefinition("a"), ArgumentDefinition("a")])


@pytest.mark.parametrize("tokens", [["-n"], ["-n", "+"]])
def test_digitless_int_flag_fails_only_when_read(tokens):
    schema = Schema.register([ArgumentDefinition("n", default=0)])
    outcome = parse_list(tokens, schema)
    assert isinstance(outcome, Success)
    with pytest.raises(TypeConversionError):
        outcome.result.get_int_flag("n")
