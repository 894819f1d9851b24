from io import StringIO

import pytest
from rich.console import Console

from chad import ArgumentDefinition, Chad
from chad.exceptions import NotRegisteredError, SchemaRegistrationError
from chad.themes import get_chad_theme


@pytest.fixture
def console():
    return Console(file=StringIO(), width=120, theme=get_chad_theme())


@pytest.fixture
def chad(console):
    chad = Chad(program="prog", console=console)
    chad.register_args(
        [
            ArgumentDefinition("file", "The file to write", "out.txt"),
            ArgumentDefinition("n", "Repeat count", 1),
            ArgumentDefinition("ratio", "Scale factor", 0.5),
            ArgumentDefinition("v", "Verbose output", False),
        ],
        ["input", "times"],
    )
    return chad


def output(console: Console) -> str:
    return console.file.getvalue()


def test_parse_before_register(console):
    chad = Chad(console=console)
    with pytest.raises(NotRegisteredError):
        chad.parse_list([])
    with pytest.raises(NotRegisteredError):
        chad.parse_string("")
    with pytest.raises(NotRegisteredError):
        chad.parse([])


def test_register_twice(chad):
    with pytest.raises(SchemaRegistrationError):
        chad.register_args([], 0)


def test_parse_list(chad):
    result = chad.parse_list(["in.txt", "3", "--file", "result.txt", "-v"])
    assert result is chad.result
    assert chad.string_flag("file") == "result.txt"
    assert chad.int_flag("n") == 1
    assert chad.float_flag("ratio") == 0.5
    assert chad.bool_flag("v") is True
    assert chad.is_flag_present("file") is True
    assert chad.is_flag_default("n") is True
    assert chad.is_flag_default("file") is False


def test_positional_reads(chad):
    chad.parse_string("'my input.txt' 3")
    assert chad.string_index(0) == "my input.txt"
    assert chad.int_index(1) == 3
    assert chad.float_index(1) == 3.0
    assert chad.string_pos_name("input") == "my input.txt"
    assert chad.int_pos_name("times") == 3
    assert chad.float_pos_name("times") == 3.0


def test_parse_argv(chad, monkeypatch):
    monkeypatch.setattr("sys.argv", ["prog", "a", "2", "-n", "4"])
    chad.parse()
    assert chad.int_flag("n") == 4


def test_help_exits_zero(chad, console):
    with pytest.raises(SystemExit) as exc_info:
        chad.parse_list(["--help"])
    assert exc_info.value.code == 0
    text = output(console)
    assert "usage: prog <INPUT> <TIMES> [Flags]" in text
    assert "Error:" not in text


def test_declared_short_h_shows_help(console):
    chad = Chad(program="prog", console=console)
    chad.register_args([ArgumentDefinition("h", "Show help", False)])
    with pytest.raises(SystemExit) as exc_info:
        chad.parse_list(["-h"])
    assert exc_info.value.code == 0
    assert "usage: prog [Flags]" in output(console)


def test_defaulted_short_h_parses(console):
    chad = Chad(program="prog", console=console)
    chad.register_args([ArgumentDefinition("h", "Show help", False)])
    chad.parse_list([])
    assert chad.is_flag_default("h")
    assert output(console) == ""


def test_undeclared_short_h_is_unknown(chad, console):
    with pytest.raises(SystemExit) as exc_info:
        chad.parse_list(["a", "1", "-h"])
    assert exc_info.value.code == 1
    assert "Error:" in output(console)


def test_invalid_input_exits_one(chad, console):
    with pytest.raises(SystemExit) as exc_info:
        chad.parse_list(["only-one"])
    assert exc_info.value.code == 1
    text = output(console)
    assert "Error:" in text
    assert "Expected 2, got 1." in text
    assert "usage: prog" in text


def test_unterminated_quote_exits_one(chad, console):
    with pytest.raises(SystemExit) as exc_info:
        chad.parse_string("a 'b")
    assert exc_info.value.code == 1
    assert "Unexpected end of input" in output(console)


def test_accessor_failure_exits_one(chad, console):
    chad.parse_list(["in.txt", "x"])
    with pytest.raises(SystemExit) as exc_info:
        chad.int_index(1)
    assert exc_info.value.code == 1
    assert "Unable to parse value 'x'" in output(console)


def test_accessor_out_of_bounds_exits_one(chad):
    chad.parse_list(["in.txt", "1"])
    with pytest.raises(SystemExit):
        chad.string_index(5)
    with pytest.raises(SystemExit):
        chad.string_pos_name("missing")
    with pytest.raises(SystemExit):
        chad.string_flag("missing")


def test_read_before_parse(chad):
    with pytest.raises(NotRegisteredError):
        chad.string_flag("file")


def test_str(chad):
    assert str(chad) == (
        "Chad(program='prog', schema=Schema(flags=5, required=0, positional=2))"
    )
