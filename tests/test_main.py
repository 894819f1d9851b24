import logging

import pytest

from chad.__main__ import get_parsers, main
from chad.version import __version__

SCHEMA = """
arguments:
  - name: file
    help: Output file
    default: out.txt
  - name: n
    default: 1
positionals: [input]
"""


@pytest.fixture(autouse=True)
def restore_logging():
    """Put the root logger back the way it was after main() reconfigures it."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def schema_path(tmp_path):
    path = tmp_path / "chad.yaml"
    path.write_text(SCHEMA)
    return str(path)


def run(argv):
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    return exc_info.value.code


def test_get_parsers():
    root_parser, subparsers = get_parsers()
    args = root_parser.parse_args(["check", "-s", "x.yaml", "--", "a", "--b"])
    assert args.command == "check"
    assert args.schema == "x.yaml"
    assert args.tokens == ["a", "--b"]
    assert set(subparsers.choices) == {"tokenize", "split", "check"}


def test_version(capsys):
    assert run(["--version"]) == 0
    assert f"chad v{__version__}" in capsys.readouterr().out


def test_no_command():
    assert run([]) == 1


def test_tokenize(capsys):
    assert run(["tokenize", "--", "-d 'b c' e"]) == 0
    out = capsys.readouterr().out
    assert "'-d'" in out
    assert "'b c'" in out
    assert "'e'" in out


def test_tokenize_unterminated(capsys):
    assert run(["tokenize", "a 'b"]) == 1
    assert "Unexpected end of input" in capsys.readouterr().out


def test_split(capsys):
    assert run(["split", "--", "-ab", "value", "pos"]) == 0
    out = capsys.readouterr().out
    assert "'value'" in out
    assert "['pos']" in out


def test_split_malformed(capsys):
    assert run(["split", "--", "-a-b"]) == 1
    assert "illegal character" in capsys.readouterr().out


def test_check_success(capsys, schema_path):
    code = run(["check", "-s", schema_path, "--", "input.txt", "--file", "r.txt"])
    assert code == 0
    out = capsys.readouterr().out
    assert "'r.txt'" in out
    assert "explicit" in out
    assert "defaulted" in out
    assert "['input.txt']" in out


def test_check_command_string(capsys, schema_path):
    assert run(["check", "-s", schema_path, "-c", "in --file 'my file'"]) == 0
    assert "'my file'" in capsys.readouterr().out


def test_check_failure(capsys, schema_path):
    assert run(["check", "-s", schema_path]) == 1
    out = capsys.readouterr().out
    assert "Expected 1, got 0." in out
    assert "usage: chad check <INPUT> [Flags]" in out


def test_check_help(capsys, schema_path):
    assert run(["check", "-s", schema_path, "--", "--help"]) == 0
    out = capsys.readouterr().out
    assert "usage: chad check <INPUT> [Flags]" in out
    assert "Error:" not in out


def test_check_bad_schema(capsys, tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("arguments:\n  - name: x\n  - name: x\n")
    assert run(["check", "-s", str(path)]) == 1
    assert "Could not load schema" in capsys.readouterr().out


def test_check_without_schema(capsys, monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("CHAD_SCHEMA", raising=False)
    monkeypatch.setattr("pathlib.Path.home", lambda: tmp_path)
    assert run(["check", "--", "a"]) == 1
    assert "No schema file found" in capsys.readouterr().out


def test_check_unparseable_yaml_schema(capsys, tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("arguments: [\n  - name: x\n")
    assert run(["check", "-s", str(path)]) == 1
    out = capsys.readouterr().out
    assert "Could not load schema" in out
    assert "YAML" in out
