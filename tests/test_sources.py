from pathlib import Path

import pytest

from argscan.core import sources
from argscan.core.optspec import OptionSpec


def test_read_argument_file_keeps_empty_lines(tmp_path: Path):
    path = tmp_path / "args.txt"
    path.write_bytes(b"-h\n\nlast line \r\nfinal")
    assert sources.read_argument_file(path) == ["-h", "", "last line ", "final"]


def test_read_argument_file_handles_trailing_newline_and_empty_file(tmp_path: Path):
    path = tmp_path / "args.txt"
    path.write_text("one\n\n", encoding="utf-8")
    assert sources.read_argument_file(path) == ["one", ""]

    empty = tmp_path / "empty.txt"
    empty.write_text("", encoding="utf-8")
    assert sources.read_argument_file(empty) == []


def test_read_argument_file_accepts_bare_carriage_returns(tmp_path: Path):
    path = tmp_path / "args.txt"
    path.write_bytes(b"a\rb\r")
    assert sources.read_argument_file(path) == ["a", "b"]


def test_read_argument_file_rejects_undecodable_content(tmp_path: Path):
    path = tmp_path / "binary.txt"
    path.write_bytes(b"\xff\xfe\x00bad")
    with pytest.raises(sources.UnreadableArgumentFile):
        sources.read_argument_file(path)


def test_resolve_arguments_without_sentinel_is_verbatim():
    argv = ["-h", "@notfirst"]
    assert sources.resolve_arguments(argv) == ("-h", "@notfirst")
    assert sources.resolve_arguments([]) == ()
    assert sources.resolve_arguments(["", "@x"]) == ("", "@x")


def test_resolve_arguments_replaces_vector(tmp_path: Path):
    path = tmp_path / "args.txt"
    path.write_text("-x\nfile\n", encoding="utf-8")
    assert sources.resolve_arguments([f"@{path}", "dropped"]) == ("-x", "file")


def test_bare_sentinel_is_unreadable():
    with pytest.raises(sources.UnreadableArgumentFile):
        sources.resolve_arguments(["@"])


def test_load_source_accepts_paths_and_sequences(tmp_path: Path):
    path = tmp_path / "args.txt"
    path.write_text("a\n", encoding="utf-8")
    assert sources.load_source(path) == ("a",)
    assert sources.load_source(str(path)) == ("a",)
    assert sources.load_source(("x", "y")) == ("x", "y")


def test_option_spec_parsing_rules():
    spec = OptionSpec.parse(":a:hxa")
    assert spec.letters == ["a", "h", "x"]
    assert spec.requires_value("a") is True
    assert spec.requires_value("h") is False
    assert spec.recognises(":") is False
    assert spec.recognises("z") is False

    first_wins = OptionSpec.parse("ha:h:")
    assert first_wins.requires_value("h") is False
    assert OptionSpec.parse("x::").requires_value("x") is True
    assert str(first_wins) == "ha:h:"
