import logging

import pytest

from flattoml.errors import ParseError
from flattoml.parser import RawLine, parse, scan_line


def test_scan_line_section_header() -> None:
    assert scan_line("  [ Server ]  ") == RawLine(kind="section", name="server")


def test_scan_line_pair_splits_on_first_equals() -> None:
    assert scan_line("url = a=b") == RawLine(kind="pair", name="url", value="a=b")


def test_scan_line_ignores_blank_comment_and_garbage() -> None:
    assert scan_line("") is None
    assert scan_line("   \t ") is None
    assert scan_line("# just a comment") is None
    assert scan_line("no separator here") is None
    assert scan_line("= value") is None


def test_parse_builds_sections() -> None:
    config = parse("[server]\nhost = \"localhost\"\nport = 8080\n\n[Client]\nretries=3\n")
    assert config.to_dict() == {
        "server": {"host": '"localhost"', "port": "8080"},
        "client": {"retries": "3"},
    }


def test_pairs_before_any_section_are_dropped() -> None:
    config = parse("orphan = 1\n[a]\nx = 2\n")
    assert config.to_dict() == {"a": {"x": "2"}}


def test_redeclared_section_discards_earlier_keys() -> None:
    config = parse("[a]\nx = 1\ny = 2\n[b]\nz = 3\n[A]\ny = 5\n")
    assert dict(config["a"]) == {"y": "5"}
    assert dict(config["b"]) == {"z": "3"}


def test_last_value_wins_within_section() -> None:
    config = parse("[a]\nx = 1\nx = 2\n")
    assert config["a"]["x"] == "2"


def test_empty_section_header_closes_current_section() -> None:
    config = parse("[a]\nx = 1\n[]\ny = 2\n")
    assert config.to_dict() == {"a": {"x": "1"}, "": {}}


def test_empty_section_is_present() -> None:
    config = parse("[empty]\n")
    assert "empty" in config
    assert dict(config["empty"]) == {}


def test_comment_inside_quotes_truncates_value() -> None:
    config = parse('[a]\nname = "a#b"\n')
    assert config["a"]["name"] == '"a'


def test_crlf_line_endings_are_trimmed() -> None:
    config = parse("[a]\r\nx = 1\r\n")
    assert config.to_dict() == {"a": {"x": "1"}}


def test_parse_accepts_bytes() -> None:
    config = parse("[a]\nname = café\n".encode("utf-8"))
    assert config["a"]["name"] == "café"


def test_parse_replaces_undecodable_bytes() -> None:
    config = parse(b"[a]\nname = \xff\n")
    assert config["a"]["name"] == "�"


def test_parse_is_total_on_garbage() -> None:
    config = parse("]]][[[\n=\n==\n[unterminated\n#\n\x00\n")
    assert len(config) == 0


def test_parse_logs_dropped_pairs(caplog) -> None:
    with caplog.at_level(logging.DEBUG, logger="flattoml.parser"):
        parse("orphan = 1\n[a]\n[a]\n")
    messages = [record.getMessage() for record in caplog.records]
    assert "pair_outside_section" in messages
    assert "section_redeclared" in messages


def test_parse_unknown_encoding_raises_parse_error() -> None:
    with pytest.raises(ParseError):
        parse(b"[a]\nx = 1\n", encoding="no-such-codec")


def test_trim_keeps_ascii_separator_controls() -> None:
    config = parse("[a]\nx = \x1f1\ny = 2　\n")
    assert config["a"]["x"] == "\x1f1"
    assert config["a"]["y"] == "2"
