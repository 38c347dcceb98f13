"""Tests for reading syntax errors out of plaintext renderings."""

from plantuml_ui.core.syntax import (
    parse_line_number,
    parse_syntax_error,
    split_lines,
    strip_error_prefix,
)

from .conftest import SYNTAX_ERROR_BODY


def test_parse_syntax_error():
    error = parse_syntax_error(SYNTAX_ERROR_BODY)

    assert error.line_number == 5
    assert error.line_with_error == "expected '@enduml'"
    assert error.raw_error == SYNTAX_ERROR_BODY


def test_parse_syntax_error_ignores_trailing_newline():
    body = "[From string (line 2) ]\r\n\r\n@startuml\r\n Syntax error: foo\r\n"

    error = parse_syntax_error(body)

    assert error.line_number == 2
    assert error.line_with_error == "foo"
    assert error.raw_error == body


def test_parse_syntax_error_without_marker():
    assert parse_syntax_error("Bob -> Alice\n Syntax error: foo") is None
    assert parse_syntax_error("") is None


def test_parse_syntax_error_with_unreadable_line_number():
    error = parse_syntax_error("[From string (line x) ]\n Syntax error: Bob ->")

    assert error.line_number == 0
    assert error.line_with_error == "Bob ->"


def test_parse_line_number():
    assert parse_line_number("[From string (line 12) ]") == 12
    assert parse_line_number("[From string (line 7)]") == 7
    assert parse_line_number("[From string (line ") == 0


def test_strip_error_prefix():
    assert strip_error_prefix(" Syntax error: expected '@enduml'") == "expected '@enduml'"
    assert strip_error_prefix("Syntax error: Alice") == "Alice"
    assert strip_error_prefix("Alice -> ") == "Alice -> "


def test_split_lines():
    assert split_lines("a\r\nb\n\n") == ["a", "b"]
    assert split_lines("") == [""]
