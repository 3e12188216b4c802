"""Tests for the fslang parser."""
import pytest

from fslang.exceptions import ParseError
from fslang.lexer import (
    APPEND, ARROW, EOL, IDENTIFIER, PRINT, READ, STRING, WRITE, Token,
)
from fslang.nodes import Append, Print, Read, Write
from fslang.parser import Parser
from fslang.tests.utils import parse_source


def test_parse_token_list():
    tokens = [
        Token(READ), Token(IDENTIFIER, "input.txt"), Token(ARROW),
        Token(IDENTIFIER, "content"), Token(EOL),
        Token(WRITE), Token(IDENTIFIER, "output.txt"),
        Token(STRING, "Hello, World!"), Token(EOL),
        Token(PRINT), Token(STRING, "Hello, World!"), Token(EOL),
        Token(APPEND), Token(IDENTIFIER, "var1"), Token(STRING, "var2"),
        Token(ARROW), Token(IDENTIFIER, "result"), Token(EOL),
    ]
    assert Parser(tokens).parse() == [
        Read("input.txt", "content"),
        Write("output.txt", "Hello, World!"),
        Print("Hello, World!"),
        Append("var1", "var2", "result"),
    ]


def test_blank_lines_and_comments_are_skipped():
    source = (
        "\n"
        "# header comment\n"
        "\n"
        "PRINT a\n"
        "\n\n"
        "PRINT b # inline\n"
    )
    assert parse_source(source) == [Print("a"), Print("b")]


def test_comment_only_script_has_no_statements():
    assert parse_source("# nothing here\n") == []
    assert parse_source("") == []


def test_last_line_without_newline():
    assert parse_source('PRINT "done"') == [Print("done")]


def test_append_accepts_string_literal_operands():
    assert parse_source('APPEND "12" "34" -> x\n') == [Append("12", "34", "x")]


def test_read_missing_destination():
    with pytest.raises(ParseError, match="Expected an identifier") as exc:
        parse_source("READ foo\n")
    assert exc.value.expected == "an identifier"
    assert exc.value.found == "end of input"


def test_read_missing_destination_before_next_line():
    with pytest.raises(ParseError, match="Expected an identifier, got Token\\(PRINT\\)"):
        parse_source("READ foo\nPRINT x\n")


def test_read_path_must_be_identifier():
    with pytest.raises(ParseError, match="Expected an identifier"):
        parse_source('READ "input.txt" -> x\n')


def test_write_content_must_be_operand():
    with pytest.raises(ParseError, match="Expected a string literal or identifier"):
        parse_source("WRITE out.txt 42\n")


def test_print_without_operand():
    with pytest.raises(ParseError, match="string literal or identifier"):
        parse_source("PRINT\n")


def test_unexpected_leading_token():
    with pytest.raises(ParseError, match="Unexpected token") as exc:
        parse_source("content -> x\n")
    assert exc.value.expected is None


def test_parse_error_is_syntax_error():
    with pytest.raises(SyntaxError):
        parse_source("-> x\n")


def test_arrow_position_is_not_validated():
    # Whatever token sits where the arrow belongs is consumed unchecked
    assert parse_source("READ a b c\n") == [Read("a", "c")]


def test_trailing_token_is_swallowed():
    # A stray operand in the terminator position hides the missing newline
    source = 'PRINT "a" "b"\nPRINT "c"\n'
    assert parse_source(source) == [Print("a"), Print("c")]


def test_statements_are_immutable():
    stmt = parse_source("PRINT x\n")[0]
    with pytest.raises(AttributeError):
        stmt.content = "y"
