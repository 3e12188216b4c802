"""Statement parsing utilities for fslang.

These functions operate on a `fslang.parser.parser.Parser` instance and
handle the four command forms of the language. Each routine consumes its
command's line including the trailing terminator.


File: statements.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from fslang import lexer
from fslang.exceptions import ParseError
from fslang.nodes import Append, Print, Read, Statement, Write

if TYPE_CHECKING:
    from fslang.parser import Parser


def parse_statement(parser: 'Parser') -> Statement:
    """
    Dispatch on the leading keyword of a statement.

    Raises:
        ParseError: If the leading token is not a command keyword.
    """
    tok = parser.curr_token
    if tok.type == lexer.READ:
        return parser.parse_read()
    if tok.type == lexer.WRITE:
        return parser.parse_write()
    if tok.type == lexer.PRINT:
        return parser.parse_print()
    if tok.type == lexer.APPEND:
        return parser.parse_append()
    raise ParseError(repr(tok))


def parse_read(parser: 'Parser') -> Read:
    """
    Parse a file read into a variable.

    Syntax:
        READ <path> -> <identifier>

    Returns:
        Read: (path, dest)
    """
    parser.eat(lexer.READ)
    path = parser.expect_identifier()
    parser.skip()  # '->'
    dest = parser.expect_identifier()
    parser.skip()  # EOL
    return Read(path, dest)


def parse_write(parser: 'Parser') -> Write:
    """
    Parse a file write.

    Syntax:
        WRITE <path> <string-literal | identifier>

    Returns:
        Write: (path, content)
    """
    parser.eat(lexer.WRITE)
    path = parser.expect_identifier()
    content = parser.expect_operand()
    parser.skip()
    return Write(path, content)


def parse_print(parser: 'Parser') -> Print:
    """
    Parse an output statement.

    Syntax:
        PRINT <string-literal | identifier>
    """
    parser.eat(lexer.PRINT)
    content = parser.expect_operand()
    parser.skip()
    return Print(content)


def parse_append(parser: 'Parser') -> Append:
    """
    Parse a string concatenation into a variable.

    Syntax:
        APPEND <string-literal | identifier> <string-literal | identifier> -> <identifier>

    Returns:
        Append: (left, right, dest)
    """
    parser.eat(lexer.APPEND)
    left = parser.expect_operand()
    right = parser.expect_operand()
    parser.skip()  # '->'
    dest = parser.expect_identifier()
    parser.skip()
    return Append(left, right, dest)
