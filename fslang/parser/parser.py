"""
Main parser entry point for fslang.

This module defines the `Parser` class, which walks the token list with a
cursor and one token of lookahead. The per-command grammar lives in
`fslang.parser.statements`.


File: parser.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from fslang import lexer
from fslang.exceptions import ParseError
from fslang.lexer import Token
from fslang.nodes import Statement

from . import statements as _stmt


def describe(token: Token | None) -> str:
    """
    Describe a token (or the end of input) for error messages.
    """
    if token is None:
        return "end of input"
    return repr(token)


class Parser:
    """fslang parser."""

    def __init__(self, tokens: list[Token]):
        """
        Initialize the parser with a list of tokens.

        Parameters:
            tokens (list): A list of Token instances.
        """
        self.tokens = tokens
        self.position = 0

    @property
    def curr_token(self) -> Token | None:
        """
        The token under the cursor, or None once the input is exhausted.
        """
        if self.position < len(self.tokens):
            return self.tokens[self.position]
        return None

    def advance(self) -> Token | None:
        """
        Return the current token and move the cursor past it.
        """
        token = self.curr_token
        if token is not None:
            self.position += 1
        return token

    def skip(self) -> None:
        """
        Consume one token without checking its type.

        Used for the arrow and line terminator positions. A token of any other
        type in those positions is swallowed rather than rejected.
        """
        self.advance()

    def eat(self, token_type: str) -> None:
        """
        Consume the current token if it matches the expected type.

        Parameters:
            token_type (str): The expected token type.

        Raises:
            ParseError: If the token does not match the expected type.
        """
        if self.curr_token is None or self.curr_token.type != token_type:
            raise ParseError(describe(self.curr_token), f"keyword {token_type}")
        self.advance()

    def expect_identifier(self) -> str:
        """
        Consume an identifier token and return its text.

        Raises:
            ParseError: If the current token is not an identifier.
        """
        token = self.curr_token
        if token is None or token.type != lexer.IDENTIFIER:
            raise ParseError(describe(token), "an identifier")
        self.advance()
        return token.value

    def expect_operand(self) -> str:
        """
        Consume a string literal or identifier token and return its payload.

        Raises:
            ParseError: If the current token is neither.
        """
        token = self.curr_token
        if token is None or token.type not in (lexer.STRING, lexer.IDENTIFIER):
            raise ParseError(describe(token), "a string literal or identifier")
        self.advance()
        return token.value

    # Statement wrappers
    def statement(self) -> Statement:
        """
        Parse a single statement.
        """
        return _stmt.parse_statement(self)

    def parse_read(self) -> Statement:
        """
        Parse a 'READ' statement.
        """
        return _stmt.parse_read(self)

    def parse_write(self) -> Statement:
        """
        Parse a 'WRITE' statement.
        """
        return _stmt.parse_write(self)

    def parse_print(self) -> Statement:
        """
        Parse a 'PRINT' statement used for output.
        """
        return _stmt.parse_print(self)

    def parse_append(self) -> Statement:
        """
        Parse an 'APPEND' statement.
        """
        return _stmt.parse_append(self)

    def parse(self) -> list[Statement]:
        """
        Parse the full input into a list of statements.
        """
        statements = []
        while self.curr_token is not None:
            if self.curr_token.type == lexer.EOL:
                self.eat(lexer.EOL)
                continue
            statements.append(self.statement())
        return statements
