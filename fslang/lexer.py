"""Lexer for fslang.

This lexer performs a single pass over the source code using a combined
regular expression of named groups. Each match yields a :class:`Token`
containing its type and value. Tokens carry no source position.

Tokens cover the four command keywords (``READ``, ``WRITE``, ``PRINT``,
``APPEND``), identifiers (variable names and bare file paths), string
literals, integer and float literals, the ``->`` arrow and end-of-line
markers. Whitespace other than newlines is skipped, and ``#`` comments run to
the end of the line. Numeric literals are recognised but no statement
consumes them.


File: lexer.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import re

from fslang.exceptions import LexError

# Token types
READ = 'READ'
WRITE = 'WRITE'
PRINT = 'PRINT'
APPEND = 'APPEND'
IDENTIFIER = 'IDENTIFIER'
STRING = 'STRING'
INT = 'INT'
FLOAT = 'FLOAT'
ARROW = 'ARROW'
EOL = 'EOL'

KEYWORDS = {
    'READ': READ,
    'WRITE': WRITE,
    'PRINT': PRINT,
    'APPEND': APPEND,
}

ESCAPES = {
    'n': '\n',
    't': '\t',
    'r': '\r',
    '"': '"',
    '\\': '\\',
}


class Token:
    """
    Represents a lexical token with a type and value. Tokens are read-only.
    """
    __slots__ = ('_type', '_value')

    def __init__(self, type_, value=None):
        """
        Initialize a new token.

        Parameters:
            type_ (str): The token type.
            value (Any): The token value, or None for keywords, arrows and EOL.
        """
        self._type = type_
        self._value = value

    @property
    def type(self) -> str:
        return self._type

    @property
    def value(self):
        return self._value

    def __eq__(self, other) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        return self.type == other.type and self.value == other.value

    def __hash__(self) -> int:
        return hash((self.type, self.value))

    def __repr__(self) -> str:
        """
        Return a string representation of the token.
        """
        if self.value is None:
            return f"Token({self.type})"
        return f"Token({self.type}, {self.value!r})"


token_specification: list[tuple[str, str]] = [
    # Literals
    ('STRING',      r'"(?:[^"\\]|\\.)*"'),
    ('UNTERMINATED', r'"'),
    ('FLOAT',       r'[0-9]+\.[0-9]*|\.[0-9]+'),
    ('INT',         r'[0-9]+'),

    # Identifiers and keywords
    ('ID',          r'[A-Za-z_][\w.]*'),
    ('DOT',         r'\.'),

    # Assignment
    ('ARROW',       r'->'),

    # Miscellaneous
    ('COMMENT',     r'\#[^\n]*'),
    ('NEWLINE',     r'\n'),
    ('SKIP',        r'[ \t\r]+'),
    ('MISMATCH',    r'-.?|.'),
]

TOKEN_REGEX = re.compile(
    '|'.join(f'(?P<{name}>{pattern})' for name, pattern in token_specification),
    re.DOTALL,
)


def decode_string(body: str) -> str:
    """
    Resolve the escape sequences inside a string literal body.

    Parameters:
        body (str): The literal text between the surrounding quotes.

    Returns:
        str: The decoded string.

    Raises:
        LexError: If a backslash is followed by an unsupported character.
    """
    chars = []
    it = iter(body)
    for ch in it:
        if ch != '\\':
            chars.append(ch)
            continue
        escaped = next(it, None)
        if escaped is None:
            raise LexError("Unexpected end of input")
        if escaped not in ESCAPES:
            raise LexError(f"Invalid escape sequence: \\{escaped}", escaped)
        chars.append(ESCAPES[escaped])
    return ''.join(chars)


def tokenize(code: str) -> list[Token]:
    """
    Convert a string of source code into a list of tokens.

    Parameters:
        code (str): The source code to tokenize.

    Returns:
        list[Token]: A list of Token instances, with one EOL token per newline.

    Raises:
        LexError: On an unexpected character, an invalid escape sequence or an
            unterminated string literal.
    """
    tokens = []

    for match_obj in TOKEN_REGEX.finditer(code):
        kind = match_obj.lastgroup
        value = match_obj.group()

        if kind in ('SKIP', 'COMMENT'):
            continue
        if kind == 'NEWLINE':
            tokens.append(Token(EOL))
        elif kind == 'STRING':
            tokens.append(Token(STRING, decode_string(value[1:-1])))
        elif kind == 'UNTERMINATED':
            # Validate escapes up to end of input before reporting the open quote
            decode_string(code[match_obj.end():])
            raise LexError("Unexpected end of input")
        elif kind == 'FLOAT':
            tokens.append(Token(FLOAT, float(value)))
        elif kind == 'INT':
            tokens.append(Token(INT, int(value)))
        elif kind == 'ID':
            if value in KEYWORDS:
                tokens.append(Token(KEYWORDS[value]))
            else:
                tokens.append(Token(IDENTIFIER, value))
        elif kind == 'DOT':
            tokens.append(Token(IDENTIFIER, value))
        elif kind == 'ARROW':
            tokens.append(Token(ARROW))
        else:
            char = value[-1]
            raise LexError(f"Unexpected character: {char!r}", char)

    return tokens
