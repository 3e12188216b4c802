"""Errors.

Every failure surfaced by the lexer, parser, interpreter or script loader is
a :class:`ScriptError`. Lex and parse failures are folded into
:class:`ScriptRuntimeError` by :meth:`fslang.script.Script.run`.


File: exceptions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""


class ScriptError(Exception):
    """
    Base class for all fslang errors.
    """


class LexError(ScriptError):
    """
    Error for source text the lexer cannot tokenize.
    """
    def __init__(self, message, char=None):
        self.char = char
        super().__init__(message)


class ParseError(ScriptError, SyntaxError):
    """
    Error for a token sequence that does not match the grammar.
    """
    def __init__(self, found, expected=None):
        self.found = found
        self.expected = expected
        if expected is None:
            message = f"Unexpected token {found}"
        else:
            message = f"Expected {expected}, got {found}"
        super().__init__(message)

    def __str__(self) -> str:
        return self.msg


class ScriptIOError(ScriptError, OSError):
    """
    Error for a file that could not be read or written.
    """
    def __init__(self, path, operation, error):
        self.path = path
        self.operation = operation
        self.error = error
        reason = getattr(error, "strerror", None) or str(error)
        self.message = f"Could not {operation} '{path}': {reason}"
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class ScriptRuntimeError(ScriptError, RuntimeError):
    """
    Error raised when a script fails to lex or parse before execution.
    """
    def __init__(self, cause):
        self.cause = cause
        super().__init__(f"{type(cause).__name__}: {cause}")
