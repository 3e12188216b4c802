"""Script loading and execution.

A :class:`Script` holds source text, loaded either from a file or given
directly, and runs it through the full pipeline: tokenize, parse, execute.
Each run uses a fresh :class:`~fslang.interpreter.Interpreter`.


File: script.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from fslang.exceptions import LexError, ParseError, ScriptIOError, ScriptRuntimeError
from fslang.interpreter import Interpreter
from fslang.lexer import Token, tokenize
from fslang.nodes import Statement
from fslang.parser import Parser


def compile_source(source: str) -> tuple[list[Token], list[Statement]]:
    """
    Tokenize and parse source text.

    Returns:
        tuple: The token list and the statement list.

    Raises:
        ScriptRuntimeError: If the source fails to lex or parse.
    """
    try:
        tokens = tokenize(source)
        ast = Parser(tokens).parse()
    except (LexError, ParseError) as e:
        raise ScriptRuntimeError(e) from e
    return tokens, ast


class Script:
    """A runnable fslang script."""

    def __init__(self, source: str, file: str = "<script>"):
        self.source = source
        self.file = file

    @classmethod
    def from_file(cls, path: str, encoding: str = "utf-8") -> "Script":
        """
        Load a script from a file path.

        Raises:
            ScriptIOError: If the file cannot be read or decoded.
        """
        try:
            with open(path, "r", encoding=encoding, newline="") as f:
                return cls(f.read(), str(path))
        except (OSError, UnicodeError) as e:
            raise ScriptIOError(str(path), "read", e) from e

    @classmethod
    def from_source(cls, source: str) -> "Script":
        """
        Create a script from in-memory source text.
        """
        return cls(source)

    def run(self) -> Interpreter:
        """
        Tokenize, parse and execute the script.

        Returns:
            Interpreter: The interpreter after execution, holding the final
            variable environment.

        Raises:
            ScriptRuntimeError: If the script fails to lex or parse.
            ScriptIOError: If a READ or WRITE fails.
        """
        _, ast = compile_source(self.source)
        interpreter = Interpreter(self.file)
        interpreter.execute(ast)
        return interpreter


def run_source(source: str) -> Interpreter:
    """
    Run script source text and return the interpreter after execution.
    """
    return Script.from_source(source).run()
