"""Interpreter.

This interpreter executes the flat statement list produced by the parser.

1. Execution Model
Statements are executed strictly in order via `execute()`. Each statement,
including any file I/O it performs, completes before the next begins. Files
are opened and closed within the statement that uses them.

2. Environment
The interpreter maintains a dictionary `vars` mapping variable names to
string values. There is a single flat namespace. Only `READ` and `APPEND`
bind variables, and each binds exactly its destination name.

3. Operand Resolution
Content operands are resolved by `resolve()`. Text wrapped in a pair of
double quotes is used without the quotes. Otherwise the operand names a
variable, and a name that was never bound resolves to its own text.

4. Error Handling
File failures surface as `ScriptIOError` wrapping the underlying `OSError`.
Execution stops at the first failure; effects of earlier statements persist.


File: interpreter.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from fslang.exceptions import ScriptIOError
from fslang.nodes import Append, Print, Read, Statement, Write


class Interpreter:
    """Statement interpreter for fslang."""

    def __init__(self, file: str = "<script>", encoding: str = "utf-8"):
        """Initialize the interpreter."""
        self.vars: dict[str, str] = {}
        self.file = file
        self.encoding = encoding

    def resolve(self, operand: str) -> str:
        """
        Resolve an operand to the string it denotes.

        Args:
            operand (str): A string literal payload or identifier name.

        Returns:
            str: The unquoted literal, the variable's value, or the operand
            text itself when no such variable is bound.
        """
        if len(operand) >= 2 and operand.startswith('"') and operand.endswith('"'):
            return operand[1:-1]
        return self.vars.get(operand, operand)

    def read_file(self, path: str) -> str:
        """
        Read the whole of a text file.

        Raises:
            ScriptIOError: If the file cannot be opened, read or decoded.
        """
        try:
            with open(path, "r", encoding=self.encoding, newline="") as f:
                return f.read()
        except (OSError, UnicodeError) as e:
            raise ScriptIOError(path, "read", e) from e

    def write_file(self, path: str, content: str) -> None:
        """
        Write text to a file, creating or truncating it.

        Raises:
            ScriptIOError: If the file cannot be opened, written or encoded.
        """
        try:
            with open(path, "w", encoding=self.encoding, newline="") as f:
                f.write(content)
        except (OSError, UnicodeError) as e:
            raise ScriptIOError(path, "write", e) from e

    def execute(self, statements: list[Statement]) -> None:
        """
        Executes a list of statements.

        Parameters:
            statements (list):
                A list of Read, Write, Print and Append nodes.

        Raises:
            ScriptIOError: If a READ or WRITE fails.
            TypeError: For objects that are not statements.
        """
        for stmt in statements:
            match stmt:
                case Read(path, dest):
                    self.vars[dest] = self.read_file(path)
                case Write(path, content):
                    self.write_file(path, self.resolve(content))
                case Print(content):
                    print(self.resolve(content))
                case Append(left, right, dest):
                    self.vars[dest] = self.resolve(left) + self.resolve(right)
                case _:
                    raise TypeError(f"Unknown statement {stmt!r} in {self.file}")
