"""AST nodes for fslang.

A script parses to a flat list of statements, one per logical line. Each
statement is an immutable tuple of operand strings taken verbatim from the
tokens. Operands are resolved against the variable environment only at
execution time.


File: nodes.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import NamedTuple, Union


class Read(NamedTuple):
    """``READ <path> -> <dest>``"""
    path: str
    dest: str


class Write(NamedTuple):
    """``WRITE <path> <content>``"""
    path: str
    content: str


class Print(NamedTuple):
    """``PRINT <content>``"""
    content: str


class Append(NamedTuple):
    """``APPEND <left> <right> -> <dest>``"""
    left: str
    right: str
    dest: str


Statement = Union[Read, Write, Print, Append]
