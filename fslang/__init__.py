"""fslang: a line-oriented scripting language for simple file transformations.

Scripts are built from four commands, ``READ``, ``WRITE``, ``PRINT`` and
``APPEND``, operating on text files and string variables.


File: __init__.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from fslang.exceptions import (
    LexError,
    ParseError,
    ScriptError,
    ScriptIOError,
    ScriptRuntimeError,
)
from fslang.script import Script, run_source

__version__ = "0.1.0"

__all__ = [
    "LexError",
    "ParseError",
    "Script",
    "ScriptError",
    "ScriptIOError",
    "ScriptRuntimeError",
    "run_source",
]
