"""
Utility functions shared across fslang tests.
"""
from pathlib import Path
import sys

from fslang.lexer import tokenize
from fslang.parser import Parser
from fslang.interpreter import Interpreter

# Ensure the project root is on the Python path
PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.append(str(PROJECT_ROOT))


def parse_source(source: str):
    """
    Parse source code and return the AST.
    """
    return Parser(tokenize(source)).parse()


def run_source(source: str) -> Interpreter:
    """
    Run source code and return the interpreter instance after execution.
    """
    interpreter = Interpreter("<test>")
    interpreter.execute(parse_source(source))
    return interpreter
