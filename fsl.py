"""
fslang Interpreter

This is the main entry point for the fslang interpreter.

Workflow:
1. The source script is read from the file specified on the command line.
2. The Lexer tokenizes the source code into tokens.
3. The Parser turns the tokens into a list of statements, one per line.
4. The Interpreter executes the statements in order.

Set FSLDEBUG to print the tokens and AST before execution.
"""
import os
import sys

from fslang.exceptions import ScriptError
from fslang.interpreter import Interpreter
from fslang.script import Script, compile_source


def print_usage():
    """
    Print usage.
    """
    print()
    print("fslang Interpreter")
    print()
    print("Usage:")
    print("    fsl <script.fsl>")
    print()
    print("Arguments:")
    print("    <script.fsl>")
    print("        Path to a script to execute. Scripts are made of READ, WRITE,")
    print("        PRINT and APPEND commands, one per line.")
    print()
    print("Example:")
    print("    fsl transform.fsl")
    print()
    print("Or run with no arguments to enter interactive mode (REPL).")
    print()
    print("Options:")
    print("    -h, --help")
    print("        Show this help message and exit.")
    print()
    print("Environment:")
    print("    FSLDEBUG")
    print("        When set, print the tokens and AST before execution.")


def debug_print_tokens_ast(tokens, ast):
    """
    Print tokenized source and AST
    """
    print("\nTokens:\n")
    print(tokens)
    print("\nAST:\n")
    print(ast)
    print(" ")


def run_script(script_name: str) -> int:
    """
    Run a script file
    """
    try:
        script = Script.from_file(script_name)
        tokens, ast = compile_source(script.source)

        if os.environ.get('FSLDEBUG'):
            debug_print_tokens_ast(tokens, ast)

        Interpreter(script_name).execute(ast)
    except ScriptError as e:
        print(f"{type(e).__name__}: {e}")
        return 1
    return 0


def run_repl():
    """
    Run the interactive REPL
    """
    print("fslang Interpreter - REPL")
    print("Type `exit` or `quit` to leave.")
    interpreter = Interpreter("<stdin>")
    while True:
        try:
            line = input(">>> ")
            if line.strip() in {"exit", "quit"}:
                break
            try:
                tokens, ast = compile_source(line + "\n")
                if os.environ.get('FSLDEBUG'):
                    debug_print_tokens_ast(tokens, ast)
                interpreter.execute(ast)
            except ScriptError as e:
                print(f"{type(e).__name__}: {e}")
        except KeyboardInterrupt:
            print("\nInterrupted.")
            break
        except EOFError:
            print()
            break


def main(argv: list[str]) -> int:
    """
    Entry point for the CLI.

    Behaviour:
    - No arguments: enter the REPL.
    - One argument equal to ``-h`` or ``--help``: print usage and exit.
    - One argument that is not an option: treat it as the path to a script and run it.
    - Any other pattern: print usage and return a non-zero exit code.
    """
    args = argv[1:]
    if not args:
        run_repl()
        return 0
    if len(args) == 1 and args[0] in ('-h', '--help'):
        print_usage()
        return 0
    if len(args) == 1:
        return run_script(args[0])
    print_usage()
    return 1


def cli():
    """
    Console script entry point.
    """
    sys.exit(main(sys.argv))


if __name__ == "__main__":
    cli()
