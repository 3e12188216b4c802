"""
Check runner: lint with flake8 and pylint, then run the test suite.

Usage:
    python scripts/check.py [lint|test]
"""
import subprocess
import sys

SOURCES = ["./fslang", "./fsl.py"]


def lint():
    """
    Lint the fslang sources using flake8 and pylint.
    """
    print("Running flake8...")
    subprocess.run(["flake8", *SOURCES, "--exclude=fslang/tests"], check=True)

    print("Running pylint...")
    subprocess.run(["pylint", *SOURCES, "--ignore=tests"], check=True)


def test():
    """
    Run the pytest suite.
    """
    print("Running pytest...")
    subprocess.run([sys.executable, "-m", "pytest", "fslang/tests"], check=True)


def main(argv: list[str]):
    """
    Run the requested step, or every step when none is named.
    """
    steps = {"lint": lint, "test": test}
    selected = argv[1:] or list(steps)
    for name in selected:
        if name not in steps:
            print(f"Unknown step '{name}', expected one of: {', '.join(steps)}")
            sys.exit(1)
        steps[name]()


if __name__ == "__main__":
    main(sys.argv)
