#!/usr/bin/env python3
import logging
import os
from pathlib import Path
from sys import argv, exit, stderr, stdin

from loxscan.diagnostic import Diagnostic
from loxscan.lox import Lox
from loxscan.scanner import ScanResult, Scanner, scan
from loxscan.scanner_error import ScannerError
from loxscan.token import Token
from loxscan.token_type import KEYWORDS, TokenType

__all__ = [
    "Diagnostic",
    "KEYWORDS",
    "Lox",
    "ScanResult",
    "Scanner",
    "ScannerError",
    "Token",
    "TokenType",
    "main",
    "scan",
]

logger = logging.getLogger(__name__)


def main() -> None:
    """Main entrypoint for the Lox scanner.

    This function is invoked if this __init__.py is executed directly, or via
    the loxscan CLI entrypoint.

    With no arguments it will start an interactive prompt which scans each
    line entered.

    If the argument is a file, its Tokens will be printed.

    Otherwise, the following commands are provided:
    loxscan run_prompt <- Run the interactive prompt
    loxscan run <source_or_stdin> <- Scan a source string, - for stdin.
    loxscan run_file <file> <- Scan the Lox source at a given path.

    The LOXSCAN_LOG_LEVEL environment variable sets the logging level
    (default WARNING).
    """

    logging.basicConfig(
        level=log_level(os.environ.get("LOXSCAN_LOG_LEVEL", "WARNING")),
        format="%(levelname)s %(name)s: %(message)s",
    )

    # First argument in argv is always the script itself in Python
    if len(argv) == 2:
        if argv[1] == "run_prompt":
            run_prompt()
            return

        run_file(argv[1])
    elif len(argv) == 3:
        command = argv[1]
        match command:
            case "run":
                source = argv[2]
                if source == "-":
                    try:
                        source = stdin.read()
                    except KeyboardInterrupt:
                        return

                run(source)
                exit_on_error()
            case "run_file":
                run_file(argv[2])
            case _:
                print(f"unrecognized command: {command}", file=stderr)
                exit(66)

    elif len(argv) > 3:
        print("Usage: loxscan [command] [script]")
        exit(64)
    else:
        run_prompt()


def log_level(name: str) -> int:
    """Resolve a logging level name, falling back to WARNING.

    Args:
        name: str. Level name such as "debug" or "INFO", case-insensitive.

    Returns:
        level: int. The matching logging level, or logging.WARNING with a
            warning on stderr if the name is unknown.
    """

    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        print(f"Unknown log level {name!r}, using WARNING", file=stderr)
        return logging.WARNING

    return level


def run_file(path: str) -> None:
    script_path = Path(path)
    if not script_path.exists():
        print(f"File at {script_path} not found", file=stderr)
        exit(66)

    try:
        script = script_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        print(f"Could not read {script_path}: {e}", file=stderr)
        exit(66)

    logger.info("Scanning %s", script_path)
    run(script)

    exit_on_error()


def exit_on_error() -> None:
    # Indicate an error in the exit code.
    if Lox.had_internal_error:
        exit(70)
    elif Lox.had_error:
        exit(65)


def run_prompt() -> None:
    try:
        while True:
            line = input("> ")

            if not line:
                break

            run(line)

            # Each line is scanned on its own, so errors don't carry over.
            Lox.reset()
    except (KeyboardInterrupt, EOFError):
        return


def run(source: str) -> None:
    """Scan a source text, print its Tokens and report its Diagnostics.

    Args:
        source: str. The Lox source text to scan.
    """

    try:
        tokens, diagnostics = scan(source)
    except ScannerError as e:
        Lox.internal_error(e)
        return

    for token in tokens:
        print(token.to_string())

    Lox.report_all(diagnostics)


if __name__ == "__main__":
    main()
