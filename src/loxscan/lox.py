#!/usr/bin/env python3
from sys import stderr
from typing import Iterable

from loxscan.diagnostic import Diagnostic
from loxscan.scanner_error import ScannerError


class Lox:
    """Lox error reporting for the scanner driver.

    The Scanner never prints anything itself, it returns its Diagnostics to the
    caller. This "class" is the collection of methods the CLI uses to show
    those to the user, along with flags the CLI checks to pick an exit code.

    Public Attributes:
        had_error: bool. Whether or not a Diagnostic was reported via the
            Lox.report() method. The CLI exits with 65 when this is set.
        had_internal_error: bool. Whether or not a ScannerError was reported
            via the Lox.internal_error() method. The CLI exits with 70 when this
            is set.
    """

    had_error = False
    had_internal_error = False

    @classmethod
    def report(cls, diagnostic: Diagnostic) -> None:
        """Report a lexical error to the user.

        Args:
            diagnostic: Diagnostic. Error found by the Scanner, printed to stderr
                as "[line N] Error where: message".
        """

        print(diagnostic, file=stderr)
        cls.had_error = True

    @classmethod
    def report_all(cls, diagnostics: Iterable[Diagnostic]) -> None:
        for diagnostic in diagnostics:
            cls.report(diagnostic)

    @classmethod
    def internal_error(cls, error: ScannerError) -> None:
        """Report a ScannerError to the user.

        Unlike Diagnostics, a ScannerError means the scan was abandoned and no
        Tokens are available.

        Args:
            error: ScannerError. Internal error raised while scanning.
        """

        print(f"{error}\n[line {error.line}]", file=stderr)
        cls.had_internal_error = True

    @classmethod
    def reset(cls) -> None:
        """Clear both error flags, used between prompt lines."""

        cls.had_error = False
        cls.had_internal_error = False
