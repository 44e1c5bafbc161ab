#!/usr/bin/env python3


class ScannerError(RuntimeError):
    """Internal inconsistency encountered by the Scanner.

    Malformed input never raises this, it is reported as a Diagnostic instead.
    This is only raised when the Scanner breaks one of its own assumptions,
    such as a digit-only lexeme failing to convert to a float.

    Args:
        line: int. Line being scanned when the inconsistency was found.
        message: str. Error message with details.
    """

    def __init__(self, line: int, message: str) -> None:
        super().__init__(message)
        self.line = line
