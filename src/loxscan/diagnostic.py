#!/usr/bin/env python3
from dataclasses import dataclass


@dataclass(frozen=True)
class Diagnostic:
    """A recoverable lexical error found while scanning.

    Diagnostics are collected by the Scanner instead of being raised, so a
    single pass reports every error in the source.

    Args:
        line: int. Line where the offending construct started.
        where: str. Location detail within the line. Empty for every error the
            Scanner reports.
        message: str. Description of the error.
    """

    line: int
    where: str
    message: str

    def __str__(self) -> str:
        return f"[line {self.line}] Error {self.where}: {self.message}"
