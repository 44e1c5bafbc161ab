#!/usr/bin/env python3
from enum import IntEnum, auto
from types import MappingProxyType
from typing import Mapping


class TokenType(IntEnum):
    """Lexical categories produced by the Scanner.

    Literal categories (IDENTIFIER, STRING, NUMBER) carry a decoded payload in
    Token.literal, every other category carries None.
    """

    # Single-character punctuation.
    LEFT_PAREN = auto()  # (
    RIGHT_PAREN = auto()  # )
    LEFT_BRACE = auto()  # {
    RIGHT_BRACE = auto()  # }
    COMMA = auto()  # ,
    DOT = auto()  # .
    MINUS = auto()  # -
    PLUS = auto()  # +
    SEMICOLON = auto()  # ;
    SLASH = auto()  # /
    STAR = auto()  # *

    # Operators with an optional trailing "=".
    BANG = auto()  # !
    BANG_EQUAL = auto()  # !=
    EQUAL = auto()  # =
    EQUAL_EQUAL = auto()  # ==
    GREATER = auto()  # >
    GREATER_EQUAL = auto()  # >=
    LESS = auto()  # <
    LESS_EQUAL = auto()  # <=

    # Literals, payload in Token.literal.
    IDENTIFIER = auto()  # name: str
    STRING = auto()  # contents: str
    NUMBER = auto()  # value: float

    # Reserved words, see KEYWORDS.
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FUN = auto()
    FOR = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()

    # End of input, always the last Token of a scan.
    EOF = auto()

    @property
    def is_literal(self) -> bool:
        return self in (TokenType.IDENTIFIER, TokenType.STRING, TokenType.NUMBER)


# Reserved words, resolved by exact (case-sensitive) match against a complete
# alphanumeric lexeme. Read-only and shared by every scan.
KEYWORDS: Mapping[str, TokenType] = MappingProxyType(
    {
        "and": TokenType.AND,
        "class": TokenType.CLASS,
        "else": TokenType.ELSE,
        "false": TokenType.FALSE,
        "for": TokenType.FOR,
        "fun": TokenType.FUN,
        "if": TokenType.IF,
        "nil": TokenType.NIL,
        "or": TokenType.OR,
        "print": TokenType.PRINT,
        "return": TokenType.RETURN,
        "super": TokenType.SUPER,
        "this": TokenType.THIS,
        "true": TokenType.TRUE,
        "var": TokenType.VAR,
        "while": TokenType.WHILE,
    }
)
