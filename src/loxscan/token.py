#!/usr/bin/env python3
from dataclasses import dataclass
from typing import Optional, Union

from loxscan.token_type import TokenType

# Decoded payload of a literal Token: float for NUMBER, str for STRING and
# IDENTIFIER, None otherwise.
Literal = Optional[Union[float, str]]


@dataclass(frozen=True)
class Token:
    """Scanner Token

    A Token is one classified chunk of the scanned source.

    For example:
    var a = "hi";

    Has 6 Tokens:
    scan('var a = "hi";').tokens
    Token(TokenType.VAR,        "var", None, 1)
    Token(TokenType.IDENTIFIER, "a",   "a",  1)
    Token(TokenType.EQUAL,      "=",   None, 1)
    Token(TokenType.STRING,     "hi",  "hi", 1)
    Token(TokenType.SEMICOLON,  ";",   None, 1)
    Token(TokenType.EOF,        "",    None, 1)

    Args:
        type: TokenType. Lexical category of the Token.
        lexeme: str. Source text of the Token. For strings this is the text
            between the quotes.
        literal: Literal. Decoded payload for literal Tokens, otherwise None.
        line: int. 1-based line of the Token's first character.
    """

    type: TokenType
    lexeme: str
    literal: Literal
    line: int

    def __repr__(self) -> str:
        return self.to_string()

    def to_string(self) -> str:
        return f"{self.type.name} {self.lexeme} {self.literal}"
