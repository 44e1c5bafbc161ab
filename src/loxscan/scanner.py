#!/usr/bin/env python3
import logging
from typing import List, Mapping, NamedTuple, Optional

from loxscan.diagnostic import Diagnostic
from loxscan.scanner_error import ScannerError
from loxscan.token import Literal, Token
from loxscan.token_type import KEYWORDS, TokenType

logger = logging.getLogger(__name__)


class ScanResult(NamedTuple):
    """Complete output of a single scan pass.

    Public Attributes:
        tokens: List[Token]. Scanned Tokens, always ending with an EOF Token.
        diagnostics: List[Diagnostic]. Lexical errors, in source order.
    """

    tokens: List[Token]
    diagnostics: List[Diagnostic]


def scan(source: str) -> ScanResult:
    """Scan a complete Lox source text.

    Every call uses a fresh Scanner, so nothing is carried over between calls.

    Args:
        source: str. The Lox source text to scan.

    Returns:
        result: ScanResult. The Tokens and Diagnostics of the pass.
    """

    scanner = Scanner(source)
    tokens = scanner.scan_tokens()
    return ScanResult(tokens, scanner.diagnostics)


class Scanner:
    """Lox Scanner

    This class scans a given source text into a list of Tokens. Malformed
    input does not stop the scan; each lexical error is recorded as a
    Diagnostic and scanning resumes at the next unconsumed character.

    A Scanner is single use, see scan() for the stateless entrypoint.

    To use:
    Scanner("var a = 2;").scan_tokens()
    [VAR var None,
     IDENTIFIER a a,
     EQUAL = None,
     NUMBER 2 2.0,
     SEMICOLON ; None,
     EOF  None]

    Args:
        source: str. The lox source text to scan.

    Public Attributes:
        tokens: List[Token]. All scanned tokens.
        diagnostics: List[Diagnostic]. All lexical errors found.
        start: int. Start index in the source for the Token currently being scanned.
        start_line: int. Line where the Token currently being scanned began.
        current: int. The current index in the source, this will be combined with
            the start to generate the Token lexeme.
        line: int. Current line being scanned, this is incremented whenever a
            newline character is consumed, including inside strings and comments.
    """

    keywords: Mapping[str, TokenType] = KEYWORDS

    def __init__(self, source: str) -> None:
        self.source = source
        self.tokens: List[Token] = []
        self.diagnostics: List[Diagnostic] = []
        self.start = 0
        self.start_line = 1
        self.current = 0
        self.line = 1

    def scan_tokens(self) -> List[Token]:
        """Scan the source text and return all scanned Tokens.

        This method will return regardless of whether or not there were errors
        during scanning, any errors are left in self.diagnostics.

        Returns:
            tokens: List[Token]. All successfully scanned Tokens.
        """

        while not self.is_at_end():
            self.start = self.current
            self.start_line = self.line
            self.scan_token()

        self.tokens.append(Token(TokenType.EOF, "", None, self.line))

        logger.debug(
            "Scanned %d characters into %d tokens with %d diagnostics",
            len(self.source),
            len(self.tokens),
            len(self.diagnostics),
        )

        return self.tokens

    def is_at_end(self) -> bool:
        """Check if Scanner's current position is at the end of the source.

        Returns:
            at_end: bool. Whether or not every character has been consumed.
        """

        return self.current >= len(self.source)

    def scan_token(self) -> None:
        """Consume one character and dispatch on it.

        Each call consumes at least one character, adding at most one Token or
        one Diagnostic.
        """

        c = self.advance()
        match c:
            # Single character Lexemes.
            case "(":
                # Token(TokenType.LEFT_PAREN, "(", None, 1)
                self.add_token(TokenType.LEFT_PAREN)
            case ")":
                # Token(TokenType.RIGHT_PAREN, ")", None, 1)
                self.add_token(TokenType.RIGHT_PAREN)
            case "{":
                # Token(TokenType.LEFT_BRACE, "{", None, 1)
                self.add_token(TokenType.LEFT_BRACE)
            case "}":
                # Token(TokenType.RIGHT_BRACE, "}", None, 1)
                self.add_token(TokenType.RIGHT_BRACE)
            case ",":
                # Token(TokenType.COMMA, ",", None, 1)
                self.add_token(TokenType.COMMA)
            case ".":
                # Token(TokenType.DOT, ".", None, 1)
                # Reached here for any dot a number didn't claim, e.g. "3."
                self.add_token(TokenType.DOT)
            case "-":
                # Token(TokenType.MINUS, "-", None, 1)
                self.add_token(TokenType.MINUS)
            case "+":
                # Token(TokenType.PLUS, "+", None, 1)
                self.add_token(TokenType.PLUS)
            case ";":
                # Token(TokenType.SEMICOLON, ";", None, 1)
                self.add_token(TokenType.SEMICOLON)
            case "*":
                # Token(TokenType.STAR, "*", None, 1)
                self.add_token(TokenType.STAR)
            # One or two character Lexemes, the "=" is taken greedily.
            case "!":
                # Token(TokenType.BANG,       "!",  None, 1)
                # Token(TokenType.BANG_EQUAL, "!=", None, 1)
                self.add_token(
                    TokenType.BANG_EQUAL if self.match("=") else TokenType.BANG
                )
            case "=":
                # Token(TokenType.EQUAL,       "=",  None, 1)
                # Token(TokenType.EQUAL_EQUAL, "==", None, 1)
                self.add_token(
                    TokenType.EQUAL_EQUAL if self.match("=") else TokenType.EQUAL
                )
            case "<":
                # Token(TokenType.LESS,       "<",  None, 1)
                # Token(TokenType.LESS_EQUAL, "<=", None, 1)
                self.add_token(
                    TokenType.LESS_EQUAL if self.match("=") else TokenType.LESS
                )
            case ">":
                # Token(TokenType.GREATER,       ">",  None, 1)
                # Token(TokenType.GREATER_EQUAL, ">=", None, 1)
                self.add_token(
                    TokenType.GREATER_EQUAL if self.match("=") else TokenType.GREATER
                )
            # Division or Comment.
            case "/":
                if self.match("/"):
                    # Second slash matched (//), line comment.
                    self.comment()
                else:
                    # Token(TokenType.SLASH, "/", None, 1)
                    self.add_token(TokenType.SLASH)
            # Ignore whitespace.
            case " " | "\r" | "\t":
                pass
            # Newline, no Token but the following ones land on the next line.
            case "\n":
                self.line += 1
            case '"':
                self.string()
            # Digit, begin processing number literal.
            case _ if self.is_digit(c):
                self.number()
            # Letter, begin processing either an identifier (orchid) or a
            # reserved word (or).
            case _ if self.is_alpha(c):
                self.identifier()
            # Unrecognized character, record it and keep scanning so later
            # errors are reported in the same pass.
            case _:
                self.error(f"Unknown character: {c}")

    def comment(self) -> None:
        """Skip a line comment, up to and including its newline.

        None of the skipped characters become Tokens. A comment running to the
        end of the source is simply truncated.
        """

        while not self.is_at_end():
            if self.advance() == "\n":
                self.line += 1
                return

    def identifier(self) -> None:
        """Scan an alphanumeric run as a keyword or an identifier.

        The keyword lookup happens once the whole run is consumed, so "orchid"
        is an identifier and never OR followed by "chid".

        Examples:
        print  -> Token(TokenType.PRINT,      "print",  None,     1)
        foobar -> Token(TokenType.IDENTIFIER, "foobar", "foobar", 1)
        """

        # Advance current index so long as we see [a-zA-Z0-9]
        while self.is_alpha_numeric(self.peek()):
            self.advance()

        text = self.source[self.start : self.current]

        # Reserved words carry no literal, identifiers carry their name.
        keyword = self.keywords.get(text)
        if keyword is None:
            self.add_token(TokenType.IDENTIFIER, text)
        else:
            self.add_token(keyword)

    def number(self) -> None:
        """Scan a number literal.

        A "." is only consumed when a digit follows it, and only once, so "3."
        is NUMBER followed by DOT and "1.2.3" is NUMBER 1.2, DOT, NUMBER 3.

        Examples:
        4   -> Token(TokenType.NUMBER, "4",   4.0, 1)
        4.2 -> Token(TokenType.NUMBER, "4.2", 4.2, 1)

        Raises:
            ScannerError: If the scanned digits cannot be converted to a float.
        """

        while self.is_digit(self.peek()):
            self.advance()

        # Look for a fractional part and a digit after it (ie .5).
        if self.peek() == "." and self.is_digit(self.peek_next()):
            # Consume the "."
            self.advance()

            while self.is_digit(self.peek()):
                self.advance()

        text = self.source[self.start : self.current]
        try:
            value = float(text)
        except ValueError as e:
            raise ScannerError(
                self.line, f"Scanned number {text!r} is not a valid float"
            ) from e

        self.add_token(TokenType.NUMBER, value)

    def string(self) -> None:
        """Scan a string literal.

        Strings can span lines. The lexeme and literal are both the raw text
        between the quotes, and the Token is placed on the line of the opening
        quote.

        Examples:
        "foo"      -> Token(TokenType.STRING, "foo",      "foo",      1)
        "foo\nbar" -> Token(TokenType.STRING, "foo\nbar", "foo\nbar", 1)
        """

        # Continue scanning until we find the closing double quote.
        while self.peek() != '"' and not self.is_at_end():
            if self.peek() == "\n":
                self.line += 1

            self.advance()

        # Scanned to the end of source without finding the closing quote, the
        # error points at the opening one.
        if self.is_at_end():
            self.error("Unterminated string")
            return

        # Closing quote.
        self.advance()

        value = self.source[self.start + 1 : self.current - 1]
        self.add_token(TokenType.STRING, value, lexeme=value)

    def advance(self) -> str:
        """Retrieve the char at the Scanner's current position, then advance it.

        Returns:
            char: str. Character at Scanner's position prior to advancement.
        """

        current = self.source[self.current]
        self.current += 1
        return current

    def match(self, expected: str) -> bool:
        """Consume the char at the current index if it is the expected one.

        This is used for scanning two character lexemes such as != and ==.

        Args:
            expected. str. Expected char.

        Returns:
            matched: bool. Whether or not the char was matched and consumed.
        """

        if self.is_at_end():
            # End of source, so there is no character to match.
            return False
        if self.source[self.current] != expected:
            return False

        self.current += 1
        return True

    def peek(self) -> str:
        """Return the char at the current index without consuming it.

        Returns:
            current_char: str. Char at the current index, or "" at the end.
        """

        if self.is_at_end():
            return ""

        return self.source[self.current]

    def peek_next(self) -> str:
        """Return the char at the current index + 1 without consuming it.

        Returns:
            next_char: str. Char at the current index + 1, or "" past the end.
        """

        if self.current + 1 >= len(self.source):
            return ""

        return self.source[self.current + 1]

    def is_alpha(self, c: str) -> bool:
        """Check if a given char is an ASCII letter [a-zA-Z]

        Args:
            c: str. Char to check.

        Returns:
            alpha: bool. Whether char is in [a-zA-Z]
        """

        # str.isalpha() alone would accept letters such as "é".
        return c.isascii() and c.isalpha()

    def is_alpha_numeric(self, c: str) -> bool:
        """Check if a given char is an ASCII letter or digit [a-zA-Z0-9]

        Args:
            c: str. Char to check.

        Returns:
            alpha_numeric: bool. Whether char is in [a-zA-Z0-9]
        """

        return self.is_alpha(c) or self.is_digit(c)

    def is_digit(self, c: str) -> bool:
        """Check if a given char is an ASCII digit [0-9]

        Args:
            c: str. Char to check.

        Returns:
            digit: bool. Whether char is in [0-9]
        """

        return c.isascii() and c.isdigit()

    def add_token(
        self,
        type: TokenType,
        literal: Literal = None,
        lexeme: Optional[str] = None,
    ) -> None:
        """Add a Token for the text between the start and current indexes.

        Args:
            type: TokenType. Type of Token being added.
            literal: Literal. Decoded payload, required for literal Tokens and
                forbidden for every other type.
            lexeme: Optional[str]. Overrides the scanned source text, used by
                strings to drop their quotes.

        Raises:
            ScannerError: If the literal doesn't agree with the TokenType.
        """

        if type.is_literal != (literal is not None):
            raise ScannerError(
                self.start_line, f"{type.name} Token with literal {literal!r}"
            )

        if lexeme is None:
            lexeme = self.source[self.start : self.current]

        self.tokens.append(Token(type, lexeme, literal, self.start_line))

    def error(self, message: str) -> None:
        """Record a Diagnostic at the line where the current Token began.

        Args:
            message: str. Error message for the user.
        """

        self.diagnostics.append(Diagnostic(self.start_line, "", message))
