"""
Token model shared by the scanner and the parser.
"""

from dataclasses import dataclass
from enum import Enum


class TokenKind(Enum):
    """Kinds of token a scanned line can contain."""

    OPEN_PAREN = "("
    CLOSE_PAREN = ")"
    PLUS = "+"
    MINUS = "-"
    STAR = "*"
    SLASH = "/"
    NUMBER = "number"
    ERROR = "error"
    EOF = "eof"


# Single-character tokens map straight to their kind
SINGLE_CHAR_KINDS = {
    "(": TokenKind.OPEN_PAREN,
    ")": TokenKind.CLOSE_PAREN,
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
}

ADDITIVE_KINDS = (TokenKind.PLUS, TokenKind.MINUS)
MULTIPLICATIVE_KINDS = (TokenKind.STAR, TokenKind.SLASH)


@dataclass(frozen=True)
class Token:
    """
    A classified lexical unit together with the exact text it was scanned from.

    The lexeme is used both in diagnostics and, for NUMBER tokens, as the
    source of the literal's numeric value.
    """

    kind: TokenKind
    lexeme: str

    def __str__(self) -> str:
        return f"Type: {self.kind.name}, lexeme: {self.lexeme}"

    def describe(self) -> str:
        """Short human-readable form for error messages."""
        if self.kind is TokenKind.EOF:
            return "end of input"
        return repr(self.lexeme)

    def as_float(self) -> float:
        """Parse the lexeme of a NUMBER token as a decimal literal."""
        if self.kind is not TokenKind.NUMBER:
            raise ValueError(f"Token is not a number: {self}")
        return float(self.lexeme)
