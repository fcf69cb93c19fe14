"""
Scanner: turns one line of text into a sequence of tokens.

Scanning never raises. Characters that do not start a token become
single-character ERROR tokens, and the parser decides what to do with them.
"""

from typing import List, Optional

from .config import CalcConfig
from .tokens import SINGLE_CHAR_KINDS, Token, TokenKind


class Scanner:
    """Character cursor over a source line.

    ``start`` marks the beginning of the token being scanned and ``current``
    is the next unread position; each token's lexeme is ``source[start:current]``.
    """

    def __init__(self, source: str, config: Optional[CalcConfig] = None):
        self.source = source
        self.config = config or CalcConfig()
        self.start = 0
        self.current = 0

    def scan(self) -> List[Token]:
        """Scan the whole line. The result always ends with exactly one EOF token."""
        tokens = []
        while True:
            token = self.scan_token()
            tokens.append(token)
            if token.kind is TokenKind.EOF:
                return tokens

    def scan_token(self) -> Token:
        self._skip_whitespace()
        self.start = self.current
        if self._is_at_end():
            return self._make_token(TokenKind.EOF)

        ch = self._advance()
        kind = SINGLE_CHAR_KINDS.get(ch)
        if kind is not None:
            return self._make_token(kind)
        if ch.isdecimal():
            return self._number()
        return self._make_token(TokenKind.ERROR)

    def _number(self) -> Token:
        while self._peek().isdecimal():
            self._advance()

        if self.config.allow_trailing_dot:
            if self._match("."):
                while self._peek().isdecimal():
                    self._advance()
        elif self._peek() == "." and self._peek_next().isdecimal():
            self._advance()  # eat '.'
            while self._peek().isdecimal():
                self._advance()

        return self._make_token(TokenKind.NUMBER)

    def _skip_whitespace(self) -> None:
        while self._peek().isspace():
            self._advance()

    def _peek(self) -> str:
        if self._is_at_end():
            return ""
        return self.source[self.current]

    def _peek_next(self) -> str:
        if self.current + 1 >= len(self.source):
            return ""
        return self.source[self.current + 1]

    def _advance(self) -> str:
        ch = self.source[self.current]
        self.current += 1
        return ch

    def _match(self, expected: str) -> bool:
        if self._is_at_end() or self.source[self.current] != expected:
            return False
        self.current += 1
        return True

    def _is_at_end(self) -> bool:
        return self.current >= len(self.source)

    def _make_token(self, kind: TokenKind) -> Token:
        return Token(kind, self.source[self.start:self.current])


def scan(source: str, config: Optional[CalcConfig] = None) -> List[Token]:
    """
    Scan a line of text into tokens.

    Args:
        source: The input line, without its trailing newline.
        config: Optional pipeline configuration (only ``allow_trailing_dot``
                affects scanning).

    Returns:
        List of tokens terminated by a single EOF token.
    """
    return Scanner(source, config).scan()
