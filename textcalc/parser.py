"""
Recursive descent parser producing an expression tree.

Grammar (loosest binding first):
    expr           := addition
    addition       := multiplication (('+' | '-') multiplication)*
    multiplication := unary (('*' | '/') unary)*
    unary          := ('+' | '-')? primary
    primary        := NUMBER | '(' expr ')'

A unary sign applies to exactly one primary, so ``-5`` parses while ``--5``
does not. Any failure raises ParseError and no tree is produced.
"""

import logging
from typing import List, NoReturn, Optional

from .config import CalcConfig
from .errors import ParseError
from .tokens import ADDITIVE_KINDS, MULTIPLICATIVE_KINDS, Token, TokenKind
from .tree import Binary, Expr, Literal, Unary

logger = logging.getLogger(__name__)


class Parser:
    """Single-token-lookahead parser over a scanned token list."""

    def __init__(self, tokens: List[Token], config: Optional[CalcConfig] = None):
        if not tokens or tokens[-1].kind is not TokenKind.EOF:
            raise ValueError("Token sequence must end with an EOF token")
        self.tokens = tokens
        self.config = config or CalcConfig()
        self.pos = 0
        self.depth = 0

    def parse(self) -> Expr:
        """Parse the whole token list, rejecting anything left before EOF."""
        try:
            expr = self._expression()
        except RecursionError:
            # max_depth set above what the interpreter stack can hold
            self._fail("expression nested too deeply", self._peek())
        if self._peek().kind is not TokenKind.EOF:
            self._fail(
                f"Unexpected token {self._peek().describe()} after end of expression",
                self._peek(),
            )
        return expr

    def _expression(self) -> Expr:
        return self._addition()

    def _addition(self) -> Expr:
        left = self._multiplication()
        while self._peek().kind in ADDITIVE_KINDS:
            op = self._advance()
            right = self._multiplication()
            left = Binary(op.kind, left, right)
        return left

    def _multiplication(self) -> Expr:
        left = self._unary()
        while self._peek().kind in MULTIPLICATIVE_KINDS:
            op = self._advance()
            right = self._unary()
            left = Binary(op.kind, left, right)
        return left

    def _unary(self) -> Expr:
        if self._peek().kind in ADDITIVE_KINDS:
            op = self._advance()
            return Unary(op.kind, self._primary())
        return self._primary()

    def _primary(self) -> Expr:
        token = self._peek()

        if token.kind is TokenKind.NUMBER:
            self._advance()
            return Literal.from_token(token)

        if token.kind is TokenKind.OPEN_PAREN:
            self._advance()
            self.depth += 1
            if self.depth > self.config.max_depth:
                self._fail("expression nested too deeply", token)
            expr = self._expression()
            if self._peek().kind is not TokenKind.CLOSE_PAREN:
                self._fail(f"Expected ')' after {self._previous().describe()}", self._peek())
            self._advance()
            self.depth -= 1
            return expr

        self._fail(f"Invalid token {token.describe()}", token)

    def _peek(self) -> Token:
        return self.tokens[self.pos]

    def _previous(self) -> Token:
        return self.tokens[self.pos - 1]

    def _advance(self) -> Token:
        token = self.tokens[self.pos]
        # EOF is never consumed
        if token.kind is not TokenKind.EOF:
            self.pos += 1
        return token

    def _fail(self, message: str, token: Optional[Token] = None) -> NoReturn:
        logger.debug(f"Parse error: {message}")
        raise ParseError(message, token)


def parse(tokens: List[Token], config: Optional[CalcConfig] = None) -> Expr:
    """
    Build an expression tree from a token list.

    Args:
        tokens: Output of the scanner, terminated by an EOF token.
        config: Optional pipeline configuration (``max_depth`` applies here).

    Returns:
        Root node of the expression tree.

    Raises:
        ParseError: On an invalid token, a missing ')', excessive nesting,
                    or tokens left over after a complete expression.
    """
    return Parser(tokens, config).parse()
