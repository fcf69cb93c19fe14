"""
Exceptions raised while turning one line of text into a number.
"""

from typing import Optional

from .tokens import Token


class ExpressionError(Exception):
    """Raised when an expression is invalid or cannot be evaluated."""
    pass


class ParseError(ExpressionError):
    """
    Lexical or syntactic failure.

    Unrecognised characters reach the parser as ERROR tokens, so both kinds
    of failure surface here. ``token`` is the offending token when one is
    known.
    """

    def __init__(self, message: str, token: Optional[Token] = None):
        super().__init__(message)
        self.message = message
        self.token = token


class EvaluationError(ExpressionError):
    """Raised by strict evaluation when a division has a zero divisor."""
    pass
