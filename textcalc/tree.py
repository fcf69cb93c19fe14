"""
Expression tree nodes and their evaluation.

The node set is closed: Literal, Unary and Binary. Each variant knows how to
combine the values of its already-evaluated children (``apply``); ``evaluate``
walks the tree in post-order with an explicit stack, so long left-folded
chains such as ``1+1+...+1`` do not run into the interpreter recursion limit.

Arithmetic uses ``numpy.float64`` with floating point errors ignored, which
gives plain IEEE-754 behaviour: ``1/0`` is ``inf`` and ``0/0`` is ``nan``.
"""

from dataclasses import dataclass
from typing import List, Tuple, Union

import numpy as np

from .errors import EvaluationError
from .tokens import Token, TokenKind


@dataclass(frozen=True)
class Literal:
    """A number taken from a NUMBER token."""

    value: float
    lexeme: str

    @classmethod
    def from_token(cls, token: Token) -> "Literal":
        return cls(value=token.as_float(), lexeme=token.lexeme)

    @property
    def children(self) -> Tuple["Expr", ...]:
        return ()

    def apply(self, strict_division: bool = False) -> np.float64:
        return np.float64(self.value)

    def evaluate(self, strict_division: bool = False) -> float:
        return evaluate(self, strict_division=strict_division)

    def __str__(self) -> str:
        return self.lexeme


@dataclass(frozen=True)
class Unary:
    """A leading ``+`` or ``-`` applied to one operand."""

    op: TokenKind
    operand: "Expr"

    def __post_init__(self):
        if self.op not in (TokenKind.PLUS, TokenKind.MINUS):
            raise ValueError(f"Not a unary operator: {self.op}")

    @property
    def children(self) -> Tuple["Expr", ...]:
        return (self.operand,)

    def apply(self, value: np.float64, strict_division: bool = False) -> np.float64:
        if self.op is TokenKind.MINUS:
            return -value
        return value

    def evaluate(self, strict_division: bool = False) -> float:
        return evaluate(self, strict_division=strict_division)

    def __str__(self) -> str:
        return f"({self.op.value} {self.operand})"


@dataclass(frozen=True)
class Binary:
    """An arithmetic operator applied to a left and a right operand."""

    op: TokenKind
    left: "Expr"
    right: "Expr"

    def __post_init__(self):
        if self.op not in _BINARY_OPS:
            raise ValueError(f"Not a binary operator: {self.op}")

    @property
    def children(self) -> Tuple["Expr", ...]:
        return (self.left, self.right)

    def apply(
        self, left: np.float64, right: np.float64, strict_division: bool = False
    ) -> np.float64:
        if strict_division and self.op is TokenKind.SLASH and right == 0:
            raise EvaluationError(f"Division by zero in {self}")
        with np.errstate(all="ignore"):
            return _BINARY_OPS[self.op](left, right)

    def evaluate(self, strict_division: bool = False) -> float:
        return evaluate(self, strict_division=strict_division)

    def __str__(self) -> str:
        return f"({self.op.value} {self.left} {self.right})"


Expr = Union[Literal, Unary, Binary]

_BINARY_OPS = {
    TokenKind.PLUS: np.add,
    TokenKind.MINUS: np.subtract,
    TokenKind.STAR: np.multiply,
    TokenKind.SLASH: np.true_divide,
}


def evaluate(node: Expr, strict_division: bool = False) -> float:
    """
    Evaluate an expression tree to a float.

    Args:
        node: Root of the tree.
        strict_division: If True, a zero divisor raises EvaluationError
                         instead of producing inf/nan.

    Returns:
        The value of the expression as a Python float.

    Raises:
        EvaluationError: Only when ``strict_division`` is set and a division
                         by zero occurs.
    """
    # Each frame is (node, children_done); values of finished subtrees
    # accumulate on ``values`` in post-order.
    stack: List[Tuple[Expr, bool]] = [(node, False)]
    values: List[np.float64] = []

    while stack:
        current, children_done = stack.pop()
        children = current.children
        if not children_done:
            stack.append((current, True))
            for child in reversed(children):
                stack.append((child, False))
            continue

        if children:
            args = values[-len(children):]
            del values[-len(children):]
        else:
            args = []
        values.append(current.apply(*args, strict_division=strict_division))

    return float(values[0])
