"""
Line-level entry points: scan, parse and evaluate one line of text.
"""

import logging
import math
from dataclasses import dataclass
from typing import Optional

from .config import CalcConfig
from .errors import ExpressionError
from .parser import parse
from .scanner import scan
from .tree import Expr

logger = logging.getLogger(__name__)


@dataclass
class LineResult:
    """Outcome of evaluating one line: a value on success, an error otherwise."""
    expression: str
    value: Optional[float] = None
    error: Optional[ExpressionError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def parse_line(text: str, config: Optional[CalcConfig] = None) -> Expr:
    """Scan and parse a line, returning the expression tree."""
    return parse(scan(text, config), config)


def evaluate_line(text: str, config: Optional[CalcConfig] = None) -> float:
    """
    Evaluate one line of arithmetic.

    Args:
        text: Expression text without its trailing newline. Surrounding
              whitespace is ignored.
        config: Optional pipeline configuration.

    Returns:
        The IEEE-754 result. Under the default division policy ``1/0`` gives
        ``inf`` and ``0/0`` gives ``nan``.

    Raises:
        ParseError: If the text is not a well-formed expression.
        EvaluationError: If strict division is enabled and a divisor is zero.
    """
    config = config or CalcConfig()
    tree = parse_line(text, config)
    return tree.evaluate(strict_division=config.strict_division)


def try_evaluate_line(text: str, config: Optional[CalcConfig] = None) -> LineResult:
    """Like evaluate_line, but report failure in the result instead of raising."""
    try:
        value = evaluate_line(text, config)
    except ExpressionError as e:
        logger.debug(f"Expression error for {text!r}: {e}")
        return LineResult(expression=text, error=e)
    return LineResult(expression=text, value=value)


def format_result(value: float) -> str:
    """
    Render a result for display.

    Non-finite values print as ``Infinity``, ``-Infinity`` and ``NaN``;
    integral values print without a fractional part.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0 and math.copysign(1.0, value) < 0:
        return "-0"
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)
