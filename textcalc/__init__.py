"""
textcalc: arithmetic expression evaluator.

Text is scanned into tokens, parsed by recursive descent into an expression
tree, and the tree is evaluated to an IEEE-754 double.
"""

from .config import CalcConfig
from .errors import EvaluationError, ExpressionError, ParseError
from .parser import Parser, parse
from .pipeline import LineResult, evaluate_line, format_result, parse_line, try_evaluate_line
from .repl import run_repl
from .scanner import Scanner, scan
from .tokens import Token, TokenKind
from .tree import Binary, Expr, Literal, Unary, evaluate
from .validate import validate_installation

__all__ = [
    "CalcConfig",
    "ExpressionError",
    "ParseError",
    "EvaluationError",
    "Token",
    "TokenKind",
    "Scanner",
    "scan",
    "Parser",
    "parse",
    "Expr",
    "Literal",
    "Unary",
    "Binary",
    "evaluate",
    "LineResult",
    "evaluate_line",
    "try_evaluate_line",
    "parse_line",
    "format_result",
    "run_repl",
    "validate_installation",
]
