"""
Lightweight self-check for textcalc.

Verifies that numpy is importable and that the scan/parse/evaluate pipeline
gives the expected answers on a fixed set of expressions covering
precedence, associativity, unary signs, IEEE division and syntax errors.

Usage:
    from textcalc.validate import validate_installation
    report = validate_installation()
    assert report["status"] == "ok"
"""

import math
from typing import Any, Dict, List

from .errors import ParseError
from .pipeline import evaluate_line
from .scanner import scan
from .tokens import TokenKind

# (name, expression, expected value)
_VALUE_CASES = [
    ("precedence", "2+3*4", 14.0),
    ("parentheses", "(2+3)*4", 20.0),
    ("left_associativity", "10-2-3", 5.0),
    ("unary_minus", "-5+3", -2.0),
    ("decimal", "12.34", 12.34),
    ("divide_by_zero", "1/0", math.inf),
]

_REJECTED_CASES = [
    ("double_sign", "--5"),
    ("unbalanced_paren", "(2+3"),
    ("trailing_garbage", "2 2"),
    ("unknown_character", "@"),
]


def validate_installation(verbose: bool = True) -> Dict[str, Any]:
    """
    Run a series of quick validation checks.

    Returns:
        A dictionary with keys:
            status: "ok" or "fail"
            checks: mapping of check name to details
            errors: list of error messages
    """
    checks: Dict[str, Any] = {}
    errors: List[str] = []

    try:
        import numpy as np
        checks["numpy"] = {"available": True, "version": getattr(np, "__version__", "unknown")}
    except ImportError as e:  # pragma: no cover - environment dependent
        checks["numpy"] = {"available": False, "error": str(e)}
        errors.append("numpy not available: install 'numpy'")
        return _finish(checks, errors, verbose)

    kinds = [t.kind for t in scan("   ")]
    checks["scan_blank"] = {"ok": kinds == [TokenKind.EOF]}
    if kinds != [TokenKind.EOF]:
        errors.append(f"Blank input scanned to {kinds}")

    for name, expression, expected in _VALUE_CASES:
        try:
            value = evaluate_line(expression)
        except Exception as e:
            checks[name] = {"ok": False, "error": str(e)}
            errors.append(f"{expression!r} raised {e!r}")
            continue
        ok = value == expected or math.isclose(value, expected)
        checks[name] = {"ok": ok, "value": value}
        if not ok:
            errors.append(f"{expression!r} evaluated to {value}, expected {expected}")

    nan_value = evaluate_line("0/0")
    checks["zero_over_zero"] = {"ok": math.isnan(nan_value)}
    if not math.isnan(nan_value):
        errors.append(f"'0/0' evaluated to {nan_value}, expected nan")

    for name, expression in _REJECTED_CASES:
        try:
            value = evaluate_line(expression)
        except ParseError as e:
            checks[name] = {"ok": True, "error": e.message}
        else:
            checks[name] = {"ok": False, "value": value}
            errors.append(f"{expression!r} should not parse, got {value}")

    return _finish(checks, errors, verbose)


def _finish(checks: Dict[str, Any], errors: List[str], verbose: bool) -> Dict[str, Any]:
    status = "ok" if not errors else "fail"
    report = {"status": status, "checks": checks, "errors": errors}
    if verbose:
        _print_report(report)
    return report


def _print_report(report: Dict[str, Any]) -> None:
    """Pretty-print validation results with high signal-to-noise."""
    status = report.get("status", "fail")
    print(f"textcalc validation: {status}")
    for name, detail in report.get("checks", {}).items():
        print(f"- {name}: {detail}")
    if report.get("errors"):
        print("Errors:")
        for msg in report["errors"]:
            print(f"  - {msg}")
