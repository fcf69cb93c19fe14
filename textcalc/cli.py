"""
Command-line entry point for textcalc.

Commands:
- ``eval EXPR``: evaluate one expression and print the result
- ``repl``: interactive read-loop (the default when no command is given)
- ``validate``: run the self-check and exit non-zero on failure
"""

from __future__ import annotations

import argparse
import json
import logging
import math
import sys
from typing import Any, Dict, Optional

from .config import CalcConfig
from .errors import ExpressionError
from .pipeline import format_result, parse_line
from .repl import run_repl
from .scanner import scan
from .validate import validate_installation


def _config_from_args(args: argparse.Namespace) -> CalcConfig:
    return CalcConfig(
        division_policy="strict" if args.strict else "ieee",
        allow_trailing_dot=not args.no_trailing_dot,
    )


def _json_value(value: Optional[float]) -> Any:
    """Strict JSON has no inf/nan, so non-finite values become strings."""
    if value is None or math.isfinite(value):
        return value
    return format_result(value)


def _cmd_eval(args: argparse.Namespace) -> int:
    config = _config_from_args(args)

    if args.tokens:
        for token in scan(args.expression, config):
            print(token)

    report: Dict[str, Any] = {"expression": args.expression, "ok": False, "value": None, "error": None}
    try:
        tree = parse_line(args.expression, config)
        if args.tree:
            print(tree)
        report["value"] = tree.evaluate(strict_division=config.strict_division)
        report["ok"] = True
    except ExpressionError as e:
        report["error"] = str(e)

    if args.json:
        report["value"] = _json_value(report["value"])
        print(json.dumps(report, indent=2, allow_nan=False))
    elif report["ok"]:
        print(format_result(report["value"]))
    else:
        print(f"Invalid Expression: {report['error']}")
    # Exit code communicates status for scripts
    return 0 if report["ok"] else 1


def _cmd_repl(args: argparse.Namespace) -> int:
    run_repl(_config_from_args(args))
    return 0


def _cmd_validate(args: argparse.Namespace) -> int:
    """Run the self-check and print results."""
    report: Dict[str, Any] = validate_installation(verbose=not args.json)
    if args.json:
        print(json.dumps(report, indent=2))
    return 0 if report.get("status") == "ok" else 1


def _add_policy_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--strict", action="store_true", help="Treat division by zero as an error")
    parser.add_argument(
        "--no-trailing-dot", action="store_true", help="Reject numbers ending in a bare '.' such as '5.'"
    )


def build_parser() -> argparse.ArgumentParser:
    """Create the top-level CLI parser."""
    parser = argparse.ArgumentParser(prog="textcalc", description="Evaluate arithmetic expressions")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command")

    p_eval = subparsers.add_parser("eval", help="Evaluate a single expression")
    p_eval.add_argument(
        "expression", nargs="?", help="Expression to evaluate, e.g. '(2+3)*4' or '-5+3'"
    )
    p_eval.add_argument("--json", action="store_true", help="Output machine-readable JSON")
    p_eval.add_argument("--tokens", action="store_true", help="Print the scanned tokens first")
    p_eval.add_argument("--tree", action="store_true", help="Print the parsed expression tree")
    _add_policy_flags(p_eval)
    p_eval.set_defaults(func=_cmd_eval)

    p_repl = subparsers.add_parser("repl", help="Interactive read-evaluate-print loop")
    _add_policy_flags(p_repl)
    p_repl.set_defaults(func=_cmd_repl)

    p_validate = subparsers.add_parser("validate", help="Run the pipeline self-check")
    p_validate.add_argument("--json", action="store_true", help="Output machine-readable JSON report")
    p_validate.set_defaults(func=_cmd_validate)

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint. Defaults to `repl` if no command is provided."""
    parser = build_parser()
    if argv is None:
        argv = sys.argv[1:]
    args, extras = parser.parse_known_args(argv)
    if args.command is None:
        args, extras = parser.parse_known_args(list(argv) + ["repl"])
    if args.command == "eval" and args.expression is None:
        # argparse treats a signed expression such as "-5+3" as an unknown option
        if len(extras) != 1:
            parser.error("eval: the following arguments are required: expression")
        args.expression = extras.pop()
    if extras:
        parser.error(f"unrecognized arguments: {' '.join(extras)}")
    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
