#!/usr/bin/env python3
"""
01: Hello Calc - From Text to Number

This is step 1: one line of text goes in, one IEEE-754 double comes out.
Malformed input raises ParseError; division by zero follows floating point
rules unless you ask for the strict policy.
"""

from textcalc import CalcConfig, ExpressionError, evaluate_line, format_result


if __name__ == "__main__":
    test_cases = [
        "2+3*4",      # precedence
        "(2+3)*4",    # parentheses
        "10-2-3",     # left associativity
        "-5+3",       # unary minus
        "1/0",        # IEEE infinity
        "0/0",        # IEEE NaN
        "--5",        # only one leading sign allowed
        "2 2",        # trailing garbage
    ]

    print("Hello Calc Example")
    print("=" * 30)

    for text in test_cases:
        try:
            print(f"{text:>10}  ->  {format_result(evaluate_line(text))}")
        except ExpressionError as e:
            print(f"{text:>10}  ->  invalid ({e})")

    print()
    strict = CalcConfig(division_policy="strict")
    try:
        evaluate_line("1/0", strict)
    except ExpressionError as e:
        print(f"Strict policy: {e}")
