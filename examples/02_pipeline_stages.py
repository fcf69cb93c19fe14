#!/usr/bin/env python3
"""
02: Pipeline Stages - Scanner, Parser, Tree

evaluate_line() is three steps glued together. Running them by hand shows
what each stage produces: a token list ending in EOF, an expression tree,
and finally the number.
"""

from textcalc import parse, scan


if __name__ == "__main__":
    text = " -(1.5 + 2) * 4 / 7 "

    tokens = scan(text)
    print("Tokens:")
    for token in tokens:
        print(f"  {token}")

    tree = parse(tokens)
    print(f"\nTree: {tree}")

    print(f"\nValue: {tree.evaluate()}")

    # Unknown characters do not stop the scanner; the parser rejects them
    print("\nScanning '2 # 3':")
    for token in scan("2 # 3"):
        print(f"  {token}")
