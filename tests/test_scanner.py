"""
Tests for the scanner and the token model.
"""

import pytest

from textcalc.scanner import Scanner, scan
from textcalc.tokens import Token, TokenKind


def kinds(source, config=None):
    return [t.kind for t in scan(source, config)]


class TestScannerBasics:
    """Token classification."""

    def test_empty_input(self):
        assert scan("") == [Token(TokenKind.EOF, "")]

    @pytest.mark.parametrize("source", ["   ", "\t", " \t \n "])
    def test_whitespace_only(self, source):
        assert kinds(source) == [TokenKind.EOF]

    def test_decimal_number(self):
        assert scan("12.34") == [
            Token(TokenKind.NUMBER, "12.34"),
            Token(TokenKind.EOF, ""),
        ]

    def test_unknown_character(self):
        tokens = scan("@")
        assert tokens[0] == Token(TokenKind.ERROR, "@")
        assert tokens[-1].kind is TokenKind.EOF

    def test_operators_and_parens(self):
        assert kinds("()+-*/") == [
            TokenKind.OPEN_PAREN,
            TokenKind.CLOSE_PAREN,
            TokenKind.PLUS,
            TokenKind.MINUS,
            TokenKind.STAR,
            TokenKind.SLASH,
            TokenKind.EOF,
        ]

    def test_lexemes_are_exact_source_text(self):
        tokens = scan("  (12 +3.5)* 7 ")
        assert [t.lexeme for t in tokens] == ["(", "12", "+", "3.5", ")", "*", "7", ""]

    def test_signs_are_separate_tokens(self):
        assert kinds("-5") == [TokenKind.MINUS, TokenKind.NUMBER, TokenKind.EOF]

    def test_error_is_one_character_and_scanning_continues(self):
        tokens = scan("2 $$ 3")
        assert [(t.kind, t.lexeme) for t in tokens] == [
            (TokenKind.NUMBER, "2"),
            (TokenKind.ERROR, "$"),
            (TokenKind.ERROR, "$"),
            (TokenKind.NUMBER, "3"),
            (TokenKind.EOF, ""),
        ]

    def test_exactly_one_eof_at_end(self):
        tokens = scan("1 + 2 * (3 - 4) / 5")
        eof_positions = [i for i, t in enumerate(tokens) if t.kind is TokenKind.EOF]
        assert eof_positions == [len(tokens) - 1]


class TestScannerNumbers:
    """Number literal edge cases."""

    def test_trailing_dot_kept_by_default(self):
        assert scan("5.")[0] == Token(TokenKind.NUMBER, "5.")

    def test_trailing_dot_rejected_when_disabled(self, no_trailing_dot_config):
        tokens = scan("5.", no_trailing_dot_config)
        assert [(t.kind, t.lexeme) for t in tokens] == [
            (TokenKind.NUMBER, "5"),
            (TokenKind.ERROR, "."),
            (TokenKind.EOF, ""),
        ]

    def test_fraction_still_accepted_when_trailing_dot_disabled(self, no_trailing_dot_config):
        assert scan("5.25", no_trailing_dot_config)[0] == Token(TokenKind.NUMBER, "5.25")

    def test_leading_dot_is_an_error(self):
        assert kinds(".5") == [TokenKind.ERROR, TokenKind.NUMBER, TokenKind.EOF]

    def test_only_one_dot_consumed(self):
        tokens = scan("1.2.3")
        assert [t.lexeme for t in tokens] == ["1.2", ".", "3", ""]
        assert tokens[1].kind is TokenKind.ERROR

    def test_as_float(self):
        assert scan("5.")[0].as_float() == 5.0
        assert scan("0.125")[0].as_float() == 0.125

    def test_as_float_rejects_non_numbers(self):
        with pytest.raises(ValueError):
            Token(TokenKind.PLUS, "+").as_float()


class TestTokenModel:
    """Token value semantics."""

    def test_tokens_are_immutable(self):
        token = Token(TokenKind.NUMBER, "1")
        with pytest.raises(AttributeError):
            token.lexeme = "2"

    def test_debug_rendering(self):
        assert str(Token(TokenKind.NUMBER, "42")) == "Type: NUMBER, lexeme: 42"

    def test_describe(self):
        assert Token(TokenKind.ERROR, "@").describe() == "'@'"
        assert Token(TokenKind.EOF, "").describe() == "end of input"

    def test_scanner_can_scan_token_by_token(self):
        scanner = Scanner("1+")
        assert scanner.scan_token().kind is TokenKind.NUMBER
        assert scanner.scan_token().kind is TokenKind.PLUS
        assert scanner.scan_token().kind is TokenKind.EOF
        assert scanner.scan_token().kind is TokenKind.EOF
