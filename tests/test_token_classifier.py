"""
Tests for the token classifier.
"""
import pytest

from token_classifier import (
    Capability,
    Mode,
    Token,
    TokenKind,
    classify,
    token_for_key,
)

SCIENTIFIC = Mode.SCIENTIFIC.capabilities


class TestClassify:
    """Tests for classify."""

    @pytest.mark.parametrize("digit", list("0123456789"))
    def test_digits(self, digit):
        assert classify(digit) == Token(TokenKind.DIGIT, digit)

    @pytest.mark.parametrize("symbol, op", [
        ("+", "+"), ("-", "-"), ("*", "*"), ("/", "/"),
        ("−", "-"), ("×", "*"), ("÷", "/"),
    ])
    def test_operators_are_normalised(self, symbol, op):
        assert classify(symbol) == Token(TokenKind.BINARY_OPERATOR, op)

    @pytest.mark.parametrize("symbol, kind", [
        (".", TokenKind.DECIMAL_POINT),
        ("=", TokenKind.EQUALS),
        ("AC", TokenKind.CLEAR),
        ("±", TokenKind.SIGN_TOGGLE),
        ("%", TokenKind.PERCENT),
        ("⌫", TokenKind.BACKSPACE),
        ("backspace", TokenKind.BACKSPACE),
    ])
    def test_control_symbols(self, symbol, kind):
        assert classify(symbol).kind == kind

    def test_surrounding_whitespace_ignored(self):
        assert classify(" 7\n") == Token(TokenKind.DIGIT, "7")

    @pytest.mark.parametrize("symbol", ["", "x", "12", "ac", "==", "^"])
    def test_unknown_symbols(self, symbol):
        assert classify(symbol, SCIENTIFIC) is None

    def test_scientific_requires_capability(self):
        assert classify("sin") is None
        assert classify("sin", frozenset({Capability.BASIC})) is None
        assert classify("sin", SCIENTIFIC) == Token(TokenKind.SCIENTIFIC_FUNCTION, "sin")

    @pytest.mark.parametrize("symbol, name", [
        ("√", "sqrt"),
        ("pi", "π"),
        ("x^2", "x²"),
        ("e", "e"),
    ])
    def test_scientific_aliases(self, symbol, name):
        assert classify(symbol, SCIENTIFIC) == Token(TokenKind.SCIENTIFIC_FUNCTION, name)


class TestMode:
    """Tests for Mode capabilities."""

    def test_capabilities(self):
        assert Mode.BASIC.capabilities == frozenset({Capability.BASIC})
        assert Mode.SCIENTIFIC.capabilities == frozenset(
            {Capability.BASIC, Capability.SCIENTIFIC}
        )

    def test_toggled(self):
        assert Mode.BASIC.toggled() is Mode.SCIENTIFIC
        assert Mode.SCIENTIFIC.toggled() is Mode.BASIC


class TestTokenForKey:
    """Tests for keyboard mapping."""

    @pytest.mark.parametrize("char, keysym, expected", [
        ("5", "5", "5"),
        (".", "period", "."),
        ("+", "plus", "+"),
        ("/", "slash", "/"),
        ("\r", "Return", "="),
        ("", "KP_Enter", "="),
        ("=", "equal", "="),
        ("\x1b", "Escape", "AC"),
        ("c", "c", "AC"),
        ("C", "C", "AC"),
        ("\x08", "BackSpace", "⌫"),
        ("", "KP_7", "7"),
        ("", "KP_Multiply", "*"),
    ])
    def test_mapped_keys(self, char, keysym, expected):
        assert token_for_key(char, keysym) == expected

    @pytest.mark.parametrize("char, keysym", [
        ("a", "a"),
        ("", "Shift_L"),
        ("%", "percent"),
    ])
    def test_unmapped_keys(self, char, keysym):
        assert token_for_key(char, keysym) is None
