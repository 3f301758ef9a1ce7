"""
Clasificación de símbolos de entrada de la calculadora.

Convierte el símbolo de un botón o de una tecla en un ``Token`` con su
categoría. Los símbolos desconocidos, o los científicos cuando el modo
activo no concede esa capacidad, producen ``None`` y se ignoran.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenKind(str, Enum):
    """Categorías de entrada."""

    DIGIT = "digit"
    DECIMAL_POINT = "decimal_point"
    BINARY_OPERATOR = "binary_operator"
    EQUALS = "equals"
    CLEAR = "clear"
    SIGN_TOGGLE = "sign_toggle"
    PERCENT = "percent"
    SCIENTIFIC_FUNCTION = "scientific_function"
    BACKSPACE = "backspace"


class Capability(str, Enum):
    BASIC = "basic"
    SCIENTIFIC = "scientific"


class Mode(str, Enum):
    """Modo de la calculadora; determina qué tokens se aceptan."""

    BASIC = "basic"
    SCIENTIFIC = "scientific"

    @property
    def capabilities(self) -> frozenset[Capability]:
        if self is Mode.SCIENTIFIC:
            return frozenset({Capability.BASIC, Capability.SCIENTIFIC})
        return frozenset({Capability.BASIC})

    def toggled(self) -> Mode:
        return Mode.BASIC if self is Mode.SCIENTIFIC else Mode.SCIENTIFIC


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    value: str


# ── Tablas de símbolos ───────────────────────────────────────────

_OPERATOR_ALIASES = {
    "+": "+",
    "-": "-",
    "*": "*",
    "/": "/",
    "\u2212": "-",   # −
    "\u00D7": "*",   # ×
    "\u00F7": "/",   # ÷
}

_CONTROL_SYMBOLS = {
    ".": TokenKind.DECIMAL_POINT,
    "=": TokenKind.EQUALS,
    "AC": TokenKind.CLEAR,
    "\u00B1": TokenKind.SIGN_TOGGLE,   # ±
    "%": TokenKind.PERCENT,
    "\u232B": TokenKind.BACKSPACE,     # ⌫
    "backspace": TokenKind.BACKSPACE,
}

_SCIENTIFIC_ALIASES = {
    "sin": "sin",
    "cos": "cos",
    "tan": "tan",
    "ln": "ln",
    "log": "log",
    "sqrt": "sqrt",
    "\u221A": "sqrt",    # √
    "x²": "x²",
    "x^2": "x²",
    "π": "π",
    "pi": "π",
    "e": "e",
}

SCIENTIFIC_SYMBOLS = ("sin", "cos", "tan", "ln", "log", "sqrt", "x²", "π", "e")


def classify(symbol: str, capabilities=frozenset({Capability.BASIC})) -> Token | None:
    """Clasifica ``symbol``; devuelve ``None`` si debe ignorarse."""
    text = symbol.strip()
    if not text:
        return None

    if len(text) == 1 and "0" <= text <= "9":
        return Token(TokenKind.DIGIT, text)

    if text in _OPERATOR_ALIASES:
        return Token(TokenKind.BINARY_OPERATOR, _OPERATOR_ALIASES[text])

    if text in _CONTROL_SYMBOLS:
        return Token(_CONTROL_SYMBOLS[text], text)

    name = _SCIENTIFIC_ALIASES.get(text)
    if name is not None and Capability.SCIENTIFIC in capabilities:
        return Token(TokenKind.SCIENTIFIC_FUNCTION, name)

    return None


# ── Teclado físico ───────────────────────────────────────────────

_KEYSYM_SYMBOLS = {
    "Return": "=",
    "KP_Enter": "=",
    "Escape": "AC",
    "BackSpace": "⌫",
    "KP_Add": "+",
    "KP_Subtract": "-",
    "KP_Multiply": "*",
    "KP_Divide": "/",
    "KP_Decimal": ".",
}


def token_for_key(char: str, keysym: str = "") -> str | None:
    """Símbolo de token para una pulsación de teclado (``char``, ``keysym``)."""
    if keysym in _KEYSYM_SYMBOLS:
        return _KEYSYM_SYMBOLS[keysym]
    if keysym.startswith("KP_") and keysym[3:].isdigit():
        return keysym[3:]

    if len(char) != 1:
        return None
    if "0" <= char <= "9" or char in "+-*/.=":
        return char
    if char in ("c", "C"):
        return "AC"
    return None
