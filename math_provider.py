"""Operaciones aritméticas y funciones científicas de la calculadora."""

import math

from number_format import number_to_string


class CalculatorError(ArithmeticError):
    """Error recuperable de cálculo; se muestra como mensaje transitorio."""


class DivisionByZeroError(CalculatorError, ZeroDivisionError):
    """División con divisor cero. ``operand`` conserva el dividendo."""

    def __init__(self, operand: float):
        super().__init__("No se puede dividir por cero")
        self.operand = operand


class DomainError(CalculatorError, ValueError):
    """Argumento fuera del dominio de una función unaria."""

    def __init__(self, function: str, value: float):
        super().__init__(f"Entrada no válida para {function}")
        self.function = function
        self.value = value


OPERATOR_SYMBOLS = {
    "+": "+",
    "-": "−",
    "*": "×",
    "/": "÷",
}


def operator_symbol(op: str) -> str:
    return OPERATOR_SYMBOLS.get(op, op)


def apply_operator(a: float, b: float, op: str) -> float:
    """Aplica ``a op b`` con aritmética IEEE-754.

    Raises:
        DivisionByZeroError: ``op`` es ``/`` y ``b`` es cero.
    """
    if op == "+":
        return a + b
    if op == "-":
        return a - b
    if op == "*":
        return a * b
    if op == "/":
        if b == 0:
            raise DivisionByZeroError(a)
        return a / b
    return b


class PythonMathProvider:
    """Funciones científicas unarias y constantes en grados sexagesimales."""

    FUNCTIONS = ("sin", "cos", "tan", "ln", "log", "sqrt", "x²")
    CONSTANTS = {
        "π": math.pi,
        "e": math.e,
    }

    def __init__(self):
        self._functions = self._build_namespace()

    @staticmethod
    def _build_namespace() -> dict:
        def _trig(fn):
            def w(x):
                return fn(x * math.pi / 180)

            return w

        return {
            "sin": _trig(math.sin),
            "cos": _trig(math.cos),
            "tan": _trig(math.tan),
            "ln": math.log,
            "log": math.log10,
            "sqrt": math.sqrt,
            "x²": lambda x: x * x,
        }

    def is_constant(self, name: str) -> bool:
        return name in self.CONSTANTS

    def constant(self, name: str) -> str:
        """Texto decimal de la constante ``name``."""
        return number_to_string(self.CONSTANTS[name])

    def evaluate(self, name: str, value: float) -> float:
        """Evalúa la función ``name`` en ``value``.

        Raises:
            DomainError: ``value`` fuera del dominio de la función.
            KeyError: función desconocida.
        """
        fn = self._functions[name]
        try:
            return fn(value)
        except (ValueError, OverflowError) as exc:
            raise DomainError(name, value) from exc
