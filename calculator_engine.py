"""
Motor de estado de la calculadora.

Este módulo provee la clase CalculatorEngine, que interpreta una
secuencia de símbolos de entrada (dígitos, operadores, '=', 'AC', ...)
y mantiene el acumulador y el operador pendiente entre llamadas. No
conoce ninguna superficie visual: la capa de presentación posee el
motor, le envía símbolos y pinta los textos que expone.

Contrato de interfaz:
    - submit(symbol: str) -> None
    - display_text / history_text / error_text: propiedades de lectura
    - mode: propiedad Mode.BASIC | Mode.SCIENTIFIC
"""

import logging
import math
from dataclasses import dataclass

from config import ERROR_TIMEOUT_MS
from math_provider import (
    CalculatorError,
    DivisionByZeroError,
    PythonMathProvider,
    apply_operator,
    operator_symbol,
)
from number_format import format_display, number_to_string, parse_float, round_result
from token_classifier import Mode, Token, TokenKind, classify

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EngineState:
    """Instantánea del estado aritmético (sin el modo)."""

    current_input: str = "0"
    previous_input: float | None = None
    operator: str = ""
    waiting_for_operand: bool = False
    history_text: str = ""
    error_text: str | None = None


class CalculatorEngine:
    """Máquina de estados de una calculadora de bolsillo con historial."""

    def __init__(self, mode: Mode = Mode.BASIC, scheduler=None,
                 error_timeout_ms: int = ERROR_TIMEOUT_MS):
        self._provider = PythonMathProvider()
        self._mode = Mode(mode)
        self._scheduler = scheduler
        self._error_timeout_ms = error_timeout_ms
        self._error_job = None
        self._history: list[str] = []
        self.on_change = None

        self.current_input = "0"
        self.previous_input: float | None = None
        self.operator = ""
        self.waiting_for_operand = False
        self._history_text = ""
        self._error_text: str | None = None

        self._handlers = {
            TokenKind.DIGIT: self._input_digit,
            TokenKind.DECIMAL_POINT: self._input_decimal,
            TokenKind.BINARY_OPERATOR: self._input_operator,
            TokenKind.EQUALS: self._calculate,
            TokenKind.CLEAR: self._clear,
            TokenKind.SIGN_TOGGLE: self._toggle_sign,
            TokenKind.PERCENT: self._percentage,
            TokenKind.SCIENTIFIC_FUNCTION: self._scientific_function,
            TokenKind.BACKSPACE: self._backspace,
        }

    # ── Propiedades de lectura ───────────────────────────────────

    @property
    def display_text(self) -> str:
        return format_display(self.current_input)

    @property
    def history_text(self) -> str:
        return self._history_text

    @property
    def error_text(self) -> str | None:
        return self._error_text

    @property
    def history(self) -> tuple[str, ...]:
        """Expresiones completadas con '=', de la más antigua a la última."""
        return tuple(self._history)

    @property
    def state(self) -> EngineState:
        return EngineState(
            current_input=self.current_input,
            previous_input=self.previous_input,
            operator=self.operator,
            waiting_for_operand=self.waiting_for_operand,
            history_text=self._history_text,
            error_text=self._error_text,
        )

    # ── Propiedad: modo ──────────────────────────────────────────

    @property
    def mode(self) -> Mode:
        return self._mode

    @mode.setter
    def mode(self, mode: Mode):
        self._mode = Mode(mode)

    def toggle_mode(self) -> Mode:
        self._mode = self._mode.toggled()
        self._notify()
        return self._mode

    # ── Entrada principal ────────────────────────────────────────

    def submit(self, symbol: str) -> None:
        """Procesa un símbolo de entrada.

        Cualquier error visible se borra primero. Los símbolos que no
        se reconocen en el modo actual se ignoran sin error.
        """
        self.clear_error()

        token = classify(symbol, self._mode.capabilities)
        if token is None:
            logger.debug("Símbolo ignorado en modo %s: %r", self._mode.value, symbol)
        else:
            try:
                self._handlers[token.kind](token)
            except CalculatorError as exc:
                logger.info("Error de cálculo con %r: %s", symbol, exc)
                self.show_error(str(exc))

        self._notify()

    def _notify(self):
        if self.on_change is not None:
            self.on_change()

    # ── Transiciones ─────────────────────────────────────────────

    def _input_digit(self, token: Token):
        if self.waiting_for_operand:
            self.current_input = token.value
            self.waiting_for_operand = False
        elif self.current_input == "0":
            self.current_input = token.value
        else:
            self.current_input += token.value

    def _input_decimal(self, _token: Token):
        if self.waiting_for_operand:
            self.current_input = "0."
            self.waiting_for_operand = False
        elif "." not in self.current_input:
            self.current_input += "."

    def _input_operator(self, token: Token):
        value = parse_float(self.current_input)

        if self.previous_input is None:
            previous = value
            current = self.current_input
        elif self.operator:
            pending = self.previous_input
            if not pending or math.isnan(pending):
                pending = 0.0
            try:
                result = apply_operator(pending, value, self.operator)
            except DivisionByZeroError as exc:
                # Se conservan los operandos; el nuevo operador sí se acepta
                logger.info("Error de cálculo con %r: %s", token.value, exc)
                self.show_error(str(exc))
                previous = self.previous_input
                current = self.current_input
            else:
                previous = result
                current = round_result(result)
        else:
            previous = self.previous_input
            current = self.current_input

        self.previous_input = previous
        self.current_input = current
        self.waiting_for_operand = True
        self.operator = token.value
        self._history_text = (
            f"{number_to_string(self.previous_input)} {operator_symbol(token.value)}"
        )

    def _calculate(self, _token: Token):
        if self.previous_input is None or not self.operator:
            return

        value = parse_float(self.current_input)
        result = apply_operator(self.previous_input, value, self.operator)
        expression = (
            f"{number_to_string(self.previous_input)} {operator_symbol(self.operator)} "
            f"{number_to_string(value)} = {number_to_string(result)}"
        )

        self._history.append(expression)
        self._history_text = expression

        self.current_input = round_result(result)
        self.previous_input = None
        self.operator = ""
        self.waiting_for_operand = True

    def _clear(self, _token: Token = None):
        self.current_input = "0"
        self.previous_input = None
        self.operator = ""
        self.waiting_for_operand = False
        self._history_text = ""
        self.clear_error()

    def _toggle_sign(self, _token: Token):
        if self.current_input == "0":
            return
        if self.current_input.startswith("-"):
            self.current_input = self.current_input[1:]
        else:
            self.current_input = "-" + self.current_input

    def _percentage(self, _token: Token):
        self.current_input = number_to_string(parse_float(self.current_input) / 100)

    def _scientific_function(self, token: Token):
        if self._provider.is_constant(token.value):
            self.current_input = self._provider.constant(token.value)
            return

        result = self._provider.evaluate(token.value, parse_float(self.current_input))
        self.current_input = number_to_string(result)

    def _backspace(self, _token: Token):
        trimmed = self.current_input[:-1]
        # Un signo suelto no es un número
        self.current_input = trimmed if trimmed not in ("", "-") else "0"

    # ── Mensajes de error ────────────────────────────────────────

    def show_error(self, message: str) -> None:
        """Muestra ``message`` y programa su borrado automático."""
        self._cancel_error_job()
        self._error_text = message
        if self._scheduler is not None:
            self._error_job = self._scheduler.after(
                self._error_timeout_ms, self._expire_error
            )

    def clear_error(self) -> None:
        self._cancel_error_job()
        self._error_text = None

    def _expire_error(self):
        self._error_job = None
        self._error_text = None
        self._notify()

    def _cancel_error_job(self):
        if self._error_job is not None and self._scheduler is not None:
            self._scheduler.after_cancel(self._error_job)
        self._error_job = None
