"""
Conversión entre números y cadenas para la pantalla de la calculadora.

Las cadenas producidas siguen las reglas de los números de JavaScript
(``String(x)``, ``x.toFixed(n)``, ``x.toExponential(n)``, ``parseFloat``)
para que la salida coincida dígito a dígito con la calculadora web.
"""

import math
import re
from decimal import ROUND_HALF_UP, Decimal, localcontext

from config import EXPONENTIAL_DIGITS, MAX_DISPLAY_LENGTH, RESULT_DECIMALS


_FLOAT_PREFIX_RE = re.compile(
    r"^\s*(?P<num>[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))"
)


# ── Lectura ──────────────────────────────────────────────────────

def parse_float(text: str) -> float:
    """Interpreta el prefijo numérico de ``text`` como ``parseFloat``.

    Devuelve NaN si la cadena no empieza por un número.
    """
    match = _FLOAT_PREFIX_RE.match(text)
    if not match:
        return math.nan
    return float(match.group("num"))


# ── Escritura ────────────────────────────────────────────────────

def _non_finite(value: float) -> str | None:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    return None


def number_to_string(value: float) -> str:
    """Representación más corta que reproduce ``value`` (``String(x)``)."""
    special = _non_finite(value)
    if special is not None:
        return special
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    shortest = Decimal(repr(abs(value))).normalize()
    _, digit_tuple, exponent = shortest.as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    k = len(digits)
    n = k + exponent  # posición del punto decimal

    if k <= n <= 21:
        return sign + digits + "0" * (n - k)
    if 0 < n <= 21:
        return f"{sign}{digits[:n]}.{digits[n:]}"
    if -6 < n <= 0:
        return f"{sign}0.{'0' * -n}{digits}"

    exp_text = f"e{'+' if n - 1 >= 0 else '-'}{abs(n - 1)}"
    if k == 1:
        return f"{sign}{digits}{exp_text}"
    return f"{sign}{digits[0]}.{digits[1:]}{exp_text}"


def to_fixed(value: float, digits: int) -> str:
    """Redondeo a ``digits`` decimales, empates lejos de cero (``toFixed``)."""
    special = _non_finite(value)
    if special is not None:
        return special
    if abs(value) >= 1e21:
        return number_to_string(value)

    with localcontext() as ctx:
        ctx.prec = 60
        quantum = Decimal(1).scaleb(-digits)
        rounded = Decimal(abs(value)).quantize(quantum, rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    return f"{sign}{rounded:f}"


def to_exponential(value: float, digits: int = EXPONENTIAL_DIGITS) -> str:
    """Notación exponencial con ``digits`` decimales (``toExponential``)."""
    special = _non_finite(value)
    if special is not None:
        return special

    sign = "-" if value < 0 else ""
    exact = Decimal(abs(value))
    if exact == 0:
        return f"{sign}0.{'0' * digits}e+0"

    exponent = exact.adjusted()
    with localcontext() as ctx:
        ctx.prec = 60
        quantum = Decimal(1).scaleb(exponent - digits)
        rounded = exact.quantize(quantum, rounding=ROUND_HALF_UP)

    mantissa = "".join(str(d) for d in rounded.as_tuple().digits)
    if len(mantissa) > digits + 1:
        # 9.9999995 → 10.000000: el acarreo sube el exponente
        exponent += 1
        mantissa = mantissa[: digits + 1]

    frac = mantissa[1:]
    body = f"{mantissa[0]}.{frac}" if frac else mantissa[0]
    return f"{sign}{body}e{'+' if exponent >= 0 else '-'}{abs(exponent)}"


# ── Presentación ─────────────────────────────────────────────────

def round_result(value: float) -> str:
    """Resultado de una operación binaria tal como se muestra al usuario.

    Redondea a ``RESULT_DECIMALS`` decimales y elimina los ceros sobrantes
    releyendo el número, de modo que ``2.0000000`` se muestra ``2``.
    """
    return number_to_string(parse_float(to_fixed(value, RESULT_DECIMALS)))


def format_display(text: str) -> str:
    """Texto de pantalla para ``text``; no modifica la entrada."""
    if len(text) > MAX_DISPLAY_LENGTH:
        return to_exponential(parse_float(text), EXPONENTIAL_DIGITS)
    return text
