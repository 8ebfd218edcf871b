"""Operadores binarios y biblioteca de funciones inmediatas de la calculadora."""

import math
import operator
import random
from enum import Enum


class DomainError(ValueError):
    """Argumento fuera del dominio de la función (se muestra como "Error")."""


class Operator(Enum):
    """Operadores binarios del teclado, identificados por su etiqueta."""

    ADD = "+"
    SUBTRACT = "–"  # guion largo U+2013, no el "-" ASCII
    MULTIPLY = "×"
    DIVIDE = "÷"

    @property
    def symbol(self) -> str:
        return self.value

    @classmethod
    def from_label(cls, label: str):
        try:
            return cls(label)
        except ValueError:
            return None

    def apply(self, left: float, right: float) -> float:
        """Aplica el operador en doble precisión IEEE.

        Raises:
            ZeroDivisionError: división entre cero.
        """
        if self is Operator.DIVIDE and right == 0:
            raise ZeroDivisionError("división entre cero")
        return _BINARY[self](left, right)


_BINARY = {
    Operator.ADD: operator.add,
    Operator.SUBTRACT: operator.sub,
    Operator.MULTIPLY: operator.mul,
    Operator.DIVIDE: operator.truediv,
}

# Límite de la conversión (int) de 32 bits usada para validar x!
_INT_MAX = 2**31 - 1


class PythonMathProvider:
    """Provee las funciones inmediatas (unarias) indexadas por etiqueta.

    Las funciones siguen la semántica IEEE: un desbordamiento produce
    infinito y las entradas no válidas de las funciones trigonométricas
    producen NaN, en lugar de las excepciones del módulo ``math``.
    """

    def __init__(self, rng: random.Random | None = None):
        self._rng = rng if rng is not None else random.Random()

    @property
    def rng(self) -> random.Random:
        return self._rng

    # ── Envolturas IEEE ──────────────────────────────────────────

    @staticmethod
    def _overflow_to_inf(fn, sign_of_input: bool = False):
        def w(x):
            try:
                return fn(x)
            except OverflowError:
                return math.copysign(math.inf, x) if sign_of_input else math.inf

        return w

    @staticmethod
    def _invalid_to_nan(fn):
        def w(x):
            try:
                return fn(x)
            except ValueError:
                return math.nan

        return w

    # ── Funciones con dominio restringido ────────────────────────

    @staticmethod
    def _factorial(x: float) -> float:
        if math.isnan(x) or x < 0 or x > _INT_MAX or x != int(x):
            raise DomainError("factorial requiere entero no negativo")
        result = 1.0
        for i in range(1, int(x) + 1):
            result *= i
            if math.isinf(result):
                break
        return result

    @staticmethod
    def _ln(x: float) -> float:
        if x > 0:
            return math.log(x)
        raise DomainError("ln requiere x > 0")

    @staticmethod
    def _log10(x: float) -> float:
        if x > 0:
            return math.log10(x)
        raise DomainError("log10 requiere x > 0")

    @staticmethod
    def _reciprocal(x: float) -> float:
        if x != 0:
            return 1 / x
        raise DomainError("1/x no admite cero")

    @staticmethod
    def _sqrt(x: float) -> float:
        if x >= 0:
            return math.sqrt(x)
        raise DomainError("√x requiere x >= 0")

    @staticmethod
    def _pow10(x: float) -> float:
        try:
            return math.pow(10.0, x)
        except OverflowError:
            return math.inf

    def build_namespace(self) -> dict:
        """Devuelve ``{etiqueta: función(float) -> float}``."""
        overflow = self._overflow_to_inf
        nan_on_invalid = self._invalid_to_nan

        return {
            "x^2": overflow(lambda x: math.pow(x, 2)),
            "x^3": overflow(lambda x: math.pow(x, 3), sign_of_input=True),
            "e^x": overflow(math.exp),
            "10^x": self._pow10,
            "x!": self._factorial,
            "ln": self._ln,
            "log10": self._log10,
            "1/x": self._reciprocal,
            "√x": self._sqrt,
            "∛x": math.cbrt,
            "e": lambda _x: math.e,
            "π": lambda _x: math.pi,
            "sin": nan_on_invalid(math.sin),
            "cos": nan_on_invalid(math.cos),
            "tan": nan_on_invalid(math.tan),
            "sinh": overflow(math.sinh, sign_of_input=True),
            "cosh": overflow(math.cosh),
            "tanh": math.tanh,
            "Rand": lambda _x: self._rng.random(),
            "±": lambda x: x * -1,
            "%": lambda x: x / 100,
        }
