"""
Motor de estados de la calculadora de botones.

Este módulo provee la clase CalculatorEngine, que transforma la
secuencia de etiquetas de botón pulsadas en el texto de la pantalla.
Es independiente de la interfaz: el presentador sólo llama a
``press(label)`` y lee ``display``.

Contrato de interfaz:
    - press(label: str) -> None
    - display: propiedad de sólo lectura (str)
    - clipboard: callable opcional que recibe el texto al pulsar "Copy"
"""

import logging
import re

from math_provider import DomainError, Operator, PythonMathProvider
from result_formatter import format_result

logger = logging.getLogger(__name__)

ERROR = "Error"
NOT_IMPLEMENTED = "Not Implemented"

DIGIT_LABELS = frozenset("0123456789.")
CLEAR_LABEL = "AC"
EQUALS_LABEL = "="
COPY_LABEL = "Copy"

# Funciones inmediatas agrupadas igual que en el teclado
_IMMEDIATE_RE = re.compile(
    r"x\^2|x\^3|e\^x|10\^x|Copy|x!|ln|log10|1/x|√x|∛x|e|sin|cos|tan|π"
    r"|sinh|cosh|tanh|Rand|[%±]"
)


class CalculatorEngine:
    """Máquina de estados de una calculadora de escritorio.

    Estado:
        - prev_number: operando izquierdo pendiente o último resultado.
        - prev_operator: operador binario que espera su operando derecho.
        - operator_pressed: se acaba de registrar un operador binario.
        - result_displayed: la pantalla muestra el resultado de "=" o de
          una función inmediata.
        - last_binary_number: operando derecho del último "=", que se
          reutiliza al repetir "=".
        - _rewriting_operand: las funciones inmediatas están transformando
          el operando derecho de un operador pendiente.

    No hay precedencia de operadores: cada operador nuevo pliega la
    operación pendiente (``2 + 3 × 4 =`` da 20).
    """

    def __init__(self, clipboard=None, rng=None):
        self._provider = PythonMathProvider(rng)
        self._functions = self._provider.build_namespace()
        self.clipboard = clipboard

        self._display = "0"
        self.prev_number: float | None = None
        self.prev_operator: Operator | None = None
        self.operator_pressed = False
        self.result_displayed = False
        self.last_binary_number: float | None = None
        self._rewriting_operand = False

    @property
    def display(self) -> str:
        return self._display

    # ── Entrada principal ────────────────────────────────────────

    def press(self, label: str):
        """Procesa la pulsación de un botón identificado por su etiqueta."""
        if self._display == ERROR:
            self._press_in_error(label)
            return

        op = Operator.from_label(label)

        if label in DIGIT_LABELS:
            if self.result_displayed:
                self.prev_number = None
                self.prev_operator = None
                self.result_displayed = False
                self._display = "0"
            self._number_or_decimal_input(label)
        elif label == CLEAR_LABEL:
            self.prev_operator = None
            self.clear()
        elif _IMMEDIATE_RE.fullmatch(label):
            self._apply_immediate(label)
        elif op is not None:
            self._apply_binary(op)
        elif label == EQUALS_LABEL:
            self._evaluate_equals()
        else:
            logger.debug("Etiqueta ignorada: %r", label)

    def press_all(self, labels):
        """Pulsa una secuencia de etiquetas y devuelve la pantalla final."""
        for label in labels:
            self.press(label)
        return self._display

    def _press_in_error(self, label: str):
        # En estado de error sólo se aceptan dígitos, "." y AC
        if label in DIGIT_LABELS:
            # Un dígito empieza un cálculo nuevo: "5 ÷ 0 = 7 + 1 =" da 8
            self._display = "0." if label == "." else label
            self.result_displayed = False
            self.operator_pressed = False
            self.prev_number = None
            self.prev_operator = None
            self.last_binary_number = None
            self._rewriting_operand = False
        elif label == CLEAR_LABEL:
            self.clear()

    def clear(self):
        self._display = "0"
        self.prev_number = None
        self.prev_operator = None
        self.last_binary_number = None
        self._rewriting_operand = False

    # ── Dígitos ──────────────────────────────────────────────────

    def _number_or_decimal_input(self, label: str):
        current = self._display
        self._rewriting_operand = False

        if self.operator_pressed or self.result_displayed:
            current = "0"
            self.operator_pressed = False
            self.result_displayed = False
            self.last_binary_number = None

        if current == "0":
            self._display = current + label if label == "." else label
        elif label != ".":
            self._display = current + label
        elif "." not in current:
            self._display = current + label
        else:
            self._display = current

    # ── Funciones inmediatas ─────────────────────────────────────

    def _apply_immediate(self, label: str):
        try:
            value = float(self._display)
        except ValueError:
            self.clear()
            return

        if label == COPY_LABEL:
            self._copy()
            return

        function = self._functions.get(label)
        if function is None:
            self._display = NOT_IMPLEMENTED
            return

        try:
            value = function(value)
        except DomainError as exc:
            logger.debug("%s: %s", label, exc)
            self._display = ERROR
            return

        # Con un operador esperando su operando derecho, la función
        # transforma ese operando y el acumulador se conserva.
        rewrites_operand = self.prev_operator is not None and (
            not self.result_displayed or self._rewriting_operand
        )

        self._display = format_result(value)
        self.result_displayed = True
        if rewrites_operand:
            self.operator_pressed = False
            self.last_binary_number = None
            self._rewriting_operand = True
        else:
            self.prev_number = value

    def _copy(self):
        if self.clipboard is None:
            logger.debug("Copy sin portapapeles asociado")
            return
        self.clipboard(self._display)

    # ── Operadores binarios ──────────────────────────────────────

    def _apply_binary(self, op: Operator):
        try:
            current = float(self._display)
        except ValueError:
            self.clear()
            return

        fresh = self.result_displayed and not self._rewriting_operand
        if fresh or (self.prev_operator is None and self.prev_number is None):
            self._start_pending(current, op)
            return

        if self.prev_operator is not None and not self.operator_pressed:
            try:
                current = self.prev_operator.apply(self.prev_number, current)
            except ZeroDivisionError:
                logger.debug("División entre cero al encadenar %s", op.name)
                self._display = ERROR
                return
            self._display = format_result(current)

        self._start_pending(current, op)

    def _start_pending(self, value: float, op: Operator):
        self.prev_number = value
        self.prev_operator = op
        self.operator_pressed = True
        self.result_displayed = False
        self._rewriting_operand = False

    # ── Igual ────────────────────────────────────────────────────

    def _evaluate_equals(self):
        self._rewriting_operand = False
        try:
            current = float(self._display)
        except ValueError:
            self._display = ERROR
            return

        if self.prev_operator is None:
            self.result_displayed = True
            return

        if self.last_binary_number is not None:
            second = self.last_binary_number
        else:
            second = current

        try:
            result = self.prev_operator.apply(self.prev_number, second)
        except ZeroDivisionError:
            logger.debug("División entre cero en '='")
            self._display = ERROR
            return

        self._display = format_result(result)
        self.result_displayed = True
        self.prev_number = result
        self.last_binary_number = second
