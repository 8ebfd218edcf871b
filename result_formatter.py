"""Formato del resultado numérico para la pantalla de la calculadora."""

import math

# Rango de un entero con signo de 64 bits
_LONG_MIN = -(2**63)
_LONG_MAX = 2**63 - 1


def _truncate_to_long(value: float) -> int:
    """Trunca hacia cero saturando en el rango de 64 bits (NaN -> 0)."""
    if math.isnan(value):
        return 0
    if value >= 2**63:
        return _LONG_MAX
    if value <= _LONG_MIN:
        return _LONG_MIN
    return int(value)


def format_result(value: float) -> str:
    """Convierte un double en el texto de la pantalla.

    Si el valor coincide exactamente con su truncamiento a entero de
    64 bits se muestra sin parte fraccionaria ("1", "-2"). En otro caso
    se usa la representación por defecto de Python, salvo infinitos y
    NaN, que se escriben como "Infinity", "-Infinity" y "NaN".
    """
    truncated = _truncate_to_long(value)
    if value == truncated:
        return str(truncated)

    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    return repr(value)
