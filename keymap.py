"""Traducción de teclas físicas a etiquetas de botón de la calculadora."""

# Acción del presentador que no llega al motor
TOGGLE_WIDTH = "toggle-width"

_CHAR_LABELS = {
    **{d: d for d in "0123456789."},
    "+": "+",
    "-": "–",
    "*": "×",
    "/": "÷",
    "=": "=",
    "%": "%",
    "c": "AC",
    "C": "AC",
}

_KEYSYM_LABELS = {
    "Return": "=",
    "KP_Enter": "=",
    "KP_Add": "+",
    "KP_Subtract": "–",
    "KP_Multiply": "×",
    "KP_Divide": "÷",
    "KP_Decimal": ".",
}


def key_to_label(char: str, keysym: str = "") -> str | None:
    """Devuelve la etiqueta asociada a una tecla, o None si no tiene.

    Los modificadores no se consultan: el atajo de copiar se enlaza
    aparte con ``copy_sequences``.

    Args:
        char: carácter producido (``event.char`` en tkinter).
        keysym: nombre simbólico de la tecla (``event.keysym``).
    """
    if keysym in _KEYSYM_LABELS:
        return _KEYSYM_LABELS[keysym]
    if char in ("f", "F"):
        return TOGGLE_WIDTH
    return _CHAR_LABELS.get(char)


def copy_sequences(windowing_system: str) -> list[str]:
    """Secuencias de eventos tk que equivalen al botón "Copy"."""
    sequences = ["<Control-c>", "<Control-C>"]
    if windowing_system == "aqua":
        sequences = ["<Command-c>", "<Command-C>"] + sequences
    return sequences
