"""
Interfaz gráfica de la calculadora de botones.

Usa tkinter. Toda la aritmética vive en CalculatorEngine; esta capa
sólo dibuja el teclado, traduce clics y teclas a etiquetas y muestra
la pantalla del motor.
"""

import logging
import tkinter as tk
from tkinter import font as tkfont
from tkinter import messagebox

from calculator_engine import CalculatorEngine
from keymap import TOGGLE_WIDTH, copy_sequences, key_to_label

logger = logging.getLogger(__name__)


# ═════════════════════════════════════════════════════════════════
#  Widget: pantalla de una sola línea
# ═════════════════════════════════════════════════════════════════

class ResultDisplay:
    """Entry de solo lectura alineado a la derecha."""

    def __init__(self, parent, **kw):
        self._var = tk.StringVar(value="0")
        self._entry = tk.Entry(parent, textvariable=self._var,
                               state="readonly", takefocus=0, **kw)

    @property
    def widget(self):
        return self._entry

    def set_text(self, text: str):
        self._var.set(text)
        self._entry.xview_moveto(1.0)

    def get_text(self) -> str:
        return self._var.get()


# ═════════════════════════════════════════════════════════════════
#  Aplicación principal
# ═════════════════════════════════════════════════════════════════

class CalculatorApp:
    """Ventana principal de la calculadora."""

    # ── Paleta de colores ────────────────────────────────────────
    C = {
        "bg":         "#000000",
        "display_fg": "#FFFFFF",
        "func":       "#212121",
        "func_fg":    "#FFFFFF",
        "special":    "#A5A5A5",
        "special_fg": "#121212",
        "num":        "#333333",
        "num_fg":     "#FFFFFF",
        "op":         "#FE9F06",
        "op_fg":      "#FFFFFF",
        "op_hover":   "#FFFFFF",
        "op_hover_fg": "#FE9F06",
    }

    # ── Definición del teclado ───────────────────────────────────
    #  8 columnas: 4 de funciones científicas + 4 del teclado básico.
    #  El "0" ocupa dos columnas.

    BUTTONS = [
        ["x^2", "x^3", "e^x", "10^x", "AC", "±", "%", "÷"],
        ["Copy", "x!", "ln", "log10", "7", "8", "9", "×"],
        ["1/x", "√x", "∛x", "e", "4", "5", "6", "–"],
        ["sin", "cos", "tan", "π", "1", "2", "3", "+"],
        ["sinh", "cosh", "tanh", "Rand", "0", ".", "="],
    ]

    SCIENCE_COLUMNS = 4
    FULL_GEOMETRY = "522x400"
    COMPACT_GEOMETRY = "262x400"

    # ────────────────────────────────────────────────────────────

    def __init__(self, root: tk.Tk, engine=None, compact: bool = False):
        self.root = root
        self.root.configure(bg=self.C["bg"])
        self.root.resizable(False, False)

        self.engine = engine if engine is not None else CalculatorEngine()
        self.engine.clipboard = self._copy_to_clipboard
        self._compact = compact
        self._science_buttons: list[tk.Button] = []

        self._init_fonts()
        self._create_display()
        self._create_keypad()
        self._bind_keyboard()
        self._apply_width()

    # ── Fuentes ──────────────────────────────────────────────────

    def _init_fonts(self):
        self._f_display = tkfont.Font(family="Helvetica", size=28)
        self._f_btn = tkfont.Font(family="Helvetica", size=14, weight="bold")

    # ── Pantalla ─────────────────────────────────────────────────

    def _create_display(self):
        frame = tk.Frame(self.root, bg=self.C["bg"], padx=4, pady=4)
        frame.pack(fill="x")

        self.result_display = ResultDisplay(
            frame,
            font=self._f_display, fg=self.C["display_fg"],
            readonlybackground=self.C["bg"],
            relief="flat", justify="right", bd=0,
        )
        self.result_display.widget.pack(fill="x", ipady=10)

    # ── Teclado ──────────────────────────────────────────────────

    def _create_keypad(self):
        self._keypad = tk.Frame(self.root, bg=self.C["bg"])
        self._keypad.pack(fill="both", expand=True, padx=2, pady=(0, 4))

        for r, row_def in enumerate(self.BUTTONS):
            col = 0
            for label in row_def:
                span = 2 if label == "0" else 1
                kind = self._kind_of(label)
                btn = tk.Button(
                    self._keypad, text=label, font=self._f_btn,
                    bg=self.C[kind], fg=self.C[f"{kind}_fg"],
                    activebackground=self.C[kind], relief="flat", bd=0,
                    highlightthickness=0,
                    command=lambda lb=label: self._on_button(lb),
                )
                btn.grid(row=r, column=col, columnspan=span,
                         sticky="nsew", padx=2, pady=3, ipady=8)
                self._bind_hover(btn, kind)
                if col < self.SCIENCE_COLUMNS:
                    self._science_buttons.append(btn)
                col += span

        for c in range(8):
            self._keypad.columnconfigure(c, weight=1, uniform="key")
        for r in range(len(self.BUTTONS)):
            self._keypad.rowconfigure(r, weight=1)

    @staticmethod
    def _kind_of(label: str) -> str:
        if label in ("AC", "±", "%"):
            return "special"
        if label in ("+", "–", "×", "÷", "="):
            return "op"
        if label in "0123456789.":
            return "num"
        return "func"

    def _bind_hover(self, btn: tk.Button, kind: str):
        normal_bg = self.C[kind]
        normal_fg = self.C[f"{kind}_fg"]
        if kind == "op":
            hover_bg, hover_fg = self.C["op_hover"], self.C["op_hover_fg"]
        else:
            hover_bg, hover_fg = self._brighter(normal_bg), normal_fg

        def _enter(_e):
            btn.config(bg=hover_bg, fg=hover_fg, cursor="hand2")

        def _leave(_e):
            btn.config(bg=normal_bg, fg=normal_fg, cursor="")

        btn.bind("<Enter>", _enter)
        btn.bind("<Leave>", _leave)

    @staticmethod
    def _brighter(color: str, factor: float = 0.7) -> str:
        """Aclara un color "#RRGGBB" (mismo criterio que Color.brighter)."""
        channels = [int(color[i:i + 2], 16) for i in (1, 3, 5)]
        floor = int(1.0 / (1.0 - factor))
        if not any(channels):
            return "#{0:02X}{0:02X}{0:02X}".format(floor)
        channels = [floor if 0 < ch < floor else ch for ch in channels]
        result = [min(int(ch / factor), 255) for ch in channels]
        return "#{:02X}{:02X}{:02X}".format(*result)

    # ── Atajos de teclado ────────────────────────────────────────

    def _bind_keyboard(self):
        system = self.root.tk.call("tk", "windowingsystem")
        for sequence in copy_sequences(system):
            self.root.bind(sequence, self._on_copy_shortcut)
        self.root.bind("<Key>", self._on_keypress)

    def _on_copy_shortcut(self, _event):
        self._on_button("Copy")
        return "break"

    def _on_keypress(self, event):
        label = key_to_label(event.char, event.keysym)
        if label is None:
            return None
        if label == TOGGLE_WIDTH:
            self._toggle_width()
        else:
            self._on_button(label)
        return "break"

    # ── Acciones ─────────────────────────────────────────────────

    def _on_button(self, label: str):
        self.engine.press(label)
        self.result_display.set_text(self.engine.display)

    # ── Ancho de ventana (tecla F) ───────────────────────────────

    def _toggle_width(self):
        self._compact = not self._compact
        logger.info("Modo %s", "compacto" if self._compact else "científico")
        self._apply_width()

    def _apply_width(self):
        for btn in self._science_buttons:
            if self._compact:
                btn.grid_remove()
            else:
                btn.grid()
        for c in range(self.SCIENCE_COLUMNS):
            self._keypad.columnconfigure(
                c, weight=0 if self._compact else 1,
                uniform="" if self._compact else "key",
            )
        self.root.geometry(
            self.COMPACT_GEOMETRY if self._compact else self.FULL_GEOMETRY
        )

    # ── Copiar resultado ─────────────────────────────────────────

    def _copy_to_clipboard(self, text: str):
        try:
            self.root.clipboard_clear()
            self.root.clipboard_append(text)
        except tk.TclError:
            logger.exception("No se pudo escribir en el portapapeles")
            return
        logger.info("Copiado al portapapeles: %s", text)
        messagebox.showinfo("Copiar", "Contenido copiado al portapapeles.",
                            parent=self.root)
