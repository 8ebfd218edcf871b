"""Punto de entrada de la calculadora."""

import logging
import os
import tkinter as tk

from calculator_engine import CalculatorEngine
from calculator_ui import CalculatorApp


WINDOW_TITLE = "Calculadora"
START_COMPACT = False
LOG_LEVEL_ENV = "CALC_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _setup_logging() -> logging.Logger:
    level_name = os.getenv(LOG_LEVEL_ENV, "WARNING").upper()
    level = getattr(logging, level_name, logging.WARNING)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    if not root_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root_logger.addHandler(handler)
    return logging.getLogger("calculator")


def main():
    log = _setup_logging()
    root = tk.Tk()
    root.title(WINDOW_TITLE)
    engine = CalculatorEngine()
    CalculatorApp(root, engine=engine, compact=START_COMPACT)
    log.info("Calculadora iniciada")
    root.mainloop()


if __name__ == "__main__":
    main()
