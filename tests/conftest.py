import random

import pytest

from calculator_engine import CalculatorEngine


@pytest.fixture
def engine():
    return CalculatorEngine(rng=random.Random(1234))


@pytest.fixture
def press(engine):
    """Pulsa etiquetas separadas por espacios y devuelve la pantalla."""

    def _press(sequence: str) -> str:
        return engine.press_all(sequence.split())

    return _press
