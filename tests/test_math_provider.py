"""Pruebas de operadores binarios y funciones inmediatas."""

import math
import random

import pytest

from math_provider import DomainError, Operator, PythonMathProvider


@pytest.fixture
def functions():
    return PythonMathProvider(random.Random(0)).build_namespace()


def test_operator_from_label():
    assert Operator.from_label("+") is Operator.ADD
    assert Operator.from_label("–") is Operator.SUBTRACT
    assert Operator.from_label("×") is Operator.MULTIPLY
    assert Operator.from_label("÷") is Operator.DIVIDE
    assert Operator.from_label("-") is None
    assert Operator.from_label("=") is None


def test_operator_symbol_round_trips():
    for op in Operator:
        assert Operator.from_label(op.symbol) is op


@pytest.mark.parametrize(
    "op, left, right, expected",
    [
        (Operator.ADD, 2.0, 3.0, 5.0),
        (Operator.SUBTRACT, 5.0, 7.0, -2.0),
        (Operator.MULTIPLY, 0.5, 2.0, 1.0),
        (Operator.DIVIDE, 9.0, 3.0, 3.0),
        (Operator.ADD, 1e308, 1e308, math.inf),
    ],
)
def test_operator_apply(op, left, right, expected):
    assert op.apply(left, right) == expected


@pytest.mark.parametrize("zero", [0.0, -0.0])
def test_divide_by_zero(zero):
    with pytest.raises(ZeroDivisionError):
        Operator.DIVIDE.apply(1.0, zero)


def test_library_labels(functions):
    assert set(functions) == {
        "x^2", "x^3", "e^x", "10^x", "x!", "ln", "log10", "1/x", "√x",
        "∛x", "e", "π", "sin", "cos", "tan", "sinh", "cosh", "tanh",
        "Rand", "±", "%",
    }


@pytest.mark.parametrize(
    "label, argument",
    [
        ("x!", -1.0), ("x!", 2.5), ("x!", math.nan), ("x!", math.inf),
        ("ln", 0.0), ("ln", -1.0), ("ln", math.nan),
        ("log10", 0.0), ("log10", -3.0),
        ("1/x", 0.0), ("1/x", -0.0),
        ("√x", -4.0), ("√x", math.nan),
    ],
)
def test_domain_violations(functions, label, argument):
    with pytest.raises(DomainError):
        functions[label](argument)


def test_domain_error_is_value_error():
    assert issubclass(DomainError, ValueError)


def test_factorial_values(functions):
    assert functions["x!"](0.0) == 1
    assert functions["x!"](5.0) == 120
    assert functions["x!"](170.0) == pytest.approx(float(math.factorial(170)), rel=1e-12)
    assert functions["x!"](171.0) == math.inf


def test_cube_root_is_real(functions):
    assert functions["∛x"](-27.0) == -3.0
    assert functions["∛x"](8.0) == 2.0


@pytest.mark.parametrize(
    "label, argument, expected",
    [
        ("x^2", 1e200, math.inf),
        ("x^3", -1e200, -math.inf),
        ("e^x", 1000.0, math.inf),
        ("10^x", 400.0, math.inf),
        ("sinh", 1000.0, math.inf),
        ("sinh", -1000.0, -math.inf),
        ("cosh", -1000.0, math.inf),
        ("tanh", 1000.0, 1.0),
    ],
)
def test_overflow_saturates(functions, label, argument, expected):
    assert functions[label](argument) == expected


@pytest.mark.parametrize("label", ["sin", "cos", "tan"])
def test_trig_of_infinity_is_nan(functions, label):
    assert math.isnan(functions[label](math.inf))


def test_constants_ignore_argument(functions):
    assert functions["e"](42.0) == math.e
    assert functions["π"](-1.0) == math.pi


def test_sign_and_percent(functions):
    assert functions["±"](3.5) == -3.5
    assert functions["%"](50.0) == 0.5


def test_rand_uses_injected_generator():
    expected = random.Random(7).random()
    provider = PythonMathProvider(random.Random(7))
    assert provider.build_namespace()["Rand"](123.0) == expected
