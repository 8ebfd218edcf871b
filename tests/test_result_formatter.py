"""Pruebas del formato de resultados."""

import math

import pytest

from result_formatter import format_result


@pytest.mark.parametrize(
    "value, expected",
    [
        (0.0, "0"),
        (-0.0, "0"),
        (1.0, "1"),
        (-2.0, "-2"),
        (300.0, "300"),
        (1e18, "1000000000000000000"),
        (-(2.0**63), "-9223372036854775808"),
    ],
)
def test_whole_numbers_have_no_fraction(value, expected):
    assert format_result(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        (0.25, "0.25"),
        (math.sqrt(2), "1.4142135623730951"),
        (1.0000000000000002, "1.0000000000000002"),
        (-0.5, "-0.5"),
        (1e-05, "1e-05"),
    ],
)
def test_fractions_use_default_repr(value, expected):
    assert format_result(value) == expected


def test_values_beyond_64_bits_keep_float_form():
    assert format_result(1e20) == "1e+20"
    assert format_result(-1e300) == "-1e+300"


def test_non_finite_values():
    assert format_result(math.inf) == "Infinity"
    assert format_result(-math.inf) == "-Infinity"
    assert format_result(math.nan) == "NaN"


def test_never_returns_error_sentinel():
    for value in (0.0, math.inf, math.nan, 1 / 3, -7.0):
        assert format_result(value) != "Error"
