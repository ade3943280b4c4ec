import math

import pytest

from desktopcalc.model.operators import Operator, compute, format_number, is_division_by_zero, operate, round_result


@pytest.mark.parametrize("op, expected", [
    (Operator.ADD, 8.0),
    (Operator.SUBTRACT, 4.0),
    (Operator.MULTIPLY, 12.0),
    (Operator.DIVIDE, 3.0),
])
def test_operate(op, expected):
    assert operate(6.0, 2.0, op) == expected


def test_every_operator_has_a_symbol():
    assert {op: op.symbol for op in Operator} == {
        Operator.DIVIDE: "÷",
        Operator.MULTIPLY: "×",
        Operator.SUBTRACT: "−",
        Operator.ADD: "+",
    }


def test_compute_rounds_floating_point_noise():
    assert compute(0.1, 0.2, Operator.ADD) == 0.3
    assert compute(1.0, 3.0, Operator.DIVIDE) == 0.333
    assert compute(2.0, 3.0, Operator.DIVIDE) == 0.667


def test_round_result_halves_away_from_zero():
    assert round_result(1.0005) == 1.001
    assert round_result(-1.0005) == -1.001
    assert round_result(2.0625) == 2.063


def test_round_result_handles_large_and_non_finite_values():
    assert round_result(1e300) == 1e300
    assert math.isinf(round_result(math.inf))


def test_division_by_zero_detection():
    assert is_division_by_zero(0.0, Operator.DIVIDE)
    assert not is_division_by_zero(0.0, Operator.MULTIPLY)
    assert not is_division_by_zero(2.0, Operator.DIVIDE)


@pytest.mark.parametrize("value, text", [
    (20.0, "20"),
    (-3.0, "-3"),
    (-0.0, "0"),
    (0.5, "0.5"),
    (0.333, "0.333"),
])
def test_format_number(value, text):
    assert format_number(value) == text
