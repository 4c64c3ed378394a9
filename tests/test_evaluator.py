from __future__ import annotations

import math

import pytest

from graphcalc.errors import EvaluationError
from graphcalc.evaluator import SympyEvaluator, evaluate_at


@pytest.fixture
def evaluator() -> SympyEvaluator:
    return SympyEvaluator()


@pytest.mark.parametrize("expression, x, expected", [
    ("x^2", 3.0, 9.0),
    ("2x + 1", 2.0, 5.0),
    ("y = x - 4", 1.0, -3.0),
    ("sin(x)", math.pi / 2, 1.0),
    ("sqrt(x)", 16.0, 4.0),
    ("e^x", 1.0, math.e),
    ("pi", 0.0, math.pi),
    ("abs(x)", -2.5, 2.5),
])
def test_evaluates_calculator_style_input(evaluator, expression, x, expected) -> None:
    assert evaluator.evaluate(expression, {"x": x}) == pytest.approx(expected)


@pytest.mark.parametrize("expression, x", [
    ("1/x", 0.0),
    ("sqrt(x)", -1.0),
    ("log(x)", 0.0),
    ("a*x", 1.0),
    ("x +* 2", 1.0),
    ("", 1.0),
    ("x > 0", 1.0),
])
def test_failures_raise_evaluation_error(evaluator, expression, x) -> None:
    with pytest.raises(EvaluationError):
        evaluator.evaluate(expression, {"x": x})


def test_compiled_expressions_are_cached(evaluator) -> None:
    assert evaluator.compile("x^3") is evaluator.compile("x^3")

    with pytest.raises(EvaluationError) as first:
        evaluator.compile("x +* 2")
    with pytest.raises(EvaluationError) as second:
        evaluator.compile("x +* 2")
    assert first.value is second.value

    evaluator.clear_cache()
    assert evaluator.cache_info().currsize == 0


def test_cache_is_bounded() -> None:
    evaluator = SympyEvaluator(cache_size=2)
    first = evaluator.compile("x")
    evaluator.compile("x^2")
    with pytest.raises(EvaluationError):
        evaluator.compile("not valid (")

    assert evaluator.cache_info().currsize == 2
    # Least recently used entry was evicted and gets compiled again
    assert evaluator.compile("x") is not first
    assert evaluator.evaluate("x", {"x": 3.0}) == pytest.approx(3.0)


def test_evaluate_at_maps_every_failure_to_none(evaluator) -> None:
    assert evaluate_at(evaluator, "x^2", -2.0) == pytest.approx(4.0)
    assert evaluate_at(evaluator, "1/x", 0.0) is None
    assert evaluate_at(evaluator, "not an expression (", 1.0) is None


class _Returns:
    def __init__(self, value) -> None:
        self.value = value

    def evaluate(self, expression, bindings):
        return self.value


class _Raises:
    def evaluate(self, expression, bindings):
        raise RuntimeError("backend exploded")


@pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf, True, "3", complex(1, 1), None])
def test_evaluate_at_rejects_non_finite_and_non_real_results(value) -> None:
    assert evaluate_at(_Returns(value), "f", 0.0) is None


def test_evaluate_at_accepts_ints_and_absorbs_foreign_exceptions() -> None:
    assert evaluate_at(_Returns(7), "f", 0.0) == 7.0
    assert evaluate_at(_Raises(), "f", 0.0) is None
