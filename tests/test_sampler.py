from __future__ import annotations

import math

import pytest

from graphcalc.evaluator import SympyEvaluator
from graphcalc.sampler import sample_function, sample_xs
from graphcalc.viewport import CoordinateTransform, Viewport

W, H = 800, 600


@pytest.fixture
def transform() -> CoordinateTransform:
    return CoordinateTransform(Viewport(-10, 10, -10, 10), W, H)


def _world_xs(transform, segment):
    return [transform.screen_to_world(p.x, p.y).x for p in segment]


def _assert_unit_pixel_steps(segment) -> None:
    for a, b in zip(segment, segment[1:]):
        assert b.x - a.x == pytest.approx(1.0)


def test_sweep_covers_both_edges_with_one_sample_per_column(transform, make_evaluator) -> None:
    xs = sample_xs(transform)
    assert len(xs) == W + 1
    assert xs[0] == pytest.approx(-10)
    assert xs[-1] == pytest.approx(10)

    evaluator = make_evaluator({"zero": lambda x: 0.0})
    segments = sample_function("zero", transform, evaluator)
    assert len(evaluator.calls) == W + 1
    assert len(segments) == 1
    assert len(segments[0]) == W + 1
    assert segments[0][0].x == pytest.approx(0)
    assert segments[0][-1].x == pytest.approx(W)
    assert all(p.y == pytest.approx(H / 2) for p in segments[0])


def test_parabola_drops_off_screen_samples(transform) -> None:
    segments = sample_function("x^2", transform, SympyEvaluator())

    assert len(segments) == 1
    (segment,) = segments
    # x_i = -10 + i/40 is on screen for i = 274..526
    assert len(segment) == 253
    assert all(abs(x) <= math.sqrt(10) for x in _world_xs(transform, segment))
    assert all(0 <= p.y <= H for p in segment)
    _assert_unit_pixel_steps(segment)


def test_off_screen_run_is_not_bridged(transform) -> None:
    # 15 - x^2 leaves through the top for |x| < sqrt(5) and the bottom for |x| > 5
    segments = sample_function("15 - x^2", transform, SympyEvaluator())

    assert len(segments) == 2
    left, right = segments
    assert max(_world_xs(transform, left)) < -math.sqrt(5)
    assert min(_world_xs(transform, right)) > math.sqrt(5)
    _assert_unit_pixel_steps(left)
    _assert_unit_pixel_steps(right)


def test_tan_breaks_at_each_pole(transform) -> None:
    segments = sample_function("tan(x)", transform, SympyEvaluator())

    poles = [k * math.pi / 2 for k in (-5, -3, -1, 1, 3, 5)]
    assert len(segments) == len(poles) + 1

    for (before, after), pole in zip(zip(segments, segments[1:]), poles):
        gap_start = transform.screen_to_world(*before[-1]).x
        gap_end = transform.screen_to_world(*after[0]).x
        assert gap_start < pole < gap_end
        assert (gap_start + gap_end) / 2 == pytest.approx(pole, abs=0.05)


def test_evaluation_failures_split_segments(transform, make_evaluator) -> None:
    def undefined_near_zero(x):
        if abs(x) < 1:
            raise ZeroDivisionError
        return 0.0

    segments = sample_function("f", transform, make_evaluator({"f": undefined_near_zero}))
    assert len(segments) == 2
    assert max(_world_xs(transform, segments[0])) <= -1 + 1e-9
    assert min(_world_xs(transform, segments[1])) >= 1 - 1e-9


def test_non_finite_values_are_gaps(transform, make_evaluator) -> None:
    evaluator = make_evaluator({"f": lambda x: math.nan if 2 < x < 3 else 1.0})
    assert len(sample_function("f", transform, evaluator)) == 2


def test_unusable_expression_yields_no_segments(transform) -> None:
    assert sample_function("x +* 2", transform, SympyEvaluator()) == []
    assert sample_function("1/0 + x", transform, SympyEvaluator()) == []
