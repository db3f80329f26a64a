from __future__ import annotations

import math

import pytest

from vizcore.functions import (
    FUNCTIONS,
    central_difference,
    get_function,
    sample_curve,
    secant_lines,
    secant_slope,
    tangent_line,
)

SQUARE = FUNCTIONS[0]


def test_catalog_names() -> None:
    assert [f.name for f in FUNCTIONS] == ["x²", "x³", "sin(x)", "cos(x)", "e^x", "ln(x)"]


@pytest.mark.parametrize("fn", FUNCTIONS, ids=lambda f: f.name)
def test_analytic_derivative_matches_central_difference(fn) -> None:
    for x in (-2.0, -0.5, 0.7, 1.3, 3.0):
        if fn.name == "ln(x)" and x < 0.2:
            continue
        assert fn.derivative(x) == pytest.approx(central_difference(fn, x, 1e-5), rel=1e-4, abs=1e-6)


def test_unknown_index_raises() -> None:
    with pytest.raises(IndexError):
        get_function(len(FUNCTIONS))
    with pytest.raises(IndexError):
        get_function(-1)


def test_ln_is_floored() -> None:
    ln = get_function(5)
    assert ln.func(-3.0) == pytest.approx(math.log(0.1))
    assert ln.derivative(0.0) == pytest.approx(10.0)


def test_sample_curve_includes_both_ends() -> None:
    pts = sample_curve(lambda x: x, (-5, 5), 200)
    assert len(pts) == 201
    assert pts[0] == (-5.0, -5.0)
    assert pts[-1] == (5.0, 5.0)


def test_sample_curve_drops_bad_samples() -> None:
    pts = sample_curve(math.log, (-1, 1), 20)
    assert pts
    assert all(x > 0 for x, _ in pts)

    pts = sample_curve(lambda x: math.nan if x < 0 else x, (-1, 1), 20)
    assert all(math.isfinite(y) for _, y in pts)


def test_exp_overflow_is_dropped() -> None:
    exp = get_function(4)
    assert exp.func(1000.0) == math.inf
    assert sample_curve(exp.func, (700, 1000), 10)[-1][0] < 1000


def test_tangent_of_square_at_one() -> None:
    seg = tangent_line(SQUARE, 1.0, (-5, 5))
    assert (seg.x1, seg.x2) == (-5, 5)
    assert seg.y1 == pytest.approx(-11.0)
    assert seg.y2 == pytest.approx(9.0)
    assert seg.slope == pytest.approx(2.0)


def test_secants_of_square() -> None:
    forward, backward = secant_lines(SQUARE, 1.0, 0.5)
    assert (forward.x2, forward.y2) == (1.5, 2.25)
    assert (backward.x2, backward.y2) == (0.5, 0.25)
    assert forward.slope == pytest.approx(2.5)
    assert backward.slope == pytest.approx(1.5)
    assert secant_slope(SQUARE, 1.0, 0.5) == pytest.approx(2.5)


def test_central_difference_exact_for_parabola() -> None:
    assert central_difference(SQUARE, 1.0, 0.5) == pytest.approx(2.0)
    assert central_difference(SQUARE, 1.0, 0.0) == 2.0
    assert secant_slope(SQUARE, 1.0, 0.0) == 2.0


def test_secant_slope_approaches_derivative() -> None:
    sin = get_function(2)
    errors = [abs(secant_slope(sin, 0.7, dx) - math.cos(0.7)) for dx in (1.0, 0.1, 0.01)]
    assert errors[0] > errors[1] > errors[2]
