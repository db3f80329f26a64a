from __future__ import annotations

import math

import numpy as np
import pytest

from vizcore.mapper import Viewport, fit_bounds, fit_y_range


def test_corners_map_to_padded_box() -> None:
    vp = Viewport(pixel_width=600, pixel_height=400, padding=40,
                  x_range=(-5, 5), y_range=(-10, 10))

    assert vp.to_pixel_x(-5) == pytest.approx(40)
    assert vp.to_pixel_x(5) == pytest.approx(560)
    # screen y grows downward
    assert vp.to_pixel_y(-10) == pytest.approx(360)
    assert vp.to_pixel_y(10) == pytest.approx(40)
    assert vp.to_pixel(0, 0) == pytest.approx((300, 200))


@pytest.mark.parametrize("x_range,y_range", [((0, 100), (0, 100)), ((-5, 5), (-1.4, 31.2)), ((2.5, 3.0), (-1e3, 1e3))])
def test_round_trip_within_domain(x_range, y_range) -> None:
    vp = Viewport(x_range=x_range, y_range=y_range)
    for x in np.linspace(x_range[0], x_range[1], 37):
        assert vp.to_domain_x(vp.to_pixel_x(x)) == pytest.approx(x, abs=1e-9)
    for y in np.linspace(y_range[0], y_range[1], 37):
        assert vp.to_domain_y(vp.to_pixel_y(y)) == pytest.approx(y, abs=1e-9)


def test_degenerate_range_uses_unit_span() -> None:
    vp = Viewport(pixel_width=600, pixel_height=400, padding=40, x_range=(3, 3), y_range=(7, 7))

    assert vp.to_pixel_x(3) == pytest.approx(40)
    assert vp.to_pixel_x(4) == pytest.approx(560)
    assert vp.to_pixel_y(7) == pytest.approx(360)
    assert math.isfinite(vp.to_domain_x(123.0))


def test_with_y_range_returns_new_viewport() -> None:
    vp = Viewport(x_range=(-5, 5), y_range=(0, 1))
    refit = vp.with_y_range((-2, 8))

    assert refit.y_range == (-2.0, 8.0)
    assert refit.x_range == vp.x_range
    assert vp.y_range == (0, 1)


def test_to_pixels_maps_every_point() -> None:
    vp = Viewport(x_range=(0, 100), y_range=(0, 100))
    assert vp.to_pixels([(0, 0), (100, 100)]) == [
        pytest.approx((40, 360)),
        pytest.approx((560, 40)),
    ]


def test_fit_y_range_adds_twenty_percent_margin() -> None:
    assert fit_y_range([(0, 0.0), (1, 10.0)]) == pytest.approx((-2.0, 12.0))


def test_fit_y_range_skips_non_finite_samples() -> None:
    samples = [(0, 0.0), (1, math.nan), (2, math.inf), (3, -math.inf), (4, 10.0)]
    assert fit_y_range(samples) == pytest.approx((-2.0, 12.0))


def test_fit_y_range_flat_curve_gets_unit_margin() -> None:
    assert fit_y_range([(0, 2.0), (1, 2.0)]) == pytest.approx((1.0, 3.0))


def test_fit_y_range_without_finite_samples() -> None:
    assert fit_y_range([(0, math.nan)]) == (-1.0, 1.0)
    assert fit_y_range([]) == (-1.0, 1.0)


def test_fit_bounds_never_narrower_than_minimum() -> None:
    assert fit_bounds([-1.0, 1.0]) == (-5, 5)
    assert fit_bounds([-10.0, 10.0]) == pytest.approx((-14.0, 14.0))
    assert fit_bounds([]) == (-5.0, 5.0)
