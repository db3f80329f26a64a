# vizcore/functions.py
# Function catalog for the derivative page, plus the curve / tangent / secant
# geometry built from it.

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, List, Tuple

import numpy as np

from vizcore import config

Point = Tuple[float, float]
Range = Tuple[float, float]


@dataclass(frozen=True)
class PlotFunction:
    name: str
    latex: str
    func: Callable[[float], float]
    derivative: Callable[[float], float]


def _safe_exp(x: float) -> float:
    try:
        return math.exp(x)
    except OverflowError:
        return math.inf


def _ln_floor(x: float) -> float:
    return math.log(max(0.1, x))


FUNCTIONS: Tuple[PlotFunction, ...] = (
    PlotFunction("x²", r"f(x) = x^2", lambda x: x * x, lambda x: 2 * x),
    PlotFunction("x³", r"f(x) = x^3", lambda x: x * x * x, lambda x: 3 * x * x),
    PlotFunction("sin(x)", r"f(x) = \sin(x)", math.sin, math.cos),
    PlotFunction("cos(x)", r"f(x) = \cos(x)", math.cos, lambda x: -math.sin(x)),
    PlotFunction("e^x", r"f(x) = e^x", _safe_exp, _safe_exp),
    PlotFunction("ln(x)", r"f(x) = \ln(x)", _ln_floor, lambda x: 1 / max(0.1, x)),
)


def get_function(index: int) -> PlotFunction:
    """Catalog lookup; raises IndexError for an unknown index."""
    if not 0 <= index < len(FUNCTIONS):
        raise IndexError(f"function index {index} out of range 0..{len(FUNCTIONS) - 1}")
    return FUNCTIONS[index]


def _finite(value: float) -> bool:
    return isinstance(value, (int, float)) and math.isfinite(value)


def sample_curve(
    func: Callable[[float], float],
    x_range: Range = config.DERIVATIVE_X_RANGE,
    samples: int = config.CURVE_SAMPLES,
) -> List[Point]:
    """
    (x, f(x)) pairs over x_range (both ends included).
    Non-finite values are dropped so the curve stays drawable.
    """
    pts: List[Point] = []
    for x in np.linspace(x_range[0], x_range[1], samples + 1):
        x = float(x)
        try:
            y = func(x)
        except (ValueError, ZeroDivisionError, OverflowError):
            continue
        if _finite(y):
            pts.append((x, float(y)))
    return pts


@dataclass(frozen=True)
class Segment:
    x1: float
    y1: float
    x2: float
    y2: float

    @property
    def slope(self) -> float:
        dx = self.x2 - self.x1
        return (self.y2 - self.y1) / dx if dx != 0 else math.nan


def tangent_line(fn: PlotFunction, x0: float, x_range: Range = config.DERIVATIVE_X_RANGE) -> Segment:
    """Tangent at x0, drawn across the whole x_range."""
    y0 = fn.func(x0)
    d = fn.derivative(x0)
    return Segment(
        x1=x_range[0],
        y1=y0 - d * (x0 - x_range[0]),
        x2=x_range[1],
        y2=y0 + d * (x_range[1] - x0),
    )


def secant_lines(fn: PlotFunction, x0: float, delta_x: float) -> Tuple[Segment, Segment]:
    """Secants from (x0, f(x0)) to x0 + delta_x and x0 - delta_x."""
    y0 = fn.func(x0)
    forward = Segment(x0, y0, x0 + delta_x, fn.func(x0 + delta_x))
    backward = Segment(x0, y0, x0 - delta_x, fn.func(x0 - delta_x))
    return forward, backward


def secant_slope(fn: PlotFunction, x0: float, delta_x: float) -> float:
    """Forward difference quotient (f(x0 + dx) - f(x0)) / dx."""
    if delta_x == 0:
        return fn.derivative(x0)
    return (fn.func(x0 + delta_x) - fn.func(x0)) / delta_x


def central_difference(fn: PlotFunction, x0: float, delta_x: float) -> float:
    """(f(x0 + dx) - f(x0 - dx)) / (2 dx); falls back to the analytic derivative at dx = 0."""
    if delta_x == 0:
        return fn.derivative(x0)
    return (fn.func(x0 + delta_x) - fn.func(x0 - delta_x)) / (2 * delta_x)
