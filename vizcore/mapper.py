# vizcore/mapper.py
# Domain <-> pixel coordinate mapping for the 2D charts.
#
# Screen Y grows downward, domain Y grows upward, so the Y mapping is flipped.

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from typing import Iterable, List, Sequence, Tuple

from vizcore import config

logger = logging.getLogger(__name__)

Range = Tuple[float, float]


def _span(rng: Range) -> float:
    """Width of a range; a degenerate range counts as one unit wide."""
    span = rng[1] - rng[0]
    return span if span != 0 else 1.0


@dataclass(frozen=True)
class Viewport:
    pixel_width: float = config.VIEWPORT_WIDTH
    pixel_height: float = config.VIEWPORT_HEIGHT
    padding: float = config.VIEWPORT_PADDING
    x_range: Range = (0.0, 1.0)
    y_range: Range = (0.0, 1.0)

    @property
    def chart_width(self) -> float:
        return self.pixel_width - 2 * self.padding

    @property
    def chart_height(self) -> float:
        return self.pixel_height - 2 * self.padding

    # ---------- domain -> pixel ----------

    def to_pixel_x(self, x: float) -> float:
        return self.padding + (x - self.x_range[0]) / _span(self.x_range) * self.chart_width

    def to_pixel_y(self, y: float) -> float:
        return (
            self.pixel_height
            - self.padding
            - (y - self.y_range[0]) / _span(self.y_range) * self.chart_height
        )

    def to_pixel(self, x: float, y: float) -> Tuple[float, float]:
        return self.to_pixel_x(x), self.to_pixel_y(y)

    def to_pixels(self, points: Iterable[Tuple[float, float]]) -> List[Tuple[float, float]]:
        return [self.to_pixel(x, y) for x, y in points]

    # ---------- pixel -> domain ----------

    def to_domain_x(self, px: float) -> float:
        return self.x_range[0] + (px - self.padding) / self.chart_width * _span(self.x_range)

    def to_domain_y(self, py: float) -> float:
        return (
            self.y_range[0]
            + (self.pixel_height - self.padding - py) / self.chart_height * _span(self.y_range)
        )

    # ---------- derived viewports ----------

    def with_x_range(self, x_range: Range) -> "Viewport":
        return replace(self, x_range=(float(x_range[0]), float(x_range[1])))

    def with_y_range(self, y_range: Range) -> "Viewport":
        return replace(self, y_range=(float(y_range[0]), float(y_range[1])))


def fit_y_range(
    samples: Iterable[Tuple[float, float]],
    margin_fraction: float = config.RANGE_MARGIN_FRACTION,
) -> Range:
    """
    Y-range that covers every finite sample plus a margin.

    samples are (x, f(x)) pairs; NaN and infinite values are skipped so one bad
    sample (e.g. ln of a negative number) cannot blow up the axis.
    If the fitted span is zero the margin falls back to one unit.
    """
    min_y = math.inf
    max_y = -math.inf
    for _, y in samples:
        if math.isfinite(y):
            min_y = min(min_y, y)
            max_y = max(max_y, y)

    if min_y > max_y:
        logger.debug("fit_y_range: no finite samples, using (-1, 1)")
        return (-1.0, 1.0)

    margin = (max_y - min_y) * margin_fraction or 1.0
    return (min_y - margin, max_y + margin)


def fit_bounds(
    values: Sequence[float],
    buffer_fraction: float = config.PCA_BOUNDS_BUFFER,
    minimum: Range = config.PCA_MIN_BOUNDS,
) -> Range:
    """Data range widened by a buffer, never narrower than `minimum`."""
    finite = [v for v in values if math.isfinite(v)]
    if not finite:
        return (float(minimum[0]), float(minimum[1]))
    lo, hi = min(finite), max(finite)
    buf = (hi - lo) * buffer_fraction
    return (min(minimum[0], lo - buf), max(minimum[1], hi + buf))
