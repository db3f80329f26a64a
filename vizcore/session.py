# vizcore/session.py
# One session per page instance. A session holds the user-adjustable
# parameters; derived values are recomputed on demand from the current
# parameters and memoized by the analysis cache.

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence, Tuple

from vizcore import config
from vizcore.analyses import (
    BayesAnalysis,
    BayesOutcome,
    CoinFlipAnalysis,
    CoinFlipOutcome,
    CoinFlipParams,
    DerivativeAnalysis,
    DerivativeParams,
    DerivativeResult,
    PCAAnalysis,
    PCAOutcome,
    PCAParams,
    RegressionAnalysis,
    RegressionParams,
    derivative_y_range,
)
from vizcore.animation import AnimationDriver, AnimationState, FrameScheduler
from vizcore.datasets import BAYES_EXAMPLES, REGRESSION_SAMPLE, DatasetShape
from vizcore.estimators import (
    BayesEvidence,
    BayesPopulation,
    BayesResult,
    DataPoint,
    LinearModel,
    PCAResult,
    RegressionReport,
    Residual,
    compute_residuals,
)
from vizcore.functions import FUNCTIONS, PlotFunction, Point, Segment, get_function
from vizcore.mapper import Viewport, fit_bounds
from vizcore.probability import OPTIONS, SimulationStats, exact_probabilities

logger = logging.getLogger(__name__)

PixelSegment = Tuple[float, float, float, float]


class VisualizationSession:
    """Base class: a viewport plus the pixel helpers every page uses."""

    def __init__(self, viewport: Viewport) -> None:
        self._viewport = viewport

    @property
    def viewport(self) -> Viewport:
        return self._viewport

    def segment_pixels(self, seg: Segment) -> PixelSegment:
        vp = self.viewport
        return (vp.to_pixel_x(seg.x1), vp.to_pixel_y(seg.y1),
                vp.to_pixel_x(seg.x2), vp.to_pixel_y(seg.y2))


# -----------------------------
# Least squares
# -----------------------------
class RegressionSession(VisualizationSession):
    def __init__(
        self,
        points: Sequence[DataPoint] = REGRESSION_SAMPLE,
        slope: float = config.DEFAULT_SLOPE,
        intercept: float = config.DEFAULT_INTERCEPT,
    ) -> None:
        super().__init__(Viewport(x_range=config.REGRESSION_X_RANGE,
                                  y_range=config.REGRESSION_Y_RANGE))
        self._points: Tuple[DataPoint, ...] = tuple(points)
        self._model = LinearModel(float(slope), float(intercept))
        self._analysis = RegressionAnalysis()

    # ---------- parameters ----------

    @property
    def points(self) -> Tuple[DataPoint, ...]:
        return self._points

    def set_points(self, points: Sequence[DataPoint]) -> None:
        self._points = tuple(points)
        self._analysis.cache.invalidate()

    def set_slope(self, slope: float) -> None:
        self._model = LinearModel(float(slope), self._model.intercept)
        self._analysis.cache.invalidate()

    def set_intercept(self, intercept: float) -> None:
        self._model = LinearModel(self._model.slope, float(intercept))
        self._analysis.cache.invalidate()

    def set_model(self, model: LinearModel) -> None:
        self._model = model
        self._analysis.cache.invalidate()

    def optimize(self) -> LinearModel:
        """Snap the current line onto the least-squares line."""
        self.set_model(self.optimal_model())
        return self._model

    def reset(self) -> None:
        self._points = REGRESSION_SAMPLE
        self.set_model(LinearModel(config.DEFAULT_SLOPE, config.DEFAULT_INTERCEPT))

    # ---------- queries ----------

    def report(self) -> RegressionReport:
        return self._analysis.derived(RegressionParams(self._points, self._model))

    def current_model(self) -> LinearModel:
        return self._model

    def optimal_model(self) -> LinearModel:
        return self.report().optimal

    def residuals(self, model: Optional[LinearModel] = None) -> Tuple[Residual, ...]:
        report = self.report()
        if model is None or model == report.current:
            return report.residuals
        if model == report.optimal:
            return report.optimal_residuals
        return compute_residuals(self._points, model)

    def is_optimal(self) -> bool:
        return self.report().is_optimal

    def line_pixels(self, model: Optional[LinearModel] = None) -> PixelSegment:
        """The line across the full x-range, in pixels."""
        model = model or self._model
        x1, x2 = self.viewport.x_range
        return self.segment_pixels(Segment(x1, model.predict(x1), x2, model.predict(x2)))

    def point_pixels(self) -> List[Point]:
        return self.viewport.to_pixels((p.x, p.y) for p in self._points)


# -----------------------------
# Derivative
# -----------------------------
class DerivativeSession(VisualizationSession):
    def __init__(
        self,
        function_index: int = 0,
        point_x: float = config.DEFAULT_POINT_X,
        delta_x: float = config.DEFAULT_DELTA_X,
        show_derivative: bool = False,
        scheduler: Optional[FrameScheduler] = None,
        x_range: Tuple[float, float] = config.DERIVATIVE_X_RANGE,
    ) -> None:
        get_function(function_index)
        super().__init__(Viewport(x_range=x_range))
        self._function_index = function_index
        self._delta_x = float(delta_x)
        self._show_derivative = bool(show_derivative)
        self.driver = AnimationDriver(domain=x_range, position=point_x, scheduler=scheduler)
        self._analysis = DerivativeAnalysis()
        self._refit_viewport()

    def _refit_viewport(self) -> None:
        y_range = derivative_y_range(self._function_index, self._show_derivative,
                                     self._viewport.x_range)
        self._viewport = self._viewport.with_y_range(y_range)
        logger.debug("derivative viewport refit: y_range=(%.3f, %.3f)", *y_range)

    # ---------- parameters ----------

    @property
    def function(self) -> PlotFunction:
        return FUNCTIONS[self._function_index]

    @property
    def function_index(self) -> int:
        return self._function_index

    @property
    def point_x(self) -> float:
        return self.driver.position

    @property
    def delta_x(self) -> float:
        return self._delta_x

    @property
    def show_derivative(self) -> bool:
        return self._show_derivative

    def select_function(self, index: int) -> None:
        get_function(index)
        if index == self._function_index:
            return
        self._function_index = index
        self._analysis.cache.invalidate()
        self._refit_viewport()

    def set_show_derivative(self, show: bool) -> None:
        show = bool(show)
        if show == self._show_derivative:
            return
        self._show_derivative = show
        self._analysis.cache.invalidate()
        self._refit_viewport()

    def set_point_x(self, x: float) -> None:
        """Manual move of the point; stops the animation."""
        self.driver.set_position(x)
        self._analysis.cache.invalidate()

    def set_delta_x(self, delta_x: float) -> None:
        self._delta_x = float(delta_x)
        self._analysis.cache.invalidate()

    # ---------- animation ----------

    def start_animation(self) -> None:
        self.driver.start()

    def stop_animation(self) -> None:
        self.driver.stop()

    def animation_position(self) -> float:
        return self.driver.position

    def animation_state(self) -> AnimationState:
        return self.driver.state

    # ---------- queries ----------

    def result(self) -> DerivativeResult:
        params = DerivativeParams(
            function_index=self._function_index,
            point_x=self.driver.position,
            delta_x=self._delta_x,
            show_derivative=self._show_derivative,
            x_range=self._viewport.x_range,
        )
        return self._analysis.derived(params)

    def curve(self) -> Tuple[Point, ...]:
        return self.result().curve

    def derivative_curve(self) -> Tuple[Point, ...]:
        return self.result().derivative_curve

    def current_value(self) -> float:
        return self.result().value

    def current_derivative(self) -> float:
        return self.result().derivative

    def tangent_line(self) -> Segment:
        return self.result().tangent

    def secant_lines(self) -> Tuple[Segment, Segment]:
        return self.result().secants

    def curve_pixels(self) -> List[Point]:
        return self.viewport.to_pixels(self.curve())

    def point_pixel(self) -> Point:
        return self.viewport.to_pixel(self.point_x, self.current_value())


# -----------------------------
# PCA
# -----------------------------
class PCASession(VisualizationSession):
    def __init__(self, params: PCAParams = PCAParams()) -> None:
        super().__init__(Viewport())
        self._params = params
        self._analysis = PCAAnalysis()
        self._refit_viewport()

    def _refit_viewport(self) -> None:
        points = self.points
        self._viewport = self._viewport.with_x_range(
            fit_bounds([p.x for p in points])
        ).with_y_range(
            fit_bounds([p.y for p in points])
        )

    @property
    def params(self) -> PCAParams:
        return self._params

    def update(
        self,
        shape: Optional[DatasetShape] = None,
        n_points: Optional[int] = None,
        noise: Optional[float] = None,
        rotation_deg: Optional[float] = None,
        seed: Optional[int] = None,
    ) -> None:
        p = self._params
        new = PCAParams(
            shape=DatasetShape(shape) if shape is not None else p.shape,
            n_points=int(n_points) if n_points is not None else p.n_points,
            noise=float(noise) if noise is not None else p.noise,
            rotation_deg=float(rotation_deg) if rotation_deg is not None else p.rotation_deg,
            seed=int(seed) if seed is not None else p.seed,
        )
        if new == p:
            return
        self._params = new
        self._analysis.cache.invalidate()
        self._refit_viewport()

    def outcome(self) -> PCAOutcome:
        return self._analysis.derived(self._params)

    @property
    def points(self) -> Tuple[DataPoint, ...]:
        return self.outcome().points

    def pca_result(self) -> PCAResult:
        return self.outcome().result

    def axis_segments(self, scale: float = 1.2) -> Tuple[Segment, Segment]:
        """PC1 / PC2 lines through the mean, long enough to cross the chart."""
        res = self.pca_result()
        vp = self.viewport
        length = max(abs(v) for v in (*vp.x_range, *vp.y_range)) * scale
        mx, my = float(res.mean[0]), float(res.mean[1])
        segs = []
        for vx, vy in res.eigenvectors:
            segs.append(Segment(mx - vx * length, my - vy * length,
                                mx + vx * length, my + vy * length))
        return segs[0], segs[1]


# -----------------------------
# Bayes
# -----------------------------
class BayesSession(VisualizationSession):
    def __init__(self, evidence: Optional[BayesEvidence] = None) -> None:
        super().__init__(Viewport())
        self._evidence = evidence or BayesEvidence(prior=0.3, likelihood=0.8, false_positive_rate=0.1)
        self._analysis = BayesAnalysis()
        self.example: Optional[str] = None

    @property
    def evidence(self) -> BayesEvidence:
        return self._evidence

    def set_evidence(
        self,
        prior: Optional[float] = None,
        likelihood: Optional[float] = None,
        false_positive_rate: Optional[float] = None,
    ) -> None:
        e = self._evidence
        self._evidence = BayesEvidence(
            prior=e.prior if prior is None else float(prior),
            likelihood=e.likelihood if likelihood is None else float(likelihood),
            false_positive_rate=(
                e.false_positive_rate if false_positive_rate is None else float(false_positive_rate)
            ),
        )
        self._analysis.cache.invalidate()

    def load_example(self, name: str) -> None:
        """Load one of the worked examples; KeyError for an unknown name."""
        example = BAYES_EXAMPLES[name]
        self._evidence = example.evidence
        self.example = name
        self._analysis.cache.invalidate()

    def outcome(self) -> BayesOutcome:
        return self._analysis.derived(self._evidence)

    def bayes_result(self) -> BayesResult:
        return self.outcome().result

    def population(self) -> BayesPopulation:
        return self.outcome().population


# -----------------------------
# Coin flip
# -----------------------------
class CoinFlipSession(VisualizationSession):
    def __init__(self, choice: str = "mixed", n_simulations: int = config.DEFAULT_SIMULATIONS,
                 seed: Optional[int] = None) -> None:
        super().__init__(Viewport())
        if choice not in OPTIONS:
            raise KeyError(choice)
        self._params = CoinFlipParams(choice=choice, n_simulations=n_simulations, seed=seed)
        self._analysis = CoinFlipAnalysis()
        self._has_run = False

    @property
    def params(self) -> CoinFlipParams:
        return self._params

    def choose(self, choice: str) -> None:
        if choice not in OPTIONS:
            raise KeyError(choice)
        self._params = CoinFlipParams(choice, self._params.n_simulations, self._params.seed)
        self._analysis.cache.invalidate()
        self._has_run = False

    def set_simulations(self, n: int) -> None:
        self._params = CoinFlipParams(self._params.choice, int(n), self._params.seed)
        self._analysis.cache.invalidate()
        self._has_run = False

    def exact_probabilities(self) -> Dict[str, float]:
        return exact_probabilities()

    def simulate(self, seed: Optional[int] = None) -> CoinFlipOutcome:
        """Run a fresh batch of flips; pass a seed for a reproducible batch."""
        self._params = CoinFlipParams(self._params.choice, self._params.n_simulations, seed)
        self._analysis.cache.invalidate()
        self._has_run = True
        return self._analysis.derived(self._params)

    def outcome(self) -> Optional[CoinFlipOutcome]:
        """Last simulated batch, or None before the first run."""
        if not self._has_run:
            return None
        return self._analysis.derived(self._params)

    def stats(self) -> SimulationStats:
        outcome = self.outcome()
        if outcome is None:
            return SimulationStats(0, 0, 0.0)
        return outcome.stats
