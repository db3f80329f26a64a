# vizcore/analyses.py
# The five analysis kinds behind one interface:
#     Analysis.compute_derived(params) -> result
# Params are frozen dataclasses, so a params object doubles as its cache key.

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Generic, List, Optional, Tuple, TypeVar

import numpy as np

from vizcore import config
from vizcore.datasets import DatasetShape, generate_pca_dataset
from vizcore.estimators import (
    BayesEvidence,
    BayesPopulation,
    BayesResult,
    DataPoint,
    LinearModel,
    PCAResult,
    RegressionReport,
    bayes_population,
    bayes_update,
    fit_report,
    pca_2d,
)
from vizcore.functions import (
    Point,
    Segment,
    central_difference,
    get_function,
    sample_curve,
    secant_lines,
    tangent_line,
)
from vizcore.mapper import Range, fit_y_range
from vizcore.probability import (
    FlipResult,
    SimulationStats,
    exact_probabilities,
    simulate_flips,
    simulation_stats,
)

logger = logging.getLogger(__name__)

P = TypeVar("P")
R = TypeVar("R")


class DerivedCache(Generic[P, R]):
    """Single-entry memo: holds the result for the last params tuple seen."""

    def __init__(self) -> None:
        self._key: Optional[P] = None
        self._value: Optional[R] = None

    def get(self, key: P) -> Optional[R]:
        if self._key is not None and self._key == key:
            return self._value
        return None

    def put(self, key: P, value: R) -> R:
        self._key, self._value = key, value
        return value

    def invalidate(self) -> None:
        self._key, self._value = None, None


class Analysis(ABC, Generic[P, R]):
    """One analysis kind. Subclasses only implement compute_derived."""

    name: str = "analysis"

    def __init__(self) -> None:
        self.cache: DerivedCache[P, R] = DerivedCache()

    @abstractmethod
    def compute_derived(self, params: P) -> R:
        ...

    def derived(self, params: P) -> R:
        hit = self.cache.get(params)
        if hit is not None:
            return hit
        logger.debug("%s: recomputing for %r", self.name, params)
        return self.cache.put(params, self.compute_derived(params))


# -----------------------------
# Regression
# -----------------------------
@dataclass(frozen=True)
class RegressionParams:
    points: Tuple[DataPoint, ...]
    model: LinearModel


class RegressionAnalysis(Analysis[RegressionParams, RegressionReport]):
    name = "regression"

    def compute_derived(self, params: RegressionParams) -> RegressionReport:
        return fit_report(params.points, params.model)


# -----------------------------
# Derivative
# -----------------------------
@dataclass(frozen=True)
class DerivativeParams:
    function_index: int
    point_x: float
    delta_x: float
    show_derivative: bool = False
    x_range: Range = config.DERIVATIVE_X_RANGE


@dataclass(frozen=True)
class DerivativeResult:
    curve: Tuple[Point, ...]
    derivative_curve: Tuple[Point, ...]
    value: float
    derivative: float
    tangent: Segment
    secants: Tuple[Segment, Segment]
    numerical_derivative: float


def derivative_y_range(function_index: int, show_derivative: bool,
                       x_range: Range = config.DERIVATIVE_X_RANGE) -> Range:
    """Y-range of f (and f' when shown) sampled over x_range."""
    fn = get_function(function_index)
    samples = sample_curve(fn.func, x_range, config.Y_RANGE_SAMPLES)
    if show_derivative:
        samples += sample_curve(fn.derivative, x_range, config.Y_RANGE_SAMPLES)
    return fit_y_range(samples)


class DerivativeAnalysis(Analysis[DerivativeParams, DerivativeResult]):
    name = "derivative"

    def compute_derived(self, params: DerivativeParams) -> DerivativeResult:
        fn = get_function(params.function_index)
        x0 = params.point_x
        return DerivativeResult(
            curve=tuple(sample_curve(fn.func, params.x_range)),
            derivative_curve=(
                tuple(sample_curve(fn.derivative, params.x_range)) if params.show_derivative else ()
            ),
            value=fn.func(x0),
            derivative=fn.derivative(x0),
            tangent=tangent_line(fn, x0, params.x_range),
            secants=secant_lines(fn, x0, params.delta_x),
            numerical_derivative=central_difference(fn, x0, params.delta_x),
        )


# -----------------------------
# PCA
# -----------------------------
@dataclass(frozen=True)
class PCAParams:
    shape: DatasetShape = DatasetShape.CORRELATED
    n_points: int = config.DEFAULT_PCA_POINTS
    noise: float = config.DEFAULT_PCA_NOISE
    rotation_deg: float = config.DEFAULT_PCA_ROTATION
    seed: int = 7


@dataclass
class PCAOutcome:
    points: Tuple[DataPoint, ...]
    result: PCAResult


class PCAAnalysis(Analysis[PCAParams, PCAOutcome]):
    name = "pca"

    def compute_derived(self, params: PCAParams) -> PCAOutcome:
        points = generate_pca_dataset(
            params.shape, params.n_points, params.noise, params.rotation_deg, params.seed
        )
        return PCAOutcome(points=points, result=pca_2d(points))


# -----------------------------
# Bayes
# -----------------------------
@dataclass(frozen=True)
class BayesOutcome:
    result: BayesResult
    population: BayesPopulation


class BayesAnalysis(Analysis[BayesEvidence, BayesOutcome]):
    name = "bayes"

    def compute_derived(self, params: BayesEvidence) -> BayesOutcome:
        return BayesOutcome(result=bayes_update(params), population=bayes_population(params))


# -----------------------------
# Coin flip
# -----------------------------
@dataclass(frozen=True)
class CoinFlipParams:
    choice: str = "mixed"
    n_simulations: int = config.DEFAULT_SIMULATIONS
    seed: Optional[int] = None


@dataclass(frozen=True)
class CoinFlipOutcome:
    probabilities: Dict[str, float]
    flips: Tuple[FlipResult, ...]
    stats: SimulationStats


class CoinFlipAnalysis(Analysis[CoinFlipParams, CoinFlipOutcome]):
    name = "coin_flip"

    def compute_derived(self, params: CoinFlipParams) -> CoinFlipOutcome:
        rng = np.random.default_rng(params.seed)
        flips: List[FlipResult] = simulate_flips(params.n_simulations, params.choice, rng)
        return CoinFlipOutcome(
            probabilities=exact_probabilities(),
            flips=tuple(flips),
            stats=simulation_stats(flips),
        )
