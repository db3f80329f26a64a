# vizcore/estimators.py
# Closed-form estimators shared by the pages:
#   - least squares line fit + residuals
#   - 2x2 covariance eigendecomposition (PCA, two variables only)
#   - Bayes posterior / marginal
#
# Every estimator is total: degenerate input gives a defined fallback value,
# never an exception.

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np

from vizcore import config

logger = logging.getLogger(__name__)


# -----------------------------
# Data model
# -----------------------------
@dataclass(frozen=True)
class DataPoint:
    x: float
    y: float


@dataclass(frozen=True)
class LinearModel:
    slope: float
    intercept: float

    def predict(self, x: float) -> float:
        return self.slope * x + self.intercept


@dataclass(frozen=True)
class Residual:
    x: float
    y: float
    predicted_y: float
    error: float
    squared_error: float


def _as_array(points: Sequence[DataPoint]) -> np.ndarray:
    """(n, 2) float array of the points; shape (0, 2) when empty."""
    if len(points) == 0:
        return np.zeros((0, 2), dtype=float)
    return np.array([[p.x, p.y] for p in points], dtype=float)


# -----------------------------
# Least squares
# -----------------------------
def least_squares(points: Sequence[DataPoint]) -> LinearModel:
    """
    Ordinary least squares line through the points.

    slope = sum((x - mx)(y - my)) / sum((x - mx)^2), or 0 when every x is equal.
    """
    X = _as_array(points)
    if X.shape[0] == 0:
        return LinearModel(0.0, 0.0)

    mean_x, mean_y = X.mean(axis=0)
    dx = X[:, 0] - mean_x
    dy = X[:, 1] - mean_y
    numerator = float(np.sum(dx * dy))
    denominator = float(np.sum(dx * dx))

    slope = numerator / denominator if denominator != 0 else 0.0
    intercept = float(mean_y) - slope * float(mean_x)
    return LinearModel(slope=slope, intercept=intercept)


def compute_residuals(points: Sequence[DataPoint], model: LinearModel) -> Tuple[Residual, ...]:
    out = []
    for p in points:
        predicted = model.predict(p.x)
        err = p.y - predicted
        out.append(Residual(x=p.x, y=p.y, predicted_y=predicted, error=err, squared_error=err * err))
    return tuple(out)


def sum_squared_errors(points: Sequence[DataPoint], model: LinearModel) -> float:
    return float(sum(r.squared_error for r in compute_residuals(points, model)))


def mean_squared_error(points: Sequence[DataPoint], model: LinearModel) -> float:
    n = len(points)
    if n == 0:
        return 0.0
    return sum_squared_errors(points, model) / n


def is_optimal(
    model: LinearModel,
    optimal: LinearModel,
    tolerance: float = config.OPTIMALITY_TOLERANCE,
) -> bool:
    """True when both slope and intercept are within `tolerance` of the optimum."""
    return (
        abs(model.slope - optimal.slope) < tolerance
        and abs(model.intercept - optimal.intercept) < tolerance
    )


@dataclass(frozen=True)
class RegressionReport:
    current: LinearModel
    optimal: LinearModel
    residuals: Tuple[Residual, ...]
    optimal_residuals: Tuple[Residual, ...]
    sse: float
    mse: float
    optimal_sse: float
    optimal_mse: float
    is_optimal: bool


def fit_report(points: Sequence[DataPoint], model: LinearModel) -> RegressionReport:
    """Everything the regression page shows for one (dataset, current line) pair."""
    optimal = least_squares(points)
    residuals = compute_residuals(points, model)
    optimal_residuals = compute_residuals(points, optimal)
    n = len(points)
    sse = float(sum(r.squared_error for r in residuals))
    optimal_sse = float(sum(r.squared_error for r in optimal_residuals))
    return RegressionReport(
        current=model,
        optimal=optimal,
        residuals=residuals,
        optimal_residuals=optimal_residuals,
        sse=sse,
        mse=sse / n if n else 0.0,
        optimal_sse=optimal_sse,
        optimal_mse=optimal_sse / n if n else 0.0,
        is_optimal=is_optimal(model, optimal),
    )


# -----------------------------
# PCA (2 variables, closed form)
# -----------------------------
@dataclass(frozen=True)
class CovarianceMatrix2D:
    xx: float
    xy: float
    yy: float

    @property
    def yx(self) -> float:
        return self.xy

    @property
    def trace(self) -> float:
        return self.xx + self.yy

    @property
    def det(self) -> float:
        return self.xx * self.yy - self.xy * self.xy

    def as_array(self) -> np.ndarray:
        return np.array([[self.xx, self.xy], [self.xy, self.yy]], dtype=float)


IDENTITY_COVARIANCE = CovarianceMatrix2D(xx=1.0, xy=0.0, yy=1.0)


@dataclass(frozen=True)
class EigenPair:
    eigenvalue: float
    eigenvector: Tuple[float, float]


@dataclass
class PCAResult:
    mean: np.ndarray                  # (2,)
    centered: np.ndarray              # (n, 2)
    covariance: CovarianceMatrix2D
    eigenpairs: Tuple[EigenPair, EigenPair]
    projected: np.ndarray             # (n, 2) coordinates along PC1, PC2
    explained_variance: Tuple[float, float]

    @property
    def eigenvalues(self) -> Tuple[float, float]:
        return self.eigenpairs[0].eigenvalue, self.eigenpairs[1].eigenvalue

    @property
    def eigenvectors(self) -> Tuple[Tuple[float, float], Tuple[float, float]]:
        return self.eigenpairs[0].eigenvector, self.eigenpairs[1].eigenvector


def covariance_2d(centered: np.ndarray) -> CovarianceMatrix2D:
    """Sample covariance (divisor n-1) of already-centered data; identity if n < 2."""
    n = centered.shape[0]
    if n < 2:
        logger.debug("covariance_2d: n=%d < 2, falling back to identity", n)
        return IDENTITY_COVARIANCE
    C = centered.T @ centered / (n - 1)
    return CovarianceMatrix2D(xx=float(C[0, 0]), xy=float(C[0, 1]), yy=float(C[1, 1]))


def eigen_decomposition_2x2(cov: CovarianceMatrix2D) -> Tuple[EigenPair, EigenPair]:
    """
    Eigenpairs of a symmetric 2x2 matrix, largest eigenvalue first.

    lambda = (trace +- sqrt(trace^2 - 4 det)) / 2, discriminant clamped at 0.
    v1 = normalize(xy, lambda1 - xx); for xy == 0 the axis with the larger
    variance is taken, x-axis on a tie. v2 is v1 rotated by 90 degrees.
    """
    trace = cov.trace
    disc = max(trace * trace - 4.0 * cov.det, 0.0)
    root = math.sqrt(disc)
    lambda1 = (trace + root) / 2.0
    lambda2 = (trace - root) / 2.0

    if cov.xy != 0:
        a = cov.xy
        b = lambda1 - cov.xx
        length = math.hypot(a, b)
        v1 = (a / length, b / length)
    else:
        v1 = (1.0, 0.0) if cov.xx >= cov.yy else (0.0, 1.0)

    v2 = (-v1[1], v1[0])
    return EigenPair(lambda1, v1), EigenPair(lambda2, v2)


def pca_2d(points: Sequence[DataPoint]) -> PCAResult:
    X = _as_array(points)
    mean = X.mean(axis=0) if X.shape[0] else np.zeros(2)
    Xc = X - mean

    cov = covariance_2d(Xc)
    pair1, pair2 = eigen_decomposition_2x2(cov)

    V = np.array([pair1.eigenvector, pair2.eigenvector], dtype=float).T  # columns = PCs
    projected = Xc @ V

    total = pair1.eigenvalue + pair2.eigenvalue
    if total > 0:
        explained = (pair1.eigenvalue / total, pair2.eigenvalue / total)
    else:
        explained = (0.0, 0.0)

    return PCAResult(
        mean=mean,
        centered=Xc,
        covariance=cov,
        eigenpairs=(pair1, pair2),
        projected=projected,
        explained_variance=explained,
    )


# -----------------------------
# Bayes
# -----------------------------
@dataclass(frozen=True)
class BayesEvidence:
    prior: float                # P(A)
    likelihood: float           # P(B|A)
    false_positive_rate: float  # P(B|not A)


@dataclass(frozen=True)
class BayesResult:
    posterior: float   # P(A|B)
    marginal: float    # P(B)


@dataclass(frozen=True)
class BayesPopulation:
    total: float
    size_a: float
    size_not_a: float
    size_a_and_b: float
    size_not_a_and_b: float
    size_b: float


def bayes_update(evidence: BayesEvidence) -> BayesResult:
    numerator = evidence.likelihood * evidence.prior
    marginal = numerator + evidence.false_positive_rate * (1.0 - evidence.prior)
    posterior = 0.0 if marginal == 0 else numerator / marginal
    return BayesResult(posterior=posterior, marginal=marginal)


def bayes_population(evidence: BayesEvidence, total: float = 100.0) -> BayesPopulation:
    """The same evidence as head counts in a population of `total`."""
    size_a = evidence.prior * total
    size_not_a = total - size_a
    size_a_and_b = size_a * evidence.likelihood
    size_not_a_and_b = size_not_a * evidence.false_positive_rate
    return BayesPopulation(
        total=total,
        size_a=size_a,
        size_not_a=size_not_a,
        size_a_and_b=size_a_and_b,
        size_not_a_and_b=size_not_a_and_b,
        size_b=size_a_and_b + size_not_a_and_b,
    )
