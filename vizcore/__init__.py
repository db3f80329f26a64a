"""Computation engine for the statistics & calculus playground pages."""

from vizcore.animation import AnimationDriver, AnimationState, ManualFrameScheduler
from vizcore.estimators import (
    BayesEvidence,
    BayesResult,
    CovarianceMatrix2D,
    DataPoint,
    EigenPair,
    LinearModel,
    PCAResult,
    Residual,
    bayes_update,
    least_squares,
    pca_2d,
)
from vizcore.mapper import Viewport, fit_y_range
from vizcore.session import (
    BayesSession,
    CoinFlipSession,
    DerivativeSession,
    PCASession,
    RegressionSession,
)

__all__ = [
    "AnimationDriver",
    "AnimationState",
    "ManualFrameScheduler",
    "BayesEvidence",
    "BayesResult",
    "CovarianceMatrix2D",
    "DataPoint",
    "EigenPair",
    "LinearModel",
    "PCAResult",
    "Residual",
    "bayes_update",
    "least_squares",
    "pca_2d",
    "Viewport",
    "fit_y_range",
    "BayesSession",
    "CoinFlipSession",
    "DerivativeSession",
    "PCASession",
    "RegressionSession",
]
