from __future__ import annotations

import pytest

from vizcore.analyses import (
    BayesAnalysis,
    CoinFlipAnalysis,
    CoinFlipParams,
    DerivativeAnalysis,
    DerivativeParams,
    PCAAnalysis,
    PCAParams,
    RegressionAnalysis,
    RegressionParams,
    derivative_y_range,
)
from vizcore.estimators import BayesEvidence, LinearModel, least_squares


class CountingRegression(RegressionAnalysis):
    def __init__(self) -> None:
        super().__init__()
        self.calls = 0

    def compute_derived(self, params):
        self.calls += 1
        return super().compute_derived(params)


def test_derived_is_memoized_on_params(sample_points) -> None:
    analysis = CountingRegression()
    params = RegressionParams(tuple(sample_points), LinearModel(1.0, 5.0))

    first = analysis.derived(params)
    second = analysis.derived(RegressionParams(tuple(sample_points), LinearModel(1.0, 5.0)))
    assert first is second
    assert analysis.calls == 1

    analysis.derived(RegressionParams(tuple(sample_points), LinearModel(1.0, 6.0)))
    assert analysis.calls == 2

    analysis.cache.invalidate()
    analysis.derived(RegressionParams(tuple(sample_points), LinearModel(1.0, 6.0)))
    assert analysis.calls == 3


def test_regression_analysis(sample_points) -> None:
    report = RegressionAnalysis().derived(RegressionParams(tuple(sample_points), LinearModel(1.0, 5.0)))
    assert report.optimal == least_squares(sample_points)
    assert not report.is_optimal
    assert len(report.residuals) == 8


def test_square_y_range() -> None:
    assert derivative_y_range(0, False) == pytest.approx((-5.0, 30.0))


def test_square_y_range_with_derivative() -> None:
    assert derivative_y_range(0, True) == pytest.approx((-17.0, 32.0))


def test_cube_y_range() -> None:
    assert derivative_y_range(1, False) == pytest.approx((-175.0, 175.0))


def test_derivative_analysis() -> None:
    res = DerivativeAnalysis().derived(DerivativeParams(function_index=0, point_x=1.0, delta_x=0.5))

    assert len(res.curve) == 201
    assert res.derivative_curve == ()
    assert res.value == 1.0
    assert res.derivative == 2.0
    assert res.numerical_derivative == pytest.approx(2.0)
    assert res.tangent.slope == pytest.approx(2.0)
    assert [s.slope for s in res.secants] == pytest.approx([2.5, 1.5])


def test_derivative_curve_when_shown() -> None:
    res = DerivativeAnalysis().derived(
        DerivativeParams(function_index=2, point_x=0.0, delta_x=0.1, show_derivative=True)
    )
    assert len(res.derivative_curve) == len(res.curve)
    assert res.derivative == pytest.approx(1.0)


def test_pca_analysis() -> None:
    outcome = PCAAnalysis().derived(PCAParams(n_points=25))
    assert len(outcome.points) == 25
    assert outcome.result.projected.shape == (25, 2)


def test_bayes_analysis() -> None:
    outcome = BayesAnalysis().derived(BayesEvidence(0.3, 0.8, 0.1))
    assert outcome.result.posterior == pytest.approx(0.24 / 0.31)
    assert outcome.population.size_b == pytest.approx(31.0)


def test_coin_flip_analysis() -> None:
    outcome = CoinFlipAnalysis().derived(CoinFlipParams(choice="two_tails", n_simulations=12, seed=1))
    assert len(outcome.flips) == 12
    assert outcome.probabilities["two_tails"] == 0.25
    assert outcome.stats.wins == sum(f.user_wins for f in outcome.flips)
