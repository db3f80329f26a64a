from __future__ import annotations

from vizcore.figures import (
    fig_bayes_population,
    fig_coin_outcomes,
    fig_derivative,
    fig_explained_variance,
    fig_pca_scene,
    fig_posterior_donut,
    fig_regression,
)
from vizcore.session import (
    BayesSession,
    CoinFlipSession,
    DerivativeSession,
    PCASession,
    RegressionSession,
)


def test_regression_figure() -> None:
    s = RegressionSession()
    fig = fig_regression(s)
    assert len(fig.data) == 10
    assert len(fig.layout.shapes) == 8

    fig = fig_regression(s, show_residuals=False, show_squares=False, show_optimal=True)
    assert len(fig.data) == 3
    assert len(fig.layout.shapes) == 0


def test_derivative_figure() -> None:
    s = DerivativeSession()
    assert len(fig_derivative(s).data) == 3
    assert len(fig_derivative(s, show_tangent=False, show_secants=True).data) == 4

    s.set_show_derivative(True)
    assert len(fig_derivative(s).data) == 4


def test_pca_scene_steps() -> None:
    s = PCASession()
    assert len(fig_pca_scene(s, step=1).data) == 2
    assert len(fig_pca_scene(s, step=3).data) == 4
    assert len(fig_pca_scene(s, step=4).data) == 2
    assert len(fig_pca_scene(s, step=3, show_original_axes=False, show_pca_axes=False).data) == 1


def test_explained_variance_bars() -> None:
    fig = fig_explained_variance(PCASession())
    assert list(fig.data[0].x) == ["PC1", "PC2"]
    assert sum(fig.data[0].y) == 1.0 or abs(sum(fig.data[0].y) - 1.0) < 1e-9


def test_bayes_figures() -> None:
    s = BayesSession()
    assert len(fig_bayes_population(s).data) == 2
    donut = fig_posterior_donut(s)
    assert abs(sum(donut.data[0].values) - 1.0) < 1e-9


def test_coin_figures() -> None:
    s = CoinFlipSession(n_simulations=10)
    exact, simulated = fig_coin_outcomes(s)
    assert len(exact.data) == 1
    assert len(simulated.data) == 0

    s.simulate(seed=4)
    _, simulated = fig_coin_outcomes(s)
    assert len(simulated.data) == 1
    assert abs(sum(simulated.data[0].y) - 1.0) < 1e-9
