from __future__ import annotations

import math

import pytest

from vizcore.datasets import BAYES_EXAMPLES, REGRESSION_SAMPLE, DatasetShape, generate_pca_dataset


def test_regression_sample() -> None:
    assert len(REGRESSION_SAMPLE) == 8
    assert REGRESSION_SAMPLE[0].x == 10 and REGRESSION_SAMPLE[-1].y == 85


@pytest.mark.parametrize("shape,k", [(DatasetShape.CORRELATED, 0.8), (DatasetShape.ANTI_CORRELATED, -0.8)])
def test_noiseless_line(shape, k) -> None:
    points = generate_pca_dataset(shape, 40, noise=0, rotation_deg=0)

    assert len(points) == 40
    for p in points:
        assert -5 <= p.x <= 5
        assert p.y == pytest.approx(k * p.x)


def test_noiseless_ring_radius() -> None:
    points = generate_pca_dataset(DatasetShape.UNCORRELATED, 100, noise=0, rotation_deg=0)
    for p in points:
        assert 2 - 1e-9 <= math.hypot(p.x, p.y) <= 5 + 1e-9


def test_rotation_by_quarter_turn() -> None:
    points = generate_pca_dataset(DatasetShape.CORRELATED, 20, noise=0, rotation_deg=90)
    for p in points:
        assert p.x == pytest.approx(-0.8 * p.y, abs=1e-9)


def test_noise_is_bounded() -> None:
    clean = generate_pca_dataset(DatasetShape.CORRELATED, 50, noise=0, rotation_deg=0, seed=3)
    noisy = generate_pca_dataset(DatasetShape.CORRELATED, 50, noise=50, rotation_deg=0, seed=3)
    assert clean != noisy
    for p in noisy:
        assert abs(p.y - 0.8 * p.x) <= 1.5 + 0.8 * 1.5 + 1e-9


def test_accepts_shape_value_string() -> None:
    a = generate_pca_dataset("anti_correlated", 10, 0, 0)
    b = generate_pca_dataset(DatasetShape.ANTI_CORRELATED, 10, 0, 0)
    assert a == b
    with pytest.raises(ValueError):
        generate_pca_dataset("spiral", 10, 0, 0)


def test_seed_is_deterministic() -> None:
    assert generate_pca_dataset(DatasetShape.UNCORRELATED, 30, 20, 45, seed=9) == \
        generate_pca_dataset(DatasetShape.UNCORRELATED, 30, 20, 45, seed=9)
    assert generate_pca_dataset(DatasetShape.UNCORRELATED, 30, 20, 45, seed=9) != \
        generate_pca_dataset(DatasetShape.UNCORRELATED, 30, 20, 45, seed=10)


def test_bayes_examples() -> None:
    assert set(BAYES_EXAMPLES) == {"medical", "spam", "legal"}
    medical = BAYES_EXAMPLES["medical"].evidence
    assert (medical.prior, medical.likelihood, medical.false_positive_rate) == (0.01, 0.95, 0.05)
