from __future__ import annotations

import numpy as np
import pytest

from vizcore.probability import (
    OPTIONS,
    SimulationStats,
    all_outcomes,
    exact_probabilities,
    exact_probability,
    simulate_flips,
    simulation_stats,
    winning_option,
)


def test_four_equally_likely_outcomes() -> None:
    assert all_outcomes() == ["HH", "HT", "TH", "TT"]


def test_every_outcome_wins_exactly_one_option() -> None:
    winners = [winning_option(o) for o in all_outcomes()]
    assert winners == ["two_heads", "mixed", "mixed", "two_tails"]
    with pytest.raises(KeyError):
        winning_option("XX")


def test_exact_probabilities() -> None:
    assert exact_probability("two_heads") == 0.25
    assert exact_probability("two_tails") == 0.25
    assert exact_probability("mixed") == 0.5
    assert sum(exact_probabilities().values()) == pytest.approx(1.0)
    assert set(exact_probabilities()) == set(OPTIONS)


def test_simulate_flips_is_consistent() -> None:
    flips = simulate_flips(50, "two_heads", np.random.default_rng(3))

    assert [f.id for f in flips] == list(range(1, 51))
    for f in flips:
        assert f.outcome == f.coin1 + f.coin2
        assert f.winning_option == winning_option(f.outcome)
        assert f.user_wins == (f.winning_option == "two_heads")


def test_simulate_flips_is_reproducible_with_seed() -> None:
    a = simulate_flips(30, "mixed", np.random.default_rng(11))
    b = simulate_flips(30, "mixed", np.random.default_rng(11))
    assert a == b


def test_simulate_flips_rejects_unknown_choice() -> None:
    with pytest.raises(KeyError):
        simulate_flips(5, "edge")


def test_simulation_stats() -> None:
    assert simulation_stats([]) == SimulationStats(0, 0, 0.0)

    flips = simulate_flips(200, "mixed", np.random.default_rng(5))
    stats = simulation_stats(flips)
    assert stats.wins + stats.losses == 200
    assert stats.win_rate == pytest.approx(stats.wins / 2)


def test_mixed_wins_about_half_the_time() -> None:
    flips = simulate_flips(4000, "mixed", np.random.default_rng(0))
    assert simulation_stats(flips).win_rate == pytest.approx(50.0, abs=5.0)
