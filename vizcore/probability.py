# vizcore/probability.py
# Two-coin game: you and a friend flip one coin each; whoever guessed the
# pair pattern skips the chore. Options: two heads, two tails, one of each.

from __future__ import annotations

from dataclasses import dataclass
from itertools import product
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

FACES: Tuple[str, str] = ("H", "T")


@dataclass(frozen=True)
class CoinOption:
    id: str
    title: str
    favorable_outcomes: Tuple[str, ...]
    description: str


OPTIONS: Dict[str, CoinOption] = {
    "two_heads": CoinOption("two_heads", "Two heads", ("HH",), "Both coins must land heads"),
    "two_tails": CoinOption("two_tails", "Two tails", ("TT",), "Both coins must land tails"),
    "mixed": CoinOption(
        "mixed", "One head and one tail", ("HT", "TH"),
        "One coin heads and the other tails, in either order",
    ),
}


def all_outcomes() -> List[str]:
    """Equally likely outcomes of two fair coins: HH, HT, TH, TT."""
    return ["".join(pair) for pair in product(FACES, repeat=2)]


def winning_option(outcome: str) -> str:
    for option in OPTIONS.values():
        if outcome in option.favorable_outcomes:
            return option.id
    raise KeyError(outcome)


def exact_probability(option_id: str) -> float:
    """Favorable outcomes / all outcomes."""
    option = OPTIONS[option_id]
    outcomes = all_outcomes()
    return sum(1 for o in outcomes if o in option.favorable_outcomes) / len(outcomes)


def exact_probabilities() -> Dict[str, float]:
    return {option_id: exact_probability(option_id) for option_id in OPTIONS}


@dataclass(frozen=True)
class FlipResult:
    id: int
    coin1: str
    coin2: str
    outcome: str
    winning_option: str
    user_wins: bool


@dataclass(frozen=True)
class SimulationStats:
    wins: int
    losses: int
    win_rate: float   # percent


def simulate_flips(
    n: int,
    choice: str,
    rng: Optional[np.random.Generator] = None,
) -> List[FlipResult]:
    if choice not in OPTIONS:
        raise KeyError(choice)
    rng = rng if rng is not None else np.random.default_rng()
    results: List[FlipResult] = []
    for i in range(n):
        c1 = FACES[int(rng.random() >= 0.5)]
        c2 = FACES[int(rng.random() >= 0.5)]
        outcome = c1 + c2
        winner = winning_option(outcome)
        results.append(FlipResult(i + 1, c1, c2, outcome, winner, winner == choice))
    return results


def simulation_stats(results: Sequence[FlipResult]) -> SimulationStats:
    if not results:
        return SimulationStats(0, 0, 0.0)
    wins = sum(1 for r in results if r.user_wins)
    return SimulationStats(wins, len(results) - wins, wins / len(results) * 100.0)
