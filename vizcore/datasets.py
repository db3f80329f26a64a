# vizcore/datasets.py
# Sample data for the pages: the regression points, the PCA point-cloud
# generator and the Bayes worked examples.

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple

import numpy as np

from vizcore.estimators import BayesEvidence, DataPoint

REGRESSION_SAMPLE: Tuple[DataPoint, ...] = (
    DataPoint(10, 15),
    DataPoint(20, 25),
    DataPoint(30, 32),
    DataPoint(40, 40),
    DataPoint(50, 48),
    DataPoint(60, 65),
    DataPoint(70, 70),
    DataPoint(80, 85),
)


class DatasetShape(str, Enum):
    CORRELATED = "correlated"
    ANTI_CORRELATED = "anti_correlated"
    UNCORRELATED = "uncorrelated"


def generate_pca_dataset(
    shape: DatasetShape,
    n: int,
    noise: float,
    rotation_deg: float,
    seed: int = 7,
) -> Tuple[DataPoint, ...]:
    """
    2D point cloud for the PCA page.

    shape:        correlated (y = 0.8 t), anti-correlated (y = -0.8 t) or a
                  ring of radius 2..5 (uncorrelated), with t uniform in [-5, 5]
    noise:        0..100, uniform jitter of +-noise/100 * 3 per coordinate
    rotation_deg: rotation applied after the noise
    """
    shape = DatasetShape(shape)
    rng = np.random.default_rng(seed)

    if shape is DatasetShape.UNCORRELATED:
        angle = rng.random(n) * math.pi * 2
        radius = 2 + rng.random(n) * 3
        X = np.column_stack([np.cos(angle) * radius, np.sin(angle) * radius])
    else:
        t = (rng.random(n) * 2 - 1) * 5
        k = 0.8 if shape is DatasetShape.CORRELATED else -0.8
        X = np.column_stack([t, k * t])

    level = noise / 100
    X = X + (rng.random((n, 2)) * 2 - 1) * level * 3

    # rotate
    th = math.radians(rotation_deg)
    R = np.array([[math.cos(th), -math.sin(th)],
                  [math.sin(th),  math.cos(th)]], dtype=float)
    X = X @ R.T

    return tuple(DataPoint(float(x), float(y)) for x, y in X)


@dataclass(frozen=True)
class BayesExample:
    title: str
    evidence: BayesEvidence
    statement: str


BAYES_EXAMPLES: Dict[str, BayesExample] = {
    "medical": BayesExample(
        title="Medical test",
        evidence=BayesEvidence(prior=0.01, likelihood=0.95, false_positive_rate=0.05),
        statement=(
            "A test for a rare disease detects 95% of sick patients and wrongly flags 5% "
            "of healthy ones. 1% of the population has the disease. If a person tests "
            "positive, how likely is it that they are actually sick?"
        ),
    ),
    "spam": BayesExample(
        title="Spam filter",
        evidence=BayesEvidence(prior=0.3, likelihood=0.9, false_positive_rate=0.02),
        statement=(
            "A mail filter catches 90% of spam but also marks 2% of legitimate mail. "
            "30% of incoming mail is spam. How likely is a flagged message to be spam?"
        ),
    ),
    "legal": BayesExample(
        title="Court case",
        evidence=BayesEvidence(prior=0.5, likelihood=0.85, false_positive_rate=0.15),
        statement=(
            "The defendant starts at a 50% chance of guilt. A piece of evidence shows up "
            "85% of the time if guilty and 15% of the time if innocent. What is the "
            "updated probability of guilt?"
        ),
    ),
}
