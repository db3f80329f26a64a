from __future__ import annotations

import pytest

from vizcore.datasets import REGRESSION_SAMPLE
from vizcore.estimators import DataPoint


@pytest.fixture
def sample_points():
    return REGRESSION_SAMPLE


@pytest.fixture
def axis_aligned_points():
    # wider along x than along y, no xy covariance
    return (DataPoint(-2, 0), DataPoint(2, 0), DataPoint(0, -1), DataPoint(0, 1))
