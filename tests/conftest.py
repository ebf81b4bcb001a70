"""
Shared fixtures for the minimizer2d test-suite.
"""

import numpy as np
import pytest

from minimizer2d.core.functions import FUNCTIONS


@pytest.fixture
def paraboloid():
    """f(x, y) = x^2 + 2y^2 - 10x - 16y + 60, minimum f(5, 4) = 3."""
    return FUNCTIONS["paraboloid"]


@pytest.fixture
def rng():
    return np.random.default_rng(12345)


@pytest.fixture
def recorder():
    """Callback that collects streamed records."""
    class Recorder:
        def __init__(self):
            self.records = []

        def __call__(self, record):
            self.records.append(record)

    return Recorder()
