"""
Fed Policy Simulator Test Configuration

Fixtures and random-source stubs shared by all test modules.
"""

import numpy as np
import pytest


class ScriptedRandom:
    """Random source that replays queued draws, then a constant."""

    def __init__(self, draws=(), default=0.5):
        self.draws = list(draws)
        self.default = default
        self.calls = 0

    def random(self):
        self.calls += 1
        if self.draws:
            return self.draws.pop(0)
        return self.default


@pytest.fixture
def midpoint():
    """Every draw is 0.5: no perturbation and no shock."""
    return ScriptedRandom(default=0.5)


@pytest.fixture
def scripted():
    """Factory for a random source with a given draw sequence."""
    return ScriptedRandom


@pytest.fixture
def rng():
    """Reproducible random number generator."""
    return np.random.default_rng(seed=42)
