'''
Pytest configuration and fixtures for the Unit Root Toolbox test suite.

This module provides the data generators shared across the test suite:
seeded random number generators, random walks, stationary autoregressions,
and series whose differences are autocorrelated. Configuration changes made
by a test are undone after it runs.
'''

from typing import Callable

import numpy as np
import pytest

from unitroot.core.config import reset_config


# ---- Configuration Isolation ----

@pytest.fixture(autouse=True)
def reset_configuration():
    """Restore the default configuration after every test."""
    yield
    reset_config()


# ---- Basic Data Generation Fixtures ----

@pytest.fixture
def rng() -> np.random.Generator:
    """Provide a seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def sample_size() -> int:
    """Default sample size for test data."""
    return 200


@pytest.fixture
def white_noise(rng: np.random.Generator, sample_size: int) -> np.ndarray:
    """Generate Gaussian white noise."""
    return rng.standard_normal(sample_size)


@pytest.fixture
def random_walk(rng: np.random.Generator, sample_size: int) -> np.ndarray:
    """Generate a driftless Gaussian random walk."""
    return np.cumsum(rng.standard_normal(sample_size))


def simulate_ar1(rng: np.random.Generator, nobs: int, phi: float,
                 burn: int = 100) -> np.ndarray:
    """Simulate a zero-mean AR(1) process, discarding a burn-in period."""
    e = rng.standard_normal(nobs + burn)
    y = np.zeros(nobs + burn)
    for t in range(1, nobs + burn):
        y[t] = phi * y[t - 1] + e[t]
    return y[burn:]


@pytest.fixture
def ar1_process(rng: np.random.Generator, sample_size: int) -> np.ndarray:
    """Generate a stationary AR(1) process with coefficient 0.5."""
    return simulate_ar1(rng, sample_size, 0.5)


@pytest.fixture
def ar1_simulator() -> Callable[[np.random.Generator, int, float], np.ndarray]:
    """Provide the AR(1) simulator for tests that need many replications."""
    return simulate_ar1


@pytest.fixture
def integrated_ar1(rng: np.random.Generator) -> np.ndarray:
    """Generate a unit root series whose differences follow an AR(1) with coefficient 0.6.

    The augmented regression needs at least one lagged difference for this
    series.
    """
    dy = simulate_ar1(rng, 500, 0.6)
    return np.cumsum(dy)
