"""
Unit tests for the Ornstein-Uhlenbeck process.
"""

import jax.numpy as jnp
import numpy as np
import pytest
from jax import random

from curve_interpolation.simulation import OrnsteinUhlenbeckProcess, simulate_ou_paths
from curve_interpolation.utils import is_jax_available


class TestOrnsteinUhlenbeckProcess:
    """Test suite for the closed-form moments."""

    def setup_method(self):
        self.process = OrnsteinUhlenbeckProcess(speed=0.5, volatility=0.2, x0=1.0, level=0.03)

    def test_inspectors(self):
        assert self.process.speed == 0.5
        assert self.process.volatility == 0.2
        assert self.process.x0 == 1.0
        assert self.process.level == 0.03

    def test_drift_and_diffusion(self):
        assert np.isclose(self.process.drift(0.0, 1.0), 0.5 * (0.03 - 1.0))
        assert self.process.diffusion(3.0, 7.0) == 0.2

    def test_expectation(self):
        expected = 0.03 + 0.97 * np.exp(-1.0)
        assert np.isclose(self.process.expectation(0.0, 1.0, 2.0), expected)

    def test_variance(self):
        expected = 0.04 * (1.0 - np.exp(-2.0))

        assert np.isclose(self.process.variance(0.0, 1.0, 2.0), expected)
        assert np.isclose(self.process.std_deviation(0.0, 1.0, 2.0), np.sqrt(expected))

    def test_long_run_variance(self):
        assert np.isclose(self.process.variance(0.0, 1.0, 1e3), 0.2 ** 2 / (2 * 0.5))

    def test_zero_speed_is_brownian(self):
        process = OrnsteinUhlenbeckProcess(speed=0.0, volatility=0.3, x0=2.0)

        assert np.isclose(process.variance(0.0, 2.0, 4.0), 0.09 * 4.0)
        assert np.isclose(process.expectation(0.0, 2.0, 4.0), 2.0)

    def test_evolve(self):
        assert np.isclose(self.process.evolve(0.0, 1.0, 2.0, 0.0),
                          self.process.expectation(0.0, 1.0, 2.0))
        assert np.isclose(
            self.process.evolve(0.0, 1.0, 2.0, 1.5),
            self.process.expectation(0.0, 1.0, 2.0) + 1.5 * self.process.std_deviation(0.0, 1.0, 2.0)
        )

    def test_negative_volatility(self):
        with pytest.raises(ValueError, match="negative volatility"):
            OrnsteinUhlenbeckProcess(speed=1.0, volatility=-0.1)

    def test_against_quantlib(self):
        ql = pytest.importorskip("QuantLib")
        expected = ql.OrnsteinUhlenbeckProcess(0.5, 0.2, 1.0, 0.03)

        assert np.isclose(self.process.expectation(0.0, 1.0, 2.0), expected.expectation(0.0, 1.0, 2.0))
        assert np.isclose(self.process.variance(0.0, 1.0, 2.0), expected.variance(0.0, 1.0, 2.0))


@pytest.mark.skipif(not is_jax_available(), reason="JAX not available")
class TestSimulateOUPaths:
    """Test suite for exact path simulation."""

    def test_shape_and_start(self):
        process = OrnsteinUhlenbeckProcess(speed=0.5, volatility=0.2, x0=1.0, level=0.03)

        paths = simulate_ou_paths(process, jnp.array([0.5, 1.0, 2.0]), n_paths=10)

        assert paths.shape == (10, 4)
        assert jnp.allclose(paths[:, 0], 1.0)

    def test_moments(self):
        process = OrnsteinUhlenbeckProcess(speed=0.5, volatility=0.2, x0=1.0, level=0.03)

        paths = simulate_ou_paths(process, jnp.array([1.0, 2.0]), n_paths=20000,
                                  key=random.PRNGKey(7))
        terminal = np.asarray(paths[:, -1])

        assert np.isclose(terminal.mean(), process.expectation(0.0, 1.0, 2.0), atol=0.01)
        assert np.isclose(terminal.var(), process.variance(0.0, 1.0, 2.0), rtol=0.05)

    def test_zero_volatility_is_deterministic(self):
        process = OrnsteinUhlenbeckProcess(speed=1.0, volatility=0.0, x0=2.0, level=1.0)

        paths = simulate_ou_paths(process, jnp.array([1.0]), n_paths=3)

        assert np.allclose(paths[:, 1], 1.0 + np.exp(-1.0))
