"""
Ornstein-Uhlenbeck process.

The process satisfies the SDE:
    dx_t = a * (r - x_t) * dt + sigma * dW_t

with mean-reversion speed ``a``, long-run level ``r`` and volatility
``sigma``. Transition moments are available in closed form, which also
gives an exact path simulation scheme.
"""
from typing import Optional

import jax
import jax.numpy as jnp
import numpy as np
from jax import random

from ..config.constants import DEFAULT_SIMULATION_SEED, QL_EPSILON


class OrnsteinUhlenbeckProcess:
    """
    Ornstein-Uhlenbeck process with closed-form transition moments.

    Parameters
    ----------
    speed : float
        Mean-reversion speed ``a``
    volatility : float
        Diffusion coefficient ``sigma``; must be non-negative
    x0 : float, optional
        Initial value
    level : float, optional
        Long-run mean ``r``

    Raises
    ------
    ValueError
        If the volatility is negative
    """

    def __init__(self, speed: float, volatility: float, x0: float = 0.0, level: float = 0.0):
        if volatility < 0.0:
            raise ValueError(f"negative volatility given: {volatility}")
        self._speed = speed
        self._volatility = volatility
        self._x0 = x0
        self._level = level

    @property
    def x0(self) -> float:
        return self._x0

    @property
    def speed(self) -> float:
        return self._speed

    @property
    def volatility(self) -> float:
        return self._volatility

    @property
    def level(self) -> float:
        return self._level

    def drift(self, t: float, x):
        return self._speed * (self._level - x)

    def diffusion(self, t: float, x) -> float:
        return self._volatility

    def expectation(self, t0: float, x0, dt):
        """Conditional mean of ``x(t0 + dt)`` given ``x(t0) = x0``."""
        return self._level + (x0 - self._level) * np.exp(-self._speed * np.asarray(dt))

    def variance(self, t0: float, x0, dt):
        """Conditional variance of ``x(t0 + dt)`` given ``x(t0) = x0``."""
        dt = np.asarray(dt, dtype=float)
        if self._speed < np.sqrt(QL_EPSILON):
            # a -> 0 limit: Brownian motion
            return self._volatility ** 2 * dt
        return (0.5 * self._volatility ** 2 / self._speed
                * (1.0 - np.exp(-2.0 * self._speed * dt)))

    def std_deviation(self, t0: float, x0, dt):
        return np.sqrt(self.variance(t0, x0, dt))

    def evolve(self, t0: float, x0, dt, dw):
        """
        Exact one-step evolution.

        Parameters
        ----------
        t0 : float
            Current time
        x0 : float or array-like
            Current value(s)
        dt : float
            Time step
        dw : float or array-like
            Standard normal draw(s)
        """
        return self.expectation(t0, x0, dt) + self.std_deviation(t0, x0, dt) * dw

    def __repr__(self):
        return (f"OrnsteinUhlenbeckProcess(speed={self._speed}, volatility={self._volatility}, "
                f"x0={self._x0}, level={self._level})")


def simulate_ou_paths(
    process: OrnsteinUhlenbeckProcess,
    times: jnp.ndarray,
    n_paths: int = 1000,
    key: Optional[jax.random.PRNGKey] = None
) -> jnp.ndarray:
    """
    Simulate Ornstein-Uhlenbeck paths with the exact Gaussian transition.

    Parameters
    ----------
    process : OrnsteinUhlenbeckProcess
        Process to simulate, started at ``process.x0`` at time 0
    times : jnp.ndarray
        Increasing positive observation times
    n_paths : int, optional
        Number of paths
    key : Optional[jax.random.PRNGKey]
        Random key for reproducibility

    Returns
    -------
    jnp.ndarray
        Array of shape ``(n_paths, len(times) + 1)``; column 0 is ``x0``
    """
    if key is None:
        key = random.PRNGKey(DEFAULT_SIMULATION_SEED)

    times = jnp.asarray(times, dtype=jnp.float64)
    dts = jnp.diff(jnp.concatenate([jnp.zeros(1), times]))
    speed, sigma, level = process.speed, process.volatility, process.level

    if speed < np.sqrt(QL_EPSILON):
        std_devs = sigma * jnp.sqrt(dts)
    else:
        std_devs = jnp.sqrt(0.5 * sigma ** 2 / speed * (1.0 - jnp.exp(-2.0 * speed * dts)))
    decays = jnp.exp(-speed * dts)

    def step(x, inputs):
        """Single exact transition step."""
        decay, std_dev, subkey = inputs
        x_next = level + (x - level) * decay + std_dev * random.normal(subkey, x.shape)
        return x_next, x_next

    keys = random.split(key, len(times))
    x_start = jnp.full((n_paths,), process.x0, dtype=jnp.float64)
    _, path = jax.lax.scan(step, x_start, (decays, std_devs, keys))

    return jnp.concatenate([x_start[None, :], path], axis=0).T
