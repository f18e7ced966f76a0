"""
Piecewise-linear interpolation between discrete points.
"""
import logging
from typing import Sequence

import numpy as np

from ...config.constants import REQUIRED_POINTS
from .base import ArrayLike, Interpolation, InterpolationImpl

logger = logging.getLogger(__name__)


class LinearInterpolationImpl(InterpolationImpl):
    """
    Linear interpolation implementation.

    Outside the knot range the first and last segments are continued
    linearly.
    """

    def __init__(self, x: Sequence[float], y: Sequence[float]):
        super().__init__(x, y)
        self._x = None
        self._y = None
        self._slopes = None
        self._primitive_const = None

    def update(self) -> None:
        x = self._x_array()
        y = self._y_array()
        dx = np.diff(x)
        slopes = np.diff(y) / dx
        # integral of each segment, accumulated from x[0]
        segment_areas = dx * (y[:-1] + 0.5 * dx * slopes)

        self._x = x
        self._y = y
        self._slopes = slopes
        self._primitive_const = np.concatenate(([0.0], np.cumsum(segment_areas)))
        logger.debug("Linear interpolation rebuilt on %d points", len(x))

    def _locate(self, x: np.ndarray) -> np.ndarray:
        """Index of the segment containing x, clipped to the end segments."""
        i = np.searchsorted(self._x, x, side='right') - 1
        return np.clip(i, 0, len(self._x) - 2)

    def value(self, x: ArrayLike):
        x = np.asarray(x, dtype=float)
        i = self._locate(x)
        return self._y[i] + (x - self._x[i]) * self._slopes[i]

    def derivative(self, x: ArrayLike):
        x = np.asarray(x, dtype=float)
        return self._slopes[self._locate(x)]

    def second_derivative(self, x: ArrayLike):
        return np.zeros_like(np.asarray(x, dtype=float))

    def primitive(self, x: ArrayLike):
        x = np.asarray(x, dtype=float)
        i = self._locate(x)
        dx = x - self._x[i]
        return self._primitive_const[i] + dx * (self._y[i] + 0.5 * dx * self._slopes[i])


class LinearInterpolation(Interpolation):
    """
    Linear interpolation between discrete points.

    Parameters
    ----------
    x : sequence of float
        Knot abscissas; must be sorted in increasing order
    y : sequence of float
        Knot ordinates

    Examples
    --------
    >>> f = LinearInterpolation([0.0, 1.0, 2.0], [1.0, 2.0, 4.0])
    >>> f(1.5)
    3.0
    """

    def __init__(self, x: Sequence[float], y: Sequence[float]):
        impl = LinearInterpolationImpl(x, y)
        impl.update()
        super().__init__(impl)


class Linear:
    """Linear interpolation factory and traits."""

    GLOBAL = 0
    REQUIRED_POINTS = REQUIRED_POINTS

    def interpolate(self, x: Sequence[float], y: Sequence[float]) -> LinearInterpolation:
        return LinearInterpolation(x, y)
