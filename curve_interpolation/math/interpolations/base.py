"""
Base classes for interpolation schemes.

``InterpolationImpl`` is the small contract every concrete scheme
implements (``update``, ``value``, ``derivative``, ``second_derivative``,
``primitive``); ``Interpolation`` is the caller-facing handle that owns
one implementation, checks the evaluation range and converts results.

Coordinate data is held by reference: the implementation keeps the
sequences it was given and re-reads them on ``update()``. Mutating a
mutable buffer (list, numpy array) in place and then calling
``update()`` therefore re-synchronises the curve. The abscissas must be
sorted in increasing order; this is a precondition and is not checked.
"""
from abc import ABC, abstractmethod
from typing import Sequence, Union

import numpy as np

from ...config.constants import QL_EPSILON, REQUIRED_POINTS
from .exceptions import ExtrapolationError, InsufficientPointsError, InterpolationError

ArrayLike = Union[float, Sequence[float], np.ndarray]


def _to_output(result, x: ArrayLike):
    """Return a float for scalar input, an ndarray otherwise."""
    if np.ndim(x) == 0:
        return float(result)
    return np.asarray(result, dtype=float)


class InterpolationImpl(ABC):
    """
    Abstract interpolation implementation.

    Parameters
    ----------
    x : sequence of float
        Knot abscissas, sorted in increasing order
    y : sequence of float
        Knot ordinates; only the first ``len(x)`` values are used
    """

    required_points = REQUIRED_POINTS

    def __init__(self, x: Sequence[float], y: Sequence[float]):
        n = len(x)
        if n < self.required_points:
            raise InsufficientPointsError(self.required_points, n)
        self.x_data = x
        self.y_data = y

    def _x_array(self) -> np.ndarray:
        return np.asarray(self.x_data, dtype=float)

    def _y_array(self) -> np.ndarray:
        return np.asarray(self.y_data, dtype=float)[:len(self.x_data)]

    def x_min(self) -> float:
        return float(self.x_data[0])

    def x_max(self) -> float:
        return float(self.x_data[len(self.x_data) - 1])

    def is_in_range(self, x: ArrayLike) -> bool:
        x = np.asarray(x, dtype=float)
        x_min, x_max = self.x_min(), self.x_max()
        inside = (x >= x_min) & (x <= x_max)
        inside |= np.isclose(x, x_min, rtol=42 * QL_EPSILON, atol=0.0)
        inside |= np.isclose(x, x_max, rtol=42 * QL_EPSILON, atol=0.0)
        return bool(np.all(inside))

    @abstractmethod
    def update(self) -> None:
        """Rebuild internal state from the current coordinate data."""

    @abstractmethod
    def value(self, x: ArrayLike):
        pass

    @abstractmethod
    def derivative(self, x: ArrayLike):
        pass

    @abstractmethod
    def second_derivative(self, x: ArrayLike):
        pass

    @abstractmethod
    def primitive(self, x: ArrayLike):
        """Integral of the curve from ``x_min()`` to ``x``."""


class Interpolation:
    """
    Caller-facing interpolation handle.

    The handle owns one ``InterpolationImpl`` and exposes the uniform
    evaluation interface. Copying a handle (``copy.copy``) shares the
    underlying implementation.

    Evaluation outside ``[x_min(), x_max()]`` raises ``ExtrapolationError``
    unless ``allow_extrapolation=True`` is passed or extrapolation has been
    enabled on the handle with ``enable_extrapolation()``.
    """

    def __init__(self, impl: InterpolationImpl = None):
        self._impl = impl
        self._extrapolate = False

    # Extrapolation switch

    def enable_extrapolation(self, b: bool = True) -> None:
        self._extrapolate = b

    def disable_extrapolation(self, b: bool = True) -> None:
        self._extrapolate = not b

    def allows_extrapolation(self) -> bool:
        return self._extrapolate

    # Inspectors

    def empty(self) -> bool:
        return self._impl is None

    def x_min(self) -> float:
        return self._require_impl().x_min()

    def x_max(self) -> float:
        return self._require_impl().x_max()

    def is_in_range(self, x: ArrayLike) -> bool:
        return self._require_impl().is_in_range(x)

    # Evaluation

    def update(self) -> None:
        self._require_impl().update()

    def value(self, x: ArrayLike, allow_extrapolation: bool = False):
        """
        Evaluate the curve.

        Parameters
        ----------
        x : float or array-like
            Evaluation point(s)
        allow_extrapolation : bool, optional
            Permit points outside the knot range for this call

        Returns
        -------
        float or np.ndarray
            Interpolated value(s), a float for scalar input
        """
        self._check_range(x, allow_extrapolation)
        return _to_output(self._impl.value(x), x)

    __call__ = value

    def derivative(self, x: ArrayLike, allow_extrapolation: bool = False):
        self._check_range(x, allow_extrapolation)
        return _to_output(self._impl.derivative(x), x)

    def second_derivative(self, x: ArrayLike, allow_extrapolation: bool = False):
        self._check_range(x, allow_extrapolation)
        return _to_output(self._impl.second_derivative(x), x)

    def primitive(self, x: ArrayLike, allow_extrapolation: bool = False):
        self._check_range(x, allow_extrapolation)
        return _to_output(self._impl.primitive(x), x)

    def _require_impl(self) -> InterpolationImpl:
        if self._impl is None:
            raise InterpolationError("empty interpolation")
        return self._impl

    def _check_range(self, x: ArrayLike, allow_extrapolation: bool) -> None:
        impl = self._require_impl()
        if self._extrapolate or allow_extrapolation:
            return
        if not impl.is_in_range(x):
            raise ExtrapolationError(x, impl.x_min(), impl.x_max())

    def __repr__(self):
        if self._impl is None:
            return f"{type(self).__name__}(empty)"
        return (f"{type(self).__name__}(n={len(self._impl.x_data)}, "
                f"range=[{self._impl.x_min()}, {self._impl.x_max()}])")
