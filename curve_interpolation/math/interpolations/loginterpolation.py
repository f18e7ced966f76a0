"""
Log-linear and log-cubic interpolation between discrete points.

Both schemes fit an inner interpolation to ``log(y)`` and exponentiate on
evaluation, so the resulting curve is strictly positive. The inner
interpolation is rebuilt from scratch on every ``update()``; it is never
patched in place.

Derivatives and primitives of the transformed curve are not provided.
"""
import logging
from abc import abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Sequence

import numpy as np

from ...config.constants import (
    DEFAULT_LOG_CUBIC_LEFT_CONDITION,
    DEFAULT_LOG_CUBIC_LEFT_VALUE,
    DEFAULT_LOG_CUBIC_RIGHT_CONDITION,
    DEFAULT_LOG_CUBIC_RIGHT_VALUE,
    DEFAULT_MONOTONICITY,
    REQUIRED_POINTS,
)
from ...enums import BoundaryCondition
from .base import ArrayLike, Interpolation, InterpolationImpl, _to_output
from .cubic import ConditionLike, CubicInterpolation
from .exceptions import InvalidInputError, NotSupportedError
from .linear import LinearInterpolation

logger = logging.getLogger(__name__)


def log_transform(y: np.ndarray) -> np.ndarray:
    """
    Natural logarithm of strictly positive ordinates.

    Raises
    ------
    InvalidInputError
        For the first ordinate that is not strictly positive (NaN included)
    """
    invalid = np.flatnonzero(~(y > 0.0))
    if invalid.size:
        index = int(invalid[0])
        raise InvalidInputError(index, float(y[index]))
    return np.log(y)


class LogInterpolationImpl(InterpolationImpl):
    """
    Shared machinery of the log-transformed schemes.

    Subclasses set ``scheme`` and implement ``_build`` to construct the
    inner interpolation over ``(x, log_y)``.
    """

    scheme = "Log"

    def __init__(self, x: Sequence[float], y: Sequence[float]):
        super().__init__(x, y)
        self.log_y = None
        self.interpolation = None

    @abstractmethod
    def _build(self, log_y: np.ndarray) -> Interpolation:
        """Construct the inner interpolation over ``(x, log_y)``."""

    def update(self) -> None:
        log_y = log_transform(self._y_array())
        interpolation = self._build(log_y)
        self.log_y = log_y
        self.interpolation = interpolation
        logger.debug("%s interpolation rebuilt on %d points", self.scheme, len(log_y))

    def value(self, x: ArrayLike):
        return np.exp(self.interpolation.value(x, allow_extrapolation=True))

    def derivative(self, x: ArrayLike):
        raise NotSupportedError(self.scheme, "derivative")

    def second_derivative(self, x: ArrayLike):
        raise NotSupportedError(self.scheme, "second_derivative")

    def primitive(self, x: ArrayLike):
        raise NotSupportedError(self.scheme, "primitive")


class LogLinearInterpolationImpl(LogInterpolationImpl):
    """Linear interpolation of ``log(y)``."""

    scheme = "LogLinear"

    def _build(self, log_y: np.ndarray) -> Interpolation:
        return LinearInterpolation(self.x_data, log_y)


class LogCubicInterpolationImpl(LogInterpolationImpl):
    """Cubic-spline interpolation of ``log(y)``."""

    scheme = "LogCubic"

    def __init__(
        self,
        x: Sequence[float],
        y: Sequence[float],
        left_condition: ConditionLike,
        left_value: float,
        right_condition: ConditionLike,
        right_value: float,
        monotonic: bool
    ):
        super().__init__(x, y)
        self.left_condition = BoundaryCondition.coerce(left_condition)
        self.left_value = left_value
        self.right_condition = BoundaryCondition.coerce(right_condition)
        self.right_value = right_value
        self.monotonic = monotonic

    def _build(self, log_y: np.ndarray) -> Interpolation:
        return CubicInterpolation(self.x_data, log_y,
                                  self.left_condition, self.left_value,
                                  self.right_condition, self.right_value,
                                  self.monotonic)


class _LogInterpolation(Interpolation):
    """
    Handle for the log-transformed schemes.

    Derivative, second derivative and primitive are rejected with
    ``NotSupportedError`` for any ``x``, before any range check.
    """

    def derivative(self, x: ArrayLike, allow_extrapolation: bool = False):
        return _to_output(self._require_impl().derivative(x), x)

    def second_derivative(self, x: ArrayLike, allow_extrapolation: bool = False):
        return _to_output(self._require_impl().second_derivative(x), x)

    def primitive(self, x: ArrayLike, allow_extrapolation: bool = False):
        return _to_output(self._require_impl().primitive(x), x)


class LogLinearInterpolation(_LogInterpolation):
    """
    Log-linear interpolation between discrete points.

    Parameters
    ----------
    x : sequence of float
        Knot abscissas; must be sorted in increasing order
    y : sequence of float
        Strictly positive knot ordinates

    Raises
    ------
    InvalidInputError
        If any ordinate is not strictly positive

    Examples
    --------
    >>> f = LogLinearInterpolation([1.0, 2.0, 3.0, 4.0], [1.0, 2.0, 4.0, 8.0])
    >>> round(f(2.5), 6)
    2.828427
    """

    def __init__(self, x: Sequence[float], y: Sequence[float]):
        impl = LogLinearInterpolationImpl(x, y)
        impl.update()
        super().__init__(impl)


class LogCubicInterpolation(_LogInterpolation):
    """
    Log-cubic interpolation between discrete points.

    Parameters
    ----------
    x : sequence of float
        Knot abscissas; must be sorted in increasing order
    y : sequence of float
        Strictly positive knot ordinates
    left_condition, right_condition : BoundaryCondition or str
        End conditions of the spline fitted to ``log(y)``
    left_value, right_value : float
        Derivative targets (in log space) for the derivative conditions
    monotonic : bool
        Apply the Hyman monotonicity filter to the log spline

    Raises
    ------
    InvalidInputError
        If any ordinate is not strictly positive
    """

    def __init__(
        self,
        x: Sequence[float],
        y: Sequence[float],
        left_condition: ConditionLike,
        left_value: float,
        right_condition: ConditionLike,
        right_value: float,
        monotonic: bool
    ):
        impl = LogCubicInterpolationImpl(x, y, left_condition, left_value,
                                         right_condition, right_value, monotonic)
        impl.update()
        super().__init__(impl)


class LogCubicNaturalSpline(LogCubicInterpolation):
    """Log-cubic natural spline (zero second derivative of ``log(y)`` at both ends)."""

    def __init__(self, x: Sequence[float], y: Sequence[float]):
        super().__init__(x, y,
                         BoundaryCondition.SECOND_DERIVATIVE, 0.0,
                         BoundaryCondition.SECOND_DERIVATIVE, 0.0,
                         False)


class MonotonicLogCubicNaturalSpline(LogCubicInterpolation):
    """Log-cubic natural spline with the monotonicity constraint."""

    def __init__(self, x: Sequence[float], y: Sequence[float]):
        super().__init__(x, y,
                         BoundaryCondition.SECOND_DERIVATIVE, 0.0,
                         BoundaryCondition.SECOND_DERIVATIVE, 0.0,
                         True)


class LogLinear:
    """
    Log-linear interpolation factory and traits.

    ``GLOBAL = 0``: moving one knot only changes the curve on the two
    adjacent segments.
    """

    GLOBAL = 0
    REQUIRED_POINTS = REQUIRED_POINTS

    def interpolate(self, x: Sequence[float], y: Sequence[float]) -> LogLinearInterpolation:
        return LogLinearInterpolation(x, y)


@dataclass(frozen=True)
class LogCubic:
    """
    Log-cubic interpolation factory and traits.

    ``GLOBAL = 1``: moving one knot can change the whole curve.

    Attributes
    ----------
    left_condition : BoundaryCondition
        Defaults to not-a-knot
    left_value : float
    right_condition : BoundaryCondition
        Defaults to zero second derivative
    right_value : float
    monotonic : bool
        Defaults to True
    """

    left_condition: ConditionLike = DEFAULT_LOG_CUBIC_LEFT_CONDITION
    left_value: float = DEFAULT_LOG_CUBIC_LEFT_VALUE
    right_condition: ConditionLike = DEFAULT_LOG_CUBIC_RIGHT_CONDITION
    right_value: float = DEFAULT_LOG_CUBIC_RIGHT_VALUE
    monotonic: bool = DEFAULT_MONOTONICITY

    GLOBAL: ClassVar[int] = 1
    REQUIRED_POINTS: ClassVar[int] = REQUIRED_POINTS

    def __post_init__(self):
        object.__setattr__(self, "left_condition", BoundaryCondition.coerce(self.left_condition))
        object.__setattr__(self, "right_condition", BoundaryCondition.coerce(self.right_condition))

    def interpolate(self, x: Sequence[float], y: Sequence[float]) -> LogCubicInterpolation:
        return LogCubicInterpolation(x, y,
                                     self.left_condition, self.left_value,
                                     self.right_condition, self.right_value,
                                     self.monotonic)
