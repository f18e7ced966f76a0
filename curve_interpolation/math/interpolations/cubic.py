"""
Cubic-spline interpolation between discrete points.

The spline itself is solved by ``scipy.interpolate.CubicSpline``; this
module maps the package boundary conditions onto scipy's ``bc_type`` and
applies the Hyman monotonicity filter on request.
"""
import logging
from dataclasses import dataclass
from typing import ClassVar, Sequence, Tuple, Union

import numpy as np
from scipy.interpolate import CubicHermiteSpline, CubicSpline

from ...config.constants import REQUIRED_POINTS
from ...enums import BoundaryCondition
from .base import ArrayLike, Interpolation, InterpolationImpl

logger = logging.getLogger(__name__)

ConditionLike = Union[BoundaryCondition, str]


def _end_condition(condition: BoundaryCondition, value: float):
    if condition is BoundaryCondition.NOT_A_KNOT:
        return 'not-a-knot'
    if condition.takes_value:
        order = 1 if condition is BoundaryCondition.FIRST_DERIVATIVE else 2
        return (order, float(value))
    raise ValueError(f"Unsupported end condition: {condition}")


def scipy_bc_type(
    left_condition: BoundaryCondition,
    left_value: float,
    right_condition: BoundaryCondition,
    right_value: float
):
    """
    Translate a pair of end conditions into a scipy ``bc_type``.

    Raises
    ------
    ValueError
        If only one end is periodic
    """
    periodic = BoundaryCondition.PERIODIC
    if left_condition is periodic or right_condition is periodic:
        if left_condition is not right_condition:
            raise ValueError("periodic boundary condition must be set on both ends")
        return 'periodic'
    return (_end_condition(left_condition, left_value),
            _end_condition(right_condition, right_value))


def hyman_filter(
    x: np.ndarray,
    y: np.ndarray,
    d: np.ndarray
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Apply the Hyman monotonicity filter to knot derivatives.

    Parameters
    ----------
    x, y : np.ndarray
        Knot coordinates
    d : np.ndarray
        First derivatives of the unconstrained spline at the knots

    Returns
    -------
    filtered : np.ndarray
        Constrained derivatives
    adjusted : np.ndarray of bool
        True where the filter changed the derivative

    Notes
    -----
    Each derivative is forced to share the sign of the local slope estimate
    and is capped at three times the smallest neighbouring secant slope.
    Near a knot where the secant slopes keep changing in the same
    direction, the cap is relaxed to 1.5 times the smaller of the centred
    and one-sided (``pd``, ``pu``) parabolic slope estimates.

    References
    ----------
    Hyman, J.M. (1983). "Accurate monotonicity preserving cubic
    interpolation". SIAM J. Sci. Stat. Comput. 4(4): 645-654.
    """
    n = len(x)
    dx = np.diff(x)
    s = np.diff(y) / dx
    filtered = np.array(d, dtype=float, copy=True)
    adjusted = np.zeros(n, dtype=bool)

    for i in range(n):
        if i == 0:
            reference = s[0]
            bound = 3.0 * abs(s[0])
        elif i == n - 1:
            reference = s[n - 2]
            bound = 3.0 * abs(s[n - 2])
        else:
            reference = (s[i - 1] * dx[i] + s[i] * dx[i - 1]) / (dx[i - 1] + dx[i])
            bound = 3.0 * min(abs(s[i - 1]), abs(s[i]), abs(reference))
            # relax the bound where the secant slopes keep the same convexity
            if i > 1 and (s[i - 1] - s[i - 2]) * (s[i] - s[i - 1]) > 0.0:
                pd = ((s[i - 1] * (2.0 * dx[i - 1] + dx[i - 2]) - s[i - 2] * dx[i - 1])
                      / (dx[i - 2] + dx[i - 1]))
                if reference * pd > 0.0 and reference * (s[i - 1] - s[i - 2]) > 0.0:
                    bound = max(bound, 1.5 * min(abs(reference), abs(pd)))
            if i < n - 2 and (s[i] - s[i - 1]) * (s[i + 1] - s[i]) > 0.0:
                pu = ((s[i] * (2.0 * dx[i] + dx[i + 1]) - s[i + 1] * dx[i])
                      / (dx[i] + dx[i + 1]))
                if reference * pu > 0.0 and -reference * (s[i] - s[i - 1]) > 0.0:
                    bound = max(bound, 1.5 * min(abs(reference), abs(pu)))

        if filtered[i] * reference > 0.0:
            correction = np.sign(filtered[i]) * min(abs(filtered[i]), bound)
        else:
            correction = 0.0

        if correction != filtered[i]:
            filtered[i] = correction
            adjusted[i] = True

    return filtered, adjusted


class CubicInterpolationImpl(InterpolationImpl):
    """
    Cubic-spline interpolation implementation.

    Outside the knot range the end polynomials are continued.
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
        super().__init__(x, y)
        self.left_condition = BoundaryCondition.coerce(left_condition)
        self.left_value = left_value
        self.right_condition = BoundaryCondition.coerce(right_condition)
        self.right_value = right_value
        self.monotonic = monotonic
        self.monotonicity_adjustments = np.zeros(len(x), dtype=bool)
        self._spline = None
        self._antiderivative = None
        self._primitive_offset = 0.0

    def update(self) -> None:
        x = self._x_array()
        y = self._y_array()
        bc_type = scipy_bc_type(self.left_condition, self.left_value,
                                self.right_condition, self.right_value)
        spline = CubicSpline(x, y, bc_type=bc_type)

        adjusted = np.zeros(len(x), dtype=bool)
        if self.monotonic:
            d, adjusted = hyman_filter(x, y, spline(x, 1))
            if adjusted.any():
                logger.debug("Hyman filter adjusted knots %s", np.flatnonzero(adjusted).tolist())
                spline = CubicHermiteSpline(x, y, d, extrapolate=spline.extrapolate)

        self._spline = spline
        self._antiderivative = spline.antiderivative()
        self._primitive_offset = float(self._antiderivative(x[0]))
        self.monotonicity_adjustments = adjusted
        logger.debug(
            "Cubic interpolation rebuilt on %d points (bc=%s, monotonic=%s)",
            len(x), bc_type, self.monotonic
        )

    def value(self, x: ArrayLike):
        return self._spline(np.asarray(x, dtype=float))

    def derivative(self, x: ArrayLike):
        return self._spline(np.asarray(x, dtype=float), 1)

    def second_derivative(self, x: ArrayLike):
        return self._spline(np.asarray(x, dtype=float), 2)

    def primitive(self, x: ArrayLike):
        return self._antiderivative(np.asarray(x, dtype=float)) - self._primitive_offset


class CubicInterpolation(Interpolation):
    """
    Cubic-spline interpolation between discrete points.

    Parameters
    ----------
    x : sequence of float
        Knot abscissas; must be sorted in increasing order
    y : sequence of float
        Knot ordinates
    left_condition, right_condition : BoundaryCondition or str
        End conditions
    left_value, right_value : float
        Derivative targets, used by ``FIRST_DERIVATIVE`` and
        ``SECOND_DERIVATIVE`` only
    monotonic : bool
        Apply the Hyman monotonicity filter
    """

    def __init__(
        self,
        x: Sequence[float],
        y: Sequence[float],
        left_condition: ConditionLike = BoundaryCondition.NOT_A_KNOT,
        left_value: float = 0.0,
        right_condition: ConditionLike = BoundaryCondition.NOT_A_KNOT,
        right_value: float = 0.0,
        monotonic: bool = False
    ):
        impl = CubicInterpolationImpl(x, y, left_condition, left_value,
                                      right_condition, right_value, monotonic)
        impl.update()
        super().__init__(impl)

    def monotonicity_adjustments(self) -> np.ndarray:
        """Knots whose derivative was changed by the monotonicity filter."""
        return self._require_impl().monotonicity_adjustments.copy()


class CubicNaturalSpline(CubicInterpolation):
    """Natural cubic spline: zero second derivative at both ends."""

    def __init__(self, x: Sequence[float], y: Sequence[float]):
        super().__init__(x, y,
                         BoundaryCondition.SECOND_DERIVATIVE, 0.0,
                         BoundaryCondition.SECOND_DERIVATIVE, 0.0,
                         False)


class MonotonicCubicNaturalSpline(CubicInterpolation):
    """Natural cubic spline with the Hyman monotonicity filter."""

    def __init__(self, x: Sequence[float], y: Sequence[float]):
        super().__init__(x, y,
                         BoundaryCondition.SECOND_DERIVATIVE, 0.0,
                         BoundaryCondition.SECOND_DERIVATIVE, 0.0,
                         True)


@dataclass(frozen=True)
class Cubic:
    """Cubic-spline interpolation factory and traits."""

    left_condition: ConditionLike = BoundaryCondition.NOT_A_KNOT
    left_value: float = 0.0
    right_condition: ConditionLike = BoundaryCondition.NOT_A_KNOT
    right_value: float = 0.0
    monotonic: bool = False

    GLOBAL: ClassVar[int] = 1
    REQUIRED_POINTS: ClassVar[int] = REQUIRED_POINTS

    def __post_init__(self):
        object.__setattr__(self, "left_condition", BoundaryCondition.coerce(self.left_condition))
        object.__setattr__(self, "right_condition", BoundaryCondition.coerce(self.right_condition))

    def interpolate(self, x: Sequence[float], y: Sequence[float]) -> CubicInterpolation:
        return CubicInterpolation(x, y,
                                  self.left_condition, self.left_value,
                                  self.right_condition, self.right_value,
                                  self.monotonic)
