"""Interpolations Module"""

from .base import Interpolation, InterpolationImpl
from .cubic import (
    Cubic,
    CubicInterpolation,
    CubicInterpolationImpl,
    CubicNaturalSpline,
    MonotonicCubicNaturalSpline,
    hyman_filter,
)
from .exceptions import (
    ExtrapolationError,
    InsufficientPointsError,
    InterpolationError,
    InvalidInputError,
    NotSupportedError,
)
from .factory import create_interpolator, get_interpolator_traits
from .linear import Linear, LinearInterpolation, LinearInterpolationImpl
from .loginterpolation import (
    LogCubic,
    LogCubicInterpolation,
    LogCubicInterpolationImpl,
    LogCubicNaturalSpline,
    LogLinear,
    LogLinearInterpolation,
    LogLinearInterpolationImpl,
    MonotonicLogCubicNaturalSpline,
)
from ...enums import BoundaryCondition, InterpolationMethod

__all__ = [
    "BoundaryCondition",
    "Cubic",
    "CubicInterpolation",
    "CubicInterpolationImpl",
    "CubicNaturalSpline",
    "ExtrapolationError",
    "InsufficientPointsError",
    "Interpolation",
    "InterpolationError",
    "InterpolationImpl",
    "InterpolationMethod",
    "InvalidInputError",
    "Linear",
    "LinearInterpolation",
    "LinearInterpolationImpl",
    "LogCubic",
    "LogCubicInterpolation",
    "LogCubicInterpolationImpl",
    "LogCubicNaturalSpline",
    "LogLinear",
    "LogLinearInterpolation",
    "LogLinearInterpolationImpl",
    "MonotonicCubicNaturalSpline",
    "MonotonicLogCubicNaturalSpline",
    "NotSupportedError",
    "create_interpolator",
    "get_interpolator_traits",
    "hyman_filter",
]
