"""
Factory helpers to pick an interpolation scheme by name.
"""
from typing import Sequence, Union

from ...enums import InterpolationMethod
from .base import Interpolation
from .cubic import Cubic
from .linear import Linear
from .loginterpolation import LogCubic, LogLinear


def get_interpolator_traits(
    method: Union[InterpolationMethod, str] = InterpolationMethod.LINEAR,
    **kwargs
):
    """
    Create the factory/traits object for an interpolation method.

    Parameters
    ----------
    method : InterpolationMethod or str
        Interpolation method
    **kwargs
        Boundary-condition and monotonicity settings, accepted by the
        cubic schemes only

    Returns
    -------
    Linear, LogLinear, Cubic or LogCubic
        Traits object exposing ``interpolate(x, y)`` and ``GLOBAL``

    Raises
    ------
    ValueError
        If the method is unknown, or settings are given to a linear scheme
    """
    if isinstance(method, str):
        method = InterpolationMethod.from_string(method)

    if method == InterpolationMethod.CUBIC:
        return Cubic(**kwargs)
    elif method == InterpolationMethod.LOG_CUBIC:
        return LogCubic(**kwargs)

    if kwargs:
        raise ValueError(
            f"{method.value} interpolation takes no settings, got {sorted(kwargs)}"
        )
    if method == InterpolationMethod.LINEAR:
        return Linear()
    elif method == InterpolationMethod.LOG_LINEAR:
        return LogLinear()
    else:
        raise ValueError(f"Unsupported interpolation method: {method}")


def create_interpolator(
    x_data: Sequence[float],
    y_data: Sequence[float],
    method: Union[InterpolationMethod, str] = InterpolationMethod.LINEAR,
    extrapolation: bool = False,
    **kwargs
) -> Interpolation:
    """
    Factory function to create interpolators.

    Parameters
    ----------
    x_data : sequence of float
        X-axis data points, sorted in increasing order
    y_data : sequence of float
        Y-axis data points
    method : {'linear', 'loglinear', 'cubic', 'logcubic'}
        Interpolation method
    extrapolation : bool
        Enable extrapolation on the returned handle
    **kwargs
        Settings forwarded to the cubic traits

    Returns
    -------
    Interpolation
        Interpolation handle

    Examples
    --------
    >>> interp = create_interpolator([0, 1, 2, 3], [1, 2, 4, 8], 'loglinear')
    >>> round(interp(1.5), 6)
    2.828427
    """
    traits = get_interpolator_traits(method, **kwargs)
    interpolation = traits.interpolate(x_data, y_data)
    interpolation.enable_extrapolation(extrapolation)
    return interpolation
