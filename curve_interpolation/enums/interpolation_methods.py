"""
Interpolation method and boundary condition enumerations.

enums/interpolation_methods.py
"""
from enum import Enum


class InterpolationMethod(Enum):
    """
    Enumeration of available interpolation schemes.
    """
    LINEAR = "linear"
    LOG_LINEAR = "loglinear"
    CUBIC = "cubic"
    LOG_CUBIC = "logcubic"

    @classmethod
    def from_string(cls, value: str) -> 'InterpolationMethod':
        """
        Create enum from string value.

        Parameters
        ----------
        value : str
            String representation of the method, e.g. ``"loglinear"``
            or ``"log_linear"``

        Returns
        -------
        InterpolationMethod
            Enum value

        Raises
        ------
        ValueError
            If value is not recognized
        """
        value_lower = value.lower().replace("_", "").replace("-", "")
        for method in cls:
            if method.value == value_lower:
                return method
        raise ValueError(f"Unknown interpolation method: {value}")

    @property
    def is_log_transformed(self) -> bool:
        return self in (InterpolationMethod.LOG_LINEAR, InterpolationMethod.LOG_CUBIC)


class BoundaryCondition(Enum):
    """
    End conditions for cubic-spline interpolation.

    ``FIRST_DERIVATIVE`` and ``SECOND_DERIVATIVE`` take a numeric target
    value; the value is ignored for ``NOT_A_KNOT`` and ``PERIODIC``.
    """
    NOT_A_KNOT = "not_a_knot"
    FIRST_DERIVATIVE = "first_derivative"
    SECOND_DERIVATIVE = "second_derivative"
    PERIODIC = "periodic"

    @classmethod
    def from_string(cls, value: str) -> 'BoundaryCondition':
        """Create enum from string value (``"not-a-knot"`` is accepted too)."""
        value_lower = value.lower().replace("-", "_").replace(" ", "_")
        for condition in cls:
            if condition.value == value_lower:
                return condition
        raise ValueError(f"Unknown boundary condition: {value}")

    @classmethod
    def coerce(cls, value) -> 'BoundaryCondition':
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls.from_string(value)
        raise TypeError(f"Cannot interpret {value!r} as a boundary condition")

    @property
    def takes_value(self) -> bool:
        return self in (BoundaryCondition.FIRST_DERIVATIVE, BoundaryCondition.SECOND_DERIVATIVE)
