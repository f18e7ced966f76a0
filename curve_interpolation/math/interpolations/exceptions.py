"""
Exceptions raised by the interpolation schemes.

All errors derive from ``InterpolationError``; the data-related ones are
also ``ValueError`` so callers written against plain numpy/scipy code
keep working.
"""


class InterpolationError(Exception):
    """Base class for interpolation failures."""


class InvalidInputError(InterpolationError, ValueError):
    """
    An ordinate cannot be transformed.

    Attributes
    ----------
    index : int
        Position of the first offending ordinate
    value : float
        The offending ordinate
    """

    def __init__(self, index: int, value: float):
        self.index = index
        self.value = value
        super().__init__(f"invalid value ({value}) at index {index}")


class NotSupportedError(InterpolationError, NotImplementedError):
    """
    The scheme does not provide the requested operation.

    Attributes
    ----------
    scheme : str
        Name of the interpolation scheme, e.g. ``"LogLinear"``
    operation : str
        Name of the unsupported operation, e.g. ``"derivative"``
    """

    def __init__(self, scheme: str, operation: str):
        self.scheme = scheme
        self.operation = operation
        super().__init__(f"{scheme} {operation} not implemented")


class ExtrapolationError(InterpolationError, ValueError):
    """Evaluation outside the knot range without extrapolation allowed."""

    def __init__(self, x, x_min: float, x_max: float):
        self.x = x
        self.x_min = x_min
        self.x_max = x_max
        super().__init__(
            f"interpolation range is [{x_min}, {x_max}]: "
            f"extrapolation at {x} not allowed"
        )


class InsufficientPointsError(InterpolationError, ValueError):
    """Fewer knots than the scheme requires."""

    def __init__(self, required: int, provided: int):
        self.required = required
        self.provided = provided
        super().__init__(
            f"not enough points to interpolate: at least {required} "
            f"required, {provided} provided"
        )
