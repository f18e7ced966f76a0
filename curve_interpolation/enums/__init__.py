"""Enums Module"""

from .interpolation_methods import BoundaryCondition, InterpolationMethod

# Available modules
__all__ = [
    "interpolation_methods",
    "BoundaryCondition",
    "InterpolationMethod",
]
