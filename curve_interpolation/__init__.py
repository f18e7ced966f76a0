"""Curve Interpolation Module"""

__version__ = "0.1.0"

# Available modules
__all__ = [
    "config",
    "enums",
    "math",
    "simulation",
    "utils",
]

# Note: Submodules are not imported automatically to avoid circular imports.
# Import them explicitly when needed:
# from curve_interpolation.math.interpolations import LogLinearInterpolation
