"""Math Module"""

# Available modules
__all__ = [
    "interpolations",
]

# Note: Submodules are not imported automatically to avoid circular imports.
# Import them explicitly when needed:
# from curve_interpolation.math.interpolations import LogCubic
