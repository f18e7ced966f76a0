"""Config Module"""

# Available modules
__all__ = [
    "constants",
]

# Note: Submodules are not imported automatically to avoid circular imports.
# Import them explicitly when needed:
# from curve_interpolation.config import constants
