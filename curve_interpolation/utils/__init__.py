"""Utils Module"""

from .jax_utils import is_jax_available, is_x64_enabled

# Available modules
__all__ = [
    "jax_utils",
    "is_jax_available",
    "is_x64_enabled",
]
