"""
JAX utility functions for the curve interpolation package.
"""

import jax
import jax.numpy as jnp


def is_jax_available() -> bool:
    """
    Check if JAX is available and properly configured.

    Returns
    -------
    bool
        True if JAX is available and functional

    Examples
    --------
    >>> is_jax_available()
    True
    """
    try:
        # Try to create a simple JAX array
        _ = jnp.array([1.0])
        return True
    except Exception:
        return False


def is_x64_enabled() -> bool:
    """Whether JAX runs in 64-bit mode (required for log/exp round trips)."""
    return bool(jax.config.jax_enable_x64)
