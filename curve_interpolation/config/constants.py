"""
Global constants and configuration for the curve interpolation package.
"""
import jax
import numpy as np


# Enable 64-bit precision for JAX (log/exp round trips need double precision)
jax.config.update("jax_enable_x64", True)

QL_EPSILON = float(np.finfo(float).eps)

# Every scheme in the package needs at least two knots
REQUIRED_POINTS = 2

# Log-cubic factory defaults
DEFAULT_LOG_CUBIC_LEFT_CONDITION = "not_a_knot"
DEFAULT_LOG_CUBIC_LEFT_VALUE = 0.0
DEFAULT_LOG_CUBIC_RIGHT_CONDITION = "second_derivative"
DEFAULT_LOG_CUBIC_RIGHT_VALUE = 0.0
DEFAULT_MONOTONICITY = True

DEFAULT_SIMULATION_SEED = 42
