"""Simulation Module"""

from .ornstein_uhlenbeck import OrnsteinUhlenbeckProcess, simulate_ou_paths

# Available modules
__all__ = [
    "ornstein_uhlenbeck",
    "OrnsteinUhlenbeckProcess",
    "simulate_ou_paths",
]
