"""
JAX-based rotation and rigid-body transform helpers.

This module provides pure implementations of:
- SO(3) rotation conversions (so3 module)
- SE(3) rigid body transforms (se3 module)
"""

from . import so3
from . import se3

__all__ = [
    "so3",
    "se3",
]
