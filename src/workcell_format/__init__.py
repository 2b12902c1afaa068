"""
Workcell Format: workcell documents and their conversion to and from URDF.

A workcell is a flat, parent-indexed tree of frames, geometry, inertias and
joints. This library imports URDF robot descriptions into workcells, exports
workcells back to URDF and persists workcells as JSON documents.
"""

import jax
jax.config.update("jax_enable_x64", True)

from . import transforms
from . import core
from . import io
from . import conversion
from . import kinematics

from .core import CURRENT_MAJOR_VERSION, CURRENT_MINOR_VERSION, Workcell

__version__ = "0.1.0"
__all__ = [
    "transforms",
    "core",
    "io",
    "conversion",
    "kinematics",
    "Workcell",
    "CURRENT_MAJOR_VERSION",
    "CURRENT_MINOR_VERSION",
]
