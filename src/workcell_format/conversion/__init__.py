"""Conversions between URDF robot descriptions and workcell documents."""

from .exporter import to_urdf, to_urdf_string, to_urdf_writer
from .importer import from_urdf
from .joint import DEFAULT_EFFORT_LIMIT, DEFAULT_VELOCITY_LIMIT

__all__ = [
    "from_urdf",
    "to_urdf",
    "to_urdf_string",
    "to_urdf_writer",
    "DEFAULT_EFFORT_LIMIT",
    "DEFAULT_VELOCITY_LIMIT",
]
