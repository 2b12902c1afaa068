"""I/O utilities for URDF robot descriptions and workcell documents.

This module provides the URDF text reader and writer, the in-memory URDF
records they exchange, and the JSON form of workcell documents.
"""

from .urdf_parser import load_urdf, parse_urdf_string
from .urdf_writer import write_urdf_bytes, write_urdf_string

__all__ = ["load_urdf", "parse_urdf_string", "write_urdf_bytes", "write_urdf_string"]
