"""Geometry conversion between URDF shapes and workcell models."""

from typing import Union

from workcell_format.core.geometry import (
    Box,
    Capsule,
    Cylinder,
    Geometry,
    Mesh,
    Sphere,
    WorkcellModel,
    asset_source_from_path,
)
from workcell_format.io import urdf_model as urdf

from .pose import pose_from_urdf, pose_to_urdf
from .precision import narrow, narrow_vector, widen, widen_vector


def geometry_from_urdf(geometry: urdf.Geometry) -> Geometry:
    """Convert a URDF shape, narrowing its dimensions to single precision."""
    if isinstance(geometry, urdf.Box):
        return Box(size=narrow_vector(geometry.size))
    if isinstance(geometry, urdf.Cylinder):
        return Cylinder(radius=narrow(geometry.radius), length=narrow(geometry.length))
    if isinstance(geometry, urdf.Capsule):
        return Capsule(radius=narrow(geometry.radius), length=narrow(geometry.length))
    if isinstance(geometry, urdf.Sphere):
        return Sphere(radius=narrow(geometry.radius))
    if isinstance(geometry, urdf.Mesh):
        scale = narrow_vector(geometry.scale) if geometry.scale is not None else None
        return Mesh(source=asset_source_from_path(geometry.filename), scale=scale)
    raise TypeError(f"Unknown URDF geometry {geometry!r}")


def geometry_to_urdf(geometry: Geometry) -> urdf.Geometry:
    """Convert a workcell shape, widening its dimensions to double precision."""
    if isinstance(geometry, Box):
        return urdf.Box(size=widen_vector(geometry.size))
    if isinstance(geometry, Cylinder):
        return urdf.Cylinder(radius=widen(geometry.radius), length=widen(geometry.length))
    if isinstance(geometry, Capsule):
        return urdf.Capsule(radius=widen(geometry.radius), length=widen(geometry.length))
    if isinstance(geometry, Sphere):
        return urdf.Sphere(radius=widen(geometry.radius))
    if isinstance(geometry, Mesh):
        scale = widen_vector(geometry.scale) if geometry.scale is not None else None
        return urdf.Mesh(filename=geometry.source.as_unvalidated_asset_path(), scale=scale)
    raise TypeError(f"Unknown workcell geometry {geometry!r}")


def model_from_urdf(element: Union[urdf.Visual, urdf.Collision]) -> WorkcellModel:
    """Build a workcell model from a URDF visual or collision element."""
    return WorkcellModel(
        name=element.name or "",
        geometry=geometry_from_urdf(element.geometry),
        pose=pose_from_urdf(element.origin),
    )


def model_to_visual(model: WorkcellModel) -> urdf.Visual:
    return urdf.Visual(
        name=model.name or None,
        origin=pose_to_urdf(model.pose),
        geometry=geometry_to_urdf(model.geometry),
    )


def model_to_collision(model: WorkcellModel) -> urdf.Collision:
    return urdf.Collision(
        name=model.name or None,
        origin=pose_to_urdf(model.pose),
        geometry=geometry_to_urdf(model.geometry),
    )
