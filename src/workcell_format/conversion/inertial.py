"""Inertial conversion between URDF and workcell inertias."""

from workcell_format.core.inertial import Inertia, Moment
from workcell_format.io import urdf_model as urdf

from .pose import pose_from_urdf, pose_to_urdf
from .precision import narrow, widen

_COMPONENTS = ("ixx", "ixy", "ixz", "iyy", "iyz", "izz")


def inertia_from_urdf(inertial: urdf.Inertial) -> Inertia:
    moment = Moment(**{c: narrow(getattr(inertial.inertia, c)) for c in _COMPONENTS})
    return Inertia(
        center=pose_from_urdf(inertial.origin),
        mass=narrow(inertial.mass),
        moment=moment,
    )


def inertia_to_urdf(inertia: Inertia) -> urdf.Inertial:
    tensor = urdf.Inertia(**{c: widen(getattr(inertia.moment, c)) for c in _COMPONENTS})
    return urdf.Inertial(
        origin=pose_to_urdf(inertia.center),
        mass=widen(inertia.mass),
        inertia=tensor,
    )
