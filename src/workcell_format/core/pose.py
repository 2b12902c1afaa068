"""Poses, rotations and frame anchors of the workcell document.

A pose is a translation plus a rotation. Rotations keep the representation
they were authored in (a yaw, extrinsic XYZ Euler angles or a quaternion) and
are only converted when they have to be compared or composed.
"""

import math
from typing import Tuple, Union

import jax
import jax.numpy as jnp
from flax import struct

from workcell_format.transforms import se3, so3

Array = jax.Array

DEFAULT_TOLERANCE = 1e-6


@struct.dataclass
class Rad:
    """Angle in radians."""
    value: float

    @property
    def radians(self) -> float:
        return self.value


@struct.dataclass
class Deg:
    """Angle in degrees."""
    value: float

    @property
    def radians(self) -> float:
        return math.radians(self.value)


Angle = Union[Rad, Deg]


@struct.dataclass
class Yaw:
    """Rotation about the Z axis."""
    angle: Angle = struct.field(default_factory=lambda: Deg(0.0))

    def as_euler_extrinsic_xyz(self) -> Tuple[float, float, float]:
        return (0.0, 0.0, self.angle.radians)

    def to_matrix(self) -> Array:
        return so3.from_rpy(jnp.array(self.as_euler_extrinsic_xyz()))


@struct.dataclass
class EulerExtrinsicXYZ:
    """Extrinsic rotations about X, Y then Z (roll, pitch, yaw)."""
    angles: Tuple[Angle, Angle, Angle]

    def as_euler_extrinsic_xyz(self) -> Tuple[float, float, float]:
        roll, pitch, yaw = self.angles
        return (roll.radians, pitch.radians, yaw.radians)

    def to_matrix(self) -> Array:
        return so3.from_rpy(jnp.array(self.as_euler_extrinsic_xyz()))


@struct.dataclass
class Quat:
    """Unit quaternion in (w, x, y, z) order."""
    wxyz: Tuple[float, float, float, float]

    def as_euler_extrinsic_xyz(self) -> Tuple[float, float, float]:
        rpy = so3.to_rpy(self.to_matrix())
        return tuple(float(a) for a in rpy)

    def to_matrix(self) -> Array:
        return so3.from_quaternion(jnp.array(self.wxyz))


Rotation = Union[Yaw, EulerExtrinsicXYZ, Quat]


def _wrap_angle(angle: float) -> float:
    return math.atan2(math.sin(angle), math.cos(angle))


def canonical_euler(rot: Rotation) -> Tuple[float, float, float]:
    """Roll, pitch and yaw of any rotation through its rotation matrix."""
    rpy = so3.to_rpy(rot.to_matrix())
    return tuple(float(a) for a in rpy)


def rotations_close(r1: Rotation, r2: Rotation, tolerance: float = DEFAULT_TOLERANCE) -> bool:
    """Compare two rotations angle by angle in their canonical Euler form."""
    return all(
        abs(_wrap_angle(a1 - a2)) <= tolerance
        for a1, a2 in zip(canonical_euler(r1), canonical_euler(r2))
    )


@struct.dataclass
class Pose:
    """Translation and rotation of an entity relative to its parent.

    The default pose is the identity: no translation and a zero yaw.
    """
    trans: Tuple[float, float, float] = (0.0, 0.0, 0.0)
    rot: Rotation = struct.field(default_factory=Yaw)

    def is_close(self, other: "Pose", tolerance: float = DEFAULT_TOLERANCE) -> bool:
        """Whether both poses match within an absolute tolerance.

        Translations are compared component-wise, rotations through the
        extrinsic XYZ Euler decomposition of their rotation matrices.
        """
        if not all(abs(t1 - t2) <= tolerance for t1, t2 in zip(self.trans, other.trans)):
            return False
        return rotations_close(self.rot, other.rot, tolerance)

    def to_matrix(self) -> Array:
        """Homogeneous 4x4 transform of this pose."""
        return se3.from_position_and_rotation(jnp.array(self.trans), self.rot.to_matrix())


@struct.dataclass
class Pose3D:
    """Anchor holding a full 3D pose."""
    pose: Pose = struct.field(default_factory=Pose)

    def is_close(self, other, tolerance: float = DEFAULT_TOLERANCE) -> bool:
        return isinstance(other, Pose3D) and self.pose.is_close(other.pose, tolerance)


@struct.dataclass
class Translate3D:
    """Anchor holding only a 3D position."""
    xyz: Tuple[float, float, float]

    def is_close(self, other, tolerance: float = DEFAULT_TOLERANCE) -> bool:
        return isinstance(other, Translate3D) and all(
            abs(a - b) <= tolerance for a, b in zip(self.xyz, other.xyz)
        )


@struct.dataclass
class Translate2D:
    """Anchor holding a planar position."""
    xy: Tuple[float, float]

    def is_close(self, other, tolerance: float = DEFAULT_TOLERANCE) -> bool:
        return isinstance(other, Translate2D) and all(
            abs(a - b) <= tolerance for a, b in zip(self.xy, other.xy)
        )


Anchor = Union[Pose3D, Translate3D, Translate2D]
