"""In-memory URDF robot description.

These records mirror the elements of a URDF file one to one, with all values
kept at double precision. They are produced by the URDF parser, consumed and
produced by the workcell conversions, and written back out by the URDF
writer.
"""

import enum
from typing import Optional, Tuple, Union

from flax import struct

Vec3 = Tuple[float, float, float]


class JointType(enum.Enum):
    REVOLUTE = "revolute"
    CONTINUOUS = "continuous"
    PRISMATIC = "prismatic"
    FIXED = "fixed"
    FLOATING = "floating"
    PLANAR = "planar"
    SPHERICAL = "spherical"


@struct.dataclass
class Pose:
    """An <origin> element: translation and roll-pitch-yaw in radians."""
    xyz: Vec3 = (0.0, 0.0, 0.0)
    rpy: Vec3 = (0.0, 0.0, 0.0)


@struct.dataclass
class Box:
    size: Vec3


@struct.dataclass
class Cylinder:
    radius: float
    length: float


@struct.dataclass
class Capsule:
    radius: float
    length: float


@struct.dataclass
class Sphere:
    radius: float


@struct.dataclass
class Mesh:
    filename: str = struct.field(pytree_node=False)
    scale: Optional[Vec3] = None


Geometry = Union[Box, Cylinder, Capsule, Sphere, Mesh]


@struct.dataclass
class Visual:
    geometry: Geometry
    name: Optional[str] = struct.field(pytree_node=False, default=None)
    origin: Pose = struct.field(default_factory=Pose)


@struct.dataclass
class Collision:
    geometry: Geometry
    name: Optional[str] = struct.field(pytree_node=False, default=None)
    origin: Pose = struct.field(default_factory=Pose)


@struct.dataclass
class Inertia:
    ixx: float = 0.0
    ixy: float = 0.0
    ixz: float = 0.0
    iyy: float = 0.0
    iyz: float = 0.0
    izz: float = 0.0


@struct.dataclass
class Inertial:
    origin: Pose = struct.field(default_factory=Pose)
    mass: float = 0.0
    inertia: Inertia = struct.field(default_factory=Inertia)


@struct.dataclass
class Link:
    name: str = struct.field(pytree_node=False)
    inertial: Inertial = struct.field(default_factory=Inertial)
    visual: Tuple[Visual, ...] = ()
    collision: Tuple[Collision, ...] = ()


@struct.dataclass
class Axis:
    xyz: Vec3 = (1.0, 0.0, 0.0)


@struct.dataclass
class JointLimit:
    lower: float = 0.0
    upper: float = 0.0
    effort: float = 0.0
    velocity: float = 0.0


@struct.dataclass
class Joint:
    name: str = struct.field(pytree_node=False)
    joint_type: JointType = struct.field(pytree_node=False)
    parent: str = struct.field(pytree_node=False)
    child: str = struct.field(pytree_node=False)
    origin: Pose = struct.field(default_factory=Pose)
    axis: Axis = struct.field(default_factory=Axis)
    limit: JointLimit = struct.field(default_factory=JointLimit)


@struct.dataclass
class Robot:
    name: str = struct.field(pytree_node=False)
    links: Tuple[Link, ...] = ()
    joints: Tuple[Joint, ...] = ()
