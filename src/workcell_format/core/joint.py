"""Joints connecting a parent frame to a child frame."""

from typing import Optional, Tuple, Union

from flax import struct


@struct.dataclass
class JointAxis:
    xyz: Tuple[float, float, float] = (1.0, 0.0, 0.0)


@struct.dataclass
class NoLimit:
    """No range limit recorded."""


@struct.dataclass
class SymmetricLimit:
    """Range of [-limit, limit]."""
    limit: float


@struct.dataclass
class AsymmetricLimit:
    """Independent, optional lower and upper bounds."""
    lower: Optional[float] = None
    upper: Optional[float] = None


RangeLimits = Union[NoLimit, SymmetricLimit, AsymmetricLimit]


@struct.dataclass
class JointLimits:
    position: RangeLimits = struct.field(default_factory=NoLimit)
    effort: RangeLimits = struct.field(default_factory=NoLimit)
    velocity: RangeLimits = struct.field(default_factory=NoLimit)


@struct.dataclass
class Fixed:
    label = "Fixed"


@struct.dataclass
class Prismatic:
    label = "Prismatic"
    axis: JointAxis = struct.field(default_factory=JointAxis)
    limits: JointLimits = struct.field(default_factory=JointLimits)


@struct.dataclass
class Revolute:
    label = "Revolute"
    axis: JointAxis = struct.field(default_factory=JointAxis)
    limits: JointLimits = struct.field(default_factory=JointLimits)


@struct.dataclass
class Continuous:
    label = "Continuous"
    axis: JointAxis = struct.field(default_factory=JointAxis)
    limits: JointLimits = struct.field(default_factory=JointLimits)


SingleDofJoint = Union[Prismatic, Revolute, Continuous]
JointProperties = Union[Fixed, Prismatic, Revolute, Continuous]


@struct.dataclass
class Joint:
    name: str = struct.field(pytree_node=False, default="")
    properties: JointProperties = struct.field(default_factory=Fixed)
