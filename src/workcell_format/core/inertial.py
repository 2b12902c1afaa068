"""Inertial properties of a frame."""

from flax import struct

from .pose import Pose


@struct.dataclass
class Moment:
    """Independent components of a symmetric 3x3 inertia tensor."""
    ixx: float = 0.0
    ixy: float = 0.0
    ixz: float = 0.0
    iyy: float = 0.0
    iyz: float = 0.0
    izz: float = 0.0

    def as_matrix(self):
        """The symmetric 3x3 inertia tensor as nested row tuples."""
        return (
            (self.ixx, self.ixy, self.ixz),
            (self.ixy, self.iyy, self.iyz),
            (self.ixz, self.iyz, self.izz),
        )


@struct.dataclass
class Inertia:
    center: Pose = struct.field(default_factory=Pose)
    mass: float = 0.0
    moment: Moment = struct.field(default_factory=Moment)
