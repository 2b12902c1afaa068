"""Core data structures of workcell documents.

This module provides the frames, geometry, inertias and joints of a
workcell, the parent-indexed entries that hold them and the exceptions raised
by the URDF conversions.
"""

from .errors import (
    BrokenJointReference,
    BrokenReference,
    InvalidAnchorType,
    UnsupportedJointType,
    UrdfImportError,
    WorkcellError,
    WorkcellToUrdfError,
    WriteToStringError,
)
from .geometry import (
    AssetSource,
    Box,
    Capsule,
    Cylinder,
    Geometry,
    Local,
    Mesh,
    Package,
    PrimitiveShape,
    Sphere,
    WorkcellModel,
)
from .inertial import Inertia, Moment
from .joint import (
    AsymmetricLimit,
    Continuous,
    Fixed,
    Joint,
    JointAxis,
    JointLimits,
    JointProperties,
    NoLimit,
    Prismatic,
    RangeLimits,
    Revolute,
    SymmetricLimit,
)
from .pose import (
    DEFAULT_TOLERANCE,
    Anchor,
    Deg,
    EulerExtrinsicXYZ,
    Pose,
    Pose3D,
    Quat,
    Rad,
    Rotation,
    Translate2D,
    Translate3D,
    Yaw,
)
from .tree import NO_PARENT, ROOT_ID, IdAllocator, Parented, children_index, group_by_parent
from .workcell import CURRENT_MAJOR_VERSION, CURRENT_MINOR_VERSION, Frame, Workcell

__all__ = [
    "Anchor",
    "AssetSource",
    "AsymmetricLimit",
    "Box",
    "BrokenJointReference",
    "BrokenReference",
    "CURRENT_MAJOR_VERSION",
    "CURRENT_MINOR_VERSION",
    "Capsule",
    "Continuous",
    "Cylinder",
    "DEFAULT_TOLERANCE",
    "Deg",
    "EulerExtrinsicXYZ",
    "Fixed",
    "Frame",
    "Geometry",
    "IdAllocator",
    "Inertia",
    "InvalidAnchorType",
    "Joint",
    "JointAxis",
    "JointLimits",
    "JointProperties",
    "Local",
    "Mesh",
    "Moment",
    "NO_PARENT",
    "NoLimit",
    "Package",
    "Parented",
    "Pose",
    "Pose3D",
    "PrimitiveShape",
    "Prismatic",
    "Quat",
    "ROOT_ID",
    "Rad",
    "RangeLimits",
    "Revolute",
    "Rotation",
    "Sphere",
    "SymmetricLimit",
    "Translate2D",
    "Translate3D",
    "UnsupportedJointType",
    "UrdfImportError",
    "Workcell",
    "WorkcellError",
    "WorkcellModel",
    "WorkcellToUrdfError",
    "WriteToStringError",
    "Yaw",
    "children_index",
    "group_by_parent",
]
