"""Geometry of visual and collision models."""

from typing import Optional, Tuple, Union

from flax import struct

from .pose import Pose

PACKAGE_PREFIX = "package://"


@struct.dataclass
class Box:
    size: Tuple[float, float, float] = (0.0, 0.0, 0.0)


@struct.dataclass
class Cylinder:
    radius: float = 0.0
    length: float = 0.0


@struct.dataclass
class Capsule:
    radius: float = 0.0
    length: float = 0.0


@struct.dataclass
class Sphere:
    radius: float = 0.0


PrimitiveShape = Union[Box, Cylinder, Capsule, Sphere]


@struct.dataclass
class Local:
    """Asset found at a path on the local filesystem."""
    path: str = struct.field(pytree_node=False)

    def as_unvalidated_asset_path(self) -> str:
        return self.path


@struct.dataclass
class Package:
    """Asset found relative to a ROS style package."""
    path: str = struct.field(pytree_node=False)

    def as_unvalidated_asset_path(self) -> str:
        # The path syntax is only checked by whatever loads the asset.
        return PACKAGE_PREFIX + self.path


AssetSource = Union[Local, Package]


def asset_source_from_path(filename: str) -> AssetSource:
    """Package references are the norm in URDF, anything else is local."""
    if filename.startswith(PACKAGE_PREFIX):
        return Package(filename[len(PACKAGE_PREFIX):])
    return Local(filename)


@struct.dataclass
class Mesh:
    source: AssetSource
    scale: Optional[Tuple[float, float, float]] = None


Geometry = Union[Box, Cylinder, Capsule, Sphere, Mesh]


@struct.dataclass
class WorkcellModel:
    """A named, posed piece of geometry attached to a frame."""
    name: str = struct.field(pytree_node=False, default="")
    geometry: Geometry = struct.field(default_factory=Box)
    pose: Pose = struct.field(default_factory=Pose)
