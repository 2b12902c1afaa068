"""The workcell document.

A workcell is a flat tree of frames, geometry, inertias and joints. Each kind
of entity lives in its own dict keyed by id, and every entry records the id
of its parent:

* frames are children of the workcell root or of a joint,
* joints are children of the frame of their parent link,
* visuals, collisions and inertias are children of a frame.

The document itself performs no validation; the URDF conversions are the
only writers that rely on these rules.
"""

from typing import Dict, Tuple, Union

from flax import struct

from .geometry import WorkcellModel
from .inertial import Inertia
from .joint import Joint
from .pose import Anchor, Pose3D
from .tree import ROOT_ID, Parented

CURRENT_MAJOR_VERSION = 0
CURRENT_MINOR_VERSION = 1


@struct.dataclass
class Frame:
    """A named coordinate frame anchored relative to its parent."""
    name: str = struct.field(pytree_node=False, default="")
    anchor: Anchor = struct.field(default_factory=Pose3D)


@struct.dataclass
class Workcell:
    """Container of all the entities of a workcell, keyed by id.

    Attributes:
        name: Name of the workcell.
        id: Id of the workcell root, parent of the base frame(s).
        frames: Frames, key is their id.
        visuals: Visual models, children of frames.
        collisions: Collision models, children of frames.
        inertias: Inertial properties, children of frames.
        joints: Joints, children of their parent frame. Their child frame has
                the joint id as parent.
    """
    name: str = struct.field(pytree_node=False, default="")
    id: int = struct.field(pytree_node=False, default=ROOT_ID)
    frames: Dict[int, Parented[Frame]] = struct.field(default_factory=dict)
    visuals: Dict[int, Parented[WorkcellModel]] = struct.field(default_factory=dict)
    collisions: Dict[int, Parented[WorkcellModel]] = struct.field(default_factory=dict)
    inertias: Dict[int, Parented[Inertia]] = struct.field(default_factory=dict)
    joints: Dict[int, Parented[Joint]] = struct.field(default_factory=dict)

    @classmethod
    def blank(cls, name: str = "") -> "Workcell":
        """A workcell with only its root."""
        return cls(name=name)

    def entity_maps(self) -> Tuple[Dict[int, Parented], ...]:
        return (self.frames, self.visuals, self.collisions, self.inertias, self.joints)

    # URDF conversion

    @classmethod
    def from_urdf(cls, robot) -> "Workcell":
        from workcell_format.conversion.importer import from_urdf
        return from_urdf(robot)

    def to_urdf(self):
        from workcell_format.conversion.exporter import to_urdf
        return to_urdf(self)

    def to_urdf_string(self) -> str:
        from workcell_format.conversion.exporter import to_urdf_string
        return to_urdf_string(self)

    def to_urdf_writer(self, writer) -> None:
        from workcell_format.conversion.exporter import to_urdf_writer
        to_urdf_writer(self, writer)

    # Document persistence

    def to_string(self) -> str:
        from workcell_format.io.serialization import to_string
        return to_string(self)

    def to_writer(self, writer) -> None:
        from workcell_format.io.serialization import to_writer
        to_writer(self, writer)

    @classmethod
    def from_str(cls, text: str) -> "Workcell":
        from workcell_format.io.serialization import from_str
        return from_str(text)

    @classmethod
    def from_reader(cls, reader) -> "Workcell":
        from workcell_format.io.serialization import from_reader
        return from_reader(reader)

    @classmethod
    def from_bytes(cls, data: Union[bytes, bytearray]) -> "Workcell":
        from workcell_format.io.serialization import from_bytes
        return from_bytes(data)
