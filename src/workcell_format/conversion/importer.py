"""Import of URDF robot descriptions into workcell documents.

Every link becomes a frame holding the link's inertia, visuals and
collisions. Every joint becomes a child of its parent link's frame, and the
child link's frame is moved under the joint, anchored at the joint origin.
In URDF the origin of a joint is its pose in the parent link and the child
link sits at the joint with no further offset, so this keeps the whole pose
chain without a separate joint pose.
"""

from typing import Dict

from workcell_format.core.errors import BrokenJointReference
from workcell_format.core.pose import Pose3D
from workcell_format.core.tree import ROOT_ID, IdAllocator, Parented
from workcell_format.core.workcell import Frame, Workcell
from workcell_format.core.joint import Joint
from workcell_format.io import urdf_model as urdf

from .geometry import model_from_urdf
from .inertial import inertia_from_urdf
from .joint import properties_from_urdf
from .pose import pose_from_urdf


def from_urdf(robot: urdf.Robot) -> Workcell:
    """Build a workcell from a URDF robot description.

    Args:
        robot: The parsed URDF robot.

    Returns:
        Workcell: A new document, with one frame per link and one joint per
                  URDF joint.

    Raises:
        BrokenJointReference: A joint names a link that does not exist.
        UnsupportedJointType: A joint is floating, planar or spherical.
    """
    ids = IdAllocator()
    frame_ids: Dict[str, int] = {}
    frames = {}
    visuals = {}
    collisions = {}
    inertias = {}
    joints = {}

    for link in robot.links:
        frame_id = next(ids)
        inertia_id = next(ids)
        frame_ids[link.name] = frame_id
        # Parent and pose are overwritten below if a joint targets this link
        frames[frame_id] = Parented(parent=ROOT_ID, bundle=Frame(name=link.name))
        inertias[inertia_id] = Parented(parent=frame_id, bundle=inertia_from_urdf(link.inertial))
        for visual in link.visual:
            visuals[next(ids)] = Parented(parent=frame_id, bundle=model_from_urdf(visual))
        for collision in link.collision:
            collisions[next(ids)] = Parented(parent=frame_id, bundle=model_from_urdf(collision))

    for joint in robot.joints:
        parent_id = frame_ids.get(joint.parent)
        if parent_id is None:
            raise BrokenJointReference(joint.parent)
        child_id = frame_ids.get(joint.child)
        if child_id is None:
            raise BrokenJointReference(joint.child)
        properties = properties_from_urdf(joint)
        joint_id = next(ids)

        child = frames[child_id]
        frames[child_id] = Parented(
            parent=joint_id,
            bundle=child.bundle.replace(anchor=Pose3D(pose_from_urdf(joint.origin))),
        )
        joints[joint_id] = Parented(
            parent=parent_id,
            bundle=Joint(name=joint.name, properties=properties),
        )

    return Workcell(
        name=robot.name,
        id=ROOT_ID,
        frames=frames,
        visuals=visuals,
        collisions=collisions,
        inertias=inertias,
        joints=joints,
    )
