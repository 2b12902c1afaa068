"""Export of workcell documents to URDF robot descriptions.

Each frame becomes a link and each joint a URDF joint between the frame it
is parented to and the frame parented to it. When the workcell root has a
single child frame that frame is the base link. Otherwise a base link named
``<workcell>_workcell_link`` is added in place of the root.

Frames parented directly to other frames are not merged into one link, so a
chain of frames without joints in between exports as disconnected links.
"""

import logging
from typing import BinaryIO, Dict, List

from lxml import etree

from workcell_format.core.errors import BrokenReference, InvalidAnchorType, WriteToStringError
from workcell_format.core.pose import Pose, Pose3D
from workcell_format.core.tree import NO_PARENT, Parented, children_index, group_by_parent
from workcell_format.core.workcell import Frame, Workcell
from workcell_format.io import urdf_model as urdf
from workcell_format.io.urdf_writer import write_urdf_bytes

from .geometry import model_to_collision, model_to_visual
from .inertial import inertia_to_urdf
from .joint import properties_to_urdf
from .pose import pose_to_urdf

logger = logging.getLogger(__name__)

WORKCELL_LINK_SUFFIX = "_workcell_link"


def _base_frames(workcell: Workcell) -> Dict[int, Parented[Frame]]:
    """Frames to export, with a synthetic base frame when needed."""
    root_children = [
        frame_id for frame_id, frame in workcell.frames.items() if frame.parent == workcell.id
    ]
    if len(root_children) == 1:
        return dict(workcell.frames)

    # Industrial workcell convention: the datum link is "<workcell_name>_workcell_link"
    frames = dict(workcell.frames)
    frames[workcell.id] = Parented(
        parent=NO_PARENT,
        bundle=Frame(name=workcell.name + WORKCELL_LINK_SUFFIX, anchor=Pose3D(Pose())),
    )
    logger.info(
        "Workcell %s has %d root frames, adding base link %s",
        workcell.name, len(root_children), workcell.name + WORKCELL_LINK_SUFFIX,
    )
    return frames


def _warn_about_frame_chains(workcell: Workcell) -> None:
    for frame_id, frame in sorted(workcell.frames.items()):
        if frame.parent in workcell.frames:
            logger.warning(
                "Frame %s is parented to frame %s without a joint, "
                "it will be exported as a disconnected link",
                frame_id, frame.parent,
            )


def _inertials_by_frame(workcell: Workcell) -> Dict[int, urdf.Inertial]:
    inertials = {}
    for frame_id, inertias in group_by_parent(workcell.inertias).items():
        if len(inertias) > 1:
            logger.warning(
                "Frame %s has %d inertias, only the last one is exported", frame_id, len(inertias)
            )
        inertials[frame_id] = inertia_to_urdf(inertias[-1])
    return inertials


def _links(workcell: Workcell, frames: Dict[int, Parented[Frame]]) -> List[urdf.Link]:
    visuals = group_by_parent(workcell.visuals)
    collisions = group_by_parent(workcell.collisions)
    inertials = _inertials_by_frame(workcell)

    links = []
    for frame_id in sorted(frames):
        links.append(urdf.Link(
            name=frames[frame_id].bundle.name,
            inertial=inertials.get(frame_id, urdf.Inertial()),
            visual=tuple(model_to_visual(v) for v in visuals.get(frame_id, ())),
            collision=tuple(model_to_collision(c) for c in collisions.get(frame_id, ())),
        ))
    return links


def _joints(workcell: Workcell) -> List[urdf.Joint]:
    frame_children = children_index(workcell.frames)

    joints = []
    for joint_id in sorted(workcell.joints):
        parented_joint = workcell.joints[joint_id]
        joint = parented_joint.bundle

        parent_frame = workcell.frames.get(parented_joint.parent)
        if parent_frame is None:
            raise BrokenReference(parented_joint.parent)

        children = frame_children.get(joint_id)
        if not children:
            raise BrokenReference(joint_id)
        if len(children) > 1:
            logger.warning(
                "Joint %s has %d child frames, exporting frame %s as its child",
                joint.name, len(children), children[0],
            )
        child_frame = workcell.frames[children[0]]

        # The pose of the joint is the pose of the frame that has it as its parent
        anchor = child_frame.bundle.anchor
        if not isinstance(anchor, Pose3D):
            raise InvalidAnchorType(anchor)

        joint_type, axis, limit = properties_to_urdf(joint.properties)
        joints.append(urdf.Joint(
            name=joint.name,
            joint_type=joint_type,
            origin=pose_to_urdf(anchor.pose),
            parent=parent_frame.bundle.name,
            child=child_frame.bundle.name,
            axis=axis,
            limit=limit,
        ))
    return joints


def to_urdf(workcell: Workcell) -> urdf.Robot:
    """Build a URDF robot description from a workcell.

    Raises:
        BrokenReference: A joint's parent frame is missing or no frame has the
                         joint as parent.
        InvalidAnchorType: A joint's child frame is not anchored by a 3D pose.
    """
    _warn_about_frame_chains(workcell)
    frames = _base_frames(workcell)
    return urdf.Robot(
        name=workcell.name,
        links=tuple(_links(workcell, frames)),
        joints=tuple(_joints(workcell)),
    )


def to_urdf_string(workcell: Workcell) -> str:
    """Export a workcell to URDF XML text."""
    return _to_urdf_bytes(workcell).decode("utf-8")


def to_urdf_writer(workcell: Workcell, writer: BinaryIO) -> None:
    """Export a workcell to URDF XML, written to a binary sink."""
    writer.write(_to_urdf_bytes(workcell))


def _to_urdf_bytes(workcell: Workcell) -> bytes:
    robot = to_urdf(workcell)
    try:
        return write_urdf_bytes(robot)
    except (ValueError, etree.LxmlError) as e:
        raise WriteToStringError(e) from e
