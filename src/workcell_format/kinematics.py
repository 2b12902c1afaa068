"""World transforms of workcell frames.

Frames are anchored relative to their parent, which is either the workcell
root or a joint. A joint sits at the origin of its parent frame, so at the
zero joint position the world transform of a frame is the product of the
anchors found walking up to the root.
"""

from typing import Dict

import jax
import jax.numpy as jnp

from .core.errors import BrokenReference
from .core.pose import Anchor, Pose3D, Translate2D, Translate3D
from .core.workcell import Workcell
from .transforms import se3

Array = jax.Array


def anchor_transform(anchor: Anchor) -> Array:
    """Homogeneous 4x4 transform of a frame anchor relative to its parent."""
    if isinstance(anchor, Pose3D):
        return anchor.pose.to_matrix()
    if isinstance(anchor, Translate3D):
        return se3.from_position_and_rotation(jnp.array(anchor.xyz), jnp.eye(3))
    if isinstance(anchor, Translate2D):
        x, y = anchor.xy
        return se3.from_position_and_rotation(jnp.array([x, y, 0.0]), jnp.eye(3))
    raise TypeError(f"Unknown anchor {anchor!r}")


def frame_world_transforms(workcell: Workcell) -> Dict[int, Array]:
    """Compute the world transform of every frame of a workcell.

    Args:
        workcell: The workcell document.

    Returns:
        Dictionary mapping frame ids to their 4x4 SE(3) world transforms.

    Raises:
        BrokenReference: A frame or joint has a parent that does not exist.
        ValueError: The parent links of frames and joints form a cycle.
    """
    world: Dict[int, Array] = {}

    def parent_frame_of(entity_parent: int):
        """Frame a frame's anchor is expressed in, None for the root."""
        if entity_parent == workcell.id:
            return None
        if entity_parent in workcell.joints:
            joint_parent = workcell.joints[entity_parent].parent
            if joint_parent not in workcell.frames:
                raise BrokenReference(joint_parent)
            return joint_parent
        if entity_parent in workcell.frames:
            return entity_parent
        raise BrokenReference(entity_parent)

    for frame_id in sorted(workcell.frames):
        # Walk up until a frame with a known transform or the root is reached
        chain = []
        current = frame_id
        while current is not None and current not in world:
            if current in chain:
                raise ValueError(f"Frame {current} is its own ancestor")
            chain.append(current)
            current = parent_frame_of(workcell.frames[current].parent)

        T_world_to_parent = se3.identity() if current is None else world[current]
        for chained_id in reversed(chain):
            anchor = workcell.frames[chained_id].bundle.anchor
            T_world_to_parent = se3.multiply(T_world_to_parent, anchor_transform(anchor))
            world[chained_id] = T_world_to_parent

    return world
