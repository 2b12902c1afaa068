"""Tests for ids, parent-indexed entries and pose comparisons."""

import math

import numpy as np
import pytest

from workcell_format.core import (
    NO_PARENT,
    ROOT_ID,
    Deg,
    EulerExtrinsicXYZ,
    Frame,
    IdAllocator,
    Moment,
    Parented,
    Pose,
    Pose3D,
    Quat,
    Rad,
    Translate2D,
    Translate3D,
    Workcell,
    WorkcellModel,
    Yaw,
    children_index,
    group_by_parent,
)


def test_id_allocator_starts_after_root():
    """Ids are handed out consecutively after the root id."""
    ids = IdAllocator()
    assert [next(ids) for _ in range(3)] == [ROOT_ID + 1, ROOT_ID + 2, ROOT_ID + 3]


def test_id_allocator_rejects_root():
    """The root id itself is never handed out."""
    with pytest.raises(ValueError):
        IdAllocator(start=ROOT_ID)


def test_id_allocator_stops_before_no_parent():
    """The allocator is exhausted before reaching the no-parent marker."""
    ids = IdAllocator(start=NO_PARENT - 1)
    assert next(ids) == NO_PARENT - 1
    with pytest.raises(OverflowError):
        next(ids)


def test_id_allocator_for_workcell():
    """An allocator for a workcell continues after its largest id."""
    workcell = Workcell(
        frames={1: Parented(ROOT_ID, Frame(name="a"))},
        visuals={7: Parented(1, WorkcellModel())},
    )
    assert next(IdAllocator.for_workcell(workcell)) == 8
    assert next(IdAllocator.for_workcell(Workcell.blank())) == ROOT_ID + 1


def test_children_index():
    """Children are grouped by parent in ascending id order."""
    entries = {
        4: Parented(1, "d"),
        2: Parented(1, "b"),
        3: Parented(ROOT_ID, "c"),
        1: Parented(ROOT_ID, "a"),
    }
    assert children_index(entries) == {ROOT_ID: [1, 3], 1: [2, 4]}
    assert group_by_parent(entries) == {ROOT_ID: ["a", "c"], 1: ["b", "d"]}
    assert children_index({}) == {}


def test_pose_is_close_across_rotation_forms():
    """Equal rotations compare close whatever form they are written in."""
    yaw = Pose(trans=(1.0, 2.0, 3.0), rot=Yaw(Deg(90.0)))
    euler = Pose(trans=(1.0, 2.0, 3.0), rot=EulerExtrinsicXYZ((Rad(0.0), Rad(0.0), Rad(math.pi / 2))))
    quat = Pose(trans=(1.0, 2.0, 3.0), rot=Quat((math.cos(math.pi / 4), 0.0, 0.0, math.sin(math.pi / 4))))

    assert yaw.is_close(euler)
    assert euler.is_close(quat)
    assert not yaw.is_close(Pose(trans=(1.0, 2.0, 3.0 + 1e-3), rot=Yaw(Deg(90.0))))
    assert not yaw.is_close(Pose(trans=(1.0, 2.0, 3.0)))


def test_pose_is_close_wraps_angles():
    """Angles a full turn apart compare close."""
    assert Pose(rot=Yaw(Rad(math.pi))).is_close(Pose(rot=Yaw(Rad(-math.pi))))
    assert Pose(rot=Yaw(Deg(360.0))).is_close(Pose())


def test_pose_tolerance():
    """The comparison tolerance can be widened."""
    pose = Pose(trans=(0.0, 0.0, 1.0))
    nearby = Pose(trans=(0.0, 0.0, 1.0 + 1e-4))
    assert not pose.is_close(nearby)
    assert pose.is_close(nearby, tolerance=1e-3)


def test_anchor_is_close():
    """Anchors compare close only against anchors of the same kind."""
    assert Pose3D().is_close(Pose3D(Pose(rot=EulerExtrinsicXYZ((Rad(0.0), Rad(0.0), Rad(0.0))))))
    assert Translate3D((1.0, 2.0, 3.0)).is_close(Translate3D((1.0, 2.0, 3.0 + 1e-9)))
    assert Translate2D((1.0, 2.0)).is_close(Translate2D((1.0, 2.0)))
    # Different anchor kinds never match
    assert not Translate2D((0.0, 0.0)).is_close(Translate3D((0.0, 0.0, 0.0)))
    assert not Pose3D().is_close(Translate3D((0.0, 0.0, 0.0)))


def test_pose_to_matrix():
    """A pose converts to the matching homogeneous transform."""
    T = Pose(trans=(1.0, 0.0, 0.0), rot=Yaw(Deg(90.0))).to_matrix()
    np.testing.assert_allclose(T[:3, 3], (1.0, 0.0, 0.0))
    np.testing.assert_allclose(T[:3, :3] @ np.array([1.0, 0.0, 0.0]), (0.0, 1.0, 0.0), atol=1e-12)


def test_moment_matrix_is_symmetric():
    """The inertia tensor mirrors products of inertia across the diagonal."""
    moment = Moment(ixx=1.0, ixy=0.1, ixz=0.2, iyy=2.0, iyz=0.3, izz=3.0)
    matrix = np.array(moment.as_matrix())
    np.testing.assert_array_equal(matrix, matrix.T)
    np.testing.assert_array_equal(np.diag(matrix), (1.0, 2.0, 3.0))
