"""Tests for the JSON form of workcell documents."""

import io
import json
from pathlib import Path

import pytest

from workcell_format.conversion import from_urdf
from workcell_format.core import (
    ROOT_ID,
    AsymmetricLimit,
    Box,
    Continuous,
    Cylinder,
    Deg,
    EulerExtrinsicXYZ,
    Fixed,
    Frame,
    Inertia,
    Joint,
    JointAxis,
    JointLimits,
    Local,
    Mesh,
    Moment,
    Package,
    Parented,
    Pose,
    Pose3D,
    Prismatic,
    Quat,
    Rad,
    Sphere,
    SymmetricLimit,
    Translate2D,
    Translate3D,
    Workcell,
    WorkcellModel,
    Yaw,
)
from workcell_format.io import load_urdf
from workcell_format.io.serialization import workcell_from_json, workcell_to_json

PHYSICS_URDF = Path(__file__).parent / "fixtures" / "07-physics.urdf"


@pytest.fixture
def detailed():
    """A workcell using every kind of rotation, anchor, geometry and limit."""
    return Workcell(
        name="cell",
        id=ROOT_ID,
        frames={
            1: Parented(ROOT_ID, Frame(name="base")),
            2: Parented(ROOT_ID, Frame(name="marker", anchor=Translate2D((1.5, -2.0)))),
            3: Parented(ROOT_ID, Frame(name="camera", anchor=Translate3D((0.0, 1.0, 2.0)))),
            5: Parented(4, Frame(name="slider", anchor=Pose3D(Pose(
                trans=(0.25, 0.0, 0.0),
                rot=Quat((0.0, 0.0, 0.0, 1.0)),
            )))),
            7: Parented(6, Frame(name="wheel", anchor=Pose3D(Pose(
                rot=EulerExtrinsicXYZ((Rad(0.5), Deg(45.0), Rad(-1.0))),
            )))),
        },
        visuals={
            8: Parented(1, WorkcellModel(
                name="shell",
                geometry=Mesh(source=Package("cell/meshes/shell.dae"), scale=(0.5, 0.5, 0.5)),
                pose=Pose(rot=Yaw(Rad(1.0))),
            )),
            9: Parented(5, WorkcellModel(geometry=Mesh(source=Local("/tmp/slider.stl")))),
        },
        collisions={
            10: Parented(1, WorkcellModel(geometry=Cylinder(radius=0.25, length=1.0))),
            11: Parented(7, WorkcellModel(geometry=Sphere(radius=0.1))),
        },
        inertias={
            12: Parented(1, Inertia(
                center=Pose(trans=(0.0, 0.0, 0.1)),
                mass=12.5,
                moment=Moment(ixx=1.0, iyy=2.0, izz=3.0, ixy=0.5),
            )),
        },
        joints={
            4: Parented(1, Joint(name="rail", properties=Prismatic(
                axis=JointAxis((0.0, 1.0, 0.0)),
                limits=JointLimits(
                    position=AsymmetricLimit(lower=None, upper=0.75),
                    effort=SymmetricLimit(100.0),
                ),
            ))),
            6: Parented(1, Joint(name="axle", properties=Continuous())),
            13: Parented(1, Joint(name="weld", properties=Fixed())),
        },
    )


def test_blank_workcell():
    """A blank workcell serializes to an empty object."""
    blank = Workcell.blank()
    assert blank.to_string() == "{}"
    assert Workcell.from_str("{}") == blank


def test_default_fields_are_omitted(detailed):
    """Fields left at their default are not written."""
    data = workcell_to_json(detailed)

    assert "id" not in data
    assert data["name"] == "cell"
    # Entity maps are keyed by string ids and carry the parent id
    assert data["frames"]["1"] == {"parent": 0, "name": "base"}
    assert data["frames"]["2"] == {"parent": 0, "name": "marker", "anchor": {"translate2d": [1.5, -2.0]}}
    assert data["visuals"]["9"] == {
        "parent": 5,
        "geometry": {"mesh": {"source": {"local": "/tmp/slider.stl"}}},
    }
    assert data["collisions"]["11"]["geometry"] == {"primitive": {"sphere": {"radius": 0.1}}}
    assert data["joints"]["6"] == {"parent": 1, "name": "axle", "properties": {"continuous": {}}}
    assert data["joints"]["13"] == {"parent": 1, "name": "weld"}
    assert data["joints"]["4"]["properties"] == {"prismatic": {
        "axis": [0.0, 1.0, 0.0],
        "limits": {"position": {"asymmetric": {"upper": 0.75}}, "effort": {"symmetric": 100.0}},
    }}


def test_rotation_tags(detailed):
    """Each rotation form is written under its own tag."""
    frames = workcell_to_json(detailed)["frames"]
    assert frames["5"]["anchor"]["pose3d"]["rot"] == {"quat": [0.0, 0.0, 0.0, 1.0]}
    assert frames["7"]["anchor"]["pose3d"]["rot"] == {
        "euler_xyz": [{"rad": 0.5}, {"deg": 45.0}, {"rad": -1.0}]
    }
    assert "trans" not in frames["7"]["anchor"]["pose3d"]


def test_detailed_roundtrip(detailed):
    """A workcell using every variant survives a JSON round trip."""
    assert Workcell.from_str(detailed.to_string()) == detailed


def test_physics_roundtrip():
    """The imported physics fixture survives a JSON round trip."""
    physics = from_urdf(load_urdf(PHYSICS_URDF))
    assert Workcell.from_str(physics.to_string()) == physics


def test_readers_and_writers(detailed):
    """Writers, readers and bytes produce the same document as strings."""
    buffer = io.StringIO()
    detailed.to_writer(buffer)
    text = buffer.getvalue()
    assert text == detailed.to_string()

    assert Workcell.from_reader(io.StringIO(text)) == detailed
    assert Workcell.from_bytes(text.encode("utf-8")) == detailed


def test_missing_fields_take_defaults():
    """Absent fields read back as their defaults."""
    workcell = Workcell.from_str(json.dumps({
        "frames": {"3": {"parent": 0}},
        "visuals": {"4": {"parent": 3}},
    }))
    assert workcell.name == ""
    assert workcell.frames == {3: Parented(ROOT_ID, Frame())}
    assert workcell.visuals[4].bundle == WorkcellModel()
    assert workcell.visuals[4].bundle.geometry == Box()


def test_malformed_json():
    """Invalid JSON text is reported by the decoder."""
    with pytest.raises(json.JSONDecodeError):
        Workcell.from_str("{not json")


@pytest.mark.parametrize("document", [
    [],
    {"frames": {"1": {"parent": 0, "anchor": {"polar": [1.0, 2.0]}}}},
    {"joints": {"1": {"parent": 0, "properties": "floating"}}},
    {"joints": {"1": {"parent": 0, "properties": {"revolute": {}, "prismatic": {}}}}},
    {"collisions": {"1": {"parent": 0, "geometry": {"primitive": {"cone": {}}}}}},
])
def test_unknown_tags(document):
    """Unknown or ambiguous variant tags raise ValueError."""
    with pytest.raises(ValueError):
        workcell_from_json(document)
