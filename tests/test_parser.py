"""Tests for URDF parser and writer functionality."""

from pathlib import Path

import pytest

from workcell_format.io import load_urdf, parse_urdf_string, write_urdf_string
from workcell_format.io import urdf_model as urdf

PHYSICS_URDF = Path(__file__).parent / "fixtures" / "07-physics.urdf"


def test_load_physics_urdf():
    """Test loading the physics URDF and verify its structure."""
    robot = load_urdf(PHYSICS_URDF)

    assert isinstance(robot, urdf.Robot)
    assert robot.name == "physics"
    assert len(robot.links) == 16
    assert len(robot.joints) == 15
    assert sum(len(link.visual) for link in robot.links) == 16
    assert sum(len(link.collision) for link in robot.links) == 16

    # Links and joints keep their document order
    assert robot.links[0].name == "base_link"
    assert robot.joints[0].name == "base_to_right_leg"


def test_physics_link_details():
    """Link inertials, visuals and collisions of the physics fixture."""
    robot = load_urdf(PHYSICS_URDF)
    links = {link.name: link for link in robot.links}

    right_leg = links["right_leg"]
    assert right_leg.inertial.mass == 10.0
    assert right_leg.inertial.inertia == urdf.Inertia(ixx=1.0, iyy=1.0, izz=1.0)
    assert right_leg.visual[0].geometry == urdf.Box(size=(0.6, 0.1, 0.2))
    assert right_leg.visual[0].origin == urdf.Pose(xyz=(0.0, 0.0, -0.3), rpy=(0.0, 1.57075, 0.0))
    assert right_leg.visual[0].name is None

    base = links["base_link"]
    assert base.collision[0].geometry == urdf.Cylinder(radius=0.2, length=0.6)
    # Missing <origin> is the identity
    assert base.collision[0].origin == urdf.Pose()

    assert links["head"].visual[0].geometry == urdf.Sphere(radius=0.2)
    assert links["left_gripper"].visual[0].geometry == urdf.Mesh(
        filename="package://urdf_tutorial/meshes/l_finger.dae"
    )


def test_physics_joint_details():
    """Joint types, links, origins and defaults of the physics fixture."""
    robot = load_urdf(PHYSICS_URDF)
    joints = {joint.name: joint for joint in robot.joints}

    leg = joints["base_to_right_leg"]
    assert leg.joint_type is urdf.JointType.FIXED
    assert leg.parent == "base_link"
    assert leg.child == "right_leg"
    assert leg.origin == urdf.Pose(xyz=(0.0, -0.22, 0.25))
    # URDF defaults for axis and limit
    assert leg.axis == urdf.Axis(xyz=(1.0, 0.0, 0.0))
    assert leg.limit == urdf.JointLimit()

    gripper = joints["gripper_extension"]
    assert gripper.joint_type is urdf.JointType.PRISMATIC
    assert gripper.limit == urdf.JointLimit(lower=-0.38, upper=0.0, effort=1000.0, velocity=0.5)

    right_gripper = joints["right_gripper_joint"]
    assert right_gripper.joint_type is urdf.JointType.REVOLUTE
    assert right_gripper.axis == urdf.Axis(xyz=(0.0, 0.0, -1.0))

    assert joints["head_swivel"].joint_type is urdf.JointType.CONTINUOUS


def test_write_then_parse_preserves_robot():
    """Writing a robot and parsing it back yields the same description."""
    robot = load_urdf(PHYSICS_URDF)
    text = write_urdf_string(robot)

    assert text.startswith("<?xml")
    assert parse_urdf_string(text) == robot


def test_mesh_scale_is_parsed_and_written():
    text = """
    <robot name="meshes">
      <link name="part">
        <visual name="shell">
          <geometry><mesh filename="meshes/part.stl" scale="0.001 0.001 0.002"/></geometry>
        </visual>
      </link>
    </robot>
    """
    robot = parse_urdf_string(text)
    visual = robot.links[0].visual[0]
    assert visual.name == "shell"
    assert visual.geometry == urdf.Mesh(filename="meshes/part.stl", scale=(0.001, 0.001, 0.002))
    # No <inertial> means an all zero inertial
    assert robot.links[0].inertial == urdf.Inertial()

    written = write_urdf_string(robot)
    assert 'scale="0.001 0.001 0.002"' in written
    assert parse_urdf_string(written) == robot


def test_unsupported_joint_types_are_parsed():
    """Floating joints are valid URDF, rejecting them is up to the importer."""
    text = """
    <robot name="floating">
      <link name="world"/>
      <link name="body"/>
      <joint name="free" type="floating">
        <parent link="world"/>
        <child link="body"/>
      </joint>
    </robot>
    """
    robot = parse_urdf_string(text)
    assert robot.joints[0].joint_type is urdf.JointType.FLOATING


@pytest.mark.parametrize("text, message", [
    ('<robot name="r"><link name="a"/><joint name="j" type="hinge">'
     '<parent link="a"/><child link="a"/></joint></robot>', "unknown type"),
    ('<robot name="r"><link name="a"/><joint name="j" type="fixed">'
     '<parent link="a"/></joint></robot>', "parent and a child"),
    ('<robot name="r"><link name="a"><visual><geometry/></visual></link></robot>',
     "without geometry"),
    ('<robot name="r"><link name="a"><visual><geometry><box size="1 2"/></geometry>'
     '</visual></link></robot>', "Expected 3"),
    ('<model name="r"/>', "<robot>"),
])
def test_malformed_urdf_raises(text, message):
    """Structurally invalid URDF raises ValueError with a useful message."""
    with pytest.raises(ValueError, match=message):
        parse_urdf_string(text)
