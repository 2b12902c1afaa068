"""URDF parser for loading robot descriptions.

This module reads URDF XML with lxml into the `urdf_model` records used by
the workcell conversions. Materials and simulator specific extensions are
ignored.
"""

from pathlib import Path
from typing import Optional, Tuple, Union

from lxml import etree

from workcell_format.io import urdf_model as urdf


def load_urdf(urdf_path: Union[str, Path]) -> urdf.Robot:
    """Load a URDF file into a Robot description.

    Args:
        urdf_path: Path to the URDF file to load.

    Returns:
        Robot: The parsed robot description.
    """
    tree = etree.parse(str(urdf_path))
    return parse_robot(tree.getroot())


def parse_urdf_string(text: Union[str, bytes]) -> urdf.Robot:
    """Parse URDF XML text into a Robot description."""
    if isinstance(text, str):
        text = text.encode("utf-8")
    return parse_robot(etree.fromstring(text))


def parse_robot(root: etree._Element) -> urdf.Robot:
    """Convert a parsed <robot> element into a Robot description."""
    if root.tag != "robot":
        raise ValueError(f"Expected a <robot> root element, found <{root.tag}>")

    links = tuple(_parse_link(link) for link in root.findall("link"))
    joints = tuple(_parse_joint(joint) for joint in root.findall("joint"))

    return urdf.Robot(name=root.get("name", ""), links=links, joints=joints)


def _parse_link(link: etree._Element) -> urdf.Link:
    name = _required(link, "name")

    inertial_elem = link.find("inertial")
    inertial = _parse_inertial(inertial_elem) if inertial_elem is not None else urdf.Inertial()

    visuals = []
    for visual in link.findall("visual"):
        visuals.append(urdf.Visual(
            name=visual.get("name"),
            origin=_parse_origin(visual.find("origin")),
            geometry=_parse_geometry(visual.find("geometry"), name),
        ))

    collisions = []
    for collision in link.findall("collision"):
        collisions.append(urdf.Collision(
            name=collision.get("name"),
            origin=_parse_origin(collision.find("origin")),
            geometry=_parse_geometry(collision.find("geometry"), name),
        ))

    return urdf.Link(
        name=name,
        inertial=inertial,
        visual=tuple(visuals),
        collision=tuple(collisions),
    )


def _parse_inertial(inertial: etree._Element) -> urdf.Inertial:
    mass_elem = inertial.find("mass")
    mass = float(_required(mass_elem, "value")) if mass_elem is not None else 0.0

    inertia_elem = inertial.find("inertia")
    if inertia_elem is not None:
        inertia = urdf.Inertia(**{
            component: float(inertia_elem.get(component, "0"))
            for component in ("ixx", "ixy", "ixz", "iyy", "iyz", "izz")
        })
    else:
        inertia = urdf.Inertia()

    return urdf.Inertial(
        origin=_parse_origin(inertial.find("origin")),
        mass=mass,
        inertia=inertia,
    )


def _parse_geometry(geometry: Optional[etree._Element], link_name: str) -> urdf.Geometry:
    # Skip comments and processing instructions
    shapes = [] if geometry is None else [child for child in geometry if isinstance(child.tag, str)]
    if not shapes:
        raise ValueError(f"Link '{link_name}' has a visual or collision without geometry")

    shape = shapes[0]
    if shape.tag == "box":
        return urdf.Box(size=_parse_vector(shape.get("size", "0 0 0"), 3))
    if shape.tag == "cylinder":
        return urdf.Cylinder(
            radius=float(_required(shape, "radius")),
            length=float(_required(shape, "length")),
        )
    if shape.tag == "capsule":
        return urdf.Capsule(
            radius=float(_required(shape, "radius")),
            length=float(_required(shape, "length")),
        )
    if shape.tag == "sphere":
        return urdf.Sphere(radius=float(_required(shape, "radius")))
    if shape.tag == "mesh":
        scale = shape.get("scale")
        return urdf.Mesh(
            filename=_required(shape, "filename"),
            scale=_parse_vector(scale, 3) if scale is not None else None,
        )
    raise ValueError(f"Unknown geometry <{shape.tag}> in link '{link_name}'")


def _parse_joint(joint: etree._Element) -> urdf.Joint:
    name = _required(joint, "name")
    type_str = _required(joint, "type")
    try:
        joint_type = urdf.JointType(type_str)
    except ValueError:
        raise ValueError(f"Joint '{name}' has unknown type '{type_str}'")

    parent_elem = joint.find("parent")
    child_elem = joint.find("child")
    if parent_elem is None or child_elem is None:
        raise ValueError(f"Joint '{name}' must have both a parent and a child link")

    axis_elem = joint.find("axis")
    axis = urdf.Axis(xyz=_parse_vector(axis_elem.get("xyz", "1 0 0"), 3)) if axis_elem is not None else urdf.Axis()

    limit_elem = joint.find("limit")
    if limit_elem is not None:
        limit = urdf.JointLimit(**{
            field: float(limit_elem.get(field, "0"))
            for field in ("lower", "upper", "effort", "velocity")
        })
    else:
        limit = urdf.JointLimit()

    return urdf.Joint(
        name=name,
        joint_type=joint_type,
        parent=_required(parent_elem, "link"),
        child=_required(child_elem, "link"),
        origin=_parse_origin(joint.find("origin")),
        axis=axis,
        limit=limit,
    )


def _parse_origin(origin: Optional[etree._Element]) -> urdf.Pose:
    if origin is None:
        return urdf.Pose()
    return urdf.Pose(
        xyz=_parse_vector(origin.get("xyz", "0 0 0"), 3),
        rpy=_parse_vector(origin.get("rpy", "0 0 0"), 3),
    )


def _parse_vector(vector: str, length: int) -> Tuple[float, ...]:
    """Parse a space separated list of floats of a fixed length."""
    parts = vector.split()
    if len(parts) != length:
        raise ValueError(f"Expected {length} space-separated values, got {len(parts)}: '{vector}'")
    return tuple(float(x) for x in parts)


def _required(elem: etree._Element, attribute: str) -> str:
    value = elem.get(attribute)
    if value is None:
        raise ValueError(f"<{elem.tag}> element is missing the '{attribute}' attribute")
    return value
