"""URDF writer producing the canonical text form of a robot description."""

from typing import Iterable

from lxml import etree

from workcell_format.io import urdf_model as urdf


def write_urdf_string(robot: urdf.Robot) -> str:
    """Serialize a Robot description to pretty printed URDF XML."""
    return write_urdf_bytes(robot).decode("utf-8")


def write_urdf_bytes(robot: urdf.Robot) -> bytes:
    """Serialize a Robot description to UTF-8 encoded URDF XML."""
    root = build_robot_element(robot)
    return etree.tostring(root, pretty_print=True, xml_declaration=True, encoding="UTF-8")


def build_robot_element(robot: urdf.Robot) -> etree._Element:
    root = etree.Element("robot", name=robot.name)
    for link in robot.links:
        root.append(_link_element(link))
    for joint in robot.joints:
        root.append(_joint_element(joint))
    return root


def _link_element(link: urdf.Link) -> etree._Element:
    elem = etree.Element("link", name=link.name)

    inertial = etree.SubElement(elem, "inertial")
    inertial.append(_origin_element(link.inertial.origin))
    etree.SubElement(inertial, "mass", value=_format(link.inertial.mass))
    inertia = link.inertial.inertia
    etree.SubElement(inertial, "inertia", {
        component: _format(getattr(inertia, component))
        for component in ("ixx", "ixy", "ixz", "iyy", "iyz", "izz")
    })

    for visual in link.visual:
        elem.append(_shape_holder_element("visual", visual))
    for collision in link.collision:
        elem.append(_shape_holder_element("collision", collision))
    return elem


def _shape_holder_element(tag: str, holder) -> etree._Element:
    elem = etree.Element(tag)
    if holder.name is not None:
        elem.set("name", holder.name)
    elem.append(_origin_element(holder.origin))
    geometry = etree.SubElement(elem, "geometry")
    geometry.append(_geometry_element(holder.geometry))
    return elem


def _geometry_element(geometry: urdf.Geometry) -> etree._Element:
    if isinstance(geometry, urdf.Box):
        return etree.Element("box", size=_format_vector(geometry.size))
    if isinstance(geometry, (urdf.Cylinder, urdf.Capsule)):
        tag = "cylinder" if isinstance(geometry, urdf.Cylinder) else "capsule"
        return etree.Element(tag, radius=_format(geometry.radius), length=_format(geometry.length))
    if isinstance(geometry, urdf.Sphere):
        return etree.Element("sphere", radius=_format(geometry.radius))
    if isinstance(geometry, urdf.Mesh):
        elem = etree.Element("mesh", filename=geometry.filename)
        if geometry.scale is not None:
            elem.set("scale", _format_vector(geometry.scale))
        return elem
    raise TypeError(f"Unknown URDF geometry {geometry!r}")


def _joint_element(joint: urdf.Joint) -> etree._Element:
    elem = etree.Element("joint", name=joint.name, type=joint.joint_type.value)
    elem.append(_origin_element(joint.origin))
    etree.SubElement(elem, "parent", link=joint.parent)
    etree.SubElement(elem, "child", link=joint.child)
    etree.SubElement(elem, "axis", xyz=_format_vector(joint.axis.xyz))
    etree.SubElement(elem, "limit", {
        field: _format(getattr(joint.limit, field))
        for field in ("lower", "upper", "effort", "velocity")
    })
    return elem


def _origin_element(pose: urdf.Pose) -> etree._Element:
    return etree.Element("origin", xyz=_format_vector(pose.xyz), rpy=_format_vector(pose.rpy))


def _format(value: float) -> str:
    return repr(float(value))


def _format_vector(values: Iterable[float]) -> str:
    return " ".join(_format(v) for v in values)
