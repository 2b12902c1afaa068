"""Exceptions raised while converting workcells to and from URDF."""


class WorkcellError(Exception):
    """Base exception for workcell conversions."""
    pass


class UrdfImportError(WorkcellError):
    """Raised when a URDF robot cannot be turned into a workcell."""
    pass


class BrokenJointReference(UrdfImportError):
    """A joint refers to a link that does not exist."""

    def __init__(self, link_name: str):
        super().__init__(f"a joint refers to a non existing link [{link_name}]")
        self.link_name = link_name


class UnsupportedJointType(UrdfImportError):
    """A joint type other than fixed, prismatic, revolute or continuous."""

    def __init__(self, joint_type=None):
        message = "unsupported joint type found"
        if joint_type is not None:
            message += f" [{getattr(joint_type, 'value', joint_type)}]"
        super().__init__(message)
        self.joint_type = joint_type


class WorkcellToUrdfError(WorkcellError):
    """Raised when a workcell cannot be turned into a URDF robot."""
    pass


class InvalidAnchorType(WorkcellToUrdfError):
    """A joint's child frame is not anchored with a 3D pose."""

    def __init__(self, anchor):
        super().__init__(f"Invalid anchor type {anchor!r}")
        self.anchor = anchor


class BrokenReference(WorkcellToUrdfError):
    """An id that should name an entity of the workcell does not."""

    def __init__(self, entity_id: int):
        super().__init__(f"Broken reference: {entity_id}")
        self.entity_id = entity_id


class WriteToStringError(WorkcellToUrdfError):
    """The URDF robot could not be serialized to text."""

    def __init__(self, cause: Exception):
        super().__init__(f"Urdf error: {cause}")
        self.cause = cause
