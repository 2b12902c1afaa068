"""Joint conversion between URDF joints and workcell joint properties.

URDF stores a single scalar for effort and velocity limits and a lower/upper
pair for the position limit, while workcell joints may leave any of them
unset or asymmetric. Exporting fills the gaps with defaults and always logs
when it has to.
"""

import logging
from typing import Dict, Optional, Sequence, Tuple, Type

from workcell_format.core.errors import UnsupportedJointType
from workcell_format.core.joint import (
    AsymmetricLimit,
    Continuous,
    Fixed,
    JointAxis,
    JointLimits,
    JointProperties,
    NoLimit,
    Prismatic,
    RangeLimits,
    Revolute,
    SingleDofJoint,
    SymmetricLimit,
)
from workcell_format.io import urdf_model as urdf

from .precision import narrow, narrow_vector, widen, widen_vector

logger = logging.getLogger(__name__)

DEFAULT_EFFORT_LIMIT = 1e3
DEFAULT_VELOCITY_LIMIT = 10.0

_SINGLE_DOF_TYPES: Dict[urdf.JointType, Type[SingleDofJoint]] = {
    urdf.JointType.PRISMATIC: Prismatic,
    urdf.JointType.REVOLUTE: Revolute,
    urdf.JointType.CONTINUOUS: Continuous,
}


def axis_from_urdf(axis: urdf.Axis) -> JointAxis:
    return JointAxis(xyz=narrow_vector(axis.xyz))


def axis_to_urdf(axis: JointAxis) -> urdf.Axis:
    return urdf.Axis(xyz=widen_vector(axis.xyz))


def limits_from_urdf(limit: urdf.JointLimit) -> JointLimits:
    return JointLimits(
        position=AsymmetricLimit(lower=narrow(limit.lower), upper=narrow(limit.upper)),
        effort=SymmetricLimit(narrow(limit.effort)),
        velocity=SymmetricLimit(narrow(limit.velocity)),
    )


def _position_to_urdf(position: RangeLimits) -> Tuple[float, float]:
    # 0.0 for both bounds means "no limit" in URDF
    if isinstance(position, NoLimit):
        return 0.0, 0.0
    if isinstance(position, SymmetricLimit):
        return -widen(position.limit), widen(position.limit)
    if isinstance(position, AsymmetricLimit):
        lower = widen(position.lower) if position.lower is not None else 0.0
        upper = widen(position.upper) if position.upper is not None else 0.0
        return lower, upper
    raise TypeError(f"Unknown range limit {position!r}")


def _min_or_default(bounds: Sequence[Optional[float]], default: float) -> float:
    present = [widen(b) for b in bounds if b is not None]
    return min(present) if present else default


def _scalar_to_urdf(limit: RangeLimits, kind: str, default: float) -> float:
    if isinstance(limit, NoLimit):
        logger.warning("No %s limit found when exporting to urdf, setting to %s", kind, default)
        return default
    if isinstance(limit, SymmetricLimit):
        return widen(limit.limit)
    if isinstance(limit, AsymmetricLimit):
        value = _min_or_default((limit.lower, limit.upper), default)
        logger.warning(
            "Asymmetric %s limit found when exporting to urdf, setting to %s", kind, value
        )
        return value
    raise TypeError(f"Unknown range limit {limit!r}")


def limits_to_urdf(limits: JointLimits) -> urdf.JointLimit:
    lower, upper = _position_to_urdf(limits.position)
    return urdf.JointLimit(
        lower=lower,
        upper=upper,
        effort=_scalar_to_urdf(limits.effort, "effort", DEFAULT_EFFORT_LIMIT),
        velocity=_scalar_to_urdf(limits.velocity, "velocity", DEFAULT_VELOCITY_LIMIT),
    )


def properties_from_urdf(joint: urdf.Joint) -> JointProperties:
    """Map a URDF joint to workcell joint properties.

    Raises:
        UnsupportedJointType: For floating, planar and spherical joints.
    """
    if joint.joint_type is urdf.JointType.FIXED:
        return Fixed()
    single_dof = _SINGLE_DOF_TYPES.get(joint.joint_type)
    if single_dof is None:
        raise UnsupportedJointType(joint.joint_type)
    return single_dof(axis=axis_from_urdf(joint.axis), limits=limits_from_urdf(joint.limit))


def properties_to_urdf(
    properties: JointProperties,
) -> Tuple[urdf.JointType, urdf.Axis, urdf.JointLimit]:
    """Joint type, axis and limit of the URDF joint for workcell properties.

    Fixed joints get a zero axis and an all zero limit, which URDF consumers
    ignore for that joint type.
    """
    if isinstance(properties, Fixed):
        return urdf.JointType.FIXED, urdf.Axis(xyz=(0.0, 0.0, 0.0)), urdf.JointLimit()
    for joint_type, variant in _SINGLE_DOF_TYPES.items():
        if isinstance(properties, variant):
            return joint_type, axis_to_urdf(properties.axis), limits_to_urdf(properties.limits)
    raise TypeError(f"Unknown joint properties {properties!r}")
