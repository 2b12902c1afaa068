"""Pose conversion between URDF origins and workcell poses."""

from workcell_format.core.pose import EulerExtrinsicXYZ, Pose, Rad
from workcell_format.io import urdf_model as urdf

from .precision import narrow, narrow_vector, widen_vector


def pose_from_urdf(origin: urdf.Pose) -> Pose:
    roll, pitch, yaw = origin.rpy
    return Pose(
        trans=narrow_vector(origin.xyz),
        rot=EulerExtrinsicXYZ((Rad(narrow(roll)), Rad(narrow(pitch)), Rad(narrow(yaw)))),
    )


def pose_to_urdf(pose: Pose) -> urdf.Pose:
    return urdf.Pose(
        xyz=widen_vector(pose.trans),
        rpy=widen_vector(pose.rot.as_euler_extrinsic_xyz()),
    )
