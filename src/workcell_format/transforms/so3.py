"""SO(3) rotation conversions in JAX.

This module implements the rotation conversions needed by the workcell
document model: roll-pitch-yaw (extrinsic XYZ) angles to and from rotation
matrices, and quaternions to rotation matrices. All functions are pure and
operate on JAX arrays.
"""

import jax
import jax.numpy as jnp

Array = jax.Array


def from_rpy(rpy: Array) -> Array:
    """
    Convert roll-pitch-yaw angles to rotation matrices.

    The angles are extrinsic rotations about X, then Y, then Z, which is the
    convention used by URDF origins: R = Rz(yaw) @ Ry(pitch) @ Rx(roll).

    Args:
        rpy: (..., 3) array of [roll, pitch, yaw] angles in radians

    Returns:
        (..., 3, 3) array of rotation matrices
    """
    rpy = jnp.asarray(rpy)
    roll, pitch, yaw = jnp.moveaxis(rpy, -1, 0)

    cr, sr = jnp.cos(roll), jnp.sin(roll)
    cp, sp = jnp.cos(pitch), jnp.sin(pitch)
    cy, sy = jnp.cos(yaw), jnp.sin(yaw)

    matrix = jnp.stack([
        jnp.stack([cy * cp, cy * sp * sr - sy * cr, cy * sp * cr + sy * sr], axis=-1),
        jnp.stack([sy * cp, sy * sp * sr + cy * cr, sy * sp * cr - cy * sr], axis=-1),
        jnp.stack([-sp, cp * sr, cp * cr], axis=-1)
    ], axis=-2)

    return matrix


def to_rpy(matrix: Array) -> Array:
    """
    Decompose rotation matrices into extrinsic XYZ roll-pitch-yaw angles.

    This is the canonical Euler decomposition used to compare rotations that
    were authored in different representations.

    Args:
        matrix: (..., 3, 3) array of rotation matrices

    Returns:
        (..., 3) array of [roll, pitch, yaw] angles in radians
    """
    matrix = jnp.asarray(matrix)
    r00 = matrix[..., 0, 0]
    r10 = matrix[..., 1, 0]
    r20 = matrix[..., 2, 0]
    r21 = matrix[..., 2, 1]
    r22 = matrix[..., 2, 2]

    roll = jnp.arctan2(r21, r22)
    pitch = jnp.arctan2(-r20, jnp.sqrt(r00 * r00 + r10 * r10))
    yaw = jnp.arctan2(r10, r00)

    return jnp.stack([roll, pitch, yaw], axis=-1)


def from_quaternion(quaternions: Array) -> Array:
    """
    Convert quaternions to rotation matrices.

    Args:
        quaternions: (..., 4) array of quaternions in (w, x, y, z) format

    Returns:
        (..., 3, 3) array of rotation matrices
    """
    quaternions = jnp.asarray(quaternions)
    # Normalize quaternions for numerical stability
    quaternions = quaternions / jnp.linalg.norm(quaternions, axis=-1, keepdims=True)

    # Unpack quaternion components - preserving batch dimensions
    w, x, y, z = jnp.moveaxis(quaternions, -1, 0)

    xx, yy, zz = x*x, y*y, z*z
    wx, wy, wz = w*x, w*y, w*z
    xy, xz, yz = x*y, x*z, y*z

    matrix = jnp.stack([
        jnp.stack([1 - 2*(yy + zz), 2*(xy - wz), 2*(xz + wy)], axis=-1),
        jnp.stack([2*(xy + wz), 1 - 2*(xx + zz), 2*(yz - wx)], axis=-1),
        jnp.stack([2*(xz - wy), 2*(yz + wx), 1 - 2*(xx + yy)], axis=-1)
    ], axis=-2)

    return matrix
