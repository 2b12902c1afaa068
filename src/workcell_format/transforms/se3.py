"""SE(3) rigid-body transforms as homogeneous matrices in JAX.

All functions are pure and operate on JAX arrays of shape (..., 4, 4).
"""

import jax
import jax.numpy as jnp

Array = jax.Array


def identity() -> Array:
    """Return the 4x4 identity transform."""
    return jnp.eye(4)


def from_position_and_rotation(p: Array, R: Array) -> Array:
    """
    Construct SE(3) transform from position and rotation.

    Args:
        p: (..., 3) position vector
        R: (..., 3, 3) rotation matrix

    Returns:
        (..., 4, 4) homogeneous transformation matrix
    """
    p = jnp.asarray(p)
    R = jnp.asarray(R)
    batch_shape = jnp.broadcast_shapes(p.shape[:-1], R.shape[:-2])
    p = jnp.broadcast_to(p, batch_shape + (3,))
    R = jnp.broadcast_to(R, batch_shape + (3, 3))

    T = jnp.zeros(batch_shape + (4, 4), dtype=p.dtype)
    T = T.at[..., :3, :3].set(R)
    T = T.at[..., :3, 3].set(p)
    T = T.at[..., 3, 3].set(1.0)

    return T


def multiply(T1: Array, T2: Array) -> Array:
    """
    Compose two transforms, T1 @ T2 (apply T2 first, then T1).
    """
    return jnp.matmul(T1, T2)


def get_position(T: Array) -> Array:
    """Extract the (..., 3) translation of a transform."""
    return T[..., :3, 3]


def get_rotation(T: Array) -> Array:
    """Extract the (..., 3, 3) rotation of a transform."""
    return T[..., :3, :3]
