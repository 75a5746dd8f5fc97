"""Degree/radian conversion utilities in JAX."""

import jax
import jax.numpy as jnp
from typing import Sequence, Union

# Type aliases
Array = jax.Array
AngleLike = Union[float, Sequence[float], Array]


def degrees_to_radians(degrees: AngleLike) -> Array:
    """
    Convert angles from degrees to radians.

    Args:
        degrees: scalar or (...,) array of angles in degrees

    Returns:
        float64 array of the same shape, in radians
    """
    return jnp.asarray(degrees, dtype=jnp.float64) * jnp.pi / 180.0


def radians_to_degrees(radians: AngleLike) -> Array:
    """Convert angles from radians to degrees."""
    return jnp.asarray(radians, dtype=jnp.float64) * 180.0 / jnp.pi
