"""Angle and unit conversion helpers.

These helpers wrap the ``use_degrees`` convention used throughout
plan13, providing JAX-traceable degree/radian conversion via
``jnp.where``.
"""

from math import pi

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike


def to_radians(angle: ArrayLike, use_degrees: bool) -> Array:
    """Convert angle to radians if ``use_degrees`` is True.

    Args:
        angle (ArrayLike): Angle value.
        use_degrees (bool): If ``True``, treat ``angle`` as degrees and convert.

    Returns:
        Angle in radians.
    """
    return jnp.where(use_degrees, jnp.deg2rad(angle), angle)


def wrap_to_2pi(angle: float) -> float:
    """Reduce an angle to ``[0, 2pi)`` in Python double precision.

    Used before building arrays so that large hour angles keep their
    precision under a float32 dtype.
    """
    return angle % (2.0 * pi)
