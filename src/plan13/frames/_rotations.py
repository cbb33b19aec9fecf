"""
Elementary frame rotations used to move Plan13 vectors between the orbit
plane, celestial and geocentric frames.

Both matrices are passive: they re-express a fixed vector in axes turned
counter-clockwise by ``angle`` about the named axis.  A negative angle gives
the active rotation, which is how orbit-plane vectors are carried out to
the celestial frame.
"""

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from plan13.config import get_dtype
from plan13.utils import to_radians


def Rx(angle: ArrayLike, use_degrees: bool = False) -> Array:
    """Frame rotation about the x-axis (inclination in Plan13).

    Args:
        angle (ArrayLike): Rotation of the axes. Units: *rad* (or *deg*)
        use_degrees (bool): Interpret ``angle`` as degrees. Default: ``False``

    Returns:
        Array: 3x3 matrix in the module-wide dtype.

    Examples:
        ```python
        from plan13.frames import Rx
        Rx(90.0, use_degrees=True) @ jnp.array([0.0, 1.0, 0.0])  # [0, 0, -1]
        ```
    """
    theta = to_radians(angle, use_degrees)
    c, s = jnp.cos(theta), jnp.sin(theta)

    return jnp.array([[1.0, 0.0, 0.0],
                      [0.0,  +c,  +s],
                      [0.0,  -s,  +c]], dtype=get_dtype())


def Rz(angle: ArrayLike, use_degrees: bool = False) -> Array:
    """Frame rotation about the z-axis (node, perigee and hour angle in Plan13).

    ``Rz(gha)`` takes celestial vectors into geocentric axes.

    Args:
        angle (ArrayLike): Rotation of the axes. Units: *rad* (or *deg*)
        use_degrees (bool): Interpret ``angle`` as degrees. Default: ``False``

    Returns:
        Array: 3x3 matrix in the module-wide dtype.
    """
    theta = to_radians(angle, use_degrees)
    c, s = jnp.cos(theta), jnp.sin(theta)

    return jnp.array([[ +c,  +s, 0.0],
                      [ -s,  +c, 0.0],
                      [0.0, 0.0, 1.0]], dtype=get_dtype())
