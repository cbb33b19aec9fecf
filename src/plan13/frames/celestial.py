"""Transformations between the orbit plane, celestial and geocentric frames.

Three frames are used by the Plan13 model:

- **Orbit plane**: x towards perigee, y along the direction of motion at
  perigee, z along the orbit normal.
- **Celestial**: inertial, x towards the First Point of Aries, z along
  Earth's rotation axis.
- **Geocentric**: Earth-fixed, x through the Greenwich meridian.

The celestial and geocentric frames differ by a rotation about z through
the Greenwich Hour Angle of Aries (GHAA), which Plan13 advances linearly
from a reference value at Jan 0.0 of a reference year.
"""

from __future__ import annotations

from math import radians

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from plan13.config import get_dtype
from plan13.constants import DEFAULT_CONSTANTS, ModelConstants
from plan13.frames._rotations import Rx, Rz
from plan13.time import caldate_to_daynumber
from plan13.timestamp import Timestamp
from plan13.utils import wrap_to_2pi


def days_since_reference(
    timestamp: Timestamp,
    constants: ModelConstants = DEFAULT_CONSTANTS,
) -> float:
    """Return days elapsed since Jan 0.0 of the sidereal reference year.

    Args:
        timestamp (Timestamp): Instant of interest.
        constants (ModelConstants): Model constants.

    Returns:
        float: Elapsed days (negative before the reference epoch).
    """
    reference = caldate_to_daynumber(constants.yg, 1, 0)
    return (timestamp.day_number - reference) + timestamp.fraction


def gha_aries(
    timestamp: Timestamp,
    constants: ModelConstants = DEFAULT_CONSTANTS,
) -> float:
    """Compute the Greenwich Hour Angle of Aries.

    Evaluated in Python double precision and reduced to ``[0, 2pi)`` so the
    result stays accurate when fed into float32 arrays.

    Args:
        timestamp (Timestamp): Instant of interest.
        constants (ModelConstants): Model constants.

    Returns:
        float: GHAA. Units: *rad*
    """
    t = days_since_reference(timestamp, constants)
    return wrap_to_2pi(radians(constants.g0) + t * constants.we)


def rotation_plane_to_celestial(
    raan: ArrayLike,
    inclination: ArrayLike,
    argp: ArrayLike,
) -> Array:
    """Compute the rotation matrix from orbit-plane to celestial coordinates.

    Equivalent to ``[C] = [RAAN] * [IN] * [AP]``.

    Args:
        raan: Right ascension of the ascending node. Units: *rad*
        inclination: Inclination. Units: *rad*
        argp: Argument of perigee. Units: *rad*

    Returns:
        3x3 rotation matrix (plane → celestial).

    Examples:
        ```python
        from plan13.frames import rotation_plane_to_celestial
        C = rotation_plane_to_celestial(0.0, 0.0, 0.0)  # identity
        ```
    """
    return Rz(-raan) @ Rx(-inclination) @ Rz(-argp)


def rotation_celestial_to_geocentric(gha: ArrayLike) -> Array:
    """Compute the rotation matrix from celestial to geocentric coordinates.

    Args:
        gha: Greenwich Hour Angle of Aries. Units: *rad*

    Returns:
        3x3 rotation matrix (celestial → geocentric).
    """
    return Rz(gha)


def rotation_geocentric_to_celestial(gha: ArrayLike) -> Array:
    """Compute the rotation matrix from geocentric to celestial coordinates.

    This is the transpose of :func:`rotation_celestial_to_geocentric`.
    """
    return rotation_celestial_to_geocentric(gha).T


def state_celestial_to_geocentric(
    gha: ArrayLike,
    position: ArrayLike,
    velocity: ArrayLike,
) -> tuple[Array, Array]:
    """Express a celestial position and velocity in geocentric axes.

    The velocity is rotated only; it stays the inertial velocity, which is
    what range-rate computation against a rotating observer expects.

    Args:
        gha: Greenwich Hour Angle of Aries. Units: *rad*
        position: Celestial position ``[x, y, z]``. Units: *km*
        velocity: Celestial velocity ``[vx, vy, vz]``. Units: *km/s*

    Returns:
        tuple[Array, Array]: Geocentric position and velocity.
    """
    rot = rotation_celestial_to_geocentric(gha)
    position = jnp.asarray(position, dtype=get_dtype())
    velocity = jnp.asarray(velocity, dtype=get_dtype())
    return rot @ position, rot @ velocity
