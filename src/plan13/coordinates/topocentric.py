"""Topocentric look angles and geocentric sub-points.

Azimuth is measured clockwise from North in ``[0, 360)`` degrees, elevation
from the local horizon in ``[-90, 90]`` degrees.  Range rate is positive
when the target recedes from the observer.
"""

from __future__ import annotations

from math import asin, atan2, degrees
from typing import NamedTuple

import jax.numpy as jnp
from jax.typing import ArrayLike

from plan13.config import get_dtype
from plan13.coordinates.observer import Observer
from plan13.errors import DegenerateRangeVector

MIN_RANGE_KM = 1.0e-6
"""Ranges at or below this are too small to define a direction. Units: *km*"""


class LookAngle(NamedTuple):
    """Direction to a target as seen by an observer.

    Attributes:
        elevation: Elevation above the horizon [deg].
        azimuth: Azimuth clockwise from North [deg].
        range: Distance to the target [km].
        range_rate: Rate of change of range [km/s], or ``None`` when no
            target velocity was supplied.
    """

    elevation: float
    azimuth: float
    range: float
    range_rate: float | None = None


def look_angle(
    observer: Observer,
    position: ArrayLike,
    velocity: ArrayLike | None = None,
) -> LookAngle:
    """Compute elevation, azimuth, range and range rate of a target.

    Args:
        observer: Ground station.
        position: Target position in geocentric coordinates [km].
        velocity: Target inertial velocity in geocentric axes [km/s]. When
            given, the range rate is resolved along the line of sight.

    Returns:
        LookAngle: Observed direction.

    Raises:
        DegenerateRangeVector: If target and observer coincide.

    Examples:
        ```python
        from plan13.coordinates import Observer, look_angle
        obs = Observer(0.0, 0.0, 0.0)
        look_angle(obs, [7000.0, 0.0, 0.0]).elevation  # 90.0
        ```
    """
    r = jnp.asarray(position, dtype=get_dtype()) - observer.position

    rng = float(jnp.linalg.norm(r))
    if rng <= MIN_RANGE_KM:
        raise DegenerateRangeVector(rng)
    r = r / rng

    up = float(r @ observer.up)
    east = float(r @ observer.east)
    north = float(r @ observer.north)

    azimuth = degrees(atan2(east, north))
    if azimuth < 0.0:
        azimuth += 360.0
    # -0.0 and tiny negatives can round to exactly 360
    if azimuth >= 360.0:
        azimuth = 0.0

    elevation = degrees(asin(min(1.0, max(-1.0, up))))

    range_rate = None
    if velocity is not None:
        v = jnp.asarray(velocity, dtype=get_dtype()) - observer.velocity
        range_rate = float(v @ r)

    return LookAngle(elevation, azimuth, rng, range_rate)


def position_to_latlon(position: ArrayLike, radius: float | None = None) -> tuple[float, float]:
    """Return the geocentric latitude and longitude below a position.

    Args:
        position: Geocentric position (any length unit).
        radius: Distance used to normalise the z component. Defaults to
            the norm of ``position``.

    Returns:
        tuple[float, float]: ``(latitude, longitude)`` in degrees,
            longitude in ``(-180, 180]``.
    """
    p = jnp.asarray(position, dtype=get_dtype())
    x, y, z = (float(c) for c in p)
    if radius is None:
        radius = float(jnp.linalg.norm(p))
    return degrees(asin(min(1.0, max(-1.0, z / radius)))), degrees(atan2(y, x))
