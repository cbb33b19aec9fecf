"""Ground observer geometry.

An :class:`Observer` is built once from a geodetic latitude, longitude and
altitude.  It carries the local Up, East and North unit vectors, the site
position on the WGS-84 ellipsoid and the site's velocity due to Earth's
rotation, all in geocentric coordinates [km, km/s].
"""

from __future__ import annotations

from math import cos, radians, sin, sqrt

import jax.numpy as jnp
from jax import Array

from plan13.config import get_dtype
from plan13.constants import DEFAULT_CONSTANTS, ModelConstants


class Observer:
    """A fixed ground station.

    Args:
        latitude: Geodetic latitude, -90..90. Units: *deg*
        longitude: Longitude, -180..180, east positive. Units: *deg*
        altitude: Height above the ellipsoid. Units: *m*
        name: Optional label.
        constants: Model constants (Earth ellipsoid and rotation rate).

    Examples:
        ```python
        from plan13.coordinates import Observer
        obs = Observer(52.0, -2.0, 100.0, name="G3RUH")
        obs.up, obs.position
        ```
    """

    __slots__ = ('_name', '_lat', '_lon', '_alt', '_u', '_e', '_n', '_o', '_v')

    def __init__(
        self,
        latitude: float,
        longitude: float,
        altitude: float = 0.0,
        name: str | None = None,
        constants: ModelConstants = DEFAULT_CONSTANTS,
    ) -> None:
        self._name = name
        self._lat = radians(latitude)
        self._lon = radians(longitude)
        self._alt = altitude / 1000.0

        cl = cos(self._lat)
        sl = sin(self._lat)
        co = cos(self._lon)
        so = sin(self._lon)

        up = (cl * co, cl * so, sl)
        east = (-so, co, 0.0)
        north = (-sl * co, -sl * so, cl)

        # Radius of curvature on the ellipsoid
        re = constants.re
        rp = constants.rp
        d = sqrt(re * re * cl * cl + rp * rp * sl * sl)
        rx = (re * re) / d + self._alt
        rz = (rp * rp) / d + self._alt

        position = (rx * up[0], rx * up[1], rz * up[2])
        velocity = (-position[1] * constants.w0, position[0] * constants.w0, 0.0)

        dtype = get_dtype()
        self._u = jnp.array(up, dtype=dtype)
        self._e = jnp.array(east, dtype=dtype)
        self._n = jnp.array(north, dtype=dtype)
        self._o = jnp.array(position, dtype=dtype)
        self._v = jnp.array(velocity, dtype=dtype)

    @property
    def name(self) -> str | None:
        """Station label."""
        return self._name

    @property
    def latitude(self) -> float:
        """Geodetic latitude [rad]."""
        return self._lat

    @property
    def longitude(self) -> float:
        """Longitude [rad]."""
        return self._lon

    @property
    def altitude(self) -> float:
        """Altitude [km]."""
        return self._alt

    @property
    def up(self) -> Array:
        """Local vertical unit vector."""
        return self._u

    @property
    def east(self) -> Array:
        """Local east unit vector."""
        return self._e

    @property
    def north(self) -> Array:
        """Local north unit vector."""
        return self._n

    @property
    def position(self) -> Array:
        """Station position, geocentric [km]."""
        return self._o

    @property
    def velocity(self) -> Array:
        """Station velocity due to Earth's rotation [km/s]. Has no z component."""
        return self._v

    def __repr__(self) -> str:
        return (
            f"Observer(name={self._name!r}, latitude={self._lat!r}, "
            f"longitude={self._lon!r}, altitude={self._alt!r})"
        )
