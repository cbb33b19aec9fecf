"""Low-precision Sun position for the Plan13 model.

The Sun's true longitude is its mean longitude plus a two-term equation of
centre in the Sun's mean anomaly.  That longitude is turned into a unit
vector through the obliquity of the ecliptic (celestial frame), then
rotated through the Greenwich Hour Angle of Aries (geocentric frame).  The
Sun's distance is taken as a constant 1 AU.
"""

from __future__ import annotations

import logging
from math import pi, radians, sin
from typing import NamedTuple

import jax.numpy as jnp
from jax import Array

from plan13.config import get_dtype
from plan13.constants import DEFAULT_CONSTANTS, ModelConstants
from plan13.coordinates import LookAngle, Observer, look_angle, position_to_latlon
from plan13.footprint import footprint_circle, footprint_to_map
from plan13.frames import days_since_reference, gha_aries, rotation_celestial_to_geocentric
from plan13.timestamp import Timestamp
from plan13.utils import wrap_to_2pi

logger = logging.getLogger(__name__)


class SunState(NamedTuple):
    """Sun direction at one instant.

    Attributes:
        celestial: Unit vector to the Sun, celestial frame.
        geocentric: Unit vector to the Sun, geocentric frame.
    """

    celestial: Array
    geocentric: Array


def sun_predict(
    timestamp: Timestamp,
    constants: ModelConstants = DEFAULT_CONSTANTS,
) -> SunState:
    """Compute the Sun's direction at an instant.

    Args:
        timestamp: Instant (UTC).
        constants: Model constants.

    Returns:
        SunState: Celestial and geocentric unit vectors.

    Examples:
        ```python
        from plan13.sun import sun_predict
        from plan13.timestamp import Timestamp
        sun_predict(Timestamp.from_calendar(2024, 6, 20, 12)).geocentric
        ```
    """
    t = days_since_reference(timestamp, constants)
    ghae = gha_aries(timestamp, constants)

    mrse = radians(constants.g0) + t * constants.ww + pi   # Mean longitude
    mase = radians(constants.mas0 + t * constants.masd)    # Mean anomaly
    tas = wrap_to_2pi(mrse + constants.eqc1 * sin(mase) + constants.eqc2 * sin(2.0 * mase))

    c = jnp.cos(tas)
    s = jnp.sin(tas)
    sun = jnp.array([c, s * constants.cns, s * constants.sns], dtype=get_dtype())

    return SunState(
        celestial=sun,
        geocentric=rotation_celestial_to_geocentric(ghae) @ sun,
    )


class Sun:
    """The Sun, with its direction cached by :meth:`predict`.

    Examples:
        ```python
        from plan13.sun import Sun
        sun = Sun()
        sun.predict(timestamp)
        lat, lon = sun.latlon()
        ```

    Args:
        constants: Model constants.
    """

    def __init__(self, constants: ModelConstants = DEFAULT_CONSTANTS) -> None:
        self._constants = constants
        self._state: SunState | None = None

    @property
    def state(self) -> SunState:
        """Direction as of the last :meth:`predict` call."""
        if self._state is None:
            raise RuntimeError("Sun position is unknown; call predict() first")
        return self._state

    def predict(self, timestamp: Timestamp) -> SunState:
        """Compute and cache the Sun's direction at ``timestamp``."""
        self._state = sun_predict(timestamp, self._constants)
        logger.debug("Sun predicted at %s", timestamp)
        return self._state

    def latlon(self) -> tuple[float, float]:
        """Return the sub-solar latitude and longitude in degrees."""
        return position_to_latlon(self.state.geocentric, 1.0)

    def look_angle(self, observer: Observer) -> LookAngle:
        """Return the Sun's elevation and azimuth from ``observer``.

        The Sun is placed at 1 AU; no range rate is computed.
        """
        return look_angle(observer, self.state.geocentric * self._constants.au)

    def footprint_latlon(self, n_points: int) -> Array:
        """Return the day/night terminator as ``(n_points, 2)`` ``[lat, lon]`` degrees.

        Uses 1 AU for the solar distance; the annual variation changes the
        circle's radius negligibly.
        """
        lat, lon = self.latlon()
        return footprint_circle(lat, lon, self._constants.au, n_points, self._constants.re)

    def footprint(self, n_points: int, map_width: int, map_height: int) -> Array:
        """Return the terminator as integer pixel coordinates on a world map."""
        return footprint_to_map(self.footprint_latlon(n_points), map_width, map_height)

    def __repr__(self) -> str:
        return f"Sun(predicted={self._state is not None})"
