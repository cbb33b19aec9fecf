"""
Data types for the Plan13 orbit propagator.
"""

from typing import NamedTuple

from jax import Array


class SatelliteState(NamedTuple):
    """Satellite state at one instant, as produced by :func:`propagate`.

    Attributes:
        position_celestial: Position in the celestial (inertial) frame [km].
        velocity_celestial: Velocity in the celestial frame [km/s].
        position_geocentric: Position in the geocentric (Earth-fixed) frame [km].
        velocity_geocentric: Inertial velocity expressed in geocentric axes [km/s].
        radius: Orbital radius, distance from Earth's centre [km].
        orbit_number: Revolution number at this instant.
    """

    position_celestial: Array
    velocity_celestial: Array
    position_geocentric: Array
    velocity_geocentric: Array
    radius: float
    orbit_number: int
