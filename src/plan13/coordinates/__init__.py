"""
Observer geometry and topocentric coordinates.

Provides the :class:`Observer` ground station, topocentric look angles
(elevation, azimuth, range, range rate) and geocentric sub-point latitude
and longitude.
"""

from plan13.coordinates.observer import Observer
from plan13.coordinates.topocentric import (
    MIN_RANGE_KM,
    LookAngle,
    look_angle,
    position_to_latlon,
)

__all__ = [
    "Observer",
    "LookAngle",
    "MIN_RANGE_KM",
    "look_angle",
    "position_to_latlon",
]
