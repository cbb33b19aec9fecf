"""
Reference frame rotations for the Plan13 model: orbit plane to celestial,
and celestial to geocentric through the Greenwich Hour Angle of Aries.
"""

from plan13.frames._rotations import Rx, Rz
from plan13.frames.celestial import (
    days_since_reference,
    gha_aries,
    rotation_celestial_to_geocentric,
    rotation_geocentric_to_celestial,
    rotation_plane_to_celestial,
    state_celestial_to_geocentric,
)

__all__ = [
    "Rx",
    "Rz",
    "days_since_reference",
    "gha_aries",
    "rotation_plane_to_celestial",
    "rotation_celestial_to_geocentric",
    "rotation_geocentric_to_celestial",
    "state_celestial_to_geocentric",
]
