"""
Two-line element set parsing for the Plan13 propagator.

Turns a name line plus the two standard NORAD element lines into an
immutable :class:`OrbitalElements` record with the derived constants the
propagator needs.
"""

from plan13.elements._tle import parse_tle, read_tle_file
from plan13.elements._types import OrbitalElements

__all__ = [
    "OrbitalElements",
    "parse_tle",
    "read_tle_file",
]
