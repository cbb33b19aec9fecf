"""
Plan13 orbit propagator.

The pure :func:`propagate` function maps epoch elements and an instant to a
:class:`SatelliteState`; :class:`Satellite` wraps it with a cached state
plus sub-point, look-angle, footprint and Doppler helpers.
"""

from plan13.propagator._propagation import elapsed_days, propagate
from plan13.propagator._satellite import Satellite
from plan13.propagator._types import SatelliteState

__all__ = [
    "SatelliteState",
    "Satellite",
    "elapsed_days",
    "propagate",
]
