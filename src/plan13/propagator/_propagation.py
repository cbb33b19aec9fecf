"""Plan13 orbit propagation.

Advances epoch elements to a target instant with linear drag, secular J2
precession of the node and perigee, and a Kepler solution for the position
in the orbit plane, then rotates the result into celestial and geocentric
coordinates.

References:

    1. J. R. Miller (G3RUH), *Satellite Orbit Prediction - Plan13*, AMSAT-UK.
"""

from __future__ import annotations

import math

import jax.numpy as jnp

from plan13.config import get_dtype
from plan13.constants import DEFAULT_CONSTANTS, TWO_PI, ModelConstants
from plan13.elements import OrbitalElements
from plan13.frames import (
    gha_aries,
    rotation_plane_to_celestial,
    state_celestial_to_geocentric,
)
from plan13.orbits import KEPLER_MAX_ITERATIONS, KEPLER_TOLERANCE, anomaly_mean_to_eccentric
from plan13.propagator._types import SatelliteState
from plan13.timestamp import Timestamp
from plan13.utils import wrap_to_2pi


def elapsed_days(elements: OrbitalElements, timestamp: Timestamp) -> float:
    """Return days elapsed from the element epoch to ``timestamp``.

    The whole-day and fractional parts are differenced separately to keep
    full double precision.
    """
    return ((timestamp.day_number - elements.epoch_daynumber)
            + (timestamp.fraction - elements.epoch_fraction))


def propagate(
    elements: OrbitalElements,
    timestamp: Timestamp,
    constants: ModelConstants = DEFAULT_CONSTANTS,
    tol: float = KEPLER_TOLERANCE,
    max_iterations: int = KEPLER_MAX_ITERATIONS,
) -> SatelliteState:
    """Propagate orbital elements to an instant.

    The model is deterministic: calling it twice with the same arguments
    returns identical vectors.  Accuracy degrades with distance from the
    epoch since drag is extrapolated linearly; nothing here flags stale
    elements.

    Args:
        elements: Epoch orbital elements.
        timestamp: Target instant (UTC).
        constants: Model constants.
        tol: Kepler solver tolerance. Units: *rad*
        max_iterations: Kepler solver iteration cap.

    Returns:
        Celestial and geocentric position and velocity, plus orbital radius
        and current orbit number.

    Raises:
        NonConvergentAnomalySolution: If Kepler's equation does not converge.

    Examples:
        ```python
        from plan13.elements import parse_tle
        from plan13.propagator import propagate
        from plan13.timestamp import Timestamp

        state = propagate(parse_tle(name, l1, l2), Timestamp.from_calendar(2024, 5, 1))
        state.position_geocentric
        ```
    """
    t = elapsed_days(elements, timestamp)

    # Linear drag terms
    dt = elements.dc * t / 2.0
    kd = 1.0 + 4.0 * dt
    kdp = 1.0 - 7.0 * dt

    # Mean anomaly at t, whole revolutions stripped out
    m = elements.mean_anomaly + elements.mean_motion * t * (1.0 - 3.0 * dt)
    revs = math.floor(m / TWO_PI)
    m -= revs * TWO_PI
    orbit_number = elements.revolution_number + revs

    e = elements.eccentricity
    ea = anomaly_mean_to_eccentric(m, e, tol, max_iterations)
    c_ea = jnp.cos(ea)
    s_ea = jnp.sin(ea)
    dnom = 1.0 - e * c_ea

    # Distances
    a = elements.a0 * kd
    b = elements.b0 * kd
    radius = float(a * dnom)

    # Position and velocity in the plane of the ellipse
    dtype = get_dtype()
    n0 = elements.n0
    s_plane = jnp.array([a * (c_ea - e), b * s_ea, 0.0], dtype=dtype)
    v_plane = jnp.array([-a * s_ea / dnom * n0, b * c_ea / dnom * n0, 0.0], dtype=dtype)

    argp = wrap_to_2pi(elements.argp + elements.wd * t * kdp)
    raan = wrap_to_2pi(elements.raan + elements.qd * t * kdp)

    # Plane -> celestial
    c = rotation_plane_to_celestial(raan, elements.inclination, argp)
    sat = c @ s_plane
    vel = c @ v_plane

    # Celestial -> geocentric through GHA Aries at t
    sat_g, vel_g = state_celestial_to_geocentric(gha_aries(timestamp, constants), sat, vel)

    return SatelliteState(
        position_celestial=sat,
        velocity_celestial=vel,
        position_geocentric=sat_g,
        velocity_geocentric=vel_g,
        radius=radius,
        orbit_number=orbit_number,
    )
