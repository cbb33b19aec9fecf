"""
Data types for Plan13 orbital elements.
"""

from dataclasses import dataclass
from math import degrees, pi


@dataclass(frozen=True)
class OrbitalElements:
    """Orbital elements parsed from a TLE, plus constants derived from them.

    This is a plain Python dataclass holding double-precision values. Angles
    are in radians and rates per day; mean motion and its derivative are
    stored pre-multiplied by 2pi.

    Attributes:
        name: Common name from the title line, stripped.
        catalog_number: NORAD catalog number.
        epoch_year: Four-digit epoch year.
        epoch_day: Epoch day of year including fraction (as in the TLE).
        epoch_daynumber: Day number of the epoch (see :mod:`plan13.time`).
        epoch_fraction: Fraction of the day of the epoch, ``[0, 1)``.
        decay_rate: First derivative of mean motion / 2 [rad/day^2].
        inclination: Inclination [rad].
        raan: Right ascension of ascending node [rad].
        eccentricity: Eccentricity [dimensionless].
        argp: Argument of perigee [rad].
        mean_anomaly: Mean anomaly at epoch [rad].
        mean_motion: Mean motion [rad/day].
        revolution_number: Revolution number at epoch.
        n0: Mean motion [rad/s].
        a0: Semi-major axis at epoch [km].
        b0: Semi-minor axis at epoch [km].
        pc: J2 precession coefficient [rad/day].
        qd: Nodal regression rate [rad/day].
        wd: Perigee precession rate [rad/day].
        dc: Drag coefficient (relative decay of mean motion) [1/day].
    """

    name: str
    catalog_number: int
    epoch_year: int
    epoch_day: float
    epoch_daynumber: int
    epoch_fraction: float
    decay_rate: float
    inclination: float
    raan: float
    eccentricity: float
    argp: float
    mean_anomaly: float
    mean_motion: float
    revolution_number: int
    n0: float
    a0: float
    b0: float
    pc: float
    qd: float
    wd: float
    dc: float

    @property
    def revs_per_day(self) -> float:
        """Mean motion [rev/day]."""
        return self.mean_motion / (2.0 * pi)

    @property
    def inclination_deg(self) -> float:
        """Inclination [deg]."""
        return degrees(self.inclination)
