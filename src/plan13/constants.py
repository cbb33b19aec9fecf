"""
The `constants` module defines the unit conversions and the physical, sidereal
and solar constants used by the Plan13 model.
"""

from math import cos, pi, radians, sin
from typing import NamedTuple

# Mathematical Constants
"""
Constant to convert degrees to radians. Equal to 2pi/360. Units: *rad/deg*
"""
DEG2RAD = 2.0 * pi / 360.0

"""
Constant to convert radians to degrees. Equal to 360/2pi. Units: *deg/rad*
"""
RAD2DEG = 360.0 / (pi * 2.0)

"""
Full turn in radians.
"""
TWO_PI = 2.0 * pi

# Time Constants
"""
Seconds in one day. Units: *s*
"""
SECONDS_PER_DAY = 86400.0


class ModelConstants(NamedTuple):
    """Immutable record of every constant the Plan13 model depends on.

    One instance is shared by reference between TLE parsing, the orbit
    propagator, observer geometry and the Sun model.  Build a variant with
    ``DEFAULT_CONSTANTS._replace(...)``, e.g. to move the sidereal reference
    epoch forward once the default drifts out of its validity window.

    Attributes:
        re: WGS-84 Earth equatorial radius [km].
        fl: WGS-84 flattening [dimensionless].
        gm: Earth's gravitational constant [km^3/s^2].
        j2: Second zonal harmonic of Earth's gravity field.
        ym: Mean year [days].
        yt: Tropical year [days].
        yg: Reference year of the Greenwich hour angle of Aries (Jan 0.0).
        g0: Greenwich hour angle of Aries at the reference epoch [deg].
        mas0: Mean anomaly of the Sun at the reference epoch [deg].
        masd: Mean anomaly rate of the Sun [deg/day].
        ins: Inclination of the ecliptic (obliquity) [deg].
        eqc1: Sun's equation of centre, first term [rad].
        eqc2: Sun's equation of centre, second term [rad].
        au: Astronomical unit, mean distance to the Sun [km].
    """

    re: float = 6378.137
    fl: float = 1.0 / 298.257224
    gm: float = 3.986e5
    j2: float = 1.08263e-3
    ym: float = 365.25
    yt: float = 365.2421896698
    yg: int = 2014
    g0: float = 99.5828
    mas0: float = 356.4105
    masd: float = 0.98560028
    ins: float = 23.4375
    eqc1: float = 0.03340
    eqc2: float = 0.00035
    au: float = 149.597870700e6

    @property
    def rp(self) -> float:
        """Polar radius [km]."""
        return self.re * (1.0 - self.fl)

    @property
    def ww(self) -> float:
        """Earth's orbital angular rate around the Sun [rad/day]."""
        return 2.0 * pi / self.yt

    @property
    def we(self) -> float:
        """Earth's sidereal rotation rate [rad/day]."""
        return 2.0 * pi + self.ww

    @property
    def w0(self) -> float:
        """Earth's sidereal rotation rate [rad/s]."""
        return self.we / SECONDS_PER_DAY

    @property
    def cns(self) -> float:
        """Cosine of the ecliptic inclination."""
        return cos(radians(self.ins))

    @property
    def sns(self) -> float:
        """Sine of the ecliptic inclination."""
        return sin(radians(self.ins))


DEFAULT_CONSTANTS = ModelConstants()
"""Constants of the published Plan13 model. Sidereal data valid to ~2030."""
