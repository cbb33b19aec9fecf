"""
plan13 is a JAX implementation of the Plan13 satellite and Sun position model
for antenna tracking, footprint maps and Doppler correction.
"""

from .constants import (
    DEG2RAD,
    RAD2DEG,
    DEFAULT_CONSTANTS,
    ModelConstants,
)

from .config import set_dtype, get_dtype

from .errors import (
    Plan13Error,
    MalformedElementSet,
    NonConvergentAnomalySolution,
    DegenerateRangeVector,
)

from .timestamp import Timestamp

from .elements import (
    OrbitalElements,
    parse_tle,
    read_tle_file,
)

from .propagator import (
    SatelliteState,
    Satellite,
    propagate,
)

from .coordinates import (
    Observer,
    LookAngle,
    look_angle,
    position_to_latlon,
)

from .sun import (
    SunState,
    Sun,
    sun_predict,
)

from .footprint import (
    footprint_circle,
    footprint_to_map,
    position_latlon_to_map,
)

from .doppler import (
    doppler_offset,
    doppler_shift,
)

__all__ = [
    # Constants
    "DEG2RAD",
    "RAD2DEG",
    "DEFAULT_CONSTANTS",
    "ModelConstants",
    # Config
    "set_dtype",
    "get_dtype",
    # Errors
    "Plan13Error",
    "MalformedElementSet",
    "NonConvergentAnomalySolution",
    "DegenerateRangeVector",
    # Time
    "Timestamp",
    # Elements
    "OrbitalElements",
    "parse_tle",
    "read_tle_file",
    # Propagation
    "SatelliteState",
    "Satellite",
    "propagate",
    # Coordinates
    "Observer",
    "LookAngle",
    "look_angle",
    "position_to_latlon",
    # Sun
    "SunState",
    "Sun",
    "sun_predict",
    # Footprint
    "footprint_circle",
    "footprint_to_map",
    "position_latlon_to_map",
    # Doppler
    "doppler_offset",
    "doppler_shift",
]
