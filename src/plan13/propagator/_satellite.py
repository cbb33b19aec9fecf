"""High-level satellite class for Plan13 propagation.

Provides :class:`Satellite`, a convenience wrapper that combines TLE
parsing, propagation, sub-point, look-angle, footprint and Doppler
computations into a single object.  The most recent prediction and range
rate are cached on the instance, so an instance must not be shared between
threads without external locking.
"""

from __future__ import annotations

import logging

from jax import Array

from plan13.constants import DEFAULT_CONSTANTS, ModelConstants
from plan13.coordinates import LookAngle, Observer, look_angle, position_to_latlon
from plan13.doppler import doppler_offset, doppler_shift
from plan13.elements import OrbitalElements, parse_tle
from plan13.footprint import footprint_circle, footprint_to_map
from plan13.propagator._propagation import propagate
from plan13.propagator._types import SatelliteState
from plan13.timestamp import Timestamp

logger = logging.getLogger(__name__)


class Satellite:
    """A satellite defined by a TLE, propagated with Plan13.

    Examples:
        ```python
        from plan13 import Observer, Satellite, Timestamp

        sat = Satellite("ISS (ZARYA)", line1, line2)
        obs = Observer(52.0, -2.0, 100.0)

        sat.predict(Timestamp.from_calendar(2024, 5, 1, 12, 0, 0))
        lat, lon = sat.latlon()
        look = sat.look_angle(obs)
        rx = sat.doppler(145.8)
        ```

    Args:
        name: Title line with the satellite's common name.
        line1: First TLE line.
        line2: Second TLE line.
        constants: Model constants.
    """

    def __init__(
        self,
        name: str,
        line1: str,
        line2: str,
        constants: ModelConstants = DEFAULT_CONSTANTS,
    ) -> None:
        self._constants = constants
        self._elements: OrbitalElements = parse_tle(name, line1, line2, constants)
        self._state: SatelliteState | None = None
        self._range_rate: float | None = None
        logger.debug(
            "Loaded satellite %s (catalog %d), epoch %d/%.8f",
            self._elements.name,
            self._elements.catalog_number,
            self._elements.epoch_year,
            self._elements.epoch_day,
        )

    @classmethod
    def from_elements(
        cls,
        elements: OrbitalElements,
        constants: ModelConstants = DEFAULT_CONSTANTS,
    ) -> Satellite:
        """Wrap already-parsed elements, e.g. from :func:`~plan13.elements.read_tle_file`.

        ``constants`` should be the record the elements were parsed with.
        """
        obj = object.__new__(cls)
        obj._constants = constants
        obj._elements = elements
        obj._state = None
        obj._range_rate = None
        return obj

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def name(self) -> str:
        return self._elements.name

    @property
    def elements(self) -> OrbitalElements:
        """Parsed epoch elements."""
        return self._elements

    @property
    def epoch(self) -> Timestamp:
        """Element set epoch."""
        return Timestamp(self._elements.epoch_daynumber, self._elements.epoch_fraction)

    @property
    def state(self) -> SatelliteState:
        """State as of the last :meth:`predict` call."""
        if self._state is None:
            raise RuntimeError(f"{self.name}: position is unknown; call predict() first")
        return self._state

    @property
    def radius(self) -> float:
        """Orbital radius at the last prediction [km]."""
        return self.state.radius

    @property
    def orbit_number(self) -> int:
        """Revolution number at the last prediction."""
        return self.state.orbit_number

    @property
    def range_rate(self) -> float:
        """Range rate from the last :meth:`look_angle` call [km/s]."""
        if self._range_rate is None:
            raise RuntimeError(f"{self.name}: range rate is unknown; call look_angle() first")
        return self._range_rate

    # ------------------------------------------------------------------
    # Propagation and geometry
    # ------------------------------------------------------------------

    def predict(self, timestamp: Timestamp) -> SatelliteState:
        """Propagate to ``timestamp`` and cache the result.

        Args:
            timestamp: Target instant (UTC).

        Returns:
            SatelliteState: The new state.
        """
        self._state = propagate(self._elements, timestamp, self._constants)
        logger.debug(
            "%s predicted at %s: radius %.3f km, orbit %d",
            self.name,
            timestamp,
            self._state.radius,
            self._state.orbit_number,
        )
        return self._state

    def latlon(self) -> tuple[float, float]:
        """Return the sub-satellite latitude and longitude in degrees."""
        state = self.state
        return position_to_latlon(state.position_geocentric, state.radius)

    def look_angle(self, observer: Observer) -> LookAngle:
        """Return elevation, azimuth, range and range rate from ``observer``.

        The range rate is also cached for :meth:`doppler`.

        Raises:
            DegenerateRangeVector: If the observer sits on the satellite.
        """
        state = self.state
        result = look_angle(observer, state.position_geocentric, state.velocity_geocentric)
        self._range_rate = result.range_rate
        return result

    def footprint_latlon(self, n_points: int) -> Array:
        """Return the visibility circle as ``(n_points, 2)`` ``[lat, lon]`` degrees."""
        lat, lon = self.latlon()
        return footprint_circle(lat, lon, self.radius, n_points, self._constants.re)

    def footprint(self, n_points: int, map_width: int, map_height: int) -> Array:
        """Return the visibility circle as integer pixel coordinates on a world map."""
        return footprint_to_map(self.footprint_latlon(n_points), map_width, map_height)

    def doppler(self, frequency_mhz: float, uplink: bool = False) -> float:
        """Return a Doppler-corrected frequency using the cached range rate.

        Args:
            frequency_mhz: Nominal frequency. Units: *MHz*
            uplink: ``True`` for the frequency to transmit, ``False`` for the
                frequency to receive.
        """
        return doppler_shift(self.range_rate, frequency_mhz, uplink)

    def doppler_offset(self, frequency_mhz: float) -> float:
        """Return the Doppler shift of ``frequency_mhz`` in MHz."""
        return doppler_offset(self.range_rate, frequency_mhz)

    # ------------------------------------------------------------------
    # Representation
    # ------------------------------------------------------------------

    def __repr__(self) -> str:
        return (
            f"Satellite(name={self.name!r}, catalog={self._elements.catalog_number}, "
            f"epoch={self.epoch}, n={self._elements.revs_per_day:.8f} rev/day, "
            f"i={self._elements.inclination_deg:.4f} deg)"
        )
