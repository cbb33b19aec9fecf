"""The timestamp module provides the ``Timestamp`` value type.

A Timestamp is a UTC instant split into an integer day number (see
:mod:`plan13.time`) and a fraction of the day in ``[0, 1)``.  Keeping the
two parts separate preserves sub-second resolution without needing more
than double precision for the fraction.

Timestamps are immutable: arithmetic returns new instances, and the
fraction is renormalised into ``[0, 1)`` after every operation, carrying
whole days into the day number (flooring toward negative infinity).
"""

from __future__ import annotations

import math
from datetime import datetime, timezone

from .time import (
    caldate_to_daynumber,
    daynumber_to_caldate,
    fraction_to_hms,
    hms_to_fraction,
)


class Timestamp:
    """A UTC instant as ``(day_number, fraction)``.

    Constructors:
        Timestamp(735249, 0.5)
        Timestamp.from_calendar(2014, 1, 1, 12, 0, 0)
        Timestamp.from_datetime(datetime(2014, 1, 1, 12, tzinfo=timezone.utc))
    """

    __slots__ = ('_dn', '_tn')

    def __init__(self, day_number: int = 0, fraction: float = 0.0) -> None:
        carry = math.floor(fraction)
        fraction = float(fraction - carry)
        # tiny negative fractions round up to exactly 1.0
        if fraction >= 1.0:
            carry += 1
            fraction = 0.0
        self._dn = int(day_number) + int(carry)
        self._tn = fraction

    @classmethod
    def from_calendar(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: float = 0,
    ) -> Timestamp:
        """Create a Timestamp from calendar components.

        Args:
            year (int): Year.
            month (int): Month, 1-12.
            day (int): Day of month.
            hour (int): Hour. Default: 0
            minute (int): Minute. Default: 0
            second (float): Second. Default: 0

        Returns:
            Timestamp: The corresponding instant.
        """
        return cls(caldate_to_daynumber(year, month, day),
                   hms_to_fraction(hour, minute, second))

    @classmethod
    def from_datetime(cls, dt: datetime) -> Timestamp:
        """Create a Timestamp from a ``datetime``.

        Naive datetimes are taken to be UTC; aware ones are converted.
        """
        if dt.tzinfo is not None:
            dt = dt.astimezone(timezone.utc)
        second = dt.second + dt.microsecond / 1e6
        return cls.from_calendar(dt.year, dt.month, dt.day, dt.hour, dt.minute, second)

    @property
    def day_number(self) -> int:
        """Whole day number."""
        return self._dn

    @property
    def fraction(self) -> float:
        """Fraction of the day in ``[0, 1)``."""
        return self._tn

    # Arithmetic

    def add(self, days: float) -> Timestamp:
        """Return a new Timestamp offset by a (possibly negative) number of days."""
        return Timestamp(self._dn, self._tn + days)

    def __add__(self, days: float) -> Timestamp:
        return self.add(days)

    def __sub__(self, other: Timestamp | float) -> Timestamp | float:
        """Subtract days, or return the difference between Timestamps in days."""
        if isinstance(other, Timestamp):
            return (self._dn - other._dn) + (self._tn - other._tn)
        return self.add(-other)

    def round_up(self, interval: float) -> Timestamp:
        """Advance to the next multiple of ``interval`` days within the day.

        An instant already on a boundary advances by a full interval.

        Args:
            interval (float): Sampling interval in days, e.g. ``0.1``.

        Returns:
            Timestamp: The next boundary instant.
        """
        return self.add(interval - math.fmod(self._tn, interval))

    # Calendar conversions

    def caldate(self) -> tuple[int, int, int, int, int, int]:
        """Return ``(year, month, day, hour, minute, second)``.

        Hours, minutes and seconds are truncated, not rounded.
        """
        year, month, day = daynumber_to_caldate(self._dn)
        return (year, month, day) + fraction_to_hms(self._tn)

    def to_datetime(self) -> datetime:
        """Return an aware UTC ``datetime`` truncated to whole seconds."""
        return datetime(*self.caldate(), tzinfo=timezone.utc)

    def format(self) -> str:
        """Format as ``YYYY-MM-DD HH:MM:SS``."""
        year, month, day, hour, minute, second = self.caldate()
        return f'{year:4d}-{month:02d}-{day:02d} {hour:02d}:{minute:02d}:{second:02d}'

    # Comparison operators

    def __eq__(self, other):
        if not isinstance(other, Timestamp):
            return NotImplemented
        return self._dn == other._dn and self._tn == other._tn

    def __lt__(self, other):
        if not isinstance(other, Timestamp):
            return NotImplemented
        return (self._dn, self._tn) < (other._dn, other._tn)

    def __le__(self, other):
        if not isinstance(other, Timestamp):
            return NotImplemented
        return (self._dn, self._tn) <= (other._dn, other._tn)

    def __gt__(self, other):
        if not isinstance(other, Timestamp):
            return NotImplemented
        return (self._dn, self._tn) > (other._dn, other._tn)

    def __ge__(self, other):
        if not isinstance(other, Timestamp):
            return NotImplemented
        return (self._dn, self._tn) >= (other._dn, other._tn)

    def __hash__(self):
        return hash((self._dn, self._tn))

    # String representations

    def __str__(self):
        return self.format()

    def __repr__(self):
        return f'Timestamp(day_number={self._dn}, fraction={self._tn!r})'
