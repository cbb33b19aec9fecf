"""Day-number calendar arithmetic used by the Plan13 model.

A day number counts whole days from a fixed anchor using a 365.25-day mean
year, with March treated as the first month so that leap days fall at the
end of the counting year.  The conversions are valid from 1900-03-01 through
2100-02-28.  Nothing here validates its inputs: out-of-range calendar fields
silently produce whatever day number the formula yields.

These helpers work on Python ``int``/``float`` values rather than JAX arrays;
day numbers near 7.4e5 need more precision than float32 offers.
"""

from __future__ import annotations

from .constants import DEFAULT_CONSTANTS

_YM = DEFAULT_CONSTANTS.ym


def caldate_to_daynumber(year: int, month: int, day: int) -> int:
    """Convert a calendar date to a day number.

    January and February count as months 13 and 14 of the previous year.

    Args:
        year (int): Year of the calendar date.
        month (int): Month of the calendar date.
        day (int): Day of the calendar date. ``0`` denotes the last day of
            the previous month, so ``(year, 1, 0)`` is "Jan 0.0".

    Returns:
        int: Day number.

    Examples:
        ```python
        from plan13.time import caldate_to_daynumber
        caldate_to_daynumber(2014, 1, 1)  # 735249
        ```
    """
    if month < 3:
        month += 12
        year -= 1

    return int(year * _YM) + int((month + 1) * 30.6) + int(day - 428)


def daynumber_to_caldate(daynumber: int) -> tuple[int, int, int]:
    """Convert a day number back to a calendar date.

    Exact inverse of :func:`caldate_to_daynumber` inside the valid range.

    Args:
        daynumber (int): Day number.

    Returns:
        tuple[int, int, int]: ``(year, month, day)``.
    """
    dt = daynumber + 428
    year = int((dt - 122.1) / _YM)
    dt -= int(year * _YM)
    month = int(dt / 30.61)
    dt -= int(month * 30.6)
    month -= 1

    if month > 12:
        month -= 12
        year += 1

    return year, month, int(dt)


def doy_to_daynumber(year: int, doy: float) -> tuple[int, float]:
    """Split a year and fractional day-of-year into day number and day fraction.

    This is how TLE epochs (``YYDDD.DDDDDDDD``) are represented.

    Args:
        year (int): Four-digit year.
        doy (float): Day of year, 1-based, with fractional part.

    Returns:
        tuple[int, float]: ``(day number, fraction of day)``.
    """
    whole = int(doy)
    return caldate_to_daynumber(year, 1, 0) + whole, doy - whole


def hms_to_fraction(hour: int, minute: int, second: float) -> float:
    """Convert a time of day to a fraction of a day."""
    return (hour + minute / 60.0 + second / 3600.0) / 24.0


def fraction_to_hms(fraction: float) -> tuple[int, int, int]:
    """Split a fraction of a day into hours, minutes and seconds.

    Each unit is truncated toward zero, so the result can be up to one
    second early.

    Args:
        fraction (float): Fraction of a day in ``[0, 1)``.

    Returns:
        tuple[int, int, int]: ``(hour, minute, second)``.
    """
    t = fraction * 24.0
    hour = int(t)
    t = (t - hour) * 60.0
    minute = int(t)
    t = (t - minute) * 60.0
    return hour, minute, int(t)
