"""
TLE parsing for the Plan13 propagator.

Fields are cut from fixed column ranges of the standard NORAD two-line
format and converted with Python's locale-independent ``int``/``float``.
Checksums are not verified.  Any required field that is not a number
raises :class:`~plan13.errors.MalformedElementSet` instead of silently
becoming zero.
"""

from __future__ import annotations

import logging
from math import cos, pi, radians, sqrt
from pathlib import Path

from plan13.constants import DEFAULT_CONSTANTS, SECONDS_PER_DAY, ModelConstants
from plan13.elements._types import OrbitalElements
from plan13.errors import MalformedElementSet
from plan13.time import doy_to_daynumber

logger = logging.getLogger(__name__)

# Two-digit epoch years below this belong to the 2000s
_Y2K_PIVOT = 58


def _field(line: str, start: int, end: int, name: str, line_number: int) -> str:
    text = line[start:end]
    if len(text) < end - start or not text.strip():
        raise MalformedElementSet(name, text, line_number)
    return text


def _float(line: str, start: int, end: int, name: str, line_number: int) -> float:
    text = _field(line, start, end, name, line_number)
    try:
        return float(text)
    except ValueError:
        raise MalformedElementSet(name, text, line_number) from None


def _int(line: str, start: int, end: int, name: str, line_number: int) -> int:
    text = _field(line, start, end, name, line_number)
    try:
        return int(text)
    except ValueError:
        raise MalformedElementSet(name, text, line_number) from None


def parse_tle(
    name: str,
    line1: str,
    line2: str,
    constants: ModelConstants = DEFAULT_CONSTANTS,
) -> OrbitalElements:
    """Parse a three-line element set into Plan13 orbital elements.

    Derived constants (semi-axes, J2 precession rates and drag coefficient)
    are computed once here and cached on the returned record.

    Args:
        name: Title line with the satellite's common name.
        line1: First TLE line.
        line2: Second TLE line.
        constants: Model constants used for the derived quantities.

    Returns:
        Parsed orbital elements.

    Raises:
        MalformedElementSet: If a required field is missing or not numeric.

    Examples:
        ```python
        from plan13.elements import parse_tle
        elements = parse_tle("ISS (ZARYA)", line1, line2)
        ```
    """
    l1 = line1.rstrip()
    l2 = line2.rstrip()

    # Line 1
    catalog_number = _int(l1, 2, 7, "catalog_number", 1)
    year = _int(l1, 18, 20, "epoch_year", 1)
    year += 2000 if year < _Y2K_PIVOT else 1900
    epoch_day = _float(l1, 20, 32, "epoch_day", 1)
    decay_rate = 2.0 * pi * _float(l1, 33, 43, "mean_motion_dot", 1)

    # Line 2
    inclination = radians(_float(l2, 8, 16, "inclination", 2))
    raan = radians(_float(l2, 17, 25, "raan", 2))
    eccentricity = _float(l2, 26, 33, "eccentricity", 2) / 1.0e7
    argp = radians(_float(l2, 34, 42, "argp", 2))
    mean_anomaly = radians(_float(l2, 43, 51, "mean_anomaly", 2))
    mean_motion = 2.0 * pi * _float(l2, 52, 63, "mean_motion", 2)

    # Often left blank on generated element sets
    if l2[63:68].strip():
        revolution_number = _int(l2, 63, 68, "revolution_number", 2)
    else:
        revolution_number = 0

    if mean_motion <= 0.0:
        raise MalformedElementSet("mean_motion", l2[52:63], 2)

    epoch_daynumber, epoch_fraction = doy_to_daynumber(year, epoch_day)

    # Derived quantities
    n0 = mean_motion / SECONDS_PER_DAY
    a0 = (constants.gm / (n0 * n0)) ** (1.0 / 3.0)
    b0 = a0 * sqrt(1.0 - eccentricity * eccentricity)

    pc = constants.re * a0 / (b0 * b0)
    pc = 1.5 * constants.j2 * pc * pc * mean_motion

    ci = cos(inclination)
    qd = -pc * ci
    wd = pc * (5.0 * ci * ci - 1.0) / 2.0
    dc = -2.0 * decay_rate / (3.0 * mean_motion)

    return OrbitalElements(
        name=name.strip(),
        catalog_number=catalog_number,
        epoch_year=year,
        epoch_day=epoch_day,
        epoch_daynumber=epoch_daynumber,
        epoch_fraction=epoch_fraction,
        decay_rate=decay_rate,
        inclination=inclination,
        raan=raan,
        eccentricity=eccentricity,
        argp=argp,
        mean_anomaly=mean_anomaly,
        mean_motion=mean_motion,
        revolution_number=revolution_number,
        n0=n0,
        a0=a0,
        b0=b0,
        pc=pc,
        qd=qd,
        wd=wd,
        dc=dc,
    )


def read_tle_file(
    filepath: str | Path,
    constants: ModelConstants = DEFAULT_CONSTANTS,
) -> list[OrbitalElements]:
    """Read a text file of three-line element sets.

    Blank lines are ignored.  A trailing incomplete record is skipped with
    a warning.

    Args:
        filepath: Path to the file.
        constants: Model constants used for the derived quantities.

    Returns:
        Parsed element sets in file order.

    Raises:
        FileNotFoundError: If the file does not exist.
        MalformedElementSet: If any record contains a malformed field.
    """
    filepath = Path(filepath)
    if not filepath.exists():
        raise FileNotFoundError(f"TLE file not found: {filepath}")

    lines = [ln for ln in filepath.read_text().splitlines() if ln.strip()]
    n_records, remainder = divmod(len(lines), 3)
    if remainder:
        logger.warning(
            "Ignoring %d trailing line(s) of an incomplete record in %s",
            remainder,
            filepath,
        )

    records = [
        parse_tle(lines[3 * k], lines[3 * k + 1], lines[3 * k + 2], constants)
        for k in range(n_records)
    ]
    logger.info("Loaded %d element sets from %s", len(records), filepath)
    return records
