# /// script
# requires-python = ">=3.10"
# dependencies = ["typer>=0.9.0", "plan13"]
#
# [tool.uv.sources]
# plan13 = { path = ".." }
# ///
"""Print a tracking table for every satellite in a TLE file.

Steps through time from a start instant and prints, for each sample where
the satellite is above the minimum elevation, its sub-point, azimuth,
elevation and Doppler-corrected downlink/uplink frequencies.

Usage:
    uv run examples/track.py TLE_FILE [OPTIONS]

Examples:
    # Next 90 minutes over Bristol, every 30 seconds
    uv run examples/track.py amateur.txt --lat 51.45 --lon -2.58 --alt 50 \\
        --start "2024-05-01 12:00:00" --duration 90 --step 30
"""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Annotated

import typer

from plan13 import Observer, Satellite, Sun, Timestamp, read_tle_file


def main(
    tle_file: Annotated[Path, typer.Argument(help="File of three-line element sets")],
    lat: Annotated[float, typer.Option(help="Observer latitude [deg]")] = 52.0,
    lon: Annotated[float, typer.Option(help="Observer longitude [deg]")] = -2.0,
    alt: Annotated[float, typer.Option(help="Observer altitude [m]")] = 0.0,
    start: Annotated[
        str | None, typer.Option(help="Start instant 'YYYY-MM-DD HH:MM:SS' (UTC, default now)")
    ] = None,
    duration: Annotated[float, typer.Option(help="Duration in minutes")] = 90.0,
    step: Annotated[float, typer.Option(help="Step in seconds")] = 60.0,
    min_elevation: Annotated[float, typer.Option(help="Minimum elevation [deg]")] = 0.0,
    downlink: Annotated[float, typer.Option(help="Downlink frequency [MHz]")] = 145.800,
    uplink: Annotated[float, typer.Option(help="Uplink frequency [MHz]")] = 437.800,
    verbose: Annotated[bool, typer.Option(help="Enable debug logging")] = False,
) -> None:
    """Print look angles and Doppler for satellites above the horizon."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO)

    observer = Observer(lat, lon, alt, name="station")
    satellites = [Satellite.from_elements(el) for el in read_tle_file(tle_file)]
    sun = Sun()

    if start is None:
        t0 = Timestamp.from_datetime(datetime.now(timezone.utc))
    else:
        t0 = Timestamp.from_datetime(datetime.strptime(start, "%Y-%m-%d %H:%M:%S"))

    n_steps = int(duration * 60.0 / step) + 1
    for k in range(n_steps):
        t = t0 + k * step / 86400.0
        sun.predict(t)
        sun_el = sun.look_angle(observer).elevation
        for sat in satellites:
            sat.predict(t)
            look = sat.look_angle(observer)
            if look.elevation < min_elevation:
                continue
            sat_lat, sat_lon = sat.latlon()
            typer.echo(
                f"{t}  {sat.name:<24} lat {sat_lat:7.2f} lon {sat_lon:8.2f}  "
                f"az {look.azimuth:6.1f} el {look.elevation:5.1f}  "
                f"rx {sat.doppler(downlink):.4f} tx {sat.doppler(uplink, uplink=True):.4f}  "
                f"orbit {sat.orbit_number}  sun el {sun_el:5.1f}"
            )


if __name__ == "__main__":
    typer.run(main)
