"""Visibility footprints and equirectangular map projection.

A footprint is the small circle on the Earth's surface from which a body at
a given distance is on the horizon.  Its angular radius, seen from Earth's
centre, is ``arccos(Re / distance)``.  The circle is first built around
``lat = lon = 0`` on a unit sphere, then rotated up by the sub-point
latitude and around by its longitude.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from plan13.config import get_dtype
from plan13.constants import DEFAULT_CONSTANTS


def footprint_vectors(
    latitude: float,
    longitude: float,
    radius_km: float,
    n_points: int,
    earth_radius: float = DEFAULT_CONSTANTS.re,
) -> Array:
    """Compute unit vectors to points on a footprint circle.

    Points are spaced ``2pi / n_points`` apart around the circle, starting
    due north of the sub-point.

    Args:
        latitude: Sub-point latitude. Units: *deg*
        longitude: Sub-point longitude. Units: *deg*
        radius_km: Distance of the body from Earth's centre. Units: *km*
        n_points: Number of points.
        earth_radius: Earth radius. Units: *km*

    Returns:
        Array of shape ``(n_points, 3)`` of geocentric unit vectors.
    """
    dtype = get_dtype()
    srad = jnp.arccos(jnp.asarray(earth_radius / radius_km, dtype=dtype))
    sra = jnp.sin(srad)
    cra = jnp.cos(srad)

    lat = jnp.deg2rad(jnp.asarray(latitude, dtype=dtype))
    lon = jnp.deg2rad(jnp.asarray(longitude, dtype=dtype))
    cla, sla = jnp.cos(lat), jnp.sin(lat)
    clo, slo = jnp.cos(lon), jnp.sin(lon)

    # Circle centred on lat=0, lon=0 of a unit sphere
    angle = 2.0 * jnp.pi * jnp.arange(n_points, dtype=dtype) / n_points
    x0 = jnp.full_like(angle, cra)
    y0 = sra * jnp.sin(angle)
    z0 = sra * jnp.cos(angle)

    # Rotate "up" through latitude
    x1 = x0 * cla - z0 * sla
    z1 = x0 * sla + z0 * cla

    # Rotate "around" through longitude
    x2 = x1 * clo - y0 * slo
    y2 = x1 * slo + y0 * clo

    return jnp.stack([x2, y2, z1], axis=-1)


def footprint_circle(
    latitude: float,
    longitude: float,
    radius_km: float,
    n_points: int,
    earth_radius: float = DEFAULT_CONSTANTS.re,
) -> Array:
    """Compute the horizon circle around a sub-point as latitude/longitude pairs.

    Args:
        latitude: Sub-point latitude. Units: *deg*
        longitude: Sub-point longitude. Units: *deg*
        radius_km: Distance of the body from Earth's centre. Units: *km*
        n_points: Number of points on the polygon.
        earth_radius: Earth radius. Units: *km*

    Returns:
        Array of shape ``(n_points, 2)`` of ``[lat, lon]`` in degrees.

    Examples:
        ```python
        from plan13.footprint import footprint_circle
        pts = footprint_circle(51.5, -0.1, 6378.137 + 420.0, 36)
        ```
    """
    v = footprint_vectors(latitude, longitude, radius_km, n_points, earth_radius)
    lat = jnp.rad2deg(jnp.arcsin(jnp.clip(v[:, 2], -1.0, 1.0)))
    lon = jnp.rad2deg(jnp.arctan2(v[:, 1], v[:, 0]))
    return jnp.stack([lat, lon], axis=-1)


def position_latlon_to_map(
    latitude: ArrayLike,
    longitude: ArrayLike,
    map_width: float,
    map_height: float,
):
    """Project latitude/longitude onto an equirectangular map.

    ``(90, -180)`` maps to the top-left corner ``(0, 0)``.  Inputs outside
    the usual ranges are not clamped and give off-map coordinates.

    Args:
        latitude: Latitude. Units: *deg*
        longitude: Longitude. Units: *deg*
        map_width: Map width in pixels.
        map_height: Map height in pixels.

    Returns:
        ``(x, y)`` map coordinates, of the same kind as the inputs.
    """
    x = (180.0 + longitude) / 360.0 * map_width
    y = (90.0 - latitude) / 180.0 * map_height
    return x, y


def footprint_to_map(latlon: ArrayLike, map_width: int, map_height: int) -> Array:
    """Convert a ``(n, 2)`` latitude/longitude polygon into integer pixels.

    Coordinates are truncated toward zero.

    Args:
        latlon: ``[lat, lon]`` pairs in degrees.
        map_width: Map width in pixels.
        map_height: Map height in pixels.

    Returns:
        Array of shape ``(n, 2)`` of ``[x, y]`` pixel coordinates (int32).
    """
    latlon = jnp.asarray(latlon, dtype=get_dtype())
    x, y = position_latlon_to_map(latlon[:, 0], latlon[:, 1], map_width, map_height)
    return jnp.stack([x, y], axis=-1).astype(jnp.int32)
