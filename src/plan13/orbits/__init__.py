"""Anomaly conversions, including the bounded Kepler equation solver."""

from .kepler import (
    KEPLER_MAX_ITERATIONS,
    KEPLER_TOLERANCE,
    anomaly_eccentric_to_mean,
    anomaly_mean_to_eccentric,
    kepler_newton,
)

__all__ = [
    "KEPLER_MAX_ITERATIONS",
    "KEPLER_TOLERANCE",
    "anomaly_eccentric_to_mean",
    "anomaly_mean_to_eccentric",
    "kepler_newton",
]
