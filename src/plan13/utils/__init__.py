"""Shared utility functions for plan13."""

from plan13.utils._angle import to_radians, wrap_to_2pi

__all__ = [
    "to_radians",
    "wrap_to_2pi",
]
