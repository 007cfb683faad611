from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from wordsphere.config import GOLDEN_ANGLE, SPHERE_RADIUS

if TYPE_CHECKING:
    from numpy import typing as npt


def compute_positions(n: int, radius: float = SPHERE_RADIUS) -> npt.NDArray[np.float64]:
    """
    Distribute n points near-uniformly on a sphere (Fibonacci sphere).

    Args:
        n: Number of points. Zero (or less) yields an empty (0, 3) array; the
            divisor is then taken as 1, so an empty collection never divides
            by zero.
        radius: Sphere radius; every returned point lies at this distance
            from the origin.

    Returns:
        An array of shape (n, 3) with the (x, y, z) coordinates, ordered by
        index. The result depends only on (n, radius).
    """
    total = max(n, 1)
    i = np.arange(max(n, 0), dtype=np.float64)
    t = (i + 0.5) / total  # half-step offset keeps points off the poles
    inclination = np.arccos(1.0 - 2.0 * t)
    azimuth = GOLDEN_ANGLE * i

    sin_inc = np.sin(inclination)
    return radius * np.c_[
        sin_inc * np.cos(azimuth),
        sin_inc * np.sin(azimuth),
        np.cos(inclination),
    ]
