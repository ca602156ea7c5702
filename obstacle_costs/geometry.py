"""Footprint geometry helpers.

Footprints are `(N, 2)` float arrays of vertices in the robot frame
(+X forward, +Y left), in order around the outline.
"""

from __future__ import annotations

from math import cos, hypot, sin
from typing import Iterable, Tuple

import numpy as np


def as_footprint(points: Iterable) -> np.ndarray:
    """Coerce a sequence of (x, y) vertices into a read-only `(N, 2)` array."""
    arr = np.array(points, dtype=np.float64)
    if arr.size == 0:
        arr = np.zeros((0, 2), dtype=np.float64)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"footprint must be (N,2), got shape {arr.shape}")
    arr.flags.writeable = False
    return arr


def transform_point(
    x: float, y: float, cos_th: float, sin_th: float, scale: float, px: float, py: float
) -> Tuple[float, float]:
    """Scale (px, py) about the robot origin, rotate it, then translate to (x, y)."""
    return (
        x + (scale * px * cos_th - scale * py * sin_th),
        y + (scale * px * sin_th + scale * py * cos_th),
    )


def orient_footprint(
    x: float, y: float, theta: float, footprint: np.ndarray, scale: float = 1.0
) -> np.ndarray:
    """Place a robot-frame footprint at pose (x, y, theta), scaled by `scale`."""
    c, s = cos(theta), sin(theta)
    out = np.empty((len(footprint), 2), dtype=np.float64)
    for k, (px, py) in enumerate(footprint):
        out[k] = transform_point(x, y, c, s, scale, float(px), float(py))
    return out


def _point_segment_distance(
    px: float, py: float, x0: float, y0: float, x1: float, y1: float
) -> float:
    dx, dy = x1 - x0, y1 - y0
    L2 = dx * dx + dy * dy
    if L2 == 0.0:
        return hypot(px - x0, py - y0)
    t = max(0.0, min(1.0, ((px - x0) * dx + (py - y0) * dy) / L2))
    return hypot(px - (x0 + t * dx), py - (y0 + t * dy))


def footprint_radii(footprint: np.ndarray) -> Tuple[float, float]:
    """Return (inscribed, circumscribed) radii of a footprint about its origin.

    The inscribed radius is the smallest distance from the origin to any edge,
    closing edge included. The circumscribed radius is the largest vertex
    distance. An empty footprint has both radii zero.
    """
    n = len(footprint)
    if n == 0:
        return 0.0, 0.0
    circumscribed = float(np.max(np.hypot(footprint[:, 0], footprint[:, 1])))
    if n == 1:
        return circumscribed, circumscribed
    inscribed = min(
        _point_segment_distance(
            0.0,
            0.0,
            float(footprint[i, 0]),
            float(footprint[i, 1]),
            float(footprint[(i + 1) % n, 0]),
            float(footprint[(i + 1) % n, 1]),
        )
        for i in range(n)
    )
    return float(inscribed), circumscribed
