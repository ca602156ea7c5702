"""Candidate trajectory container.

A trajectory is the forward simulation of one velocity command: an ordered
list of (x, y, theta) poses plus the single (xv, yv, thetav) command that
produced them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Tuple

import numpy as np


def _empty_points() -> np.ndarray:
    return np.zeros((0, 3), dtype=np.float64)


@dataclass(eq=False)
class Trajectory:
    """Poses of a simulated command.

    - xv, yv: planar velocity of the whole trajectory (m/s, robot frame)
    - thetav: angular velocity (rad/s)
    - time_delta: time between consecutive poses (s)
    - cost: slot for the selection loop; -1 means unscored
    - points: (N, 3) array of (x, y, theta)
    """

    xv: float = 0.0
    yv: float = 0.0
    thetav: float = 0.0
    time_delta: float = 0.0
    cost: float = -1.0
    points: np.ndarray = field(default_factory=_empty_points)

    def __post_init__(self) -> None:
        pts = np.asarray(self.points, dtype=np.float64)
        if pts.size == 0:
            pts = _empty_points()
        if pts.ndim != 2 or pts.shape[1] != 3:
            raise ValueError(f"points must be (N,3), got shape {pts.shape}")
        self.points = pts

    def __len__(self) -> int:
        return int(self.points.shape[0])

    def __iter__(self) -> Iterator[Tuple[float, float, float]]:
        for i in range(len(self)):
            yield self.get_point(i)

    @property
    def speed_xy(self) -> float:
        """Magnitude of the planar velocity."""
        return float(np.hypot(self.xv, self.yv))

    def get_point(self, index: int) -> Tuple[float, float, float]:
        x, y, th = self.points[index]
        return float(x), float(y), float(th)

    def add_point(self, x: float, y: float, th: float) -> None:
        self.points = np.vstack([self.points, [[x, y, th]]])

    def reset_points(self) -> None:
        self.points = _empty_points()

    def get_endpoint(self) -> Tuple[float, float, float]:
        if len(self) == 0:
            raise IndexError("trajectory has no points")
        return self.get_point(len(self) - 1)
