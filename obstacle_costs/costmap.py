"""Cost grid snapshot and the provider it is copied from.

Grid convention: costs[my, mx] covers
[origin_x + mx*res, origin_x + (mx+1)*res) x [origin_y + my*res, origin_y + (my+1)*res).
Cell values are uint8 with the special values in `obstacle_costs.constants`.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Iterable, Optional, Protocol, Tuple

import numpy as np

from .geometry import as_footprint, footprint_radii

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class CostmapSnapshot:
    """Immutable point-in-time copy of a cost grid.

    The snapshot owns a private read-only copy of the cost array, so it can be
    shared between evaluators while the live grid keeps changing.
    """

    costs: np.ndarray
    resolution: float
    origin_x: float = 0.0
    origin_y: float = 0.0
    inscribed_radius: float = 0.0
    circumscribed_radius: float = 0.0

    def __post_init__(self) -> None:
        costs = np.array(self.costs, dtype=np.uint8, copy=True)
        if costs.ndim != 2:
            raise ValueError("costs must be 2D")
        if not self.resolution > 0.0:
            raise ValueError("resolution must be > 0")
        costs.flags.writeable = False
        object.__setattr__(self, "costs", costs)
        object.__setattr__(self, "resolution", float(self.resolution))

    @property
    def size_x(self) -> int:
        return int(self.costs.shape[1])

    @property
    def size_y(self) -> int:
        return int(self.costs.shape[0])

    def world_to_map(self, wx: float, wy: float) -> Optional[Tuple[int, int]]:
        """Return the (mx, my) cell containing (wx, wy), or None if off the map."""
        if wx < self.origin_x or wy < self.origin_y:
            return None
        mx = int((wx - self.origin_x) / self.resolution)
        my = int((wy - self.origin_y) / self.resolution)
        if mx < self.size_x and my < self.size_y:
            return mx, my
        return None

    def get_cost(self, mx: int, my: int) -> int:
        return int(self.costs[my, mx])


class CostmapProvider(Protocol):
    """Source of grid snapshots and the current robot footprint."""

    def get_costmap_copy(self) -> Optional[CostmapSnapshot]:
        """Snapshot of the current grid, or None if no grid is available yet."""
        ...

    def get_robot_footprint(self) -> np.ndarray:
        """Robot-frame footprint as an (N, 2) array."""
        ...


class LiveCostmap:
    """Thread-safe holder for a cost grid written by an external producer.

    The producer pushes whole cost arrays through `update_costs`; planners
    take snapshots through `get_costmap_copy`. Radii are derived from the
    footprint whenever it changes.
    """

    def __init__(
        self,
        resolution: float,
        origin_x: float = 0.0,
        origin_y: float = 0.0,
        footprint: Iterable = (),
    ) -> None:
        if not resolution > 0.0:
            raise ValueError("resolution must be > 0")
        self.resolution = float(resolution)
        self.origin_x = float(origin_x)
        self.origin_y = float(origin_y)
        self._lock = threading.Lock()
        self._costs: Optional[np.ndarray] = None
        self._footprint = as_footprint(footprint)
        self._radii = footprint_radii(self._footprint)

    def update_costs(self, costs: np.ndarray) -> None:
        arr = np.array(costs, dtype=np.uint8, copy=True)
        if arr.ndim != 2:
            raise ValueError("costs must be 2D")
        with self._lock:
            self._costs = arr

    def set_footprint(self, points: Iterable) -> None:
        fp = as_footprint(points)
        radii = footprint_radii(fp)
        with self._lock:
            self._footprint = fp
            self._radii = radii
        logger.debug(
            "Footprint updated: %d vertices, inscribed=%.3f circumscribed=%.3f",
            len(fp),
            radii[0],
            radii[1],
        )

    def get_costmap_copy(self) -> Optional[CostmapSnapshot]:
        with self._lock:
            if self._costs is None:
                return None
            inscribed, circumscribed = self._radii
            return CostmapSnapshot(
                costs=self._costs,
                resolution=self.resolution,
                origin_x=self.origin_x,
                origin_y=self.origin_y,
                inscribed_radius=inscribed,
                circumscribed_radius=circumscribed,
            )

    def get_robot_footprint(self) -> np.ndarray:
        with self._lock:
            return self._footprint.copy()
