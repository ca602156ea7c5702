"""Obstacle critic: scores a trajectory by the grid cells its footprint covers.

The robot footprint is inflated with the trajectory's planar speed so that
fast commands keep further away from obstacles, placed at every pose of the
trajectory and checked through a `WorldModel`. Illegal trajectories are
reported in-band with the sentinels `COLLISION_COST` and `OFF_MAP_COST`.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

import numpy as np

from ..config import ObstacleCostConfig
from ..constants import COLLISION_COST, FREE_SPACE, OFF_MAP_COST
from ..costmap import CostmapProvider, CostmapSnapshot
from ..geometry import as_footprint, orient_footprint
from ..trajectory import Trajectory
from ..world_model import CostmapModel, WorldModel
from .base import TrajectoryCostFunction

logger = logging.getLogger(__name__)

WorldModelFactory = Callable[[CostmapSnapshot], WorldModel]


def get_scaling_factor(
    speed_xy: float, scaling_speed: float, max_trans_vel: float, max_scaling_factor: float
) -> float:
    """Footprint scale for a planar speed.

    1.0 up to `scaling_speed`, then a linear ramp reaching
    `1 + max_scaling_factor` at `max_trans_vel`. The ramp is not clamped above
    `max_trans_vel` and assumes `max_trans_vel > scaling_speed`: when the two
    are equal, any speed above `scaling_speed` raises `ZeroDivisionError`.
    """
    scale = 1.0
    if speed_xy > scaling_speed:
        ratio = (speed_xy - scaling_speed) / (max_trans_vel - scaling_speed)
        scale = max_scaling_factor * ratio + 1.0
    return scale


class ObstacleCostFunction(TrajectoryCostFunction):
    """Obstacle critic over a per-cycle snapshot of the cost grid.

    Args:
        costmap_provider: source of grid snapshots and the robot footprint.
            Without one the critic can never be prepared.
        config: scaling parameters and critic weight.
        world_model_factory: builds the footprint checker for each snapshot.
    """

    def __init__(
        self,
        costmap_provider: Optional[CostmapProvider],
        config: Optional[ObstacleCostConfig] = None,
        world_model_factory: WorldModelFactory = CostmapModel,
    ) -> None:
        cfg = config or ObstacleCostConfig()
        super().__init__(scale=cfg.scale)
        self._provider = costmap_provider
        self._world_model_factory = world_model_factory
        self._costmap: Optional[CostmapSnapshot] = None
        self._world_model: Optional[WorldModel] = None
        self._footprint = as_footprint(())
        self.set_params(cfg.max_trans_vel, cfg.max_scaling_factor, cfg.scaling_speed)
        if costmap_provider is not None:
            self.prepare()

    @property
    def prepared(self) -> bool:
        return self._costmap is not None and self._world_model is not None

    @property
    def costmap(self) -> Optional[CostmapSnapshot]:
        return self._costmap

    @property
    def footprint(self) -> np.ndarray:
        return self._footprint

    def set_params(self, max_trans_vel: float, max_scaling_factor: float, scaling_speed: float) -> None:
        self.max_trans_vel = float(max_trans_vel)
        self.max_scaling_factor = float(max_scaling_factor)
        self.scaling_speed = float(scaling_speed)
        if self.max_trans_vel <= self.scaling_speed:
            logger.warning(
                "max_trans_vel (%.3f) <= scaling_speed (%.3f): footprint scaling is ill-defined; "
                "if equal, scoring a faster trajectory raises ZeroDivisionError",
                self.max_trans_vel,
                self.scaling_speed,
            )

    def prepare(self) -> bool:
        """Take a fresh grid snapshot and footprint for this planning cycle."""
        if self._provider is None:
            logger.warning("Obstacle critic has no costmap provider; cannot prepare")
            return False
        costmap = self._provider.get_costmap_copy()
        if costmap is None:
            # Never score against a stale snapshot
            self._costmap = None
            self._world_model = None
            logger.warning("Costmap not available yet; obstacle critic is unprepared")
            return False
        self._footprint = as_footprint(self._provider.get_robot_footprint())
        self._costmap = costmap
        self._world_model = self._world_model_factory(costmap)
        logger.debug(
            "Obstacle critic prepared: %dx%d cells @ %.3f m, %d footprint vertices",
            costmap.size_x,
            costmap.size_y,
            costmap.resolution,
            len(self._footprint),
        )
        return True

    def get_scaling_factor(self, traj: Trajectory) -> float:
        return get_scaling_factor(
            traj.speed_xy, self.scaling_speed, self.max_trans_vel, self.max_scaling_factor
        )

    def score_trajectory(self, traj: Trajectory) -> float:
        """Cost of the last pose of `traj`, or a sentinel for the first illegal pose."""
        if not self.prepared:
            raise RuntimeError("ObstacleCostFunction must be prepared before scoring")
        cost = float(FREE_SPACE)
        scale = self.get_scaling_factor(traj)
        for px, py, pth in traj:
            cost = self.footprint_cost(
                px, py, pth, scale, self._footprint, self._costmap, self._world_model
            )
            if cost < 0:
                return cost
        return cost

    @staticmethod
    def footprint_cost(
        x: float,
        y: float,
        th: float,
        scale: float,
        footprint: np.ndarray,
        costmap: CostmapSnapshot,
        world_model: WorldModel,
    ) -> float:
        """Cost of a single pose.

        The oriented footprint is handed to the world model one vertex at a
        time, so every prefix of the outline is checked in turn.

        A negative world-model result is reported as `COLLISION_COST` ahead of
        the off-map check on the origin. `OFF_MAP_COST` is therefore only
        returned for an empty footprint, or by a world model that accepts an
        off-map origin; `CostmapModel` rejects one itself, so an off-map pose
        scores `COLLISION_COST` with it.
        """
        cell = costmap.world_to_map(x, y)
        if len(footprint) == 0:
            if cell is None:
                return OFF_MAP_COST
            return float(costmap.get_cost(*cell))

        oriented = orient_footprint(x, y, th, footprint, scale)
        occ_cost = float(FREE_SPACE)
        for k in range(1, len(oriented) + 1):
            footprint_cost = world_model.footprint_cost(
                (x, y),
                oriented[:k],
                costmap.inscribed_radius,
                costmap.circumscribed_radius,
            )
            if footprint_cost < 0:
                return COLLISION_COST
            # Trajectories leaving the map are not allowed
            if cell is None:
                return OFF_MAP_COST
            occ_cost = max(occ_cost, footprint_cost, float(costmap.get_cost(*cell)))
        return occ_cost
