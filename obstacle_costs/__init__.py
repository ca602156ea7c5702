"""Obstacle cost evaluation for local trajectory planners."""

from .config import ObstacleCostConfig, load_obstacle_cost_config
from .cost_functions import ObstacleCostFunction, TrajectoryCostFunction, get_scaling_factor
from .costmap import CostmapProvider, CostmapSnapshot, LiveCostmap
from .trajectory import Trajectory
from .world_model import CostmapModel, LineIterator, WorldModel

__all__ = [
    "ObstacleCostConfig",
    "load_obstacle_cost_config",
    "ObstacleCostFunction",
    "TrajectoryCostFunction",
    "get_scaling_factor",
    "CostmapProvider",
    "CostmapSnapshot",
    "LiveCostmap",
    "Trajectory",
    "CostmapModel",
    "LineIterator",
    "WorldModel",
]
