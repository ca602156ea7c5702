from __future__ import annotations

from dataclasses import dataclass

from .constants import MAX_SCALING_FACTOR, MAX_TRANS_VEL_MPS, SCALING_SPEED_MPS
from .utils.config import load_structured


@dataclass
class ObstacleCostConfig:
    """Parameters of the obstacle critic.

    `max_trans_vel > scaling_speed` is expected by the footprint scaling ramp
    but deliberately not asserted here.
    """

    scaling_speed: float = SCALING_SPEED_MPS
    max_trans_vel: float = MAX_TRANS_VEL_MPS
    max_scaling_factor: float = MAX_SCALING_FACTOR
    # Weight applied by a planner summing several critics
    scale: float = 1.0

    def __post_init__(self) -> None:
        assert self.scaling_speed >= 0.0, "scaling_speed must be >= 0"
        assert self.max_trans_vel >= 0.0, "max_trans_vel must be >= 0"
        assert self.max_scaling_factor >= 0.0, "max_scaling_factor must be >= 0"


def load_obstacle_cost_config(path: str, key: str | None = "obstacle_cost") -> ObstacleCostConfig:
    """Read an `ObstacleCostConfig` from a YAML file, defaults filling the gaps."""
    return load_structured(path, ObstacleCostConfig, key=key)
