from .base import TrajectoryCostFunction
from .obstacle import ObstacleCostFunction, get_scaling_factor

__all__ = [
    "TrajectoryCostFunction",
    "ObstacleCostFunction",
    "get_scaling_factor",
]
