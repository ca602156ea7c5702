from __future__ import annotations

import abc

from ..trajectory import Trajectory


class TrajectoryCostFunction(abc.ABC):
    """A critic scoring one trajectory at a time.

    A planner calls `prepare()` once per planning cycle, then
    `score_trajectory()` for every candidate, and weights the result by
    `scale` when summing critics. Negative scores mark illegal trajectories.
    """

    def __init__(self, scale: float = 1.0) -> None:
        self.scale = float(scale)

    @abc.abstractmethod
    def prepare(self) -> bool:
        """Refresh per-cycle state. Return False if scoring is not possible."""
        raise NotImplementedError

    @abc.abstractmethod
    def score_trajectory(self, traj: Trajectory) -> float:
        raise NotImplementedError
