"""Footprint collision checking over a cost grid.

`WorldModel` is the single capability the obstacle critic needs: given the
robot origin and an oriented footprint, return a cost or a negative code.
`CostmapModel` implements it by rasterizing the footprint outline onto a
`CostmapSnapshot`; other geometric backends can subclass `WorldModel`.
"""

from __future__ import annotations

import abc
from typing import Iterator, Sequence, Tuple

from .constants import (
    FOOTPRINT_LETHAL,
    FOOTPRINT_OFF_MAP,
    FOOTPRINT_UNKNOWN,
    INSCRIBED_INFLATED_OBSTACLE,
    LETHAL_OBSTACLE,
    NO_INFORMATION,
)
from .costmap import CostmapSnapshot

Point = Tuple[float, float]


class LineIterator:
    """Bresenham traversal of the cells between two grid cells, both inclusive."""

    def __init__(self, x0: int, y0: int, x1: int, y1: int) -> None:
        self.x0, self.y0 = int(x0), int(y0)
        self.x1, self.y1 = int(x1), int(y1)

    def __iter__(self) -> Iterator[Tuple[int, int]]:
        x, y = self.x0, self.y0
        dx = abs(self.x1 - self.x0)
        dy = abs(self.y1 - self.y0)
        sx = 1 if self.x1 >= self.x0 else -1
        sy = 1 if self.y1 >= self.y0 else -1
        err = dx - dy
        while True:
            yield x, y
            if x == self.x1 and y == self.y1:
                return
            e2 = 2 * err
            if e2 > -dy:
                err -= dy
                x += sx
            if e2 < dx:
                err += dx
                y += sy


class WorldModel(abc.ABC):
    @abc.abstractmethod
    def footprint_cost(
        self,
        position: Point,
        footprint: Sequence[Point],
        inscribed_radius: float,
        circumscribed_radius: float,
    ) -> float:
        """Return the cost of placing `footprint` around `position`.

        Negative values mean the placement is illegal; non-negative values are
        costs where larger is worse.
        """
        raise NotImplementedError


class CostmapModel(WorldModel):
    """Checks a footprint against the cells under its outline.

    Returns:
      -1 if the outline touches a lethal cell (or, for fewer than three
         vertices, the origin cell is lethal or inscribed),
      -2 if it touches a cell with no information,
      -3 if the origin or a vertex lies off the map,
      otherwise the largest cell cost found.
    """

    def __init__(self, costmap: CostmapSnapshot) -> None:
        self.costmap = costmap

    def footprint_cost(
        self,
        position: Point,
        footprint: Sequence[Point],
        inscribed_radius: float,
        circumscribed_radius: float,
    ) -> float:
        cell = self.costmap.world_to_map(position[0], position[1])
        if cell is None:
            return FOOTPRINT_OFF_MAP

        # Not a polygon, fall back to the cell under the robot
        if len(footprint) < 3:
            cost = self.costmap.get_cost(*cell)
            if cost == NO_INFORMATION:
                return FOOTPRINT_UNKNOWN
            if cost in (LETHAL_OBSTACLE, INSCRIBED_INFLATED_OBSTACLE):
                return FOOTPRINT_LETHAL
            return float(cost)

        footprint_cost = 0.0
        n = len(footprint)
        for i in range(n):
            start = self.costmap.world_to_map(footprint[i][0], footprint[i][1])
            end = self.costmap.world_to_map(footprint[(i + 1) % n][0], footprint[(i + 1) % n][1])
            if start is None or end is None:
                return FOOTPRINT_OFF_MAP
            line_cost = self.line_cost(start[0], end[0], start[1], end[1])
            if line_cost < 0:
                return line_cost
            footprint_cost = max(line_cost, footprint_cost)
        return footprint_cost

    def line_cost(self, x0: int, x1: int, y0: int, y1: int) -> float:
        """Largest cell cost along a grid line, or the first negative point cost."""
        line_cost = 0.0
        for x, y in LineIterator(x0, y0, x1, y1):
            point_cost = self.point_cost(x, y)
            if point_cost < 0:
                return point_cost
            if line_cost < point_cost:
                line_cost = point_cost
        return line_cost

    def point_cost(self, x: int, y: int) -> float:
        cost = self.costmap.get_cost(x, y)
        if cost == NO_INFORMATION:
            return FOOTPRINT_UNKNOWN
        if cost == LETHAL_OBSTACLE:
            return FOOTPRINT_LETHAL
        return float(cost)
