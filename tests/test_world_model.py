import numpy as np

from obstacle_costs.constants import (
    INSCRIBED_INFLATED_OBSTACLE,
    LETHAL_OBSTACLE,
    NO_INFORMATION,
)
from obstacle_costs.costmap import CostmapSnapshot
from obstacle_costs.world_model import CostmapModel, LineIterator

# Outline of a 4x4 m square centered at (4.5, 4.5) on a 1 m grid:
# edges run along cells x=2, x=6, y=2, y=6.
SQUARE = [(2.5, 2.5), (6.5, 2.5), (6.5, 6.5), (2.5, 6.5)]
CENTER = (4.5, 4.5)


def make_model(costs: np.ndarray) -> CostmapModel:
    return CostmapModel(CostmapSnapshot(costs=costs, resolution=1.0))


def free_costs() -> np.ndarray:
    return np.zeros((10, 10), dtype=np.uint8)


def test_line_iterator_endpoints_and_length() -> None:
    cells = list(LineIterator(0, 0, 5, 2))
    assert cells[0] == (0, 0)
    assert cells[-1] == (5, 2)
    assert len(cells) == 6

    cells = list(LineIterator(5, 1, 0, 4))
    assert cells[0] == (5, 1)
    assert cells[-1] == (0, 4)
    assert len(cells) == 6


def test_line_iterator_axis_aligned_and_single_cell() -> None:
    assert list(LineIterator(2, 0, 2, 3)) == [(2, 0), (2, 1), (2, 2), (2, 3)]
    assert list(LineIterator(3, 3, 3, 3)) == [(3, 3)]


def test_free_footprint_costs_zero() -> None:
    assert make_model(free_costs()).footprint_cost(CENTER, SQUARE, 0.0, 0.0) == 0.0


def test_footprint_cost_is_max_along_outline() -> None:
    costs = free_costs()
    costs[2, 4] = 100  # bottom edge
    costs[6, 3] = 40  # top edge
    assert make_model(costs).footprint_cost(CENTER, SQUARE, 0.0, 0.0) == 100.0


def test_interior_cells_are_ignored() -> None:
    costs = free_costs()
    costs[4, 4] = LETHAL_OBSTACLE
    assert make_model(costs).footprint_cost(CENTER, SQUARE, 0.0, 0.0) == 0.0


def test_lethal_on_outline() -> None:
    costs = free_costs()
    costs[4, 6] = LETHAL_OBSTACLE  # right edge
    assert make_model(costs).footprint_cost(CENTER, SQUARE, 0.0, 0.0) == -1.0


def test_inscribed_on_outline_is_not_collision() -> None:
    costs = free_costs()
    costs[4, 6] = INSCRIBED_INFLATED_OBSTACLE
    cost = make_model(costs).footprint_cost(CENTER, SQUARE, 0.0, 0.0)
    assert cost == float(INSCRIBED_INFLATED_OBSTACLE)


def test_unknown_on_closing_edge() -> None:
    costs = free_costs()
    costs[4, 2] = NO_INFORMATION  # left edge, last vertex back to first
    assert make_model(costs).footprint_cost(CENTER, SQUARE, 0.0, 0.0) == -2.0


def test_off_map() -> None:
    model = make_model(free_costs())
    shifted = [(x + 4.0, y) for x, y in SQUARE]
    assert model.footprint_cost((8.5, 4.5), shifted, 0.0, 0.0) == -3.0
    assert model.footprint_cost((-0.5, 4.5), SQUARE, 0.0, 0.0) == -3.0


def test_partial_footprint_uses_origin_cell() -> None:
    costs = free_costs()
    costs[4, 4] = 50
    model = make_model(costs)
    assert model.footprint_cost(CENTER, SQUARE[:2], 0.0, 0.0) == 50.0

    costs[4, 4] = INSCRIBED_INFLATED_OBSTACLE
    assert make_model(costs).footprint_cost(CENTER, SQUARE[:1], 0.0, 0.0) == -1.0

    costs[4, 4] = NO_INFORMATION
    assert make_model(costs).footprint_cost(CENTER, [], 0.0, 0.0) == -2.0
