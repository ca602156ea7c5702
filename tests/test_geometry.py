import math

import numpy as np
import pytest

from obstacle_costs.geometry import as_footprint, footprint_radii, orient_footprint


SQUARE = [(0.2, 0.2), (-0.2, 0.2), (-0.2, -0.2), (0.2, -0.2)]


def test_as_footprint_shapes() -> None:
    fp = as_footprint(SQUARE)
    assert fp.shape == (4, 2)
    assert not fp.flags.writeable
    assert as_footprint([]).shape == (0, 2)
    with pytest.raises(ValueError):
        as_footprint([1.0, 2.0, 3.0])


def test_orient_footprint_identity() -> None:
    fp = as_footprint(SQUARE)
    assert np.allclose(orient_footprint(0.0, 0.0, 0.0, fp), fp)


def test_orient_footprint_preserves_distances() -> None:
    fp = as_footprint(SQUARE)
    out = orient_footprint(3.0, -1.0, 1.2345, fp, 2.0)
    d = np.hypot(out[:, 0] - 3.0, out[:, 1] + 1.0)
    assert np.allclose(d, 2.0 * math.hypot(0.2, 0.2))


def test_orient_empty_footprint() -> None:
    assert orient_footprint(1.0, 1.0, 0.3, as_footprint([])).shape == (0, 2)


def test_footprint_radii_square() -> None:
    inscribed, circumscribed = footprint_radii(as_footprint(SQUARE))
    assert inscribed == pytest.approx(0.2)
    assert circumscribed == pytest.approx(0.2 * math.sqrt(2.0))


def test_footprint_radii_rectangle_offset() -> None:
    # front edge 0.5 ahead, rear edge 0.1 behind, sides 0.3
    fp = as_footprint([(0.5, 0.3), (-0.1, 0.3), (-0.1, -0.3), (0.5, -0.3)])
    inscribed, circumscribed = footprint_radii(fp)
    assert inscribed == pytest.approx(0.1)
    assert circumscribed == pytest.approx(math.hypot(0.5, 0.3))


def test_footprint_radii_degenerate() -> None:
    assert footprint_radii(as_footprint([])) == (0.0, 0.0)
    assert footprint_radii(as_footprint([(0.3, 0.4)])) == pytest.approx((0.5, 0.5))
