import math

import numpy as np
import pytest

from goldenframe.config import GOLDEN_RATIO
from goldenframe.core.decomposer import decompose_canvas
from goldenframe.core.spiral import (
    joint_gaps,
    max_joint_gap,
    polyline_length,
    sample_arc,
    sample_spiral,
    spiral_length,
)
from goldenframe.domain.models import Arc, Orientation


def test_sample_arc_includes_both_endpoints():
    # This arc wraps past 2π; sampling must still sweep forward.
    arc = Arc(0.0, 10.0, 10.0, 1.5 * math.pi, 0.0)

    points = sample_arc(arc, 5)

    assert points.shape == (5, 2)
    np.testing.assert_allclose(points[0], arc.start_point, atol=1e-9)
    np.testing.assert_allclose(points[-1], arc.end_point, atol=1e-9)
    # Every sample lies on the circle.
    radii = np.hypot(points[:, 0] - arc.cx, points[:, 1] - arc.cy)
    np.testing.assert_allclose(radii, 10.0)


def test_sample_arc_rejects_single_sample():
    with pytest.raises(ValueError):
        sample_arc(Arc(0.0, 0.0, 1.0, 0.0, 0.5 * math.pi), 1)


def test_sample_spiral_concatenates_arcs():
    steps = decompose_canvas(300.0, 300.0 / GOLDEN_RATIO, Orientation.LANDSCAPE)

    points = sample_spiral(steps, 8)

    assert points.shape == (8 * len(steps), 2)
    assert sample_spiral((), 8).shape == (0, 2)


@pytest.mark.parametrize("orientation", list(Orientation))
def test_polyline_length_converges_to_arc_length(orientation):
    width, height = 300.0, 300.0 / GOLDEN_RATIO
    if orientation is Orientation.PORTRAIT:
        width, height = height, width
    steps = decompose_canvas(width, height, orientation)

    sampled = polyline_length(sample_spiral(steps, 64))

    assert sampled == pytest.approx(spiral_length(steps), rel=1e-3)
    assert max_joint_gap(steps) < 1e-9


def test_joint_gaps_of_single_step_are_empty():
    steps = decompose_canvas(1.0, 1.0, Orientation.LANDSCAPE)

    assert joint_gaps(steps).size == 0
    assert max_joint_gap(steps) == 0.0
    assert spiral_length(steps) == pytest.approx(math.pi / 2)
