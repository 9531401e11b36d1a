import random

import pytest

from cg2d.errors import DegenerateHull, InvalidInput
from cg2d.geom import Pt
from cg2d.pipeline import convex_hull_2d

REFERENCE = [
    (0, 3), (1, 1), (2, 2), (4, 4), (0, 0),
    (1, 2), (4, 1), (3, 3), (0, 2), (4, 2),
]


def test_internal_backend():
    assert convex_hull_2d(REFERENCE) == [Pt(0, 3), Pt(4, 4), Pt(4, 1), Pt(0, 0)]


def test_scipy_backend_reference():
    assert convex_hull_2d(REFERENCE, backend="scipy") == [Pt(0, 3), Pt(4, 4), Pt(4, 1), Pt(0, 0)]


@pytest.mark.parametrize("seed", range(5))
def test_backends_agree(seed):
    rng = random.Random(seed)
    cloud = [(rng.randint(-1000, 1000), rng.randint(-1000, 1000)) for _ in range(150)]
    ours = convex_hull_2d(cloud, backend="internal")
    qhull = convex_hull_2d(cloud, backend="SciPy")
    assert set(ours) == set(qhull)
    assert ours == qhull


@pytest.mark.parametrize("points", [[(0, 0), (1, 1)], [(0, 0), (1, 1), (2, 2), (3, 3)]])
def test_scipy_backend_degenerate(points):
    with pytest.raises(DegenerateHull):
        convex_hull_2d(points, backend="scipy")


def test_empty_input():
    with pytest.raises(InvalidInput):
        convex_hull_2d([], backend="scipy")


def test_unknown_backend():
    with pytest.raises(ValueError, match="backend"):
        convex_hull_2d(REFERENCE, backend="cgal")
