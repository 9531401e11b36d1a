import logging
import random

import pytest

from cg2d.errors import DegenerateHull, InvalidInput
from cg2d.geom import Pt
from cg2d.hull import ConvexHull2D, convex_hull, format_hull
from cg2d.predicates import orient2d

REFERENCE = [
    (0, 3), (1, 1), (2, 2), (4, 4), (0, 0),
    (1, 2), (4, 1), (3, 3), (0, 2), (4, 2),
]


@pytest.fixture
def reference_hull():
    return ConvexHull2D(REFERENCE)


def random_cloud(seed, n=60, size=30):
    rng = random.Random(seed)
    return [(rng.randint(-size, size), rng.randint(-size, size)) for _ in range(n)]


def test_reference_scenario(reference_hull):
    assert reference_hull.vertices() == [Pt(0, 3), Pt(4, 4), Pt(4, 1), Pt(0, 0)]


def test_reference_text(reference_hull):
    assert reference_hull.to_text() == (
        "Convex Hull\n"
        " x: 0 y: 3\n"
        " x: 4 y: 4\n"
        " x: 4 y: 1\n"
        " x: 0 y: 0"
    )


def test_format_hull_empty():
    assert format_hull([]) == "Convex Hull"


def test_collinear_edge_point_is_pruned():
    assert convex_hull([(0, 0), (1, 0), (2, 0), (1, 1)]) == [Pt(1, 1), Pt(2, 0), Pt(0, 0)]


def test_collinear_points_on_last_ray_are_pruned():
    vs = convex_hull([(0, 0), (2, 0), (2, 2), (0, 2), (0, 1)])
    assert vs == [Pt(0, 2), Pt(2, 2), Pt(2, 0), Pt(0, 0)]


def test_pivot_is_lowest_then_leftmost():
    hull = ConvexHull2D([(3, 1), (5, 1), (1, 1), (2, 4)])
    assert hull.pivot == Pt(1, 1)
    assert hull.P[0] == Pt(1, 1)
    assert hull.vertices()[-1] == Pt(1, 1)


def test_input_is_not_mutated():
    pts = list(REFERENCE)
    ConvexHull2D(pts)
    assert pts == REFERENCE


def test_duplicates_do_not_break_the_hull():
    pts = REFERENCE + [(0, 0), (4, 4), (2, 2), (0, 3)]
    assert convex_hull(pts) == [Pt(0, 3), Pt(4, 4), Pt(4, 1), Pt(0, 0)]


def test_large_coordinates():
    big = 10**15
    pts = [(-big, -big), (big, -big), (big, big), (-big, big), (0, 0), (big - 1, 0)]
    assert convex_hull(pts) == [Pt(-big, big), Pt(big, big), Pt(big, -big), Pt(-big, -big)]


@pytest.mark.parametrize("seed", range(8))
def test_validate_random_clouds(seed):
    hull = ConvexHull2D(random_cloud(seed))
    report = hull.validate()
    assert not report["degenerate"]
    assert report["foreign_vertices"] == []
    assert report["bad_turns"] == []
    assert report["outside_points"] == []
    assert report["pivot_missing"] is False


@pytest.mark.parametrize("seed", range(4))
def test_clockwise_convexity(seed):
    vs = convex_hull(random_cloud(seed))
    n = len(vs)
    assert all(orient2d(vs[i], vs[(i + 1) % n], vs[(i + 2) % n]) < 0 for i in range(n))
    assert ConvexHull2D(random_cloud(seed)).area2() < 0


@pytest.mark.parametrize("seed", range(4))
def test_permutation_gives_same_vertex_set(seed):
    pts = sorted(set(random_cloud(seed)))
    expected = convex_hull(pts)
    rng = random.Random(seed)
    for _ in range(5):
        rng.shuffle(pts)
        got = convex_hull(pts)
        assert set(got) == set(expected)
        assert got == expected


def test_contains(reference_hull):
    assert reference_hull.contains((2, 2))
    assert reference_hull.contains((4, 2))
    assert reference_hull.contains(Pt(0, 0))
    assert not reference_hull.contains((5, 5))
    assert not reference_hull.contains((-1, 1))


def test_area2(reference_hull):
    # (0,0) (4,1) (4,4) (0,3): площа 12
    assert reference_hull.area2() == -24


def test_empty_input():
    with pytest.raises(InvalidInput):
        ConvexHull2D([])


def test_single_point(caplog):
    with caplog.at_level(logging.WARNING, logger="cg2d.hull"):
        hull = ConvexHull2D([(5, 5)])
    assert hull.vertices() == [Pt(5, 5)]
    assert hull.is_degenerate()
    assert hull.area2() == 0
    assert hull.contains((5, 5))
    assert "Degenerate hull" in caplog.text


def test_two_points():
    hull = ConvexHull2D([(3, 1), (0, 0)])
    assert hull.vertices() == [Pt(3, 1), Pt(0, 0)]
    assert hull.is_degenerate()
    assert hull.contains((0, 0))
    assert not hull.contains((1, 1))


def test_all_collinear_keeps_extremes():
    hull = ConvexHull2D([(2, 2), (0, 0), (3, 3), (1, 1)])
    assert hull.vertices() == [Pt(3, 3), Pt(0, 0)]
    report = hull.validate()
    assert report["degenerate"]
    assert report["outside_points"] == []


def test_all_coincident():
    assert convex_hull([(1, 1)] * 3) == [Pt(1, 1), Pt(1, 1)]


@pytest.mark.parametrize(
    "points",
    [
        [(0, 0)],
        [(0, 0), (1, 1)],
        [(0, 0), (1, 1), (2, 2), (5, 5)],
        [(2, 7)] * 4,
    ]
)
def test_strict_mode_raises_on_degenerate(points):
    with pytest.raises(DegenerateHull) as info:
        ConvexHull2D(points, strict=True)
    assert info.value.vertices


def test_strict_mode_accepts_proper_hull():
    assert convex_hull(REFERENCE, strict=True) == [Pt(0, 3), Pt(4, 4), Pt(4, 1), Pt(0, 0)]
