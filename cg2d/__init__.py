"""
cg2d — мінімальна бібліотека для 2D комп'ютерної геометрії на цілих координатах.
Зараз: опукла оболонка сканом Грехема + перехресна перевірка через SciPy/Qhull.
"""

__version__ = "0.1.0"

from cg2d.geom import Pt, as_points
from cg2d.predicates import orient2d, turn, polar_compare, CCW, CW, COLLINEAR
from cg2d.errors import InvalidInput, DegenerateHull
from cg2d.hull import ConvexHull2D, convex_hull, format_hull
from cg2d.pipeline import convex_hull_2d

__all__ = [
    "Pt", "as_points",
    "orient2d", "turn", "polar_compare", "CCW", "CW", "COLLINEAR",
    "InvalidInput", "DegenerateHull",
    "ConvexHull2D", "convex_hull", "format_hull", "convex_hull_2d",
    "__version__",
]
