from __future__ import annotations
import logging
from typing import Iterable, List

from .errors import DegenerateHull, InvalidInput
from .geom import Pt, PointLike, as_points
from .hull import ConvexHull2D

logger = logging.getLogger(__name__)


def convex_hull_2d(
    points: Iterable[PointLike],
    backend: str = "internal",
) -> List[Pt]:
    """
    Опукла оболонка з вибором реалізації:
      - "internal" — наш скан Грехема (ConvexHull2D);
      - "scipy"    — Qhull через scipy.spatial.ConvexHull, для перехресної перевірки.

    Обидва повертають вершини за годинниковою стрілкою, остання — pivot
    (найнижча-найлівіша точка), тож на невироджених даних результати збігаються.
    SciPy-бекенд завжди кидає DegenerateHull для виродженого входу.
    """
    pts: List[Pt] = as_points(points)
    if not pts:
        raise InvalidInput("Need at least 1 point")

    name = backend.lower()
    if name == "internal":
        return ConvexHull2D(pts).vertices()

    if name == "scipy":
        try:
            import numpy as np
            from scipy.spatial import ConvexHull, QhullError
        except ImportError as e:
            raise RuntimeError(
                "backend='scipy', але SciPy не встановлено. "
                "Встанови scipy або використай backend='internal'."
            ) from e

        if len(pts) < 3:
            raise DegenerateHull(f"Degenerate hull: {len(pts)} points", pts)

        # float64 точний для |координат| < 2**53
        arr = np.array([(p.x, p.y) for p in pts], dtype=float)
        try:
            qh = ConvexHull(arr)
        except QhullError as e:
            raise DegenerateHull(f"Degenerate hull: {e}") from e

        # Qhull у 2D дає вершини проти годинникової — розвертаємо
        ring = [pts[int(i)] for i in qh.vertices][::-1]
        pivot = min(ring, key=lambda p: (p.y, p.x))
        k = ring.index(pivot)
        ring = ring[k + 1:] + ring[:k + 1]
        logger.debug("scipy backend: %d vertices", len(ring))
        return ring

    raise ValueError(f"Невідомий backend: {backend}")
