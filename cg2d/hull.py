from __future__ import annotations
import logging
from functools import cmp_to_key
from typing import Iterable, List

from .errors import DegenerateHull, InvalidInput
from .geom import Pt, PointLike, as_points
from .predicates import orient2d, polar_compare, on_segment

logger = logging.getLogger(__name__)


class ConvexHull2D:
    """
    2D опукла оболонка цілочисельних точок сканом Грехема.

    Вхід: будь-яка ітерована колекція Pt або пар (x, y), n >= 1.
    Вихід: vertices() — вершини у порядку зняття зі стеку (верхівка першою),
    тобто за годинниковою стрілкою, остання вершина — pivot.
    Вхідна колекція не змінюється: pivot і сортування працюють на копії self.P.
    """

    def __init__(self, points: Iterable[PointLike], strict: bool = False):
        self.P: List[Pt] = as_points(points)  # індексована копія
        if not self.P:
            raise InvalidInput("Need at least 1 point")
        self.strict = strict
        self.stack: List[Pt] = []

        # 1) pivot: найнижча, серед найнижчих — найлівіша
        self._move_pivot_to_front()
        self.pivot: Pt = self.P[0]
        logger.debug("pivot %s among %d points", self.pivot, len(self.P))

        # 2) кутове сортування решти навколо pivot
        self.P[1:] = sorted(self.P[1:], key=cmp_to_key(polar_compare(self.pivot)))

        # 3) скан зі стеком
        self._scan()
        logger.debug("hull has %d vertices", len(self.stack))

        if self.is_degenerate():
            msg = f"Degenerate hull: {len(self.P)} points -> {len(self.stack)} vertices"
            if strict:
                raise DegenerateHull(msg, self.vertices())
            logger.warning(msg)

    # ---------------- Публічний API ----------------
    def vertices(self) -> List[Pt]:
        """Вершини оболонки: верхівка стеку першою."""
        return list(reversed(self.stack))

    def is_degenerate(self) -> bool:
        return len(self.stack) < 3

    def area2(self) -> int:
        """Подвоєна орієнтована площа (shoelace); < 0 для нашого обходу за годинниковою."""
        vs = self.vertices()
        if len(vs) < 3:
            return 0
        s = 0
        for i, a in enumerate(vs):
            b = vs[(i + 1) % len(vs)]
            s += a.x*b.y - b.x*a.y
        return s

    def contains(self, p: PointLike) -> bool:
        """Точка всередині або на межі оболонки."""
        q = as_points([p])[0]
        vs = self.vertices()
        if len(vs) == 1:
            return q == vs[0]
        if len(vs) == 2:
            return on_segment(vs[0], vs[1], q)
        n = len(vs)
        # обхід за годинниковою: точка не може бути строго ліворуч від жодного ребра
        return all(orient2d(vs[i], vs[(i + 1) % n], q) <= 0 for i in range(n))

    # ---------------- Внутрішні методи ----------------
    def _move_pivot_to_front(self) -> None:
        best = 0
        for i, p in enumerate(self.P):
            b = self.P[best]
            if p.y < b.y or (p.y == b.y and p.x < b.x):
                best = i
        self.P[0], self.P[best] = self.P[best], self.P[0]

    def _scan(self) -> None:
        """Відкидаємо вершину на верхівці, поки поворот не строго лівий."""
        stk = self.stack
        for p in self.P:
            while len(stk) > 1 and orient2d(stk[-2], stk[-1], p) <= 0:
                stk.pop()
            stk.append(p)

    # ---------------- Діагностика / Експорт ----------------
    def validate(self) -> dict:
        """
        Перевірка результату:
          - кожна вершина є вхідною точкою;
          - кожна циклічна трійка вершин робить строгий поворот за годинниковою;
          - кожна вхідна точка всередині або на межі;
          - pivot присутній серед вершин.
        Повертає словник із діагностикою (порожні списки / False = все ок).
        """
        vs = self.vertices()
        inputs = set(self.P)

        foreign = [v for v in vs if v not in inputs]

        bad_turns: List[int] = []
        if len(vs) >= 3:
            n = len(vs)
            for i in range(n):
                if orient2d(vs[i], vs[(i + 1) % n], vs[(i + 2) % n]) >= 0:
                    bad_turns.append(i)

        outside = [p for p in self.P if not self.contains(p)]

        return {
            "vertices": len(vs),
            "degenerate": self.is_degenerate(),
            "foreign_vertices": foreign,
            "bad_turns": bad_turns,
            "outside_points": outside,
            "pivot_missing": self.pivot not in vs,
        }

    def to_text(self) -> str:
        return format_hull(self.vertices())


def format_hull(vertices: Iterable[Pt]) -> str:
    """Текстовий звіт: заголовок і по рядку на вершину."""
    lines = ["Convex Hull"]
    for p in vertices:
        lines.append(f" x: {p.x} y: {p.y}")
    return "\n".join(lines)


def convex_hull(points: Iterable[PointLike], strict: bool = False) -> List[Pt]:
    return ConvexHull2D(points, strict=strict).vertices()
