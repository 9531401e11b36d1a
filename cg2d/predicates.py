# cg2d/predicates.py
from __future__ import annotations
from typing import Callable
from .geom import Pt, sub, cross, dot

CCW = 1
CW = -1
COLLINEAR = 0

def orient2d(a: Pt, b: Pt, c: Pt) -> int:
    """
    Напрям повороту a -> b -> c через векторний добуток (b-a) x (c-a):
      >0  проти годинникової стрілки (лівий поворот),
      <0  за годинниковою стрілкою,
       0  колінеарні.
    Цілі координати — результат точний, без eps.
    """
    return cross(sub(b, a), sub(c, a))

def turn(a: Pt, b: Pt, c: Pt) -> int:
    d = orient2d(a, b, c)
    if d > 0:
        return CCW
    if d < 0:
        return CW
    return COLLINEAR

def dist2(a: Pt, b: Pt) -> int:
    d = sub(a, b)
    return dot(d, d)

def polar_compare(pivot: Pt) -> Callable[[Pt, Pt], int]:
    """
    Компаратор для functools.cmp_to_key: порядок за полярним кутом навколо pivot.
    p2 раніше p3, якщо поворот p2 -> p3 навколо pivot проти годинникової.
    Колінеарні з pivot — ближчий першим.
    Коректний (strict weak ordering), коли pivot найнижча-найлівіша точка.
    """
    def cmp(p2: Pt, p3: Pt) -> int:
        c = orient2d(pivot, p2, p3)
        if c != 0:
            return -1 if c > 0 else 1
        d2, d3 = dist2(p2, pivot), dist2(p3, pivot)
        if d2 < d3:
            return -1
        if d2 > d3:
            return 1
        return 0
    return cmp

def on_segment(a: Pt, b: Pt, p: Pt) -> bool:
    """p лежить на відрізку [a, b] (включно з кінцями)."""
    if orient2d(a, b, p) != 0:
        return False
    return (min(a.x, b.x) <= p.x <= max(a.x, b.x)
            and min(a.y, b.y) <= p.y <= max(a.y, b.y))
