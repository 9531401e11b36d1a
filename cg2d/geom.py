from __future__ import annotations
from dataclasses import dataclass
from numbers import Integral
from typing import Iterable, List, Tuple, Union

@dataclass(frozen=True)
class Pt:
    x: int
    y: int
    def __iter__(self):
        yield self.x; yield self.y

PointLike = Union[Pt, Tuple[int, int]]

def sub(a: Pt, b: Pt) -> Pt:
    return Pt(a.x - b.x, a.y - b.y)

def dot(a: Pt, b: Pt) -> int:
    return a.x*b.x + a.y*b.y

def cross(a: Pt, b: Pt) -> int:
    """z-компонента векторного добутку a x b."""
    return a.x*b.y - a.y*b.x

def _coord(v, where: str) -> int:
    # bool теж Integral, але координатою не є
    if isinstance(v, bool) or not isinstance(v, Integral):
        raise TypeError(f"{where}: очікується ціле число, отримано {v!r}")
    return int(v)

def as_points(points: Iterable[PointLike]) -> List[Pt]:
    """
    Робоча копія вхідних точок як список Pt.
    Порядок зберігається, дублікати не прибираються.
    Приймає Pt або пари (x, y) з цілими координатами (int, numpy int).
    """
    out: List[Pt] = []
    for i, p in enumerate(points):
        if isinstance(p, Pt):
            out.append(Pt(_coord(p.x, f"точка {i}"), _coord(p.y, f"точка {i}")))
            continue
        try:
            x, y = p
        except (TypeError, ValueError) as e:
            raise ValueError(f"точка {i}: очікується пара (x, y), отримано {p!r}") from e
        out.append(Pt(_coord(x, f"точка {i}"), _coord(y, f"точка {i}")))
    return out
