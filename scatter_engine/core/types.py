# scatter_engine/core/types.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence, Union


@dataclass(frozen=True)
class Point:
    """Точка в локальных координатах региона. Неизменяема после принятия."""

    x: float
    y: float

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def distance_sq(self, other: "Point") -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def as_tuple(self) -> tuple:
        return self.x, self.y


PointLike = Union[Point, Sequence[float]]


def as_point(value: PointLike) -> Point:
    """Приводит Point или пару (x, y) к Point."""
    if isinstance(value, Point):
        return value
    x, y = value
    return Point(float(x), float(y))


@dataclass
class ScatterResult:
    """Результат одного прогона сэмплера."""

    points: List[Point]
    width: float
    height: float
    radius: float
    stats: Dict[str, Any] = field(default_factory=dict)

    def header(self) -> Dict[str, Any]:
        return {
            "width": self.width,
            "height": self.height,
            "radius": self.radius,
            "count": len(self.points),
        }
