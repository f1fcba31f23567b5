# scatter_engine/core/utils/metrics.py
from __future__ import annotations
import math
from typing import Dict, Iterable

import numpy as np

from ..types import PointLike, as_point

_BLOCK = 1024


def points_to_array(points: Iterable[PointLike]) -> np.ndarray:
    arr = np.array([as_point(p).as_tuple() for p in points], dtype=np.float64)
    return arr.reshape(-1, 2)


def _pair_distances_min(arr: np.ndarray) -> float:
    n = arr.shape[0]
    if n < 2:
        return math.inf
    best = math.inf
    # Блоками, чтобы не строить матрицу N x N целиком
    for i0 in range(0, n, _BLOCK):
        block = arr[i0:i0 + _BLOCK]
        d = block[:, None, :] - arr[None, :, :]
        d2 = np.einsum("ijk,ijk->ij", d, d)
        rows = np.arange(block.shape[0])
        d2[rows, rows + i0] = np.inf
        best = min(best, float(d2.min()))
    return math.sqrt(best)


def min_pair_distance(points: Iterable[PointLike]) -> float:
    """Минимальное попарное расстояние; inf для меньше чем двух точек."""
    return _pair_distances_min(points_to_array(points))


def count_violations(points: Iterable[PointLike], radius: float, tol: float = 1e-6) -> int:
    """Число неупорядоченных пар ближе radius - tol."""
    arr = points_to_array(points)
    n = arr.shape[0]
    if n < 2:
        return 0
    limit = (radius - tol) ** 2
    total = 0
    for i0 in range(0, n, _BLOCK):
        block = arr[i0:i0 + _BLOCK]
        d = block[:, None, :] - arr[None, :, :]
        d2 = np.einsum("ijk,ijk->ij", d, d)
        # только пары j > i, чтобы каждая считалась один раз
        idx_i = np.arange(block.shape[0])[:, None] + i0
        idx_j = np.arange(n)[None, :]
        total += int(np.count_nonzero((d2 < limit) & (idx_j > idx_i)))
    return total


def out_of_bounds(points: Iterable[PointLike], width: float, height: float) -> int:
    arr = points_to_array(points)
    if arr.shape[0] == 0:
        return 0
    inside = (arr[:, 0] >= 0) & (arr[:, 0] < width) & (arr[:, 1] >= 0) & (arr[:, 1] < height)
    return int(np.count_nonzero(~inside))


def compute_metrics(
    points: Iterable[PointLike], width: float, height: float, radius: float
) -> Dict[str, float]:
    """
    Сводка по набору точек:
    count, min_distance, density (точек на единицу площади),
    coverage_pct (доля площади под дисками радиуса r/2).
    """
    arr = points_to_array(points)
    area = float(width) * float(height)
    count = int(arr.shape[0])
    if count == 0 or area <= 0:
        return {"count": count, "min_distance": math.inf, "density": 0.0, "coverage_pct": 0.0}

    disc = math.pi * (radius / 2.0) ** 2
    return {
        "count": count,
        "min_distance": _pair_distances_min(arr),
        "density": count / area,
        "coverage_pct": count * disc / area,
    }
