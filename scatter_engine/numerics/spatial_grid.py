# ==============================================================================
# Файл: scatter_engine/numerics/spatial_grid.py
# Назначение: Равномерная сетка для быстрой проверки "есть ли рядом точка".
# Размер клетки r/sqrt(2): в одной клетке может лежать не больше одной точки.
# ==============================================================================
from __future__ import annotations
import logging
import math
from typing import List, Optional, Tuple

import numpy as np
from numba import njit

from ..core.constants import NEIGHBOR_REACH
from ..core.types import Point

logger = logging.getLogger(__name__)


@njit(cache=True)
def _window_conflict(
    occupied: np.ndarray,
    coords: np.ndarray,
    col: int,
    row: int,
    x: float,
    y: float,
    radius_sq: float,
    reach: int,
) -> bool:
    """True, если в окне (2*reach+1)^2 вокруг (col, row) есть точка ближе радиуса."""
    cols, rows = occupied.shape
    c0 = max(col - reach, 0)
    c1 = min(col + reach, cols - 1)
    r0 = max(row - reach, 0)
    r1 = min(row + reach, rows - 1)
    for c in range(c0, c1 + 1):
        for r in range(r0, r1 + 1):
            if occupied[c, r]:
                dx = coords[c, r, 0] - x
                dy = coords[c, r, 1] - y
                if dx * dx + dy * dy < radius_sq:
                    return True
    return False


@njit(cache=True)
def any_within(points: np.ndarray, x: float, y: float, radius_sq: float) -> bool:
    """Линейный проход по массиву (N, 2)."""
    for i in range(points.shape[0]):
        dx = points[i, 0] - x
        dy = points[i, 1] - y
        if dx * dx + dy * dy < radius_sq:
            return True
    return False


class SpatialGrid:
    """
    Сетка cols x rows, каждая клетка либо пустая, либо хранит ровно одну точку.
    Занятость хранится отдельным булевым массивом, поэтому точка (0, 0)
    не путается с пустой клеткой.

    seamless=True резервирует по одной клетке рамки с каждой стороны:
    точки региона сдвигаются на +1 по обеим осям, а рамка хранит
    точки соседних регионов, лежащие вплотную к границе.
    """

    def __init__(self, cols: int, rows: int, seamless: bool = False):
        if cols <= 0 or rows <= 0:
            raise ValueError(f"Grid size must be positive, got {cols}x{rows}")
        self.cols = int(cols)
        self.rows = int(rows)
        self.seamless = bool(seamless)
        self.pad = 1 if self.seamless else 0

        full_cols = self.cols + 2 * self.pad
        full_rows = self.rows + 2 * self.pad
        self.occupied = np.zeros((full_cols, full_rows), dtype=np.bool_)
        self.coords = np.zeros((full_cols, full_rows, 2), dtype=np.float64)
        self.count = 0

    @property
    def shape(self) -> Tuple[int, int]:
        return self.occupied.shape

    def cell_of(self, x: float, y: float, cell_size: float) -> Tuple[int, int]:
        """Индекс клетки в массиве (с учётом рамки)."""
        return (
            int(math.floor(x / cell_size)) + self.pad,
            int(math.floor(y / cell_size)) + self.pad,
        )

    def _is_interior(self, col: int, row: int) -> bool:
        return (
            self.pad <= col < self.cols + self.pad
            and self.pad <= row < self.rows + self.pad
        )

    def get(self, col: int, row: int) -> Optional[Point]:
        """Содержимое клетки или None. Индексы должны быть уже проверены вызывающим."""
        if not self.occupied[col, row]:
            return None
        return Point(float(self.coords[col, row, 0]), float(self.coords[col, row, 1]))

    def set(self, point: Point, cell_size: float) -> bool:
        col, row = self.cell_of(point.x, point.y, cell_size)
        if not self._is_interior(col, row):
            # Артефакт округления на самой границе региона, не ошибка
            logger.warning(
                f"Point ({point.x:.6f}, {point.y:.6f}) maps to cell ({col}, {row}) "
                f"outside grid {self.cols}x{self.rows}; dropped."
            )
            return False
        if self.occupied[col, row]:
            logger.warning(
                f"Cell ({col}, {row}) already holds a point; "
                f"({point.x:.6f}, {point.y:.6f}) dropped."
            )
            return False
        self.occupied[col, row] = True
        self.coords[col, row, 0] = point.x
        self.coords[col, row, 1] = point.y
        self.count += 1
        return True

    def set_border(self, point: Point, cell_size: float) -> bool:
        """Кладёт соседскую точку в клетку рамки. False, если рамки нет, клетка не рамочная или занята."""
        if not self.seamless:
            return False
        col, row = self.cell_of(point.x, point.y, cell_size)
        full_cols, full_rows = self.shape
        if not (0 <= col < full_cols and 0 <= row < full_rows):
            return False
        if self._is_interior(col, row) or self.occupied[col, row]:
            return False
        self.occupied[col, row] = True
        self.coords[col, row, 0] = point.x
        self.coords[col, row, 1] = point.y
        return True

    def has_conflict(
        self, x: float, y: float, radius_sq: float, cell_size: float, reach: int = NEIGHBOR_REACH
    ) -> bool:
        col, row = self.cell_of(x, y, cell_size)
        return bool(
            _window_conflict(
                self.occupied, self.coords, col, row, float(x), float(y), float(radius_sq), int(reach)
            )
        )

    def _interior_indices(self) -> Tuple[np.ndarray, np.ndarray]:
        p = self.pad
        inner = self.occupied[p:p + self.cols, p:p + self.rows]
        cols, rows = np.nonzero(inner)
        return cols + p, rows + p

    def to_list(self, skip_empty: bool = True) -> List[Optional[Point]]:
        """
        Все клетки региона по столбцам (column-major). Рамка не включается.
        При skip_empty=False пустые клетки отдаются как None.
        """
        if skip_empty:
            cols, rows = self._interior_indices()
            return [self.get(int(c), int(r)) for c, r in zip(cols, rows)]

        out: List[Optional[Point]] = []
        for c in range(self.pad, self.cols + self.pad):
            for r in range(self.pad, self.rows + self.pad):
                out.append(self.get(c, r))
        return out

    def to_array(self) -> np.ndarray:
        """Принятые точки массивом (N, 2), тот же порядок, что и у to_list()."""
        cols, rows = self._interior_indices()
        return self.coords[cols, rows].reshape(-1, 2).copy()

    def edge_points(self) -> List[Point]:
        """Точки в крайних клетках региона (индекс 0 или последний по любой оси)."""
        p = self.pad
        last_c = self.cols - 1 + p
        last_r = self.rows - 1 + p
        result = []
        for c, r in zip(*self._interior_indices()):
            if c == p or c == last_c or r == p or r == last_r:
                result.append(self.get(int(c), int(r)))
        return result
