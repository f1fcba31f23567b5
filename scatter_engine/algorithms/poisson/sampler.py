# ==============================================================================
# Файл: scatter_engine/algorithms/poisson/sampler.py
# Назначение: Poisson-disc (blue noise) сэмплер по схеме Бридсона
# с поддержкой "сшивки" соседних регионов по общей границе.
# ==============================================================================
from __future__ import annotations
import logging
import math
import time
from typing import Iterable, List, Optional

import numpy as np

from ...core import constants as const
from ...core.config import SamplerConfig
from ...core.errors import SamplerStateError
from ...core.types import Point, PointLike, ScatterResult, as_point
from ...core.utils.rng import RNG, RandomSource, entropy_seed
from ...numerics.spatial_grid import SpatialGrid, any_within

logger = logging.getLogger(__name__)

_TWO_PI = 2.0 * math.pi


class PoissonDiscSampler:
    """
    Одноразовый сэмплер: find_points() вызывается один раз,
    для повторного прогона нужен reset().

    Экземпляр не потокобезопасен. Его можно гонять в отдельном
    потоке, но не делить между несколькими потоками, как и его RNG.
    """

    def __init__(self, config: SamplerConfig, rng: Optional[RandomSource] = None):
        self.config = config
        self.width = float(config.width)
        self.height = float(config.height)
        self.radius = float(config.radius)
        self.cell_size = config.cell_size
        # r^2 с допуском: кандидат ровно на радиусе от опорной точки допустим
        self._radius_sq = self.radius * self.radius * (1.0 - const.DIST_EPS)

        if rng is None:
            seed = entropy_seed()
            logger.debug(f"No RNG supplied, seeding from entropy: {seed}")
            rng = RNG(seed)
        self.rng = rng

        self.grid = SpatialGrid(config.grid_cols, config.grid_rows, seamless=config.seamless)
        self.active: List[Point] = []
        self.neighbors: List[Point] = []
        self._neighbor_arr = np.empty((0, 2), dtype=np.float64)
        self.state = const.STATE_IDLE
        self.stats = self._empty_stats()

    @staticmethod
    def _empty_stats() -> dict:
        return {
            "accepted": 0,
            "candidates": 0,
            "retired": 0,
            "truncated": False,
            "duration_ms": 0.0,
        }

    def reset(self) -> None:
        """Сбрасывает сетку, фронт и соседей. RNG не трогаем."""
        self.grid = SpatialGrid(self.config.grid_cols, self.config.grid_rows, seamless=self.config.seamless)
        self.active = []
        self.neighbors = []
        self._neighbor_arr = np.empty((0, 2), dtype=np.float64)
        self.state = const.STATE_IDLE
        self.stats = self._empty_stats()

    # ------------------------------------------------------------------
    # Сшивка регионов
    # ------------------------------------------------------------------

    def contribute_neighbor_points(self, points: Iterable[PointLike], offset: PointLike = (0.0, 0.0)) -> int:
        """
        Принимает точки соседнего региона (в его локальных координатах)
        и смещение = origin соседа - origin этого региона.
        Возвращает число точек, реально попавших в проверку.
        """
        if self.state != const.STATE_IDLE:
            logger.warning(
                f"contribute_neighbor_points() called in state '{self.state}'; points ignored."
            )
            return 0

        off = as_point(offset)
        r = self.radius
        kept = 0
        loose: List[Point] = []
        for p in points:
            q = as_point(p) + off
            # Точка дальше радиуса от прямоугольника региона ни с чем не конфликтует
            if q.x <= -r or q.y <= -r or q.x >= self.width + r or q.y >= self.height + r:
                continue
            self.neighbors.append(q)
            kept += 1
            if not self.grid.set_border(q, self.cell_size):
                loose.append(q)

        if loose:
            extra = np.array([pt.as_tuple() for pt in loose], dtype=np.float64)
            self._neighbor_arr = np.concatenate([self._neighbor_arr, extra])
        logger.debug(f"Neighbor points contributed: {kept} kept, {len(loose)} outside grid border.")
        return kept

    def extract_edge_points(self, band: Optional[float] = None) -> List[Point]:
        """
        Точки вдоль границ региона для передачи соседям.
        band=None -> полоса шириной radius (надмножество крайних клеток сетки).
        band=0 -> только крайние клетки сетки.
        """
        if self.state != const.STATE_DONE:
            raise SamplerStateError("extract_edge_points() requires a finished find_points() run")

        edge = self.grid.edge_points()
        depth = self.radius if band is None else float(band)
        if depth <= 0:
            return edge

        seen = set(edge)
        for p in self.grid.to_list():
            if p in seen:
                continue
            if p.x < depth or p.y < depth or p.x >= self.width - depth or p.y >= self.height - depth:
                edge.append(p)
        return edge

    # ------------------------------------------------------------------
    # Основной цикл
    # ------------------------------------------------------------------

    def _accept(self, point: Point) -> bool:
        if not self.grid.set(point, self.cell_size):
            return False
        self.active.append(point)
        self.stats["accepted"] += 1
        return True

    def _retire(self, index: int) -> None:
        # swap-and-pop, порядок фронта не важен
        last = len(self.active) - 1
        if index != last:
            self.active[index] = self.active[last]
        self.active.pop()
        self.stats["retired"] += 1

    def is_valid(self, x: float, y: float) -> bool:
        if not (0.0 <= x < self.width and 0.0 <= y < self.height):
            return False
        if self.grid.has_conflict(x, y, self._radius_sq, self.cell_size):
            return False
        if self._neighbor_arr.shape[0] and any_within(self._neighbor_arr, x, y, self._radius_sq):
            return False
        return True

    def _candidate(self, pivot: Point) -> tuple:
        theta = self.rng.uniform() * _TWO_PI
        if self.config.candidate_placement == const.PLACEMENT_ANNULUS:
            # равномерно по площади кольца [r, 2r]
            r2 = self.radius * self.radius
            dist = math.sqrt(r2 + self.rng.uniform() * 3.0 * r2)
        else:
            dist = self.radius
        return pivot.x + dist * math.cos(theta), pivot.y + dist * math.sin(theta)

    def _seed(self) -> bool:
        # Сид тоже проходит проверку: он не должен лечь на точки соседей
        budget = max(1, self.config.attempts)
        for _ in range(budget):
            x = self.rng.uniform() * self.width
            y = self.rng.uniform() * self.height
            if self.is_valid(x, y) and self._accept(Point(x, y)):
                return True
        return False

    def find_points(self) -> List[Point]:
        if self.state != const.STATE_IDLE:
            raise SamplerStateError(
                f"find_points() called in state '{self.state}'; call reset() before reuse"
            )

        t_start = time.perf_counter()
        cfg = self.config
        budget = cfg.max_candidates
        accept_all = cfg.accept_policy == const.ACCEPT_ALL

        self.state = const.STATE_SEEDING
        if not self._seed():
            logger.debug("Seed point could not be placed (region covered by neighbor points).")
        self.state = const.STATE_GROWING

        while self.active:
            idx = self.rng.randint(0, len(self.active) - 1)
            pivot = self.active[idx]
            found = False

            for _ in range(cfg.attempts):
                if budget is not None and self.stats["candidates"] >= budget:
                    break
                self.stats["candidates"] += 1
                x, y = self._candidate(pivot)
                if self.is_valid(x, y) and self._accept(Point(x, y)):
                    found = True
                    if not accept_all:
                        break

            if budget is not None and self.stats["candidates"] >= budget:
                logger.warning(
                    f"Candidate budget {budget} exhausted with {len(self.active)} active points left; "
                    f"result is truncated."
                )
                self.stats["truncated"] = True
                self.active.clear()
                break

            if not found:
                self._retire(idx)

        self.state = const.STATE_DONE
        self.stats["duration_ms"] = (time.perf_counter() - t_start) * 1000
        points = self.grid.to_list()
        logger.info(
            f"Poisson scatter {self.width:g}x{self.height:g} r={self.radius:g}: "
            f"{len(points)} точек, {self.stats['candidates']} кандидатов "
            f"за {self.stats['duration_ms']:.1f} мс."
        )
        return points

    def result(self) -> ScatterResult:
        if self.state != const.STATE_DONE:
            raise SamplerStateError("result() requires a finished find_points() run")
        return ScatterResult(
            points=self.grid.to_list(),
            width=self.width,
            height=self.height,
            radius=self.radius,
            stats=dict(self.stats),
        )
