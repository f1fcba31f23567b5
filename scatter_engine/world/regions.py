# ==============================================================================
# Файл: scatter_engine/world/regions.py
# Назначение: Раскладка точек по сетке соседних регионов одинакового размера
# со сшивкой по общим границам.
# ==============================================================================
from __future__ import annotations
import logging
import math
import time
from typing import Dict, List, Optional, Tuple, Union

from ..algorithms.poisson import PoissonDiscSampler
from ..core.config import SamplerConfig
from ..core.types import Point
from ..core.utils.rng import RNG, seed_from_any, split_chunk_seed

logger = logging.getLogger(__name__)

RegionKey = Tuple[int, int]


def neighbor_offsets(reach_x: int, reach_z: int) -> List[RegionKey]:
    """Все (dx, dz) в прямоугольнике +-reach, кроме (0, 0)."""
    return [
        (dx, dz)
        for dz in range(-reach_z, reach_z + 1)
        for dx in range(-reach_x, reach_x + 1)
        if dx or dz
    ]


class RegionScatter:
    """
    Генерирует точки по регионам (rx, rz). Каждый регион получает краевые
    точки всех уже готовых регионов ближе radius до своего прогона, поэтому
    объединение всех регионов выглядит как одна выборка без шва.
    При radius больше региона это не только 8 соседей, а ceil(radius / size) колец.
    Для детерминизма порядок обхода важен: sample_all() идёт построчно.
    """

    def __init__(self, config: SamplerConfig, seed: Union[int, str, bytes]):
        self.config = config
        self.seed = seed_from_any(seed)
        self.reach = (
            max(1, math.ceil(config.radius / config.width)),
            max(1, math.ceil(config.radius / config.height)),
        )
        self.points: Dict[RegionKey, List[Point]] = {}
        self.edges: Dict[RegionKey, List[Point]] = {}

    def region_origin(self, rx: int, rz: int) -> Tuple[float, float]:
        return rx * self.config.width, rz * self.config.height

    def make_sampler(self, rx: int, rz: int) -> PoissonDiscSampler:
        rng = RNG(split_chunk_seed(self.seed, rx, rz))
        sampler = PoissonDiscSampler(self.config, rng=rng)

        ox, oz = self.region_origin(rx, rz)
        for dx, dz in neighbor_offsets(*self.reach):
            key = (rx + dx, rz + dz)
            edge = self.edges.get(key)
            if not edge:
                continue
            nx, nz = self.region_origin(*key)
            sampler.contribute_neighbor_points(edge, (nx - ox, nz - oz))
        return sampler

    def sample_region(self, rx: int, rz: int) -> List[Point]:
        key = (rx, rz)
        if key in self.points:
            return self.points[key]

        sampler = self.make_sampler(rx, rz)
        pts = sampler.find_points()
        self.points[key] = pts
        self.edges[key] = sampler.extract_edge_points()
        logger.debug(f"Region ({rx}, {rz}): {len(pts)} points, {len(self.edges[key])} on edges.")
        return pts

    def sample_all(self, cols: int, rows: int, base: RegionKey = (0, 0)) -> Dict[RegionKey, List[Point]]:
        t_start = time.perf_counter()
        bx, bz = base
        for rz in range(bz, bz + rows):
            for rx in range(bx, bx + cols):
                self.sample_region(rx, rz)
        total = sum(len(self.points[(rx, rz)]) for rz in range(bz, bz + rows) for rx in range(bx, bx + cols))
        logger.info(
            f"Сгенерировано {cols}x{rows} регионов, {total} точек "
            f"за {(time.perf_counter() - t_start) * 1000:.1f} мс."
        )
        return {k: v for k, v in self.points.items() if bx <= k[0] < bx + cols and bz <= k[1] < bz + rows}

    def to_world(self, keys: Optional[List[RegionKey]] = None) -> List[Point]:
        """Все точки выбранных регионов в мировых координатах."""
        if keys is None:
            keys = sorted(self.points.keys(), key=lambda k: (k[1], k[0]))
        out: List[Point] = []
        for rx, rz in keys:
            ox, oz = self.region_origin(rx, rz)
            origin = Point(ox, oz)
            out.extend(p + origin for p in self.points.get((rx, rz), []))
        return out
