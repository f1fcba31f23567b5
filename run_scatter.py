# Файл: run_scatter.py
from __future__ import annotations
import sys
import pathlib
import logging

ROOT = pathlib.Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from scatter_engine.setup_logging import setup_logging
from scatter_engine.core.config import load_sampler_config
from scatter_engine.core.utils.metrics import compute_metrics
from scatter_engine.world.regions import RegionScatter

logger = logging.getLogger("scatter_engine.run")


def main(argv: list[str]) -> int:
    """
    run_scatter.py [config.json] [seed] [cols] [rows]
    Раскладывает точки по cols x rows регионам и печатает сводку.
    """
    setup_logging(log_dir=None)

    config_path = argv[1] if len(argv) > 1 and argv[1] != "-" else None
    seed = int(argv[2]) if len(argv) > 2 else 123
    cols = int(argv[3]) if len(argv) > 3 else 2
    rows = int(argv[4]) if len(argv) > 4 else 2

    config = load_sampler_config(config_path)
    scatter = RegionScatter(config, seed)
    scatter.sample_all(cols, rows)
    world_points = scatter.to_world()

    metrics = compute_metrics(
        world_points, config.width * cols, config.height * rows, config.radius
    )
    logger.info(
        f"seed={seed} regions={cols}x{rows} points={metrics['count']} "
        f"min_distance={metrics['min_distance']:.3f} coverage={metrics['coverage_pct']:.3f}"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
