from __future__ import annotations
import logging
import sys
from pathlib import Path


def setup_logging(level: int = logging.INFO, log_dir: str | Path | None = "logs"):
    """
    Настраивает глобальный логгер для скриптов.
    - Устанавливает формат сообщений.
    - Выводит логи в консоль (stdout).
    - Если задан log_dir, сохраняет логи в файл <log_dir>/scatter.log.
    """
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_dir is not None:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        handlers.insert(0, logging.FileHandler(log_path / "scatter.log", mode="w", encoding="utf-8"))

    logging.basicConfig(
        level=level,
        format="%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s:%(lineno)d | %(message)s",
        datefmt="%H:%M:%S",
        handlers=handlers,
        force=True,  # убирает старые хендлеры, чтобы не было дублей
    )

    logging.getLogger("scatter_engine").setLevel(level)
    logging.getLogger("numba").setLevel(logging.WARNING)
