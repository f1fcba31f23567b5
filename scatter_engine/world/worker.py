# scatter_engine/world/worker.py
from __future__ import annotations
import logging
import threading
import traceback
from typing import Any, Callable, Optional

from ..algorithms.poisson import PoissonDiscSampler

logger = logging.getLogger(__name__)


def run_bg(
    fn: Callable[[], Any],
    on_done: Optional[Callable[[Any], None]] = None,
    on_error: Optional[Callable[[str], None]] = None,
) -> threading.Thread:
    """
    Запускает fn в фоновом потоке.
    По завершении вызывает on_done(result), при исключении on_error(текст с traceback).
    Отмены нет: если результат больше не нужен, его просто не используют.
    """

    def _wrap():
        try:
            result = fn()
        except Exception as e:
            tb = traceback.format_exc()
            logger.error(f"Ошибка в фоновой задаче: {e}")
            if on_error:
                on_error(f"{e}\n\n{tb}")
            else:
                raise
            return
        if on_done:
            on_done(result)

    t = threading.Thread(target=_wrap, daemon=True)
    t.start()
    return t


def run_sampler_bg(
    sampler: PoissonDiscSampler,
    on_done: Optional[Callable[[Any], None]] = None,
    on_error: Optional[Callable[[str], None]] = None,
) -> threading.Thread:
    """find_points() в отдельном потоке. Сэмплер после этого трогать только из on_done."""
    return run_bg(sampler.find_points, on_done=on_done, on_error=on_error)
