# ==============================================================================
# Файл: scatter_engine/core/constants.py
# Назначение: Глобальные константы сэмплера (значения по умолчанию, состояния).
# ==============================================================================
from __future__ import annotations
import math
from typing import Tuple

# --- Параметры по умолчанию ---
DEFAULT_ATTEMPTS = 64
SQRT2 = math.sqrt(2.0)

# Окно поиска соседей в клетках вокруг клетки кандидата.
# При cell_size = r / sqrt(2) конфликт возможен только в пределах 2 клеток.
NEIGHBOR_REACH = 2

# Относительный допуск на r^2: точка ровно на радиусе не должна
# отсекаться ошибкой округления cos/sin.
DIST_EPS = 1e-9

# --- Размещение кандидатов ---
PLACEMENT_RING = "ring"        # ровно на расстоянии radius от опорной точки
PLACEMENT_ANNULUS = "annulus"  # равномерно по площади кольца [r, 2r]
PLACEMENTS: Tuple[str, ...] = (PLACEMENT_RING, PLACEMENT_ANNULUS)

# --- Политика принятия кандидатов за один раунд ---
ACCEPT_FIRST = "first"
ACCEPT_ALL = "all"
ACCEPT_POLICIES: Tuple[str, ...] = (ACCEPT_FIRST, ACCEPT_ALL)

# --- Состояния сэмплера ---
STATE_IDLE = "idle"
STATE_SEEDING = "seeding"
STATE_GROWING = "growing"
STATE_DONE = "done"
