from __future__ import annotations
import math
import numbers
from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..constants import (
    ACCEPT_FIRST,
    ACCEPT_POLICIES,
    DEFAULT_ATTEMPTS,
    PLACEMENT_RING,
    PLACEMENTS,
    SQRT2,
)
from ..errors import ValidationError


def _positive_finite(v) -> bool:
    return isinstance(v, numbers.Real) and not isinstance(v, bool) and math.isfinite(v) and v > 0


@dataclass(frozen=True)
class SamplerConfig:
    width: float
    height: float
    radius: float
    attempts: int = DEFAULT_ATTEMPTS
    seamless: bool = False
    candidate_placement: str = PLACEMENT_RING
    accept_policy: str = ACCEPT_FIRST
    max_candidates: Optional[int] = None

    def __post_init__(self):
        # Вырожденные размеры ломают cell_size и размер сетки, поэтому отсекаем сразу
        if not _positive_finite(self.width) or not _positive_finite(self.height):
            raise ValidationError(
                f"Region size must be finite and positive, got {self.width}x{self.height}"
            )
        if not _positive_finite(self.radius):
            raise ValidationError(f"radius must be a finite value > 0, got {self.radius}")
        if (
            not isinstance(self.attempts, numbers.Integral)
            or isinstance(self.attempts, bool)
            or self.attempts < 0
        ):
            raise ValidationError(f"attempts must be an integer >= 0, got {self.attempts}")
        if self.candidate_placement not in PLACEMENTS:
            raise ValidationError(
                f"candidate_placement must be one of {PLACEMENTS}, got '{self.candidate_placement}'"
            )
        if self.accept_policy not in ACCEPT_POLICIES:
            raise ValidationError(
                f"accept_policy must be one of {ACCEPT_POLICIES}, got '{self.accept_policy}'"
            )
        if self.max_candidates is not None and self.max_candidates <= 0:
            raise ValidationError("max_candidates must be > 0 when set")

    @property
    def cell_size(self) -> float:
        return self.radius / SQRT2

    @property
    def grid_cols(self) -> int:
        return int(math.ceil(self.width / self.cell_size))

    @property
    def grid_rows(self) -> int:
        return int(math.ceil(self.height / self.cell_size))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "width": self.width,
            "height": self.height,
            "radius": self.radius,
            "attempts": self.attempts,
            "seamless": bool(self.seamless),
            "candidate_placement": self.candidate_placement,
            "accept_policy": self.accept_policy,
            "max_candidates": self.max_candidates,
        }
