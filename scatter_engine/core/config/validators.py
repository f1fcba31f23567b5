# ========================
# file: scatter_engine/core/config/validators.py
# ========================
from __future__ import annotations
import math
from typing import Any, Dict

from ..constants import ACCEPT_POLICIES, PLACEMENTS
from ..errors import ValidationError


def _require(cond: bool, msg: str) -> None:
    if not cond:
        raise ValidationError(msg)


def _is_number(v: Any) -> bool:
    return isinstance(v, (int, float)) and not isinstance(v, bool)


def validate_dict(cfg: Dict[str, Any]) -> None:
    """Validate a merged sampler config dict.

    Raises ValidationError on the first failing check.
    """
    for key in ("width", "height", "radius"):
        _require(_is_number(cfg.get(key)), f"{key} must be a number")
        _require(math.isfinite(float(cfg[key])), f"{key} must be finite")
        _require(float(cfg[key]) > 0.0, f"{key} must be > 0")

    attempts = cfg.get("attempts")
    _require(
        isinstance(attempts, int) and not isinstance(attempts, bool),
        "attempts must be an integer",
    )
    _require(attempts >= 0, "attempts must be >= 0")

    _require(isinstance(cfg.get("seamless"), bool), "seamless must be a bool")
    _require(
        cfg.get("candidate_placement") in PLACEMENTS,
        f"candidate_placement must be one of {PLACEMENTS}",
    )
    _require(
        cfg.get("accept_policy") in ACCEPT_POLICIES,
        f"accept_policy must be one of {ACCEPT_POLICIES}",
    )

    budget = cfg.get("max_candidates")
    if budget is not None:
        _require(
            isinstance(budget, int) and not isinstance(budget, bool) and budget > 0,
            "max_candidates must be a positive integer or null",
        )
