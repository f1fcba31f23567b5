# ========================
# file: scatter_engine/core/config/loader.py
# ========================
from __future__ import annotations
import copy
import json
import os
from typing import Any, Dict, Mapping, Union

from ..constants import ACCEPT_FIRST, DEFAULT_ATTEMPTS, PLACEMENT_RING
from ..errors import NotFoundError
from .model import SamplerConfig
from .validators import validate_dict


DEFAULT_SAMPLER_CONFIG: Dict[str, Any] = {
    "width": 100,
    "height": 100,
    "radius": 10.0,
    "attempts": DEFAULT_ATTEMPTS,
    "seamless": False,
    "candidate_placement": PLACEMENT_RING,
    "accept_policy": ACCEPT_FIRST,
    "max_candidates": None,
}


def deep_merge(base: Dict[str, Any], overrides: Mapping[str, Any]) -> Dict[str, Any]:
    """Recursive dict merge. Lists/tuples are replaced, not merged element-wise."""
    out = copy.deepcopy(base)
    for k, v in overrides.items():
        if isinstance(v, Mapping) and isinstance(out.get(k), dict):
            out[k] = deep_merge(out[k], v)
        else:
            out[k] = copy.deepcopy(v)
    return out


def _load_json_file(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def load_sampler_config(
    source: Union[str, Dict[str, Any], None] = None,
    overrides: Mapping[str, Any] | None = None,
) -> SamplerConfig:
    """Load a sampler config from a JSON path or dict, merge with defaults and apply overrides.

    Args:
        source: path to a JSON file, raw dict, or None for pure defaults
        overrides: mapping of ad-hoc overrides (last layer)
    Returns:
        SamplerConfig (immutable dataclass) ready for use
    """
    if source is None:
        data: Dict[str, Any] = {}
    elif isinstance(source, str):
        if not os.path.isfile(source):
            raise NotFoundError(f"Sampler config '{source}' not found")
        data = _load_json_file(source)
    elif isinstance(source, dict):
        data = source
    else:
        raise TypeError("source must be str path, dict or None")

    merged = deep_merge(DEFAULT_SAMPLER_CONFIG, data)
    if overrides:
        merged = deep_merge(merged, overrides)

    validate_dict(merged)

    return SamplerConfig(
        width=float(merged["width"]),
        height=float(merged["height"]),
        radius=float(merged["radius"]),
        attempts=int(merged["attempts"]),
        seamless=bool(merged["seamless"]),
        candidate_placement=str(merged["candidate_placement"]),
        accept_policy=str(merged["accept_policy"]),
        max_candidates=merged.get("max_candidates"),
    )
