# ========================
# file: scatter_engine/core/config/__init__.py
# ========================
from .model import SamplerConfig
from .loader import DEFAULT_SAMPLER_CONFIG, deep_merge, load_sampler_config

__all__ = [
    "SamplerConfig",
    "DEFAULT_SAMPLER_CONFIG",
    "deep_merge",
    "load_sampler_config",
]
