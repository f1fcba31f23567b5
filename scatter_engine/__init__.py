from .core.types import Point, ScatterResult
from .core.config import SamplerConfig, load_sampler_config
from .core.errors import NotFoundError, SamplerStateError, ScatterError, ValidationError
from .core.utils.rng import RNG, PyRandomSource, RandomSource
from .numerics.spatial_grid import SpatialGrid
from .algorithms.poisson import PoissonDiscSampler
from .world.regions import RegionScatter

__all__ = [
    "Point",
    "ScatterResult",
    "SamplerConfig",
    "load_sampler_config",
    "ScatterError",
    "ValidationError",
    "SamplerStateError",
    "NotFoundError",
    "RNG",
    "PyRandomSource",
    "RandomSource",
    "SpatialGrid",
    "PoissonDiscSampler",
    "RegionScatter",
]
