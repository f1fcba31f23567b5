from .sampler import PoissonDiscSampler

__all__ = ["PoissonDiscSampler"]
