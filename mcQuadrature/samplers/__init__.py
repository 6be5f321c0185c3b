from .base_class import Sampler
from .uniform_sampler import UniformSampler

__all__ = [
    "Sampler",
    "UniformSampler",
]
