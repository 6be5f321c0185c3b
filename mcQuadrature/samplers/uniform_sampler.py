import numpy as np
from typing import Optional

from .base_class import Sampler


class UniformSampler(Sampler):
    """
    Uniform sampler on [0, 1)

    Attributes
    ----------
    seed : int or None
        the seed used to build the engine.
        None draws fresh entropy from the OS, so two
        unseeded samplers never share a stream.
    rng : numpy.random.Generator
        the engine, owned exclusively by this sampler
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self.rng = np.random.default_rng(seed)

    def rvs(self, n: int) -> np.ndarray:
        """
        Argument
        --------
        n : int
            number of samples

        Return
        ------
        np.ndarray of shape (n,)
            samples from U(0, 1)
        """
        if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
            raise TypeError(f"n must be an integer, got {n} of type "
                            f"{type(n).__name__}")
        if n < 0:
            raise ValueError(f"n must be non-negative, got {n}")

        return self.rng.random(n)

    def __call__(self) -> float:
        return float(self.rng.random())

    def __repr__(self) -> str:
        return f"UniformSampler(seed={self.seed})"
