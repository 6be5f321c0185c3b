import numpy as np
from typing import Callable, Optional

from .base_class import Integrator
from ..samplers import Sampler, UniformSampler


class CrudeMcIntegrator(Integrator):
    """
    Crude Monte Carlo integrator on [0, 1):
    draw u_i ~ U(0, 1), take the sample mean of h(u_i). \n
    The width of the domain is 1, so no rescaling is needed.

    Parameters
    ----------
    sampler : Sampler, optional
        source of uniform variates, owned by this integrator.
        Default: UniformSampler(seed)
    seed : int, optional
        seed of the default sampler.
        Unseeded integrators draw their seed from OS entropy.

    Example
    -------
    >>> from mcQuadrature.integrators import CrudeMcIntegrator
    >>> from mcQuadrature.example_problems import QuarterCircle
    >>> problem = QuarterCircle()
    >>> integ = CrudeMcIntegrator(seed=1)
    >>> estimate = integ.estimate(problem.integrand, 10_000)
    >>> print("error =", abs(estimate - problem.answer))
    """

    def __init__(self, sampler: Optional[Sampler] = None,
                 seed: Optional[int] = None):
        if sampler is None:
            sampler = UniformSampler(seed)
        elif seed is not None:
            raise ValueError('give either sampler or seed, not both')
        self.sampler = sampler

    def sample(self, integrand: Callable[[float], float], n: int) -> np.ndarray:
        values = np.empty(n)
        for i in range(n):
            values[i] = integrand(self.sampler())
        return values
