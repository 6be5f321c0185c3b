import warnings
import numpy as np
from typing import Callable

from .base_class import Integrator
from ..proposals import Proposal


class ISIntegrator(Integrator):
    def __init__(self, pdf: Callable[[float], float],
                 generator: Callable[[], float],
                 check_finite: bool = False):
        '''
        Importance sampling integrator:
            - Draw x_i from the proposal g using <generator>
            - Weight each draw by the likelihood ratio h(x_i) / g(x_i)
            - Return the mean of the weighted draws

        The proposal is chosen by the caller, the integrator neither
        picks nor validates it. The estimate is unbiased as long as
        g(x) > 0 wherever h(x) != 0.

        Attributes
        ----------
        pdf : callable
            float -> float, the proposal density g
        generator : callable
            () -> float, draws one variate from g,
            usually built by inverse transform sampling
            (see ``Proposal.from_inverse_cdf``)
        check_finite : bool
            if True, warn when some weighted draws are not finite,
            which happens when g vanishes at a sampled point.
            Default: False

        Example
        -------
        >>> from mcQuadrature.integrators import ISIntegrator
        >>> from mcQuadrature.proposals import Proposal
        >>> from mcQuadrature.example_problems import QuarterCircle
        >>> problem = QuarterCircle()
        >>> proposal = Proposal.linear(slope=0.5)
        >>> integ = ISIntegrator(proposal.pdf, proposal.generator)
        >>> estimate = integ.estimate(problem.integrand, 10_000)
        '''
        if not callable(pdf):
            raise TypeError("pdf must be callable")
        if not callable(generator):
            raise TypeError("generator must be callable")
        self.pdf = pdf
        self.generator = generator
        self.check_finite = check_finite

    @classmethod
    def from_proposal(cls, proposal: Proposal,
                      check_finite: bool = False) -> "ISIntegrator":
        return cls(proposal.pdf, proposal.generator, check_finite=check_finite)

    def sample(self, integrand: Callable[[float], float], n: int) -> np.ndarray:
        hs = np.empty(n)
        gs = np.empty(n)
        for i in range(n):
            x = self.generator()
            hs[i] = integrand(x)
            gs[i] = self.pdf(x)

        # a vanishing density gives inf / nan instead of raising
        with np.errstate(divide='ignore', invalid='ignore'):
            values = hs / gs

        if self.check_finite:
            n_bad = int(np.sum(~np.isfinite(values)))
            if n_bad > 0:
                warnings.warn(
                    f'{n_bad} of {n} weighted samples are not finite, '
                    'the proposal density vanishes where the integrand does not',
                    RuntimeWarning)

        return values
