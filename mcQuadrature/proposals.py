import math
import numpy as np
from typing import Callable, Optional, Tuple

from .samplers import Sampler, UniformSampler


def _handle_sampler(sampler: Optional[Sampler], seed: Optional[int]) -> Sampler:
    if sampler is None:
        return UniformSampler(seed)
    if seed is not None:
        raise ValueError('give either sampler or seed, not both')
    return sampler


class Proposal:
    """
    A proposal distribution for importance sampling:
    a density and a generator drawing from it.

    The pair is not validated, it is up to the caller to make sure
    ``generator`` really samples from ``pdf`` and that ``pdf`` is
    positive wherever the integrand is non-zero.

    Attributes
    ----------
    pdf : callable
        float -> float, the proposal density g(x)
    generator : callable
        () -> float, draws one variate from g
    params : dict
        parameters of the factory that built the proposal

    Examples
    --------
    >>> # g(x) = 2(1 - x), sampled by inversion x = 1 - sqrt(1 - U)
    >>> proposal = Proposal.linear(slope=1.0, seed=0)
    >>> x = proposal()
    >>> proposal.pdf(0.25)
    1.5

    >>> # any density with a closed form inverse CDF
    >>> proposal = Proposal.from_inverse_cdf(
    ...     lambda x: 3 * x ** 2, lambda u: u ** (1 / 3))
    """

    def __init__(self, pdf: Callable[[float], float],
                 generator: Callable[[], float],
                 params: Optional[dict] = None):
        if not callable(pdf):
            raise TypeError("pdf must be callable")
        if not callable(generator):
            raise TypeError("generator must be callable")
        self.pdf = pdf
        self.generator = generator
        self.params = {} if params is None else params

    def __call__(self) -> float:
        return self.generator()

    def __repr__(self) -> str:
        return f"Proposal(params={self.params})"

    @staticmethod
    def from_inverse_cdf(pdf: Callable[[float], float],
                         inverse_cdf: Callable[[float], float],
                         sampler: Optional[Sampler] = None,
                         seed: Optional[int] = None) -> "Proposal":
        """
        Build a proposal by inverse transform sampling:
        x = G^{-1}(U) with U ~ U(0, 1).

        Parameters
        ----------
        pdf : callable
            the density g
        inverse_cdf : callable
            the inverse of the cumulative distribution function of g
        sampler : Sampler, optional
            the source of uniform variates.
            Default: a new UniformSampler(seed)
        seed : int, optional
            seed of the default sampler

        Returns
        -------
        Proposal
        """
        if not callable(inverse_cdf):
            raise TypeError("inverse_cdf must be callable")
        sampler = _handle_sampler(sampler, seed)

        def generator() -> float:
            return inverse_cdf(sampler())

        return Proposal(pdf, generator, params={'sampler': sampler})

    @staticmethod
    def uniform(sampler: Optional[Sampler] = None,
                seed: Optional[int] = None) -> "Proposal":
        """Uniform density on [0, 1), g(x) = 1"""

        def pdf(x: float) -> float:
            return 1.0 if 0.0 <= x < 1.0 else 0.0

        proposal = Proposal.from_inverse_cdf(
            pdf, lambda u: u, sampler=sampler, seed=seed)
        proposal.params['kind'] = 'uniform'
        return proposal

    @staticmethod
    def linear(slope: float = 1.0, sampler: Optional[Sampler] = None,
               seed: Optional[int] = None) -> "Proposal":
        """
        Linearly decreasing density on [0, 1)

        .. math::
            g(x) = \\frac{1 - a x}{1 - a / 2}

        sampled by inversion

        .. math::
            x = \\frac{1 - \\sqrt{1 - 2 a c U}}{a}, \\quad c = 1 - a / 2

        Parameters
        ----------
        slope : float
            a in [0, 1]. a = 1 gives g(x) = 2(1 - x),
            a = 0 the uniform density.
        sampler, seed
            see ``from_inverse_cdf``
        """
        if not 0.0 <= slope <= 1.0:
            raise ValueError(f"slope must be in [0, 1], got {slope}")
        a = float(slope)
        c = 1.0 - a / 2

        def pdf(x: float) -> float:
            if 0.0 <= x < 1.0:
                return (1.0 - a * x) / c
            return 0.0

        def inverse_cdf(u: float) -> float:
            if a == 0.0:
                return u
            return (1.0 - math.sqrt(1.0 - 2 * a * c * u)) / a

        proposal = Proposal.from_inverse_cdf(
            pdf, inverse_cdf, sampler=sampler, seed=seed)
        proposal.params.update({'kind': 'linear', 'slope': a})
        return proposal

    @staticmethod
    def exponential(rate: float = 1.0, sampler: Optional[Sampler] = None,
                    seed: Optional[int] = None) -> "Proposal":
        """
        Exponential density truncated to [0, 1)

        .. math::
            g(x) = \\frac{r e^{-r x}}{1 - e^{-r}}

        sampled by inversion x = -log(1 - U (1 - e^{-r})) / r.
        A negative rate gives an increasing density, evaluated as the
        mirror image s e^{s (x - 1)} / (1 - e^{-s}) with s = -r so that
        steep rates do not overflow.

        Parameters
        ----------
        rate : float
            r, must be non-zero and finite
        sampler, seed
            see ``from_inverse_cdf``
        """
        if rate == 0:
            raise ValueError("rate must be non-zero, use Proposal.uniform instead")
        r = float(rate)
        if not math.isfinite(r):
            raise ValueError(f"rate must be finite, got {rate}")
        s = abs(r)
        # mass of s e^{-s x} on [0, 1), never overflows for s > 0
        mass = -math.expm1(-s)

        if r > 0:
            def pdf(x: float) -> float:
                if 0.0 <= x < 1.0:
                    return s * math.exp(-s * x) / mass
                return 0.0

            def inverse_cdf(u: float) -> float:
                return -math.log1p(-u * mass) / s
        else:
            def pdf(x: float) -> float:
                if 0.0 <= x < 1.0:
                    return s * math.exp(s * (x - 1.0)) / mass
                return 0.0

            def inverse_cdf(u: float) -> float:
                t = -(1.0 - u) * mass
                if t <= -1.0:
                    return 0.0
                return max(0.0, 1.0 + math.log1p(t) / s)

        proposal = Proposal.from_inverse_cdf(
            pdf, inverse_cdf, sampler=sampler, seed=seed)
        proposal.params.update({'kind': 'exponential', 'rate': r})
        return proposal

    @staticmethod
    def from_pdf(pdf: Callable[[float], float],
                 support: Tuple[float, float] = (0.0, 1.0),
                 table_size: int = 2048,
                 sampler: Optional[Sampler] = None,
                 seed: Optional[int] = None) -> "Proposal":
        """
        Build a proposal from a density without a closed form inverse CDF.

        The CDF is tabulated with the trapezoidal rule on ``support`` and
        inverted by linear interpolation. The density does not need to be
        normalised; the ``pdf`` of the returned proposal is.

        Parameters
        ----------
        pdf : callable
            float -> float. Negative and non-finite values
            are treated as 0, in the table and in the returned ``pdf``.
        support : tuple
            (x_min, x_max)
        table_size : int
            number of grid points (minimum 1000)
        sampler, seed
            see ``from_inverse_cdf``

        Raises
        ------
        ValueError
            If the integral of ``pdf`` over ``support`` is zero

        Example
        -------
        >>> proposal = Proposal.from_pdf(lambda x: 1 - x * x)
        """
        if not callable(pdf):
            raise TypeError("pdf must be callable")
        x_min, x_max = support
        if not x_max > x_min:
            raise ValueError(f"support must satisfy x_min < x_max, got {support}")

        x_grid, cdf_values, total = _compute_cdf_table(pdf, x_min, x_max, table_size)

        def normalised_pdf(x: float) -> float:
            if not x_min <= x <= x_max:
                return 0.0
            # same scrubbing as the CDF table
            value = float(pdf(x))
            if not math.isfinite(value) or value < 0.0:
                return 0.0
            return value / total

        proposal = Proposal.from_inverse_cdf(
            normalised_pdf,
            lambda u: float(np.interp(u, cdf_values, x_grid)),
            sampler=sampler, seed=seed)
        proposal.params.update({'kind': 'table', 'support': (x_min, x_max),
                                'table_size': len(x_grid)})
        return proposal


def _compute_cdf_table(pdf: Callable, x_min: float, x_max: float,
                       n_points: int = 2048) -> tuple:
    """
    Compute normalised CDF lookup table on support.

    Uses trapezoidal rule for numerical integration and enforces
    normalisation so the CDF endpoint is exactly 1.0.

    Returns
    -------
    tuple
        (x_grid, cdf_values, total) where total is the
        integral of pdf before normalisation
    """
    n_points = max(n_points, 1000)

    x_grid = np.linspace(x_min, x_max, n_points)
    pdf_values = np.array([pdf(x) for x in x_grid], dtype=float)

    pdf_values = np.nan_to_num(pdf_values, nan=0.0, posinf=0.0, neginf=0.0)
    pdf_values = np.clip(pdf_values, 0, None)

    dx = (x_max - x_min) / (n_points - 1)
    cdf_values = np.zeros(n_points)
    cdf_values[1:] = np.cumsum((pdf_values[:-1] + pdf_values[1:]) / 2) * dx

    total = cdf_values[-1]
    if total <= 0:
        raise ValueError(
            "PDF integral is zero. Please check the PDF function or support range."
        )
    cdf_values = cdf_values / total

    return x_grid, cdf_values, float(total)
