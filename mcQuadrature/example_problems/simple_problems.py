import math
from typing import Callable, Optional

from scipy.integrate import quad

from .base_class import Problem


class QuarterCircle(Problem):
    """
    Four times the area under the unit quarter circle.

    .. math::
        f(x) = 4 \\sqrt{1 - x^2}

    The integral over [0, 1] is :math:`\\pi`.
    The integrand uses ``math.sqrt``, so evaluating it
    outside [-1, 1] raises ValueError.
    """

    def __init__(self):
        super().__init__()
        self.answer = math.pi

    def integrand(self, x) -> float:
        return 4 * math.sqrt(1 - x * x)

    def __str__(self) -> str:
        return "QuarterCircle"


class Constant(Problem):
    def __init__(self, c: float = 1.0):
        """
        Parameters
        ----------
        c : float
            the value of the integrand everywhere, also the answer
        """
        super().__init__()
        self.c = float(c)
        self.answer = self.c

    def integrand(self, x) -> float:
        return self.c

    def __str__(self) -> str:
        return f"Constant(c={self.c})"


class Monomial(Problem):
    def __init__(self, k: int = 2):
        """
        Parameters
        ----------
        k : int
            the power of x, must be non-negative

        Notes
        -----
        f(x) = x^k, the integral over [0, 1] is 1 / (k + 1)
        """
        super().__init__()
        if k < 0:
            raise ValueError(f"k must be non-negative, got {k}")
        self.k = k
        self.answer = 1 / (k + 1)

    def integrand(self, x) -> float:
        return x ** self.k

    def __str__(self) -> str:
        return f"Monomial(k={self.k})"


class Exponential(Problem):
    def __init__(self, rate: float = 1.0):
        """
        Parameters
        ----------
        rate : float
            f(x) = exp(rate * x)

        Notes
        -----
        the integral over [0, 1] is (e^rate - 1) / rate,
        and 1 when rate is 0
        """
        super().__init__()
        self.rate = rate
        if rate == 0:
            self.answer = 1.0
        else:
            self.answer = math.expm1(rate) / rate

    def integrand(self, x) -> float:
        return math.exp(self.rate * x)

    def __str__(self) -> str:
        return f"Exponential(rate={self.rate})"


class CustomProblem(Problem):
    """
    Wrap an arbitrary integrand.

    Attributes
    ----------
    f : callable
        the integrand, float -> float
    answer : float
        given by the caller, or computed by
        scipy.integrate.quad over [0, 1] when not given
    name : str
        used by __str__
    """

    def __init__(self, integrand: Callable[[float], float],
                 answer: Optional[float] = None,
                 name: Optional[str] = None):
        super().__init__()
        if not callable(integrand):
            raise TypeError("integrand must be callable")
        self.f = integrand
        self.name = name if name is not None else getattr(
            integrand, '__name__', 'CustomProblem')

        if answer is None:
            answer, _ = quad(integrand, self.lows, self.highs)
        self.answer = float(answer)

    def integrand(self, x) -> float:
        return self.f(x)

    def __str__(self) -> str:
        return self.name
