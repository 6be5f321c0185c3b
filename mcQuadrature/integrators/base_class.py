from abc import ABC, abstractmethod
from typing import Callable

import numpy as np

from ..example_problems import Problem
from ..utils import ResultDict, handle_n


class Integrator(ABC):
    """
    Abstract base class for integrators.

    Subclasses implement ``sample``, which returns the contribution
    of each of the n draws; the estimate is their sum divided by n.
    """

    @property
    def name(self) -> str:
        return getattr(self, '_name', type(self).__name__)

    @name.setter
    def name(self, value: str) -> None:
        self._name = value

    @abstractmethod
    def sample(self, integrand: Callable[[float], float], n: int) -> np.ndarray:
        """
        Draw n samples and weight them.

        Parameters
        ----------
        integrand : callable
            float -> float, the function being integrated
        n : int
            number of samples, already validated

        Returns
        -------
        np.ndarray of shape (n,)
            the contribution of each draw
        """
        pass

    @staticmethod
    def _reduce(values: np.ndarray, n: int) -> float:
        """sum the contributions once, then divide by n once"""
        return float(np.sum(values) / n)

    def estimate(self, integrand: Callable[[float], float], n: int) -> float:
        """
        Estimate the integral of integrand using n samples.

        Each call draws fresh samples, so repeated calls
        give different estimates.

        Parameters
        ----------
        integrand : callable
            float -> float.
            Errors raised by the integrand are not caught.
        n : int
            number of samples, at least 1

        Returns
        -------
        float
            the estimate
        """
        n = handle_n(n)
        values = self.sample(integrand, n)
        return self._reduce(values, n)

    def __call__(self, problem: Problem, n: int, return_N: bool = False,
                 return_std: bool = False) -> ResultDict:
        """
        Perform integration on the given problem.

        Parameters
        ----------
        problem : Problem
            The problem to be integrated.
        n : int
            number of samples
        return_N : bool, optional
            If True, return the number of samples used.
        return_std : bool, optional
            If True, return the standard error of the estimate.

        Returns
        -------
        dict
            - estimate (float) : estimated integral value
            - n_evals (int) : number of function evaluations, if return_N is True
            - std (float) : standard error of the estimate, if return_std is True
        """
        n = handle_n(n)
        values = self.sample(problem.integrand, n)

        ret = ResultDict(estimate=self._reduce(values, n))
        if return_N:
            ret['n_evals'] = n
        if return_std:
            if n > 1:
                ret['std'] = float(np.std(values, ddof=1) / np.sqrt(n))
            else:
                ret['std'] = 0.0
        return ret

    def __repr__(self) -> str:
        return self.name
