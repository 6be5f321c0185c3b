from abc import ABC, abstractmethod
import numpy as np


class Sampler(ABC):
    """
    Source of random variates.
    A sampler owns its random engine and must not be
    shared between concurrent workers.
    """

    @abstractmethod
    def rvs(self, n: int) -> np.ndarray:
        """
        A method to generate random samples

        Argument
        --------
        n : int
            number of samples

        Return
        ------
        np.ndarray of shape (n,)
            samples from the distribution
        """
        pass

    def __call__(self) -> float:
        """Draw a single variate"""
        return float(self.rvs(1)[0])
