from abc import ABC, abstractmethod


class Problem(ABC):
    '''
    base class for integration problems on [0, 1)

    Attributes
    ----------
    lows, highs : float
        the lower and upper bound of integration domain,
        always 0.0 and 1.0
    answer : float
        the True solution to int integrand(x) dx

    Methods
    -------
    integrand(x)
        the function being integrated
        MUST be implemented by subclasses
        input : float
        return : float
    '''
    lows = 0.0
    highs = 1.0

    def __init__(self):
        self.answer = None

    @abstractmethod
    def integrand(self, x: float) -> float:
        """
        must be defined, the function being integrated

        Argument
        --------
        x : float
            a point of [0, 1)

        Return
        ------
        float
            the value of the integrand at x
        """
        pass

    def __str__(self) -> str:
        return f'Problem(lows={self.lows}, highs={self.highs})'
