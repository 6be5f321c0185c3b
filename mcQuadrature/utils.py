import numpy as np
from typing import Any, Dict
from collections.abc import MutableMapping


def handle_n(n) -> int:
    """
    Check the number of samples requested from an
    integrator or a sampler

    Parameter
    ---------
    n : int
        number of samples, must be at least 1

    Return
    ------
    int
        n as a python int
    """
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
        raise TypeError(f"n must be an integer, got {n} of type "
                        f"{type(n).__name__}")
    if n < 1:
        raise ValueError(f"n must be a positive integer, got {n}")
    return int(n)


class ResultDict(MutableMapping):
    """
    A dictionary-like object designed for integrators \n
    Only accepts float values for the 'estimate' key.
    """

    def __init__(self, estimate: float, **kwargs):
        """
        Parameters
        ----------
        estimate : float
            The estimate of the integral.
        **kwargs : Any
            Other keys and values to be added to the dictionary. \n
            Not compulsory, but can be used to add other keys like: \n
            - n_evals (int): The number of evaluations.
            - std (float): The standard error of the estimate.

        Example
        -------
        >>> result = ResultDict(estimate=1.0, n_evals=100)
        >>> result['estimate']
        1.0
        >>> # Adding estimate as a string will raise a TypeError
        >>> try:
        >>>    result['estimate'] = '1.0'
        >>> except TypeError as e:
        >>>    print(e)
        'estimate' must be a float, got str
        """
        if not isinstance(estimate, float):
            raise TypeError(
                f"'estimate' must be a float, got {type(estimate).__name__}"
            )
        self._data: Dict[str, Any] = {"estimate": estimate}
        self.update(kwargs)  # MutableMapping.update goes through __setitem__

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __setitem__(self, key: str, value: Any) -> None:
        if key == "estimate":
            if not isinstance(value, float):
                raise TypeError(
                    f"'estimate' must be a float, got {type(value).__name__}"
                )
        elif key == "n_evals":
            if not isinstance(value, int):
                raise TypeError("'n_evals' must be an int, "
                                f"got {type(value).__name__}")
        elif key == "std":
            if not isinstance(value, float):
                raise TypeError("'std' must be a float, "
                                f"got {type(value).__name__}")

        self._data[key] = value

    def __delitem__(self, key: str) -> None:
        if key == "estimate":
            raise KeyError("'estimate' key cannot be deleted")
        del self._data[key]

    def __iter__(self):
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return repr(self._data)
