from .base_class import Problem
from .simple_problems import (
    QuarterCircle,
    Constant,
    Monomial,
    Exponential,
    CustomProblem,
)

__all__ = [
    "Problem",
    "QuarterCircle",
    "Constant",
    "Monomial",
    "Exponential",
    "CustomProblem",
]
