from . import samplers, example_problems, integrators
from .proposals import Proposal
from .integrators import Integrator, CrudeMcIntegrator, ISIntegrator
from .compare_integrators import compare_integrators, format_table
from .utils import ResultDict

__all__ = [
    "samplers",
    "example_problems",
    "integrators",
    "Proposal",
    "Integrator",
    "CrudeMcIntegrator",
    "ISIntegrator",
    "compare_integrators",
    "format_table",
    "ResultDict",
]
