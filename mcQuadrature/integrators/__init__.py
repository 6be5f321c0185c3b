from .base_class import Integrator
from .crude_mc_integrator import CrudeMcIntegrator
from .is_integrator import ISIntegrator

__all__ = [
    "Integrator",
    "CrudeMcIntegrator",
    "ISIntegrator",
]
