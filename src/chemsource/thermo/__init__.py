from .base import ThermoInterface
from .ideal import IdealGasThermo, SpeciesThermo

__all__ = ["ThermoInterface", "IdealGasThermo", "SpeciesThermo"]
