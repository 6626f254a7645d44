"""Base interface for thermodynamic models."""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np
import numpy.typing as npt


class ThermoInterface(ABC):
    """Abstract base class for per-species thermodynamic property packages."""

    @abstractmethod
    def n_species(self) -> int:
        pass

    @abstractmethod
    def h_RT_minus_s_R(self, temperature: float) -> npt.NDArray[np.float64]:
        """Calculate h/RT - s/R for every species (dimensionless Gibbs term)."""
        pass
