"""Ideal gas thermodynamics."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np
import numpy.typing as npt

from chemsource.constants import R_GAS
from chemsource.thermo.base import ThermoInterface


@dataclass(frozen=True)
class SpeciesThermo:
    heat_capacity: float  # J/mol/K (constant)
    heat_of_formation: float  # J/mol at reference_temperature
    standard_entropy: float  # J/mol/K at reference_temperature and P_STANDARD
    reference_temperature: float = 298.15  # K


class IdealGasThermo(ThermoInterface):
    """Ideal gas thermodynamics with constant Cp.

    Properties are given in species-index order.
    """

    def __init__(self, properties: Sequence[SpeciesThermo]):
        self.properties = tuple(properties)
        self._cp = np.array([p.heat_capacity for p in self.properties], dtype=float)
        self._h_ref = np.array([p.heat_of_formation for p in self.properties], dtype=float)
        self._s_ref = np.array([p.standard_entropy for p in self.properties], dtype=float)
        self._t_ref = np.array([p.reference_temperature for p in self.properties], dtype=float)

    def n_species(self) -> int:
        return len(self.properties)

    def enthalpy(self, temperature: float) -> npt.NDArray[np.float64]:
        """Molar enthalpy per species (J/mol)."""
        # H(T) = H_form + Cp * (T - T_ref)
        return self._h_ref + self._cp * (temperature - self._t_ref)

    def entropy(self, temperature: float) -> npt.NDArray[np.float64]:
        """Standard-state molar entropy per species (J/mol/K)."""
        return self._s_ref + self._cp * np.log(temperature / self._t_ref)

    def h_RT_minus_s_R(self, temperature: float) -> npt.NDArray[np.float64]:
        return self.enthalpy(temperature) / (R_GAS * temperature) - self.entropy(temperature) / R_GAS
