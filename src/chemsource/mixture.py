"""Species database: indexing and molar masses."""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np
import numpy.typing as npt

from chemsource.constants import R_GAS
from chemsource.errors import MechanismError
from chemsource.models import Species

logger = logging.getLogger(__name__)


class ChemicalMixture:
    """Ordered set of species.

    The position of a species in ``species`` is its index everywhere else:
    state vectors, reaction stoichiometry and mass-source output.
    """

    def __init__(self, species: Sequence[Species]):
        self._species = tuple(species)
        self._index = {}
        for i, sp in enumerate(self._species):
            if sp.name in self._index:
                raise MechanismError(f"Duplicate species name: {sp.name!r}")
            self._index[sp.name] = i
        self._molar_masses = np.array([sp.molar_mass for sp in self._species], dtype=float)
        self._molar_masses.setflags(write=False)
        logger.debug("Built ChemicalMixture with %d species", len(self._species))

    def n_species(self) -> int:
        return len(self._species)

    def M(self, species_id: int) -> float:
        """Molar mass of ``species_id`` (kg/mol)."""
        return float(self._molar_masses[species_id])

    def molar_masses(self) -> npt.NDArray[np.float64]:
        return self._molar_masses

    def species(self, species_id: int) -> Species:
        return self._species[species_id]

    def species_index(self, name: str) -> int:
        try:
            return self._index[name]
        except KeyError:
            raise MechanismError(f"Unknown species: {name!r}") from None

    def species_name(self, species_id: int) -> str:
        return self._species[species_id].name

    def species_names(self) -> list[str]:
        return [sp.name for sp in self._species]

    def R(self, species_id: int) -> float:
        """Species gas constant (J/kg/K)."""
        return R_GAS / self.M(species_id)

    def R_mix(self, mass_fractions: npt.ArrayLike) -> float:
        """Mixture gas constant, sum of Y_s * R_s (J/kg/K)."""
        return float(R_GAS * np.sum(np.asarray(mass_fractions, dtype=float) / self._molar_masses))

    def M_mix(self, mass_fractions: npt.ArrayLike) -> float:
        return float(1.0 / np.sum(np.asarray(mass_fractions, dtype=float) / self._molar_masses))

    def molar_densities(self, rho: float, mass_fractions: npt.ArrayLike) -> npt.NDArray[np.float64]:
        """Species molar densities rho * Y_s / M_s (mol/m^3)."""
        return rho * np.asarray(mass_fractions, dtype=float) / self._molar_masses

    def mole_fractions(self, mass_fractions: npt.ArrayLike) -> npt.NDArray[np.float64]:
        y = np.asarray(mass_fractions, dtype=float)
        return y * self.M_mix(y) / self._molar_masses

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(species={self.species_names()})"
