"""Reaction mechanism container and net-rate evaluation."""

from __future__ import annotations

import logging
from typing import Iterator, Sequence

import numpy as np
import numpy.typing as npt

from chemsource.constants import P_STANDARD, R_GAS
from chemsource.errors import MechanismError
from chemsource.mixture import ChemicalMixture
from chemsource.models import Reaction

logger = logging.getLogger(__name__)


class ReactionSet:
    """Ordered, immutable collection of reactions over one `ChemicalMixture`.

    The position of a reaction is its id. Species ids referenced by the
    reactions are checked against the mixture here, once, so the hot path
    never has to.
    """

    def __init__(self, chemical_mixture: ChemicalMixture, reactions: Sequence[Reaction]):
        self._chem_mixture = chemical_mixture
        self._reactions = tuple(reactions)

        n_species = chemical_mixture.n_species()
        for reaction in self._reactions:
            bad = sorted(s for s in reaction.species_ids() if s >= n_species)
            if bad:
                raise MechanismError(
                    f"Reaction {reaction.name!r} references species ids {bad} "
                    f"outside [0, {n_species})"
                )

        self._gammas = tuple(reaction.gamma() for reaction in self._reactions)
        self._efficiencies = {}
        for j, reaction in enumerate(self._reactions):
            if reaction.third_body:
                eff = np.ones(n_species)
                for species_id, value in reaction.efficiencies.items():
                    eff[species_id] = value
                self._efficiencies[j] = eff

        logger.debug(
            "Built ReactionSet with %d reactions (%d third-body) over %d species",
            len(self._reactions),
            len(self._efficiencies),
            n_species,
        )

    def n_reactions(self) -> int:
        return len(self._reactions)

    def n_species(self) -> int:
        return self._chem_mixture.n_species()

    def reaction(self, reaction_id: int) -> Reaction:
        return self._reactions[reaction_id]

    def chemical_mixture(self) -> ChemicalMixture:
        return self._chem_mixture

    def __iter__(self) -> Iterator[Reaction]:
        return iter(self._reactions)

    def __len__(self) -> int:
        return len(self._reactions)

    def compute_reaction_rates(
        self,
        T: float,
        rho: float,
        R_mix: float,
        mass_fractions: npt.ArrayLike,
        molar_densities: npt.ArrayLike,
        h_RT_minus_s_R: npt.ArrayLike,
        net_reaction_rates: npt.NDArray[np.float64],
    ) -> None:
        """Fill ``net_reaction_rates`` with the net progress rate of each reaction.

        Rates are in mol/m^3/s, positive in the product direction. Reversible
        reactions take their backward rate constant from the equilibrium
        constant

            Keq = exp(-sum_s nu_s * (h/RT - s/R)_s) * (P0 / (R T))^gamma

        where nu_s is the net stoichiometric coefficient and gamma the change
        in moles. ``rho``, ``R_mix`` and ``mass_fractions`` are part of the
        calling convention but unused by elementary reactions.

        Args:
            T: Temperature (K).
            rho: Density (kg/m^3).
            R_mix: Mixture gas constant (J/kg/K).
            mass_fractions: Species mass fractions, shape (n_species,).
            molar_densities: Species molar densities (mol/m^3), shape (n_species,).
            h_RT_minus_s_R: Species Gibbs term, shape (n_species,).
            net_reaction_rates: Output, shape (n_reactions,), overwritten.
        """
        conc = np.asarray(molar_densities, dtype=float)
        gibbs = np.asarray(h_RT_minus_s_R, dtype=float)
        p0_RT = P_STANDARD / (R_GAS * T)

        for j, reaction in enumerate(self._reactions):
            kf = reaction.rate.rate_constant(T)

            forward = kf
            for species_id, nu in reaction.reactants:
                forward *= conc[species_id] ** nu
            net = forward

            if reaction.reversible:
                delta_gibbs = 0.0
                backward_product = 1.0
                for species_id, nu in reaction.products:
                    delta_gibbs += nu * gibbs[species_id]
                    backward_product *= conc[species_id] ** nu
                for species_id, nu in reaction.reactants:
                    delta_gibbs -= nu * gibbs[species_id]
                keq = np.exp(-delta_gibbs) * p0_RT ** self._gammas[j]
                net -= kf / keq * backward_product

            if reaction.third_body:
                net *= np.dot(self._efficiencies[j], conc)

            net_reaction_rates[j] = net

    def __repr__(self) -> str:
        names = ", ".join(reaction.name for reaction in self._reactions)
        return f"{self.__class__.__name__}(n_species={self.n_species()}, reactions=[{names}])"
