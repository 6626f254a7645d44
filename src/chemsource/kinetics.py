"""Species mass source terms from a reaction set.

`Kinetics` preallocates its work arrays, so create one per thread when running
threaded. It only keeps a reference to an existing `ReactionSet`, which makes
construction cheap; the reaction set must outlive it and must not change
while it is in use.
"""

from __future__ import annotations

import logging

import numpy as np
import numpy.typing as npt

from chemsource.config import check_preconditions_default
from chemsource.errors import ContractViolation
from chemsource.reaction_set import ReactionSet
from chemsource.validation import check_equal_to, check_greater, check_length

logger = logging.getLogger(__name__)


class Kinetics:
    """Computes species production/destruction rates for a `ReactionSet`.

    Args:
        reaction_set: Mechanism to evaluate. Borrowed, not copied.
        check_preconditions: Run the call-entry contract checks. Defaults to
            the ``CHEMSOURCE_CHECK_PRECONDITIONS`` setting.
    """

    def __init__(self, reaction_set: ReactionSet, check_preconditions: bool | None = None):
        self._reaction_set = reaction_set
        self._chem_mixture = reaction_set.chemical_mixture()
        self._net_reaction_rates = np.zeros(reaction_set.n_reactions())

        if check_preconditions is None:
            check_preconditions = check_preconditions_default()
        self._check_preconditions = check_preconditions

        # One entry per reactant/product occurrence, in reaction order with
        # reactants before products, as declared. Reactant coefficients are
        # stored negated.
        species, reactions, coefficients = [], [], []
        for rxn in range(reaction_set.n_reactions()):
            reaction = reaction_set.reaction(rxn)
            for r in range(reaction.n_reactants()):
                species.append(reaction.reactant_id(r))
                reactions.append(rxn)
                coefficients.append(-float(reaction.reactant_stoichiometric_coefficient(r)))
            for p in range(reaction.n_products()):
                species.append(reaction.product_id(p))
                reactions.append(rxn)
                coefficients.append(float(reaction.product_stoichiometric_coefficient(p)))
        self._entry_species = np.array(species, dtype=np.intp)
        self._entry_reaction = np.array(reactions, dtype=np.intp)
        self._entry_coefficient = np.array(coefficients, dtype=float)
        self._entry_rates = np.zeros(len(coefficients))

        logger.debug(
            "Kinetics bound to %d reactions, %d species, %d stoichiometric entries "
            "(precondition checks %s)",
            self.n_reactions(),
            self.n_species(),
            len(coefficients),
            "on" if check_preconditions else "off",
        )

    def reaction_set(self) -> ReactionSet:
        return self._reaction_set

    def n_species(self) -> int:
        return self._chem_mixture.n_species()

    def n_reactions(self) -> int:
        return self._reaction_set.n_reactions()

    @property
    def check_preconditions(self) -> bool:
        return self._check_preconditions

    @property
    def net_reaction_rates(self) -> npt.NDArray[np.float64]:
        """Read-only view of the net rates from the latest evaluation."""
        view = self._net_reaction_rates.view()
        view.setflags(write=False)
        return view

    def compute_mass_sources(
        self,
        T: float,
        rho: float,
        R_mix: float,
        mass_fractions: npt.ArrayLike,
        molar_densities: npt.ArrayLike,
        h_RT_minus_s_R: npt.ArrayLike,
        mass_sources: npt.NDArray[np.float64],
    ) -> None:
        """Compute species production/destruction rates per unit volume (kg/m^3/s).

        ``mass_sources`` is overwritten in place: positive for net production,
        negative for net destruction. Contributions are summed in reaction
        order, reactants then products as declared, so identical inputs give
        bit-identical output.

        Raises:
            ContractViolation: When precondition checks are on and ``T``,
                ``rho`` or ``R_mix`` is not positive, or an array has the
                wrong length.
        """
        if self._check_preconditions:
            self._check_arguments(T, rho, R_mix, mass_fractions, molar_densities,
                                  h_RT_minus_s_R, mass_sources)

        mass_sources.fill(0.0)

        self._reaction_set.compute_reaction_rates(
            T, rho, R_mix, mass_fractions, molar_densities, h_RT_minus_s_R,
            self._net_reaction_rates,
        )

        # molar sources, mol/m^3/s
        np.take(self._net_reaction_rates, self._entry_reaction, out=self._entry_rates)
        np.multiply(self._entry_coefficient, self._entry_rates, out=self._entry_rates)
        # ufunc.at applies entries one at a time in order, so repeated species accumulate
        np.add.at(mass_sources, self._entry_species, self._entry_rates)

        # finally scale by molar mass
        mass_sources *= self._chem_mixture.molar_masses()

    def mass_sources(
        self,
        T: float,
        rho: float,
        R_mix: float,
        mass_fractions: npt.ArrayLike,
        molar_densities: npt.ArrayLike,
        h_RT_minus_s_R: npt.ArrayLike,
    ) -> npt.NDArray[np.float64]:
        """Allocating variant of `compute_mass_sources`."""
        out = np.zeros(self.n_species())
        self.compute_mass_sources(T, rho, R_mix, mass_fractions, molar_densities,
                                  h_RT_minus_s_R, out)
        return out

    def _check_arguments(self, T, rho, R_mix, mass_fractions, molar_densities,
                         h_RT_minus_s_R, mass_sources) -> None:
        check_greater(T, 0.0, "T")
        check_greater(rho, 0.0, "rho")
        check_greater(R_mix, 0.0, "R_mix")
        n_species = self.n_species()
        check_length(mass_fractions, n_species, "mass_fractions")
        check_length(molar_densities, n_species, "molar_densities")
        check_length(h_RT_minus_s_R, n_species, "h_RT_minus_s_R")
        if not isinstance(mass_sources, np.ndarray) or not np.issubdtype(mass_sources.dtype, np.floating):
            raise ContractViolation("mass_sources must be a floating point numpy array")
        check_length(mass_sources, n_species, "mass_sources")
        check_length(self._net_reaction_rates, self.n_reactions(), "net_reaction_rates")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(n_species={self.n_species()}, n_reactions={self.n_reactions()})"
