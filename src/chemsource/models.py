"""Data structures for species and reactions."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Tuple

from chemsource.errors import MechanismError
from chemsource.rates import RateLaw

StoichEntry = Tuple[int, int]


@dataclass(frozen=True)
class Species:
    name: str
    molar_mass: float  # kg/mol
    formula: str = ""

    def __post_init__(self) -> None:
        if not (math.isfinite(self.molar_mass) and self.molar_mass > 0.0):
            raise MechanismError(
                f"Species {self.name!r} needs a positive finite molar mass, got {self.molar_mass!r}"
            )


def _stoich_entries(entries, side: str, reaction_name: str) -> tuple[StoichEntry, ...]:
    result = []
    for species_id, coefficient in entries:
        if isinstance(species_id, bool) or not isinstance(species_id, int) or species_id < 0:
            raise MechanismError(
                f"Reaction {reaction_name!r}: {side} species id must be a non-negative int, "
                f"got {species_id!r}"
            )
        if isinstance(coefficient, bool) or not isinstance(coefficient, int) or coefficient <= 0:
            raise MechanismError(
                f"Reaction {reaction_name!r}: {side} stoichiometric coefficient must be a "
                f"positive int, got {coefficient!r}"
            )
        result.append((species_id, coefficient))
    if not result:
        raise MechanismError(f"Reaction {reaction_name!r} has no {side}s")
    return tuple(result)


@dataclass(frozen=True)
class Reaction:
    """One elementary reaction.

    Reactants and products are ordered ``(species_id, coefficient)`` pairs.
    The order is kept as declared and a species may appear on both sides.

    Attributes:
        name: Human readable equation or label.
        reactants: Reactant entries, coefficients are positive ints.
        products: Product entries, coefficients are positive ints.
        rate: Forward rate-constant law.
        reversible: Whether a backward rate follows from the equilibrium constant.
        third_body: Multiply the net rate by the third-body concentration [M].
        efficiencies: Per-species third-body efficiencies (default 1.0).
            Declaring any makes the reaction a third-body reaction.
    """

    name: str
    reactants: tuple[StoichEntry, ...]
    products: tuple[StoichEntry, ...]
    rate: RateLaw
    reversible: bool = True
    third_body: bool = False
    efficiencies: Mapping[int, float] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "reactants", _stoich_entries(self.reactants, "reactant", self.name))
        object.__setattr__(self, "products", _stoich_entries(self.products, "product", self.name))
        object.__setattr__(self, "efficiencies", MappingProxyType(dict(self.efficiencies)))
        for species_id in self.efficiencies:
            if isinstance(species_id, bool) or not isinstance(species_id, int) or species_id < 0:
                raise MechanismError(
                    f"Reaction {self.name!r}: efficiency species id must be a non-negative int, "
                    f"got {species_id!r}"
                )
        if self.efficiencies:
            object.__setattr__(self, "third_body", True)

    def n_reactants(self) -> int:
        return len(self.reactants)

    def n_products(self) -> int:
        return len(self.products)

    def reactant_id(self, r: int) -> int:
        return self.reactants[r][0]

    def reactant_stoichiometric_coefficient(self, r: int) -> int:
        return self.reactants[r][1]

    def product_id(self, p: int) -> int:
        return self.products[p][0]

    def product_stoichiometric_coefficient(self, p: int) -> int:
        return self.products[p][1]

    def gamma(self) -> int:
        """Change in moles, products minus reactants."""
        return sum(nu for _, nu in self.products) - sum(nu for _, nu in self.reactants)

    def species_ids(self) -> frozenset[int]:
        ids = {s for s, _ in self.reactants}
        ids.update(s for s, _ in self.products)
        ids.update(self.efficiencies)
        return frozenset(ids)
