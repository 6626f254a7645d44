"""Build mechanisms from JSON documents.

Example document::

    {
      "species": [
        {"name": "H2", "molar_mass": 0.002016, "cp": 29.1, "h_form": 0.0, "s_ref": 130.7},
        ...
      ],
      "reactions": [
        {
          "name": "H2 + M <=> 2 H + M",
          "reactants": {"H2": 1},
          "products": {"H": 2},
          "rate": {"type": "kooij", "A": 4.58e13, "b": -1.4, "Ea": 436.7e3},
          "reversible": true,
          "efficiencies": {"H2": 2.5}
        }
      ]
    }

Species thermo (``cp``, ``h_form``, ``s_ref``) is optional as a whole; without
it the mechanism has no thermo model and cannot evaluate reversible reactions
from a state file.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Mapping, NamedTuple, Optional

from chemsource.errors import MechanismError
from chemsource.mixture import ChemicalMixture
from chemsource.models import Reaction, Species
from chemsource.rates import build_rate
from chemsource.reaction_set import ReactionSet
from chemsource.thermo import IdealGasThermo, SpeciesThermo

logger = logging.getLogger(__name__)


class Mechanism(NamedTuple):
    mixture: ChemicalMixture
    reaction_set: ReactionSet
    thermo: Optional[IdealGasThermo]


def _parse_species(data: Mapping[str, Any]) -> Species:
    try:
        return Species(
            name=str(data["name"]),
            molar_mass=float(data["molar_mass"]),
            formula=str(data.get("formula", "")),
        )
    except KeyError as exc:
        raise MechanismError(f"Species entry is missing {exc.args[0]!r}: {dict(data)}") from None
    except (TypeError, ValueError) as exc:
        raise MechanismError(f"Species entry has an invalid value: {exc}") from None


def _parse_thermo(species_data: list) -> Optional[IdealGasThermo]:
    keys = ("cp", "h_form", "s_ref")
    with_thermo = [all(k in sp for k in keys) for sp in species_data]
    if not any(with_thermo):
        return None
    if not all(with_thermo):
        raise MechanismError("Thermo data (cp, h_form, s_ref) must be given for all species or none")
    try:
        return IdealGasThermo(
            [
                SpeciesThermo(
                    heat_capacity=float(sp["cp"]),
                    heat_of_formation=float(sp["h_form"]),
                    standard_entropy=float(sp["s_ref"]),
                    reference_temperature=float(sp.get("T_ref", 298.15)),
                )
                for sp in species_data
            ]
        )
    except (TypeError, ValueError) as exc:
        raise MechanismError(f"Species thermo has an invalid value: {exc}") from None


def _parse_side(side: Mapping[str, Any], mixture: ChemicalMixture) -> list:
    entries = []
    for name, coefficient in side.items():
        if isinstance(coefficient, float) and coefficient.is_integer():
            coefficient = int(coefficient)
        entries.append((mixture.species_index(name), coefficient))
    return entries


def _parse_reaction(data: Mapping[str, Any], mixture: ChemicalMixture, index: int) -> Reaction:
    name = str(data.get("name", f"R{index}"))
    try:
        rate_data: Dict[str, Any] = dict(data["rate"])
        reactants = _parse_side(data["reactants"], mixture)
        products = _parse_side(data["products"], mixture)
    except KeyError as exc:
        raise MechanismError(f"Reaction {name!r} is missing {exc.args[0]!r}") from None
    except (TypeError, ValueError) as exc:
        raise MechanismError(f"Reaction {name!r} is malformed: {exc}") from None

    kind = str(rate_data.pop("type", "arrhenius"))
    try:
        efficiencies = {
            mixture.species_index(sp): float(value)
            for sp, value in data.get("efficiencies", {}).items()
        }
    except (TypeError, ValueError) as exc:
        raise MechanismError(f"Reaction {name!r} has an invalid efficiency: {exc}") from None
    return Reaction(
        name=name,
        reactants=tuple(reactants),
        products=tuple(products),
        rate=build_rate(kind, rate_data),
        reversible=bool(data.get("reversible", True)),
        third_body=bool(data.get("third_body", False)),
        efficiencies=efficiencies,
    )


def mechanism_from_dict(data: Mapping[str, Any]) -> Mechanism:
    species_data = list(data.get("species", []))
    if not species_data:
        raise MechanismError("Mechanism declares no species")

    mixture = ChemicalMixture([_parse_species(sp) for sp in species_data])
    thermo = _parse_thermo(species_data)
    reactions = [
        _parse_reaction(rxn, mixture, i) for i, rxn in enumerate(data.get("reactions", []))
    ]
    reaction_set = ReactionSet(mixture, reactions)
    return Mechanism(mixture=mixture, reaction_set=reaction_set, thermo=thermo)


def load_mechanism(path: Path | str) -> Mechanism:
    """Load a mechanism from a JSON file."""
    with open(path, "r") as f:
        data = json.load(f)
    mechanism = mechanism_from_dict(data)
    logger.info(
        "Loaded mechanism %s: %d species, %d reactions",
        path,
        mechanism.mixture.n_species(),
        mechanism.reaction_set.n_reactions(),
    )
    return mechanism
