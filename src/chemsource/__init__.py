"""chemsource core package."""

from chemsource.errors import ChemSourceError, ContractViolation, MechanismError
from chemsource.kinetics import Kinetics
from chemsource.mechanism import Mechanism, load_mechanism, mechanism_from_dict
from chemsource.mixture import ChemicalMixture
from chemsource.models import Reaction, Species
from chemsource.rates import ArrheniusRate, ConstantRate, KooijRate, build_rate
from chemsource.reaction_set import ReactionSet

__all__ = [
    "ArrheniusRate",
    "ChemicalMixture",
    "ChemSourceError",
    "ConstantRate",
    "ContractViolation",
    "Kinetics",
    "KooijRate",
    "Mechanism",
    "MechanismError",
    "Reaction",
    "ReactionSet",
    "Species",
    "build_rate",
    "load_mechanism",
    "mechanism_from_dict",
]
