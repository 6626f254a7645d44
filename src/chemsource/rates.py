"""Rate-constant laws for elementary reactions.

Every law is a frozen dataclass exposing ``rate_constant(temperature)``. The
family is chosen per reaction when the mechanism is built, see `build_rate`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Protocol

import numpy as np

from chemsource.constants import R_GAS
from chemsource.errors import MechanismError


class RateLaw(Protocol):
    kind: str

    def rate_constant(self, temperature: float) -> float:
        """Calculate the forward rate constant at ``temperature``."""
        ...


@dataclass(frozen=True)
class ConstantRate:
    pre_exponential: float
    kind: str = "constant"

    def rate_constant(self, temperature: float) -> float:
        return self.pre_exponential


@dataclass(frozen=True)
class HercourtEssenRate:
    pre_exponential: float
    temperature_exponent: float
    reference_temperature: float = 1.0
    kind: str = "hercourt_essen"

    def rate_constant(self, temperature: float) -> float:
        return self.pre_exponential * (temperature / self.reference_temperature) ** self.temperature_exponent


@dataclass(frozen=True)
class BerthelotRate:
    pre_exponential: float
    d: float  # 1/K
    kind: str = "berthelot"

    def rate_constant(self, temperature: float) -> float:
        return self.pre_exponential * np.exp(self.d * temperature)


@dataclass(frozen=True)
class ArrheniusRate:
    pre_exponential: float
    activation_energy: float  # J/mol
    kind: str = "arrhenius"

    def rate_constant(self, temperature: float) -> float:
        return self.pre_exponential * np.exp(-self.activation_energy / (R_GAS * temperature))


@dataclass(frozen=True)
class BerthelotHercourtEssenRate:
    pre_exponential: float
    temperature_exponent: float
    d: float
    reference_temperature: float = 1.0
    kind: str = "berthelot_hercourt_essen"

    def rate_constant(self, temperature: float) -> float:
        return (
            self.pre_exponential
            * (temperature / self.reference_temperature) ** self.temperature_exponent
            * np.exp(self.d * temperature)
        )


@dataclass(frozen=True)
class KooijRate:
    """Modified Arrhenius: k = A * (T/T_ref)^b * exp(-Ea / RT)."""

    pre_exponential: float
    temperature_exponent: float
    activation_energy: float
    reference_temperature: float = 1.0
    kind: str = "kooij"

    def rate_constant(self, temperature: float) -> float:
        return (
            self.pre_exponential
            * (temperature / self.reference_temperature) ** self.temperature_exponent
            * np.exp(-self.activation_energy / (R_GAS * temperature))
        )


@dataclass(frozen=True)
class VantHoffRate:
    """k = A * (T/T_ref)^b * exp(-Ea / RT + D * T)."""

    pre_exponential: float
    temperature_exponent: float
    activation_energy: float
    d: float
    reference_temperature: float = 1.0
    kind: str = "vant_hoff"

    def rate_constant(self, temperature: float) -> float:
        return (
            self.pre_exponential
            * (temperature / self.reference_temperature) ** self.temperature_exponent
            * np.exp(-self.activation_energy / (R_GAS * temperature) + self.d * temperature)
        )


def _ref(params: Mapping[str, Any]) -> float:
    return float(params.get("Tref", 1.0))


_BUILDERS: Dict[str, Callable[[Mapping[str, Any]], RateLaw]] = {
    "constant": lambda p: ConstantRate(float(p["A"])),
    "hercourt_essen": lambda p: HercourtEssenRate(float(p["A"]), float(p["b"]), _ref(p)),
    "berthelot": lambda p: BerthelotRate(float(p["A"]), float(p["D"])),
    "arrhenius": lambda p: ArrheniusRate(float(p["A"]), float(p["Ea"])),
    "berthelot_hercourt_essen": lambda p: BerthelotHercourtEssenRate(
        float(p["A"]), float(p["b"]), float(p["D"]), _ref(p)
    ),
    "kooij": lambda p: KooijRate(float(p["A"]), float(p["b"]), float(p["Ea"]), _ref(p)),
    "vant_hoff": lambda p: VantHoffRate(
        float(p["A"]), float(p["b"]), float(p["Ea"]), float(p["D"]), _ref(p)
    ),
}

RATE_KINDS = tuple(_BUILDERS)


def build_rate(kind: str, params: Mapping[str, Any]) -> RateLaw:
    """Build a rate law from its family name and parameters.

    Parameter keys follow the usual mechanism-file shorthand: ``A``, ``b``,
    ``Ea`` (J/mol), ``D`` (1/K) and ``Tref`` (K, optional).
    """
    key = kind.lower().replace("-", "_")
    # "modified_arrhenius" is the common name for the Kooij form
    if key == "modified_arrhenius":
        key = "kooij"
    try:
        builder = _BUILDERS[key]
    except KeyError:
        raise MechanismError(f"Unknown rate law: {kind}") from None
    try:
        return builder(params)
    except KeyError as exc:
        raise MechanismError(f"Rate law {kind!r} is missing parameter {exc.args[0]!r}") from None
    except (TypeError, ValueError) as exc:
        raise MechanismError(f"Rate law {kind!r} has an invalid parameter: {exc}") from None
