"""Command-line entrypoints for chemsource."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated, Any, Dict

import numpy as np
import typer

from chemsource.config import get_settings, parse_log_level
from chemsource.errors import ChemSourceError, MechanismError
from chemsource.kinetics import Kinetics
from chemsource.mechanism import Mechanism, load_mechanism
from chemsource.validation import check_greater

app = typer.Typer(add_completion=False)

logger = logging.getLogger(__name__)

LogLevelOption = Annotated[
    str | None,
    typer.Option(help="Logging level (DEBUG, INFO, WARNING, ...). Defaults to CHEMSOURCE_LOG_LEVEL."),
]


def _configure_logging(log_level: str | None) -> None:
    try:
        level = parse_log_level(log_level, get_settings().log_level)
    except ValueError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _parse_state(data: Dict[str, Any], mechanism: Mechanism) -> Dict[str, Any]:
    mixture = mechanism.mixture
    mass_fractions = np.zeros(mixture.n_species())
    for name, value in data.get("mass_fractions", {}).items():
        mass_fractions[mixture.species_index(name)] = float(value)

    T = float(data["T"])
    R_mix = mixture.R_mix(mass_fractions)
    check_greater(T, 0.0, "T")
    check_greater(R_mix, 0.0, "R_mix")
    if "rho" in data:
        rho = float(data["rho"])
    elif "P" in data:
        # ideal gas: P = rho * R_mix * T
        rho = float(data["P"]) / (R_mix * T)
    else:
        raise MechanismError("State needs either 'rho' or 'P'")

    if mechanism.thermo is not None:
        h_RT_minus_s_R = mechanism.thermo.h_RT_minus_s_R(T)
    elif any(rxn.reversible for rxn in mechanism.reaction_set):
        raise MechanismError("Mechanism has reversible reactions but no species thermo data")
    else:
        h_RT_minus_s_R = np.zeros(mixture.n_species())

    return {
        "T": T,
        "rho": rho,
        "R_mix": R_mix,
        "mass_fractions": mass_fractions,
        "molar_densities": mixture.molar_densities(rho, mass_fractions),
        "h_RT_minus_s_R": h_RT_minus_s_R,
    }


@app.command()
def sources(
    mechanism_file: Annotated[Path, typer.Argument(help="Path to JSON mechanism file.")],
    state_file: Annotated[
        Path, typer.Argument(help="Path to JSON state file (T, rho or P, mass_fractions).")
    ],
    output: Annotated[Path | None, typer.Option(help="Path to save output JSON.")] = None,
    log_level: LogLevelOption = None,
) -> None:
    """Evaluate species mass source terms (kg/m^3/s) for one gas state."""
    _configure_logging(log_level)
    try:
        mechanism = load_mechanism(mechanism_file)
        with open(state_file, "r") as f:
            state = _parse_state(json.load(f), mechanism)
        logger.debug("State T=%g rho=%g R_mix=%g", state["T"], state["rho"], state["R_mix"])
        kinetics = Kinetics(mechanism.reaction_set)
        mass_sources = kinetics.mass_sources(**state)
    except (ChemSourceError, KeyError, ValueError, OSError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    mixture = mechanism.mixture
    payload = {
        "T": state["T"],
        "rho": state["rho"],
        "R_mix": state["R_mix"],
        "species": {
            mixture.species_name(s): float(mass_sources[s]) for s in range(mixture.n_species())
        },
        "net_reaction_rates": {
            rxn.name: float(rate)
            for rxn, rate in zip(mechanism.reaction_set, kinetics.net_reaction_rates)
        },
    }
    json_output = json.dumps(payload, indent=2)
    typer.echo(json_output)

    if output:
        with open(output, "w") as f:
            f.write(json_output)


@app.command()
def info(
    mechanism_file: Annotated[Path, typer.Argument(help="Path to JSON mechanism file.")],
    log_level: LogLevelOption = None,
) -> None:
    """Summarize a mechanism file."""
    _configure_logging(log_level)
    try:
        mechanism = load_mechanism(mechanism_file)
    except (ChemSourceError, ValueError, OSError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    payload = {
        "n_species": mechanism.mixture.n_species(),
        "n_reactions": mechanism.reaction_set.n_reactions(),
        "species": mechanism.mixture.species_names(),
        "reactions": [rxn.name for rxn in mechanism.reaction_set],
        "has_thermo": mechanism.thermo is not None,
    }
    typer.echo(json.dumps(payload, indent=2))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
