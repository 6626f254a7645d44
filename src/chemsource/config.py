"""Runtime settings read from the environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping

CHECKS_ENV = "CHEMSOURCE_CHECK_PRECONDITIONS"
LOG_LEVEL_ENV = "CHEMSOURCE_LOG_LEVEL"

_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    """Process-wide defaults.

    Attributes:
        check_preconditions: Run the call-entry contract checks in
            `Kinetics.compute_mass_sources`. Turn off for trusted production runs.
        log_level: Level name applied by the CLI when no ``--log-level`` is given.
    """

    check_preconditions: bool = True
    log_level: str = "WARNING"


def _parse_flag(value: str | None, default: bool) -> bool:
    if value is None or not value.strip():
        return default
    return value.strip().lower() not in _FALSE_VALUES


def parse_log_level(value: str | None, default: str = Settings.log_level) -> str:
    if value is None or not value.strip():
        return default
    level = value.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"Unknown log level: {value}")
    return level


def check_preconditions_default(environ: Mapping[str, str] | None = None) -> bool:
    """Read only the precondition-check flag from ``environ``."""
    env = os.environ if environ is None else environ
    return _parse_flag(env.get(CHECKS_ENV), Settings.check_preconditions)


def get_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build settings from ``environ`` (defaults to ``os.environ``)."""
    env = os.environ if environ is None else environ
    defaults = Settings()
    return Settings(
        check_preconditions=check_preconditions_default(env),
        log_level=parse_log_level(env.get(LOG_LEVEL_ENV), defaults.log_level),
    )
