"""Runtime settings read from the process environment."""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

LOG_LEVEL_VAR = "MEASURE_RUNNER_LOG_LEVEL"
OPENSTUDIO_CLI_VAR = "OPENSTUDIO_CLI"

DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    """Measure runner settings"""
    log_level: str = DEFAULT_LOG_LEVEL
    openstudio_cli: Optional[str] = None


def read_openstudio_cli(environ: Mapping[str, str] = os.environ) -> Optional[str]:
    return environ.get(OPENSTUDIO_CLI_VAR) or None


def runner_settings(environ: Mapping[str, str] = os.environ) -> Settings:
    """Settings a project runner needs; the log level is left at its default."""
    return Settings(openstudio_cli=read_openstudio_cli(environ))


def load_settings(environ: Mapping[str, str] = os.environ) -> Settings:
    """Build and validate all settings from environment variables."""
    level = environ.get(LOG_LEVEL_VAR, DEFAULT_LOG_LEVEL).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"Invalid log level in {LOG_LEVEL_VAR}: {level}")

    return Settings(log_level=level, openstudio_cli=read_openstudio_cli(environ))
