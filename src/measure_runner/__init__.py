"""Bundle-aware OpenStudio measure runner."""

from measure_runner.types import (
    UNSET,
    CommandResult,
    ConfigDriftFlags,
    EnvOverrides,
    ProjectContext,
    SetVar,
    UnsetVar,
)
from measure_runner.environments.sanitizer import apply_overrides, build_clean_environment
from measure_runner.errors import MeasureRunnerError, SetupError, ToolNotAvailableError, WorkingDirectoryError
from measure_runner.runner import ProjectRunner

__version__ = "0.1.0"

__all__ = [
    # Types
    "UNSET",
    "CommandResult",
    "ConfigDriftFlags",
    "EnvOverrides",
    "ProjectContext",
    "SetVar",
    "UnsetVar",

    # Environment
    "apply_overrides",
    "build_clean_environment",

    # Runner
    "ProjectRunner",

    # Error types
    "MeasureRunnerError",
    "SetupError",
    "ToolNotAvailableError",
    "WorkingDirectoryError",
]
