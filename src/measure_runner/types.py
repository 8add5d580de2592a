"""Core type definitions"""

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Mapping, Optional, TypeAlias


@dataclass(frozen=True)
class SetVar:
    """Environment override that assigns a value"""
    value: str


@dataclass(frozen=True)
class UnsetVar:
    """Environment override that removes a variable"""


UNSET = UnsetVar()

EnvOverride: TypeAlias = SetVar | UnsetVar
EnvOverrides: TypeAlias = Mapping[str, EnvOverride]


@dataclass(frozen=True)
class ProjectContext:
    """Project directory and its bundle locations"""
    directory: Path
    manifest_path: Optional[str] = None
    bundle_install_path: Optional[str] = None

    @property
    def has_bundle(self) -> bool:
        return self.manifest_path is not None


@dataclass(frozen=True)
class CommandResult:
    """Outcome of a single shell command"""
    exit_status: int
    stdout: str
    stderr: str

    @property
    def succeeded(self) -> bool:
        return self.exit_status == 0


@dataclass(frozen=True)
class ConfigDriftFlags:
    """Fix-ups required to bring a bundle up to date"""
    needs_path_config: bool
    needs_platform_lock: bool


Executor: TypeAlias = Callable[[str, dict[str, str]], CommandResult]
