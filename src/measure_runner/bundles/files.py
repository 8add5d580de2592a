"""Bundle config and lockfile readers, and drift detection."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Mapping

import yaml

from measure_runner.logging import get_logger
from measure_runner.types import ConfigDriftFlags, ProjectContext

logger = get_logger(__name__)

MANIFEST_FILE = "Gemfile"
LOCK_FILE = "Gemfile.lock"
CONFIG_FILE = Path(".bundle") / "config"
INSTALL_DIR = ".bundle/install/"
GENERIC_PLATFORM = "ruby"


def read_bundle_config(path: Path) -> Mapping[str, Any]:
    """Parse a bundler config file into a mapping."""
    with open(path) as f:
        data = yaml.safe_load(f)
    if not isinstance(data, dict):
        return {}
    return data


def read_lock_platforms(path: Path) -> list[str]:
    """Read the platforms declared in a lockfile's PLATFORMS section."""
    platforms = []
    in_section = False
    with open(path) as f:
        for line in f:
            line = line.rstrip("\r\n")
            if line == "PLATFORMS":
                in_section = True
                continue
            if in_section:
                if not line.startswith(" ") or not line.strip():
                    break
                platforms.append(line.strip())
    return platforms


@dataclass(frozen=True)
class BundleFiles:
    """Readers for the files bundler leaves in a project"""
    read_config: Callable[[Path], Mapping[str, Any]] = field(default=read_bundle_config)
    read_lock_platforms: Callable[[Path], list[str]] = field(default=read_lock_platforms)


def detect_drift(context: ProjectContext, files: BundleFiles) -> ConfigDriftFlags:
    """Work out which fix-up commands a bundled project needs."""
    needs_path_config = True
    config_path = context.directory / CONFIG_FILE
    if config_path.exists():
        config = files.read_config(config_path)
        configured = config.get("BUNDLE_PATH")
        logger.debug(
            {
                "event": "bundle_config_found",
                "bundle_path": configured,
                "expected": context.bundle_install_path,
            }
        )
        if configured == context.bundle_install_path:
            needs_path_config = False

    needs_platform_lock = True
    lock_path = context.directory / LOCK_FILE
    if lock_path.exists():
        platforms = files.read_lock_platforms(lock_path)
        logger.debug({"event": "lockfile_found", "platforms": platforms})
        if GENERIC_PLATFORM in platforms:
            needs_platform_lock = False

    return ConfigDriftFlags(
        needs_path_config=needs_path_config,
        needs_platform_lock=needs_platform_lock,
    )
