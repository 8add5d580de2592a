"""Bundler commands for preparing a project bundle."""

import shlex

from measure_runner.bundles.files import GENERIC_PLATFORM
from measure_runner.types import ConfigDriftFlags, ProjectContext

BUNDLE_TOOL = "bundle"


def version_command() -> str:
    return f"{BUNDLE_TOOL} -v"


def fixup_commands(context: ProjectContext, drift: ConfigDriftFlags) -> list[str]:
    """Commands that resolve the detected drift, in execution order."""
    cmds = []
    if drift.needs_path_config:
        cmds.append(
            f"{BUNDLE_TOOL} config --local path {shlex.quote(context.bundle_install_path)}"
        )
    if drift.needs_platform_lock:
        cmds.append(f"{BUNDLE_TOOL} lock --add_platform {GENERIC_PLATFORM}")
        cmds.append(f"{BUNDLE_TOOL} update")
    return cmds
