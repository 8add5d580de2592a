"""OpenStudio CLI lookup and invocation."""

import shlex
import shutil
from typing import Optional

from measure_runner.config import Settings
from measure_runner.logging import get_logger
from measure_runner.types import ProjectContext

logger = get_logger(__name__)

CLI_NAME = "openstudio"
MEASURES_SUBDIR = "lib/measures/"


def find_openstudio_cli(settings: Optional[Settings] = None) -> str:
    """Locate the OpenStudio CLI executable."""
    if settings and settings.openstudio_cli:
        return settings.openstudio_cli

    cli_path = shutil.which(CLI_NAME)
    if not cli_path:
        # Leave it to the shell; a missing binary fails the measure run
        logger.warning({"event": "openstudio_cli_not_found", "fallback": CLI_NAME})
        return CLI_NAME
    return cli_path


def measures_dir(context: ProjectContext) -> str:
    return f"{context.directory}/{MEASURES_SUBDIR}"


def measure_test_command(cli: str, context: ProjectContext) -> str:
    """Build the CLI call that runs every measure under the project."""
    cmd = f"{shlex.quote(cli)} --verbose"
    if context.has_bundle:
        cmd += (
            f" --bundle {shlex.quote(context.manifest_path)}"
            f" --bundle_path {shlex.quote(context.bundle_install_path)}"
        )
    cmd += f" measure -r {shlex.quote(measures_dir(context))}"
    return cmd
