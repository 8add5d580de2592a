"""Project runner: bundle setup and measure testing for a directory."""

import os
from pathlib import Path
from typing import Callable, Optional

from measure_runner.bundles.bundler import BUNDLE_TOOL, fixup_commands, version_command
from measure_runner.bundles.files import INSTALL_DIR, MANIFEST_FILE, BundleFiles, detect_drift
from measure_runner.config import Settings, runner_settings
from measure_runner.environments.sanitizer import build_clean_environment
from measure_runner.errors import SetupError, ToolNotAvailableError
from measure_runner.logging import get_logger
from measure_runner.runtimes.openstudio import find_openstudio_cli, measure_test_command
from measure_runner.sandboxes.commands import execute_command, shell_executor
from measure_runner.sandboxes.workdir import working_directory
from measure_runner.types import ConfigDriftFlags, EnvOverrides, Executor, ProjectContext

logger = get_logger(__name__)


def create_project_context(directory: Path | str) -> ProjectContext:
    """Validate directory and record where its bundle lives, if it has one."""
    path = Path(os.path.abspath(directory))

    if not path.exists():
        raise SetupError(f"Directory does not exist: {path}", details={"path": str(path)})
    if not path.is_dir():
        raise SetupError(f"Not a directory: {path}", details={"path": str(path)})

    manifest = path / MANIFEST_FILE
    if not manifest.exists():
        return ProjectContext(directory=path)

    return ProjectContext(
        directory=path,
        manifest_path=str(manifest),
        bundle_install_path=f"{path}/{INSTALL_DIR}",
    )


class ProjectRunner:
    """Runs commands and measure tests against one project directory.

    Construction configures the project's bundle when a Gemfile is present:
    bundler must be callable, then the local install path and the generic
    ruby platform are fixed up as needed. Fix-up commands that fail are
    logged and otherwise ignored. The project state is fixed after
    construction.

    Commands change the process working directory while they run, so
    runners are not meant to be driven from several threads at once; the
    directory change itself is serialized process-wide.
    """

    def __init__(
        self,
        directory: Path | str,
        executor: Executor = shell_executor,
        files: Optional[BundleFiles] = None,
        settings: Optional[Settings] = None,
        cli_locator: Callable[[Optional[Settings]], str] = find_openstudio_cli,
    ):
        self.context = create_project_context(directory)
        self._executor = executor
        self._files = files or BundleFiles()
        self._settings = settings or runner_settings()
        self._cli_locator = cli_locator
        self.drift: Optional[ConfigDriftFlags] = None

        logger.info(
            {
                "event": "runner_init",
                "path": str(self.context.directory),
                "gemfile": self.context.manifest_path,
            }
        )

        if self.context.has_bundle:
            self._configure_bundle()

    @property
    def directory(self) -> Path:
        return self.context.directory

    @property
    def manifest_path(self) -> Optional[str]:
        return self.context.manifest_path

    @property
    def bundle_install_path(self) -> Optional[str]:
        return self.context.bundle_install_path

    def _configure_bundle(self) -> None:
        with working_directory(self.context.directory):
            if not self.run_command(version_command(), build_clean_environment()):
                raise ToolNotAvailableError(BUNDLE_TOOL)

            self.drift = detect_drift(self.context, self._files)
            logger.info(
                {
                    "event": "bundle_drift_detected",
                    "needs_path_config": self.drift.needs_path_config,
                    "needs_platform_lock": self.drift.needs_platform_lock,
                }
            )

            # Each fix-up runs regardless of how the previous one went
            for cmd in fixup_commands(self.context, self.drift):
                self.run_command(cmd, build_clean_environment())

    def run_command(self, command: str, env_overrides: EnvOverrides) -> bool:
        """Run command in the project directory; True if it exits with 0."""
        with working_directory(self.context.directory):
            result = execute_command(command, env_overrides, self._executor)

        if result.succeeded:
            logger.info({"event": "cmd_succeeded", "cmd": command})
            return True

        logger.error(
            {
                "event": "cmd_failed",
                "cmd": command,
                "returncode": result.exit_status,
                "stdout": result.stdout,
                "stderr": result.stderr,
            }
        )
        return False

    def test_measures(self) -> bool:
        """Run every measure in lib/measures/ through the OpenStudio CLI."""
        cli = self._cli_locator(self._settings)
        cmd = measure_test_command(cli, self.context)

        logger.info({"event": "measure_test_start", "cmd": cmd})
        success = self.run_command(cmd, build_clean_environment())
        logger.info({"event": "measure_test_complete", "success": success})

        return success
