"""Shell command execution."""

import os
import subprocess

from measure_runner.environments.sanitizer import apply_overrides
from measure_runner.logging import get_logger
from measure_runner.types import CommandResult, EnvOverrides, Executor

logger = get_logger(__name__)


def shell_executor(cmd: str, env: dict[str, str]) -> CommandResult:
    """Run cmd through the shell in the current directory."""
    process = subprocess.run(
        cmd,
        shell=True,
        env=env,
        capture_output=True,
        text=True,
        errors="replace",
    )
    return CommandResult(
        exit_status=process.returncode,
        stdout=process.stdout or "",
        stderr=process.stderr or "",
    )


def execute_command(
    cmd: str, env_overrides: EnvOverrides, executor: Executor = shell_executor
) -> CommandResult:
    """Run cmd with overrides merged over the inherited environment."""
    cmd_env = apply_overrides(os.environ, env_overrides)

    logger.debug({"event": "cmd_exec", "cmd": cmd, "cwd": os.getcwd()})

    result = executor(cmd, cmd_env)

    if result.stdout:
        logger.debug({"event": "cmd_stdout", "cmd": cmd, "output": result.stdout})
    if result.stderr:
        logger.debug({"event": "cmd_stderr", "cmd": cmd, "output": result.stderr})

    logger.debug(
        {"event": "cmd_complete", "cmd": cmd, "returncode": result.exit_status}
    )

    return result
