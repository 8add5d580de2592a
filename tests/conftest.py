import os
from pathlib import Path

import pytest

from measure_runner.bundles.files import BundleFiles
from measure_runner.config import Settings
from measure_runner.types import CommandResult

OK = CommandResult(exit_status=0, stdout="", stderr="")


class FakeExecutor:
    """Records commands and answers with canned results"""

    def __init__(self, results=None):
        self.results = results or {}
        self.calls = []

    def __call__(self, cmd, env):
        self.calls.append({"cmd": cmd, "env": env, "cwd": os.getcwd()})
        for prefix, result in self.results.items():
            if cmd.startswith(prefix):
                return result
        return OK

    @property
    def commands(self):
        return [c["cmd"] for c in self.calls]


@pytest.fixture
def make_executor():
    return FakeExecutor


@pytest.fixture
def executor():
    return FakeExecutor()


@pytest.fixture
def make_files():
    """BundleFiles whose readers return fixed content"""

    def _make(config=None, platforms=None):
        return BundleFiles(
            read_config=lambda path: config or {},
            read_lock_platforms=lambda path: platforms or [],
        )

    return _make


@pytest.fixture
def settings():
    return Settings(log_level="DEBUG", openstudio_cli="/opt/openstudio/bin/openstudio")


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Project without a Gemfile"""
    (tmp_path / "lib" / "measures").mkdir(parents=True)
    return tmp_path


@pytest.fixture
def bundled_dir(project_dir: Path) -> Path:
    """Project with a Gemfile"""
    (project_dir / "Gemfile").write_text("source 'https://rubygems.org'\n")
    return project_dir


@pytest.fixture
def restore_cwd():
    cwd = os.getcwd()
    yield cwd
    os.chdir(cwd)
