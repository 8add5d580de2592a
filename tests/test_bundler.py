from pathlib import Path

from measure_runner.bundles.bundler import fixup_commands, version_command
from measure_runner.types import ConfigDriftFlags, ProjectContext


def bundled_context(directory: str) -> ProjectContext:
    return ProjectContext(
        directory=Path(directory),
        manifest_path=f"{directory}/Gemfile",
        bundle_install_path=f"{directory}/.bundle/install/",
    )


def test_version_command():
    assert version_command() == "bundle -v"


def test_all_fixups_in_order():
    drift = ConfigDriftFlags(needs_path_config=True, needs_platform_lock=True)
    assert fixup_commands(bundled_context("/proj"), drift) == [
        "bundle config --local path /proj/.bundle/install/",
        "bundle lock --add_platform ruby",
        "bundle update",
    ]


def test_no_fixups_without_drift():
    drift = ConfigDriftFlags(needs_path_config=False, needs_platform_lock=False)
    assert fixup_commands(bundled_context("/proj"), drift) == []


def test_install_path_with_quote_is_escaped():
    drift = ConfigDriftFlags(needs_path_config=True, needs_platform_lock=False)
    [cmd] = fixup_commands(bundled_context("/home/o'brien/proj"), drift)
    assert cmd == "bundle config --local path '/home/o'\"'\"'brien/proj/.bundle/install/'"
