from pathlib import Path

from measure_runner.config import Settings
from measure_runner.runtimes import openstudio
from measure_runner.runtimes.openstudio import find_openstudio_cli, measure_test_command
from measure_runner.types import ProjectContext


def test_cli_from_settings(monkeypatch):
    monkeypatch.setattr(openstudio.shutil, "which", lambda name: "/usr/bin/openstudio")
    settings = Settings(openstudio_cli="/opt/os/bin/openstudio")
    assert find_openstudio_cli(settings) == "/opt/os/bin/openstudio"


def test_cli_from_path(monkeypatch):
    monkeypatch.setattr(openstudio.shutil, "which", lambda name: f"/usr/local/bin/{name}")
    assert find_openstudio_cli(Settings()) == "/usr/local/bin/openstudio"


def test_cli_falls_back_to_bare_name(monkeypatch):
    monkeypatch.setattr(openstudio.shutil, "which", lambda name: None)
    assert find_openstudio_cli() == "openstudio"


def test_command_without_bundle():
    context = ProjectContext(directory=Path("/proj"))
    assert (
        measure_test_command("openstudio", context)
        == "openstudio --verbose measure -r /proj/lib/measures/"
    )


def test_command_with_bundle():
    context = ProjectContext(
        directory=Path("/proj"),
        manifest_path="/proj/Gemfile",
        bundle_install_path="/proj/.bundle/install/",
    )
    assert measure_test_command("openstudio", context) == (
        "openstudio --verbose --bundle /proj/Gemfile "
        "--bundle_path /proj/.bundle/install/ measure -r /proj/lib/measures/"
    )


def test_command_quotes_paths():
    context = ProjectContext(
        directory=Path("/Users/me/My Measures"),
        manifest_path="/Users/me/My Measures/Gemfile",
        bundle_install_path="/Users/me/My Measures/.bundle/install/",
    )
    cmd = measure_test_command("/Applications/OpenStudio 3.7/bin/openstudio", context)
    assert cmd == (
        "'/Applications/OpenStudio 3.7/bin/openstudio' --verbose "
        "--bundle '/Users/me/My Measures/Gemfile' "
        "--bundle_path '/Users/me/My Measures/.bundle/install/' "
        "measure -r '/Users/me/My Measures/lib/measures/'"
    )
