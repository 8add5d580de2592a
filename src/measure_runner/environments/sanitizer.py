"""Child process environment sanitization."""

from typing import Mapping

from measure_runner.types import UNSET, EnvOverrides, SetVar, UnsetVar

# Variables that mark an active bundle. GEM_HOME and GEM_PATH stay set:
# plain gem requires keep working and native extensions still resolve.
BUNDLE_ACTIVATION_VARS = (
    "BUNDLER_ORIG_MANPATH",
    "BUNDLER_ORIG_PATH",
    "BUNDLER_VERSION",
    "BUNDLE_BIN_PATH",
    "RUBYLIB",
    "RUBYOPT",
    "BUNDLE_GEMFILE",
    "BUNDLE_PATH",
)


def build_clean_environment() -> EnvOverrides:
    """Overrides that strip the parent's bundle context from a child process."""
    return {name: UNSET for name in BUNDLE_ACTIVATION_VARS}


def apply_overrides(base: Mapping[str, str], overrides: EnvOverrides) -> dict[str, str]:
    """Merge overrides over a base environment without mutating it."""
    env = dict(base)
    for name, override in overrides.items():
        match override:
            case SetVar(value=value):
                env[name] = value
            case UnsetVar():
                env.pop(name, None)
            case _:
                raise TypeError(f"Invalid override for {name}: {override!r}")
    return env
