"""Loading of the profile-matching configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path

import yaml

DEFAULT_CONFIG_FILE = ".cdkpw.yml"


class ConfigError(Exception):
    """The configuration could not be located, read or parsed."""


class Verbose(IntEnum):
    SILENT = 0
    INFO = 1
    DEBUG = 2


@dataclass
class Profile:
    """A substring to look for in a stack name and the profile it selects."""

    match: str = ""
    profile: str = ""


@dataclass
class Config:
    profiles: list[Profile] = field(default_factory=list)
    cdk_location: str = ""
    verbose: int = Verbose.SILENT

    def find_profile(self, stack_arg: str) -> str | None:
        """Return the profile of the first entry whose match occurs in ``stack_arg``."""
        for entry in self.profiles:
            if entry.match in stack_arg:
                if self.verbose >= Verbose.INFO:
                    print(f"cdkpw: Using profile {entry.profile} for stack {stack_arg}")
                return entry.profile
        return None


def get_config_file() -> str:
    """Path of the configuration file: $CDKPW_CONFIG or ~/.cdk/.cdkpw.yml."""
    custom = os.environ.get("CDKPW_CONFIG")
    if custom:
        return custom
    try:
        home = Path.home()
    except (RuntimeError, KeyError, OSError) as exc:
        raise ConfigError(f"unable to determine config directory: {exc}") from exc
    return os.path.join(str(home), ".cdk", DEFAULT_CONFIG_FILE)


def _build_config(data: dict | None) -> Config:
    data = data or {}
    profiles = [
        Profile(match=str(item.get("match") or ""), profile=str(item.get("profile") or ""))
        for item in data.get("profiles") or []
    ]
    return Config(
        profiles=profiles,
        cdk_location=str(data.get("cdkLocation") or ""),
        verbose=int(data.get("verbose") or 0),
    )


def load_config() -> Config:
    """Read and parse the configuration file."""
    config_path = get_config_file()
    try:
        text = Path(config_path).read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"could not read config file at {config_path}: {exc}") from exc
    try:
        config = _build_config(yaml.safe_load(text))
    except (yaml.YAMLError, AttributeError, TypeError, ValueError) as exc:
        raise ConfigError(f"invalid YAML in {config_path}: {exc}") from exc
    config.cdk_location = config.cdk_location or "cdk"
    return config