"""Parsing of cdk command lines and running the cdk executable."""

from __future__ import annotations

import os
import re
import subprocess
from dataclasses import dataclass, field

_ENV_REFERENCE = re.compile(r"\$(?:\{([^}]*)\}|(\w+))")


def _expand_env(text: str) -> str:
    """Replace $VAR and ${VAR} with their values; unset variables become empty."""
    return _ENV_REFERENCE.sub(lambda m: os.environ.get(m.group(1) or m.group(2), ""), text)


@dataclass
class CDKCommand:
    """A cdk invocation split into its interesting parts."""

    action: str = ""
    stack_name: str = ""
    profile: str = ""
    raw_args: list[str] = field(default_factory=list)
    context: list[str] = field(default_factory=list)
    flags: list[str] = field(default_factory=list)

    def set_profile(self, profile: str) -> None:
        """Use ``profile`` unless a profile was already given."""
        if not self.profile:
            self.profile = profile
            self.raw_args += ["--profile", profile]

    def execute(self, cdk: str) -> None:
        """Run ``cdk`` with the raw arguments, exiting with its status on failure."""
        try:
            code = subprocess.run([_expand_env(cdk), *self.raw_args]).returncode
            error: object = f"exit status {code}"
        except OSError as exc:
            code, error = -1, exc
        if code != 0:
            print("Error running cdk command:", error)
            raise SystemExit(code)

    def is_profiled(self) -> bool:
        """Whether a profile has been chosen."""
        return bool(self.profile)


def parse_args(args: list[str]) -> CDKCommand:
    """Split a cdk command line into action, stack, profile, context and flags."""
    command = CDKCommand(raw_args=list(args))
    if not args:
        return command
    command.action = args[0]
    remaining = iter(args[1:])
    for arg in remaining:
        if arg == "--profile" and (value := next(remaining, None)) is not None:
            command.profile = value
        elif arg.startswith(("-c", "--context")):
            command.context.append(arg)
            if arg in ("-c", "--context") and (value := next(remaining, None)) is not None:
                command.context.append(value)
        elif arg.startswith("-"):
            command.flags.append(arg)
        elif not command.stack_name:
            command.stack_name = arg
    return command