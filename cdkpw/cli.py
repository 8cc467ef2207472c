"""Command entry point."""

import sys

from cdkpw.args import parse_args
from cdkpw.config import ConfigError, load_config


def main(argv=None):
    """Run cdk with a profile chosen from the configuration."""
    command = parse_args(sys.argv[1:] if argv is None else argv)
    try:
        config = load_config()
    except ConfigError as exc:
        print("Error loading config:", exc)
        return 1
    if not command.is_profiled() and command.action in ("diff", "deploy", "destroy", "bootstrap"):
        profile = config.find_profile(command.stack_name)
        if profile is not None:
            command.set_profile(profile)
    command.execute(config.cdk_location)
    return 0