"""Wrapper for the CDK command line that selects an AWS profile per stack."""

__version__ = "0.1.0"
__all__ = ["args", "config", "cli"]