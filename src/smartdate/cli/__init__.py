"""Command line entry points for SmartDate."""

from .commands import cli

__all__ = ["cli"]
