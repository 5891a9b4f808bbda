"""CLI commands for pathsift.

This package contains all subcommand implementations.
"""

from pathsift.cli.commands import classify, config, copy, delete, find, run, split

__all__ = ["classify", "config", "copy", "delete", "find", "run", "split"]
