"""
CLI module - command-line interface and terminal completion.
"""

from archhint.cli.commands import main

__all__ = ["main"]
