"""
Entry point for running the completion service as a module.

Usage:
    python -m archhint.server [--schema PATH]
"""

from archhint.cli.commands import serve

if __name__ == '__main__':
    serve()
