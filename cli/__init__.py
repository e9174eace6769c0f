"""
CLI module for adjgraph.

The command-line interface providing demo, neighbors, and summary commands.
"""

from cli.main import app

__all__ = ["app"]
