"""
Export module for adjgraph.

This module provides NetworkX conversion of adjgraph graphs.
"""

from adjgraph.export.networkx_export import to_networkx

__all__ = ["to_networkx"]
