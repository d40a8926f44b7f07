"""
Core data types for edge-list graph representation.

This module contains the type aliases, sentinels, and exceptions used
throughout the edgegraph library.
"""

from .edge import UNREACHABLE, Adjacency, Edge, NodeId, is_reachable
from .errors import EdgeGraphError, EdgeListError, EdgeListIOError, EdgeListParseError

__all__ = [
    'NodeId',
    'Edge',
    'Adjacency',
    'UNREACHABLE',
    'is_reachable',
    'EdgeGraphError',
    'EdgeListError',
    'EdgeListIOError',
    'EdgeListParseError',
]
