"""
PyEdgegraph - Edge-List Graph Exploration Library

A Python library for exploring graphs too large to process or render in full.
Builds a compact adjacency list from a whitespace-separated edge list and
provides breadth-first traversal, unweighted shortest paths, and subgraph
sampling for downstream rendering.

Main Classes:
    pyedgegraph: Main class for edge-list graph analysis (facade)
    EdgeGraph: Adjacency-list graph store
    EdgeListLoader: Edge-list parser with explicit load/parse policies

Example:
    >>> from edgegraph import pyedgegraph
    >>> graph = pyedgegraph.from_file("amazon0302.txt")
    >>> nodes = graph.connected_sample(0, 15)
    >>> edges = graph.induced_edges(nodes)
    >>> graph.shortest_path(0, 42)
"""

__version__ = "0.1.0"

from edgegraph.classes.edge import UNREACHABLE, Edge, NodeId
from edgegraph.classes.errors import (
    EdgeGraphError,
    EdgeListError,
    EdgeListIOError,
    EdgeListParseError,
)
from edgegraph.core.graph import EdgeGraph
from edgegraph.core.loader import EdgeListLoader, LoadPolicy, ParsePolicy, load_graph
from edgegraph.core.edgegraph import pyedgegraph

__all__ = [
    'pyedgegraph',
    'EdgeGraph',
    'EdgeListLoader',
    'LoadPolicy',
    'ParsePolicy',
    'load_graph',
    'Edge',
    'NodeId',
    'UNREACHABLE',
    'EdgeGraphError',
    'EdgeListError',
    'EdgeListIOError',
    'EdgeListParseError',
]
