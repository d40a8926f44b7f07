"""
Main facade class for edge-list graph analysis.

This module provides the pyedgegraph class that owns one graph and delegates
to the traversal, path finding, and sampling engines.
"""

import logging
from typing import Dict, Iterable, List, Optional, Set

import numpy as np

from .. import config
from ..classes.edge import Adjacency, Edge
from .graph import EdgeGraph
from .loader import EdgeListLoader, EdgeListSource, LoadPolicy, ParsePolicy
from ..analysis.traversal import TraversalEngine, VisitCallback
from ..analysis.pathfinding import ShortestPathEngine
from ..operations.sampling import SamplingEngine

logger = logging.getLogger(__name__)


class pyedgegraph:
    """
    Main facade class for edge-list graph analysis.

    Builds the graph once and exposes traversal, shortest paths, and
    sampling through a single object.
    """

    def __init__(self, graph: EdgeGraph, logger: Optional[logging.Logger] = None):
        """
        Initialize the facade around an existing graph.

        Args:
            graph: EdgeGraph to analyze
            logger: Logger passed to every engine (defaults to each module's logger)
        """
        self._graph = graph

        self._traversal = TraversalEngine(self._graph, logger)
        self._pathfinder = ShortestPathEngine(self._graph, logger)
        self._sampler = SamplingEngine(self._graph, logger)

        self.adjacency_list = self._graph.adjacency_list

    @classmethod
    def from_file(cls,
                  source: EdgeListSource,
                  load_policy: LoadPolicy = LoadPolicy.SYMMETRIC,
                  parse_policy: ParsePolicy = ParsePolicy.TOLERANT,
                  comment_marker: Optional[str] = config.COMMENT_MARKER,
                  logger: Optional[logging.Logger] = None) -> "pyedgegraph":
        """Load an edge list and wrap the resulting graph."""
        loader = EdgeListLoader(load_policy, parse_policy, comment_marker, logger)
        return cls(loader.load(source), logger)

    @property
    def graph(self) -> EdgeGraph:
        return self._graph

    # ========================================================================
    # BASIC GRAPH OPERATIONS
    # ========================================================================

    def has_node(self, node_id: int) -> bool:
        """Check whether a node is known to the graph."""
        return self._graph.has_node(node_id)

    def get_neighbors(self, node_id: int) -> List[int]:
        """Get the ordered neighbor list of a node."""
        return self._graph.get_neighbors(node_id)

    def get_node_count(self) -> int:
        """Get the number of nodes with an adjacency entry."""
        return self._graph.get_node_count()

    def get_edge_count(self) -> int:
        """Get the number of ingested edges."""
        return self._graph.get_edge_count()

    # ========================================================================
    # TRAVERSAL & PATH FINDING
    # ========================================================================

    def bfs(self, start_id: int, on_visit: Optional[VisitCallback] = None) -> List[int]:
        """Breadth-first visitation order from start."""
        return self._traversal.bfs(start_id, on_visit)

    def single_source_distances(self, start_id: int) -> Dict[int, float]:
        """Hop distances from start to every known node."""
        return self._pathfinder.single_source_distances(start_id)

    def shortest_path(self, start_id: int, end_id: int) -> List[int]:
        """Shortest path from start to end, or an empty list."""
        return self._pathfinder.shortest_path(start_id, end_id)

    def distance(self, start_id: int, end_id: int) -> float:
        """Hop distance from start to end, or UNREACHABLE."""
        return self._pathfinder.distance(start_id, end_id)

    # ========================================================================
    # SAMPLING
    # ========================================================================

    def connected_sample(self, seed_id: int, budget: int) -> Set[int]:
        """Up to budget nodes reachable from seed, discovered breadth-first."""
        return self._sampler.connected_sample(seed_id, budget)

    def top_n_by_key_order(self, n: int, sort_neighbors: bool = False, anchor_id: Optional[int] = 0) -> Adjacency:
        """First n adjacency entries, neighbor lists unfiltered."""
        return self._sampler.top_n_by_key_order(n, sort_neighbors, anchor_id)

    def random_sample(self, budget: int, rng: Optional[np.random.Generator] = None) -> Set[int]:
        """Up to budget nodes drawn uniformly at random."""
        return self._sampler.random_sample(budget, rng)

    def random_adjacency_sample(self, n: int, rng: Optional[np.random.Generator] = None) -> Adjacency:
        """n random adjacency entries, neighbor lists unfiltered."""
        return self._sampler.random_adjacency_sample(n, rng)

    def induced_edges(self, node_ids: Iterable[int]) -> List[Edge]:
        """Edges with both endpoints in the node set."""
        return self._sampler.induced_edges(node_ids)
