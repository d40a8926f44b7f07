"""
Core graph data structure for edge-list graphs.

This module provides the fundamental adjacency structure without traversal,
path finding, or sampling operations.
"""

import logging
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Sequence, Set

from ..classes.edge import Adjacency, Edge

logger = logging.getLogger(__name__)


class EdgeGraph:
    """
    Core adjacency-list graph built from an edge list.

    This class manages the fundamental graph representation without
    high-level operations. It provides:
    - Adjacency list construction (symmetric or directed)
    - Node and edge counts
    - Basic graph queries (neighbors, degree, membership)

    Neighbor lists keep edge-arrival order and are never deduplicated, so
    parallel edges and self-loops are preserved. The graph is not modified
    after construction.
    """

    def __init__(self, edges: Iterable[Edge], symmetric: bool = True):
        """
        Initialize the graph from an edge list.

        Args:
            edges: Iterable of (source, target) node id pairs
            symmetric: Record both directions of every edge. When False only
                source -> target is recorded, and the target still receives
                an (possibly empty) entry.
        """
        self.symmetric = symmetric
        self.adjacency_list: Adjacency = {}
        self._edge_count = 0
        self._known_nodes: Optional[Set[int]] = None

        logger.debug(f"Initializing EdgeGraph (symmetric={symmetric})")
        self._build_graph(edges)

    @classmethod
    def from_adjacency(cls, adjacency: Mapping[int, Sequence[int]]) -> "EdgeGraph":
        """
        Wrap an existing adjacency mapping, preserving its key and neighbor order.

        Neighbors without an entry of their own are not added as keys.

        Args:
            adjacency: Mapping of node id -> ordered neighbor ids

        Returns:
            EdgeGraph holding a copy of the mapping
        """
        graph = cls([], symmetric=False)
        graph.adjacency_list = {node: list(neighbors) for node, neighbors in adjacency.items()}
        graph._edge_count = sum(len(neighbors) for neighbors in graph.adjacency_list.values())
        return graph

    def _build_graph(self, edges: Iterable[Edge]):
        """
        Build the adjacency list from edges.
        This is the core method that constructs the adjacency representation.
        """
        adjacency = self.adjacency_list

        for source_id, target_id in edges:
            adjacency.setdefault(source_id, []).append(target_id)
            if self.symmetric:
                adjacency.setdefault(target_id, []).append(source_id)
            else:
                adjacency.setdefault(target_id, [])
            self._edge_count += 1

        logger.debug(f"Built graph with {len(adjacency)} nodes and {self._edge_count} edges")

    def __contains__(self, node_id: int) -> bool:
        return self.has_node(node_id)

    def __len__(self) -> int:
        return len(self.adjacency_list)

    def has_node(self, node_id: int) -> bool:
        """
        Check whether a node is known to the graph.

        A node is known when it has an adjacency entry or appears in any
        neighbor list.
        """
        if node_id in self.adjacency_list:
            return True
        return node_id in self._get_known_nodes()

    def get_nodes(self) -> List[int]:
        """Get node ids with an adjacency entry, in insertion order."""
        return list(self.adjacency_list.keys())

    def get_all_nodes(self) -> Set[int]:
        """Get every node id appearing as a key or as a neighbor."""
        return set(self._get_known_nodes())

    def _get_known_nodes(self) -> Set[int]:
        # Computed once; the adjacency list is not modified after construction
        if self._known_nodes is None:
            nodes = set(self.adjacency_list.keys())
            for neighbors in self.adjacency_list.values():
                nodes.update(neighbors)
            self._known_nodes = nodes
        return self._known_nodes

    def get_neighbors(self, node_id: int) -> List[int]:
        """
        Get the ordered neighbor list of a node.

        Args:
            node_id: Node to look up

        Returns:
            Neighbor ids in edge-arrival order, or an empty list if the node
            has no entry
        """
        return self.adjacency_list.get(node_id, [])

    def get_degree(self, node_id: int) -> int:
        """Get the number of adjacency entries (out-degree) of a node."""
        return len(self.adjacency_list.get(node_id, []))

    def get_node_count(self) -> int:
        """Get the number of nodes with an adjacency entry."""
        return len(self.adjacency_list)

    def get_edge_count(self) -> int:
        """
        Get the number of edges the graph was built from.

        For a graph built from an edge list this counts ingested edges, not
        adjacency entries (a symmetric edge is counted once). For a graph
        wrapped with from_adjacency there are no ingested edges, so every
        adjacency entry counts as one edge.
        """
        return self._edge_count

    def edges(self) -> Iterator[Edge]:
        """
        Iterate every adjacency entry as an edge.

        For a symmetric graph each ingested edge is yielded twice, once per
        direction.
        """
        for source_id, neighbors in self.adjacency_list.items():
            for target_id in neighbors:
                yield (source_id, target_id)

    def to_dict(self) -> Dict[int, List[int]]:
        """Return a copy of the adjacency mapping."""
        return {node: list(neighbors) for node, neighbors in self.adjacency_list.items()}
