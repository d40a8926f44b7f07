"""
Shortest paths over unweighted edge-list graphs.

This module provides single-source hop distances and two-node shortest path
reconstruction. Every edge counts as weight 1.
"""

import heapq
import logging
from collections import deque
from typing import Dict, List, Optional, Tuple

from ..classes.edge import UNREACHABLE
from ..core.graph import EdgeGraph

logger = logging.getLogger(__name__)


class ShortestPathEngine:
    """
    Shortest path algorithms for edge-list graphs.

    This class provides methods for:
    - Computing hop distances from one node to every known node
    - Reconstructing a shortest path between two nodes
    """

    def __init__(self, graph: EdgeGraph, logger: Optional[logging.Logger] = None):
        """
        Initialize the shortest path engine.

        Args:
            graph: EdgeGraph instance to analyze
            logger: Logger receiving diagnostics (defaults to the module logger)
        """
        self.graph = graph
        self.logger = logger if logger is not None else logging.getLogger(__name__)

    def single_source_distances(self, start_id: int) -> Dict[int, float]:
        """
        Compute hop distances from start to every node known to the graph.

        Dijkstra's algorithm with unit edge weights. The frontier is a
        min-heap of (distance, node); entries popped with a distance larger
        than the recorded best are stale and skipped.

        Args:
            start_id: Source node

        Returns:
            Mapping of node id -> distance. Unreachable nodes map to
            UNREACHABLE. Empty if start is not in the graph.
        """
        if not self.graph.has_node(start_id):
            self.logger.warning(f"Start node {start_id} not in graph")
            return {}

        distances: Dict[int, float] = {node_id: UNREACHABLE for node_id in self.graph.get_all_nodes()}
        distances[start_id] = 0

        heap: List[Tuple[int, int]] = [(0, start_id)]

        while heap:
            current_distance, current_id = heapq.heappop(heap)

            if current_distance > distances[current_id]:
                continue

            for neighbor_id in self.graph.get_neighbors(current_id):
                new_distance = current_distance + 1
                if new_distance < distances[neighbor_id]:
                    distances[neighbor_id] = new_distance
                    heapq.heappush(heap, (new_distance, neighbor_id))

        reached = sum(1 for d in distances.values() if d != UNREACHABLE)
        self.logger.debug(f"Distances from {start_id}: {reached} of {len(distances)} nodes reachable")
        return distances

    def shortest_path(self, start_id: int, end_id: int) -> List[int]:
        """
        Find a shortest path from start to end using BFS.

        Each node records the predecessor it was first reached from; the
        search stops once end is dequeued.

        Args:
            start_id: Starting node
            end_id: Target node

        Returns:
            Node ids from start to end inclusive, [start_id] if both are the
            same node, or an empty list if start is unknown or end is
            unreachable
        """
        if not self.graph.has_node(start_id):
            self.logger.warning(f"Start node {start_id} not in graph")
            return []

        if start_id == end_id:
            return [start_id]

        predecessors: Dict[int, Optional[int]] = {start_id: None}
        queue = deque([start_id])

        while queue:
            current_id = queue.popleft()
            if current_id == end_id:
                break

            for neighbor_id in self.graph.get_neighbors(current_id):
                if neighbor_id not in predecessors:
                    predecessors[neighbor_id] = current_id
                    queue.append(neighbor_id)

        if end_id not in predecessors:
            self.logger.info(f"No path from {start_id} to {end_id}")
            return []

        path = []
        node_id: Optional[int] = end_id
        while node_id is not None:
            path.append(node_id)
            node_id = predecessors[node_id]
        path.reverse()

        self.logger.debug(f"Path from {start_id} to {end_id}: {len(path) - 1} hops")
        return path

    def distance(self, start_id: int, end_id: int) -> float:
        """Get the hop distance between two nodes, or UNREACHABLE."""
        path = self.shortest_path(start_id, end_id)
        if not path:
            return UNREACHABLE
        return len(path) - 1
