"""
Breadth-first traversal over edge-list graphs.
"""

import logging
from collections import deque
from typing import Callable, List, Optional, Set

from ..core.graph import EdgeGraph

logger = logging.getLogger(__name__)

VisitCallback = Callable[[int], None]


class TraversalEngine:
    """
    Breadth-first traversal of an EdgeGraph.

    The engine only reads the graph; every call returns a freshly built
    visitation order.
    """

    def __init__(self, graph: EdgeGraph, logger: Optional[logging.Logger] = None):
        """
        Initialize the traversal engine.

        Args:
            graph: EdgeGraph instance to traverse
            logger: Logger receiving diagnostics (defaults to the module logger)
        """
        self.graph = graph
        self.logger = logger if logger is not None else logging.getLogger(__name__)

    def bfs(self, start_id: int, on_visit: Optional[VisitCallback] = None) -> List[int]:
        """
        Visit every node reachable from start in breadth-first order.

        A start node absent from the graph yields [start_id]; it has no
        neighbors to expand.

        Args:
            start_id: Node to start from
            on_visit: Optional observer called with each node as it is dequeued

        Returns:
            Full visitation order, starting with start_id
        """
        order: List[int] = []
        visited: Set[int] = {start_id}
        queue = deque([start_id])

        while queue:
            current_id = queue.popleft()
            order.append(current_id)
            if on_visit is not None:
                on_visit(current_id)

            for neighbor_id in self.graph.get_neighbors(current_id):
                if neighbor_id not in visited:
                    visited.add(neighbor_id)
                    queue.append(neighbor_id)

        self.logger.debug(f"BFS from {start_id} visited {len(order)} nodes")
        return order

    def find_reachable(self, start_id: int) -> Set[int]:
        """
        Get the set of nodes reachable from start (its connected component
        for a symmetric graph).
        """
        return set(self.bfs(start_id))
