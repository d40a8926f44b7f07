"""
Subgraph sampling for edge-list graphs.

This module provides strategies that shrink a graph to a node/edge set small
enough for rendering. None of them modify the source graph.
"""

import logging
from collections import deque
from typing import Iterable, List, Optional, Set

import numpy as np

from ..classes.edge import Adjacency, Edge
from ..core.graph import EdgeGraph

logger = logging.getLogger(__name__)


class SamplingEngine:
    """
    Sampling strategies for edge-list graphs.

    This class provides methods for:
    - Connected sampling by bounded breadth-first expansion
    - Taking the first N adjacency entries (node-induced, unfiltered)
    - Uniform random node sampling
    - Extracting the edges induced by a node set
    """

    def __init__(self, graph: EdgeGraph, logger: Optional[logging.Logger] = None):
        """
        Initialize the sampling engine.

        Args:
            graph: EdgeGraph instance to sample from
            logger: Logger receiving diagnostics (defaults to the module logger)
        """
        self.graph = graph
        self.logger = logger if logger is not None else logging.getLogger(__name__)

    def connected_sample(self, seed_id: int, budget: int) -> Set[int]:
        """
        Sample up to budget nodes connected to seed.

        Nodes are discovered breadth-first from the seed and admitted only
        while the sample is below budget, so every member is reachable from
        the seed through edges inside the sample. If the seed's component is
        smaller than budget, the whole component is returned.

        Args:
            seed_id: Node to start from; always included when budget >= 1
            budget: Maximum number of nodes

        Returns:
            Set of sampled node ids
        """
        _check_budget(budget)
        if budget == 0:
            return set()

        sampled: Set[int] = {seed_id}
        queue = deque([seed_id])

        while queue and len(sampled) < budget:
            current_id = queue.popleft()
            for neighbor_id in self.graph.get_neighbors(current_id):
                if len(sampled) >= budget:
                    break
                if neighbor_id not in sampled:
                    sampled.add(neighbor_id)
                    queue.append(neighbor_id)

        self.logger.info(f"Connected sample from {seed_id}: {len(sampled)} nodes (budget {budget})")
        return sampled

    def top_n_by_key_order(self, n: int, sort_neighbors: bool = False, anchor_id: Optional[int] = 0) -> Adjacency:
        """
        Take the first n adjacency entries in the graph's key order.

        The anchor node (node 0 by default) is added if the graph has an entry
        for it and it is not among the first n.

        This sample is node-induced and NOT edge-filtered: each selected
        node's full neighbor list is copied, including neighbors outside the
        selection, so the result may reference nodes with no entry of their
        own. Use induced_edges() for an edge-filtered sample.

        Args:
            n: Number of leading entries to keep
            sort_neighbors: Sort copied neighbor lists ascending for presentation
            anchor_id: Node force-included when present; None disables it

        Returns:
            Adjacency mapping of the selected nodes
        """
        _check_budget(n)

        selected = self.graph.get_nodes()[:n]
        if anchor_id is not None and anchor_id not in selected and anchor_id in self.graph.adjacency_list:
            selected.append(anchor_id)

        subgraph: Adjacency = {}
        for node_id in selected:
            neighbors = list(self.graph.get_neighbors(node_id))
            if sort_neighbors:
                neighbors.sort()
            subgraph[node_id] = neighbors

        self.logger.info(f"Top-N sample: {len(subgraph)} nodes (n={n})")
        return subgraph

    def random_sample(self, budget: int, rng: Optional[np.random.Generator] = None) -> Set[int]:
        """
        Draw up to budget distinct nodes uniformly at random, ignoring connectivity.

        Args:
            budget: Maximum number of nodes
            rng: Random generator; a fresh unseeded one is used if omitted

        Returns:
            Set of sampled node ids
        """
        _check_budget(budget)
        if rng is None:
            rng = np.random.default_rng()

        nodes = self.graph.get_nodes()
        size = min(budget, len(nodes))
        if size == 0:
            return set()

        indices = rng.choice(len(nodes), size=size, replace=False)
        sampled = {nodes[int(i)] for i in indices}

        self.logger.info(f"Random sample: {len(sampled)} of {len(nodes)} nodes")
        return sampled

    def random_adjacency_sample(self, n: int, rng: Optional[np.random.Generator] = None) -> Adjacency:
        """
        Keep n randomly chosen adjacency entries with their full neighbor lists.

        Like top_n_by_key_order this is node-induced and not edge-filtered.

        Args:
            n: Number of entries to keep
            rng: Random generator; a fresh unseeded one is used if omitted

        Returns:
            Adjacency mapping of the chosen nodes
        """
        sampled = self.random_sample(n, rng)
        return {node_id: list(neighbors)
                for node_id, neighbors in self.graph.adjacency_list.items()
                if node_id in sampled}

    def induced_edges(self, node_ids: Iterable[int]) -> List[Edge]:
        """
        Get the edges whose endpoints both lie in a node set.

        Adjacency entries are checked independently, so both directions of
        a symmetric edge are returned.

        Args:
            node_ids: Sampled node ids

        Returns:
            List of (u, v) edges in adjacency order
        """
        node_set = set(node_ids)
        edges: List[Edge] = []
        for source_id, neighbors in self.graph.adjacency_list.items():
            if source_id not in node_set:
                continue
            edges.extend((source_id, target_id) for target_id in neighbors if target_id in node_set)

        self.logger.debug(f"Induced {len(edges)} edges on {len(node_set)} nodes")
        return edges


def _check_budget(budget: int):
    if budget < 0:
        raise ValueError(f"Sample size must be non-negative, got {budget}")
