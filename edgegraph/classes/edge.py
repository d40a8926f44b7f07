"""
Shared type definitions for edge-list graphs.

Node identifiers are plain non-negative integers and edges are integer pairs,
so the adjacency representation stays as compact as a Python dict of lists.
"""

import math
from typing import Dict, List, Tuple

NodeId = int
Edge = Tuple[int, int]
Adjacency = Dict[int, List[int]]

# Distance assigned to nodes that cannot be reached from the source
UNREACHABLE = math.inf


def is_reachable(distance: float) -> bool:
    """Return True if a distance map value denotes a reachable node."""
    return distance != UNREACHABLE
