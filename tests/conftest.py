"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from pathlib import Path

import numpy as np
import pytest

from edgegraph import EdgeGraph, pyedgegraph


@pytest.fixture
def triangle_edges() -> list[tuple[int, int]]:
    """Triangle 1-2-3 with a pendant node 4 attached to 2."""
    return [(1, 2), (2, 3), (3, 1), (2, 4)]


@pytest.fixture
def triangle_graph(triangle_edges) -> EdgeGraph:
    """Symmetric graph built from triangle_edges."""
    return EdgeGraph(triangle_edges)


@pytest.fixture
def two_component_graph() -> EdgeGraph:
    """Path 0-1-2-3 plus a disconnected pair 10-11."""
    return EdgeGraph([(0, 1), (1, 2), (2, 3), (10, 11)])


@pytest.fixture
def facade(triangle_graph) -> pyedgegraph:
    """Facade wrapping triangle_graph."""
    return pyedgegraph(triangle_graph)


@pytest.fixture
def edge_file(tmp_path: Path) -> Path:
    """Small edge-list file with a comment header and a malformed line."""
    path = tmp_path / "edges.txt"
    path.write_text(
        "# Directed graph (each unordered pair of nodes is saved once)\n"
        "# FromNodeId\tToNodeId\n"
        "0\t1\n"
        "0\t2\n"
        "1\t2\n"
        "not an edge line\n"
        "2\t3\n"
        "7\t8\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded random generator for reproducible sampling."""
    return np.random.default_rng(12345)
