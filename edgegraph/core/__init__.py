"""
Core graph data structures and ingestion.

This module contains the adjacency-list graph, the edge-list loader, and the
facade class, without traversal or sampling algorithms.
"""

__all__ = ['graph', 'loader', 'edgegraph']
