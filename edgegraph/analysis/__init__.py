"""
Graph analysis modules for traversal and shortest paths.
"""

__all__ = ['traversal', 'pathfinding']
