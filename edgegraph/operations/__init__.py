"""
Graph operation modules that derive reduced graphs by sampling.
"""

__all__ = ['sampling']
