"""
Output formats for sampled graphs: edge-list files and raster images.
"""

__all__ = ['export_edges', 'render_graph']
