"""
Render a sampled subgraph as a raster image.

Node positions are drawn at random inside the canvas margin; the layout
carries no topological meaning.
"""

import logging
import os
from typing import Dict, Iterable, Optional, Sequence, Tuple, Union

import numpy as np
from matplotlib.figure import Figure

from .. import config
from ..classes.edge import Edge

logger = logging.getLogger(__name__)

_DPI = 100


def layout_random(node_ids: Sequence[int],
                  rng: Optional[np.random.Generator] = None,
                  iCanvas_size: int = config.CANVAS_SIZE,
                  iMargin: int = config.CANVAS_MARGIN) -> Dict[int, Tuple[int, int]]:
    """
    Assign each node a random pixel position within [margin, size - margin).

    Args:
        node_ids: Nodes to place
        rng: Random generator; a fresh unseeded one is used if omitted
        iCanvas_size: Canvas width and height in pixels
        iMargin: Minimum distance from the canvas border

    Returns:
        Mapping of node id -> (x, y)
    """
    if rng is None:
        rng = np.random.default_rng()

    aXY = rng.integers(iMargin, iCanvas_size - iMargin, size=(len(node_ids), 2))
    return {node_id: (int(x), int(y)) for node_id, (x, y) in zip(node_ids, aXY)}


def render_sampled_graph(edges: Iterable[Edge],
                         node_ids: Sequence[int],
                         sFilename_out: Union[str, "os.PathLike[str]"] = config.DEFAULT_IMAGE_PATH,
                         rng: Optional[np.random.Generator] = None) -> Dict[int, Tuple[int, int]]:
    """
    Draw sampled nodes and the edges between them to a PNG file.

    Nodes are red circles labelled with their id; edges are blue segments.
    Edges with an endpoint outside node_ids are not drawn.

    Args:
        edges: Edges to draw
        node_ids: Sampled nodes to place on the canvas
        sFilename_out: Output image path
        rng: Random generator for node positions

    Returns:
        Mapping of node id -> (x, y) used for drawing
    """
    iCanvas_size = config.CANVAS_SIZE
    positions = layout_random(list(node_ids), rng)

    fig = Figure(figsize=(iCanvas_size / _DPI, iCanvas_size / _DPI), dpi=_DPI)
    ax = fig.add_axes([0, 0, 1, 1])
    ax.set_xlim(0, iCanvas_size)
    ax.set_ylim(0, iCanvas_size)
    ax.axis("off")

    nEdge_drawn = 0
    for source_id, target_id in edges:
        if source_id in positions and target_id in positions:
            (x0, y0), (x1, y1) = positions[source_id], positions[target_id]
            ax.plot([x0, x1], [y0, y1], color="blue", linewidth=0.8, zorder=1)
            nEdge_drawn += 1

    # Scatter marker size is in points squared; one pixel is 72 / dpi points
    dMarker_size = (2 * config.NODE_RADIUS * 72 / _DPI) ** 2
    for node_id, (x, y) in positions.items():
        ax.scatter([x], [y], s=dMarker_size, color="red", zorder=2)
        ax.text(x + 5, y + 5, str(node_id), fontsize=config.LABEL_FONT_SIZE, zorder=3)

    fig.savefig(os.fspath(sFilename_out), dpi=_DPI, facecolor="white")

    logger.info(f"Rendered {len(positions)} nodes and {nEdge_drawn} edges to {os.fspath(sFilename_out)}")
    return positions
