"""
Export edges as a whitespace-separated edge list.
"""

import logging
import os
from typing import Iterable, Union

from ..classes.edge import Edge

logger = logging.getLogger(__name__)


def save_edges(edges: Iterable[Edge], sFilename_out: Union[str, "os.PathLike[str]"]) -> int:
    """
    Write edges to a text file, one "u v" pair per line, with no header.

    Args:
        edges: Edges to write, in order
        sFilename_out: Output file path; parent directories are created

    Returns:
        Number of edges written
    """
    sFilename_out = os.fspath(sFilename_out)
    sFolder = os.path.dirname(sFilename_out)
    if sFolder:
        os.makedirs(sFolder, exist_ok=True)

    nEdge = 0
    with open(sFilename_out, "w", encoding="utf-8") as f:
        for source_id, target_id in edges:
            f.write(f"{source_id} {target_id}\n")
            nEdge += 1

    logger.info(f"Saved {nEdge} edges to {sFilename_out}")
    return nEdge
