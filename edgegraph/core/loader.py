"""
Edge-list ingestion.

This module parses whitespace-separated integer pairs into edges and builds
an EdgeGraph from them, under an explicit load policy (symmetric or directed)
and parse policy (tolerant or strict).
"""

import logging
import os
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Union

from .. import config
from ..classes.edge import Edge
from ..classes.errors import EdgeListIOError, EdgeListParseError
from .graph import EdgeGraph

logger = logging.getLogger(__name__)

EdgeListSource = Union[str, "os.PathLike[str]", Iterable[str]]


class LoadPolicy(Enum):
    """How parsed pairs are recorded in the adjacency list."""
    SYMMETRIC = "symmetric"
    DIRECTED = "directed"


class ParsePolicy(Enum):
    """What happens when a two-token line holds a non-integer token."""
    TOLERANT = "tolerant"
    STRICT = "strict"


@dataclass
class LoadStatistics:
    """
    Line accounting for one load.

    Attributes:
        lines_read: Total lines consumed from the source
        edges_loaded: Lines accepted as edges
        comment_lines: Lines skipped because of the comment marker
        malformed_lines: Lines skipped because they did not hold two tokens
        invalid_lines: Two-token lines skipped because a token was not a node id
    """

    lines_read: int = 0
    edges_loaded: int = 0
    comment_lines: int = 0
    malformed_lines: int = 0
    invalid_lines: int = 0

    @property
    def skipped_lines(self) -> int:
        return self.comment_lines + self.malformed_lines + self.invalid_lines


def parse_node_id(token: str) -> int:
    """
    Parse a token as a non-negative node id.

    Raises:
        ValueError: If the token is not a non-negative integer
    """
    node_id = int(token)
    if node_id < 0:
        raise ValueError(f"negative node id {node_id}")
    return node_id


class EdgeListLoader:
    """
    Reads line-oriented edge lists.

    Each line is split on whitespace. Lines with exactly two tokens are edges;
    any other token count is skipped as a header/comment/blank line. Lines
    starting with the comment marker are skipped explicitly.

    Under the tolerant parse policy (the default) a line whose tokens are not
    node ids is logged and skipped, so one bad line in a large real-world edge
    list does not abort the run. Under the strict policy it raises
    EdgeListParseError.
    """

    def __init__(self,
                 load_policy: LoadPolicy = LoadPolicy.SYMMETRIC,
                 parse_policy: ParsePolicy = ParsePolicy.TOLERANT,
                 comment_marker: Optional[str] = config.COMMENT_MARKER,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the loader.

        Args:
            load_policy: Record edges symmetrically or as directed source -> target
            parse_policy: Skip (tolerant) or raise on (strict) unparseable lines
            comment_marker: Line prefix marking comments; None disables the check
            logger: Logger receiving diagnostics (defaults to the module logger)
        """
        self.load_policy = load_policy
        self.parse_policy = parse_policy
        self.comment_marker = comment_marker
        self.logger = logger if logger is not None else logging.getLogger(__name__)
        self.stats = LoadStatistics()

    def read_edges(self, source: EdgeListSource) -> List[Edge]:
        """
        Parse a source into a list of edges.

        Args:
            source: Path to an edge-list file, or an iterable of text lines

        Returns:
            List of (u, v) pairs in source order

        Raises:
            EdgeListIOError: If the source file cannot be opened or read, or (strict
                policy only) holds bytes that are not valid UTF-8
            EdgeListParseError: Under the strict policy, on an unparseable line
        """
        self.stats = LoadStatistics()

        if isinstance(source, (str, os.PathLike)):
            path = os.fspath(source)
            self.logger.info(f"Loading edge list from {path}...")
            # Undecodable bytes become U+FFFD under the tolerant policy, so the
            # line fails node id parsing and is skipped
            errors = "strict" if self.parse_policy is ParsePolicy.STRICT else "replace"
            try:
                with open(path, "r", encoding="utf-8", errors=errors) as f:
                    edges = self._parse_lines(f)
            except (OSError, UnicodeDecodeError) as e:
                raise EdgeListIOError(path, str(e)) from e
        else:
            edges = self._parse_lines(source)

        self.logger.info(
            f"Loaded {self.stats.edges_loaded:,} edges from {self.stats.lines_read:,} lines "
            f"({self.stats.skipped_lines:,} skipped)"
        )
        return edges

    def load(self, source: EdgeListSource) -> EdgeGraph:
        """
        Parse a source and build a graph according to the load policy.

        Args:
            source: Path to an edge-list file, or an iterable of text lines

        Returns:
            EdgeGraph built from the parsed edges
        """
        edges = self.read_edges(source)
        graph = EdgeGraph(edges, symmetric=self.load_policy is LoadPolicy.SYMMETRIC)
        self.logger.info(
            f"Built {self.load_policy.value} graph with {graph.get_node_count():,} nodes"
        )
        return graph

    def _parse_lines(self, lines: Iterable[str]) -> List[Edge]:
        edges: List[Edge] = []

        for line_number, raw_line in enumerate(lines, start=1):
            self.stats.lines_read += 1
            line = raw_line.rstrip("\r\n")

            if self.comment_marker and line.lstrip().startswith(self.comment_marker):
                self.stats.comment_lines += 1
                continue

            parts = line.split()
            if len(parts) != 2:
                self.stats.malformed_lines += 1
                if parts:
                    self.logger.debug(f"Skipping malformed line {line_number}: {line!r}")
                continue

            try:
                source_id = parse_node_id(parts[0])
                target_id = parse_node_id(parts[1])
            except ValueError as e:
                if self.parse_policy is ParsePolicy.STRICT:
                    raise EdgeListParseError(line_number, line, str(e)) from e
                self.stats.invalid_lines += 1
                self.logger.warning(f"Skipping invalid node id on line {line_number} {line!r}: {e}")
                continue

            edges.append((source_id, target_id))
            self.stats.edges_loaded += 1

        return edges


def load_graph(source: EdgeListSource,
               load_policy: LoadPolicy = LoadPolicy.SYMMETRIC,
               parse_policy: ParsePolicy = ParsePolicy.TOLERANT,
               comment_marker: Optional[str] = config.COMMENT_MARKER) -> EdgeGraph:
    """
    Load an edge list into an EdgeGraph.

    Convenience wrapper around EdgeListLoader; defaults to the symmetric,
    tolerant policy.
    """
    loader = EdgeListLoader(load_policy, parse_policy, comment_marker)
    return loader.load(source)
