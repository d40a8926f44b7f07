"""
Exception hierarchy for edgegraph.

Only ingestion can fail; every algorithm over a resident graph returns an
empty or sentinel result instead of raising.
"""

from typing import Optional


class EdgeGraphError(Exception):
    """Base class for all edgegraph errors."""


class EdgeListError(EdgeGraphError):
    """Base class for edge-list ingestion errors."""


class EdgeListIOError(EdgeListError, OSError):
    """The edge-list source is missing or unreadable."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Cannot read edge list '{source}': {reason}")


class EdgeListParseError(EdgeListError, ValueError):
    """A two-token line holds a token that is not a valid node id."""

    def __init__(self, line_number: int, line: str, reason: Optional[str] = None):
        self.line_number = line_number
        self.line = line
        self.reason = reason
        message = f"Invalid node id on line {line_number}: {line!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
