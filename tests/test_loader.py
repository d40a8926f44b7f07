"""
Unit tests for edge-list ingestion.
"""

import io
import logging

import pytest

from edgegraph import (
    EdgeListIOError,
    EdgeListLoader,
    EdgeListParseError,
    LoadPolicy,
    ParsePolicy,
    load_graph,
)


class TestReadEdges:
    """Test line parsing."""

    def test_two_token_lines_become_edges(self):
        """Each two-token line should become one edge in source order."""
        edges = EdgeListLoader().read_edges(io.StringIO("1 2\n3\t4\n  5   6  \n"))
        assert edges == [(1, 2), (3, 4), (5, 6)]

    def test_malformed_line_skipped(self):
        """A header-like line with the wrong token count should be skipped."""
        loader = EdgeListLoader()
        edges = loader.read_edges(io.StringIO("1 2\nheader line here\n2 3\n"))
        assert edges == [(1, 2), (2, 3)]
        assert loader.stats.malformed_lines == 1
        assert loader.stats.lines_read == 3

    def test_blank_and_long_lines_skipped(self):
        """Blank lines and lines with three tokens should be skipped."""
        edges = EdgeListLoader().read_edges(io.StringIO("\n1 2 3\n4 5\n"))
        assert edges == [(4, 5)]

    def test_comment_lines_skipped(self):
        """Lines starting with the comment marker should be counted as comments."""
        loader = EdgeListLoader()
        edges = loader.read_edges(io.StringIO("# From To\n1 2\n#3 4\n"))
        assert edges == [(1, 2)]
        assert loader.stats.comment_lines == 2

    def test_comment_marker_disabled(self):
        """With no comment marker, '#' lines fall through to token checks."""
        loader = EdgeListLoader(comment_marker=None)
        edges = loader.read_edges(io.StringIO("# 1\n1 2\n"))
        assert edges == [(1, 2)]
        assert loader.stats.comment_lines == 0
        assert loader.stats.invalid_lines == 1

    def test_self_loops_and_parallel_edges_kept(self):
        """No deduplication: self-loops and repeated pairs are preserved."""
        edges = EdgeListLoader().read_edges(io.StringIO("1 1\n1 2\n1 2\n"))
        assert edges == [(1, 1), (1, 2), (1, 2)]


class TestParsePolicy:
    """Test tolerant vs strict handling of bad tokens."""

    def test_tolerant_skips_bad_token(self, caplog):
        """Tolerant parsing should log and skip a non-integer line."""
        loader = EdgeListLoader(parse_policy=ParsePolicy.TOLERANT)
        with caplog.at_level(logging.WARNING):
            edges = loader.read_edges(io.StringIO("1 2\na b\n2 3\n"))
        assert edges == [(1, 2), (2, 3)]
        assert loader.stats.invalid_lines == 1
        assert "line 2" in caplog.text

    def test_tolerant_rejects_negative_ids(self):
        """Negative numbers are not node ids."""
        loader = EdgeListLoader()
        assert loader.read_edges(io.StringIO("-1 2\n3 4\n")) == [(3, 4)]
        assert loader.stats.invalid_lines == 1

    def test_strict_raises_with_line_number(self):
        """Strict parsing should fail the whole load on the first bad token."""
        loader = EdgeListLoader(parse_policy=ParsePolicy.STRICT)
        with pytest.raises(EdgeListParseError) as exc_info:
            loader.read_edges(io.StringIO("1 2\n3 x\n"))
        assert exc_info.value.line_number == 2
        assert exc_info.value.line == "3 x"

    def test_strict_still_skips_malformed_lines(self):
        """Wrong token counts are never errors, even under strict parsing."""
        loader = EdgeListLoader(parse_policy=ParsePolicy.STRICT)
        assert loader.read_edges(io.StringIO("header\n1 2\n")) == [(1, 2)]

    def test_parse_error_is_value_error(self):
        """EdgeListParseError should be catchable as ValueError."""
        assert issubclass(EdgeListParseError, ValueError)


class TestLoadPolicy:
    """Test symmetric and directed graph construction."""

    def test_symmetric_records_both_directions(self, triangle_edges):
        """Every ingested edge should appear in both endpoints' lists."""
        lines = io.StringIO("".join(f"{u} {v}\n" for u, v in triangle_edges))
        graph = EdgeListLoader(LoadPolicy.SYMMETRIC).load(lines)
        for u, v in triangle_edges:
            assert v in graph.get_neighbors(u)
            assert u in graph.get_neighbors(v)

    def test_directed_records_source_to_target(self):
        """Directed loading should record only source -> target."""
        graph = EdgeListLoader(LoadPolicy.DIRECTED).load(io.StringIO("1 2\n2 3\n"))
        assert graph.adjacency_list == {1: [2], 2: [3], 3: []}
        assert graph.symmetric is False

    def test_directed_target_gets_empty_entry(self):
        """A node that is only ever a target should still have an entry."""
        graph = EdgeListLoader(LoadPolicy.DIRECTED).load(io.StringIO("5 9\n"))
        assert 9 in graph.adjacency_list
        assert graph.get_neighbors(9) == []


class TestFileSources:
    """Test loading from the filesystem."""

    def test_load_from_path(self, edge_file):
        """A file path should be opened and parsed."""
        graph = load_graph(edge_file)
        assert graph.get_edge_count() == 5
        assert graph.get_neighbors(0) == [1, 2]
        assert graph.get_neighbors(2) == [0, 1, 3]

    def test_load_from_str_path(self, edge_file):
        """A plain string path should behave like a Path."""
        graph = load_graph(str(edge_file))
        assert graph.get_node_count() == 6

    def test_missing_file_raises_io_error(self, tmp_path):
        """A missing file should raise EdgeListIOError."""
        with pytest.raises(EdgeListIOError) as exc_info:
            load_graph(tmp_path / "missing.txt")
        assert isinstance(exc_info.value, OSError)
        assert "missing.txt" in str(exc_info.value)

    def test_statistics_reset_between_loads(self, edge_file):
        """Each load should start fresh statistics."""
        loader = EdgeListLoader()
        loader.read_edges(edge_file)
        loader.read_edges(io.StringIO("1 2\n"))
        assert loader.stats.lines_read == 1
        assert loader.stats.skipped_lines == 0


class TestUndecodableBytes:
    """Test lines that are not valid UTF-8."""

    def test_tolerant_skips_undecodable_line(self, tmp_path):
        """A line with invalid UTF-8 bytes is skipped, not fatal."""
        path = tmp_path / "binary.txt"
        path.write_bytes(b"1 2\n\xff\xfe 3\n2 3\n")
        loader = EdgeListLoader()
        assert loader.read_edges(path) == [(1, 2), (2, 3)]
        assert loader.stats.invalid_lines == 1

    def test_strict_rejects_undecodable_file(self, tmp_path):
        """Under strict parsing invalid UTF-8 fails the load."""
        path = tmp_path / "binary.txt"
        path.write_bytes(b"1 2\n\xff\xfe 3\n")
        with pytest.raises(EdgeListIOError):
            EdgeListLoader(parse_policy=ParsePolicy.STRICT).read_edges(path)
