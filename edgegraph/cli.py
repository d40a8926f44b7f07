"""Command line entry point: load, sample, query, export and render an edge list."""

import argparse
import logging
from typing import Callable, List, Optional, Tuple

import numpy as np

from . import config
from .classes.edge import Edge
from .classes.errors import EdgeListError
from .core.edgegraph import pyedgegraph
from .core.loader import LoadPolicy, ParsePolicy
from .formats.export_edges import save_edges
from .formats.render_graph import render_sampled_graph

logger = logging.getLogger(__name__)

STRATEGIES = ("connected", "top", "random", "adjacency")


def prompt_node(graph: pyedgegraph, label: str, input_fn: Optional[Callable[[str], str]] = None) -> Optional[int]:
    """
    Ask for a node id on line-based input.

    Non-numeric input and nodes absent from the graph are reported and
    rejected.

    Returns:
        The node id, or None if the input was rejected
    """
    if input_fn is None:
        input_fn = input
    raw = input_fn(f"Enter {label} node: ").strip()
    try:
        node_id = int(raw)
    except ValueError:
        print(f"Invalid {label} node {raw!r}: not a number")
        return None
    if not graph.has_node(node_id):
        print(f"Invalid {label} node {node_id}: not in graph")
        return None
    return node_id


def format_bfs_summary(order: List[int], limit: int = config.BFS_PREVIEW_COUNT) -> str:
    preview = " ".join(str(node_id) for node_id in order[:limit])
    suffix = " ..." if len(order) > limit else ""
    return f"BFS visited {len(order)} nodes: {preview}{suffix}"


def sample_edges(graph: pyedgegraph, strategy: str, size: int, seed_node: int,
                 rng: np.random.Generator) -> Tuple[List[int], List[Edge]]:
    """Run one sampling strategy and return (nodes, edges) for export and rendering."""
    if strategy == "connected":
        nodes = graph.connected_sample(seed_node, size)
        return sorted(nodes), graph.induced_edges(nodes)
    if strategy == "random":
        nodes = graph.random_sample(size, rng)
        return sorted(nodes), graph.induced_edges(nodes)
    if strategy == "top":
        subgraph = graph.top_n_by_key_order(size, sort_neighbors=True, anchor_id=seed_node)
        edges = [(node_id, neighbor_id) for node_id, neighbors in subgraph.items() for neighbor_id in neighbors]
        return list(subgraph.keys()), edges
    if strategy == "adjacency":
        subgraph = graph.random_adjacency_sample(size, rng)
        edges = [(node_id, neighbor_id) for node_id, neighbors in subgraph.items() for neighbor_id in neighbors]
        return list(subgraph.keys()), edges
    raise ValueError(f"Unknown sampling strategy: {strategy}")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Sample and explore a large edge-list graph.")
    parser.add_argument("edge_file", help="Whitespace-separated edge list, one 'u v' pair per line.")
    parser.add_argument(
        "--policy",
        choices=[p.value for p in LoadPolicy],
        default=LoadPolicy.SYMMETRIC.value,
        help="Record edges in both directions (symmetric) or source->target only (directed).",
    )
    parser.add_argument("--strict", action="store_true", help="Abort on lines with non-integer node ids.")
    parser.add_argument("--strategy", choices=STRATEGIES, default="connected", help="Sampling strategy.")
    parser.add_argument("--sample-size", type=int, default=config.DEFAULT_SAMPLE_SIZE)
    parser.add_argument(
        "--seed-node",
        type=int,
        default=config.DEFAULT_SEED_NODE,
        help="Start node for connected sampling and BFS; anchor for top sampling.",
    )
    parser.add_argument("--rng-seed", type=int, default=None, help="Seed for random sampling and layout.")
    parser.add_argument("--path", nargs=2, type=int, metavar=("START", "END"), help="Print a shortest path.")
    parser.add_argument("--interactive", action="store_true", help="Prompt for path start and end nodes.")
    parser.add_argument("--output", default=None, help="Write the sampled edges to this file.")
    parser.add_argument("--image", default=config.DEFAULT_IMAGE_PATH, help="Rendered image path.")
    parser.add_argument("--no-image", action="store_true", help="Skip rendering.")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    parse_policy = ParsePolicy.STRICT if args.strict else ParsePolicy.TOLERANT
    try:
        graph = pyedgegraph.from_file(args.edge_file, LoadPolicy(args.policy), parse_policy)
    except EdgeListError as e:
        logger.error(str(e))
        return 1

    print(f"Loaded graph: nodes={graph.get_node_count()} edges={graph.get_edge_count()}")

    rng = np.random.default_rng(args.rng_seed)
    try:
        nodes, edges = sample_edges(graph, args.strategy, args.sample_size, args.seed_node, rng)
    except ValueError as e:
        logger.error(str(e))
        return 1
    print(f"Sampled {len(nodes)} nodes and {len(edges)} edges ({args.strategy})")

    print(format_bfs_summary(graph.bfs(args.seed_node)))

    if args.interactive:
        start_id = prompt_node(graph, "start")
        if start_id is None:
            return 1
        end_id = prompt_node(graph, "end")
        if end_id is None:
            return 1
        args.path = [start_id, end_id]

    if args.path:
        start_id, end_id = args.path
        path = graph.shortest_path(start_id, end_id)
        if path:
            print(f"Shortest path ({len(path) - 1} hops): {' -> '.join(str(n) for n in path)}")
        else:
            print(f"No path from {start_id} to {end_id}")

    if args.output:
        try:
            save_edges(edges, args.output)
        except OSError as e:
            logger.error(f"Error saving sampled edges: {e}")
            return 1
        print(f"Sampled edges saved to: {args.output}")

    if not args.no_image:
        try:
            render_sampled_graph(edges, nodes, args.image, rng)
        except OSError as e:
            logger.error(f"Error visualizing graph: {e}")
            return 1
        print(f"Graph visualization saved to: {args.image}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
