"""Command that loads a graph from a file and prints its articulation points."""

from __future__ import annotations

import re
import sys
from pathlib import Path
from typing import Sequence

from combalgs.graph import Graph, GraphEdge, GraphError, format_points

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"invalid integer: {text.strip()!r}")
    return int(match.group(1))


def parse_edge(line: str) -> GraphEdge:
    """Parse "from to weight"; a short or malformed line gives a 0-0 edge of weight 0."""
    parts = line.split()
    if len(parts) < 3:
        return GraphEdge(0, 0, 0)
    try:
        start, end, weight = (_leading_int(part) for part in parts[:3])
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return GraphEdge(0, 0, 0)
    return GraphEdge(start, end, weight)


def load_graph(path: str | Path) -> tuple[int, list[GraphEdge]]:
    """Read the node count from the first line and one edge per following line."""
    with open(path, encoding="utf-8") as handle:
        node_count = _leading_int(handle.readline())
        edges = [parse_edge(line) for line in handle]
    return node_count, edges


def main(argv: Sequence[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        return 0
    path = args[0]
    try:
        node_count, edges = load_graph(path)
    except OSError:
        print(f"Failed to open file {path}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    try:
        graph = Graph(node_count, edges)
    except GraphError as exc:
        print(exc, file=sys.stderr)
        return 1

    matrix = graph.format_adjacency_matrix()
    if matrix:
        print(matrix)
    print(format_points(graph.articulation_points()))
    return 0


if __name__ == "__main__":
    sys.exit(main())