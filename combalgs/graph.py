"""Undirected weighted graphs with depth-first traversal and articulation points."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import count
from typing import Iterable, Iterator


class GraphError(ValueError):
    """Raised when a graph is given a node count or an edge it cannot hold."""


@dataclass(frozen=True)
class GraphEdge:
    """An undirected edge between two node indexes with a weight."""

    start: int
    end: int
    weight: int


@dataclass(eq=False)
class Node:
    """A graph node with its neighbours and traversal bookkeeping."""

    index: int
    neighbours: list[tuple[int, Node]] = field(default_factory=list, repr=False)
    visited: bool = False
    entry_time: int = -1
    exit_time: int = -1
    low: int = -1

    def reset(self) -> None:
        self.visited = False
        self.entry_time = -1
        self.exit_time = -1
        self.low = -1


class Graph:
    """An undirected graph stored as an adjacency matrix plus linked nodes.

    A weight of zero in the matrix means that there is no edge.
    """

    def __init__(self, node_count: int, edges: Iterable[GraphEdge]) -> None:
        if node_count < 0:
            raise GraphError(f"node count must not be negative, got {node_count}")
        self._matrix: list[list[int]] = [[0] * node_count for _ in range(node_count)]
        self.nodes: list[Node] = []
        self.add_edges(edges)

    @property
    def node_count(self) -> int:
        return len(self._matrix)

    @property
    def adjacency_matrix(self) -> list[list[int]]:
        """A copy of the adjacency matrix."""
        return [list(row) for row in self._matrix]

    def add_edges(self, edges: Iterable[GraphEdge]) -> None:
        """Add edges to the graph; raise GraphError if one is out of range."""
        edges = list(edges)
        size = self.node_count
        for edge in edges:
            if not (0 <= edge.start < size and 0 <= edge.end < size):
                raise GraphError(
                    f"edge {edge.start}-{edge.end} is outside a graph of {size} nodes"
                )
        for edge in edges:
            self._matrix[edge.start][edge.end] = edge.weight
            self._matrix[edge.end][edge.start] = edge.weight
        self._build_nodes()

    def _build_nodes(self) -> None:
        self.nodes = [Node(index) for index in range(self.node_count)]
        for node, row in zip(self.nodes, self._matrix):
            node.neighbours = [
                (index, self.nodes[index]) for index, weight in enumerate(row) if weight
            ]

    def format_adjacency_matrix(self) -> str:
        """Render the matrix one row per line, each value followed by a space."""
        return "\n".join("".join(f"{value} " for value in row) for row in self._matrix)

    def dfs(self) -> list[tuple[int, int, int]]:
        """Traverse every component depth-first.

        The traversal starts from the last node. Returns (index, entry time,
        exit time) for each node in the order the nodes are finished.
        """
        for node in self.nodes:
            node.reset()
        stack: list[tuple[Node, bool]] = [(node, False) for node in self.nodes]
        clock = count()
        visits: list[tuple[int, int, int]] = []

        while stack:
            node, processed = stack.pop()
            if processed:
                node.exit_time = next(clock)
                visits.append((node.index, node.entry_time, node.exit_time))
                continue
            if node.visited:
                continue
            node.visited = True
            node.entry_time = next(clock)
            stack.append((node, True))
            stack.extend(
                (neighbour, False)
                for _, neighbour in reversed(node.neighbours)
                if not neighbour.visited
            )
        return visits

    def articulation_points(self) -> list[int]:
        """Return the sorted indexes of nodes whose removal disconnects the graph."""
        for node in self.nodes:
            node.reset()
        flags = [False] * len(self.nodes)
        clock = count()
        for node in self.nodes:
            if not node.visited:
                self._mark_articulation(node, clock, flags)
        return [index for index, flag in enumerate(flags) if flag]

    @staticmethod
    def _mark_articulation(root: Node, clock: Iterator[int], flags: list[bool]) -> None:
        root.visited = True
        root.entry_time = root.low = next(clock)
        stack: list[tuple[Node, int, Iterator[tuple[int, Node]]]] = [
            (root, -1, iter(root.neighbours))
        ]
        root_children = 0

        while stack:
            node, parent, neighbours = stack[-1]
            for index, neighbour in neighbours:
                if index == parent:
                    continue
                if neighbour.visited:
                    node.low = min(node.low, neighbour.entry_time)
                else:
                    neighbour.visited = True
                    neighbour.entry_time = neighbour.low = next(clock)
                    stack.append((neighbour, node.index, iter(neighbour.neighbours)))
                    break
            else:
                stack.pop()
                if not stack:
                    continue
                above, above_parent, _ = stack[-1]
                above.low = min(above.low, node.low)
                if above_parent == -1:
                    root_children += 1
                elif node.low >= above.entry_time:
                    flags[above.index] = True

        if root_children > 1:
            flags[root.index] = True


def format_points(points: Iterable[int]) -> str:
    """Render point indexes on one line, each followed by a space."""
    return "".join(f"{point} " for point in points)