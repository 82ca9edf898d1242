"""Building blocks of a planar triangulation: positions, vertices, half-edges, triangles."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Position:
    """A point in the plane; positions compare equal when both coordinates match."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Position) -> Position:
        return Position(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Position) -> Position:
        return Position(self.x - other.x, self.y - other.y)

    def __truediv__(self, other: float) -> Position:
        return Position(self.x / other, self.y / other)


@dataclass(eq=False)
class Vertex:
    """A triangulation vertex with the vertices it is joined to.

    Vertices are compared by identity so that they can be kept in sets.
    """

    position: Position = field(default_factory=Position)
    adjacent: list[Vertex] = field(default_factory=list, repr=False)

    def add_adjacent(self, vertex: Vertex) -> None:
        self.adjacent.append(vertex)

    def remove_adjacent(self, vertex: Vertex) -> None:
        """Drop every link to the vertex; raise ValueError if there is none."""
        if vertex not in self.adjacent:
            raise ValueError("vertex is not adjacent")
        self.adjacent = [other for other in self.adjacent if other is not vertex]


@dataclass(eq=False)
class HalfEdge:
    """One direction of an edge.

    ``end_point`` is where the half-edge points to, ``twin`` runs the other
    way, ``next`` is the following half-edge clockwise around the triangle on
    the right, and ``triangle`` is that triangle.
    """

    end_point: Vertex
    next: HalfEdge | None = field(default=None, repr=False)
    twin: HalfEdge | None = field(default=None, repr=False)
    triangle: Triangle | None = field(default=None, repr=False)

    @property
    def start_point(self) -> Vertex:
        """The vertex this half-edge leaves from, taken from its twin."""
        if self.twin is None:
            raise ValueError("half-edge has no twin")
        return self.twin.end_point


class Triangle:
    """A face with three vertices and up to three neighbouring faces."""

    SIZE = 3

    def __init__(
        self,
        first: Vertex,
        second: Vertex,
        third: Vertex,
        first_neighbour: Triangle | None = None,
        second_neighbour: Triangle | None = None,
        third_neighbour: Triangle | None = None,
    ) -> None:
        self.vertices: tuple[Vertex, Vertex, Vertex] = (first, second, third)
        self.neighbours: list[Triangle | None] = []
        self.set_neighbours(first_neighbour, second_neighbour, third_neighbour)

    def set_neighbours(
        self,
        first: Triangle | None,
        second: Triangle | None,
        third: Triangle | None,
    ) -> None:
        self.neighbours = [first, second, third]

    def set_neighbour(self, index: int, triangle: Triangle | None) -> None:
        """Replace one neighbour; the index must be 0, 1 or 2."""
        if not 0 <= index < self.SIZE:
            raise IndexError(f"neighbour index must be below {self.SIZE}, got {index}")
        self.neighbours[index] = triangle

    def __repr__(self) -> str:
        points = ", ".join(
            f"({vertex.position.x}, {vertex.position.y})" for vertex in self.vertices
        )
        return f"Triangle({points})"