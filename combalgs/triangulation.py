"""Divide-and-conquer triangulation of points in the plane."""

from __future__ import annotations

from typing import Iterable, Protocol

from combalgs.geometry import (
    angle_cos,
    cross_product,
    distance,
    in_circle,
    is_convex,
    segments_intersect,
)
from combalgs.mesh import HalfEdge, Position, Triangle, Vertex


class _Point(Protocol):
    x: float
    y: float


def create_edge(start: Vertex, end: Vertex) -> HalfEdge:
    """Join two vertices; return the half-edge from start to end, twin attached."""
    edge = HalfEdge(end)
    twin = HalfEdge(start)
    edge.twin = twin
    twin.twin = edge
    start.add_adjacent(end)
    end.add_adjacent(start)
    return edge


def create_triangle(e1: HalfEdge, e2: HalfEdge, e3: HalfEdge) -> Triangle:
    """Link three half-edges into a cycle and attach a new triangle to them."""
    triangle = Triangle(e1.end_point, e2.end_point, e3.end_point)
    e1.next = e2
    e2.next = e3
    e3.next = e1
    for edge in (e1, e2, e3):
        edge.triangle = triangle
    return triangle


def edges_intersect(edge1: HalfEdge, edge2: HalfEdge) -> bool:
    """Whether the segments of two half-edges cross."""
    return segments_intersect(
        edge1.start_point.position,
        edge1.end_point.position,
        edge2.start_point.position,
        edge2.end_point.position,
    )


def find_edge_by_points(
    point1: Position, point2: Position, edges: Iterable[HalfEdge]
) -> HalfEdge | None:
    """The first half-edge joining the two positions, in either direction."""
    for edge in edges:
        start = edge.start_point.position
        end = edge.end_point.position
        if (start == point1 and end == point2) or (end == point1 and start == point2):
            return edge
    return None


def _xy(vertex: Vertex) -> tuple[float, float]:
    return vertex.position.x, vertex.position.y


class Triangulation:
    """A set of vertices, half-edges and triangles covering a point set."""

    def __init__(self) -> None:
        self._vertices: list[Vertex] = []
        self._edges: dict[HalfEdge, None] = {}
        self._triangles: dict[Triangle, None] = {}

    @property
    def vertices(self) -> list[Vertex]:
        return list(self._vertices)

    @property
    def edges(self) -> list[HalfEdge]:
        """Every half-edge; each one's twin is listed as well."""
        return list(self._edges)

    @property
    def triangles(self) -> list[Triangle]:
        return list(self._triangles)

    def delaunay(self, points: Iterable[_Point]) -> None:
        """Triangulate the points, replacing whatever this object held before."""
        vertices = sorted(
            (Vertex(Position(point.x, point.y)) for point in points), key=_xy
        )
        result = _divide_and_conquer(vertices)
        self._vertices = result._vertices
        self._edges = result._edges
        self._triangles = result._triangles

    def _add_edge(self, edge: HalfEdge) -> None:
        self._edges[edge] = None
        assert edge.twin is not None
        self._edges[edge.twin] = None

    def _add_triangle(self, triangle: Triangle) -> None:
        self._triangles[triangle] = None


def _divide_and_conquer(vertices: list[Vertex]) -> Triangulation:
    size = len(vertices)
    if size < 3:
        return _trivial(vertices)
    if size == 3:
        return _triple(vertices)
    if size == 4:
        return _quadruple(vertices)
    mid = size // 2 if size == 8 or size >= 12 else 3
    return _merge(
        _divide_and_conquer(vertices[:mid]), _divide_and_conquer(vertices[mid:])
    )


def _trivial(vertices: list[Vertex]) -> Triangulation:
    result = Triangulation()
    result._vertices = list(vertices)
    if len(vertices) == 2:
        result._add_edge(create_edge(vertices[0], vertices[1]))
    return result


def _sort_triangle(vertices: list[Vertex]) -> list[Vertex]:
    first, second, third = sorted(vertices, key=_xy)
    if cross_product(first.position, third.position, second.position) < 0:
        second, third = third, second
    return [first, second, third]


def _triple(vertices: list[Vertex]) -> Triangulation:
    result = Triangulation()
    result._vertices = list(vertices)
    first, second, third = _sort_triangle(vertices)

    edge1 = create_edge(first, second)
    edge2 = create_edge(second, third)
    edge3 = create_edge(third, first)
    result._add_triangle(create_triangle(edge1, edge2, edge3))
    for edge in (edge1, edge2, edge3):
        result._add_edge(edge)
    return result


def _sort_quadrilateral(vertices: list[Vertex]) -> list[Vertex]:
    v = sorted(vertices, key=_xy)
    low = [v[0], v[1]] if v[0].position.y < v[1].position.y else [v[1], v[0]]
    high = [v[2], v[3]] if v[2].position.y > v[3].position.y else [v[3], v[2]]
    return low + high


def _quadruple(vertices: list[Vertex]) -> Triangulation:
    result = Triangulation()
    result._vertices = list(vertices)
    q = _sort_quadrilateral(vertices)
    p = [vertex.position for vertex in q]

    if is_convex(p[0], p[1], p[2], p[3]):
        edge1 = create_edge(q[0], q[1])
        edge2 = create_edge(q[1], q[2])
        edge3 = create_edge(q[2], q[3])
        edge4 = create_edge(q[3], q[0])

        angle123 = angle_cos(p[0], p[1], p[2])
        angle234 = angle_cos(p[1], p[2], p[3])
        angle341 = angle_cos(p[2], p[3], p[0])
        angle412 = angle_cos(p[3], p[0], p[1])

        if angle412 + angle234 < angle123 + angle341:
            common = create_edge(q[0], q[2])
            triangle1 = create_triangle(edge1, common, edge4)
            triangle2 = create_triangle(edge2, common, edge3)
            edge1.triangle = triangle1
            edge2.triangle = triangle2
            edge3.triangle = triangle2
            edge4.triangle = triangle1
            common.triangle = triangle1
            assert common.twin is not None
            common.twin.triangle = triangle2
        else:
            common = create_edge(q[1], q[3])
            triangle1 = create_triangle(edge1, common, edge2)
            triangle2 = create_triangle(edge3, common, edge4)
            edge1.triangle = triangle1
            edge2.triangle = triangle1
            edge3.triangle = triangle2
            edge4.triangle = triangle2
            common.triangle = triangle2
            assert common.twin is not None
            common.twin.triangle = triangle1

        result._add_triangle(triangle1)
        result._add_triangle(triangle2)
        for edge in (edge1, edge2, edge3, edge4, common):
            result._add_edge(edge)
        return result

    v = vertices
    edge1 = create_edge(v[0], v[1])
    edge2 = create_edge(v[0], v[2])
    edge3 = create_edge(v[0], v[3])
    edge4 = create_edge(v[1], v[2])
    edge5 = create_edge(v[1], v[3])
    edge6 = create_edge(v[2], v[3])

    triangle1 = create_triangle(edge1, edge3, edge5)
    triangle2 = create_triangle(edge4, edge5, edge6)
    triangle3 = create_triangle(edge2, edge3, edge6)

    assert edge2.twin and edge3.twin and edge5.twin and edge6.twin
    edge1.triangle = triangle1
    edge2.twin.triangle = triangle3
    edge3.triangle = triangle3
    edge3.twin.triangle = triangle1
    edge4.triangle = triangle2
    edge5.triangle = triangle1
    edge5.twin.triangle = triangle2
    edge6.triangle = triangle2
    edge6.twin.triangle = triangle3

    for edge in (edge1, edge2, edge3, edge4, edge5, edge6):
        result._add_edge(edge)
    for triangle in (triangle1, triangle2, triangle3):
        result._add_triangle(triangle)
    return result


def _next_candidate(
    vertices: list[Vertex], start: Vertex, end: Vertex, right_side: bool
) -> Vertex | None:
    a = start.position
    b = end.position
    candidate: Vertex | None = None
    for vertex in vertices:
        if vertex is start or vertex is end:
            continue
        p = vertex.position
        side = cross_product(a, b, p)
        if not (side > 0 if right_side else side < 0):
            continue
        if candidate is None:
            candidate = vertex
            continue
        turn = cross_product(a, candidate.position, p)
        if turn < 0 if right_side else turn > 0:
            candidate = vertex
    return candidate


def _find_tangent(left: list[Vertex], right: list[Vertex], upper: bool) -> HalfEdge:
    left_end = max(left, key=lambda vertex: vertex.position.x)
    right_end = min(right, key=lambda vertex: vertex.position.x)
    seen: set[tuple[Vertex, Vertex]] = set()

    while True:
        state = (left_end, right_end)
        if state in seen:
            raise RuntimeError("tangent search between two halves does not converge")
        seen.add(state)

        changed = False
        next_right = _next_candidate(right, left_end, right_end, upper)
        if next_right is not None:
            right_end = next_right
            changed = True
        next_left = _next_candidate(left, right_end, left_end, not upper)
        if next_left is not None:
            left_end = next_left
            changed = True
        if not changed:
            break

    return create_edge(left_end, right_end)


def _closest_vertex(
    edge: HalfEdge, vertices: list[Vertex], exceptions: set[Vertex]
) -> Vertex | None:
    a = edge.start_point.position
    c = edge.end_point.position
    best: Vertex | None = None
    for vertex in vertices:
        if vertex in exceptions:
            continue
        if best is None:
            best = vertex
        elif in_circle(a, c, best.position, vertex.position):
            best = vertex
    return best


def _closest_end(edge: HalfEdge, vertex: Vertex) -> Vertex:
    to_end = distance(edge.end_point.position, vertex.position)
    to_start = distance(edge.start_point.position, vertex.position)
    return edge.end_point if to_end < to_start else edge.start_point


def _choose_vertex(
    left: list[Vertex], right: list[Vertex], base: HalfEdge, candidate: Vertex
) -> Vertex:
    end = base.end_point
    start = base.start_point
    if (end in left and start in left) or (end in right and start in right):
        return _closest_end(base, candidate)
    if candidate in left:
        return end if end in right else start
    return end if end in left else start


def _merge(left: Triangulation, right: Triangulation) -> Triangulation:
    result = Triangulation()
    result._vertices = left._vertices + right._vertices
    result._edges = {**left._edges, **right._edges}
    result._triangles = {**left._triangles, **right._triangles}

    upper = _find_tangent(left._vertices, right._vertices, upper=True)
    lower = _find_tangent(left._vertices, right._vertices, upper=False)
    result._add_edge(upper)
    result._add_edge(lower)

    vertices = left._vertices + right._vertices
    exceptions = {upper.end_point, upper.start_point}
    base = upper

    while lower.end_point not in exceptions or lower.start_point not in exceptions:
        candidate = _closest_vertex(base, vertices, exceptions)
        if candidate is None:
            raise RuntimeError("no vertex left to close the merge seam")
        exceptions.add(candidate)

        chosen = _choose_vertex(left._vertices, right._vertices, base, candidate)
        if candidate in left._vertices:
            new_edge = create_edge(chosen, candidate)
            other = find_edge_by_points(
                base.start_point.position, new_edge.end_point.position, left._edges
            )
            if other is None:
                other = create_edge(base.start_point, new_edge.end_point)
                result._add_edge(other)
        else:
            new_edge = create_edge(candidate, chosen)
            other = find_edge_by_points(
                base.end_point.position, new_edge.start_point.position, right._edges
            )
            if other is None:
                other = create_edge(base.end_point, new_edge.start_point)
                result._add_edge(other)
        new_triangle = create_triangle(base, new_edge, other)

        crossing = [edge for edge in result._edges if edges_intersect(new_edge, edge)]
        for edge in crossing:
            del result._edges[edge]

        result._add_edge(new_edge)
        result._add_triangle(new_triangle)

        assert new_edge.twin is not None
        base = new_edge.twin

    return result