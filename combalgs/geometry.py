"""Plane geometry predicates used by the triangulation."""

from __future__ import annotations

import math

from combalgs.mesh import Position


def cross_product(a: Position, b: Position, c: Position) -> float:
    """Cross product of (b - a) and (c - a); positive when a, b, c turn left."""
    return (b.x - a.x) * (c.y - a.y) - (b.y - a.y) * (c.x - a.x)


def is_convex(a: Position, b: Position, c: Position, d: Position) -> bool:
    """Whether the quadrilateral a-b-c-d, taken in that order, is strictly convex."""
    cross1 = cross_product(a, b, c)
    cross2 = cross_product(b, c, d)
    cross3 = cross_product(c, d, a)
    cross4 = cross_product(d, a, b)
    return cross1 * cross2 > 0 and cross2 * cross3 > 0 and cross3 * cross4 > 0


def distance(a: Position, b: Position) -> float:
    return math.hypot(b.x - a.x, b.y - a.y)


def _arms(a: Position, b: Position, c: Position) -> tuple[float, float, float, float]:
    return a.x - b.x, a.y - b.y, c.x - b.x, c.y - b.y


def angle_cos(a: Position, b: Position, c: Position) -> float:
    """Cosine of the angle at b; 1.0 when either arm has zero length."""
    ba_x, ba_y, bc_x, bc_y = _arms(a, b, c)
    ba_length = math.hypot(ba_x, ba_y)
    bc_length = math.hypot(bc_x, bc_y)
    if ba_length == 0.0 or bc_length == 0.0:
        return 1.0
    return (ba_x * bc_x + ba_y * bc_y) / (ba_length * bc_length)


def angle_sin(a: Position, b: Position, c: Position) -> float:
    """Signed sine of the angle at b; 0.0 when either arm has zero length."""
    ba_x, ba_y, bc_x, bc_y = _arms(a, b, c)
    ba_length = math.hypot(ba_x, ba_y)
    bc_length = math.hypot(bc_x, bc_y)
    if ba_length == 0.0 or bc_length == 0.0:
        return 0.0
    return (ba_x * bc_y - ba_y * bc_x) / (ba_length * bc_length)


def in_circle(a: Position, b: Position, c: Position, d: Position) -> bool:
    """The circumcircle test with a negative determinant.

    For a, b, c in clockwise order this is true when d lies inside their
    circumcircle; for counter-clockwise order, when d lies outside.
    """
    ax, ay = a.x - d.x, a.y - d.y
    bx, by = b.x - d.x, b.y - d.y
    cx, cy = c.x - d.x, c.y - d.y
    det = (
        (ax * ax + ay * ay) * (bx * cy - cx * by)
        - (bx * bx + by * by) * (ax * cy - cx * ay)
        + (cx * cx + cy * cy) * (ax * by - bx * ay)
    )
    return det < 0


def segments_intersect(a: Position, b: Position, c: Position, d: Position) -> bool:
    """Whether segment a-b crosses segment c-d.

    Segments that share an end point never count as crossing; collinear
    segments count when their bounding boxes overlap.
    """
    if a in (c, d) or b in (c, d):
        return False

    d1 = cross_product(a, b, c)
    d2 = cross_product(a, b, d)
    d3 = cross_product(c, d, a)
    d4 = cross_product(c, d, b)

    if d1 * d2 < 0 and d3 * d4 < 0:
        return True

    if d1 == 0 and d2 == 0 and d3 == 0 and d4 == 0:
        x_overlap = max(a.x, b.x) >= min(c.x, d.x) and max(c.x, d.x) >= min(a.x, b.x)
        y_overlap = max(a.y, b.y) >= min(c.y, d.y) and max(c.y, d.y) >= min(a.y, b.y)
        return x_overlap and y_overlap

    return False