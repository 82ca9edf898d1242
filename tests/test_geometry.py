import math

import pytest

from combalgs.geometry import (
    angle_cos,
    angle_sin,
    cross_product,
    distance,
    in_circle,
    is_convex,
    segments_intersect,
)
from combalgs.mesh import Position

O = Position(0, 0)
X = Position(1, 0)
Y = Position(0, 1)


def test_cross_product_sign_follows_turn():
    assert cross_product(O, X, Y) > 0
    assert cross_product(O, Y, X) < 0


def test_cross_product_is_antisymmetric():
    a, b, c = Position(1, 2), Position(4, -1), Position(-3, 5)
    assert cross_product(a, b, c) == -cross_product(a, c, b)


def test_cross_product_collinear_is_zero():
    assert cross_product(O, Position(1, 1), Position(2, 2)) == 0


def test_is_convex_square_both_orientations():
    square = [Position(0, 0), Position(1, 0), Position(1, 1), Position(0, 1)]
    assert is_convex(*square)
    assert is_convex(*reversed(square))


def test_is_convex_rejects_crossed_order():
    assert not is_convex(Position(0, 0), Position(1, 1), Position(1, 0), Position(0, 1))


def test_is_convex_rejects_concave():
    assert not is_convex(Position(0, 0), Position(2, 1), Position(4, 0), Position(2, 3))


def test_is_convex_rejects_degenerate():
    assert not is_convex(Position(0, 0), Position(1, 0), Position(2, 0), Position(1, 1))


def test_distance_pythagorean():
    assert distance(Position(0, 0), Position(3, 4)) == pytest.approx(5.0)


def test_distance_symmetric_and_zero_on_self():
    a, b = Position(1.5, -2), Position(-4, 7)
    assert distance(a, b) == distance(b, a)
    assert distance(a, a) == 0


def test_angle_cos_right_and_straight_angles():
    assert angle_cos(X, O, Y) == pytest.approx(0.0)
    assert angle_cos(X, O, Position(-1, 0)) == pytest.approx(-1.0)


def test_angle_zero_length_arm_defaults():
    assert angle_cos(O, O, X) == 1.0
    assert angle_sin(O, O, X) == 0.0


def test_angle_sin_sign_flips_with_order():
    assert angle_sin(X, O, Y) == pytest.approx(-angle_sin(Y, O, X))
    assert angle_sin(X, O, Y) == pytest.approx(1.0)


@pytest.mark.parametrize(
    "a,b,c",
    [
        (Position(1, 2), Position(0, 0), Position(3, 1)),
        (Position(-2, 5), Position(1, 1), Position(4, -3)),
    ],
)
def test_sin_and_cos_are_on_unit_circle(a, b, c):
    assert angle_cos(a, b, c) ** 2 + angle_sin(a, b, c) ** 2 == pytest.approx(1.0)


def test_in_circle_inside_point_depends_on_orientation():
    inside = Position(0.25, 0.25)
    assert in_circle(O, Y, X, inside) is True
    assert in_circle(O, X, Y, inside) is False


def test_in_circle_far_point():
    far = Position(5, 5)
    assert in_circle(O, X, Y, far) is True
    assert in_circle(O, Y, X, far) is False


def test_segments_crossing_diagonals():
    assert segments_intersect(Position(0, 0), Position(1, 1), Position(0, 1), Position(1, 0))


def test_segments_sharing_end_point_do_not_intersect():
    assert not segments_intersect(O, X, X, Y)
    assert not segments_intersect(O, X, O, Y)


def test_segments_parallel_do_not_intersect():
    assert not segments_intersect(O, X, Y, Position(1, 1))


def test_segments_collinear_overlap_and_gap():
    assert segments_intersect(Position(0, 0), Position(2, 0), Position(1, 0), Position(3, 0))
    assert not segments_intersect(Position(0, 0), Position(1, 0), Position(2, 0), Position(3, 0))


def test_segments_intersect_is_symmetric():
    a, b = Position(0, 0), Position(4, 2)
    c, d = Position(1, 3), Position(3, -1)
    assert segments_intersect(a, b, c, d) == segments_intersect(c, d, a, b)
    assert segments_intersect(a, b, c, d) == segments_intersect(b, a, d, c)


def test_segments_touching_in_middle_not_counted():
    assert not segments_intersect(Position(0, 0), Position(2, 0), Position(1, 0), Position(1, 1))
    assert math.isclose(cross_product(Position(0, 0), Position(2, 0), Position(1, 0)), 0.0)