"""Tests for points and inclusive containment."""

from hexplot.geometry import BOUNDING_SQUARE, Point, Rect, contains


def test_point_offset():
    assert Point(1, 2).offset(3, -4) == Point(4, -2)
    assert str(Point(-5, 7)) == "(-5, 7)"


def test_corners_are_inside():
    rect = Rect(0, 0, 10, 20)
    for corner in (Point(0, 0), Point(10, 0), Point(0, 20), Point(10, 20)):
        assert contains(rect, corner)


def test_outside_points():
    rect = Rect(0, 0, 10, 20)
    assert not contains(rect, Point(11, 5))
    assert not contains(rect, Point(5, -1))
    assert not contains(rect, Point(-1, 21))


def test_degenerate_rect_contains_nothing():
    assert not contains(Rect(0, 0, 0, 10), Point(0, 5))
    assert not contains(Rect(0, 5, 10, 5), Point(5, 5))
    assert Rect(3, 0, 1, 10).is_degenerate


def test_bounding_square():
    assert contains(BOUNDING_SQUARE, Point(-8192, -8192))
    assert contains(BOUNDING_SQUARE, Point(8191, 8191))
    assert not contains(BOUNDING_SQUARE, Point(8192, 0))
    assert not contains(BOUNDING_SQUARE, Point(0, -8193))
