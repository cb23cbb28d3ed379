"""Tests for points, directions and rectangles."""

from py_rmg.core.alea_prng import AleaPRNG
from py_rmg.core.geometry import Direction, Point, Rectangle


class TestDirection:
    """Test cardinal direction helpers."""

    def test_rotation(self):
        assert Direction.N.rotate(True) == Direction.E
        assert Direction.N.rotate(False) == Direction.W
        assert Direction.W.rotate(True) == Direction.N
        assert Direction.S.rotate(False) == Direction.E

    def test_offsets(self):
        assert Direction.N.offset == Point(0, -1)
        assert Direction.E.offset == Point(1, 0)
        assert Direction.S.offset == Point(0, 1)
        assert Direction.W.offset == Point(-1, 0)

    def test_between(self):
        origin = Point(5, 5)
        assert Direction.between(origin, Point(5, 4)) == Direction.N
        assert Direction.between(origin, Point(6, 5)) == Direction.E
        assert Direction.between(origin, Point(5, 8)) == Direction.S
        assert Direction.between(origin, Point(3, 5)) == Direction.W
        assert Direction.between(origin, Point(6, 6)) is None
        assert Direction.between(origin, origin) is None


class TestRectangle:
    """Test rectangle helpers."""

    def test_contains_is_half_open(self):
        rect = Rectangle(1, 2, 5, 6)
        assert rect.contains(Point(1, 2))
        assert rect.contains(Point(4, 5))
        assert not rect.contains(Point(5, 5))
        assert not rect.contains(Point(4, 6))

    def test_inset_and_empty(self):
        rect = Rectangle(0, 0, 10, 10)
        assert rect.inset(2) == Rectangle(2, 2, 8, 8)
        assert rect.inset(5).is_empty
        assert not rect.inset(4).is_empty

    def test_intersect(self):
        a = Rectangle(0, 0, 10, 10)
        b = Rectangle(5, -3, 20, 7)
        assert a.intersect(b) == Rectangle(5, 0, 10, 7)

    def test_random_cell_inside(self):
        rect = Rectangle(3, 4, 9, 7)
        prng = AleaPRNG("cells")
        for _ in range(200):
            assert rect.contains(rect.random_cell(prng))

    def test_center(self):
        assert Rectangle(0, 0, 10, 20).center() == (5.0, 10.0)

    def test_point_distance(self):
        assert Point(0, 0).distance_to(Point(3, 4)) == 5.0
        assert Point(1, 1).translate(2, -1) == Point(3, 0)
