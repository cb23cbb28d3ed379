"""Cell coordinates, cardinal directions and rectangles."""

import math
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional

from .alea_prng import AleaPRNG


class Point(NamedTuple):
    """Integer cell coordinate."""

    x: int
    y: int

    def translate(self, dx: int, dy: int) -> "Point":
        return Point(self.x + dx, self.y + dy)

    def distance_to(self, other: "Point") -> float:
        return math.hypot(other.x - self.x, other.y - self.y)


class Direction(str, Enum):
    """Cardinal directions in clockwise order."""

    N = "N"
    E = "E"
    S = "S"
    W = "W"

    @property
    def offset(self) -> Point:
        return _OFFSETS[self]

    def rotate(self, clockwise: bool) -> "Direction":
        """Turn by 90 degrees."""
        index = _CLOCKWISE.index(self)
        return _CLOCKWISE[(index + (1 if clockwise else -1)) % 4]

    @staticmethod
    def between(origin: Point, target: Point) -> Optional["Direction"]:
        """
        Direction from origin towards target.

        Only the sign of the delta is used; returns None for diagonal or
        identical points.
        """
        dx = target.x - origin.x
        dy = target.y - origin.y
        if dx == 0 and dy < 0:
            return Direction.N
        if dx == 0 and dy > 0:
            return Direction.S
        if dy == 0 and dx > 0:
            return Direction.E
        if dy == 0 and dx < 0:
            return Direction.W
        return None


_CLOCKWISE = [Direction.N, Direction.E, Direction.S, Direction.W]
_OFFSETS = {
    Direction.N: Point(0, -1),
    Direction.E: Point(1, 0),
    Direction.S: Point(0, 1),
    Direction.W: Point(-1, 0),
}

CARDINALS = tuple(_CLOCKWISE)


@dataclass(frozen=True)
class Rectangle:
    """Axis aligned cell rectangle; right and bottom are exclusive."""

    left: int
    top: int
    right: int
    bottom: int

    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def height(self) -> int:
        return self.bottom - self.top

    @property
    def is_empty(self) -> bool:
        return self.left >= self.right or self.top >= self.bottom

    @property
    def bottom_right(self) -> Point:
        """Last cell inside the rectangle."""
        return Point(self.right - 1, self.bottom - 1)

    def center(self) -> tuple:
        """Geometric centre as floats."""
        return ((self.left + self.right) / 2.0, (self.top + self.bottom) / 2.0)

    def contains(self, point: Point) -> bool:
        return self.left <= point.x < self.right and self.top <= point.y < self.bottom

    def inset(self, amount: int) -> "Rectangle":
        return Rectangle(
            self.left + amount,
            self.top + amount,
            self.right - amount,
            self.bottom - amount,
        )

    def intersect(self, other: "Rectangle") -> "Rectangle":
        return Rectangle(
            max(self.left, other.left),
            max(self.top, other.top),
            min(self.right, other.right),
            min(self.bottom, other.bottom),
        )

    def random_cell(self, prng: AleaPRNG) -> Point:
        """Uniform random cell; x is drawn before y."""
        x = prng.next_int(self.left, self.right)
        y = prng.next_int(self.top, self.bottom)
        return Point(x, y)
