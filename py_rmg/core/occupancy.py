"""Claimed-cell tracking for a single generation run."""

import numpy as np

from .geometry import Point


class OccupancyGrid:
    """
    Dense boolean grid over the map's cell space.

    Cells outside the grid are ignored by every query and mutation.
    """

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.cells = np.zeros((height, width), dtype=bool)

    def _clip(self, left: int, top: int, right: int, bottom: int):
        return (
            max(left, 0),
            max(top, 0),
            min(right, self.width),
            min(bottom, self.height),
        )

    def is_occupied(self, point: Point) -> bool:
        if 0 <= point.x < self.width and 0 <= point.y < self.height:
            return bool(self.cells[point.y, point.x])
        return False

    def is_area_occupied(self, origin: Point, size: int) -> bool:
        """Whether any cell of the size x size square at origin is claimed."""
        left, top, right, bottom = self._clip(
            origin.x, origin.y, origin.x + size, origin.y + size
        )
        if left >= right or top >= bottom:
            return False
        return bool(self.cells[top:bottom, left:right].any())

    def occupy_block(self, origin: Point, size: int) -> None:
        left, top, right, bottom = self._clip(
            origin.x, origin.y, origin.x + size, origin.y + size
        )
        if left < right and top < bottom:
            self.cells[top:bottom, left:right] = True

    def occupy_disk(self, origin: Point, radius: float) -> None:
        """Claim every cell within Euclidean radius of origin."""
        reach = int(radius)
        left, top, right, bottom = self._clip(
            origin.x - reach, origin.y - reach, origin.x + reach + 1, origin.y + reach + 1
        )
        if left >= right or top >= bottom:
            return
        ys, xs = np.ogrid[top:bottom, left:right]
        disk = (xs - origin.x) ** 2 + (ys - origin.y) ** 2 <= radius * radius
        self.cells[top:bottom, left:right] |= disk

    def occupied_count(self) -> int:
        return int(np.count_nonzero(self.cells))
