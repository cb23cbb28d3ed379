"""
Poisson disk (blue-noise) sampling of map cells.

Uses dart throwing with an active list and a background grid of cell size
min_distance / sqrt(2): each background cell holds at most one sample, so a
candidate only has to be checked against the 5x5 block of background cells
around it.
"""

import math
from typing import List, Optional

import numpy as np
import structlog

from .alea_prng import AleaPRNG
from .geometry import Point, Rectangle
from .tile_map import TileMap

logger = structlog.get_logger()


class MapRegion:
    """
    Sampling region covering a map's cells inset by an edge margin.

    The region is clipped to the playable bounds, and `contains` also asks the
    map, so samples never land outside the playable area.
    """

    def __init__(self, tile_map: TileMap, edge_distance: int = 0):
        self.tile_map = tile_map
        self.edge_distance = edge_distance
        self.rect = tile_map.all_cells.inset(edge_distance).intersect(tile_map.bounds)

    @property
    def is_empty(self) -> bool:
        return self.rect.is_empty

    @property
    def bottom_right(self) -> Point:
        return self.rect.bottom_right

    def contains(self, point: Point) -> bool:
        return self.rect.contains(point) and self.tile_map.contains(point)

    def random_cell(self, prng: AleaPRNG) -> Point:
        return self.rect.random_cell(prng)


class PoissonDiskSampler:
    """Generates cells with a minimum pairwise spacing."""

    def __init__(self, prng: AleaPRNG, new_points_count: int = 6):
        """
        Args:
            prng: Random stream of the current run
            new_points_count: Candidates tried around each active point
        """
        self.prng = prng
        self.new_points_count = new_points_count

    def generate(self, region, min_distance: float) -> List[Point]:
        """
        Sample cells of a region.

        Args:
            region: A Rectangle or MapRegion (anything with is_empty,
                bottom_right, contains and random_cell)
            min_distance: Minimum distance between any two samples, in cells

        Returns:
            Sampled cells in acceptance order
        """
        samples: List[Point] = []
        if region.is_empty or min_distance <= 0:
            return samples

        cell_size = min_distance / math.sqrt(2.0)
        bottom_right = region.bottom_right
        grid_width = int(math.ceil((bottom_right.x + 1) / cell_size))
        grid_height = int(math.ceil((bottom_right.y + 1) / cell_size))
        # index into samples, -1 when empty
        grid = np.full((grid_width, grid_height), -1, dtype=np.int32)

        first = region.random_cell(self.prng)
        active = [first]
        samples.append(first)
        gx, gy = self._to_grid(first, cell_size)
        grid[gx, gy] = 0

        while active:
            point = self.prng.pop_random(active)
            for _ in range(self.new_points_count):
                candidate = self._point_around(point, min_distance)
                if not region.contains(candidate):
                    continue
                if self._in_neighbourhood(grid, samples, candidate, min_distance, cell_size):
                    continue

                active.append(candidate)
                samples.append(candidate)
                gx, gy = self._to_grid(candidate, cell_size)
                grid[gx, gy] = len(samples) - 1

        logger.debug(
            "Poisson disk sampling complete",
            min_distance=min_distance,
            samples=len(samples),
        )
        return samples

    def _point_around(self, point: Point, min_distance: float) -> Point:
        radius = min_distance * (self.prng.next_float() + 1)
        angle = 2 * math.pi * self.prng.next_float()
        return Point(
            int(point.x + radius * math.cos(angle)),
            int(point.y + radius * math.sin(angle)),
        )

    @staticmethod
    def _to_grid(point: Point, cell_size: float):
        return int((point.x + 0.5) / cell_size), int((point.y + 0.5) / cell_size)

    def _in_neighbourhood(
        self,
        grid: np.ndarray,
        samples: List[Point],
        point: Point,
        min_distance: float,
        cell_size: float,
    ) -> bool:
        gx, gy = self._to_grid(point, cell_size)
        grid_width, grid_height = grid.shape
        for x in range(max(gx - 2, 0), min(gx + 3, grid_width)):
            for y in range(max(gy - 2, 0), min(gy + 3, grid_height)):
                index = grid[x, y]
                if index >= 0 and samples[index].distance_to(point) < min_distance:
                    return True
        return False


def sample_map(
    prng: AleaPRNG,
    tile_map: TileMap,
    min_distance: float,
    edge_distance: int = 0,
    new_points_count: int = 6,
    limit: Optional[int] = None,
) -> List[Point]:
    """Sample a map's playable cells, keeping at most `limit` points."""
    sampler = PoissonDiskSampler(prng, new_points_count)
    points = sampler.generate(MapRegion(tile_map, edge_distance), min_distance)
    if limit is not None:
        points = points[:limit]
    return points
