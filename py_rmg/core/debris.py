"""Decorative debris scattered in small clusters."""

import math
from typing import List

import structlog

from .catalog import DebrisSet
from .geometry import Point
from .placement import GenerationContext
from .tile_map import TileMap

logger = structlog.get_logger()


class DebrisScatterer:
    """Paints debris tiles around cluster centres on free cells."""

    def __init__(
        self,
        context: GenerationContext,
        tile_map: TileMap,
        debris: DebrisSet,
        per_group: int = 5,
        group_size: int = 3,
    ):
        self.context = context
        self.tile_map = tile_map
        self.debris = debris
        self.per_group = per_group
        self.group_size = group_size

    def scatter_group(self, center: Point) -> List[Point]:
        prng = self.context.prng
        occupancy = self.context.occupancy
        placed = []
        for _ in range(self.per_group):
            angle = prng.next_float() * 2 * math.pi
            distance = prng.next_float() * self.group_size
            cell = center.translate(
                int(distance * math.cos(angle)), int(distance * math.sin(angle))
            )
            if not self.tile_map.contains(cell) or occupancy.is_occupied(cell):
                continue

            self.tile_map.paint_tile(cell, prng.choice(self.debris.land))
            occupancy.occupy_block(cell, 1)
            placed.append(cell)
        return placed

    def scatter(self, centers: List[Point]) -> List[Point]:
        if not self.debris.land:
            return []

        placed = []
        for center in centers:
            placed.extend(self.scatter_group(center))

        logger.info("Scattered debris", groups=len(centers), tiles=len(placed))
        return placed
