"""Resource deposits grown from a seed cell by random walks."""

from typing import Iterator, List, Optional

import structlog

from .catalog import ResourceTypeInfo
from .geometry import Point
from .placement import GenerationContext
from .tile_map import TileMap

logger = structlog.get_logger()

# 8-connected neighbourhood
WALK_STEPS = (
    (-1, -1), (0, -1), (1, -1),
    (-1, 0), (1, 0),
    (-1, 1), (0, 1), (1, 1),
)


class ResourcePlacer:
    """Writes resource deposits into a map's resource layer."""

    def __init__(self, context: GenerationContext, tile_map: TileMap):
        self.context = context
        self.tile_map = tile_map

    def random_walk(self, seed: Point, steps: int) -> Iterator[Point]:
        """
        Self-avoiding walk of up to `steps` moves from seed.

        Cells are yielded as they are reached, so a caller that stops
        iterating stops the walk and its random draws. The seed itself is not
        yielded. The walk ends early when every neighbour of the current cell
        has been visited.
        """
        prng = self.context.prng
        visited = {seed}
        current = seed
        for _ in range(steps):
            options = [
                current.translate(dx, dy)
                for dx, dy in WALK_STEPS
                if current.translate(dx, dy) not in visited
            ]
            if not options:
                return
            current = prng.choice(options)
            visited.add(current)
            yield current

    def _can_place(self, cell: Point, is_starting_deposit: bool) -> bool:
        if not self.tile_map.contains(cell) or self.tile_map.has_resource(cell):
            return False
        # Starting deposits sit inside the area their spawn already claimed.
        if is_starting_deposit:
            return True
        return not self.context.occupancy.is_occupied(cell)

    def _walk_to_free_cell(
        self, seed: Point, size: int, is_starting_deposit: bool
    ) -> Optional[Point]:
        for cell in self.random_walk(seed, size):
            if self._can_place(cell, is_starting_deposit):
                return cell
        return None

    def place_deposit(
        self,
        seed: Point,
        size: int,
        resource: ResourceTypeInfo,
        is_starting_deposit: bool,
        max_tries: int = 10,
    ) -> List[Point]:
        """
        Grow a deposit of up to `size` cells around seed.

        Args:
            seed: Deposit centre
            size: Number of placement attempts, and the length of each walk
            resource: Resource type written at its max density
            is_starting_deposit: Skip the occupancy test (never the
                existing-resource test)
            max_tries: Walks per attempt before the deposit stops growing

        Returns:
            Cells written, in placement order
        """
        written: List[Point] = []
        for _ in range(size):
            cell = None
            for _ in range(max_tries):
                cell = self._walk_to_free_cell(seed, size, is_starting_deposit)
                if cell is not None:
                    break
            if cell is None:
                break

            self.tile_map.set_resource(cell, resource)
            self.context.occupancy.occupy_block(cell, 1)
            written.append(cell)

        logger.debug(
            "Placed deposit",
            seed=tuple(seed),
            resource=resource.name,
            requested=size,
            placed=len(written),
        )
        return written
