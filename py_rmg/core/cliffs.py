"""
Cliff growth and topology-matched tile painting.

A cliff grows two arms from a seed cell. The finished path is read as
[reverse(arm1), seed, arm2] and every cell is painted with a tile chosen by
the sides its neighbours along the path lie on.
"""

from dataclasses import dataclass, field
from typing import List, Optional

import structlog

from .catalog import CliffConnectionTable, ConnectionKey
from .geometry import CARDINALS, Direction, Point
from .placement import GenerationContext
from .tile_map import TileMap

logger = structlog.get_logger()


@dataclass
class CliffSegment:
    """Cells of one cliff: the seed plus its two arms, nearest cell first."""

    seed: Point
    arm1: List[Point] = field(default_factory=list)
    arm2: List[Point] = field(default_factory=list)

    @property
    def path(self) -> List[Point]:
        return list(reversed(self.arm1)) + [self.seed] + list(self.arm2)

    def __len__(self) -> int:
        return 1 + len(self.arm1) + len(self.arm2)


def classify_path(path: List[Point]) -> List[ConnectionKey]:
    """Connection key of every cell of an ordered path."""
    keys = []
    for i, cell in enumerate(path):
        previous = Direction.between(cell, path[i - 1]) if i > 0 else None
        following = Direction.between(cell, path[i + 1]) if i + 1 < len(path) else None
        keys.append((previous, following))
    return keys


class CliffSynthesizer:
    """Grows cliffs and paints them from a tileset's connection table."""

    def __init__(
        self,
        context: GenerationContext,
        tile_map: TileMap,
        table: CliffConnectionTable,
        average_length: int = 12,
        length_variance: int = 4,
        jitter: float = 0.3,
    ):
        """
        Args:
            context: Generation context of the current run
            tile_map: Map to paint
            table: Connection table of the map's tileset
            average_length: Mean cliff length in tiles
            length_variance: Maximum deviation from the mean length
            jitter: Probability an arm turns 90 degrees after a step
        """
        self.context = context
        self.tile_map = tile_map
        self.table = table
        self.average_length = average_length
        self.length_variance = length_variance
        self.jitter = jitter

    def _footprint_free(self, cell: Point) -> bool:
        size = self.table.tile_size
        corner = cell.translate(size - 1, size - 1)
        if not (self.tile_map.contains(cell) and self.tile_map.contains(corner)):
            return False
        return not self.context.occupancy.is_area_occupied(cell, size)

    def _claim(self, cell: Point) -> None:
        self.context.occupancy.occupy_block(cell, self.table.tile_size)

    def _target_length(self) -> int:
        prng = self.context.prng
        length = self.average_length + prng.next_int(
            -self.length_variance, self.length_variance + 1
        )
        return max(2, length)

    def grow(self, seed: Point) -> Optional[CliffSegment]:
        """
        Grow a cliff from seed.

        Returns None without drawing any random numbers when the seed's own
        footprint is taken.
        """
        if not self._footprint_free(seed):
            return None
        self._claim(seed)

        prng = self.context.prng
        first = prng.choice(CARDINALS)
        second = prng.choice([d for d in CARDINALS if d != first])

        segment = CliffSegment(seed)
        arms = [segment.arm1, segment.arm2]
        heads = [seed, seed]
        directions = [first, second]
        step = self.table.tile_size

        for _ in range(self._target_length() - 1):
            arm = 0 if prng.chance(0.5) else 1
            offset = directions[arm].offset
            candidate = heads[arm].translate(offset.x * step, offset.y * step)
            if self._footprint_free(candidate):
                self._claim(candidate)
                arms[arm].append(candidate)
                heads[arm] = candidate

            if prng.chance(self.jitter):
                directions[arm] = directions[arm].rotate(prng.chance(0.5))

        return segment

    def paint(self, segment: CliffSegment) -> List[int]:
        """Paint a grown segment; returns the tile ids used, in path order."""
        prng = self.context.prng
        painted = []
        for cell, key in zip(segment.path, classify_path(segment.path)):
            variants = self.table.variants(key)
            if not variants:
                continue
            tile = prng.choice(variants)
            self.tile_map.paint_tile(cell, tile)
            painted.append(tile)
        return painted

    def synthesize(self, seeds: List[Point]) -> List[CliffSegment]:
        """Grow and paint one cliff per usable seed."""
        segments = []
        for seed in seeds:
            segment = self.grow(seed)
            if segment is None:
                continue
            self.paint(segment)
            segments.append(segment)

        logger.info(
            "Synthesized cliffs",
            requested=len(seeds),
            placed=len(segments),
            cells=sum(len(s) for s in segments),
        )
        return segments
