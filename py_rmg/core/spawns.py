"""
Player spawn placement.

Two policies are available: spawns spread evenly on an ellipse around the
map centre (the default), and the older scheme of random positions with a
minimum distance between players.
"""

import math
from typing import List

import structlog

from .geometry import Point, Rectangle
from .placement import GenerationContext, far_from_all, sample_with_rejection

logger = structlog.get_logger()

ELLIPSE = "ellipse"
RANDOM = "random"
SPAWN_POLICIES = (ELLIPSE, RANDOM)


class SpawnPlanner:
    """Computes spawn positions inside a bounds rectangle."""

    def __init__(
        self,
        context: GenerationContext,
        bounds: Rectangle,
        player_land_radius: int,
        attempts_per_spawn: int = 10,
        batch_tries: int = 20,
    ):
        """
        Args:
            context: Generation context of the current run
            bounds: Playable bounds of the map
            player_land_radius: Radius of land reserved around each spawn
            attempts_per_spawn: Draws per spawn before a random batch gives up
            batch_tries: Whole random batches tried before settling
        """
        self.context = context
        self.bounds = bounds
        self.player_land_radius = player_land_radius
        self.attempts_per_spawn = attempts_per_spawn
        self.batch_tries = batch_tries

    @property
    def inset_bounds(self) -> Rectangle:
        return self.bounds.inset(self.player_land_radius)

    def plan(self, policy: str, player_num: int, placement_radius: float) -> List[Point]:
        if policy == RANDOM:
            return self.plan_random(player_num)
        return self.plan_ellipse(player_num, placement_radius)

    def plan_ellipse(self, player_num: int, placement_radius: float) -> List[Point]:
        """
        Spread spawns evenly on an ellipse around the bounds centre.

        Positions closer than twice the land radius to an earlier spawn are
        dropped and the shortfall is reported.

        Args:
            player_num: Number of spawns
            placement_radius: Ellipse radii as a percentage of the half extents

        Returns:
            Spawn cells, in angular order from one random starting angle
        """
        if player_num <= 0:
            return []

        cx, cy = self.bounds.center()
        rx = self.bounds.width / 2.0 * placement_radius / 100.0
        ry = self.bounds.height / 2.0 * placement_radius / 100.0

        start = self.context.prng.next_float() * 2 * math.pi
        step = 2 * math.pi / player_num
        min_distance = self.player_land_radius * 2

        spawns: List[Point] = []
        for i in range(player_num):
            angle = start + i * step
            spawn = Point(int(cx + rx * math.cos(angle)), int(cy + ry * math.sin(angle)))
            if self.bounds.contains(spawn) and far_from_all(spawn, spawns, min_distance):
                spawns.append(spawn)

        if len(spawns) != player_num:
            self.context.report(
                "spawns",
                f"Couldn't place all players (placed {len(spawns)} instead of {player_num})",
                requested=player_num,
                placed=len(spawns),
            )

        logger.info("Planned spawns on ellipse", count=len(spawns), rx=rx, ry=ry)
        return spawns

    def plan_random(self, player_num: int) -> List[Point]:
        """Random spawns at least twice the land radius apart."""
        bounds = self.inset_bounds
        if bounds.is_empty or player_num <= 0:
            return []

        min_distance = self.player_land_radius * 2
        prng = self.context.prng

        best: List[Point] = []
        spawns: List[Point] = []
        for _ in range(self.batch_tries):
            spawns = sample_with_rejection(
                player_num,
                lambda: bounds.random_cell(prng),
                lambda p, accepted: far_from_all(p, accepted, min_distance),
                self.attempts_per_spawn,
            )
            if len(spawns) == player_num:
                break
            if len(spawns) > len(best):
                best = spawns

        if len(spawns) != player_num:
            spawns = best
            self.context.report(
                "spawns",
                f"Couldn't place all players (placed {len(spawns)} instead of {player_num})",
                requested=player_num,
                placed=len(spawns),
            )

        logger.info("Planned random spawns", count=len(spawns))
        return spawns
