"""
Random map generation.

Builds a playable map in a fixed sequence against one random stream:

1. empty map with padded bounds
2. player spawn points
3. starting resource deposits around every spawn
4. cliffs
5. debris
6. extra resource deposits
7. one player per placed spawn, each an enemy of the creeps
"""

import math
from typing import List, Optional

import structlog
from pydantic import BaseModel, Field

from .catalog import ActorInfo, PlayerReference, ResourceTypeInfo, Ruleset, TilesetInfo
from .cliffs import CliffSynthesizer
from .debris import DebrisScatterer
from .geometry import Point, Rectangle
from .placement import Diagnostic, GenerationContext, far_from_all, sample_with_rejection
from .poisson_sampler import sample_map
from .resources import ResourcePlacer
from .spawns import ELLIPSE, SpawnPlanner
from .tile_map import ActorReference, TileMap

logger = structlog.get_logger()

SPAWN_ACTOR = "mpspawn"
NEUTRAL_PLAYER = "Neutral"
CREEPS_PLAYER = "Creeps"


class GenerationSettings(BaseModel):
    """Knobs of a random map; defaults give a four player map."""

    width: int = Field(default=96, description="Playable width in cells")
    height: int = Field(default=96, description="Playable height in cells")
    tileset: str = Field(default="TEMPERAT", description="Tileset id")

    # Players
    player_num: int = Field(default=4, description="Number of players")
    player_min_distance: int = Field(
        default=4, description="Extra land kept around a player's starting mines"
    )
    player_placement_radius: float = Field(
        default=70.0, description="Spawn ellipse radius, percent of the half extents"
    )
    spawn_policy: str = Field(default=ELLIPSE, description="'ellipse' or 'random'")

    # Starting mines
    starting_mine_num: int = Field(default=2, description="Mines per spawn")
    starting_mine_distance: int = Field(default=10, description="Spawn to mine distance")
    starting_mine_size: int = Field(default=32, description="Cells per starting deposit")
    starting_mine_inter_distance: int = Field(
        default=4, description="Minimum distance between a spawn's mines"
    )

    # Extra mines
    extra_mine_num: int = Field(default=10, description="Mines away from spawns")
    extra_mine_distance: int = Field(
        default=10, description="Minimum distance between extra mines"
    )
    extra_mine_size: int = Field(default=42, description="Cells per extra deposit")

    # Debris
    debris_num_groups: int = Field(default=10, description="Debris clusters")
    debris_num_per_group: int = Field(default=5, description="Tiles tried per cluster")
    debris_group_size: int = Field(default=3, description="Cluster radius")
    debris_spacing: int = Field(default=8, description="Minimum distance between clusters")

    # Cliffs
    cliff_num: int = Field(default=8, description="Number of cliffs")
    cliff_average_length: int = Field(default=12, description="Mean cliff length")
    cliff_length_variance: int = Field(default=4, description="Cliff length deviation")
    cliff_jitter: float = Field(default=0.3, description="Chance an arm turns per step")
    cliff_spacing: int = Field(default=12, description="Minimum distance between cliff seeds")

    deposit_max_tries: int = Field(
        default=10, description="Walks per deposit cell before a deposit stops growing"
    )

    edge_distance: int = Field(default=2, description="Margin kept free of cliffs and debris")

    @property
    def player_land_radius(self) -> int:
        return self.starting_mine_distance + self.player_min_distance


def random_offset(prng, distance: float) -> Point:
    """Offset of the given length at a random angle, truncated to cells."""
    angle = prng.next_float() * math.pi * 2
    return Point(int(distance * math.cos(angle)), int(distance * math.sin(angle)))


class MapGenerator:
    """Generates empty and random maps for one ruleset and tileset."""

    def __init__(self, ruleset: Ruleset, tileset: TilesetInfo):
        self.ruleset = ruleset
        self.tileset = tileset

    def generate_empty(self, width: int, height: int) -> TileMap:
        """
        Create a blank map.

        The map is padded by one cell on every side, plus the maximum terrain
        height at the bottom, so the ground stays visible through the edge
        shroud. At least a 2x2 playable area is kept.
        """
        width = max(2, width)
        height = max(2, height)
        max_height = self.ruleset.maximum_terrain_height

        tile_map = TileMap(
            width=width + 2,
            height=height + max_height + 2,
            bounds=Rectangle(1, 1, width + 1, height + max_height + 1),
            tileset=self.tileset,
            max_terrain_height=max_height,
        )
        tile_map.player_definitions = self.ruleset.default_players()
        return tile_map

    def _mine_type(self) -> Optional[ActorInfo]:
        for actor in self.ruleset.resource_producers():
            if actor.seeds_resource in self.ruleset.resources:
                return actor
        return None

    def _check_prerequisites(self, tile_map: TileMap) -> List[str]:
        missing = []
        if SPAWN_ACTOR not in self.ruleset.actors:
            missing.append(f"actor {SPAWN_ACTOR}")
        for player in (NEUTRAL_PLAYER, CREEPS_PLAYER):
            if player not in tile_map.player_definitions:
                missing.append(f"player {player}")
        if self._mine_type() is None:
            missing.append("resource-producing actor")
        return missing

    def generate_random(
        self,
        settings: GenerationSettings,
        seed: str,
        diagnostics: Optional[List[Diagnostic]] = None,
    ) -> TileMap:
        """
        Generate a random map.

        Args:
            settings: Generation settings
            seed: Seed of the run's random stream
            diagnostics: Optional list receiving shortfall reports

        Returns:
            The generated map; an empty map when the ruleset lacks a spawn
            actor, the neutral or creeps player, or a resource-producing actor
        """
        tile_map = self.generate_empty(settings.width, settings.height)
        context = GenerationContext.for_map(tile_map, seed, diagnostics)

        logger.info(
            "Starting random map generation",
            seed=seed,
            width=settings.width,
            height=settings.height,
            tileset=self.tileset.id,
        )

        if settings.tileset != self.tileset.id:
            context.report(
                "tileset",
                f"Settings ask for tileset {settings.tileset} but the generator "
                f"was built for {self.tileset.id}",
            )

        missing = self._check_prerequisites(tile_map)
        if missing:
            context.report("rules", "Ruleset is missing " + ", ".join(missing))
            return tile_map

        mine_info = self._mine_type()
        resource = self.ruleset.resources[mine_info.seeds_resource]

        land_radius = settings.player_land_radius
        planner = SpawnPlanner(context, tile_map.bounds, land_radius)
        if planner.inset_bounds.is_empty:
            context.report("spawns", "Map is too small to place players")
            return tile_map

        # Spawns
        spawns = planner.plan(
            settings.spawn_policy, settings.player_num, settings.player_placement_radius
        )
        placer = ResourcePlacer(context, tile_map)
        for spawn in spawns:
            context.add_actor(tile_map, ActorReference(SPAWN_ACTOR, NEUTRAL_PLAYER, spawn))
            context.occupancy.occupy_disk(spawn, land_radius)

        # Starting mines
        for spawn in spawns:
            mines = self._starting_mine_locations(context, tile_map, spawn, settings)
            for mine in mines:
                self._place_mine(context, tile_map, placer, mine_info, resource, mine,
                                 settings.starting_mine_size, True,
                                 settings.deposit_max_tries)

        # Cliffs
        cliffs = self.tileset.cliffs
        if cliffs is not None and settings.cliff_num > 0:
            seeds = sample_map(
                context.prng,
                tile_map,
                settings.cliff_spacing,
                settings.edge_distance,
                limit=settings.cliff_num,
            )
            CliffSynthesizer(
                context,
                tile_map,
                cliffs,
                settings.cliff_average_length,
                settings.cliff_length_variance,
                settings.cliff_jitter,
            ).synthesize(seeds)

        # Debris
        debris = self.tileset.debris
        if debris is not None and settings.debris_num_groups > 0:
            centers = sample_map(
                context.prng,
                tile_map,
                settings.debris_spacing,
                settings.edge_distance,
                limit=settings.debris_num_groups,
            )
            DebrisScatterer(
                context,
                tile_map,
                debris,
                settings.debris_num_per_group,
                settings.debris_group_size,
            ).scatter(centers)

        # Extra mines
        bounds = planner.inset_bounds
        extra = sample_with_rejection(
            settings.extra_mine_num,
            lambda: bounds.random_cell(context.prng),
            lambda p, accepted: (
                not context.occupancy.is_occupied(p)
                and far_from_all(p, accepted, settings.extra_mine_distance)
                and far_from_all(p, spawns, land_radius)
            ),
        )
        if len(extra) < settings.extra_mine_num:
            context.report(
                "extra_mines",
                "Couldn't place all extra mines",
                requested=settings.extra_mine_num,
                placed=len(extra),
            )
        for mine in extra:
            self._place_mine(context, tile_map, placer, mine_info, resource, mine,
                             settings.extra_mine_size, False, settings.deposit_max_tries)

        self._add_players(tile_map, len(spawns))

        logger.info(
            "Random map generation complete",
            seed=seed,
            spawns=len(spawns),
            actors=len(tile_map.actor_definitions),
            resource_cells=tile_map.resource_cell_count(),
            occupied_cells=context.occupancy.occupied_count(),
        )
        return tile_map

    def _starting_mine_locations(
        self,
        context: GenerationContext,
        tile_map: TileMap,
        spawn: Point,
        settings: GenerationSettings,
    ) -> List[Point]:
        def draw() -> Point:
            offset = random_offset(context.prng, settings.starting_mine_distance)
            return spawn.translate(offset.x, offset.y)

        mines = sample_with_rejection(
            settings.starting_mine_num,
            draw,
            lambda p, accepted: (
                tile_map.contains(p)
                and far_from_all(p, accepted, settings.starting_mine_inter_distance)
            ),
        )
        if len(mines) < settings.starting_mine_num:
            context.report(
                "starting_mines",
                f"Couldn't place all starting mines for spawn at {tuple(spawn)}",
                requested=settings.starting_mine_num,
                placed=len(mines),
            )
        return mines

    def _place_mine(
        self,
        context: GenerationContext,
        tile_map: TileMap,
        placer: ResourcePlacer,
        mine_info: ActorInfo,
        resource: ResourceTypeInfo,
        location: Point,
        size: int,
        is_starting: bool,
        max_tries: int,
    ) -> None:
        context.add_actor(tile_map, ActorReference(mine_info.name, NEUTRAL_PLAYER, location))
        context.occupancy.occupy_block(location, 1)
        placer.place_deposit(location, size, resource, is_starting, max_tries)

    def _add_players(self, tile_map: TileMap, spawn_count: int) -> None:
        """Add one playable player per spawn, all enemies of the creeps."""
        creeps = tile_map.player_definitions[CREEPS_PLAYER]
        names = []
        for i in range(spawn_count):
            name = f"Multi{i}"
            tile_map.player_definitions[name] = PlayerReference(
                name=name,
                playable=True,
                faction="Random",
                enemies=[CREEPS_PLAYER],
            )
            names.append(name)
        creeps.enemies = names
