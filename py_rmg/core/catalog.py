"""
Rule and tileset catalog structures consumed by the generator.

These mirror the pieces of a mod's rules and tileset definitions that map
generation reads: actor types, resource types, default players, terrain
templates, and the optional cliff and debris sets of a tileset.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from .geometry import Direction

# (side of previous cell, side of next cell); None marks an open path end
ConnectionKey = Tuple[Optional[Direction], Optional[Direction]]


@dataclass(frozen=True)
class ResourceTypeInfo:
    """A resource that can be written into the resource layer."""

    name: str
    type_id: int
    max_density: int


@dataclass(frozen=True)
class ActorInfo:
    """Actor type; seeds_resource is set for resource-producing actors."""

    name: str
    seeds_resource: Optional[str] = None


@dataclass
class PlayerReference:
    """Player definition written into a map."""

    name: str
    playable: bool = False
    owns_world: bool = False
    non_combatant: bool = False
    faction: str = "Random"
    enemies: List[str] = field(default_factory=list)


@dataclass
class Ruleset:
    """Rules catalog: actors, resources and the default player set."""

    name: str
    actors: Dict[str, ActorInfo]
    resources: Dict[str, ResourceTypeInfo]
    players: List[PlayerReference]
    maximum_terrain_height: int = 0

    def resource_producers(self) -> List[ActorInfo]:
        """Resource-producing actor types, skipping abstract ^-prefixed ones."""
        return [
            actor
            for actor in self.actors.values()
            if actor.seeds_resource is not None and not actor.name.startswith("^")
        ]

    def default_players(self) -> Dict[str, PlayerReference]:
        """Fresh copies of the default players keyed by name."""
        return {
            p.name: PlayerReference(
                name=p.name,
                playable=p.playable,
                owns_world=p.owns_world,
                non_combatant=p.non_combatant,
                faction=p.faction,
                enemies=list(p.enemies),
            )
            for p in self.players
        }


@dataclass(frozen=True)
class TerrainTemplate:
    """Single-cell terrain template."""

    id: int
    name: str
    height_delta: int = 0


# Field names of the simple cliff set, parsed as "<previous side><next side>"
# with "_" standing for an open end.
CONNECTION_NAMES = (
    "NS", "SN", "WE", "EW",
    "NE", "EN", "NW", "WN", "SE", "ES", "SW", "WS",
    "_N", "_E", "_S", "_W", "N_", "E_", "S_", "W_",
)


def parse_connection_name(name: str) -> ConnectionKey:
    """Turn a name like "NE" or "_S" into a connection key."""
    if len(name) != 2:
        raise ValueError(f"Invalid cliff connection name: {name!r}")
    previous, following = (None if c == "_" else Direction(c) for c in name)
    if previous is None and following is None:
        raise ValueError(f"Invalid cliff connection name: {name!r}")
    if previous is not None and previous == following:
        raise ValueError(f"Cliff connection cannot turn back on itself: {name!r}")
    return previous, following


@dataclass
class CliffConnectionTable:
    """
    Cliff tiles keyed by the sides a path enters and leaves a cell through.

    Interior cells use (side of previous, side of next); the first cell of a
    path uses (None, side of next) and the last (side of previous, None).
    """

    entries: Dict[ConnectionKey, Tuple[int, ...]]
    tile_size: int = 1
    default_key: ConnectionKey = (Direction.N, Direction.S)

    @classmethod
    def from_names(
        cls, mapping: Mapping[str, Sequence[int]], tile_size: int = 1
    ) -> "CliffConnectionTable":
        entries = {
            parse_connection_name(name): tuple(tiles) for name, tiles in mapping.items()
        }
        return cls(entries=entries, tile_size=tile_size)

    def variants(self, key: ConnectionKey) -> Tuple[int, ...]:
        """Candidate tiles for a key, or the default straight tiles."""
        tiles = self.entries.get(key)
        if tiles:
            return tiles
        return self.entries.get(self.default_key, ())


@dataclass(frozen=True)
class DebrisSet:
    """Decorative tiles scattered over land (water debris is unused)."""

    land: Tuple[int, ...]
    water: Tuple[int, ...] = ()


@dataclass
class TilesetInfo:
    """Tileset catalog entry."""

    id: str
    clear_template: int
    templates: Dict[int, TerrainTemplate]
    cliffs: Optional[CliffConnectionTable] = None
    debris: Optional[DebrisSet] = None

    def template(self, template_id: int) -> TerrainTemplate:
        return self.templates[template_id]
