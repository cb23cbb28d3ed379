"""
In-memory map artifact written by the generator.

Layers are numpy arrays indexed [y, x] over the full map cell space; the
playable area is the `bounds` rectangle inside it.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional

import numpy as np

from .catalog import PlayerReference, ResourceTypeInfo, TilesetInfo
from .geometry import Point, Rectangle


@dataclass
class ActorReference:
    """Actor definition placed on the map."""

    type: str
    owner: str
    location: Point


@dataclass(eq=False)
class TileMap:
    """Tile, height and resource layers plus actor and player definitions."""

    width: int
    height: int
    bounds: Rectangle
    tileset: TilesetInfo
    max_terrain_height: int = 0

    tiles: np.ndarray = field(default=None)
    heights: np.ndarray = field(default=None)
    resource_types: np.ndarray = field(default=None)
    resource_densities: np.ndarray = field(default=None)

    actor_definitions: Dict[str, ActorReference] = field(default_factory=dict)
    player_definitions: Dict[str, PlayerReference] = field(default_factory=dict)

    def __post_init__(self):
        shape = (self.height, self.width)
        if self.tiles is None:
            self.tiles = np.full(shape, self.tileset.clear_template, dtype=np.uint16)
        if self.heights is None:
            self.heights = np.zeros(shape, dtype=np.uint8)
        if self.resource_types is None:
            self.resource_types = np.zeros(shape, dtype=np.uint8)
        if self.resource_densities is None:
            self.resource_densities = np.zeros(shape, dtype=np.uint8)

    @property
    def all_cells(self) -> Rectangle:
        return Rectangle(0, 0, self.width, self.height)

    def contains(self, point: Point) -> bool:
        """Whether a cell lies inside the playable bounds."""
        return self.bounds.contains(point)

    def has_resource(self, point: Point) -> bool:
        return bool(self.resource_types[point.y, point.x] != 0)

    def set_resource(self, point: Point, resource: ResourceTypeInfo) -> None:
        self.resource_types[point.y, point.x] = resource.type_id
        self.resource_densities[point.y, point.x] = resource.max_density

    def paint_tile(self, point: Point, template_id: int) -> None:
        """Set a tile and apply its template's height delta, clamped."""
        template = self.tileset.template(template_id)
        self.tiles[point.y, point.x] = template_id
        if template.height_delta:
            height = int(self.heights[point.y, point.x]) + template.height_delta
            self.heights[point.y, point.x] = max(0, min(height, self.max_terrain_height))

    def tile_at(self, point: Point) -> int:
        return int(self.tiles[point.y, point.x])

    def add_actor(self, name: str, actor: ActorReference) -> None:
        self.actor_definitions[name] = actor

    def actors_of_type(self, actor_type: str) -> Dict[str, ActorReference]:
        return {
            name: actor
            for name, actor in self.actor_definitions.items()
            if actor.type == actor_type
        }

    def resource_cell_count(self) -> int:
        return int(np.count_nonzero(self.resource_types))

    def player(self, name: str) -> Optional[PlayerReference]:
        return self.player_definitions.get(name)
