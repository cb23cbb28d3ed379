"""FastAPI main application."""

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field
from typing import List, Optional
import numpy as np
import structlog
import uuid

from .. import __version__
from ..config import settings, get_ruleset, get_tileset, list_tilesets
from ..core.map_generator import (
    CREEPS_PLAYER,
    SPAWN_ACTOR,
    GenerationSettings,
    MapGenerator,
)
from ..core.placement import Diagnostic
from ..utils.logging import configure_logging

configure_logging(settings.log_level, settings.log_format)

logger = structlog.get_logger()

# Initialize FastAPI app
app = FastAPI(
    title="Random Map Generator API",
    description="Procedural tile maps with spawns, resources, cliffs and debris",
    version=__version__,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Request/Response models
class MapGenerationRequest(BaseModel):
    """Request to generate a new map."""

    seed: Optional[str] = Field(None, description="Random seed for reproducible generation")
    width: int = Field(96, ge=2, le=settings.max_map_width, description="Playable width")
    height: int = Field(96, ge=2, le=settings.max_map_height, description="Playable height")
    tileset: Optional[str] = Field(None, description="Tileset id, defaults to the configured one")

    player_num: int = Field(4, ge=0, le=16)
    player_min_distance: int = Field(4, ge=0, le=64)
    player_placement_radius: float = Field(70.0, ge=0, le=100)
    spawn_policy: str = Field("ellipse", pattern="^(ellipse|random)$")

    starting_mine_num: int = Field(2, ge=0, le=10)
    starting_mine_distance: int = Field(10, ge=0, le=64)
    starting_mine_size: int = Field(32, ge=0, le=256)
    starting_mine_inter_distance: int = Field(4, ge=0, le=64)

    extra_mine_num: int = Field(10, ge=0, le=100)
    extra_mine_distance: int = Field(10, ge=0, le=128)
    extra_mine_size: int = Field(42, ge=0, le=256)

    debris_num_groups: int = Field(10, ge=0, le=200)
    debris_num_per_group: int = Field(5, ge=0, le=50)
    debris_group_size: int = Field(3, ge=0, le=32)
    debris_spacing: int = Field(8, ge=1, le=128)

    cliff_num: int = Field(8, ge=0, le=100)
    cliff_average_length: int = Field(12, ge=2, le=200)
    cliff_length_variance: int = Field(4, ge=0, le=100)
    cliff_jitter: float = Field(0.3, ge=0, le=1)
    cliff_spacing: int = Field(12, ge=1, le=128)

    deposit_max_tries: int = Field(10, ge=1, le=10)

    edge_distance: int = Field(2, ge=0, le=32)

    def to_settings(self) -> GenerationSettings:
        data = self.model_dump(exclude={"seed"})
        data["tileset"] = self.tileset or settings.default_tileset
        return GenerationSettings(**data)


class SpawnInfo(BaseModel):
    """A placed spawn point."""

    actor: str
    x: int
    y: int


class DiagnosticInfo(BaseModel):
    """A shortfall reported while generating."""

    stage: str
    message: str
    requested: Optional[int] = None
    placed: Optional[int] = None


class MapSummary(BaseModel):
    """Summary information about a generated map."""

    seed: str
    tileset: str
    width: int
    height: int
    map_width: int
    map_height: int
    spawns: List[SpawnInfo]
    players: List[str]
    creep_enemies: List[str]
    actor_count: int
    resource_cells: int
    cliff_cells: int
    debris_cells: int
    diagnostics: List[DiagnosticInfo]


class TilesetSummary(BaseModel):
    """Generation features a tileset supports."""

    id: str
    cliffs: bool
    debris: bool


# API endpoints
@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Random Map Generator API",
        "version": __version__,
        "status": "running"
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/tilesets", response_model=List[TilesetSummary])
async def get_tilesets():
    """List built-in tilesets."""
    summaries = []
    for tileset_id in list_tilesets():
        tileset = get_tileset(tileset_id)
        summaries.append(
            TilesetSummary(
                id=tileset.id,
                cliffs=tileset.cliffs is not None,
                debris=tileset.debris is not None,
            )
        )
    return summaries


def _count_tiles(tile_map, template_ids) -> int:
    if not template_ids:
        return 0
    return int(np.isin(tile_map.tiles, list(template_ids)).sum())


@app.post("/maps/generate", response_model=MapSummary)
def generate_map(request: MapGenerationRequest):
    """
    Generate a random map and return its summary.

    Runs in FastAPI's threadpool. The same seed and settings always give the
    same map.
    """
    generation_settings = request.to_settings()
    seed = request.seed or str(uuid.uuid4())[:8]
    logger.info("Map generation requested", seed=seed, tileset=generation_settings.tileset)

    try:
        tileset = get_tileset(generation_settings.tileset)
        ruleset = get_ruleset(settings.default_ruleset)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))

    diagnostics: List[Diagnostic] = []
    generator = MapGenerator(ruleset, tileset)
    tile_map = generator.generate_random(generation_settings, seed, diagnostics)

    spawns = [
        SpawnInfo(actor=name, x=actor.location.x, y=actor.location.y)
        for name, actor in tile_map.actors_of_type(SPAWN_ACTOR).items()
    ]
    players = [name for name, p in tile_map.player_definitions.items() if p.playable]
    creeps = tile_map.player(CREEPS_PLAYER)

    cliff_ids = set()
    if tileset.cliffs is not None:
        for tiles in tileset.cliffs.entries.values():
            cliff_ids.update(tiles)
    debris_ids = tileset.debris.land if tileset.debris is not None else ()

    return MapSummary(
        seed=seed,
        tileset=tileset.id,
        width=generation_settings.width,
        height=generation_settings.height,
        map_width=tile_map.width,
        map_height=tile_map.height,
        spawns=spawns,
        players=players,
        creep_enemies=list(creeps.enemies) if creeps is not None else [],
        actor_count=len(tile_map.actor_definitions),
        resource_cells=tile_map.resource_cell_count(),
        cliff_cells=_count_tiles(tile_map, cliff_ids),
        debris_cells=_count_tiles(tile_map, debris_ids),
        diagnostics=[DiagnosticInfo(**vars(d)) for d in diagnostics],
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
