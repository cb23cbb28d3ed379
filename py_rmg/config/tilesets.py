"""
Built-in tilesets.

Each entry lists terrain templates by id, the cliff connection table (tiles
per "<previous side><next side>" name, "_" marking an open end) and the land
debris tiles. INTERIOR has neither cliffs nor debris.
"""

from typing import Dict, List

from ..core.catalog import (
    CliffConnectionTable,
    DebrisSet,
    TerrainTemplate,
    TilesetInfo,
)

CLEAR = 255

# Offsets of each connection name within a tileset's cliff id block
_CLIFF_LAYOUT = {
    "NS": (0, 1), "SN": (2, 3), "WE": (4, 5), "EW": (6, 7),
    "NE": (8,), "EN": (9,), "NW": (10,), "WN": (11,),
    "SE": (12,), "ES": (13,), "SW": (14,), "WS": (15,),
    "_N": (16,), "_E": (17,), "_S": (18,), "_W": (19,),
    "N_": (20,), "E_": (21,), "S_": (22,), "W_": (23,),
}
_CLIFF_TILES = 24


def _build_tileset(
    tileset_id: str,
    cliff_base: int = None,
    cliff_height: int = 2,
    debris: List[int] = None,
) -> TilesetInfo:
    templates = {CLEAR: TerrainTemplate(CLEAR, "clear")}

    cliffs = None
    if cliff_base is not None:
        names = {}
        for name, offsets in _CLIFF_LAYOUT.items():
            ids = [cliff_base + offset for offset in offsets]
            for tile in ids:
                # open ends taper off
                delta = cliff_height if "_" not in name else cliff_height // 2
                templates[tile] = TerrainTemplate(tile, f"cliff_{name}", height_delta=delta)
            names[name] = ids
        cliffs = CliffConnectionTable.from_names(names)

    debris_set = None
    if debris:
        for tile in debris:
            templates[tile] = TerrainTemplate(tile, f"debris_{tile}")
        debris_set = DebrisSet(land=tuple(debris))

    return TilesetInfo(
        id=tileset_id,
        clear_template=CLEAR,
        templates=templates,
        cliffs=cliffs,
        debris=debris_set,
    )


TILESETS: Dict[str, TilesetInfo] = {
    "TEMPERAT": _build_tileset("TEMPERAT", cliff_base=100, debris=[400, 401, 402, 403]),
    "SNOW": _build_tileset("SNOW", cliff_base=130, cliff_height=3, debris=[410, 411, 412]),
    "DESERT": _build_tileset("DESERT", cliff_base=160, cliff_height=1, debris=[420, 421]),
    "INTERIOR": _build_tileset("INTERIOR"),
}


def get_tileset(tileset_id: str) -> TilesetInfo:
    """
    Get a built-in tileset by id.

    Raises:
        KeyError: If the tileset is not known
    """
    if tileset_id not in TILESETS:
        raise KeyError(f"Unknown tileset: {tileset_id}")
    return TILESETS[tileset_id]


def list_tilesets() -> List[str]:
    return list(TILESETS.keys())
