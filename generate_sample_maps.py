#!/usr/bin/env python3
"""
Generate random maps and save PNG previews.

Each map runs the full generation sequence:
1. Spawn points
2. Starting resource deposits
3. Cliffs
4. Debris
5. Extra resource deposits

Usage:
    python generate_sample_maps.py [seed] [--tileset ID ...] [--output-dir DIR]

If no seed is provided, defaults to "default_seed"
"""

import argparse
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.colors import ListedColormap

from py_rmg.config import get_ruleset, get_tileset, list_tilesets, settings
from py_rmg.core.map_generator import SPAWN_ACTOR, GenerationSettings, MapGenerator
from py_rmg.utils.logging import configure_logging

# Preview classes
CLEAR, CLIFF, DEBRIS, RESOURCE = range(4)


def classify_cells(tile_map):
    """Collapse a map into preview classes."""
    tileset = tile_map.tileset
    classes = np.full(tile_map.tiles.shape, CLEAR, dtype=np.uint8)

    if tileset.cliffs is not None:
        cliff_ids = sorted({t for tiles in tileset.cliffs.entries.values() for t in tiles})
        classes[np.isin(tile_map.tiles, cliff_ids)] = CLIFF
    if tileset.debris is not None:
        classes[np.isin(tile_map.tiles, list(tileset.debris.land))] = DEBRIS
    classes[tile_map.resource_types != 0] = RESOURCE
    return classes


def create_map_preview(seed="default_seed", tileset_id="TEMPERAT", output_dir=Path(".")):
    """Generate one map and write its preview image."""
    print(f"\nGenerating {tileset_id} map...")
    print(f"  Seed: {seed}")

    generation_settings = GenerationSettings(tileset=tileset_id)
    generator = MapGenerator(get_ruleset(settings.default_ruleset), get_tileset(tileset_id))
    diagnostics = []
    tile_map = generator.generate_random(generation_settings, seed, diagnostics)

    spawns = tile_map.actors_of_type(SPAWN_ACTOR)
    print(f"  Map size: {tile_map.width}x{tile_map.height}")
    print(f"  Spawns: {len(spawns)}, actors: {len(tile_map.actor_definitions)}")
    print(f"  Resource cells: {tile_map.resource_cell_count()}")
    for diagnostic in diagnostics:
        print(f"  ! {diagnostic.stage}: {diagnostic.message}")

    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(16, 8))

    cmap = ListedColormap(["#7fa35b", "#5b4a3a", "#3f6b2f", "#d8b63c"])
    ax1.imshow(classify_cells(tile_map), cmap=cmap, vmin=0, vmax=3, interpolation="nearest")
    xs = [actor.location.x for actor in spawns.values()]
    ys = [actor.location.y for actor in spawns.values()]
    ax1.scatter(xs, ys, c="red", s=60, marker="*", label="Spawns")
    bounds = tile_map.bounds
    ax1.add_patch(
        plt.Rectangle(
            (bounds.left - 0.5, bounds.top - 0.5),
            bounds.width,
            bounds.height,
            fill=False,
            edgecolor="white",
            linewidth=1,
        )
    )
    ax1.set_title(f"{tileset_id} - tiles, resources and spawns")
    ax1.legend(loc="upper right")

    im = ax2.imshow(tile_map.heights, cmap="terrain", vmin=0,
                    vmax=max(1, tile_map.max_terrain_height), interpolation="nearest")
    ax2.set_title("Height")
    plt.colorbar(im, ax=ax2, shrink=0.8)

    for ax in (ax1, ax2):
        ax.set_xticks([])
        ax.set_yticks([])

    output_dir.mkdir(parents=True, exist_ok=True)
    output_file = output_dir / f"map_{tileset_id.lower()}_{seed}.png"
    plt.savefig(output_file, dpi=150, bbox_inches="tight")
    print(f"  Saved to: {output_file}")

    plt.close(fig)
    return tile_map


def main():
    """Generate sample maps for the requested tilesets."""
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("seed", nargs="?", default="default_seed")
    parser.add_argument("--tileset", action="append", choices=list_tilesets(),
                        help="Tileset to render (repeatable, default: all)")
    parser.add_argument("--output-dir", type=Path, default=Path("."))
    args = parser.parse_args()

    configure_logging(settings.log_level, "plain")

    for tileset_id in args.tileset or list_tilesets():
        create_map_preview(args.seed, tileset_id, args.output_dir)


if __name__ == "__main__":
    main()
