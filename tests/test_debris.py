"""Tests for debris scattering."""

from py_rmg.core.catalog import DebrisSet
from py_rmg.core.debris import DebrisScatterer
from py_rmg.core.geometry import Point


class TestDebrisScatterer:
    """Test clustered debris placement."""

    def test_tiles_near_center(self, context, empty_map):
        center = Point(30, 30)
        debris = empty_map.tileset.debris
        placed = DebrisScatterer(context, empty_map, debris, per_group=20, group_size=3).scatter(
            [center]
        )

        assert placed
        assert len(set(placed)) == len(placed)
        for cell in placed:
            assert cell.distance_to(center) < 3
            assert empty_map.tile_at(cell) in debris.land
            assert context.occupancy.is_occupied(cell)

    def test_skips_occupied_cells(self, context, empty_map):
        context.occupancy.occupy_block(Point(20, 20), 20)
        scatterer = DebrisScatterer(context, empty_map, empty_map.tileset.debris, 10, 3)

        assert scatterer.scatter_group(Point(30, 30)) == []
        assert (empty_map.tiles == empty_map.tileset.clear_template).all()

    def test_no_land_tiles(self, context, empty_map):
        scatterer = DebrisScatterer(context, empty_map, DebrisSet(land=()), 10, 3)
        assert scatterer.scatter([Point(30, 30)]) == []
        assert context.prng.call_count == 0
