"""Tests for cliff growth and painting."""

import pytest

from py_rmg.core.alea_prng import AleaPRNG
from py_rmg.core.catalog import CliffConnectionTable
from py_rmg.core.cliffs import CliffSegment, CliffSynthesizer, classify_path
from py_rmg.core.geometry import Direction, Point

N, E, S, W = Direction.N, Direction.E, Direction.S, Direction.W


def _synthesizer(context, tile_map, **kwargs):
    return CliffSynthesizer(context, tile_map, tile_map.tileset.cliffs, **kwargs)


class TestClassifyPath:
    def test_keys(self):
        path = [Point(5, 4), Point(5, 5), Point(6, 5)]
        assert classify_path(path) == [(None, S), (N, E), (W, None)]

    def test_single_cell(self):
        assert classify_path([Point(1, 1)]) == [(None, None)]


class TestConnectionTable:
    def test_unmatched_key_falls_back_to_straight(self):
        table = CliffConnectionTable.from_names({"NS": [1, 2], "EW": [3]})
        assert table.variants((N, S)) == (1, 2)
        assert table.variants((E, W)) == (3,)
        assert table.variants((E, None)) == (1, 2)

    def test_no_default(self):
        table = CliffConnectionTable.from_names({"EW": [3]})
        assert table.variants((None, S)) == ()


class TestPaint:
    """Test topology-matched painting."""

    def test_paint_uses_matching_tiles(self, context, empty_map):
        segment = CliffSegment(Point(5, 5), arm1=[Point(5, 4)], arm2=[Point(6, 5)])
        cliffs = empty_map.tileset.cliffs

        painted = _synthesizer(context, empty_map).paint(segment)

        assert painted[0] in cliffs.entries[(None, S)]
        assert painted[1] in cliffs.entries[(N, E)]
        assert painted[2] in cliffs.entries[(W, None)]
        assert empty_map.tile_at(Point(5, 4)) == painted[0]
        assert empty_map.tile_at(Point(6, 5)) == painted[2]

    def test_heights(self, context, empty_map):
        """Test that interior cells rise fully and open ends half."""
        segment = CliffSegment(Point(5, 5), arm1=[Point(5, 4)], arm2=[Point(6, 5)])
        _synthesizer(context, empty_map).paint(segment)

        assert empty_map.heights[5, 5] == 2
        assert empty_map.heights[4, 5] == 1
        assert empty_map.heights[5, 6] == 1
        assert empty_map.heights[10, 10] == 0

    def test_lone_seed_paints_straight_tile(self, context, empty_map):
        seed = Point(20, 20)
        context.occupancy.occupy_block(Point(19, 19), 3)
        context.occupancy.cells[seed.y, seed.x] = False

        synthesizer = _synthesizer(context, empty_map, average_length=6, length_variance=0)
        segment = synthesizer.grow(seed)

        assert segment is not None
        assert segment.path == [seed]
        synthesizer.paint(segment)
        assert empty_map.tile_at(seed) in empty_map.tileset.cliffs.entries[(N, S)]


class TestGrow:
    """Test cliff growth."""

    def test_occupied_seed(self, context, empty_map):
        seed = Point(20, 20)
        context.occupancy.occupy_block(seed, 1)
        calls = context.prng.call_count

        assert _synthesizer(context, empty_map).grow(seed) is None
        assert context.prng.call_count == calls

    def test_seed_outside_bounds(self, context, empty_map):
        assert _synthesizer(context, empty_map).grow(Point(0, 0)) is None

    @pytest.mark.parametrize("seed", ["c1", "c2", "c3", "c4"])
    def test_path_is_connected_and_claimed(self, context, empty_map, seed):
        context.prng = AleaPRNG(seed)
        synthesizer = _synthesizer(context, empty_map, average_length=12, length_variance=4)
        segment = synthesizer.grow(Point(30, 30))

        path = segment.path
        assert 1 <= len(path) <= 16
        assert len(set(path)) == len(path)
        for a, b in zip(path, path[1:]):
            assert abs(a.x - b.x) + abs(a.y - b.y) == 1
        for cell in path:
            assert context.occupancy.is_occupied(cell)
            assert empty_map.contains(cell)

    def test_synthesize_skips_taken_seeds(self, context, empty_map):
        context.occupancy.occupy_block(Point(10, 10), 1)
        segments = _synthesizer(context, empty_map).synthesize([Point(10, 10), Point(40, 40)])

        assert len(segments) == 1
        assert segments[0].seed == Point(40, 40)
