"""Tests for built-in tilesets and rulesets."""

import pytest

from py_rmg.config import get_ruleset, get_tileset, list_rulesets, list_tilesets
from py_rmg.core.catalog import CONNECTION_NAMES, parse_connection_name
from py_rmg.core.geometry import Direction


class TestTilesets:
    def test_known_tilesets(self):
        assert set(list_tilesets()) == {"TEMPERAT", "SNOW", "DESERT", "INTERIOR"}

    def test_unknown_tileset(self):
        with pytest.raises(KeyError):
            get_tileset("MOON")

    @pytest.mark.parametrize("tileset_id", ["TEMPERAT", "SNOW", "DESERT"])
    def test_every_connection_present(self, tileset_id):
        tileset = get_tileset(tileset_id)
        keys = {parse_connection_name(name) for name in CONNECTION_NAMES}

        assert set(tileset.cliffs.entries) == keys
        for tiles in tileset.cliffs.entries.values():
            for tile in tiles:
                assert tile in tileset.templates
        assert tileset.debris.land

    def test_interior_has_no_features(self):
        tileset = get_tileset("INTERIOR")
        assert tileset.cliffs is None
        assert tileset.debris is None


class TestConnectionNames:
    def test_parse(self):
        assert parse_connection_name("NE") == (Direction.N, Direction.E)
        assert parse_connection_name("_S") == (None, Direction.S)
        assert parse_connection_name("W_") == (Direction.W, None)

    @pytest.mark.parametrize("name", ["", "N", "NSE", "__", "NN", "XY"])
    def test_invalid(self, name):
        with pytest.raises(ValueError):
            parse_connection_name(name)


class TestRulesets:
    def test_default_ruleset(self):
        ruleset = get_ruleset("default")

        assert "default" in list_rulesets()
        assert [a.name for a in ruleset.resource_producers()] == ["mine", "gmine"]

    def test_default_players_are_copies(self):
        ruleset = get_ruleset("default")
        players = ruleset.default_players()
        players["Creeps"].enemies.append("Multi0")

        assert ruleset.default_players()["Creeps"].enemies == []

    def test_unknown_ruleset(self):
        with pytest.raises(KeyError):
            get_ruleset("missing")
