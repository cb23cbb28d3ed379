"""Shared fixtures."""

import pytest

from py_rmg.config import get_ruleset, get_tileset
from py_rmg.core.alea_prng import AleaPRNG
from py_rmg.core.map_generator import MapGenerator
from py_rmg.core.occupancy import OccupancyGrid
from py_rmg.core.placement import GenerationContext


@pytest.fixture
def generator():
    return MapGenerator(get_ruleset("default"), get_tileset("TEMPERAT"))


@pytest.fixture
def empty_map(generator):
    """A 60x60 playable TEMPERAT map with nothing on it."""
    return generator.generate_empty(60, 60)


@pytest.fixture
def context(empty_map):
    return GenerationContext(AleaPRNG("fixture"), OccupancyGrid(empty_map.width, empty_map.height))
