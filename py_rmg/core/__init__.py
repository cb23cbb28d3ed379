"""
Core map generation functionality.
"""

from .alea_prng import AleaPRNG
from .geometry import Point, Direction, Rectangle
from .occupancy import OccupancyGrid
from .poisson_sampler import PoissonDiskSampler, MapRegion
from .placement import GenerationContext, Diagnostic, sample_with_rejection
from .map_generator import MapGenerator, GenerationSettings

__all__ = ['AleaPRNG', 'Point', 'Direction', 'Rectangle', 'OccupancyGrid',
           'PoissonDiskSampler', 'MapRegion', 'GenerationContext', 'Diagnostic',
           'sample_with_rejection', 'MapGenerator', 'GenerationSettings']
