"""
Configuration modules for map generation.
"""

from .config import settings, Settings
from .rulesets import get_ruleset, list_rulesets, RULESETS
from .tilesets import get_tileset, list_tilesets, TILESETS

__all__ = ['settings', 'Settings', 'get_ruleset', 'list_rulesets', 'RULESETS',
           'get_tileset', 'list_tilesets', 'TILESETS']
