"""
Rising Tides

A Python library for flooding a terrain from its water sources and
measuring what stays above water: visible land, land lost between two
water heights, and the number of islands left.
"""

__version__ = "0.1.0"

from .core.grid import GridLocation, Terrain
from .core.flood import flooded_regions_in
from .core.union_find import WeightedQuickUnionUF
from .analysis.tides import RisingTides, TideReport
from .io.terrain_file import TerrainLoader

__all__ = [
    "GridLocation",
    "Terrain",
    "flooded_regions_in",
    "WeightedQuickUnionUF",
    "RisingTides",
    "TideReport",
    "TerrainLoader",
]
