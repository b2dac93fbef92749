"""Core data structures and algorithms."""

from .grid import GridLocation, Terrain
from .flood import flooded_regions_in
from .union_find import WeightedQuickUnionUF

__all__ = ["GridLocation", "Terrain", "flooded_regions_in", "WeightedQuickUnionUF"]
