"""
Flood Module

Spreads water outward from the terrain's source cells to find every cell
submerged at a given water height.
"""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from .grid import Terrain


# Up, down, left, right
NEIGHBORS_4 = ((-1, 0), (1, 0), (0, -1), (0, 1))


def flooded_regions_in(terrain: Terrain, height: float) -> np.ndarray:
    """
    Flood the terrain from its sources at the given water height.

    A cell is flooded when it can be reached from a source through a
    4-connected path of cells whose elevation is at or below ``height``.
    Low ground with no such path to a source stays dry.

    Args:
        terrain: Terrain to flood
        height: Water height

    Returns:
        Boolean array with the terrain's shape, True where flooded
    """
    heights = terrain.heights
    rows, cols = heights.shape
    flooded = np.zeros((rows, cols), dtype=bool)

    queue = deque()
    for source in terrain.sources:
        r, c = source.row, source.col
        if not flooded[r, c] and heights[r, c] <= height:
            flooded[r, c] = True
            queue.append((r, c))

    while queue:
        r, c = queue.popleft()
        for dr, dc in NEIGHBORS_4:
            nr, nc = r + dr, c + dc
            if 0 <= nr < rows and 0 <= nc < cols:
                if not flooded[nr, nc] and heights[nr, nc] <= height:
                    flooded[nr, nc] = True
                    queue.append((nr, nc))

    return flooded
