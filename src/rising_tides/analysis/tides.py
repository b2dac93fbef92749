"""
Rising Tides Module

Flood and land-mass queries over a terrain at arbitrary water heights.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

import numpy as np

from ..core.flood import flooded_regions_in
from ..core.grid import GridLocation, Terrain
from ..core.union_find import WeightedQuickUnionUF
from ..core.validation import validate_water_height


# Already-scanned half of the 8-neighborhood: upper-left, up, upper-right, left
SCANNED_NEIGHBORS = ((-1, -1), (-1, 0), (-1, 1), (0, -1))


@dataclass
class TideReport:
    """
    Flood analysis results at one water height.

    Land and flooded areas are in grid cells.
    """
    water_height: float
    lowest_elevation: Optional[float]
    highest_elevation: Optional[float]
    total_cells: int
    flooded_cells: int
    visible_land: int
    islands: int

    # Comparison against a second water height
    new_water_height: Optional[float] = None
    land_lost: Optional[int] = None

    @property
    def flooded_fraction(self) -> float:
        if self.total_cells == 0:
            return 0.0
        return self.flooded_cells / self.total_cells

    def summary(self) -> str:
        """Return human-readable summary."""
        lines = [
            "=" * 50,
            "FLOOD ANALYSIS SUMMARY",
            "=" * 50,
            f"Water Height:      {self.water_height:,.2f}",
        ]

        if self.lowest_elevation is not None:
            lines.extend([
                f"Lowest Point:      {self.lowest_elevation:,.2f}",
                f"Highest Point:     {self.highest_elevation:,.2f}",
            ])

        lines.extend([
            f"",
            f"Total Cells:       {self.total_cells:,}",
            f"Flooded Cells:     {self.flooded_cells:,} ({self.flooded_fraction:.1%})",
            f"Visible Land:      {self.visible_land:,}",
            f"Islands:           {self.islands:,}",
        ])

        if self.new_water_height is not None:
            lines.extend([
                f"",
                f"AT WATER HEIGHT {self.new_water_height:,.2f}:",
                f"  {_land_change_phrase(self.land_lost)}",
            ])

        lines.append("=" * 50)
        return "\n".join(lines)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "water_height": self.water_height,
            "lowest_elevation": self.lowest_elevation,
            "highest_elevation": self.highest_elevation,
            "total_cells": self.total_cells,
            "flooded_cells": self.flooded_cells,
            "visible_land": self.visible_land,
            "islands": self.islands,
            "new_water_height": self.new_water_height,
            "land_lost": self.land_lost,
        }


class RisingTides:
    """
    Answers flooding questions about a terrain.

    Every query is a pure function of the terrain and its arguments: masks,
    queues and union-find structures are built per call and never kept.

    Note that ``is_flooded`` is a plain threshold test on one cell, while
    ``flooded_regions_in`` (and everything built on it) only floods cells
    water can actually reach from a source. A low basin walled off from
    every source is "flooded" by the first and dry by the second.
    """

    def __init__(self, terrain: Terrain):
        self.terrain = terrain

    def elevation_extrema(self) -> Optional[Tuple[float, float]]:
        """
        Lowest and highest elevation of the terrain.

        Returns:
            (lowest, highest), or None for an empty grid
        """
        heights = self.terrain.heights
        if heights is None or heights.size == 0:
            return None
        return (float(heights.min()), float(heights.max()))

    def flooded_regions_in(self, height: float) -> np.ndarray:
        """Boolean mask of cells water reaches from a source at ``height``."""
        return flooded_regions_in(self.terrain, validate_water_height(height))

    def is_flooded(self, height: float, cell: GridLocation) -> bool:
        """
        Whether the cell sits at or below the water line.

        Only the cell's own elevation is compared; reachability from a
        source is not considered. The cell must lie inside the grid.
        """
        return bool(self.terrain.heights[cell.row, cell.col] <= height)

    def height_above_water(self, height: float, cell: GridLocation) -> float:
        """
        Elevation of the cell relative to the water line.

        Positive values are above water, negative below. Returns 0.0 for an
        empty grid or a cell outside it.
        """
        if self.terrain.is_empty or not self.terrain.contains(cell):
            return 0.0
        return float(self.terrain.heights[cell.row, cell.col] - height)

    def total_visible_land(self, height: float) -> int:
        """Number of cells not flooded at ``height``."""
        flooded = self.flooded_regions_in(height)
        return int(flooded.size - np.count_nonzero(flooded))

    def land_lost(self, height: float, new_height: float) -> int:
        """
        Visible land at ``height`` minus visible land at ``new_height``.

        Positive when the new height floods more land, negative when land
        is gained.
        """
        return self.total_visible_land(height) - self.total_visible_land(new_height)

    def num_of_islands(self, height: float) -> int:
        """
        Count 8-connected land masses left dry at ``height``.

        Two land masses touching at a single cell, even diagonally, are one
        island until the water covers that cell.
        """
        flooded = self.flooded_regions_in(height)
        return self._count_islands(flooded)

    def _count_islands(self, flooded: np.ndarray) -> int:
        rows, cols = flooded.shape
        uf = WeightedQuickUnionUF(rows, cols)

        # Row-major scan: the lower and right neighbors are joined when
        # their own turn comes.
        for row in range(rows):
            for col in range(cols):
                if flooded[row, col]:
                    continue
                current = GridLocation(row, col)
                for dr, dc in SCANNED_NEIGHBORS:
                    nr, nc = row + dr, col + dc
                    if 0 <= nr < rows and 0 <= nc < cols and not flooded[nr, nc]:
                        uf.union(current, GridLocation(nr, nc))

        roots = set()
        for row, col in zip(*np.nonzero(~flooded)):
            roots.add(uf.find(GridLocation(int(row), int(col))))
        return len(roots)

    def report(self, height: float, new_height: Optional[float] = None) -> TideReport:
        """
        Run every aggregate query at ``height``.

        Args:
            height: Water height
            new_height: Optional second height to compare land against

        Returns:
            TideReport instance
        """
        height = validate_water_height(height)
        flooded = flooded_regions_in(self.terrain, height)
        flooded_cells = int(np.count_nonzero(flooded))
        extrema = self.elevation_extrema()

        land_lost = None
        if new_height is not None:
            new_height = validate_water_height(new_height, "new water height")
            land_lost = self.land_lost(height, new_height)

        return TideReport(
            water_height=height,
            lowest_elevation=extrema[0] if extrema else None,
            highest_elevation=extrema[1] if extrema else None,
            total_cells=int(flooded.size),
            flooded_cells=flooded_cells,
            visible_land=int(flooded.size) - flooded_cells,
            islands=self._count_islands(flooded),
            new_water_height=new_height,
            land_lost=land_lost,
        )

    def sweep(self, heights: Iterable[float]) -> List[TideReport]:
        """Report at each water height, in the order given."""
        return [self.report(h) for h in heights]

    def describe_cell(self, height: float, cell: GridLocation) -> str:
        """Phrase a cell's height relative to the water, e.g. "2.50 meters below water"."""
        difference = self.height_above_water(height, cell)
        side = "below" if difference < 0 else "above"
        return f"{abs(difference):.2f} meters {side} water"

    def describe_land_change(self, height: float, new_height: float) -> str:
        """Phrase the land change between two heights, e.g. "Will lose 12 cells of land"."""
        return _land_change_phrase(self.land_lost(height, new_height))


def _land_change_phrase(land_lost: int) -> str:
    if land_lost > 0:
        return f"Will lose {land_lost:,} cells of land"
    if land_lost < 0:
        return f"Will gain {-land_lost:,} cells of land"
    return "No change in land"
