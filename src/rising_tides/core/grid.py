"""
Grid Module

Grid coordinates and the terrain model (elevation grid plus water sources)
that every flood query runs against.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Tuple

import numpy as np

from .validation import ValidationError, validate_heights, validate_sources


@dataclass(frozen=True)
class GridLocation:
    """A (row, col) cell coordinate. Compares and hashes by value."""
    row: int
    col: int

    def offset(self, d_row: int, d_col: int) -> GridLocation:
        """Location shifted by (d_row, d_col)."""
        return GridLocation(self.row + d_row, self.col + d_col)

    def in_bounds(self, rows: int, cols: int) -> bool:
        return 0 <= self.row < rows and 0 <= self.col < cols

    def as_tuple(self) -> Tuple[int, int]:
        return (self.row, self.col)

    @classmethod
    def parse(cls, text: str) -> GridLocation:
        """
        Parse a location written as "row,col".

        Raises:
            ValidationError: If text is not two comma-separated integers
        """
        parts = text.split(',')
        if len(parts) != 2:
            raise ValidationError(
                f"Location must be 'row,col' (got {text!r}). Example: 3,7"
            )
        try:
            row, col = (int(p.strip()) for p in parts)
        except ValueError as e:
            raise ValidationError(
                f"Location values must be integers. Got: {parts}. Error: {e}"
            ) from e
        return cls(row, col)


@dataclass(eq=False)
class Terrain:
    """
    Elevation grid with the cells water rises from.

    The grid is held as a read-only view of the caller's array, so analysis
    never copies or mutates it.

    Attributes:
        heights: 2D array of elevation values [rows, cols]
        sources: Cells from which water floods outward
    """
    heights: np.ndarray
    sources: Tuple[GridLocation, ...] = field(default_factory=tuple)

    def __post_init__(self):
        grid = validate_heights(self.heights)
        view = grid.view()
        view.flags.writeable = False
        self.heights = view
        self.sources = validate_sources(
            (s if isinstance(s, GridLocation) else GridLocation(int(s[0]), int(s[1]))
             for s in self.sources),
            view.shape,
        )

    @property
    def shape(self) -> Tuple[int, int]:
        """Grid dimensions (rows, cols)."""
        return self.heights.shape

    @property
    def rows(self) -> int:
        return self.heights.shape[0]

    @property
    def cols(self) -> int:
        return self.heights.shape[1]

    @property
    def num_cells(self) -> int:
        return self.heights.size

    @property
    def is_empty(self) -> bool:
        """True when the grid has zero rows or zero columns."""
        return self.heights.size == 0

    def contains(self, cell: GridLocation) -> bool:
        return cell.in_bounds(self.rows, self.cols)

    def elevation(self, cell: GridLocation) -> float:
        return float(self.heights[cell.row, cell.col])

    def statistics(self) -> dict:
        """Calculate basic statistics for the terrain."""
        if self.is_empty:
            return {"error": "No elevation data"}

        return {
            "min_elevation": float(np.min(self.heights)),
            "max_elevation": float(np.max(self.heights)),
            "mean_elevation": float(np.mean(self.heights)),
            "std_elevation": float(np.std(self.heights)),
            "elevation_range": float(np.ptp(self.heights)),
            "rows": self.rows,
            "cols": self.cols,
            "total_cells": self.num_cells,
            "num_sources": len(self.sources),
        }

    @classmethod
    def from_rows(
        cls,
        rows: Iterable[Iterable[float]],
        sources: Iterable[Tuple[int, int]] = (),
    ) -> Terrain:
        """Build a terrain from nested row lists and (row, col) source pairs."""
        return cls(
            heights=[list(r) for r in rows],
            sources=tuple(GridLocation(int(r), int(c)) for r, c in sources),
        )
