"""
Input Validation Module

Provides validation functions and custom exceptions for the rising_tides package.
All validation functions provide clear, actionable error messages.
"""

from __future__ import annotations

import math
import numbers
import os
import warnings
from pathlib import Path
from typing import TYPE_CHECKING, Iterable, Tuple, Union

import numpy as np

if TYPE_CHECKING:
    from .grid import GridLocation


# Grids above this size trigger a memory warning
LARGE_GRID_CELLS = 100_000_000


class ValidationError(ValueError):
    """Base exception for validation errors with user-friendly messages."""
    pass


class GridShapeError(ValidationError):
    """Elevation grid is not a rectangular 2D numeric array."""
    pass


class SourceBoundsError(ValidationError):
    """Water source lies outside the elevation grid."""
    pass


class WaterHeightError(ValidationError):
    """Invalid water height value."""
    pass


class TerrainFormatError(ValidationError):
    """Terrain file content could not be interpreted."""
    pass


class FilePermissionError(ValidationError):
    """Cannot write to specified path."""
    pass


def validate_heights(heights, context: str = "heights") -> np.ndarray:
    """
    Validate an elevation grid and return it as a float array.

    Args:
        heights: Array-like of elevations, shape (rows, cols)
        context: Description of the grid (used in error messages)

    Returns:
        The grid as a float64 ndarray (no copy if already float64)

    Raises:
        GridShapeError: If heights is None, ragged, non-numeric or not 2D
    """
    if heights is None:
        raise GridShapeError(f"{context} cannot be None")

    try:
        grid = np.asarray(heights, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise GridShapeError(
            f"{context} must be a rectangular grid of numbers. "
            f"Check that every row has the same length. Error: {e}"
        ) from e

    if grid.ndim != 2:
        raise GridShapeError(
            f"{context} must be 2D (rows x cols), got {grid.ndim}D array "
            f"with shape {grid.shape}"
        )

    if grid.size == 0:
        warnings.warn(
            f"{context} is empty ({grid.shape[0]} rows x {grid.shape[1]} cols). "
            "Queries will return their empty-grid defaults.",
            UserWarning,
            stacklevel=4
        )
    elif np.isnan(grid).any():
        raise GridShapeError(
            f"{context} contains NaN elevations. "
            "Fill voids before running flood analysis."
        )

    total_cells = grid.shape[0] * grid.shape[1]
    if total_cells > LARGE_GRID_CELLS:
        warnings.warn(
            f"Analyzing very large grid ({grid.shape[0]}x{grid.shape[1]} = "
            f"{total_cells:,} cells). Island counts allocate two index arrays "
            "of this size per query.",
            UserWarning,
            stacklevel=4
        )

    return grid


def validate_sources(
    sources: Iterable['GridLocation'],
    shape: Tuple[int, int],
) -> Tuple['GridLocation', ...]:
    """
    Validate that every water source lies inside the grid.

    Args:
        sources: Source locations
        shape: Grid dimensions (rows, cols)

    Returns:
        The sources as a tuple, in their original order

    Raises:
        SourceBoundsError: If any source is outside the grid
    """
    rows, cols = shape
    result = tuple(sources)

    for source in result:
        if not source.in_bounds(rows, cols):
            raise SourceBoundsError(
                f"Water source at (row={source.row}, col={source.col}) lies outside "
                f"the {rows}x{cols} grid. Valid rows are 0-{rows - 1}, "
                f"valid columns 0-{cols - 1}."
            )

    if rows and cols and not result:
        warnings.warn(
            "Terrain has no water sources; nothing will ever flood.",
            UserWarning,
            stacklevel=4
        )

    if len(set(result)) != len(result):
        warnings.warn(
            "Terrain lists the same water source more than once.",
            UserWarning,
            stacklevel=4
        )

    return result


def validate_water_height(height: float, context: str = "water height") -> float:
    """
    Validate a water height is a real number.

    Infinite heights are allowed: +inf floods every reachable cell and
    -inf floods nothing.

    Args:
        height: The water level to validate
        context: Description of the value (used in error messages)

    Returns:
        The validated height as a float

    Raises:
        WaterHeightError: If height is None, not a real number, or NaN
    """
    if height is None:
        raise WaterHeightError(f"{context} cannot be None")

    if isinstance(height, bool) or not isinstance(height, numbers.Real):
        raise WaterHeightError(
            f"{context} must be a real number, got {type(height).__name__}"
        )

    height = float(height)
    if math.isnan(height):
        raise WaterHeightError(
            f"{context} cannot be NaN. "
            "Use the terrain's elevation extrema to pick a meaningful level."
        )

    return height


def validate_output_path(filepath: Union[str, Path], context: str = "output file") -> Path:
    """
    Validate output path is writable before attempting to write.

    Args:
        filepath: The path to validate
        context: Description of what will be written (used in error messages)

    Returns:
        The validated path as a Path object

    Raises:
        FilePermissionError: If directory doesn't exist or isn't writable
    """
    path = Path(filepath)
    parent = path.parent

    # Handle empty parent (current directory)
    if str(parent) == '.':
        parent = Path.cwd()

    if not parent.exists():
        raise FilePermissionError(
            f"Cannot write {context}: directory '{parent}' does not exist. "
            "Create the directory first or specify a different path."
        )

    if not os.access(parent, os.W_OK):
        raise FilePermissionError(
            f"Cannot write {context}: no write permission for directory '{parent}'."
        )

    if path.exists() and not os.access(path, os.W_OK):
        raise FilePermissionError(
            f"Cannot overwrite {context}: file '{path}' exists but is not writable."
        )

    return path
