"""
Tests for input validation module.
"""

import pytest
import warnings
from fractions import Fraction
from pathlib import Path

import numpy as np

from rising_tides.core.grid import GridLocation, Terrain
from rising_tides.core.validation import (
    ValidationError,
    GridShapeError,
    SourceBoundsError,
    WaterHeightError,
    TerrainFormatError,
    FilePermissionError,
    validate_heights,
    validate_sources,
    validate_water_height,
    validate_output_path,
)


class TestHeightsValidation:
    """Tests for elevation grid validation."""

    def test_valid_nested_lists(self):
        """Test nested lists are converted to a float array."""
        grid = validate_heights([[1, 2], [3, 4]])

        assert isinstance(grid, np.ndarray)
        assert grid.dtype == np.float64
        assert grid.shape == (2, 2)

    def test_float_array_not_copied(self):
        """Test float64 arrays pass through without a copy."""
        heights = np.zeros((3, 4))

        assert validate_heights(heights) is heights

    def test_none_raises(self):
        """Test that None raises GridShapeError."""
        with pytest.raises(GridShapeError, match="cannot be None"):
            validate_heights(None)

    def test_ragged_rows_raise(self):
        """Test that rows of unequal length are rejected."""
        with pytest.raises(GridShapeError, match="rectangular"):
            validate_heights([[1, 2, 3], [4, 5]])

    def test_one_dimensional_raises(self):
        """Test that a flat list is rejected."""
        with pytest.raises(GridShapeError, match="must be 2D"):
            validate_heights([1, 2, 3])

    def test_nan_raises(self):
        """Test that NaN elevations are rejected."""
        with pytest.raises(GridShapeError, match="NaN"):
            validate_heights([[1.0, float("nan")]])

    def test_empty_grid_warns(self):
        """Test that an empty 2D grid warns rather than fails."""
        with pytest.warns(UserWarning, match="empty"):
            grid = validate_heights(np.empty((0, 5)))

        assert grid.shape == (0, 5)

    def test_custom_context_in_message(self):
        """Test that custom context appears in error message."""
        with pytest.raises(GridShapeError, match="Coastline DEM"):
            validate_heights([1, 2], context="Coastline DEM")


class TestSourceValidation:
    """Tests for water source validation."""

    def test_valid_sources(self):
        """Test in-bounds sources are returned in order."""
        sources = [GridLocation(0, 0), GridLocation(2, 3)]

        assert validate_sources(sources, (3, 4)) == tuple(sources)

    @pytest.mark.parametrize("row,col", [(3, 0), (0, 4), (-1, 0), (0, -1)])
    def test_out_of_bounds_raises(self, row, col):
        """Test that sources outside the grid raise SourceBoundsError."""
        with pytest.raises(SourceBoundsError, match="outside"):
            validate_sources([GridLocation(row, col)], (3, 4))

    def test_no_sources_warns(self):
        """Test that a grid without sources warns."""
        with pytest.warns(UserWarning, match="no water sources"):
            validate_sources([], (2, 2))

    def test_duplicate_sources_warn(self):
        """Test that repeated sources warn."""
        with pytest.warns(UserWarning, match="more than once"):
            validate_sources([GridLocation(1, 1), GridLocation(1, 1)], (2, 2))

    def test_terrain_rejects_bad_source(self):
        """Test that Terrain construction runs source validation."""
        with pytest.raises(SourceBoundsError):
            Terrain.from_rows([[1, 2], [3, 4]], sources=[(2, 0)])


class TestWaterHeightValidation:
    """Tests for water height validation."""

    def test_valid_heights(self):
        """Test int, float and numpy values."""
        assert validate_water_height(3) == 3.0
        assert validate_water_height(-2.5) == -2.5
        assert validate_water_height(np.float32(1.5)) == 1.5
        assert validate_water_height(np.int64(4)) == 4.0

    def test_fraction_accepted(self):
        """Test any real number type is accepted."""
        assert validate_water_height(Fraction(3, 2)) == 1.5

    @pytest.mark.parametrize("value", [float("inf"), float("-inf")])
    def test_infinite_accepted(self, value):
        """Test infinite heights pass through unchanged."""
        assert validate_water_height(value) == value

    def test_none_raises(self):
        """Test that None raises WaterHeightError."""
        with pytest.raises(WaterHeightError, match="cannot be None"):
            validate_water_height(None)

    @pytest.mark.parametrize("value", ["1.0", True, [1.0], 1 + 2j, np.complex128(1)])
    def test_non_real_raises(self, value):
        """Test that non-real values raise WaterHeightError."""
        with pytest.raises(WaterHeightError, match="must be a real number"):
            validate_water_height(value)

    @pytest.mark.parametrize("value", [float("nan"), np.float64("nan")])
    def test_nan_raises(self, value):
        """Test that NaN is rejected."""
        with pytest.raises(WaterHeightError, match="cannot be NaN"):
            validate_water_height(value)


class TestOutputPathValidation:
    """Tests for output path validation."""

    def test_valid_path(self, tmp_path):
        """Test valid output path in existing directory."""
        output = tmp_path / "report.json"
        result = validate_output_path(output)

        assert result == output

    def test_nonexistent_directory_raises(self, tmp_path):
        """Test that nonexistent parent directory raises error."""
        output = tmp_path / "nonexistent" / "report.json"

        with pytest.raises(FilePermissionError, match="does not exist"):
            validate_output_path(output)

    def test_current_directory(self):
        """Test path in current directory (no explicit parent)."""
        result = validate_output_path("report.json")

        assert result == Path("report.json")


class TestExceptionHierarchy:
    """Test exception class hierarchy."""

    @pytest.mark.parametrize("exc", [
        GridShapeError,
        SourceBoundsError,
        WaterHeightError,
        TerrainFormatError,
        FilePermissionError,
    ])
    def test_inherits_validation_error(self, exc):
        """All custom exceptions inherit from ValidationError."""
        assert issubclass(exc, ValidationError)

    def test_validation_error_is_value_error(self):
        """ValidationError inherits from ValueError for compatibility."""
        assert issubclass(ValidationError, ValueError)

    def test_can_catch_as_value_error(self):
        """Custom exceptions can be caught as ValueError."""
        try:
            validate_water_height(None)
        except ValueError as e:
            assert "cannot be None" in str(e)
        else:
            pytest.fail("Expected ValueError")


class TestQuietConstruction:
    """Well-formed terrains construct without warnings."""

    def test_no_warnings(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            Terrain.from_rows([[1, 2], [3, 4]], sources=[(0, 0)])


class TestWarningLocation:
    """Terrain warnings point at the caller's constructor call."""

    def test_empty_grid_warning_points_here(self):
        with pytest.warns(UserWarning, match="empty") as record:
            Terrain(heights=np.empty((0, 3)))

        assert Path(record[0].filename).name == Path(__file__).name

    def test_duplicate_source_warning_points_here(self):
        with pytest.warns(UserWarning, match="more than once") as record:
            Terrain(heights=np.zeros((2, 2)), sources=[(0, 0), (0, 0)])

        assert Path(record[0].filename).name == Path(__file__).name
