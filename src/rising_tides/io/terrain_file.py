"""
Terrain File Module

Reads an elevation grid and its water sources from disk.

Supported formats:
- JSON: {"heights": [[...], ...], "sources": [[row, col], ...]}
- NPZ:  arrays "heights" (rows x cols) and optional "sources" (N x 2)
"""

from __future__ import annotations

import json
from pathlib import Path

import numpy as np

from ..core.grid import GridLocation, Terrain
from ..core.validation import TerrainFormatError


class TerrainLoader:
    """Load terrains from various file formats."""

    @classmethod
    def load(cls, filepath: str | Path, **kwargs) -> Terrain:
        """
        Load terrain from file, auto-detecting format.

        Args:
            filepath: Path to terrain file
            **kwargs: Format-specific options

        Returns:
            Terrain instance
        """
        filepath = Path(filepath)
        suffix = filepath.suffix.lower()

        loaders = {
            '.json': cls._load_json,
            '.npz': cls._load_npz,
        }

        if suffix not in loaders:
            raise ValueError(f"Unsupported format: {suffix}")

        return loaders[suffix](filepath, **kwargs)

    @classmethod
    def _load_json(cls, filepath: Path, **kwargs) -> Terrain:
        """Load JSON terrain file."""
        try:
            with open(filepath, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise TerrainFormatError(f"{filepath} is not valid JSON: {e}") from e

        if not isinstance(data, dict) or 'heights' not in data:
            raise TerrainFormatError(
                f"{filepath} must hold an object with a 'heights' key"
            )

        sources = [cls._parse_source(s) for s in data.get('sources', [])]
        return Terrain(heights=data['heights'], sources=tuple(sources))

    @classmethod
    def _load_npz(cls, filepath: Path, **kwargs) -> Terrain:
        """Load NumPy archive with 'heights' and optional 'sources' arrays."""
        with np.load(filepath, allow_pickle=False) as archive:
            if 'heights' not in archive.files:
                raise TerrainFormatError(f"{filepath} has no 'heights' array")
            heights = archive['heights'].astype(np.float64)
            sources = archive['sources'] if 'sources' in archive.files else np.empty((0, 2))

        sources = np.asarray(sources)
        if sources.size and (sources.ndim != 2 or sources.shape[1] != 2):
            raise TerrainFormatError(
                f"'sources' array must be N x 2 (row, col), got shape {sources.shape}"
            )

        return Terrain(
            heights=heights,
            sources=tuple(GridLocation(int(r), int(c)) for r, c in sources.reshape(-1, 2)),
        )

    @staticmethod
    def _parse_source(entry) -> GridLocation:
        if isinstance(entry, dict):
            try:
                return GridLocation(int(entry['row']), int(entry['col']))
            except (KeyError, TypeError, ValueError) as e:
                raise TerrainFormatError(
                    f"Source object must have integer 'row' and 'col', got {entry!r}"
                ) from e

        if isinstance(entry, (list, tuple)) and len(entry) == 2:
            try:
                return GridLocation(int(entry[0]), int(entry[1]))
            except (TypeError, ValueError) as e:
                raise TerrainFormatError(f"Source must be two integers, got {entry!r}") from e

        raise TerrainFormatError(
            f"Source must be [row, col] or {{'row': r, 'col': c}}, got {entry!r}"
        )


def save_terrain_json(terrain: Terrain, filepath: str | Path) -> None:
    """Write a terrain in the JSON layout TerrainLoader reads."""
    payload = {
        "heights": terrain.heights.tolist(),
        "sources": [list(s.as_tuple()) for s in terrain.sources],
    }
    with open(filepath, 'w', encoding='utf-8') as f:
        json.dump(payload, f, indent=2)
