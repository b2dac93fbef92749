"""
Shared pytest fixtures and configuration for rising_tides tests.
"""

import json

import pytest


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "requires_scipy: requires scipy to be installed"
    )


def pytest_collection_modifyitems(config, items):
    """Auto-skip tests based on missing dependencies."""
    try:
        import scipy
        scipy_available = True
    except ImportError:
        scipy_available = False

    for item in items:
        if "requires_scipy" in item.keywords and not scipy_available:
            item.add_marker(pytest.mark.skip(reason="scipy not installed"))


@pytest.fixture
def ring_terrain():
    """A single low cell ringed by high ground, with the source in the middle."""
    from rising_tides.core.grid import Terrain

    return Terrain.from_rows(
        [
            [5, 5, 5],
            [5, 1, 5],
            [5, 5, 5],
        ],
        sources=[(1, 1)],
    )


@pytest.fixture
def basin_terrain():
    """
    Coastline on the left fed by a source, plus a walled-off basin at (2, 4)
    that no source can reach.
    """
    from rising_tides.core.grid import Terrain

    return Terrain.from_rows(
        [
            [1, 2, 6, 6, 6, 6],
            [1, 2, 6, 6, 6, 6],
            [1, 2, 3, 6, 0, 6],
            [1, 2, 6, 6, 6, 6],
        ],
        sources=[(0, 0), (3, 0)],
    )


@pytest.fixture
def archipelago_terrain():
    """Peaks of 9 scattered over a sea of 0 with a corner source."""
    from rising_tides.core.grid import Terrain

    return Terrain.from_rows(
        [
            [0, 0, 0, 0, 0, 0],
            [0, 9, 0, 0, 9, 0],
            [0, 0, 0, 0, 0, 0],
            [0, 9, 0, 9, 0, 0],
            [0, 0, 0, 0, 0, 9],
        ],
        sources=[(0, 0)],
    )


@pytest.fixture
def random_terrain():
    """Seeded random 30x40 terrain with sources along the top edge."""
    import numpy as np
    from rising_tides.core.grid import Terrain

    rng = np.random.default_rng(42)
    heights = rng.uniform(0.0, 10.0, size=(30, 40))
    return Terrain(heights=heights, sources=[(0, c) for c in range(0, 40, 5)])


@pytest.fixture
def terrain_json(tmp_path, basin_terrain):
    """Basin terrain written to a JSON file."""
    path = tmp_path / "basin.json"
    path.write_text(json.dumps({
        "heights": basin_terrain.heights.tolist(),
        "sources": [[s.row, s.col] for s in basin_terrain.sources],
    }))
    return path


@pytest.fixture
def tmp_output_dir(tmp_path):
    """Temporary directory for test outputs."""
    return tmp_path


@pytest.fixture
def cli_runner():
    """Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
