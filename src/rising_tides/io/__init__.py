"""I/O modules for loading terrains and saving results."""

from .terrain_file import TerrainLoader, save_terrain_json
from .exporters import export_report_json

__all__ = [
    "TerrainLoader",
    "save_terrain_json",
    "export_report_json",
]
