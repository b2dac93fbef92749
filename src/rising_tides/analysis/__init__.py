"""Flood and island analysis."""

from .tides import RisingTides, TideReport

__all__ = ["RisingTides", "TideReport"]
