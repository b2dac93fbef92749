"""
Basic Flood Analysis Example

This example demonstrates:
1. Building a terrain with water sources
2. Finding the elevation range
3. Flooding the terrain at a water height
4. Comparing land between two water heights
5. Counting islands as the water rises

Run from the project root:
    python examples/flood_analysis.py
"""

import sys
from pathlib import Path

# Add src to path for development
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from rising_tides.core.grid import GridLocation, Terrain
from rising_tides.analysis.tides import RisingTides


# A small coastal strip: sea on the west edge, hills in the east, and an
# inland lake at (3, 6) that the sea cannot reach until it tops the ridge.
COASTLINE = [
    [0.0, 0.5, 1.0, 2.0, 3.0, 4.0, 5.0, 5.0, 4.5],
    [0.0, 0.5, 1.5, 2.5, 3.5, 5.0, 6.0, 5.5, 4.0],
    [0.0, 1.0, 2.0, 1.0, 4.0, 6.0, 6.5, 6.0, 3.5],
    [0.0, 1.0, 2.5, 3.0, 4.5, 6.0, 1.5, 6.0, 3.0],
    [0.0, 0.5, 2.0, 3.5, 4.0, 5.5, 6.0, 5.0, 2.5],
    [0.0, 0.0, 1.0, 2.0, 3.0, 3.5, 2.5, 2.0, 1.5],
]


def main():
    print("=" * 60)
    print("RISING TIDES FLOOD ANALYSIS - EXAMPLE")
    print("=" * 60)

    # =========================================================================
    # Step 1: Build terrain (replace with TerrainLoader.load() for real data)
    # =========================================================================
    print("\n[1] Building terrain...")

    terrain = Terrain.from_rows(
        COASTLINE,
        sources=[(row, 0) for row in range(len(COASTLINE))],  # the sea
    )

    print(f"   Grid size: {terrain.rows} x {terrain.cols}")
    print(f"   Water sources: {len(terrain.sources)}")

    tides = RisingTides(terrain)

    # =========================================================================
    # Step 2: Elevation range
    # =========================================================================
    lowest, highest = tides.elevation_extrema()
    print(f"\n[2] Elevation range: {lowest:.1f} to {highest:.1f}")

    # =========================================================================
    # Step 3: Flood at one height
    # =========================================================================
    water = 2.0
    print(f"\n[3] Flooding at water height {water}...")
    print("\n" + tides.report(water).summary())

    lake = GridLocation(3, 6)
    print(f"\n   Inland lake at ({lake.row}, {lake.col}):")
    print(f"   Below water line: {tides.is_flooded(water, lake)}")
    print(f"   Reached by the sea: {bool(tides.flooded_regions_in(water)[lake.row, lake.col])}")
    print(f"   {tides.describe_cell(water, lake)}")

    # =========================================================================
    # Step 4: Land change for a rise
    # =========================================================================
    new_water = 3.5
    print(f"\n[4] If the water rises from {water} to {new_water}:")
    print(f"   {tides.describe_land_change(water, new_water)}")

    # =========================================================================
    # Step 5: Islands as the water rises
    # =========================================================================
    print("\n[5] Islands as the water rises...")
    for report in tides.sweep([1.0, 2.0, 3.0, 4.0, 5.0, 6.0]):
        print(
            f"   water {report.water_height:4.1f}: "
            f"{report.visible_land:3d} land cells, {report.islands} island(s)"
        )

    print("\n" + "=" * 60)


if __name__ == "__main__":
    main()
