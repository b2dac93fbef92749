"""
Command Line Interface for Rising Tides

Usage:
    rising-tides info <terrain>
    rising-tides analyze <terrain> --water <height> [--new-water <height>]
    rising-tides cell <terrain> --water <height> --at <row,col>
    rising-tides sweep <terrain> --start <height> --stop <height> --steps <n>
"""

import sys
from typing import Optional

import click
import numpy as np

from . import __version__
from .analysis.tides import RisingTides
from .core.grid import GridLocation, Terrain
from .io.terrain_file import TerrainLoader


def _load_or_exit(terrain_file: str) -> Terrain:
    click.echo(f"Loading terrain: {terrain_file}")
    try:
        terrain = TerrainLoader.load(terrain_file)
    except Exception as e:
        click.echo(f"Error loading file: {e}", err=True)
        sys.exit(1)
    click.echo(f"  Grid size: {terrain.rows} x {terrain.cols}, {len(terrain.sources)} source(s)")
    return terrain


@click.group()
@click.version_option(version=__version__)
def main():
    """Rising Tides Flood Analysis Tool

    Flood a terrain from its water sources and measure the land
    and islands left above water.
    """
    pass


@main.command()
@click.argument('terrain_file', type=click.Path(exists=True))
def info(terrain_file: str):
    """Display information about a terrain file."""
    terrain = _load_or_exit(terrain_file)
    stats = terrain.statistics()

    click.echo("\n" + "=" * 50)
    click.echo("TERRAIN INFO")
    click.echo("=" * 50)
    click.echo(f"File:           {terrain_file}")
    click.echo(f"Rows:           {terrain.rows}")
    click.echo(f"Columns:        {terrain.cols}")
    click.echo(f"Cells:          {terrain.num_cells:,}")

    if "error" in stats:
        click.echo(f"Elevation:      {stats['error']}")
    else:
        click.echo(f"")
        click.echo(f"Elevation:")
        click.echo(f"  Lowest:       {stats['min_elevation']:.2f}")
        click.echo(f"  Highest:      {stats['max_elevation']:.2f}")
        click.echo(f"  Mean:         {stats['mean_elevation']:.2f}")
        click.echo(f"  Std Dev:      {stats['std_elevation']:.2f}")

    click.echo(f"")
    click.echo(f"Water Sources:  {len(terrain.sources)}")
    for source in terrain.sources[:10]:
        click.echo(f"  ({source.row}, {source.col}) at {terrain.elevation(source):.2f}")
    if len(terrain.sources) > 10:
        click.echo(f"  ... and {len(terrain.sources) - 10} more")

    click.echo("=" * 50)


@main.command()
@click.argument('terrain_file', type=click.Path(exists=True))
@click.option('--water', '-w', required=True, type=float, help='Water height')
@click.option('--new-water', '-n', type=float,
              help='Second water height to compare land against')
@click.option('--output', '-o', type=click.Path(), help='Output JSON file for results')
def analyze(
    terrain_file: str,
    water: float,
    new_water: Optional[float],
    output: Optional[str],
):
    """Flood the terrain and summarize land and islands.

    Examples:

        # Land and islands at water height 3
        rising-tides analyze coast.json -w 3

        # Also compare against a rise to 4.5
        rising-tides analyze coast.json -w 3 -n 4.5 -o report.json
    """
    terrain = _load_or_exit(terrain_file)

    click.echo(f"Flooding terrain (water height: {water})...")
    analyzer = RisingTides(terrain)
    try:
        report = analyzer.report(water, new_water)
    except ValueError as e:
        click.echo(f"Error analyzing terrain: {e}", err=True)
        sys.exit(1)

    click.echo("\n" + report.summary())

    if output:
        try:
            from .io.exporters import export_report_json
            export_report_json(report, output)
            click.echo(f"\nResults saved to: {output}")
        except Exception as e:
            click.echo(f"Error saving output: {e}", err=True)
            sys.exit(1)


@main.command()
@click.argument('terrain_file', type=click.Path(exists=True))
@click.option('--water', '-w', required=True, type=float, help='Water height')
@click.option('--at', 'location', required=True, type=str,
              help='Cell as "row,col"')
def cell(terrain_file: str, water: float, location: str):
    """Check a single cell against the water line.

    Example:
        rising-tides cell coast.json -w 3 --at 4,7
    """
    try:
        target = GridLocation.parse(location)
    except ValueError as e:
        click.echo(f"Error parsing location: {e}", err=True)
        sys.exit(1)

    terrain = _load_or_exit(terrain_file)

    if not terrain.contains(target):
        click.echo(
            f"Error: cell ({target.row}, {target.col}) is outside the "
            f"{terrain.rows}x{terrain.cols} grid",
            err=True
        )
        sys.exit(1)

    analyzer = RisingTides(terrain)
    try:
        reached = bool(analyzer.flooded_regions_in(water)[target.row, target.col])
    except ValueError as e:
        click.echo(f"Error analyzing terrain: {e}", err=True)
        sys.exit(1)

    click.echo(f"\nCell ({target.row}, {target.col}), elevation {terrain.elevation(target):.2f}")
    click.echo(f"  Below water line:     {'yes' if analyzer.is_flooded(water, target) else 'no'}")
    click.echo(f"  Reached by water:     {'yes' if reached else 'no'}")
    click.echo(f"  {analyzer.describe_cell(water, target)}")


@main.command()
@click.argument('terrain_file', type=click.Path(exists=True))
@click.option('--start', type=float, help='First water height (default: lowest point)')
@click.option('--stop', type=float, help='Last water height (default: highest point)')
@click.option('--steps', default=10, type=click.IntRange(min=1),
              help='Number of water heights (default: 10)')
@click.option('--output', '-o', type=click.Path(), help='Output JSON file for results')
def sweep(
    terrain_file: str,
    start: Optional[float],
    stop: Optional[float],
    steps: int,
    output: Optional[str],
):
    """Track land and islands as the water rises.

    Example:
        rising-tides sweep coast.json --start 0 --stop 10 --steps 21
    """
    terrain = _load_or_exit(terrain_file)
    analyzer = RisingTides(terrain)

    extrema = analyzer.elevation_extrema()
    if extrema is None and (start is None or stop is None):
        click.echo("Error: terrain is empty; give both --start and --stop", err=True)
        sys.exit(1)
    if start is None:
        start = extrema[0]
    if stop is None:
        stop = extrema[1]

    try:
        reports = analyzer.sweep(np.linspace(start, stop, steps))
    except ValueError as e:
        click.echo(f"Error analyzing terrain: {e}", err=True)
        sys.exit(1)

    click.echo("\n" + "=" * 50)
    click.echo(f"{'Water':>12}  {'Land':>10}  {'Flooded':>8}  {'Islands':>8}")
    click.echo("-" * 50)
    for report in reports:
        click.echo(
            f"{report.water_height:>12.2f}  {report.visible_land:>10,}  "
            f"{report.flooded_fraction:>8.1%}  {report.islands:>8,}"
        )
    click.echo("=" * 50)

    if output:
        try:
            from .io.exporters import export_report_json
            export_report_json(reports, output)
            click.echo(f"\nResults saved to: {output}")
        except Exception as e:
            click.echo(f"Error saving output: {e}", err=True)
            sys.exit(1)


if __name__ == '__main__':
    main()
