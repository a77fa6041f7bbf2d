"""Command-line interface for n2yo-client."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from pathlib import Path

import click
from rich.console import Console

from ..api.client import N2YOClient
from ..api.errors import N2YOError
from ..config import N2YOConfig
from ..core.location import Location, resolve_location
from ..core.models import QueryResult
from .render import positions_table, radio_passes_table, visual_passes_table


@click.group()
@click.option(
    '--api-key',
    envvar='N2YO_API_KEY',
    default='',
    help='N2YO API key (default: $N2YO_API_KEY)'
)
@click.option(
    '--lat',
    type=float,
    help='Observer latitude'
)
@click.option(
    '--lon',
    type=float,
    help='Observer longitude'
)
@click.option(
    '--alt',
    type=float,
    default=0,
    help='Observer altitude in meters (with --lat/--lon or a geocoded --location)'
)
@click.option(
    '--location', '-l',
    type=str,
    default=None,
    help='Named observer location (e.g., "London", "Houston"), presets or geocoding.'
)
@click.option(
    '--timeout',
    type=float,
    default=None,
    help='HTTP timeout in seconds (default: $N2YO_TIMEOUT or 30)'
)
@click.option(
    '--verbose', '-v',
    is_flag=True,
    help='Log requests and responses'
)
@click.version_option(package_name='n2yo-client')
@click.pass_context
def cli(
    ctx: click.Context,
    api_key: str,
    lat: float | None,
    lon: float | None,
    alt: float,
    location: str | None,
    timeout: float | None,
    verbose: bool
) -> None:
    """Query satellite positions and passes from N2YO.

    Examples:

        n2yo positions 25544 --count 5

        n2yo --location Houston radiopasses 25544 --days 2

        n2yo --lat 48.8566 --lon 2.3522 visualpasses 25544 --json
    """
    ctx.ensure_object(dict)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    # priority: lat/lon > --location > Brussels
    if lat is not None and lon is not None:
        ctx.obj['location'] = Location.from_coordinates(
            latitude=lat, longitude=lon, altitude_m=alt, name=location
        )
    elif location:
        resolved = resolve_location(location, altitude_m=alt)
        if resolved is None:
            raise click.ClickException(
                f"Could not find location '{location}'. "
                "Try a different name or use --lat/--lon coordinates."
            )
        ctx.obj['location'] = resolved
    else:
        ctx.obj['location'] = Location.brussels()

    overrides: dict = {'api_key': api_key}
    if timeout is not None:
        overrides['timeout'] = timeout
    ctx.obj['config'] = N2YOConfig.from_env(**overrides)


def _run_query(
    ctx: click.Context,
    query: Callable[[N2YOClient, Location], QueryResult],
    render: Callable,
    records_key: str,
    output_json: bool,
    csv_path: str | None,
) -> None:
    location = ctx.obj['location']

    try:
        with N2YOClient.from_config(ctx.obj['config']) as client:
            result = query(client, location)
    except (N2YOError, ValueError) as e:
        raise click.ClickException(str(e)) from e

    context = result.result
    if csv_path:
        context.to_dataframe().to_csv(Path(csv_path), index=False)

    if output_json:
        output = {
            "location": {
                "name": location.name,
                "latitude": location.latitude,
                "longitude": location.longitude,
                "altitude_m": location.altitude_m,
            },
            "satellite": context.satellite.to_dict(),
            "transaction_count": result.transaction_count,
            records_key: [r.to_dict() for r in getattr(context, records_key)],
        }
        click.echo(json.dumps(output, indent=2))
    else:
        console = Console()
        console.print(render(result, location))
        if csv_path:
            console.print(f"[dim]Saved to {csv_path}[/dim]")


def _output_options(command: Callable) -> Callable:
    command = click.option(
        '--csv', 'csv_path',
        type=click.Path(dir_okay=False, writable=True),
        help='Also write the records to a CSV file'
    )(command)
    command = click.option(
        '--json', '-j', 'output_json',
        is_flag=True,
        help='Output as JSON for automation'
    )(command)
    return command


@cli.command()
@click.argument('satid', type=click.IntRange(min=0))
@click.option(
    '--count', '-c',
    type=click.IntRange(min=1),
    default=10,
    help='Number of positions, one per second (default: 10)'
)
@_output_options
@click.pass_context
def positions(ctx: click.Context, satid: int, count: int, output_json: bool,
              csv_path: str | None) -> None:
    """Show upcoming positions of satellite SATID."""
    _run_query(
        ctx,
        lambda client, loc: client.get_positions_at(satid, loc, count),
        positions_table,
        "positions",
        output_json,
        csv_path,
    )


@cli.command()
@click.argument('satid', type=click.IntRange(min=0))
@click.option(
    '--days', '-d',
    type=click.IntRange(min=1),
    default=1,
    help='Days of prediction (default: 1)'
)
@click.option(
    '--min-elevation', '-e',
    type=click.IntRange(min=0),
    default=10,
    help='Minimum pass elevation in degrees (default: 10)'
)
@_output_options
@click.pass_context
def radiopasses(ctx: click.Context, satid: int, days: int, min_elevation: int,
                output_json: bool, csv_path: str | None) -> None:
    """Show radio passes of satellite SATID."""
    _run_query(
        ctx,
        lambda client, loc: client.get_radio_passes_at(satid, loc, days, min_elevation),
        radio_passes_table,
        "passes",
        output_json,
        csv_path,
    )


@cli.command()
@click.argument('satid', type=click.IntRange(min=0))
@click.option(
    '--days', '-d',
    type=click.IntRange(min=1),
    default=1,
    help='Days of prediction (default: 1)'
)
@click.option(
    '--min-visible', '-m',
    type=click.IntRange(min=0),
    default=60,
    help='Minimum visibility per pass in seconds (default: 60)'
)
@_output_options
@click.pass_context
def visualpasses(ctx: click.Context, satid: int, days: int, min_visible: int,
                 output_json: bool, csv_path: str | None) -> None:
    """Show visual passes of satellite SATID."""
    _run_query(
        ctx,
        lambda client, loc: client.get_visual_passes_at(satid, loc, days, min_visible),
        visual_passes_table,
        "passes",
        output_json,
        csv_path,
    )


@cli.command()
def locations() -> None:
    """List available preset observer locations."""
    from ..core.location import PRESET_LOCATIONS, get_preset_location_names

    click.echo("Available preset locations:")
    click.echo("=" * 40)
    for name in get_preset_location_names():
        lat, lon, alt = PRESET_LOCATIONS[name]
        click.echo(f"  {name.title():16} {lat:9.4f} {lon:10.4f} {alt:6.0f} m")
    click.echo("\nAny other location will be geocoded via OpenStreetMap.")


def main() -> None:
    """Main entry point for CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
