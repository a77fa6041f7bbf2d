"""Rich tables for query results."""

from __future__ import annotations

from datetime import datetime

from rich import box
from rich.table import Table

from ..core.location import Location
from ..core.models import (
    PositionQueryResult,
    RadioPassQueryResult,
    VisiblePassQueryResult,
)


def _utc(dt: datetime) -> str:
    return dt.strftime("%Y-%m-%d %H:%M:%S")


def _deg(value: float) -> str:
    return f"{value:.2f}°"


def _table(title: str, transaction_count: int) -> Table:
    return Table(
        title=title,
        caption=f"{transaction_count} API transactions used this hour",
        box=box.ROUNDED,
        show_header=True,
        header_style="bold cyan",
    )


def _elevation_style(elevation: float) -> str:
    if elevation >= 60:
        return f"[green]{_deg(elevation)}[/green]"
    elif elevation >= 30:
        return f"[yellow]{_deg(elevation)}[/yellow]"
    return _deg(elevation)


def positions_table(query: PositionQueryResult, location: Location) -> Table:
    """Table of predicted positions, one row per second."""
    context = query.result
    table = _table(
        f"Positions of {context.satellite.name} ({context.satellite.id}) "
        f"seen from {location.name}",
        query.transaction_count,
    )
    table.add_column("Time (UTC)", style="bold", no_wrap=True)
    table.add_column("Azimuth", justify="right")
    table.add_column("Elevation", justify="right")
    table.add_column("RA", justify="right")
    table.add_column("Dec", justify="right")
    table.add_column("Sat. Lat", justify="right")
    table.add_column("Sat. Lon", justify="right")

    for p in context.positions:
        elevation = _deg(p.elevation) if p.elevation >= 0 else f"[dim]{_deg(p.elevation)}[/dim]"
        table.add_row(
            _utc(p.time),
            _deg(p.azimuth),
            elevation,
            _deg(p.ra),
            _deg(p.dec),
            _deg(p.latitude),
            _deg(p.longitude),
        )
    return table


def radio_passes_table(query: RadioPassQueryResult, location: Location) -> Table:
    """Table of radio passes."""
    context = query.result
    table = _table(
        f"Radio passes of {context.satellite.name} ({context.satellite.id}) "
        f"over {location.name}",
        query.transaction_count,
    )
    table.add_column("Rise (UTC)", style="bold", no_wrap=True)
    table.add_column("Set (UTC)", no_wrap=True)
    table.add_column("Max El.", justify="right")
    table.add_column("Az. Start", justify="right")
    table.add_column("Az. Max", justify="right")
    table.add_column("Az. End", justify="right")

    for p in context.passes:
        table.add_row(
            _utc(p.rise),
            _utc(p.set),
            _elevation_style(p.elevation),
            _deg(p.azimuth.start),
            _deg(p.azimuth.max),
            _deg(p.azimuth.end),
        )
    return table


def visual_passes_table(query: VisiblePassQueryResult, location: Location) -> Table:
    """Table of visual passes, brightest in green."""
    context = query.result
    table = _table(
        f"Visual passes of {context.satellite.name} ({context.satellite.id}) "
        f"over {location.name}",
        query.transaction_count,
    )
    table.add_column("Rise (UTC)", style="bold", no_wrap=True)
    table.add_column("Set (UTC)", no_wrap=True)
    table.add_column("Visible", justify="right")
    table.add_column("Max El.", justify="right")
    table.add_column("Magnitude", justify="right")
    table.add_column("Az. Start", justify="right")
    table.add_column("Az. End", justify="right")

    for p in context.passes:
        seconds = int(p.duration.total_seconds())
        magnitude = f"{p.magnitude:.1f}"
        if p.magnitude < 0:
            magnitude = f"[green]{magnitude}[/green]"
        table.add_row(
            _utc(p.rise),
            _utc(p.set),
            f"{seconds // 60}m {seconds % 60:02d}s",
            _elevation_style(p.elevation),
            magnitude,
            _deg(p.azimuth.start),
            _deg(p.azimuth.end),
        )
    return table
