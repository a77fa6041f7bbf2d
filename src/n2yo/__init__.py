"""
n2yo-client - Typed client for the N2YO satellite tracking REST API.

Fetches satellite positions, radio passes and visual passes for an
observer location and decodes them into immutable dataclasses.

Basic Usage:
    from n2yo import N2YOClient, resolve_location

    client = N2YOClient(api_key="ABCDEF-GHIJKL")

    # ISS positions over the next 5 seconds, seen from Brussels
    result = client.get_positions(25544, 50.8503, 4.3517, 100, count=5)
    print(result.result.satellite.name, len(result.result.positions))

    # Visual passes from a named location, over 3 days
    houston = resolve_location("Houston")
    passes = client.get_visual_passes_at(25544, houston, days=3,
                                         min_visible_seconds=120)
    df = passes.result.to_dataframe()

CLI Usage:
    n2yo positions 25544
    n2yo --location Houston radiopasses 25544 --days 2
    n2yo -l Tokyo visualpasses 25544 --json
"""

__version__ = "1.0.0"

# API (imported before config, which reads the default base URL from it)
from n2yo.api.client import N2YOClient
from n2yo.api.errors import (
    DecodeError,
    N2YOError,
    SchemaError,
    ServerError,
    TransportError,
)
from n2yo.api.transport import RequestsTransport, Transport
from n2yo.config import N2YOConfig

# Core types
from n2yo.core.location import Location, PRESET_LOCATIONS, resolve_location
from n2yo.core.models import (
    Azimuth,
    PositionContext,
    PositionQueryResult,
    QueryResult,
    RadioPass,
    RadioPassContext,
    RadioPassQueryResult,
    Satellite,
    SatellitePass,
    SatellitePosition,
    VisiblePass,
    VisiblePassContext,
    VisiblePassQueryResult,
)

__all__ = [
    # Version
    "__version__",
    # Client
    "N2YOClient",
    "N2YOConfig",
    "Transport",
    "RequestsTransport",
    # Errors
    "N2YOError",
    "TransportError",
    "ServerError",
    "SchemaError",
    "DecodeError",
    # Core
    "Location",
    "PRESET_LOCATIONS",
    "resolve_location",
    "Satellite",
    "SatellitePosition",
    "Azimuth",
    "SatellitePass",
    "RadioPass",
    "VisiblePass",
    "PositionContext",
    "RadioPassContext",
    "VisiblePassContext",
    "QueryResult",
    "PositionQueryResult",
    "RadioPassQueryResult",
    "VisiblePassQueryResult",
]
