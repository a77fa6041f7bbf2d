"""Core data structures for N2YO results."""

from .location import (
    Location,
    PRESET_LOCATIONS,
    get_preset_location_names,
    resolve_location,
)
from .models import (
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
    # Location
    "Location",
    "PRESET_LOCATIONS",
    "resolve_location",
    "get_preset_location_names",
    # Results
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
