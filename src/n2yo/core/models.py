"""Typed results returned by the N2YO endpoints."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Generic, TypeVar

import pandas as pd

T = TypeVar("T")


@dataclass(frozen=True)
class Satellite:
    """Identity of the satellite a query was made for.

    Attributes:
        id: NORAD catalog number
        name: Satellite name as reported by N2YO
    """
    id: int
    name: str

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name}


@dataclass(frozen=True)
class SatellitePosition:
    """A single predicted position of a satellite.

    Attributes:
        ra: Right ascension in degrees
        dec: Declination in degrees
        time: UTC time of the observation
        azimuth: Azimuth seen from the observer in degrees
        elevation: Elevation seen from the observer in degrees
        latitude: Sub-satellite latitude in degrees
        longitude: Sub-satellite longitude in degrees
    """
    ra: float
    dec: float
    time: datetime
    azimuth: float
    elevation: float
    latitude: float
    longitude: float

    def to_dict(self) -> dict:
        return {
            "ra": self.ra,
            "dec": self.dec,
            "time": self.time.isoformat(),
            "azimuth": self.azimuth,
            "elevation": self.elevation,
            "latitude": self.latitude,
            "longitude": self.longitude,
        }


@dataclass(frozen=True)
class Azimuth:
    """Azimuths of a pass in degrees."""
    start: float
    end: float
    max: float


@dataclass(frozen=True)
class SatellitePass:
    """Fields shared by radio and visual passes.

    Attributes:
        rise: UTC time the pass starts
        set: UTC time the pass ends
        elevation: Maximum elevation in degrees
        azimuth: Start, end and max-elevation azimuths
    """
    rise: datetime
    set: datetime
    elevation: float
    azimuth: Azimuth

    def to_dict(self) -> dict:
        return {
            "rise": self.rise.isoformat(),
            "set": self.set.isoformat(),
            "elevation": self.elevation,
            "azimuth_start": self.azimuth.start,
            "azimuth_max": self.azimuth.max,
            "azimuth_end": self.azimuth.end,
        }


class _PassFields:
    """Read-only access to the embedded base pass fields."""

    base: SatellitePass

    @property
    def rise(self) -> datetime:
        return self.base.rise

    @property
    def set(self) -> datetime:
        return self.base.set

    @property
    def elevation(self) -> float:
        return self.base.elevation

    @property
    def azimuth(self) -> Azimuth:
        return self.base.azimuth


@dataclass(frozen=True)
class RadioPass(_PassFields):
    """A pass above a minimum elevation, usable for radio contact."""
    base: SatellitePass

    def to_dict(self) -> dict:
        return self.base.to_dict()


@dataclass(frozen=True)
class VisiblePass(_PassFields):
    """A pass during which the satellite is optically visible.

    Attributes:
        base: Rise, set, elevation and azimuths of the pass
        duration: Time the satellite is visible
        magnitude: Visual magnitude (lower is brighter)
    """
    base: SatellitePass
    duration: timedelta
    magnitude: float

    def to_dict(self) -> dict:
        data = self.base.to_dict()
        data["duration_s"] = self.duration.total_seconds()
        data["magnitude"] = self.magnitude
        return data


def _records_frame(records: tuple) -> pd.DataFrame:
    return pd.DataFrame([r.to_dict() for r in records])


@dataclass(frozen=True)
class PositionContext:
    """Positions of one satellite, in the order the API returned them."""
    positions: tuple[SatellitePosition, ...]
    satellite: Satellite

    def to_dataframe(self) -> pd.DataFrame:
        """Positions as a DataFrame, one row per position."""
        return _records_frame(self.positions)


@dataclass(frozen=True)
class RadioPassContext:
    """Radio passes of one satellite, in the order the API returned them."""
    passes: tuple[RadioPass, ...]
    satellite: Satellite

    def to_dataframe(self) -> pd.DataFrame:
        """Passes as a DataFrame, one row per pass."""
        return _records_frame(self.passes)


@dataclass(frozen=True)
class VisiblePassContext:
    """Visual passes of one satellite, in the order the API returned them."""
    passes: tuple[VisiblePass, ...]
    satellite: Satellite

    def to_dataframe(self) -> pd.DataFrame:
        """Passes as a DataFrame, one row per pass."""
        return _records_frame(self.passes)


@dataclass(frozen=True)
class QueryResult(Generic[T]):
    """Decoded result of a query plus the API transaction count.

    Attributes:
        result: Decoded endpoint context
        transaction_count: Transactions used against the hourly quota
    """
    result: T
    transaction_count: int


PositionQueryResult = QueryResult[PositionContext]
RadioPassQueryResult = QueryResult[RadioPassContext]
VisiblePassQueryResult = QueryResult[VisiblePassContext]
