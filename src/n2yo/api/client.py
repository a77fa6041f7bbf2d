"""N2YO REST API client."""

from __future__ import annotations

import json
import logging
import threading
from collections.abc import Callable, Sequence
from datetime import timedelta
from typing import Any, TypeVar

import numpy as np

from ..config import N2YOConfig
from ..core.location import Location
from ..core.models import (
    PositionQueryResult,
    QueryResult,
    RadioPassQueryResult,
    VisiblePassQueryResult,
)
from .decoders import decode_positions, decode_radio_passes, decode_visual_passes
from .errors import DecodeError, SchemaError, ServerError, TransportError
from .transport import RequestsTransport, Transport
from .uri import BASE_URL, build_uri, mask_api_key

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=QueryResult)


def format_unsigned(value: int, name: str) -> str:
    """Render a non-negative integer parameter as a path segment."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return str(value)


def format_float(value: float) -> str:
    """Render a float parameter in plain positional notation.

    Example:
        >>> format_float(41.702)
        '41.702'
        >>> format_float(1e-05)
        '0.00001'
    """
    return np.format_float_positional(float(value), trim="-")


def _whole_seconds(value: timedelta | int) -> int:
    if isinstance(value, timedelta):
        return int(value.total_seconds())
    return value


class N2YOClient:
    """Synchronous client for the N2YO satellite REST API.

    Each call performs one GET request and returns a fully decoded
    ``QueryResult`` or raises an ``N2YOError`` naming the stage that failed.
    Calls on one client are serialised, so an instance may be shared
    between threads.

    Example:
        client = N2YOClient(api_key="ABCDEF-GHIJKL")
        result = client.get_radio_passes(25544, 50.85, 4.35, 100, days=2,
                                         min_elevation=20)
        for p in result.result.passes:
            print(p.rise, p.elevation)
    """

    def __init__(
        self,
        api_key: str,
        transport: Transport | None = None,
        base_url: str = BASE_URL,
        transaction_warning_threshold: int = 900,
    ):
        """Initialize the client.

        Args:
            api_key: N2YO API key, appended verbatim to every request.
            transport: Used to fetch response bodies. Defaults to a
                ``RequestsTransport``.
            base_url: REST root the endpoint segments are appended to.
            transaction_warning_threshold: Log a warning once the API
                reports more transactions than this.
        """
        if not api_key:
            raise ValueError(
                "N2YO API key not configured.\n"
                "Set the environment variable:\n"
                "  export N2YO_API_KEY='your_key'\n\n"
                "Get a key at: https://www.n2yo.com/login/edit/"
            )
        self.api_key = api_key
        self.base_url = base_url
        self.transport = transport or RequestsTransport()
        self.transaction_warning_threshold = transaction_warning_threshold
        self._lock = threading.Lock()

    @classmethod
    def from_config(cls, config: N2YOConfig) -> N2YOClient:
        """Create a client with a ``RequestsTransport`` built from config."""
        return cls(
            api_key=config.api_key,
            transport=RequestsTransport(timeout=config.timeout),
            base_url=config.base_url,
            transaction_warning_threshold=config.transaction_warning_threshold,
        )

    @classmethod
    def from_env(cls, **kwargs) -> N2YOClient:
        """Create a client from ``N2YO_*`` environment variables."""
        return cls.from_config(N2YOConfig.from_env(**kwargs))

    def get_positions(
        self,
        satellite_id: int,
        latitude: float,
        longitude: float,
        altitude: float,
        count: int,
    ) -> PositionQueryResult:
        """Get future positions of a satellite, one per second.

        Args:
            satellite_id: NORAD catalog number
            latitude: Observer latitude in degrees
            longitude: Observer longitude in degrees
            altitude: Observer altitude in meters
            count: Number of positions (seconds) to return

        Returns:
            QueryResult wrapping a PositionContext
        """
        segments = [
            "positions",
            format_unsigned(satellite_id, "satellite_id"),
            format_float(latitude),
            format_float(longitude),
            format_float(altitude),
            format_unsigned(count, "count"),
        ]
        return self._execute_query(segments, decode_positions)

    def get_radio_passes(
        self,
        satellite_id: int,
        latitude: float,
        longitude: float,
        altitude: float,
        days: int,
        min_elevation: int,
    ) -> RadioPassQueryResult:
        """Get passes above a minimum elevation, for radio communication.

        Args:
            satellite_id: NORAD catalog number
            latitude: Observer latitude in degrees
            longitude: Observer longitude in degrees
            altitude: Observer altitude in meters
            days: Number of days of prediction
            min_elevation: Minimum max-elevation of a pass in degrees

        Returns:
            QueryResult wrapping a RadioPassContext
        """
        segments = [
            "radiopasses",
            format_unsigned(satellite_id, "satellite_id"),
            format_float(latitude),
            format_float(longitude),
            format_float(altitude),
            format_unsigned(days, "days"),
            format_unsigned(min_elevation, "min_elevation"),
        ]
        return self._execute_query(segments, decode_radio_passes)

    def get_visual_passes(
        self,
        satellite_id: int,
        latitude: float,
        longitude: float,
        altitude: float,
        days: int,
        min_visible_seconds: timedelta | int,
    ) -> VisiblePassQueryResult:
        """Get passes during which the satellite is optically visible.

        Args:
            satellite_id: NORAD catalog number
            latitude: Observer latitude in degrees
            longitude: Observer longitude in degrees
            altitude: Observer altitude in meters
            days: Number of days of prediction
            min_visible_seconds: Minimum visibility per pass, as a
                timedelta or a number of seconds

        Returns:
            QueryResult wrapping a VisiblePassContext
        """
        segments = [
            "visualpasses",
            format_unsigned(satellite_id, "satellite_id"),
            format_float(latitude),
            format_float(longitude),
            format_float(altitude),
            format_unsigned(days, "days"),
            format_unsigned(
                _whole_seconds(min_visible_seconds),
                "min_visible_seconds",
            ),
        ]
        return self._execute_query(segments, decode_visual_passes)

    def get_positions_at(self, satellite_id: int, location: Location,
                         count: int) -> PositionQueryResult:
        """``get_positions`` for an observer Location."""
        return self.get_positions(satellite_id, location.latitude, location.longitude,
                                  location.altitude_m, count)

    def get_radio_passes_at(self, satellite_id: int, location: Location, days: int,
                            min_elevation: int) -> RadioPassQueryResult:
        """``get_radio_passes`` for an observer Location."""
        return self.get_radio_passes(satellite_id, location.latitude, location.longitude,
                                     location.altitude_m, days, min_elevation)

    def get_visual_passes_at(self, satellite_id: int, location: Location, days: int,
                             min_visible_seconds: timedelta | int) -> VisiblePassQueryResult:
        """``get_visual_passes`` for an observer Location."""
        return self.get_visual_passes(satellite_id, location.latitude, location.longitude,
                                      location.altitude_m, days, min_visible_seconds)

    def _execute_query(
        self,
        segments: Sequence[str],
        decode: Callable[[Any], R],
    ) -> R:
        """Fetch, check and decode one endpoint response.

        Raises:
            TransportError: Download or JSON parsing failed.
            ServerError: The response carries an ``error`` field.
            DecodeError: The response does not match the result schema.
        """
        uri = build_uri(segments, self.api_key, self.base_url)

        with self._lock:
            logger.debug(f"GET {mask_api_key(uri, self.api_key)}")
            try:
                document = json.loads(self.transport.download_string(uri))
            except (TransportError, OSError, ValueError, RecursionError) as e:
                raise TransportError(f"Error downloading '{uri}'", e) from e

        if isinstance(document, dict) and "error" in document:
            error = document["error"]
            raise ServerError(error if isinstance(error, str) else json.dumps(error))

        try:
            result = decode(document)
        except (SchemaError, KeyError, TypeError, ValueError, OverflowError) as e:
            raise DecodeError("Error decoding result", e) from e

        logger.debug(f"Decoded {segments[0]} response "
                     f"({result.transaction_count} transactions used)")
        if result.transaction_count > self.transaction_warning_threshold:
            logger.warning(
                f"N2YO transaction count nearing limit: {result.transaction_count}"
            )
        return result

    def close(self) -> None:
        """Close the transport if it holds resources."""
        close = getattr(self.transport, "close", None)
        if close is not None:
            close()

    def __enter__(self) -> N2YOClient:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
