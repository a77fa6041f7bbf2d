"""Decoders mapping parsed N2YO responses onto the result types.

Each decoder receives the whole parsed document of its endpoint. Output
sequences are sized from the count the response declares and filled in
document order; an array that is longer or shorter than its declared
count is rejected with ``SchemaError``.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Mapping
from datetime import datetime, timedelta, timezone
from typing import Any, TypeVar

import numpy as np

from ..core.models import (
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
from .errors import SchemaError

R = TypeVar("R")

UINT32_MAX = 2**32 - 1
FLOAT32_MAX = float(np.finfo(np.float32).max)


def _field(obj: Any, key: str, path: str) -> Any:
    if not isinstance(obj, Mapping):
        raise SchemaError(f"Expected an object at '{path}', got {type(obj).__name__}")
    if key not in obj:
        raise SchemaError(f"Missing field '{_join(path, key)}'")
    return obj[key]


def _join(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key


def _get(obj: Any, key: str, path: str, convert: Callable[[Any, str], R]) -> R:
    return convert(_field(obj, key, path), _join(path, key))


def _uint32(value: Any, path: str) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise SchemaError(f"Field '{path}' must be an integer, got {type(value).__name__}")
    if isinstance(value, float):
        if not value.is_integer():
            raise SchemaError(f"Field '{path}' must be an integer, got {value}")
        value = int(value)
    if not 0 <= value <= UINT32_MAX:
        raise SchemaError(f"Field '{path}' is out of range for an unsigned count: {value}")
    return value


def _float32(value: Any, path: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise SchemaError(f"Field '{path}' must be a number, got {type(value).__name__}")
    if isinstance(value, float) and not math.isfinite(value):
        return value
    # checked before narrowing; float32 overflow yields inf
    if abs(value) > FLOAT32_MAX:
        raise SchemaError(f"Field '{path}' is out of range for a 32-bit float: {value}")
    return float(np.float32(value))


def _string(value: Any, path: str) -> str:
    if not isinstance(value, str):
        raise SchemaError(f"Field '{path}' must be a string, got {type(value).__name__}")
    return value


def _utc(seconds: float, path: str) -> datetime:
    try:
        return datetime.fromtimestamp(seconds, timezone.utc)
    except (OverflowError, OSError, ValueError) as e:
        raise SchemaError(f"Field '{path}' is not a valid timestamp: {seconds}", e) from e


def _epoch(value: Any, path: str) -> datetime:
    return _utc(_uint32(value, path), path)


def _epoch_float(value: Any, path: str) -> datetime:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise SchemaError(f"Field '{path}' must be a number, got {type(value).__name__}")
    return _utc(value, path)


def _seconds(value: Any, path: str) -> timedelta:
    return timedelta(seconds=_uint32(value, path))


def _records(document: Mapping, key: str) -> list:
    """The array under ``key``; a missing or null array counts as empty."""
    if not isinstance(document, Mapping):
        raise SchemaError(f"Expected an object at the top level, got {type(document).__name__}")
    records = document.get(key)
    if records is None:
        return []
    if not isinstance(records, list):
        raise SchemaError(f"Field '{key}' must be an array, got {type(records).__name__}")
    return records


def _fill(records: list, count: int, key: str, count_path: str,
          decode_record: Callable[[Any, str], R]) -> tuple[R, ...]:
    """Decode ``records`` into a sequence of exactly ``count`` slots."""
    # capped at len(records); overflow is caught by the index check below
    slots: list[R | None] = [None] * min(count, len(records))
    index = 0
    for record in records:
        if index >= count:
            raise SchemaError(
                f"'{key}' holds more than the {count} records declared by '{count_path}'"
            )
        slots[index] = decode_record(record, f"{key}[{index}]")
        index += 1

    if index != count:
        raise SchemaError(
            f"'{key}' holds {index} records but '{count_path}' declares {count}"
        )
    return tuple(slots)


def _satellite(document: Mapping) -> Satellite:
    info = _field(document, "info", "")
    return Satellite(
        id=_get(info, "satid", "info", _uint32),
        name=_get(info, "satname", "info", _string),
    )


def _transaction_count(document: Mapping) -> int:
    return _get(_field(document, "info", ""), "transactionscount", "info", _uint32)


def _position(record: Any, path: str) -> SatellitePosition:
    return SatellitePosition(
        ra=_get(record, "ra", path, _float32),
        dec=_get(record, "dec", path, _float32),
        time=_get(record, "timestamp", path, _epoch_float),
        azimuth=_get(record, "azimuth", path, _float32),
        elevation=_get(record, "elevation", path, _float32),
        latitude=_get(record, "satlatitude", path, _float32),
        longitude=_get(record, "satlongitude", path, _float32),
    )


def _pass(record: Any, path: str) -> SatellitePass:
    return SatellitePass(
        rise=_get(record, "startUTC", path, _epoch),
        set=_get(record, "endUTC", path, _epoch),
        elevation=_get(record, "maxEl", path, _float32),
        azimuth=Azimuth(
            start=_get(record, "startAz", path, _float32),
            end=_get(record, "endAz", path, _float32),
            max=_get(record, "maxAz", path, _float32),
        ),
    )


def _radio_pass(record: Any, path: str) -> RadioPass:
    return RadioPass(base=_pass(record, path))


def _visible_pass(record: Any, path: str) -> VisiblePass:
    return VisiblePass(
        base=_pass(record, path),
        duration=_get(record, "duration", path, _seconds),
        magnitude=_get(record, "mag", path, _float32),
    )


def _pass_count(document: Mapping) -> int:
    return _get(_field(document, "info", ""), "passescount", "info", _uint32)


def decode_positions(document: Mapping) -> PositionQueryResult:
    """Decode a ``positions`` response."""
    records = _records(document, "positions")
    count = len(records)
    satellite = _satellite(document)
    transaction_count = _transaction_count(document)

    positions = _fill(records, count, "positions", "positions", _position)
    return QueryResult(
        result=PositionContext(positions=positions, satellite=satellite),
        transaction_count=transaction_count,
    )


def decode_radio_passes(document: Mapping) -> RadioPassQueryResult:
    """Decode a ``radiopasses`` response."""
    count = _pass_count(document)
    satellite = _satellite(document)
    transaction_count = _transaction_count(document)

    passes = _fill(_records(document, "passes"), count, "passes", "info.passescount",
                   _radio_pass)
    return QueryResult(
        result=RadioPassContext(passes=passes, satellite=satellite),
        transaction_count=transaction_count,
    )


def decode_visual_passes(document: Mapping) -> VisiblePassQueryResult:
    """Decode a ``visualpasses`` response."""
    count = _pass_count(document)
    satellite = _satellite(document)
    transaction_count = _transaction_count(document)

    passes = _fill(_records(document, "passes"), count, "passes", "info.passescount",
                   _visible_pass)
    return QueryResult(
        result=VisiblePassContext(passes=passes, satellite=satellite),
        transaction_count=transaction_count,
    )
