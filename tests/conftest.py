"""Shared fixtures: sample N2YO responses and an in-memory transport."""
import json

import pytest

from n2yo.api.client import N2YOClient
from n2yo.api.errors import TransportError


API_KEY = "TEST-KEY-1234"


POSITIONS_RESPONSE = {
    "info": {"satname": "SPACE STATION", "satid": 25544, "transactionscount": 5},
    "positions": [
        {
            "satlatitude": -39.90318514,
            "satlongitude": 158.28897924,
            "sataltitude": 417.85,
            "azimuth": 254.31,
            "elevation": -69.09,
            "ra": 44.77078138,
            "dec": -43.99279118,
            "timestamp": 1521354418,
            "eclipsed": True,
        },
        {
            "satlatitude": -39.86493451,
            "satlongitude": 158.35261287,
            "sataltitude": 417.84,
            "azimuth": 254.33,
            "elevation": -69.06,
            "ra": 44.81676119,
            "dec": -43.98963535,
            "timestamp": 1521354419,
            "eclipsed": True,
        },
    ],
}


RADIO_PASSES_RESPONSE = {
    "info": {
        "satid": 25544,
        "satname": "SPACE STATION",
        "transactionscount": 4,
        "passescount": 2,
    },
    "passes": [
        {
            "startAz": 311.57, "startAzCompass": "NW", "startUTC": 1521368025,
            "maxAz": 40.38, "maxAzCompass": "NE", "maxEl": 45.08, "maxUTC": 1521368345,
            "endAz": 130.42, "endAzCompass": "SE", "endUTC": 1521368660,
        },
        {
            "startAz": 272.5, "startAzCompass": "W", "startUTC": 1521373865,
            "maxAz": 197.33, "maxAzCompass": "SSW", "maxEl": 23.1, "maxUTC": 1521374160,
            "endAz": 130.9, "endAzCompass": "SE", "endUTC": 1521374460,
        },
    ],
}


VISUAL_PASSES_RESPONSE = {
    "info": {
        "satid": 25544,
        "satname": "SPACE STATION",
        "transactionscount": 7,
        "passescount": 1,
    },
    "passes": [
        {
            "startAz": 307.21, "startAzCompass": "NW", "startEl": 13.08,
            "startUTC": 1521368025, "maxAz": 225.45, "maxAzCompass": "SW",
            "maxEl": 78.27, "maxUTC": 1521368345, "endAz": 124.23,
            "endAzCompass": "SE", "endEl": 0, "endUTC": 1521368660,
            "mag": -2.4, "duration": 555,
        },
    ],
}


class FakeTransport:
    """Transport returning canned bodies and recording requested URIs."""

    def __init__(self, body=None, error=None):
        self.body = body
        self.error = error
        self.uris = []
        self.closed = False

    def download_string(self, uri):
        self.uris.append(uri)
        if self.error is not None:
            raise self.error
        if isinstance(self.body, str):
            return self.body
        return json.dumps(self.body)

    def close(self):
        self.closed = True


@pytest.fixture
def make_client():
    """Build a client around a FakeTransport with the given body or error."""
    def _make(body=None, error=None):
        transport = FakeTransport(body=body, error=error)
        return N2YOClient(api_key=API_KEY, transport=transport), transport
    return _make


@pytest.fixture
def refused():
    return TransportError(
        "HTTP request failed (ConnectionError)",
        ConnectionRefusedError(111, "Connection refused"),
    )
