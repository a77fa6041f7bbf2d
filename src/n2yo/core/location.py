"""Observer locations for pass and position predictions."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import requests

logger = logging.getLogger(__name__)

NOMINATIM_URL = "https://nominatim.openstreetmap.org/search"


@dataclass(frozen=True)
class Location:
    """Ground observer position.

    Coordinates are passed to N2YO as given; the API rejects values out
    of range itself. Geocoded locations carry no elevation, so their
    altitude is whatever the caller supplies (sea level by default).

    Attributes:
        name: Human-readable location name
        latitude: Latitude in decimal degrees
        longitude: Longitude in decimal degrees
        altitude_m: Altitude above sea level in meters
    """
    name: str
    latitude: float
    longitude: float
    altitude_m: float = 0

    @classmethod
    def brussels(cls) -> Location:
        """Default observer: Brussels, Belgium."""
        return cls(name="Brussels", latitude=50.8503, longitude=4.3517, altitude_m=100)

    @classmethod
    def from_coordinates(cls, latitude: float, longitude: float,
                         altitude_m: float = 0, name: str | None = None) -> Location:
        """Create a Location from coordinates, naming it after them if unnamed."""
        location_name = name or f"Location ({latitude:.4f}, {longitude:.4f})"
        return cls(name=location_name, latitude=latitude, longitude=longitude,
                   altitude_m=altitude_m)


# name -> (latitude, longitude, altitude_m)
PRESET_LOCATIONS: dict[str, tuple[float, float, float]] = {
    "brussels": (50.8503, 4.3517, 100),
    "london": (51.5074, -0.1278, 11),
    "paris": (48.8566, 2.3522, 35),
    "berlin": (52.5200, 13.4050, 34),
    "madrid": (40.4168, -3.7038, 667),
    "new york": (40.7128, -74.0060, 10),
    "houston": (29.7604, -95.3698, 15),
    "cape canaveral": (28.3922, -80.6077, 3),
    "denver": (39.7392, -104.9903, 1609),
    "tokyo": (35.6762, 139.6503, 40),
    "baikonur": (45.9650, 63.3050, 90),
    "sydney": (-33.8688, 151.2093, 58),
    "santiago": (-33.4489, -70.6693, 520),
    "nairobi": (-1.2921, 36.8219, 1795),
}


def _geocode_nominatim(place_name: str, altitude_m: float = 0) -> Location | None:
    """Look up a place name with OpenStreetMap Nominatim.

    Nominatim returns no elevation; ``altitude_m`` is used as the
    observer altitude.

    Returns:
        Location if found, None otherwise
    """
    try:
        response = requests.get(
            NOMINATIM_URL,
            params={"q": place_name, "format": "json", "limit": 1},
            headers={"User-Agent": "n2yo-client/1.0"},
            timeout=5,
        )
        if response.status_code != 200:
            logger.warning(f"Nominatim returned status {response.status_code}")
            return None

        results = response.json()
        if not results:
            logger.warning(f"No results found for '{place_name}'")
            return None

        result = results[0]
        return Location(
            name=result.get("display_name", place_name).split(",")[0],
            latitude=float(result["lat"]),
            longitude=float(result["lon"]),
            altitude_m=altitude_m,
        )

    except requests.RequestException as e:
        logger.warning(f"Nominatim request failed: {e}")
        return None
    except (KeyError, ValueError) as e:
        logger.warning(f"Failed to parse Nominatim response: {e}")
        return None


def resolve_location(name: str, altitude_m: float = 0) -> Location | None:
    """Resolve a place name to an observer Location.

    Presets are matched case-insensitively and carry their own altitude;
    anything else is geocoded and placed at ``altitude_m``.

    Example:
        >>> resolve_location("Houston").latitude
        29.7604
    """
    normalized = name.lower().strip()

    if normalized in PRESET_LOCATIONS:
        lat, lon, alt = PRESET_LOCATIONS[normalized]
        display_name = name.title() if name.islower() else name
        return Location(name=display_name, latitude=lat, longitude=lon, altitude_m=alt)

    logger.info(f"'{name}' not in presets, trying Nominatim geocoding...")
    return _geocode_nominatim(name, altitude_m)


def get_preset_location_names() -> list[str]:
    """Sorted names of the built-in locations."""
    return sorted(PRESET_LOCATIONS.keys())
