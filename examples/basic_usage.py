#!/usr/bin/env python3
"""Basic usage example for n2yo-client.

Reads the API key from N2YO_API_KEY and prints the next positions and
radio passes of the ISS over Brussels.
"""

from n2yo import Location, N2YOClient, N2YOError

ISS = 25544


def main():
    brussels = Location.brussels()

    with N2YOClient.from_env() as client:
        try:
            positions = client.get_positions_at(ISS, brussels, count=3)
            passes = client.get_radio_passes_at(ISS, brussels, days=2, min_elevation=20)
        except N2YOError as e:
            print(f"Query failed: {e}")
            return

    satellite = positions.result.satellite
    print(f"{satellite.name} ({satellite.id}) seen from {brussels.name}")
    for p in positions.result.positions:
        print(f"  {p.time:%H:%M:%S}  az {p.azimuth:6.2f}  el {p.elevation:6.2f}")

    print("\nRadio passes:")
    for p in passes.result.passes:
        print(f"  {p.rise:%Y-%m-%d %H:%M} -> {p.set:%H:%M}, max elevation {p.elevation:.0f}")

    print(f"\nTransactions used: {passes.transaction_count}")


if __name__ == "__main__":
    main()
