#!/usr/bin/env python3
"""Visual passes for a custom location, analysed with pandas."""

from datetime import timedelta

from n2yo import Location, N2YOClient, resolve_location


def main():
    # Explicit coordinates
    paris = Location(name="Paris", latitude=48.8566, longitude=2.3522, altitude_m=35)

    # Preset or geocoded name
    houston = resolve_location("Houston")

    with N2YOClient.from_env() as client:
        for location in (paris, houston):
            query = client.get_visual_passes_at(
                25544, location, days=5, min_visible_seconds=timedelta(minutes=2)
            )
            df = query.result.to_dataframe()

            print(f"\n{query.result.satellite.name} over {location.name}: {len(df)} passes")
            if not df.empty:
                brightest = df.sort_values("magnitude").iloc[0]
                print(f"  Brightest: {brightest['rise']} (mag {brightest['magnitude']:.1f})")
                print(f"  Mean visible time: {df['duration_s'].mean():.0f}s")


if __name__ == "__main__":
    main()
