from __future__ import annotations

import argparse
from datetime import date, datetime

import sunmoon
from sunmoon.core.types import Observer
from sunmoon.engines.daylight import format_clock
from sunmoon.engines.horizon import find_crossings


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print the altitude samples behind a rise/set search, and every crossing found."
    )
    p.add_argument("--body", choices=sunmoon.list_bodies(), default="moon")
    p.add_argument("--lat", type=float, required=True)
    p.add_argument("--lon", type=float, required=True)
    p.add_argument("--tz", default=None, help="IANA time zone name (default: UTC)")
    p.add_argument("--date", default=None, help="YYYY-MM-DD (default: today)")
    p.add_argument("--every", type=int, default=4, help="Print every n-th sample (default: 4, i.e. every 2 h)")
    args = p.parse_args(argv)

    observer = Observer.create(args.lat, args.lon, args.tz)
    day = date.fromisoformat(args.date) if args.date else datetime.now(observer.tz).date()
    body = sunmoon.get_body(args.body)

    rows: list[tuple[datetime, float]] = []
    crossings = find_crossings(body, observer, day, trace=lambda t, alt: rows.append((t, alt)))

    print(f"{body.name} altitude on {day}  lat={observer.lat_deg:.4f} lon={observer.lon_deg:.4f} tz={observer.tz}")
    print("-" * 48)
    for i, (t, alt) in enumerate(rows):
        if i % max(1, args.every) == 0:
            print(f"  {t.strftime('%H:%M')}  {alt:+8.2f} deg")
    print()

    if not crossings:
        state = "above" if rows and rows[0][1] >= 0 else "below"
        print(f"No crossings: {body.name} stays {state} the horizon.")
        return 0

    for c in crossings:
        print(f"  {c.kind:<4}  {format_clock(c.time, observer.tz)}  ({c.prev_alt_deg:+.2f} -> {c.next_alt_deg:+.2f})")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
