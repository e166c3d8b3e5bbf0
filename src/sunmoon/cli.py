from __future__ import annotations

import argparse
from datetime import date, datetime, timedelta, timezone
import logging
import sys
import importlib
import inspect


def _parse_ymd(s: str) -> date:
    y, m, d = map(int, s.split("-"))
    return date(y, m, d)


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _add_location(p: argparse.ArgumentParser) -> None:
    p.add_argument("--lat", type=float, required=True, help="Observer latitude in degrees (positive North)")
    p.add_argument("--lon", type=float, required=True, help="Observer longitude in degrees (positive East)")
    p.add_argument("--tz", default=None, help="IANA time zone name (default: UTC)")


def _add_date(p: argparse.ArgumentParser) -> None:
    p.add_argument("--date", type=_parse_ymd, default=None, help="YYYY-MM-DD (default: today in --tz)")


def _when(args: argparse.Namespace):
    # a bare date means "that civil day"; no date means "now"
    if args.date is not None:
        return args.date
    return datetime.now(timezone.utc)


def cmd_sun(argv: list[str]) -> int:
    import sunmoon
    from sunmoon.core.time import resolve_tz
    from sunmoon.engines import daylight

    p = argparse.ArgumentParser(prog="sunmoon sun", description="Sunrise, sunset and day length.")
    _add_location(p)
    _add_date(p)
    args = p.parse_args(argv)

    tz = resolve_tz(args.tz)
    when = _when(args)
    st = sunmoon.calculate_sun_times(when, args.lat, args.lon, tz)
    change = sunmoon.day_length_change(when, args.lat, args.lon, tz)

    print(f"Location: lat={args.lat:.4f} lon={args.lon:.4f} tz={tz}")
    print()
    print(f"  Sunrise    : {daylight.format_clock(st.sunrise, tz, missing='none')}")
    print(f"  Sunset     : {daylight.format_clock(st.sunset, tz, missing='none')}")
    if st.day_length is not None:
        print(f"  Day Length : {daylight.format_day_length(st.day_length)}")
    else:
        print("  Day Length : undefined")
    if change is not None:
        print(f"  Tomorrow   : {daylight.format_day_length_change(timedelta(0), change)}")
    print(f"  Status     : {'Daylight' if st.is_currently_daylight else 'Nighttime'}")

    return 0


def cmd_moon(argv: list[str]) -> int:
    import sunmoon
    from sunmoon.core.time import resolve_tz
    from sunmoon.engines import daylight

    p = argparse.ArgumentParser(prog="sunmoon moon", description="Moonrise, moonset and phase.")
    _add_location(p)
    _add_date(p)
    args = p.parse_args(argv)

    tz = resolve_tz(args.tz)
    when = _when(args)
    mt = sunmoon.calculate_moon_times(when, args.lat, args.lon, tz)
    ph = sunmoon.get_current_moon_phase(when, tz)

    print(f"Location: lat={args.lat:.4f} lon={args.lon:.4f} tz={tz}")
    print()
    print(f"  Moonrise : {daylight.format_clock(mt.moonrise, tz, missing='No moonrise')}")
    print(f"  Moonset  : {daylight.format_clock(mt.moonset, tz, missing='No moonset')}")
    print()
    _print_phase(ph)
    return 0


def _print_phase(ph) -> None:
    from sunmoon.core.types import PhaseName

    print(f"  Phase        : {ph.name}")
    print(f"  Illumination : {ph.illumination_percent}%")
    print(f"  Age          : {ph.age_days} days")
    print(f"  Next {ph.next_phase_name}: in {ph.days_to_next_phase} days")
    if ph.next_phase_name != PhaseName.FULL_MOON:
        print(f"  Next Full Moon: in {ph.days_to_next_full_moon} days")


def cmd_phase(argv: list[str]) -> int:
    import sunmoon

    p = argparse.ArgumentParser(prog="sunmoon phase", description="Lunar phase for a date.")
    _add_date(p)
    p.add_argument("--tz", default=None, help="IANA time zone name (default: UTC)")
    args = p.parse_args(argv)

    _print_phase(sunmoon.get_current_moon_phase(_when(args), args.tz))
    return 0


def cmd_next(argv: list[str]) -> int:
    import sunmoon
    from sunmoon.core.time import resolve_tz
    from sunmoon.engines import daylight

    p = argparse.ArgumentParser(prog="sunmoon next", description="Next sunrise or sunset from now.")
    _add_location(p)
    p.add_argument("--days", type=int, default=2, help="How many local days to search (default: 2)")
    args = p.parse_args(argv)

    tz = resolve_tz(args.tz)
    ev = sunmoon.get_next_sun_event(args.lat, args.lon, tz, search_days=args.days)
    if ev is None:
        print(f"No sunrise or sunset within {args.days} day(s).")
        return 0

    print(f"  Next {ev.event.capitalize()}: {daylight.format_clock(ev.time, tz)} ({ev.time.isoformat()})")
    print(f"  Status: {'Daylight' if ev.is_currently_daylight else 'Nighttime'}")
    return 0


def cmd_position(argv: list[str]) -> int:
    import sunmoon
    from sunmoon.core.time import from_julian_day, to_julian_day
    from sunmoon.reference.lunar import lunar_ecliptic
    from sunmoon.reference.solar import solar_ecliptic
    from sunmoon.reference.sidereal import gmst_deg, local_sidereal_time_deg

    p = argparse.ArgumentParser(prog="sunmoon position", description="Ecliptic/equatorial position of the Sun or Moon.")
    p.add_argument("--body", choices=sunmoon.list_bodies(), default="sun")
    p.add_argument("--jd", type=float, default=None, help="Julian Day (default: now)")
    p.add_argument("--lon", type=float, default=0.0, help="Longitude for local sidereal time (positive East)")
    args = p.parse_args(argv)

    jd = args.jd if args.jd is not None else to_julian_day(datetime.now(timezone.utc))
    body = sunmoon.get_body(args.body)
    ecl = {"sun": solar_ecliptic, "moon": lunar_ecliptic}.get(args.body)
    eq = body.position(jd)

    print("Time Input:")
    print(f"  JD  = {jd:.6f}")
    print(f"  UTC = {from_julian_day(jd).isoformat()}")
    print()
    if ecl is not None:
        e = ecl(jd)
        print(f"Ecliptic ({args.body}, degrees):")
        print(f"  Longitude (lambda) = {e.lon_deg:.6f}")
        print(f"  Latitude  (beta)   = {e.lat_deg:.6f}")
        print()
    print(f"Equatorial ({args.body}, degrees):")
    print(f"  Right Ascension = {eq.ra_deg:.6f}  ({eq.ra_hours:.6f} h)")
    print(f"  Declination     = {eq.dec_deg:.6f}")
    print()
    print("Sidereal Time (degrees):")
    print(f"  GMST = {gmst_deg(jd):.6f}")
    print(f"  LST  = {local_sidereal_time_deg(jd, args.lon):.6f}  (lon {args.lon:+.4f})")
    return 0


def main(argv: list[str] | None = None) -> int:
    from sunmoon.core.errors import SunmoonError

    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="sunmoon", description="Offline sun and moon almanac.")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("sun", help="Sunrise, sunset and day length.")
    sub.add_parser("moon", help="Moonrise, moonset and phase.")
    sub.add_parser("phase", help="Lunar phase for a date.")
    sub.add_parser("next", help="Next sunrise or sunset from now.")
    sub.add_parser("position", help="Ecliptic/equatorial position of the Sun or Moon.")

    # diagnostics
    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["altitude-trace", "phase-calendar"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    commands = {
        "sun": cmd_sun,
        "moon": cmd_moon,
        "phase": cmd_phase,
        "next": cmd_next,
        "position": cmd_position,
    }

    try:
        if args.cmd == "diag":
            tool_map = {
                "altitude-trace": "sunmoon.diagnostics.altitude_trace",
                "phase-calendar": "sunmoon.diagnostics.phase_calendar",
            }
            return _run_module_main(tool_map[args.tool], rest)
        return commands[args.cmd](rest)
    except SunmoonError as e:
        print(f"sunmoon: error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
