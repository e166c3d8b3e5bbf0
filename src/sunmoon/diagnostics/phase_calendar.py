from __future__ import annotations

import argparse
import calendar as pycal
from datetime import date
from typing import List, Optional

import sunmoon
from sunmoon.core.types import PhaseName


# Two-letter cell codes for the grid
PHASE_CODES = {
    PhaseName.NEW_MOON: "NM",
    PhaseName.WAXING_CRESCENT: "WC",
    PhaseName.FIRST_QUARTER: "FQ",
    PhaseName.WAXING_GIBBOUS: "WG",
    PhaseName.FULL_MOON: "FM",
    PhaseName.WANING_GIBBOUS: "Wg",
    PhaseName.LAST_QUARTER: "LQ",
    PhaseName.WANING_CRESCENT: "Wc",
}

CELL_WIDTH = 6
WEEKDAYS = ("Mo", "Tu", "We", "Th", "Fr", "Sa", "Su")


def day_cell(d: date, tz: Optional[str]) -> List[str]:
    """Two text lines for one day: '23 FM' over ' 99%'."""
    ph = sunmoon.get_current_moon_phase(d, tz)
    return [f"{d.day:2d} {PHASE_CODES[ph.name]}", f"{ph.illumination_percent:3d}%"]


def month_rows(gy: int, gm: int, tz: Optional[str]) -> List[str]:
    blank = ["", ""]
    rows: List[str] = []
    for week in pycal.Calendar(firstweekday=0).monthdatescalendar(gy, gm):
        cells = [day_cell(d, tz) if d.month == gm else blank for d in week]
        for line in range(2):
            rows.append(" ".join(c[line].ljust(CELL_WIDTH) for c in cells).rstrip())
    return rows


def phase_month_calendar(gy: int, gm: int, tz: Optional[str] = None) -> None:
    header = " ".join(w.ljust(CELL_WIDTH) for w in WEEKDAYS).rstrip()
    print(f"Moon phases  {gy}-{gm:02d}  (local noon, tz={tz or 'UTC'})")
    print(header)
    print("-" * len(header))
    for row in month_rows(gy, gm, tz):
        print(row)
    print()
    print("  " + "  ".join(f"{code}={name.value}" for name, code in PHASE_CODES.items()))


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Print a month grid with the lunar phase of each day.")
    p.add_argument("--greg", nargs=2, type=int, metavar=("YEAR", "MONTH"),
                   help="Month to print, e.g. --greg 2024 4 (default: current month)")
    p.add_argument("--tz", default=None, help="IANA time zone name (default: UTC)")
    args = p.parse_args(argv)

    gy, gm = args.greg if args.greg else (date.today().year, date.today().month)
    phase_month_calendar(gy, gm, args.tz)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
