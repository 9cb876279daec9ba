from __future__ import annotations

import argparse
from datetime import date, datetime, timedelta, timezone
from typing import Iterator, List, Optional

from lunaphase.reference import phase
from lunaphase.reference import time_scales as ts


def _parse_ymd(s: str) -> date:
    y, m, d = map(int, s.split("-"))
    return date(y, m, d)


def daily_rows(start: date, days: int, hour: int = 0) -> Iterator[dict]:
    """One record per day at the given UTC hour."""
    for i in range(days):
        d = start + timedelta(days=i)
        when = datetime(d.year, d.month, d.day, hour, tzinfo=timezone.utc)
        jd = ts.julian_day(when)
        res = phase.lunar_phase(jd)
        ill = phase.illumination(res.phase_angle_deg)
        yield {
            "date": d,
            "jd": jd,
            "elongation": res.elongation_deg,
            "phase_angle": res.phase_angle_deg,
            "fraction": ill.text,
            "name": phase.phase_name(res.elongation_deg),
        }


def render(rows: List[dict]) -> str:
    lines = [f"{'date':<10}  {'JD':>14}  {'elong':>7}  {'phase':>7}  {'k':>5}  name"]
    for r in rows:
        lines.append(
            f"{r['date'].isoformat():<10}  {r['jd']:14.5f}  {r['elongation']:7.2f}  "
            f"{r['phase_angle']:7.2f}  {r['fraction']:>5}  {r['name']}"
        )
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(
        prog="lunaphase table",
        description="Print a daily table of lunar elongation, phase angle and illuminated fraction.",
    )
    p.add_argument("--start", default=None, help="YYYY-MM-DD (default: today, UTC)")
    p.add_argument("--days", type=int, default=30)
    p.add_argument("--hour", type=int, default=0, help="UTC hour of each sample (0-23)")
    args = p.parse_args(argv)

    if args.days < 1:
        p.error("--days must be positive")
    if not 0 <= args.hour <= 23:
        p.error("--hour must lie in 0..23")

    try:
        start = _parse_ymd(args.start) if args.start else ts.utc_now().date()
    except ValueError as e:
        p.error(f"invalid --start value {args.start!r}: {e}")
    print(render(list(daily_rows(start, args.days, args.hour))))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
