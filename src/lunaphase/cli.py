from __future__ import annotations

import argparse
from datetime import datetime, timezone
import logging
import sys
import importlib
import inspect
from typing import Optional


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


def _parse_utc(s: str) -> datetime:
    """ISO 8601 timestamp; naive values are read as UTC."""
    dt = datetime.fromisoformat(s)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def _resolve_jd(p: argparse.ArgumentParser, jd: Optional[float], utc: Optional[str]) -> float:
    from lunaphase.reference import time_scales as ts

    if jd is not None:
        return jd
    if utc is not None:
        try:
            return ts.julian_day(_parse_utc(utc))
        except ValueError as e:
            p.error(f"invalid --utc value {utc!r}: {e}")
    return ts.julian_day_now()


def cmd_now(argv: list[str]) -> int:
    import lunaphase

    p = argparse.ArgumentParser(prog="lunaphase now", description="Print the current illuminated fraction of the Moon.")
    p.parse_args(argv)

    print(lunaphase.illuminated_fraction_now())
    return 0


def cmd_phase(argv: list[str]) -> int:
    from lunaphase.reference import phase
    from lunaphase.reference import time_scales as ts

    p = argparse.ArgumentParser(prog="lunaphase phase", description="Elongation, phase angle and illuminated fraction.")
    g = p.add_mutually_exclusive_group()
    g.add_argument("--jd", type=float, default=None, help="Julian Date (default: now)")
    g.add_argument("--utc", default=None, help="ISO 8601 UTC timestamp, e.g. 2024-01-25T17:54")
    args = p.parse_args(argv)

    jd = _resolve_jd(p, args.jd, args.utc)
    res = phase.lunar_phase(jd)
    ill = phase.illumination(res.phase_angle_deg)

    print(f"Time Input:")
    print(f"  JD  = {jd:.6f}")
    print(f"  JDN = {ts.jd_to_jdn(jd)}")
    print()
    print("Lunar Phase:")
    print(f"  Elongation   (Moon - Sun) = {res.elongation_deg:.6f} deg")
    print(f"  Phase angle               = {res.phase_angle_deg:.6f} deg")
    print(f"  Illuminated fraction      = {ill.text}")
    print(f"  Phase                     = {phase.phase_name(res.elongation_deg)} ({'waxing' if res.waxing else 'waning'})")
    return 0


def cmd_positions(argv: list[str]) -> int:
    from lunaphase.reference import astro_args as aa
    from lunaphase.reference.ephemeris import moon_and_sun_position
    from lunaphase.reference.lunar import AU_KM
    from lunaphase.reference import time_scales as ts

    p = argparse.ArgumentParser(
        prog="lunaphase positions",
        description="Print fundamental arguments and lunar/solar positions at a given JD.",
    )
    g = p.add_mutually_exclusive_group()
    g.add_argument("--jd", type=float, default=None, help="Julian Date (default: now)")
    g.add_argument("--utc", default=None, help="ISO 8601 UTC timestamp")
    args = p.parse_args(argv)

    jd = _resolve_jd(p, args.jd, args.utc)
    T = aa.T_centuries(jd)
    fa = aa.fundamental_args(T)
    pos = moon_and_sun_position(jd)

    print(f"JD  = {jd:.6f}")
    print(f"JDN = {ts.jd_to_jdn(jd)}")
    print(f"T (Julian centuries from J2000.0) = {T:.12f}")
    print()
    print("Fundamental arguments (degrees, wrapped to [0,360))")
    print(f"  L'moon = {fa.Lm0_deg:.6f}")
    print(f"  L'sun  = {fa.Ls0_deg:.6f}")
    print(f"  D      = {fa.D_deg:.6f}")
    print(f"  F      = {fa.F_deg:.6f}")
    print(f"  M'     = {fa.Ml_deg:.6f}")
    print(f"  Omega  = {fa.Nl_deg:.6f}")
    print(f"  M      = {fa.Ms_deg:.6f}")
    print()
    print("Moon:")
    print(f"  Longitude = {pos.moon.lon_deg % 360.0:.6f} deg")
    print(f"  Latitude  = {pos.moon.lat_deg:.6f} deg")
    print(f"  Distance  = {pos.moon.distance_au * AU_KM:.1f} km")
    print("Sun:")
    print(f"  Longitude = {pos.sun.lon_deg % 360.0:.6f} deg")
    print(f"  Distance  = {pos.sun.distance_au:.6f} AU")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # accepted before or after the subcommand; SUPPRESS keeps a subparser
    # from resetting a flag given to the main parser
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("-v", "--verbose", action="store_true", default=argparse.SUPPRESS, help="debug logging")

    p = argparse.ArgumentParser(prog="lunaphase", description="Lunar phase toolkit CLI.", parents=[common])
    sub = p.add_subparsers(dest="cmd")

    sub.add_parser("now", parents=[common], help="Print the current illuminated fraction (default)")
    sub.add_parser("phase", parents=[common], help="Elongation, phase angle and illuminated fraction at a JD or UTC instant")
    sub.add_parser("positions", parents=[common], help="Fundamental arguments and Moon/Sun positions")
    sub.add_parser("table", parents=[common], help="Daily illuminated fraction table (diagnostics)")

    p_ephem = sub.add_parser("ephem", parents=[common], help="Ephemeris-based diagnostics")
    p_ephem.add_argument("tool", choices=["validate-ref"], help="Which ephemeris diagnostic to run")

    args, rest = p.parse_known_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if getattr(args, "verbose", False) else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.cmd is None or args.cmd == "now":
        return cmd_now(rest)

    if args.cmd == "phase":
        return cmd_phase(rest)

    if args.cmd == "positions":
        return cmd_positions(rest)

    if args.cmd == "table":
        return _run_module_main("lunaphase.diagnostics.phase_table", rest)

    if args.cmd == "ephem":
        tool_map = {
            "validate-ref": "lunaphase.diagnostics.ephem.validate_reference",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
