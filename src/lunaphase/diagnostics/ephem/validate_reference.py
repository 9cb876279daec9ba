#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional

from lunaphase.diagnostics.ephem import require_ephemeris
from lunaphase.core.errors import EphemerisUnavailableError
from lunaphase.reference import astro_args as aa
from lunaphase.reference import phase
from lunaphase.reference.angles import wrap180
from lunaphase.reference.ephemeris import moon_and_sun_position


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise EphemerisUnavailableError('Need numpy. Install: pip install "lunaphase[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise EphemerisUnavailableError('Need matplotlib. Install: pip install "lunaphase[diagnostics]"') from e


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Validate the truncated lunar/solar series against a JPL ephemeris (skyfield).")
    p.add_argument("--year-start", type=int, default=1950)
    p.add_argument("--year-end", type=int, default=2049)
    p.add_argument("--step-days", type=float, default=5.0)
    p.add_argument("--bsp", default="de421.bsp", help="JPL kernel loaded through skyfield")
    p.add_argument("--out-png", default=None, help="Also plot residuals to this PNG file")
    args = p.parse_args(argv)

    require_ephemeris()
    np = _need_numpy()

    from skyfield import almanac
    from skyfield.api import load
    from skyfield.framelib import ecliptic_frame

    print(f"Loading {args.bsp} ...")
    ts = load.timescale()
    eph = load(args.bsp)
    earth, moon, sun = eph["earth"], eph["moon"], eph["sun"]

    jd_start = aa.J2000_JD + (args.year_start - 2000) * 365.25
    jd_end = aa.J2000_JD + (args.year_end - 2000) * 365.25
    if jd_start >= jd_end:
        raise ValueError("--year-start must precede --year-end")

    jds = np.arange(jd_start, jd_end, args.step_days)
    years = 2000 + (jds - aa.J2000_JD) / 365.25
    print(f"Validating {len(jds)} points from {years[0]:.0f} to {years[-1]:.0f}...")

    # 1. Reference coordinates (ecliptic and equinox of date)
    t = ts.tt_jd(jds)
    e = earth.at(t)
    m_lat, m_lon, _ = e.observe(moon).apparent().frame_latlon(ecliptic_frame)
    _, s_lon, _ = e.observe(sun).apparent().frame_latlon(ecliptic_frame)
    ref_k = almanac.fraction_illuminated(eph, "moon", t)

    # 2. Truncated series, residuals in degrees
    err_moon_lon = np.empty_like(jds)
    err_moon_lat = np.empty_like(jds)
    err_sun_lon = np.empty_like(jds)
    err_k = np.empty_like(jds)
    for i, jd in enumerate(jds):
        pos = moon_and_sun_position(float(jd))
        err_moon_lon[i] = wrap180(pos.moon.lon_deg - m_lon.degrees[i])
        err_moon_lat[i] = pos.moon.lat_deg - m_lat.degrees[i]
        err_sun_lon[i] = wrap180(pos.sun.lon_deg - s_lon.degrees[i])
        k = phase.illuminated_fraction(phase.lunar_phase(float(jd)).phase_angle_deg)
        err_k[i] = k - ref_k[i]

    rows = [
        ("Lunar longitude (deg)", err_moon_lon),
        ("Lunar latitude  (deg)", err_moon_lat),
        ("Solar longitude (deg)", err_sun_lon),
        ("Illuminated fraction", err_k),
    ]
    print(f"{'quantity':<24}{'mean':>12}{'rms':>12}{'max |err|':>12}")
    for name, err in rows:
        rms = float(np.sqrt(np.mean(err * err)))
        print(f"{name:<24}{float(np.mean(err)):12.5f}{rms:12.5f}{float(np.max(np.abs(err))):12.5f}")

    if args.out_png:
        plt = _need_matplotlib()
        fig, axs = plt.subplots(len(rows), 1, figsize=(12, 12), sharex=True)
        for ax, (name, err) in zip(axs, rows):
            ax.scatter(years, err, s=1, alpha=0.5)
            ax.set_title(f"{name}: series - {args.bsp}")
            ax.grid(True, alpha=0.3)
        axs[-1].set_xlabel("Year")
        plt.tight_layout()
        plt.savefig(args.out_png, dpi=200)
        print(f"Plot saved to {args.out_png}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
