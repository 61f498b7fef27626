#!/usr/bin/env python3
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import argparse

import calvn
from calvn.core.time import day_of_year


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "calvn[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "calvn[diagnostics]"') from e


@dataclass(frozen=True)
class Style:
    label: str
    color: str
    marker: str
    size: float = 16.0
    hollow: bool = False
    linewidths: float = 0.0


DEFAULT_STYLES: Dict[str, Style] = {
    "vietnam": Style("Known table + fallback", "tab:red", "o", size=14),
    "vietnam-astro": Style("Astronomical fallback", "0.35", "o", size=40, hollow=True, linewidths=1.0),
}


def build_series(np, engine: str, start_year: int, end_year: int) -> Tuple["np.ndarray", "np.ndarray"]:
    years = np.arange(start_year, end_year + 1, dtype=int)
    y = np.empty_like(years, dtype=float)
    for i, Y in enumerate(years):
        y[i] = float(day_of_year(calvn.lunar_new_year(int(Y), engine=engine)))
    return years, y


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(prog="calvn scatter", description="Scatter plot of Tet day-of-year per engine.")
    p.add_argument("--from-year", type=int, default=1950)
    p.add_argument("--to-year", type=int, default=2050)
    p.add_argument("--out", default="tet_scatter.png", help="Output image file")
    args = p.parse_args(argv)

    if args.to_year < args.from_year:
        raise SystemExit("--to-year must be >= --from-year")

    np = _need_numpy()
    plt = _need_matplotlib()

    plt.rcParams.update({
        "font.size": 10,
        "axes.labelsize": 11,
        "axes.titlesize": 12,
        "legend.fontsize": 10,
    })

    fig, ax = plt.subplots(figsize=(9.2, 4.8), constrained_layout=True)
    ax.set_axisbelow(True)
    ax.grid(True, which="major", color="0.88", linewidth=0.7)
    ax.set_xlabel("Gregorian year")
    ax.set_ylabel("Day-of-year (Jan 1 = 1)")
    ax.set_title("Tet (Vietnamese Lunar New Year)")

    # plausibility window, Jan 15 .. Feb 18
    ax.axhspan(15, 49, color="0.95", zorder=0)

    for eng, st in DEFAULT_STYLES.items():
        x, y = build_series(np, eng, args.from_year, args.to_year)
        if st.hollow:
            ax.scatter(x, y, s=st.size, marker=st.marker, facecolors="none",
                       edgecolors=st.color, linewidths=st.linewidths, alpha=0.6, label=st.label)
        else:
            ax.scatter(x, y, s=st.size, marker=st.marker, c=st.color,
                       linewidths=st.linewidths, alpha=0.8, label=st.label)

    ax.legend(loc="upper left", frameon=False)
    fig.savefig(args.out, dpi=200)
    print(f"Saved: {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
