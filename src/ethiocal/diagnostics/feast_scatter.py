#!/usr/bin/env python3
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import argparse

import ethiocal
from ethiocal.highlights import DYNAMIC_RULES, rule_occurrences


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "ethiocal[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "ethiocal[diagnostics]"') from e


def day_of_year(gy: int, month: int, day: int) -> int:
    return ethiocal.gregorian_to_jdn(gy, month, day) - ethiocal.gregorian_to_jdn(gy, 1, 1) + 1


def days_since_enkutatash(gy: int, month: int, day: int) -> int:
    """
    Days since the most recent 1 Meskerem, with 1 Meskerem = 1.
    """
    e = ethiocal.to_ethiopic(ethiocal.GregorianDate(gy, month, day))
    return ethiocal.ethiopic_to_jdn(e.year, e.month, e.day) - ethiocal.ethiopic_to_jdn(e.year, 1, 1) + 1


@dataclass(frozen=True)
class Style:
    label: str
    color: str
    marker: str
    linewidths: float = 0.0
    size: float = 16.0
    hollow: bool = False


def build_series(np, rule_id: str, start_year: int, end_year: int, *, metric: str) -> Tuple["np.ndarray", "np.ndarray"]:
    """One point per occurrence: Islamic rules may give two points (or none) in a year."""
    rule = next(r for r in DYNAMIC_RULES if r.id == rule_id)
    xs: List[int] = []
    ys: List[int] = []
    for gy in range(start_year, end_year + 1):
        for md in rule_occurrences(rule, gy):
            xs.append(gy)
            if metric == "doy":
                ys.append(day_of_year(gy, md.month, md.day))
            elif metric == "since-enkutatash":
                ys.append(days_since_enkutatash(gy, md.month, md.day))
            else:
                raise ValueError("metric must be 'doy' or 'since-enkutatash'")
    return np.asarray(xs, dtype=int), np.asarray(ys, dtype=float)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Scatter plot of movable highlight dates across years.")
    p.add_argument("--start-year", type=int, default=1950)
    p.add_argument("--end-year", type=int, default=2100)
    p.add_argument("--outbase", default="feast_scatter", help="Output base name (writes .png)")
    p.add_argument(
        "--metric",
        choices=("doy", "since-enkutatash"),
        default="doy",
        help="Y-axis metric (default: Gregorian day-of-year).",
    )
    args = p.parse_args(argv)

    if args.end_year < args.start_year:
        raise SystemExit("--end-year must be >= --start-year")

    np = _need_numpy()
    plt = _need_matplotlib()

    styles: Dict[str, Style] = {
        "fasika":             Style("Fasika",             "tab:blue",  "o", size=12),
        "eid_al_fitr":        Style("Eid al-Fitr",        "tab:green", "o", linewidths=1.2, size=18, hollow=True),
        "eid_al_adha":        Style("Eid al-Adha",        "tab:red",   "_", linewidths=1.0, size=18),
        "irreechaa_bishoftu": Style("Irreechaa Bishoftu", "0.45",      "|", linewidths=1.0, size=18),
    }

    plt.rcParams.update({
        "font.size": 10,
        "axes.labelsize": 11,
        "axes.titlesize": 12,
        "legend.fontsize": 10,
        "axes.linewidth": 0.8,
    })

    fig, ax = plt.subplots(figsize=(9.2, 4.8), constrained_layout=True)
    ax.set_axisbelow(True)
    ax.grid(True, which="major", color="0.88", linewidth=0.7)

    ax.set_xlabel("Gregorian year")
    if args.metric == "doy":
        ax.set_ylabel("Day-of-year (Jan 1 = 1)")
    else:
        ax.set_ylabel("Days since Enkutatash (1 Meskerem = 1)")
    ax.set_title("Movable highlights across years")

    for rule_id, st in styles.items():
        x, y = build_series(np, rule_id, args.start_year, args.end_year, metric=args.metric)
        if st.hollow:
            ax.scatter(x, y, s=st.size, marker=st.marker, facecolors="none",
                       edgecolors=st.color, linewidths=st.linewidths, alpha=0.60, label=st.label)
        else:
            ax.scatter(x, y, s=st.size, marker=st.marker, c=st.color,
                       linewidths=st.linewidths, alpha=0.35, label=st.label)

    ax.legend(loc="center left", bbox_to_anchor=(1.02, 0.5), frameon=False)

    outbase = args.outbase
    fig.savefig(outbase + ".png", dpi=300)
    print(f"Saved: {outbase}.png")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
