from __future__ import annotations

from datetime import date
import argparse
from typing import List, Tuple

import calvn


DEFAULT_ENGINES: List[Tuple[str, str]] = [
    ("Table", "vietnam"),
    ("Astro", "vietnam-astro"),
]


def mmdd(d: date) -> str:
    return f"{d.month:02d}-{d.day:02d}"


def parse_engines(arg: str) -> List[Tuple[str, str]]:
    """
    Parse engine list from CLI.
    Example:
      --engines "Table=vietnam,Astro=vietnam-astro"
    Bare engine names are used as column titles:
      --engines "vietnam,my-engine"
    """
    items = [x.strip() for x in arg.split(",") if x.strip()]
    out: List[Tuple[str, str]] = []
    for it in items:
        if "=" in it:
            name, eng = it.split("=", 1)
            out.append((name.strip(), eng.strip()))
        else:
            out.append((it, it))
    return out


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        prog="calvn new-years",
        description="Print Tet dates per engine, with the day difference between the first two.",
    )
    p.add_argument("--from-year", type=int, default=2015)
    p.add_argument("--to-year", type=int, default=2040)
    p.add_argument(
        "--engines",
        type=str,
        default="",
        help='Comma list like "Table=vietnam,Astro=vietnam-astro" (default: both bundled engines).',
    )
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="mmdd",
        help="Display format in table columns (default: mmdd).",
    )
    args = p.parse_args(argv)

    engines = parse_engines(args.engines) if args.engines else DEFAULT_ENGINES

    def fmt(d: date) -> str:
        return mmdd(d) if args.dates == "mmdd" else d.isoformat()

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    # table header
    headers = ["Year"] + [name for name, _ in engines]
    colw = [5] + [max(10 if args.dates == "iso" else 6, len(h)) for h in headers[1:]]
    if len(engines) >= 2:
        headers.append("Diff")
        colw.append(4)
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    mismatches = 0
    for Y in range(Y0, Y1 + 1):
        row = [str(Y).ljust(colw[0])]
        dates = []
        for (_, eng), w in zip(engines, colw[1:]):
            d = calvn.lunar_new_year(Y, engine=eng)
            dates.append(d)
            row.append(fmt(d).ljust(w))
        if len(dates) >= 2:
            diff = (dates[1] - dates[0]).days
            mismatches += diff != 0
            row.append(f"{diff:+d}" if diff else "0")
        print("  ".join(row))

    if len(engines) >= 2:
        print(f"\n{mismatches} of {Y1 - Y0 + 1} years differ between {engines[0][0]} and {engines[1][0]}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
