#!/usr/bin/env python3
from __future__ import annotations

import argparse

import calvn


def leap_row(Y: int, engine: str) -> str:
    dec = calvn.leap_month_info(Y, engine=engine)
    if not dec.has_leap:
        return f"{Y}  -"
    months = calvn.lunar_months(Y, engine=engine)
    hit = next((m for m in months if m["is_leap_month"]), None)
    where = (
        f"starts {hit['first_date'].isoformat()} ({hit['days']} days)"
        if hit is not None
        else "not reached before the next new year"
    )
    return f"{Y}  leap {dec.leap_month:2d}  {where}"


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        prog="calvn leap-months",
        description="List leap-month decisions and where the walk places the leap month.",
    )
    p.add_argument("--from-year", type=int, default=2015)
    p.add_argument("--to-year", type=int, default=2040)
    p.add_argument("--engine", default="vietnam")
    args = p.parse_args(argv)

    if args.to_year < args.from_year:
        raise SystemExit("--to-year must be >= --from-year")

    n = 0
    for Y in range(args.from_year, args.to_year + 1):
        print(leap_row(Y, args.engine))
        n += calvn.leap_month_info(Y, engine=args.engine).has_leap

    span = args.to_year - args.from_year + 1
    print(f"\n{n} leap years in {span} ({n / span:.3f}; Metonic ratio 7/19 = {7 / 19:.3f})")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
