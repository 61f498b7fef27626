from __future__ import annotations

import argparse
from datetime import date
import logging
import sys
import re
import importlib
import inspect


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


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


def _setup_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def cmd_day(argv: list[str]) -> int:
    import calvn

    p = argparse.ArgumentParser(prog="calvn day", description="Gregorian -> Vietnamese lunar date")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--engine", default="vietnam")
    p.add_argument("--debug", action="store_true")
    p.add_argument("--attr", action="append", default=[], help="attribute name (repeatable)")
    args = p.parse_args(argv)

    d = _parse_ymd(args.date)
    info = calvn.day_info(d, engine=args.engine, attributes=tuple(args.attr), debug=args.debug)
    t = info.lunar
    print(f"{d.isoformat()}  ->  {t.day:02d}/{t.month:02d}{'L' if t.is_leap_month else ''}/{t.year}  ({t.day} {t.month_name} năm {t.year})")
    if info.attributes:
        for k, v in info.attributes.items():
            print(f"  {k}: {v}")
    if info.debug:
        for k, v in info.debug.items():
            print(f"  {k}: {v}")
    return 0


def cmd_new_year(argv: list[str]) -> int:
    import calvn

    p = argparse.ArgumentParser(prog="calvn new-year", description="Gregorian date of Tet for a year")
    p.add_argument("year", type=int)
    p.add_argument("--engine", default="vietnam")
    args = p.parse_args(argv)

    print(calvn.lunar_new_year(args.year, engine=args.engine).isoformat())
    return 0


def cmd_next_tet(argv: list[str]) -> int:
    import calvn

    p = argparse.ArgumentParser(prog="calvn next-tet", description="First Tet on or after a date (default: today)")
    p.add_argument("date", nargs="?", default=None, help="YYYY-MM-DD")
    p.add_argument("--engine", default="vietnam")
    args = p.parse_args(argv)

    d = _parse_ymd(args.date) if args.date else date.today()
    ny = calvn.next_new_year(d, engine=args.engine)
    print(f"{ny.isoformat()}  ({(ny - d).days} days)")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `calvn YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_day(argv)

    p = argparse.ArgumentParser(prog="calvn", description="Vietnamese lunar calendar toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    # day
    p_day = sub.add_parser("day", help="Gregorian -> lunar date")
    p_day.add_argument("date", help="YYYY-MM-DD")
    p_day.add_argument("--engine", default="vietnam")
    p_day.add_argument("--debug", action="store_true")
    p_day.add_argument("--attr", action="append", default=[], help="attribute name (repeatable)")

    sub.add_parser("new-year", help="Gregorian date of Tet for a year")
    sub.add_parser("next-tet", help="First Tet on or after a date")

    # diagnostics
    sub.add_parser("new-years", help="Print Tet table per engine (diagnostics)")
    sub.add_parser("leap-months", help="Print leap-month decisions (diagnostics)")
    sub.add_parser("scatter", help="Plot Tet day-of-year per engine (needs diagnostics extra)")

    args, rest = p.parse_known_args(argv)
    _setup_logging(args.verbose)

    if args.cmd == "day":
        day_argv = [args.date]
        if args.engine != "vietnam":
            day_argv += ["--engine", args.engine]
        if args.debug:
            day_argv += ["--debug"]
        for a in args.attr:
            day_argv += ["--attr", a]
        day_argv += rest
        return cmd_day(day_argv)

    if args.cmd == "new-year":
        return cmd_new_year(rest)

    if args.cmd == "next-tet":
        return cmd_next_tet(rest)

    tool_map = {
        "new-years": "calvn.diagnostics.new_years_table",
        "leap-months": "calvn.diagnostics.leap_months",
        "scatter": "calvn.diagnostics.new_year_scatter",
    }
    if args.cmd in tool_map:
        return _run_module_main(tool_map[args.cmd], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
