from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys

_DATE_RE = re.compile(r"^-?\d{1,4}-\d{2}-\d{2}$")

logger = logging.getLogger(__name__)


def _parse_ymd(s: str) -> tuple[int, int, int]:
    sign = -1 if s.startswith("-") else 1
    y, m, d = map(int, s.lstrip("-").split("-"))
    return sign * y, m, d


def _date_for(s: str, calendar: str, era: str = "AM"):
    from ethiocal import EthiopicDate, GregorianDate

    y, m, d = _parse_ymd(s)
    if calendar == "ethiopic":
        return EthiopicDate(y, m, d, era)
    return GregorianDate(y, m, d)


def _fmt(d) -> str:
    return d.isoformat()


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


def cmd_to_ethiopic(argv: list[str]) -> int:
    import ethiocal

    p = argparse.ArgumentParser(prog="ethiocal to-ethiopic", description="Gregorian -> Ethiopic date")
    p.add_argument("date", help="YYYY-MM-DD (Gregorian)")
    p.add_argument("--highlights", action="store_true", help="also list highlights on that day")
    args = p.parse_args(argv)

    g = _date_for(args.date, "gregorian")
    e = ethiocal.to_ethiopic(g)
    wd = ethiocal.weekday_from_jdn(ethiocal.gregorian_to_jdn(g.year, g.month, g.day))
    print(f"{_fmt(g)} -> {_fmt(e)}  (weekday {wd}, 0=Sunday)")
    if args.highlights:
        for h in ethiocal.get_highlights_for_gregorian_day(g):
            print(f"  {h.id:20s} {h.name}  /  {h.amharic_name}")
    return 0


def cmd_to_gregorian(argv: list[str]) -> int:
    import ethiocal

    p = argparse.ArgumentParser(prog="ethiocal to-gregorian", description="Ethiopic -> Gregorian date")
    p.add_argument("date", help="YYYY-MM-DD (Ethiopic, month 13 = Pagume)")
    p.add_argument("--era", choices=["AM", "AA"], default="AM")
    p.add_argument("--highlights", action="store_true", help="also list highlights on that day")
    args = p.parse_args(argv)

    e = _date_for(args.date, "ethiopic", args.era)
    g = ethiocal.to_gregorian(e)
    print(f"{_fmt(e)} -> {_fmt(g)}")
    if args.highlights:
        for h in ethiocal.get_highlights_for_ethiopic_day(e):
            print(f"  {h.id:20s} {h.name}  /  {h.amharic_name}")
    return 0


def cmd_progress(argv: list[str]) -> int:
    import ethiocal

    p = argparse.ArgumentParser(prog="ethiocal progress", description="Days left and % of the year completed")
    p.add_argument("date", nargs="?", help="YYYY-MM-DD (default: today, UTC)")
    p.add_argument("--calendar", choices=["gregorian", "ethiopic"], default="gregorian")
    p.add_argument("--era", choices=["AM", "AA"], default="AM")
    args = p.parse_args(argv)

    d = _date_for(args.date, args.calendar, args.era) if args.date else ethiocal.today(args.calendar)
    yp = ethiocal.year_progress(d, args.calendar)
    print(f"{_fmt(d)}: {yp.days_left} of {yp.total_days_in_year} days left, {yp.percent_completed:.2f}% completed")
    return 0


def cmd_add(argv: list[str]) -> int:
    import ethiocal

    p = argparse.ArgumentParser(prog="ethiocal add", description="Calendar-aware date arithmetic")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--calendar", choices=["gregorian", "ethiopic"], default="gregorian")
    p.add_argument("--era", choices=["AM", "AA"], default="AM")
    p.add_argument("--days", type=int, default=0)
    p.add_argument("--months", type=int, default=0)
    p.add_argument("--years", type=int, default=0)
    args = p.parse_args(argv)

    d = _date_for(args.date, args.calendar, args.era)
    # years, then months, then days
    out = ethiocal.add_years(d, args.years, args.calendar)
    out = ethiocal.add_months(out, args.months, args.calendar)
    out = ethiocal.add_days(out, args.days, args.calendar)
    print(_fmt(out))
    return 0


def cmd_highlights(argv: list[str]) -> int:
    import ethiocal

    p = argparse.ArgumentParser(prog="ethiocal highlights", description="List all highlights of a year")
    p.add_argument("--year", type=int, help="Year in the chosen calendar (default: current)")
    p.add_argument("--calendar", choices=["gregorian", "ethiopic"], default="gregorian")
    p.add_argument("--category", choices=["religious", "national", "observance"])
    args = p.parse_args(argv)

    year = args.year if args.year is not None else ethiocal.today(args.calendar).year
    for r in ethiocal.list_all_highlights(year, args.calendar):
        if args.category and r.category != args.category:
            continue
        print(f"{_fmt(r.gregorian)}  {_fmt(r.ethiopic)}  {r.id:20s} {r.name}  /  {r.amharic_name}")
    return 0


def cmd_search(argv: list[str]) -> int:
    import ethiocal

    p = argparse.ArgumentParser(prog="ethiocal search", description="Search highlights by English or Amharic name")
    p.add_argument("query")
    p.add_argument("--year", type=int, help="Gregorian year for movable highlights (default: current)")
    args = p.parse_args(argv)

    hits = ethiocal.search_highlights(args.query, year=args.year)
    if not hits:
        print("(none)")
    for h in hits:
        print(f"{h.calendar:9s} {h.month:02d}-{h.day:02d}  {h.id:20s} {h.name}  /  {h.amharic_name}")
    return 0


def cmd_easter(argv: list[str]) -> int:
    import ethiocal

    p = argparse.ArgumentParser(prog="ethiocal easter", description="Orthodox Easter (Fasika) and dependent feasts")
    p.add_argument("year", type=int, help="Gregorian year")
    args = p.parse_args(argv)

    for label, fn in (
        ("Hosanna", ethiocal.hosanna_gregorian),
        ("Good Friday", ethiocal.good_friday_gregorian),
        ("Fasika", ethiocal.orthodox_easter_gregorian),
    ):
        g = fn(args.year)
        print(f"{label:12s} {_fmt(g)}  {_fmt(ethiocal.to_ethiopic(g))}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    from ethiocal.core.errors import EthiocalError

    # Shorthand: `ethiocal YYYY-MM-DD ...` converts a Gregorian date
    if argv and _DATE_RE.match(argv[0]):
        argv = ["to-ethiopic"] + argv

    p = argparse.ArgumentParser(prog="ethiocal", description="Ethiopic / Gregorian calendar toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("to-ethiopic", help="Gregorian -> Ethiopic date")
    sub.add_parser("to-gregorian", help="Ethiopic -> Gregorian date")
    sub.add_parser("progress", help="Year progress in either calendar")
    sub.add_parser("add", help="Add days/months/years in either calendar")
    sub.add_parser("highlights", help="List all highlights of a year")
    sub.add_parser("search", help="Search highlights by name")
    sub.add_parser("easter", help="Orthodox Easter and dependent feasts for a year")

    # diagnostics
    sub.add_parser("pretty-month", help="Print Ethiopic/Gregorian month grids (diagnostics)")
    sub.add_parser("feasts", help="Print movable feast table over a span of years (diagnostics)")
    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "feast-scatter"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    commands = {
        "to-ethiopic": cmd_to_ethiopic,
        "to-gregorian": cmd_to_gregorian,
        "progress": cmd_progress,
        "add": cmd_add,
        "highlights": cmd_highlights,
        "search": cmd_search,
        "easter": cmd_easter,
    }

    try:
        if args.cmd in commands:
            return commands[args.cmd](rest)

        if args.cmd == "pretty-month":
            return _run_module_main("ethiocal.diagnostics.pretty_month", rest)

        if args.cmd == "feasts":
            return _run_module_main("ethiocal.diagnostics.feast_table", rest)

        if args.cmd == "diag":
            tool_map = {
                "round-trip": "ethiocal.diagnostics.round_trip",
                "feast-scatter": "ethiocal.diagnostics.feast_scatter",
            }
            return _run_module_main(tool_map[args.tool], rest)
    except EthiocalError as e:
        logger.debug("command %s failed", args.cmd, exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
