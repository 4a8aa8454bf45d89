from __future__ import annotations

import argparse

import ethiocal
from ethiocal import EthiopicDate, GregorianDate


def dow_header() -> str:
    return "Mo     Tu     We     Th     Fr     Sa     Su"


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def print_grid(title: str, weeks: list[list[tuple[str, str]]]) -> None:
    print(title)
    print(dow_header())
    print("-" * len(dow_header()))
    for wk in weeks:
        print(" ".join(c[0] for c in wk))
        print(" ".join(c[1] for c in wk))
    print()


def layout_weeks(first_jdn: int, days: list[tuple[str, str]]) -> list[list[tuple[str, str]]]:
    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = []
    pad = (ethiocal.weekday_from_jdn(first_jdn) + 6) % 7  # Monday=0
    for _ in range(pad):
        wk.append(cell("", ""))
    for top, bot in days:
        wk.append(cell(top, bot))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
    if wk:
        while len(wk) < 7:
            wk.append(cell("", ""))
        weeks.append(wk)
    return weeks


def _marked(n: int, has_highlight: bool) -> str:
    return f"{n:2d}{'*' if has_highlight else ''}"


def ethiopic_month_calendar(year: int, month: int) -> None:
    n = ethiocal.ethiopic_days_in_month(year, month)
    first_jdn = ethiocal.ethiopic_to_jdn(year, month, 1)
    marked = {h.day for h in ethiocal.get_highlights_for_month(year, month, "ethiopic")}

    days = []
    for day in range(1, n + 1):
        g = ethiocal.to_gregorian(EthiopicDate(year, month, day))
        days.append((_marked(day, day in marked), f"{g.month:02d}-{g.day:02d}"))

    g0 = ethiocal.to_gregorian(EthiopicDate(year, month, 1))
    g1 = ethiocal.to_gregorian(EthiopicDate(year, month, n))
    title = f"Ethiopic month  {year}-{month:02d} AM   ({g0.isoformat()} .. {g1.isoformat()})"
    print_grid(title, layout_weeks(first_jdn, days))


def gregorian_month_calendar(gy: int, gm: int) -> None:
    n = ethiocal.gregorian_days_in_month(gy, gm)
    first_jdn = ethiocal.gregorian_to_jdn(gy, gm, 1)
    marked = {h.day for h in ethiocal.get_highlights_for_month(gy, gm, "gregorian")}

    days = []
    for day in range(1, n + 1):
        e = ethiocal.to_ethiopic(GregorianDate(gy, gm, day))
        days.append((_marked(day, day in marked), f"{e.month:02d}-{e.day:02d}"))

    title = f"Gregorian month  {gy}-{gm:02d}"
    print_grid(title, layout_weeks(first_jdn, days))


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print an Ethiopic-month and/or a Gregorian-month calendar with paired labels (* = highlight)."
    )
    p.add_argument("--eth", nargs=2, type=int, metavar=("Y", "M"),
                   help="Ethiopic month to print: Y M (e.g. 2018 1; 13 = Pagume)")
    p.add_argument("--greg", nargs=2, type=int, metavar=("GY", "GM"),
                   help="Gregorian month to print: GY GM (e.g. 2025 9)")
    args = p.parse_args(argv)

    if not args.eth and not args.greg:
        # sensible default demo: the current month in both calendars
        e = ethiocal.today("ethiopic")
        g = ethiocal.today("gregorian")
        ethiopic_month_calendar(e.year, e.month)
        gregorian_month_calendar(g.year, g.month)
        return 0

    if args.eth:
        y, m = args.eth
        ethiopic_month_calendar(y, m)

    if args.greg:
        gy, gm = args.greg
        gregorian_month_calendar(gy, gm)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
