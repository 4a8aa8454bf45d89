from __future__ import annotations

import argparse
from typing import List, Tuple

from ethiocal import GregorianDate
from ethiocal.core.types import DynamicRule
from ethiocal.highlights import DYNAMIC_RULES, rule_occurrences


def mmdd(month: int, day: int) -> str:
    return f"{month:02d}-{day:02d}"


def parse_rules(arg: str) -> List[DynamicRule]:
    """
    Parse a rule id list from CLI.
    Example:
      --rules "fasika,eid_al_fitr,irreechaa_bishoftu"
    """
    by_id = {r.id: r for r in DYNAMIC_RULES}
    out: List[DynamicRule] = []
    for it in (x.strip() for x in arg.split(",")):
        if not it:
            continue
        if it not in by_id:
            raise SystemExit(f"Unknown rule '{it}'. Available: {sorted(by_id)}")
        out.append(by_id[it])
    return out


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a table of movable highlight dates (Gregorian) over a span of years."
    )
    p.add_argument("--from-year", type=int, default=2020)
    p.add_argument("--to-year", type=int, default=2035)
    p.add_argument(
        "--rules",
        type=str,
        default="",
        help='Comma list of rule ids like "fasika,eid_al_fitr" (default: all movable highlights).',
    )
    p.add_argument(
        "--list-month",
        type=int,
        default=0,
        help="After the table, list all occurrences that fall in this Gregorian month (default: off).",
    )
    args = p.parse_args(argv)

    rules = parse_rules(args.rules) if args.rules else list(DYNAMIC_RULES)

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    # table header; Islamic dates may occur twice in one Gregorian year
    headers = ["Year"] + [r.id for r in rules]
    colw = [5] + [max(11, len(h)) for h in headers[1:]]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    hits: list[Tuple[GregorianDate, str]] = []

    for Y in range(Y0, Y1 + 1):
        row = [str(Y).ljust(colw[0])]
        for rule, w in zip(rules, colw[1:]):
            occ = rule_occurrences(rule, Y)
            row.append(("/".join(mmdd(md.month, md.day) for md in occ) or "-").ljust(w))
            for md in occ:
                if md.month == args.list_month:
                    hits.append((GregorianDate(Y, md.month, md.day), rule.name))
        print("  ".join(row))

    if not args.list_month:
        return 0

    print(f"\nOccurrences in month={args.list_month:02d}:")
    if not hits:
        print("(none)")
        return 0

    hits.sort(key=lambda x: (x[0].year, x[0].month, x[0].day))
    for g, name in hits:
        print(f"{g.isoformat()}  {name}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
