from __future__ import annotations

import argparse
import random

import ethiocal
from ethiocal import EthiopicDate, GregorianDate


def parse_date(s: str) -> GregorianDate:
    y, m, d = s.split("-")
    return GregorianDate(int(y), int(m), int(d))


def random_jdn(j0: int, j1: int) -> int:
    return random.randint(j0, j1)


def roundtrip_test(N: int, start: GregorianDate, end: GregorianDate, seed: int, *, max_failures: int) -> int:
    """
    Gregorian -> Ethiopic -> Gregorian, plus the Amete Alem relabelling and
    a +1/-1 month step (lossless outside Nehase), on N random days between start and end.
    """
    random.seed(seed)
    failures = 0
    j0 = ethiocal.gregorian_to_jdn(start.year, start.month, start.day)
    j1 = ethiocal.gregorian_to_jdn(end.year, end.month, end.day)

    for _ in range(N):
        g0 = ethiocal.jdn_to_gregorian(random_jdn(j0, j1))
        e = ethiocal.to_ethiopic(g0)

        back = ethiocal.to_gregorian(e)
        back_aa = ethiocal.to_gregorian(EthiopicDate(e.year + ethiocal.AMETE_MIHRET_DELTA, e.month, e.day, "AA"))
        stepped = ethiocal.last_month(ethiocal.next_month(e, "ethiopic"), "ethiopic")

        problems = []
        if back != g0:
            problems.append(f"to_gregorian: {back.isoformat()}")
        if back_aa != g0:
            problems.append(f"to_gregorian (AA): {back_aa.isoformat()}")
        if e.month != 12 and stepped != e:  # Nehase days past 5 clamp into Pagume
            problems.append(f"next_month/last_month: {stepped.isoformat()}")

        if problems:
            failures += 1
            print("\nFAIL")
            print("g0:", g0.isoformat())
            print("eth:", e.isoformat())
            for line in problems:
                print(" ", line)
            if failures >= max_failures:
                return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: gregorian -> ethiopic -> gregorian.")
    p.add_argument("--N", type=int, default=20000, help="Trials.")
    p.add_argument("--start", type=str, default="1600-01-01", help="Start date YYYY-MM-DD.")
    p.add_argument("--end", type=str, default="3000-12-31", help="End date YYYY-MM-DD.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures.")
    args = p.parse_args(argv)

    start = parse_date(args.start)
    end = parse_date(args.end)

    if ethiocal.gregorian_to_jdn(end.year, end.month, end.day) < ethiocal.gregorian_to_jdn(start.year, start.month, start.day):
        raise SystemExit("--end must be >= --start")

    print(f"Testing {args.N} days in {start.isoformat()} .. {end.isoformat()} ...")
    failures = roundtrip_test(N=args.N, start=start, end=end, seed=args.seed, max_failures=args.max_failures)

    if failures == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {failures}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
