from __future__ import annotations

import argparse
import random
from typing import List

import eracal
from eracal.core.time import IsoDate


def parse_calendars(s: str) -> List[str]:
    # "ThaiBuddhist,Minguo" -> ["ThaiBuddhist", "Minguo"]
    return [x.strip() for x in s.split(",") if x.strip()]


def roundtrip_test(calendar: str, N: int, start: IsoDate, end: IsoDate, seed: int, *, max_failures: int) -> int:
    """ISO -> calendar fields -> ISO, through both the proleptic and the era constructors."""
    random.seed(seed)
    chrono = eracal.chronology(calendar)
    failures = 0

    for _ in range(N):
        d0 = IsoDate(random.randint(start.jdn, end.jdn))
        cd = chrono.date_from(d0)

        back = chrono.date(cd.proleptic_year, cd.month, cd.day)
        back_era = chrono.date_of_era(cd.era, cd.year_of_era, cd.month, cd.day)
        back_doy = chrono.date_year_day(cd.proleptic_year, cd.day_of_year)

        if not (back.iso == back_era.iso == back_doy.iso == d0):
            failures += 1
            print("\nFAIL")
            print("calendar:", calendar)
            print("d0:", d0)
            print("date:", cd)
            print("back:", back.iso, back_era.iso, back_doy.iso)
            if failures >= max_failures:
                return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: ISO -> calendar -> ISO.")
    p.add_argument("--calendars", type=str, default=",".join(eracal.list_chronologies()),
                   help="Comma-separated chronology list.")
    p.add_argument("--N", type=int, default=2000, help="Trials per calendar.")
    p.add_argument("--start-year", type=int, default=-5000, help="First ISO year.")
    p.add_argument("--end-year", type=int, default=5000, help="Last ISO year.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures per calendar.")
    args = p.parse_args(argv)

    if args.end_year < args.start_year:
        raise SystemExit("--end-year must be >= --start-year")
    start = IsoDate.of(args.start_year, 1, 1)
    end = IsoDate.of(args.end_year, 12, 31)

    total_fail = 0
    for cal in parse_calendars(args.calendars):
        print(f"Testing {cal} ...")
        total_fail += roundtrip_test(cal, N=args.N, start=start, end=end, seed=args.seed,
                                     max_failures=args.max_failures)

    if total_fail == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {total_fail}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
