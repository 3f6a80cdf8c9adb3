#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional, Sequence

import eracal


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "eracal[diagnostics]"') from e


def parse_calendars(s: str) -> List[str]:
    return [x.strip() for x in s.split(",") if x.strip()]


def leap_matrix(np, calendars: Sequence[str], start_year: int, end_year: int):
    """
    Boolean matrix, one row per calendar, one column per ISO year in
    [start_year, end_year]. Cell is the calendar's own leap predicate applied to
    the proleptic year that coincides with that ISO year.
    """
    iso_years = np.arange(start_year, end_year + 1, dtype=np.int64)
    rows = []
    for name in calendars:
        c = eracal.chronology(name)
        rows.append([c.is_leap_year(int(y) + c.offset) for y in iso_years])
    return np.array(rows, dtype=bool).reshape(len(calendars), iso_years.size)


def misaligned(np, matrix, reference_row: int = 0) -> List[int]:
    """Indices of rows that differ from the reference row anywhere."""
    ref = matrix[reference_row]
    return [i for i in range(matrix.shape[0]) if not np.array_equal(matrix[i], ref)]


def barcode(row) -> str:
    return "".join("#" if v else "." for v in row)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Leap-year barcode across calendars, aligned on ISO years.")
    p.add_argument("--start-year", type=int, default=1890, help="First ISO year.")
    p.add_argument("--end-year", type=int, default=2030, help="Last ISO year.")
    p.add_argument(
        "--calendars",
        default=",".join(eracal.list_chronologies()),
        help="Comma list of chronologies; the first one is the reference row.",
    )
    args = p.parse_args(argv)

    np = _need_numpy()

    if args.end_year < args.start_year:
        raise SystemExit("--end-year must be >= --start-year")

    names = parse_calendars(args.calendars)
    m = leap_matrix(np, names, args.start_year, args.end_year)

    width = max(len(n) for n in names)
    for name, row in zip(names, m):
        print(f"{name:<{width}}  {barcode(row)}")
    print(f"{'':<{width}}  leap years per calendar: {m.sum(axis=1).tolist()}")

    bad = misaligned(np, m)
    if bad:
        print("Out of step with", names[0], ":", [names[i] for i in bad])
        return 1
    print("All calendars share the reference leap pattern.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
