from __future__ import annotations

import argparse
import importlib
import logging
import re
import sys

from eracal.core.time import IsoDate

_DATE_RE = re.compile(r"^[+-]?\d{4,}-\d{2}-\d{2}$")


def _parse_ymd(s: str) -> tuple[int, int, int]:
    sign = -1 if s.startswith("-") else 1
    y, m, d = map(int, s.lstrip("+-").split("-"))
    return sign * y, m, d


def _date_last(argv: list[str]) -> list[str]:
    # argparse reads "-0543-01-01" as an option; put the date after "--".
    for i, a in enumerate(argv):
        if _DATE_RE.match(a):
            return argv[:i] + argv[i + 1:] + ["--", a]
    return argv


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """Call ``main(argv)`` of a diagnostics module."""
    main_fn = getattr(importlib.import_module(modpath), "main", None)
    if main_fn is None:
        raise SystemExit(f"Module {modpath} has no main()")
    return int(main_fn(argv) or 0)


def cmd_list(argv: list[str]) -> int:
    import eracal

    p = argparse.ArgumentParser(prog="eracal list", description="List registered chronologies")
    p.parse_args(argv)

    for cid in eracal.list_chronologies():
        info = eracal.chronology_info(cid)
        print(f"{info['id']:<14} {info['calendar_type']:<10} offset={info['offset']:+d}  {info['description']}")
    return 0


def cmd_day(argv: list[str]) -> int:
    import eracal

    p = argparse.ArgumentParser(prog="eracal day", description="ISO date -> calendar date")
    p.add_argument("date", help="YYYY-MM-DD (ISO)")
    p.add_argument("--calendar", default="ThaiBuddhist", help="chronology id or calendar type")
    p.add_argument("--locale", default=None, help="language tag for era names, e.g. th-TH")
    args = p.parse_args(_date_last(argv))

    iso = IsoDate.of(*_parse_ymd(args.date))
    d = eracal.to_calendar(iso, calendar=args.calendar)
    print(d)
    print(f"  era           : {d.era.name} ({d.era.display_name('full', args.locale)})")
    print(f"  year-of-era   : {d.year_of_era}")
    print(f"  proleptic year: {d.proleptic_year}")
    print(f"  month / day   : {d.month} / {d.day}")
    print(f"  day-of-year   : {d.day_of_year}")
    print(f"  leap year     : {d.is_leap_year()}")
    print(f"  iso           : {d.iso}")
    return 0


def cmd_iso(argv: list[str]) -> int:
    import eracal

    p = argparse.ArgumentParser(prog="eracal iso", description="Calendar date (proleptic year) -> ISO date")
    p.add_argument("date", help="YYYY-MM-DD in the calendar's proleptic years")
    p.add_argument("--calendar", default="ThaiBuddhist", help="chronology id or calendar type")
    args = p.parse_args(_date_last(argv))

    d = eracal.date(args.calendar, *_parse_ymd(args.date))
    print(d.iso)
    return 0


def cmd_eras(argv: list[str]) -> int:
    import eracal

    p = argparse.ArgumentParser(prog="eracal eras", description="Eras of a chronology with localized names")
    p.add_argument("calendar", help="chronology id or calendar type")
    p.add_argument("--locale", default=None, help="language tag, e.g. th-TH")
    p.add_argument("--style", choices=["narrow", "short", "full"], default="full")
    args = p.parse_args(argv)

    c = eracal.chronology(args.calendar)
    yoe = c.range(eracal.Field.YEAR_OF_ERA)
    for era in c.eras():
        print(f"{era.value}  {era.name:<12} {era.display_name(args.style, args.locale)}")
    print(f"year-of-era: {yoe}")
    print(f"year       : {c.range(eracal.Field.YEAR)}")
    return 0


def cmd_diag(argv: list[str]) -> int:
    tool_map = {
        "round-trip": "eracal.diagnostics.round_trip",
        "leap-years": "eracal.diagnostics.leap_years",
    }
    p = argparse.ArgumentParser(prog="eracal diag", description="Diagnostics tools")
    p.add_argument("tool", choices=sorted(tool_map), help="Which diagnostic to run")
    p.add_argument("args", nargs=argparse.REMAINDER)
    args = p.parse_args(argv)
    return _run_module_main(tool_map[args.tool], args.args)


COMMANDS = {
    "list": cmd_list,
    "day": cmd_day,
    "iso": cmd_iso,
    "eras": cmd_eras,
    "diag": cmd_diag,
}


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `eracal YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_day(argv)

    p = argparse.ArgumentParser(
        prog="eracal",
        description="Era-based calendar systems toolkit CLI.",
        epilog="commands: list, day (ISO -> calendar), iso (calendar -> ISO), eras, diag",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    p.add_argument("cmd", choices=list(COMMANDS))
    p.add_argument("args", nargs=argparse.REMAINDER)
    args = p.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    return COMMANDS[args.cmd](args.args)


if __name__ == "__main__":
    raise SystemExit(main())
