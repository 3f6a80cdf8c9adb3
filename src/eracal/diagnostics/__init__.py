"""Diagnostics package.

- round_trip: always available, random ISO -> calendar -> ISO checks
- leap_years: needs numpy (pip install "eracal[diagnostics]")
"""

__all__ = ["round_trip", "leap_years"]
