"""Loose date/time extraction followed by calendar validation.

Input is free-form: the first ``yyyy-m-d`` / ``h:m`` looking substring is
used and anything around it is ignored. When nothing matches, an
impossible sentinel value is validated instead so both cases fail the
same way. Failures return None; callers own the retry loop.
"""
from datetime import date, datetime
import re
from typing import Optional, Tuple

DATE_RE = re.compile(r"\d{4}-\d{1,2}-\d{1,2}")
TIME_RE = re.compile(r"\d{1,2}:\d{1,2}")

DATE_SENTINEL: Tuple[int, ...] = (0, 0, 0)
TIME_SENTINEL: Tuple[int, ...] = (24, 60)


def _extract(pattern: re.Pattern, sep: str, text: str, sentinel: Tuple[int, ...]) -> Tuple[int, ...]:
    match = pattern.search(text)
    if match is None:
        return sentinel
    return tuple(int(part) for part in match.group(0).split(sep))


def parse_date(text: str) -> Optional[date]:
    year, month, day = _extract(DATE_RE, "-", text, DATE_SENTINEL)
    try:
        return date(year, month, day)
    except ValueError:
        return None


def parse_time(text: str, day: date) -> Optional[datetime]:
    """Combine an already validated date with the hour/minute found in text."""
    hour, minute = _extract(TIME_RE, ":", text, TIME_SENTINEL)
    try:
        return datetime(day.year, day.month, day.day, hour, minute)
    except ValueError:
        return None
