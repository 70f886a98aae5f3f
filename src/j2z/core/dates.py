"""TOML date-time grammar used for the Zola ``date`` field.

Python has no leap seconds: a second of ``60`` is clamped to the last
representable instant of that minute, ``:59.999999``.
"""

from __future__ import annotations

import re
from datetime import date, datetime, time, timedelta, timezone

from j2z.core.errors import InvalidDate

_TIME = r"([01][0-9]|2[0-3]):([0-5][0-9]):([0-5][0-9]|60)(?:\.([0-9]+))?"

_DATETIME_RE = re.compile(
    rf"""
    ([0-9]{{4}})-([0-9]{{2}})-([0-9]{{2}})        # full-date
    (?:
        [Tt ]{_TIME}
        (?:([Zz])|([+-])([01][0-9]|2[0-3]):([0-5][0-9]))?   # offset
    )?
    """,
    re.VERBOSE,
)
_LOCAL_TIME_RE = re.compile(_TIME)

TomlDateTime = datetime | date | time


def _micros(fraction: str | None) -> int:
    # TOML allows arbitrary precision; Python stops at microseconds.
    if not fraction:
        return 0
    return int(fraction[:6].ljust(6, "0"))


def _parse_time(hour: str, minute: str, second: str, fraction: str | None) -> time:
    if second == "60":
        return time(int(hour), int(minute), 59, 999999)
    return time(int(hour), int(minute), int(second), _micros(fraction))


def parse_toml_datetime(text: str) -> TomlDateTime:
    """Parse an offset/local date-time, a local date or a local time.

    Raises InvalidDate when text does not match the grammar or names an
    impossible calendar value.
    """
    try:
        m = _DATETIME_RE.fullmatch(text)
        if m:
            year, month, day, hour, minute, second, fraction, zulu, sign, off_h, off_m = m.groups()
            day_value = date(int(year), int(month), int(day))
            if hour is None:
                return day_value

            tzinfo = None
            if zulu:
                tzinfo = timezone.utc
            elif sign:
                offset = timedelta(hours=int(off_h), minutes=int(off_m))
                tzinfo = timezone(-offset if sign == "-" else offset)
            clock = _parse_time(hour, minute, second, fraction)
            return datetime.combine(day_value, clock, tzinfo=tzinfo)

        m = _LOCAL_TIME_RE.fullmatch(text)
        if m:
            return _parse_time(*m.groups())
    except ValueError as e:
        raise InvalidDate(text) from e

    raise InvalidDate(text)
