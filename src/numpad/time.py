# SPDX-License-Identifier: MIT

import re
from typing import Optional, cast

import pendulum


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC")


def datetime_to_iso_str(datetime: pendulum.DateTime) -> str:
    return datetime.isoformat()


def datetime_to_iso_str_optional(
    datetime: Optional[pendulum.DateTime],
) -> Optional[str]:
    if datetime is None:
        return None
    return datetime_to_iso_str(datetime)


def datetime_to_display_local_datetime_str(datetime: pendulum.DateTime) -> str:
    return datetime.in_tz("local").format("MMM-DD ddd HH:mm")


def datetime_from_str(datetime: str) -> pendulum.DateTime:
    return cast(pendulum.DateTime, pendulum.parse(datetime))


def datetime_from_str_utc(datetime: str) -> pendulum.DateTime:
    """Parse a wall-clock string in the local timezone and convert it to UTC."""
    pendulum_date_time = cast(pendulum.DateTime, pendulum.parse(datetime, tz="local"))
    return pendulum_date_time.in_tz("UTC")


def minutes_between(start: pendulum.DateTime, end: pendulum.DateTime) -> float:
    """Signed number of minutes from start to end, negative when end is earlier."""
    return (end - start).total_seconds() / 60


def datetime_to_export_str(datetime: pendulum.DateTime) -> str:
    """ISO 8601 in UTC with millisecond precision, e.g. 2025-10-16T09:30:00.000Z."""
    return datetime.in_tz("UTC").format("YYYY-MM-DD[T]HH:mm:ss.SSS[Z]")


def instant_from_text(text: str) -> Optional[pendulum.DateTime]:
    """
    Parse an instant typed by a user, None when it can't be read.

    Accepts ISO 8601 dates and date-times (local wall clock unless an offset is
    given) and a bare H:MM meaning that time today.
    """
    stripped = text.strip()
    clock_match = re.fullmatch(r"(\d{1,2}):(\d{2})", stripped)
    if clock_match:
        hour = int(clock_match.group(1))
        minute = int(clock_match.group(2))
        if hour > 23 or minute > 59:
            return None
        local_time = pendulum.today("local").set(hour=hour, minute=minute)
        return local_time.in_tz("UTC")

    try:
        parsed = pendulum.parse(stripped, tz="local")
    except ValueError:
        return None
    if not isinstance(parsed, pendulum.DateTime):
        return None
    return parsed.in_tz("UTC")
