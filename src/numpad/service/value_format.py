# SPDX-License-Identifier: MIT

import math
import re
from typing import Optional

from numpad.model.value_format import ValueFormat

THOUSANDS_SEPARATOR = ","

_NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")
_CLOCK_RE = re.compile(r"(-)?(\d+):(\d+)")
_MINUTES_SUFFIX_RE = re.compile(r"(-?\d+)\s*min")


def parse_number(text: str) -> Optional[float]:
    """
    Locale-agnostic number parsing.

    Strips surrounding whitespace and thousands separators, then requires the
    remainder to be a plain decimal number. "inf", "nan" and digit group
    underscores are rejected even though float() would accept them.
    """
    cleaned = text.strip().replace(THOUSANDS_SEPARATOR, "")
    if not _NUMBER_RE.fullmatch(cleaned):
        return None
    return float(cleaned)


def parse_value(value_format: ValueFormat, text: str) -> Optional[float]:
    """Parse user text into a stored number, None when the text is not valid."""
    match value_format:
        case ValueFormat.INTEGER | ValueFormat.DECIMAL:
            return parse_number(text)
        case ValueFormat.DURATION:
            return parse_duration(text)
    return None


def parse_duration(text: str) -> Optional[float]:
    """
    Parse H:MM, a bare number of minutes, or the "M min" display form.

    The free-form voice grammar lives in numpad.service.duration_text.
    """
    trimmed = text.strip()

    clock_match = _CLOCK_RE.fullmatch(trimmed)
    if clock_match:
        sign = -1 if clock_match.group(1) else 1
        hours = int(clock_match.group(2))
        minutes = int(clock_match.group(3))
        return float(sign * (hours * 60 + minutes))
    if ":" in trimmed:
        return None

    minutes_match = _MINUTES_SUFFIX_RE.fullmatch(trimmed)
    if minutes_match:
        return float(int(minutes_match.group(1)))

    return parse_number(trimmed)


def format_value(value_format: ValueFormat, value: float) -> str:
    match value_format:
        case ValueFormat.INTEGER:
            return f"{value:.0f}"
        case ValueFormat.DECIMAL:
            return f"{value:.2f}"
        case ValueFormat.DURATION:
            return format_duration(value)
    return str(value)


def format_duration(minutes: float) -> str:
    """
    Render minutes as H:MM when at least an hour, otherwise as M min.

    Negative values (time differences) keep their sign in front.
    """
    total_minutes = math.floor(minutes)
    sign = "-" if total_minutes < 0 else ""
    hours, mins = divmod(abs(total_minutes), 60)

    if hours > 0:
        return f"{sign}{hours}:{mins:02d}"
    return f"{sign}{mins} min"
