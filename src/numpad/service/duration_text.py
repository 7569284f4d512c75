# SPDX-License-Identifier: MIT

"""
Free-text duration recognition for spoken or typed input.

Accepts a looser grammar than ValueFormat.DURATION parsing. Patterns are tried
in a fixed order and the first one that matches wins:

1. "<N> hours [and] <M> minutes" (minutes clause optional)
2. "<N> minutes"
3. "<N> seconds"
4. "H:MM"
5. a bare number of minutes

The unit patterns are found anywhere in the text, so "I read for 20 minutes"
gives 20. A unit must not run on into a longer word ("5 steps" is not
seconds). The clock form and the bare number must be the whole text.
Thousands separators are ignored. Every result is a number of minutes.
"""

import re
from typing import Optional

from numpad.service.value_format import THOUSANDS_SEPARATOR, parse_number

_NUMBER = r"(\d+(?:\.\d+)?)"
_WORD_END = r"(?![a-z])"
_HOUR_UNIT = rf"(?:hours?|hrs?|h){_WORD_END}"
_MINUTE_UNIT = rf"(?:minutes?|mins?|m){_WORD_END}"
_SECOND_UNIT = rf"(?:seconds?|secs?|s){_WORD_END}"

HOURS_MINUTES_RE = re.compile(
    rf"{_NUMBER}\s*{_HOUR_UNIT}(?:\s*(?:and\s+)?{_NUMBER}\s*{_MINUTE_UNIT})?"
)
MINUTES_RE = re.compile(rf"{_NUMBER}\s*{_MINUTE_UNIT}")
SECONDS_RE = re.compile(rf"{_NUMBER}\s*{_SECOND_UNIT}")
CLOCK_RE = re.compile(rf"{_NUMBER}:{_NUMBER}")


def parse_duration_text(text: str) -> Optional[float]:
    normalized = " ".join(
        text.strip().lower().replace(THOUSANDS_SEPARATOR, "").split()
    )
    if not normalized:
        return None

    hours_minutes_match = HOURS_MINUTES_RE.search(normalized)
    if hours_minutes_match:
        hours = float(hours_minutes_match.group(1))
        minutes = hours_minutes_match.group(2)
        return hours * 60 + (float(minutes) if minutes is not None else 0.0)

    minutes_match = MINUTES_RE.search(normalized)
    if minutes_match:
        return float(minutes_match.group(1))

    seconds_match = SECONDS_RE.search(normalized)
    if seconds_match:
        return float(seconds_match.group(1)) / 60

    clock_match = CLOCK_RE.fullmatch(normalized)
    if clock_match:
        return float(clock_match.group(1)) * 60 + float(clock_match.group(2))

    return parse_number(normalized)
