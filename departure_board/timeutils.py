"""Time-of-day helpers shared by the timetable core and the request layer.

Board times carry no date component: they are plain ``datetime.time`` values
written as ``H:MM`` or ``HH:MM`` on the wire.
"""

import re
from datetime import datetime, time
from typing import Optional

HOUR_MINUTE_FORMAT = "%H:%M"

_HOUR_MINUTE_RE = re.compile(r"^([0-9]{1,2}):([0-9]{2})$")

# Last minute of the day; windows never run past it
END_OF_DAY = time(23, 59)


class ParseError(ValueError):
    """Raised when a time string is not a valid hour:minute value"""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f'parsing time "{value}": expected hour:minute (e.g. 9:05 or 13:30)')


def parse_hour_minute(value: str) -> time:
    """Parse an ``H:MM`` / ``HH:MM`` string into a time of day"""
    if value is None:
        raise ParseError("")

    match = _HOUR_MINUTE_RE.match(value.strip())
    if not match:
        raise ParseError(value)

    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23 or minute > 59:
        raise ParseError(value)

    return time(hour, minute)


def format_hour_minute(value: time) -> str:
    return value.strftime(HOUR_MINUTE_FORMAT)


def current_time_of_day(now: Optional[datetime] = None) -> time:
    """Current local time of day truncated to the minute"""
    if now is None:
        now = datetime.now()
    return time(now.hour, now.minute)


def parse_param_to_time(value: Optional[str], now: Optional[datetime] = None) -> time:
    """Resolve a query parameter to a time; an absent value means "now"."""
    if not value:
        return current_time_of_day(now)
    return parse_hour_minute(value)


def seconds_of_day(value: time) -> float:
    return value.hour * 3600 + value.minute * 60 + value.second + value.microsecond / 1_000_000


def window_end(start: time, minutes: int) -> time:
    """``start + minutes``, clamped to the end of the day"""
    total = start.hour * 60 + start.minute + minutes
    if total >= 24 * 60:
        return END_OF_DAY
    return time(total // 60, total % 60)
