# backend/salon_agenda/core/intervals.py
from datetime import time
import re

# "HH:MM" or "HH:MM:00" (the database hands back the latter); other seconds are rejected
_HHMM_RE = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)(?::00)?$")

MINUTES_PER_DAY = 24 * 60


def to_minutes(value: str | time) -> int:
    """
    Minutes since midnight. Accepts "HH:MM", "HH:MM:00" or datetime.time
    on a whole minute.
    Anything else is a programming error upstream -> ValueError.
    """
    if isinstance(value, time):
        if value.second or value.microsecond:
            raise ValueError(f"{value!r} is not on a whole minute")
        return value.hour * 60 + value.minute
    if not isinstance(value, str):
        raise ValueError(f"Cannot read {value!r} as HH:MM")
    m = _HHMM_RE.match(value.strip())
    if not m:
        raise ValueError(f"Cannot read {value!r} as HH:MM")
    return int(m.group(1)) * 60 + int(m.group(2))


def minutes_to_time(minutes: int) -> str:
    if minutes < 0 or minutes >= MINUTES_PER_DAY:
        raise ValueError(f"{minutes} is outside a single day")
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def format_time(value: str | time) -> str:
    """Normalize to "HH:MM"."""
    return minutes_to_time(to_minutes(value))


def to_time(value: str | time) -> time:
    m = to_minutes(value)
    return time(m // 60, m % 60)


def overlaps(a_start, a_end, b_start, b_end) -> bool:
    # half-open: [a_start, a_end) vs [b_start, b_end), touching ends do not clash
    return to_minutes(a_start) < to_minutes(b_end) and to_minutes(b_start) < to_minutes(a_end)


def is_within(candidate_start, candidate_end, window_start, window_end) -> bool:
    # a booking ending exactly at window_end is accepted
    return (
        to_minutes(window_start) <= to_minutes(candidate_start)
        and to_minutes(candidate_end) <= to_minutes(window_end)
    )
