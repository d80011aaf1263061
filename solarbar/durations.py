"""
Duration formatting.

Pure functions — timedelta in, short string out.

    format_hours_minutes(timedelta(hours=9, minutes=5))        → "9h 5m"
    format_signed_minutes_seconds(timedelta(seconds=-135))     → "-2m 15s"
    format_signed_minutes_seconds(timedelta(0))                → "+0s"

Counts are whole units truncated toward zero, so -59.9s is "-59s" and
never rounds up into the minutes branch.
"""

from datetime import datetime, timedelta, timezone

_DAY = timedelta(days=1)
_HALF_DAY = timedelta(hours=12)


def whole_seconds(d: timedelta) -> int:
    """Return the whole-second count of d, truncated toward zero."""
    micros = (d.days * 86_400 + d.seconds) * 1_000_000 + d.microseconds
    secs = abs(micros) // 1_000_000
    return -secs if micros < 0 else secs


def whole_minutes(d: timedelta) -> int:
    """Return the whole-minute count of d, truncated toward zero."""
    secs = whole_seconds(d)
    mins = abs(secs) // 60
    return -mins if secs < 0 else mins


def format_hours_minutes(d: timedelta) -> str:
    """
    Format a day length as "{h}h {m}m", or "{m}m" under an hour.

    Hours and minutes both come from the total minute count, not the raw
    seconds. Meant for non-negative durations.
    """
    minutes = whole_minutes(d)
    if minutes >= 60:
        return f"{minutes // 60}h {minutes % 60}m"
    return f"{minutes}m"


def format_signed_minutes_seconds(d: timedelta) -> str:
    """
    Format a day-over-day delta with an explicit sign.

    "+1m 5s" / "-2m 15s" when at least a whole minute, else "+12s" / "-45s".
    Zero renders as "+0s".
    """
    minutes = whole_minutes(d)
    seconds = whole_seconds(d)
    if abs(minutes) >= 1:
        return f"{minutes:+d}m {abs(seconds) % 60}s"
    return f"{seconds:+d}s"


def time_of_day_delta(later: datetime, earlier: datetime) -> timedelta:
    """
    Difference between the UTC clock times of two instants, dates ignored.

    Used for "sunrise moved by" deltas: today's 06:58:10 against
    yesterday's 07:00:05 gives -1m 55s regardless of the calendar day.
    The result is wrapped into (-12h, 12h], so 23:59:30 against 00:00:10
    is -40s, not +23h 59m 20s.
    """
    def _clock(dt: datetime) -> timedelta:
        if dt.tzinfo is not None:
            dt = dt.astimezone(timezone.utc)
        return timedelta(
            hours=dt.hour, minutes=dt.minute,
            seconds=dt.second, microseconds=dt.microsecond,
        )

    delta = _clock(later) - _clock(earlier)
    if delta > _HALF_DAY:
        delta -= _DAY
    elif delta <= -_HALF_DAY:
        delta += _DAY
    return delta
