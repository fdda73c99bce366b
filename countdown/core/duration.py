# countdown/core/duration.py
# Duration conversion & HH:MM:SS formatting shared by engine snapshots & input handling

from __future__ import annotations

from .exceptions import InvalidDurationError

MS_PER_SECOND = 1_000
MS_PER_MINUTE = 60_000
MS_PER_HOUR = 3_600_000


# * Format milliseconds as zero-padded HH:MM:SS (sub-second remainder is truncated)
def format_hms(ms: int) -> str:
    if ms < 0:
        raise InvalidDurationError(f"cannot format negative duration: {ms}", ms)
    hours, rest = divmod(ms, MS_PER_HOUR)
    minutes, rest = divmod(rest, MS_PER_MINUTE)
    seconds = rest // MS_PER_SECOND
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


# parse one hours/minutes/seconds field; blank input counts as zero
def _parse_field(name: str, value: int | str | None) -> int:
    if value is None:
        return 0
    if isinstance(value, bool):
        raise InvalidDurationError(f"{name} must be a whole number, got {value!r}", value)
    if isinstance(value, int):
        number = value
    else:
        text = str(value).strip()
        if not text:
            return 0
        if not text.isdecimal():
            raise InvalidDurationError(
                f"{name} must be a whole number, got {value!r}", value
            )
        number = int(text)
    if number < 0:
        raise InvalidDurationError(f"{name} must not be negative, got {number}", value)
    return number


# * Convert hours/minutes/seconds input fields into a single millisecond duration
def duration_from_fields(
    hours: int | str | None = 0,
    minutes: int | str | None = 0,
    seconds: int | str | None = 0,
) -> int:
    h = _parse_field("hours", hours)
    m = _parse_field("minutes", minutes)
    s = _parse_field("seconds", seconds)
    return h * MS_PER_HOUR + m * MS_PER_MINUTE + s * MS_PER_SECOND


# * Parse clock shorthand ("SS", "MM:SS" or "HH:MM:SS") into milliseconds
def parse_clock(text: str) -> int:
    parts = text.strip().split(":")
    if not 1 <= len(parts) <= 3 or any(p.strip() == "" for p in parts):
        raise InvalidDurationError(
            f"expected SS, MM:SS or HH:MM:SS, got {text!r}", text
        )
    # right-align so "90" is seconds & "1:30" is minutes:seconds
    padded = ["0"] * (3 - len(parts)) + parts
    return duration_from_fields(*padded)
