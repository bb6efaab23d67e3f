"""Parsing helpers for item IDs and borrow durations."""

import re
from datetime import timedelta

from .errors import InvalidDurationFormatError, InvalidIdFormatError

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

_ID_PATTERN = re.compile(r"[+-]?[0-9]+")

# [-]PnDTnHnMn.nS: days, hours, minutes and seconds only, fraction on seconds
_DURATION_PATTERN = re.compile(
    r"([-+]?)P(?:([-+]?[0-9]+)D)?"
    r"(T(?:([-+]?[0-9]+)H)?(?:([-+]?[0-9]+)M)?(?:([-+]?[0-9]+)(?:[.,]([0-9]{0,9}))?S)?)?",
    re.IGNORECASE,
)


def parse_id(text: str) -> int:
    """
    Convert a textual item identifier to an integer ID.

    Args:
        text: Decimal integer text, surrounding whitespace allowed

    Returns:
        The parsed ID

    Raises:
        InvalidIdFormatError: If the text is not a decimal integer or does
            not fit in a signed 32-bit integer

    Example:
        >>> parse_id("101")
        101
        >>> parse_id(" 7 ")
        7
    """
    candidate = text.strip()
    try:
        if not _ID_PATTERN.fullmatch(candidate):
            raise ValueError(f"invalid literal for an integer ID: {text!r}")
        value = int(candidate)
        if not INT32_MIN <= value <= INT32_MAX:
            raise ValueError(f"ID out of range: {value}")
    except ValueError as e:
        raise InvalidIdFormatError(text) from e
    return value


def parse_duration(text: str) -> timedelta:
    """
    Parse an ISO-8601 duration such as "PT72H" or "P2DT4H30M".

    Only days, hours, minutes and seconds are accepted; seconds may carry a
    fraction. Years, months and weeks have no fixed length and are rejected.
    Designators are case-insensitive and each part may carry its own sign.

    Args:
        text: Duration text

    Returns:
        The duration as a timedelta

    Raises:
        InvalidDurationFormatError: If the text is not an ISO-8601 duration.
            The parser's message is kept on ``detail``.

    Example:
        >>> parse_duration("PT72H")
        datetime.timedelta(days=3)
        >>> parse_duration("-PT6H")
        datetime.timedelta(days=-1, seconds=64800)
    """
    try:
        match = _DURATION_PATTERN.fullmatch(text)
        if not match:
            raise ValueError(f"Text cannot be parsed to a Duration: {text!r}")

        sign, days, time_part, hours, minutes, seconds, fraction = match.groups()
        if days is None and time_part is None:
            raise ValueError(f"Duration has no parts: {text!r}")
        if time_part is not None and hours is None and minutes is None and seconds is None:
            raise ValueError(f"Duration has an empty time part: {text!r}")

        micros = int((fraction or "")[:6].ljust(6, "0"))
        if seconds is not None and seconds.startswith("-"):
            micros = -micros

        duration = timedelta(
            days=int(days or 0),
            hours=int(hours or 0),
            minutes=int(minutes or 0),
            seconds=int(seconds or 0),
            microseconds=micros,
        )
        if sign == "-":
            duration = -duration
    except (ValueError, OverflowError) as e:
        raise InvalidDurationFormatError(text, str(e)) from e

    return duration


def format_duration(value: timedelta) -> str:
    """
    Render a timedelta as ISO-8601 duration text in hours, minutes and seconds.

    Example:
        >>> format_duration(timedelta(hours=4, minutes=30))
        'PT4H30M'
        >>> format_duration(timedelta(days=3))
        'PT72H'
    """
    sign = "-" if value < timedelta(0) else ""
    value = abs(value)
    total_us = (value.days * 86400 + value.seconds) * 1_000_000 + value.microseconds

    hours, rest = divmod(total_us, 3_600_000_000)
    minutes, rest = divmod(rest, 60_000_000)
    seconds, micros = divmod(rest, 1_000_000)

    parts = []
    if hours:
        parts.append(f"{hours}H")
    if minutes:
        parts.append(f"{minutes}M")
    if micros:
        parts.append(f"{seconds}.{micros:06d}".rstrip("0") + "S")
    elif seconds or not parts:
        parts.append(f"{seconds}S")
    return f"{sign}PT{''.join(parts)}"
