"""
Formatting helpers shared by every command.

Prices are shown with K/M/B/T units (or space-grouped digits), game
timestamps arrive as epoch milliseconds and are displayed as RFC3339
strings, and cooldowns are shown as a compact "1w 2d 3h 4m 5s" duration.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from bcncli.shared.errors import (
    ErrorCode,
    ErrorContext,
    ParseError,
    create_validation_error,
)

# Largest unit first
PRICE_UNITS: tuple[tuple[int, str], ...] = (
    (10**12, "T"),
    (10**9, "B"),
    (10**6, "M"),
    (10**3, "K"),
)

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY = 24 * SECONDS_PER_HOUR
SECONDS_PER_WEEK = 7 * SECONDS_PER_DAY

NO_TIMESTAMP = "-"


def format_price(value: int, plain: bool = False) -> str:
    """Format a price either with units or as space-grouped digits.

    Args:
        value: Price in BC
        plain: Render every digit, grouped in threes, instead of using units

    Returns:
        Formatted price

    Example:
        >>> format_price(1230000)
        '1.23M'
        >>> format_price(200000000)
        '200M'
        >>> format_price(123000, plain=True)
        '123 000'
    """
    if plain:
        grouped = f"{abs(value):,}".replace(",", " ")
        return f"-{grouped}" if value < 0 else grouped

    magnitude = abs(value)
    for threshold, suffix in PRICE_UNITS:
        if magnitude >= threshold:
            scaled = f"{value / threshold:.2f}".rstrip("0").rstrip(".")
            return f"{scaled}{suffix}"

    return str(value)


def format_duration(total_seconds: int) -> str:
    """Render a positive number of seconds as "<n>w <n>d <n>h <n>m <n>s".

    Zero components are omitted; seconds are always shown when they are
    the only component.
    """
    weeks, remainder = divmod(total_seconds, SECONDS_PER_WEEK)
    days, remainder = divmod(remainder, SECONDS_PER_DAY)
    hours, remainder = divmod(remainder, SECONDS_PER_HOUR)
    minutes, seconds = divmod(remainder, SECONDS_PER_MINUTE)

    parts = [f"{amount}{unit}" for amount, unit in ((weeks, "w"), (days, "d"), (hours, "h"), (minutes, "m")) if amount > 0]
    if seconds > 0 or not parts:
        parts.append(f"{seconds}s")

    return " ".join(parts)


def parse_timestamp(value: str | datetime) -> datetime:
    """Parse an RFC3339 timestamp into an aware datetime.

    Naive datetime objects are taken to be UTC. Strings must carry an
    offset (or ``Z``).

    Raises:
        ParseError: If the string is not a valid RFC3339 timestamp
    """
    if isinstance(value, datetime):
        return value if value.tzinfo is not None else value.replace(tzinfo=timezone.utc)

    text = value.strip()
    if text.endswith(("Z", "z")):
        text = f"{text[:-1]}+00:00"

    try:
        parsed = datetime.fromisoformat(text)
    except ValueError as e:
        raise ParseError(
            ErrorCode.INVALID_TIMESTAMP,
            f"Invalid RFC3339 timestamp: {value!r}",
            ErrorContext(operation="parse_timestamp"),
            original_error=e,
        ) from e

    if parsed.tzinfo is None:
        raise ParseError(
            ErrorCode.INVALID_TIMESTAMP,
            f"Timestamp has no UTC offset: {value!r}",
            ErrorContext(operation="parse_timestamp"),
        )

    return parsed


def _humanize(difference: timedelta) -> str:
    if difference <= timedelta(0):
        return "0"
    return format_duration(int(difference.total_seconds()))


def humanize_remaining(target: str | datetime, now: datetime | None = None) -> str:
    """Time from ``now`` until ``target``; "0" once the target has passed."""
    current = parse_timestamp(now) if now is not None else datetime.now(timezone.utc)
    return _humanize(parse_timestamp(target) - current)


def humanize_elapsed(target: str | datetime, now: datetime | None = None) -> str:
    """Time elapsed from ``target`` until ``now``; "0" for future targets."""
    current = parse_timestamp(now) if now is not None else datetime.now(timezone.utc)
    return _humanize(current - parse_timestamp(target))


def epoch_ms_to_iso(ms: int) -> str:
    """Convert epoch milliseconds to an RFC3339 UTC string, "-" when unset."""
    if ms <= 0:
        return NO_TIMESTAMP
    try:
        instant = datetime.fromtimestamp(ms // 1000, tz=timezone.utc)
    except (ValueError, OverflowError, OSError):
        # outside the range datetime can represent
        return NO_TIMESTAMP
    return instant.strftime("%Y-%m-%dT%H:%M:%SZ")


def parse_id(arg: str, field: str = "id") -> int:
    """Convert a command-line argument to an integer ID.

    Raises:
        ValidationError: If the argument is not an integer
    """
    try:
        return int(arg)
    except ValueError as e:
        raise create_validation_error(
            f"Invalid ID: {arg}",
            field=field,
            operation="parse_id",
            code=ErrorCode.INVALID_ID,
        ) from e


def sanitize_emoji(emoji: str) -> str:
    """Replace a Discord custom emoji (``<:name:id>``) with its ``:name:`` alias."""
    if emoji.startswith("<:") and emoji.endswith(">"):
        parts = emoji.split(":")
        if len(parts) >= 2:
            return f":{parts[1]}:"
    return emoji
