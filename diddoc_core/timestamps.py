"""
Timestamp handling for DID Document metadata.

Stored values are aware UTC datetimes truncated to milliseconds, which is
the precision of the ISO-8601 form written to documents
(``2020-01-01T00:00:00.000Z``).  Truncation keeps parse/render round trips
stable.
"""

from __future__ import annotations

from datetime import datetime, timezone

from diddoc_core.errors import InvalidArgument


def _truncate(dt: datetime) -> datetime:
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    dt = dt.astimezone(timezone.utc)
    return dt.replace(microsecond=dt.microsecond // 1000 * 1000)


def utcnow() -> datetime:
    return _truncate(datetime.now(timezone.utc))


def parse_timestamp(value: object) -> datetime:
    """
    Convert *value* to a UTC datetime.

    Accepts ``datetime`` objects (naive ones are taken as UTC), ISO-8601
    strings with an optional trailing ``Z``, and epoch milliseconds.
    """
    if isinstance(value, datetime):
        try:
            return _truncate(value)
        except OverflowError as exc:
            raise InvalidArgument(f"Timestamp out of range: {value!r}") from exc
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            return _truncate(datetime.fromtimestamp(value / 1000, tz=timezone.utc))
        except (OverflowError, OSError, ValueError) as exc:
            raise InvalidArgument(f"Timestamp out of range: {value!r}") from exc
    if isinstance(value, str):
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            return _truncate(datetime.fromisoformat(text))
        except (OverflowError, ValueError) as exc:
            # OverflowError: offset shifts the value outside years 1-9999
            raise InvalidArgument(f"Invalid ISO-8601 timestamp: {value!r}") from exc
    raise InvalidArgument(f"Unsupported timestamp type: {type(value).__name__}")


def format_timestamp(dt: datetime) -> str:
    """Render *dt* as ``YYYY-MM-DDTHH:MM:SS.mmmZ`` (four-digit year always)."""
    dt = _truncate(dt)
    return (
        f"{dt.year:04d}-{dt.month:02d}-{dt.day:02d}"
        f"T{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}"
        f".{dt.microsecond // 1000:03d}Z"
    )
