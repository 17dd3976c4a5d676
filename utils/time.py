import re
from datetime import datetime, timezone
from email.utils import format_datetime, parsedate_to_datetime

# The service emits 7 fractional digits; datetime accepts at most 6.
_FRACTION_RE = re.compile(r"\.(\d{6})\d+")


def parse_iso_utc(ts: str) -> datetime:
    """Parse ISO-8601 UTC timestamp (with trailing 'Z') to an aware datetime.

    Fractional seconds beyond microsecond precision are truncated.
    Raises ValueError for anything that is not ISO-8601.
    """
    if ts.endswith("Z"):
        ts = ts[:-1] + "+00:00"
    ts = _FRACTION_RE.sub(r".\1", ts)
    dt = datetime.fromisoformat(ts)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def format_rfc1123(dt: datetime) -> str:
    """Render an aware datetime the way HTTP date headers expect (GMT)."""
    return format_datetime(dt.astimezone(timezone.utc), usegmt=True)


def parse_rfc1123(value: str) -> datetime:
    """Parse an HTTP date header. Raises ValueError on malformed input."""
    try:
        dt = parsedate_to_datetime(value)
    except (TypeError, IndexError) as e:
        raise ValueError(f"invalid HTTP date: {value!r}") from e
    if dt is None:
        raise ValueError(f"invalid HTTP date: {value!r}")
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def utc_now_rfc1123() -> str:
    return format_rfc1123(datetime.now(timezone.utc))
