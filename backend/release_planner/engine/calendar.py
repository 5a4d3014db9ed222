"""Month-range expansion. Month tokens are zero-padded YYYY-MM strings."""
from datetime import date, datetime

# Day-of-month every token is pinned to when parsed
_ANCHOR_DAY = 15


def parse_month(token: str | None) -> date | None:
    """Parse a YYYY-MM token to a mid-month date; None when empty or malformed."""
    if not token or not token.strip():
        return None
    try:
        return datetime.strptime(f"{token.strip()}-{_ANCHOR_DAY}", "%Y-%m-%d").date()
    except ValueError:
        return None


def month_token(d: date) -> str:
    return f"{d.year:04d}-{d.month:02d}"


def _month_index(d: date) -> int:
    return d.year * 12 + d.month - 1


def months_in_range(start: str | None, end: str | None) -> list[str]:
    """Inclusive, ordered month tokens from start to end.

    Empty or malformed bounds, or start after end, give an empty list.
    Steps over a month index, so the last representable month (9999-12) is safe.
    """
    first = parse_month(start)
    last = parse_month(end)
    if first is None or last is None:
        return []
    return [
        f"{i // 12:04d}-{i % 12 + 1:02d}"
        for i in range(_month_index(first), _month_index(last) + 1)
    ]
