from collections.abc import Mapping
from datetime import date, datetime, time, timezone


_DAY_FORMATS = [
    "%Y-%m-%d",
    "%m/%d/%Y",
    "%d %b %Y",
    "%b %d, %Y",
]


def parse_timestamp(value) -> datetime | None:
    """Parse a stored timestamp into a datetime.

    Accepts:
      - datetime / date objects
      - ISO-8601 strings, with or without time and offset ('Z' included)
      - a few plain day formats ('01/31/2024', '31 Jan 2024', 'Jan 31, 2024')
      - epoch seconds (int/float)
      - document-store timestamps shaped like {'seconds': 1704067200}

    Returns None for anything that cannot be read as a point in time.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    if isinstance(value, Mapping):
        value = value.get("seconds", value.get("_seconds"))
        if value is None or isinstance(value, bool):
            return None
    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    if not isinstance(value, str):
        return None

    s = value.strip()
    if s == "":
        return None
    if s.endswith(("Z", "z")):
        s = s[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(s)
    except ValueError:
        pass
    for fmt in _DAY_FORMATS:
        try:
            return datetime.strptime(s, fmt)
        except ValueError:
            continue
    return None


def parse_day(value) -> date | None:
    """Parse a stored value into a calendar day, dropping any time of day."""
    if isinstance(value, date) and not isinstance(value, datetime):
        return value
    ts = parse_timestamp(value)
    if ts is None:
        return None
    return ts.date()


def shift_months(d: date, months: int) -> date:
    """Return the first day of the month `months` away from `d`'s month.

    Example: shift_months(date(2024, 3, 15), -6) -> date(2023, 9, 1)
    """
    index = d.year * 12 + (d.month - 1) + months
    year, month = divmod(index, 12)
    return date(year, month + 1, 1)


def month_label(d: date) -> str:
    """Short month name, e.g. 'Jan'."""
    return d.strftime("%b")


def format_day(ts: datetime) -> str:
    """Format a timestamp as 'YYYY-MM-DD' for chart labels."""
    return ts.strftime("%Y-%m-%d")


def to_local_datetime(dt, tz_name: str | None = None):
    """Convert a datetime from source tz (assume UTC if naive) to local or given tz.

    - If `tz_name` is 'local' or None: use system local timezone.
    - If `tz_name` is IANA tz name (e.g., 'America/New_York'): use that.
    - If `dt` has no tzinfo, assume UTC.
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    if tz_name and tz_name != "local":
        from zoneinfo import ZoneInfo, ZoneInfoNotFoundError
        try:
            return dt.astimezone(ZoneInfo(tz_name))
        except (ZoneInfoNotFoundError, ValueError):
            return dt.astimezone()
    return dt.astimezone()


def local_today(tz_name: str | None = None) -> date:
    """Today's date in the configured timezone."""
    return to_local_datetime(datetime.now(timezone.utc), tz_name).date()
