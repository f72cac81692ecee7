import re
from datetime import date, datetime, timezone
from typing import Optional

ISO_DATE_RE = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")

def utcnow() -> datetime:
    """Naive UTC now, matching how DateTime columns are stored."""
    return datetime.now(timezone.utc).replace(tzinfo=None)

def parse_iso_date(value: str) -> Optional[date]:
    """
    Parse a strict YYYY-MM-DD date.
    Returns None for anything else ("2015", "2015-2-1", "2015-02-30").
    """
    value = (value or "").strip()
    if not ISO_DATE_RE.match(value):
        return None
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        return None
