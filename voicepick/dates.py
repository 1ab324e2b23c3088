from __future__ import annotations

from datetime import date, datetime

PACK_DATE_FORMATS = ("%m/%d/%Y", "%m%d%Y", "%Y-%m-%d")


def date_parts(d: date) -> tuple[str, str, str]:
    """Reduce a calendar date to its (MM, DD, YY) label parts."""
    return f"{d.month:02d}", f"{d.day:02d}", f"{d.year % 100:02d}"


def parse_pack_date(text: str | None) -> date | None:
    s = (text or "").strip()
    if not s:
        return None
    for fmt in PACK_DATE_FORMATS:
        try:
            return datetime.strptime(s, fmt).date()
        except ValueError:
            continue
    try:
        return datetime.fromisoformat(s).date()
    except ValueError:
        return None
