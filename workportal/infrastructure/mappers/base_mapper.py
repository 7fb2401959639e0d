"""
Conversion helpers shared by the mappers.
PostgREST returns timestamps as ISO strings and numerics as JSON numbers or strings;
SQLite hands back naive datetimes. Domain entities always get aware UTC datetimes
and Decimals.
"""

import re
from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Any, Optional


_FRACTION = re.compile(r"\.(\d+)")


def parse_timestamp(value: str) -> datetime:
    """
    Parse a Postgres ISO timestamp. Postgres drops trailing zeros from the
    fraction, and `fromisoformat` before 3.11 only takes 3 or 6 digits.
    """
    value = value.strip().replace("Z", "+00:00")
    value = _FRACTION.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), value, count=1)
    return datetime.fromisoformat(value)


def to_utc(value: Any) -> Optional[datetime]:
    if value is None or value == "":
        return None
    if isinstance(value, str):
        value = parse_timestamp(value)
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def to_date(value: Any) -> Optional[date]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(value)


def to_decimal(value: Any) -> Optional[Decimal]:
    if value is None or value == "":
        return None
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def iso(value: Optional[Any]) -> Optional[str]:
    """Serialize a date/datetime for a PostgREST payload."""
    return value.isoformat() if value is not None else None


def money(value: Optional[Decimal]) -> Optional[str]:
    """Serialize a Decimal without losing precision."""
    return str(value) if value is not None else None
