# app/utils/dates.py - Parsing of client-supplied date strings
from datetime import date, datetime, time, timezone
from typing import Union


def parse_date_string(value: Union[str, date, datetime]) -> datetime:
    """
    Parse a ``YYYY-MM-DD`` or ISO-8601 datetime string into a naive UTC datetime.

    Raises:
        ValueError: if the value is empty or not a recognisable date
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        return datetime.combine(value, time.min)
    else:
        text = (value or "").strip()
        if not text:
            raise ValueError("Date is required")
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            raise ValueError(f"Invalid date format: {value!r}")

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def day_start(value: date) -> datetime:
    return datetime.combine(value, time.min)


def day_end(value: date) -> datetime:
    return datetime.combine(value, time(23, 59, 59))
