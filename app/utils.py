import datetime
import re
from typing import Optional

PARTIAL_DATE_PATTERN = re.compile(r"^(\d{4})(?:-(\d{2}))?$")


def parse_date(value: str | None) -> Optional[datetime.datetime]:
    """
    Parse an ISO-8601 date or datetime string into a naive UTC datetime.
    Year-only ("2024") and year-month ("2024-06") values mean the first day
    of that period. Returns None when the value is empty or not a
    recognizable date.
    """
    if not value:
        return None
    text = value.strip()

    partial = PARTIAL_DATE_PATTERN.match(text)
    if partial:
        year, month = partial.groups()
        try:
            return datetime.datetime(int(year), int(month or 1), 1)
        except ValueError:
            return None

    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(datetime.timezone.utc).replace(tzinfo=None)
    return parsed
