"""Local time helpers.

Visit timestamps are stored as naive wall-clock datetimes in the configured
timezone; every datetime entering the application goes through
``to_local_naive`` first so that comparisons never mix naive and aware values.
"""

from datetime import date, datetime

import pytz

from organiza.config import get_settings

settings = get_settings()
tz = pytz.timezone(settings.TIMEZONE)


def now_local() -> datetime:
    """Current wall-clock time in the configured timezone (naive)."""
    return datetime.now(tz).replace(tzinfo=None)


def today_local() -> date:
    return datetime.now(tz).date()


def to_local_naive(value: datetime) -> datetime:
    """Convert an aware datetime to local wall-clock time; naive values pass through."""
    if value.tzinfo is None:
        return value
    return value.astimezone(tz).replace(tzinfo=None)
