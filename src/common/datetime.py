"""Datetime utilities."""

import logging
from datetime import datetime, timedelta, timezone

from dateutil.parser import parse as parse_date

logger = logging.getLogger(__name__)

# Timezone abbreviations for date parsing
TZINFOS = {
    "EST": timezone(timedelta(hours=-5)),
    "EDT": timezone(timedelta(hours=-4)),
    "CST": timezone(timedelta(hours=-6)),
    "CDT": timezone(timedelta(hours=-5)),
    "MST": timezone(timedelta(hours=-7)),
    "MDT": timezone(timedelta(hours=-6)),
    "PST": timezone(timedelta(hours=-8)),
    "PDT": timezone(timedelta(hours=-7)),
    "GMT": timezone.utc,
    "UTC": timezone.utc,
    "BST": timezone(timedelta(hours=1)),
}


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def to_utc(dt: datetime) -> datetime:
    """Return dt as an aware UTC datetime, assuming UTC when naive."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def parse_datetime(value) -> datetime:
    """Parse a provider timestamp into aware UTC.

    Accepts datetimes, ISO-8601 strings and RFC-822 style feed dates.
    Missing or unparseable values fall back to the current time.
    """
    if value is None or value == "":
        return utc_now()
    if isinstance(value, datetime):
        return to_utc(value)
    try:
        return to_utc(parse_date(str(value), tzinfos=TZINFOS))
    except (ValueError, OverflowError) as e:
        logger.debug("Unparseable timestamp %r: %s", value, e)
        return utc_now()
