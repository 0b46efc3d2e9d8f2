"""Expiry header timestamps"""

from datetime import datetime, timedelta, timezone
from email.utils import format_datetime
from typing import Optional

from ..constants import FAR_FUTURE_YEARS, NEAR_FUTURE_MINUTES


def utc_now() -> datetime:
    """Current time as an aware UTC datetime"""
    return datetime.now(timezone.utc)


def http_date(moment: datetime) -> str:
    """Format a datetime as an HTTP-date, e.g. ``Fri, 01 Jan 2030 00:00:00 GMT``"""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return format_datetime(moment.astimezone(timezone.utc), usegmt=True)


def add_years(moment: datetime, years: int) -> datetime:
    """Shift a datetime by whole years; Feb 29 becomes Mar 1 in common years"""
    try:
        return moment.replace(year=moment.year + years)
    except ValueError:
        return moment.replace(year=moment.year + years, month=3, day=1)


def far_future_expiry(now: Optional[datetime] = None) -> str:
    """Expiry for immutable, version-pinned assets"""
    return http_date(add_years(now or utc_now(), FAR_FUTURE_YEARS))


def near_future_expiry(now: Optional[datetime] = None) -> str:
    """Expiry for the mutable "latest" assets"""
    return http_date((now or utc_now()) + timedelta(minutes=NEAR_FUTURE_MINUTES))
