"""Reporting period computation.

All dates are resolved in a fixed timezone (Africa/Bamako, UTC+0 without
daylight saving) with weeks starting on Monday, independent of the host
timezone and locale. The timezone and the current instant can be injected.
"""
import calendar
from datetime import date, datetime, timedelta, tzinfo
from typing import Optional, Union

import pytz

from app.models import DATE_FORMAT, PeriodKind, PeriodState

DEFAULT_TIMEZONE = "Africa/Bamako"


def resolve_timezone(tz: Union[str, tzinfo, None] = None) -> tzinfo:
    """Return a tzinfo for a zone name, a tzinfo, or the default zone."""
    if tz is None:
        return pytz.timezone(DEFAULT_TIMEZONE)
    if isinstance(tz, str):
        return pytz.timezone(tz)
    return tz


def today_in(tz: Union[str, tzinfo, None] = None, now: Optional[datetime] = None) -> date:
    """Calendar date of `now` (default: current instant) in the given timezone.

    A naive `now` is taken as already expressed in that timezone.
    """
    zone = resolve_timezone(tz)
    if now is None:
        return datetime.now(zone).date()
    if now.tzinfo is None:
        return now.date()
    return now.astimezone(zone).date()


def week_bounds(day: date) -> tuple[date, date]:
    """Monday on/before `day` and the following Sunday."""
    start = day - timedelta(days=day.weekday())
    return start, start + timedelta(days=6)


def month_bounds(day: date) -> tuple[date, date]:
    """First and last calendar day of the month containing `day`."""
    last_day = calendar.monthrange(day.year, day.month)[1]
    return day.replace(day=1), day.replace(day=last_day)


def compute_period(
    kind: Union[PeriodKind, str],
    start: Optional[str] = None,
    end: Optional[str] = None,
    *,
    tz: Union[str, tzinfo, None] = None,
    now: Optional[datetime] = None,
) -> PeriodState:
    """Compute the start/end dates for a period kind.

    For RANGE, `start` and `end` are returned verbatim and each missing one
    defaults to today. They are not parsed, and start <= end is not checked.
    Other kinds ignore `start` and `end`.

    Args:
        kind: today, week, month or range
        start: Range start (YYYY-MM-DD), RANGE only
        end: Range end (YYYY-MM-DD), RANGE only
        tz: Timezone name or tzinfo (default Africa/Bamako)
        now: Current instant override

    Returns:
        PeriodState with YYYY-MM-DD dates
    """
    kind = PeriodKind(kind)
    today = today_in(tz, now)

    if kind == PeriodKind.TODAY:
        first = last = today
    elif kind == PeriodKind.WEEK:
        first, last = week_bounds(today)
    elif kind == PeriodKind.MONTH:
        first, last = month_bounds(today)
    else:
        fallback = today.strftime(DATE_FORMAT)
        return PeriodState(
            kind=kind,
            start=start if start is not None else fallback,
            end=end if end is not None else fallback,
        )

    return PeriodState(
        kind=kind,
        start=first.strftime(DATE_FORMAT),
        end=last.strftime(DATE_FORMAT),
    )


def compute_default_period(
    *, tz: Union[str, tzinfo, None] = None, now: Optional[datetime] = None
) -> PeriodState:
    """Initial period selection: today."""
    return compute_period(PeriodKind.TODAY, tz=tz, now=now)
