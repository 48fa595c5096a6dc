"""Reporting period models."""
from enum import Enum

from pydantic import BaseModel

DATE_FORMAT = "%Y-%m-%d"


class PeriodKind(str, Enum):
    """How a reporting date interval is derived."""
    TODAY = "today"
    WEEK = "week"
    MONTH = "month"
    RANGE = "range"


class PeriodState(BaseModel):
    """Start/end calendar dates (YYYY-MM-DD) of a reporting period.

    For every kind except RANGE, start <= end and both are derived from the
    kind and the current instant. RANGE dates are passed through as given.
    """
    kind: PeriodKind
    start: str
    end: str
