"""Data models package for the venue registry."""
from app.models.venue import (
    Venue,
    VenueCreate,
    VenueUpdate,
    VenuePage,
    VENUE_SUPPORT,
)
from app.models.venue_filter import VenueFilters
from app.models.period import (
    PeriodKind,
    PeriodState,
    DATE_FORMAT,
)
from app.models.lookups import LookupKey, DEFAULT_LOOKUPS

__all__ = [
    # Venue models
    "Venue",
    "VenueCreate",
    "VenueUpdate",
    "VenuePage",
    "VENUE_SUPPORT",
    # Filter models
    "VenueFilters",
    # Period models
    "PeriodKind",
    "PeriodState",
    "DATE_FORMAT",
    # Lookup models
    "LookupKey",
    "DEFAULT_LOOKUPS",
]
