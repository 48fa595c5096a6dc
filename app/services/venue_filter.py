"""In-memory venue filtering.

Filters a venue collection already fetched from storage. The free-text
search builds one haystack per venue at filter time, which is fine for the
small collections this registry holds; a large collection would need a
precomputed normalized search blob per record with the same matching rules.
"""
import logging
from collections.abc import Iterable, Mapping
from typing import Any, Optional

from app.models import Venue, VenueFilters

logger = logging.getLogger(__name__)

# Fields concatenated into the free-text haystack, in order
SEARCHABLE_FIELDS = ("quartier", "address", "notes", "contact_phone")


def normalize(value: str) -> str:
    """Trim and lowercase a value for comparison."""
    return value.strip().lower()


def _field(venue: Any, name: str) -> Any:
    """Read a field from a Venue model or a plain mapping; None when missing."""
    if isinstance(venue, Mapping):
        return venue.get(name)
    return getattr(venue, name, None)


def build_haystack(venue: Any) -> str:
    """Lowercased searchable text of a venue.

    Optional fields that are absent contribute an empty string so the
    separators stay in place.
    """
    parts = []
    for name in SEARCHABLE_FIELDS:
        value = _field(venue, name)
        parts.append(value if isinstance(value, str) else "")
    return " ".join(parts).lower()


def matches(venue: Any, filters: VenueFilters) -> bool:
    """Check one venue against every constraint set in `filters`."""
    if filters.quartier:
        quartier = _field(venue, "quartier")
        if not isinstance(quartier, str) or normalize(quartier) != normalize(filters.quartier):
            return False

    if filters.operator and _field(venue, "operator") != filters.operator:
        return False

    if filters.bet_type and _field(venue, "bet_type") != filters.bet_type:
        return False

    q = normalize(filters.q) if filters.q else ""
    if q and q not in build_haystack(venue):
        return False

    return True


def filter_venues(
    venues: Iterable[Venue], filters: Optional[VenueFilters] = None
) -> list[Venue]:
    """Return the venues satisfying all constraints, in their original order.

    Args:
        venues: Full venue collection
        filters: Constraints to apply; None means no constraint

    Returns:
        Stable sub-sequence of `venues`
    """
    rows = list(venues)
    if filters is None or filters.is_empty():
        return rows

    result = [v for v in rows if matches(v, filters)]
    logger.debug(f"[VenueFilter] {len(result)}/{len(rows)} venues match {filters.model_dump(exclude_none=True)}")
    return result
