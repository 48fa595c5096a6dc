"""Export row building for venue CSV downloads."""
import logging
from typing import Any, Optional

from app.dao import RedisVenueDAO
from app.errors import ExportValidationError
from app.models import Venue

logger = logging.getLogger(__name__)

# Column order of the venue export sheet
VENUE_EXPORT_COLUMNS = [
    "quartier_no",
    "quartier",
    "operator",
    "support",
    "bet_type",
    "address",
    "contact_phone",
    "gps_lat",
    "gps_lng",
    "notes",
]


def venue_to_row(venue: Venue) -> dict[str, Any]:
    """Flatten a venue into an export row; absent values become ""."""
    row = {}
    for column in VENUE_EXPORT_COLUMNS:
        value = getattr(venue, column)
        row[column] = "" if value is None else value
    return row


class ExportService:
    """Builds export rows for a single operator."""

    def __init__(self, venue_dao: RedisVenueDAO):
        self.venue_dao = venue_dao

    def venue_rows(
        self,
        operator: str,
        date_from: Optional[str] = None,
        date_to: Optional[str] = None,
    ) -> list[dict[str, Any]]:
        """Export rows for every venue of `operator`.

        Dates are YYYY-MM-DD strings and compare lexically. Venues have no
        reporting date, so the period is only checked for consistency.

        Raises:
            ExportValidationError: missing operator or start after end
        """
        if not operator:
            raise ExportValidationError("Veuillez choisir un opérateur.")
        if date_from and date_to and date_from > date_to:
            raise ExportValidationError("La date de début doit être avant la date de fin.")

        rows = [
            venue_to_row(v)
            for v in self.venue_dao.list_venues()
            if v.operator == operator
        ]
        logger.info(f"[ExportService] {len(rows)} venue rows for operator={operator}")
        return rows
