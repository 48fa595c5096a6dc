"""Venue handler for HTTP requests."""
import functools
import logging
import math
from typing import Any, Optional

from starlette.responses import Response

from app.metrics import VENUES_LISTED, VENUE_EXPORTS_TOTAL, VENUE_EXPORT_ROWS
from app.models import (
    PeriodKind,
    PeriodState,
    Venue,
    VenueCreate,
    VenueFilters,
    VenuePage,
    VenueUpdate,
)
from app.services import ExportService, VenueService, VENUE_EXPORT_COLUMNS
from app.services.csv_export import build_csv, csv_header, download_csv
from app.services.export_service import venue_to_row
from app.services.period import compute_default_period, compute_period

logger = logging.getLogger(__name__)

SORT_KEYS = (
    "quartier_no",
    "quartier",
    "operator",
    "support",
    "bet_type",
    "address",
    "contact_phone",
    "gps_lat",
    "gps_lng",
)
SORT_DIRECTIONS = ("asc", "desc")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def compare_values(a: Any, b: Any) -> int:
    """Numeric comparison when both sides are numbers, case-insensitive text otherwise."""
    if _is_number(a) and _is_number(b):
        return (a > b) - (a < b)
    left = "" if a is None else str(a).casefold()
    right = "" if b is None else str(b).casefold()
    return (left > right) - (left < right)


def sort_venues(venues: list[Venue], sort_key: str = "quartier", sort_dir: str = "asc") -> list[Venue]:
    """Sort venues by one column.

    Each pair of values is compared on its own: numerically when both are
    numbers, otherwise as case-insensitive text with missing values as "".
    Ties keep their input order in both directions.
    """
    if sort_key not in SORT_KEYS:
        raise ValueError(f"Unknown sort key: {sort_key}")

    sign = -1 if sort_dir == "desc" else 1

    def compare(a: Venue, b: Venue) -> int:
        return sign * compare_values(getattr(a, sort_key), getattr(b, sort_key))

    return sorted(venues, key=functools.cmp_to_key(compare))


class VenueHandler:
    """Handler for venue-related HTTP requests."""

    def __init__(
        self,
        venue_service: VenueService,
        export_service: ExportService,
        timezone: str = "Africa/Bamako",
        page_size: int = 10,
        filename_prefix: str = "salles",
    ):
        """Initialize venue handler.

        Args:
            venue_service: Venue queries and writes
            export_service: Operator export rows
            timezone: Zone used for export filenames and periods
            page_size: Default listing page size
            filename_prefix: Prefix of generated CSV filenames
        """
        self.venue_service = venue_service
        self.export_service = export_service
        self.timezone = timezone
        self.page_size = page_size
        self.filename_prefix = filename_prefix

    def list_venues(
        self,
        filters: Optional[VenueFilters] = None,
        sort_key: str = "quartier",
        sort_dir: str = "asc",
        page: int = 1,
        page_size: Optional[int] = None,
    ) -> VenuePage:
        """Filter, sort and paginate the venue collection.

        Flow:
        1. Load the full collection and apply the filters
        2. Sort by `sort_key` in `sort_dir` order
        3. Slice the requested page (out-of-range pages are empty)
        """
        size = page_size or self.page_size
        rows = self.venue_service.list_venues(filters)
        VENUES_LISTED.set(len(rows))

        ordered = sort_venues(rows, sort_key, sort_dir)
        total_pages = max(1, math.ceil(len(ordered) / size))
        start = (page - 1) * size

        logger.info(
            f"[VenueHandler] ListVenues: {len(rows)} matches, sort={sort_key} {sort_dir}, "
            f"page={page}/{total_pages}"
        )
        return VenuePage(
            items=ordered[start:start + size],
            total=len(ordered),
            page=page,
            page_size=size,
            total_pages=total_pages,
        )

    def get_venue(self, venue_id: str) -> Optional[Venue]:
        return self.venue_service.get_venue(venue_id)

    def create_venue(self, data: VenueCreate) -> Venue:
        return self.venue_service.create_venue(data)

    def update_venue(self, venue_id: str, changes: VenueUpdate) -> Venue:
        return self.venue_service.update_venue(venue_id, changes)

    def delete_venue(self, venue_id: str) -> bool:
        return self.venue_service.delete_venue(venue_id)

    def export_listing_csv(
        self,
        filters: Optional[VenueFilters] = None,
        sort_key: str = "quartier",
        sort_dir: str = "asc",
    ) -> Response:
        """CSV download of the filtered and sorted listing (all pages)."""
        rows = sort_venues(self.venue_service.list_venues(filters), sort_key, sort_dir)
        today = compute_default_period(tz=self.timezone).start
        filename = f"{self.filename_prefix}_{today}.csv"
        return self._deliver(filename, [venue_to_row(v) for v in rows], kind="listing")

    def export_operator_csv(
        self,
        operator: str,
        start: Optional[str] = None,
        end: Optional[str] = None,
    ) -> Response:
        """CSV download of one operator's venues.

        Raises:
            ExportValidationError: missing operator or start after end
        """
        rows = self.export_service.venue_rows(operator, start, end)
        period = compute_period(PeriodKind.RANGE, start, end, tz=self.timezone)
        filename = f"{self.filename_prefix}_{operator}_{period.start}_{period.end}.csv"
        return self._deliver(filename, rows, kind="operator")

    def get_default_period(self) -> PeriodState:
        return compute_default_period(tz=self.timezone)

    def get_period(
        self, kind: PeriodKind, start: Optional[str] = None, end: Optional[str] = None
    ) -> PeriodState:
        return compute_period(kind, start, end, tz=self.timezone)

    def ping(self) -> dict[str, str]:
        """Health check endpoint.

        Returns:
            {"status": "pong"}
        """
        logger.debug("[VenueHandler] Ping")
        return {"status": "pong"}

    def _deliver(self, filename: str, rows: list[dict[str, Any]], kind: str) -> Response:
        # An empty export still carries the header so the sheet keeps its columns
        csv_text = build_csv(rows, VENUE_EXPORT_COLUMNS) if rows else csv_header(VENUE_EXPORT_COLUMNS)
        VENUE_EXPORTS_TOTAL.labels(kind=kind).inc()
        VENUE_EXPORT_ROWS.observe(len(rows))
        logger.info(f"[VenueHandler] Export {kind}: {len(rows)} rows -> {filename}")
        return download_csv(filename, csv_text)
