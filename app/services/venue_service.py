"""Venue service: storage access plus in-memory filtering."""
import logging
from typing import Optional

from app.dao import RedisVenueDAO
from app.metrics import VENUE_OPERATIONS_TOTAL
from app.errors import VenueNotFoundError
from app.models import Venue, VenueCreate, VenueFilters, VenueUpdate
from app.services.venue_filter import filter_venues

logger = logging.getLogger(__name__)


class VenueService:
    """Service for venue queries and writes (thin wrapper over the DAO)."""

    def __init__(self, venue_dao: RedisVenueDAO):
        """Initialize venue service.

        Args:
            venue_dao: Redis DAO for venue persistence
        """
        self.venue_dao = venue_dao

    def list_venues(self, filters: Optional[VenueFilters] = None) -> list[Venue]:
        """Fetch the full collection and keep the venues matching `filters`."""
        return filter_venues(self.venue_dao.list_venues(), filters)

    def get_venue(self, venue_id: str) -> Optional[Venue]:
        return self.venue_dao.get_venue(venue_id)

    def create_venue(self, data: VenueCreate) -> Venue:
        try:
            venue = self.venue_dao.create_venue(data)
        except Exception:
            VENUE_OPERATIONS_TOTAL.labels(operation="create", status="error").inc()
            raise
        VENUE_OPERATIONS_TOTAL.labels(operation="create", status="success").inc()
        return venue

    def update_venue(self, venue_id: str, changes: VenueUpdate) -> Venue:
        """Apply a partial update.

        Raises:
            VenueNotFoundError: if the venue does not exist
        """
        try:
            venue = self.venue_dao.update_venue(venue_id, changes)
        except VenueNotFoundError:
            VENUE_OPERATIONS_TOTAL.labels(operation="update", status="not_found").inc()
            raise
        except Exception:
            VENUE_OPERATIONS_TOTAL.labels(operation="update", status="error").inc()
            raise
        VENUE_OPERATIONS_TOTAL.labels(operation="update", status="success").inc()
        return venue

    def delete_venue(self, venue_id: str) -> bool:
        try:
            deleted = self.venue_dao.delete_venue(venue_id)
        except Exception:
            VENUE_OPERATIONS_TOTAL.labels(operation="delete", status="error").inc()
            raise
        status = "success" if deleted else "not_found"
        VENUE_OPERATIONS_TOTAL.labels(operation="delete", status=status).inc()
        return deleted
