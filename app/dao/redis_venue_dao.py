"""Redis-based Data Access Object for venue CRUD operations."""
import logging
import uuid
from datetime import datetime
from typing import Callable, Optional

import pytz
from pydantic import ValidationError

from app.db import RedisClient
from app.errors import VenueNotFoundError
from app.models import Venue, VenueCreate, VenueUpdate

logger = logging.getLogger(__name__)

# Venue ids in creation order; listing follows this order
VENUES_INDEX_KEY_V1 = "venues_index_v1"
VENUE_KEY_FORMAT_V1 = "venue_v1:{}"
VENUE_ID_PREFIX = "ven_"


def utc_now() -> datetime:
    return datetime.now(pytz.utc)


def iso_timestamp(moment: datetime) -> str:
    """ISO-8601 UTC timestamp with millisecond precision and a Z suffix."""
    return moment.astimezone(pytz.utc).strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


class RedisVenueDAO:
    """Data Access Object for venue records stored in Redis.

    Redis errors are not caught here; they propagate to the caller.
    """

    def __init__(self, client: RedisClient, clock: Callable[[], datetime] = utc_now):
        """Initialize RedisVenueDAO.

        Args:
            client: RedisClient instance
            clock: Returns the current instant, used for created_at
        """
        self.client = client
        self.clock = clock

    def list_venues(self) -> list[Venue]:
        """Return every venue in creation order.

        Records that vanished or no longer parse are skipped with a log entry.
        """
        venue_ids = self.client.lrange(VENUES_INDEX_KEY_V1)
        payloads = self.client.mget([VENUE_KEY_FORMAT_V1.format(vid) for vid in venue_ids])

        venues = []
        for venue_id, json_str in zip(venue_ids, payloads):
            if json_str is None:
                logger.warning(f"[RedisVenueDAO] Index references missing venue {venue_id}")
                continue
            try:
                venues.append(Venue.model_validate_json(json_str))
            except ValidationError as e:
                logger.error(f"[RedisVenueDAO] Failed to parse venue {venue_id}: {e}")
                continue

        logger.debug(f"[RedisVenueDAO] Listed {len(venues)} venues")
        return venues

    def get_venue(self, venue_id: str) -> Optional[Venue]:
        """Retrieve a venue by its ID.

        Args:
            venue_id: Venue identifier

        Returns:
            Venue object or None if not found
        """
        json_str = self.client.get(VENUE_KEY_FORMAT_V1.format(venue_id))
        if json_str is None:
            return None
        return Venue.model_validate_json(json_str)

    def create_venue(self, data: VenueCreate) -> Venue:
        """Store a new venue, assigning its id and created_at.

        Args:
            data: Validated creation payload

        Returns:
            The stored venue
        """
        venue = Venue(
            id=f"{VENUE_ID_PREFIX}{uuid.uuid4().hex[:12]}",
            created_at=iso_timestamp(self.clock()),
            **data.model_dump(),
        )
        self.client.set_and_append(
            VENUE_KEY_FORMAT_V1.format(venue.id),
            venue.model_dump_json(),
            VENUES_INDEX_KEY_V1,
            venue.id,
        )
        logger.info(f"[RedisVenueDAO] Created venue {venue.id}")
        return venue

    def update_venue(self, venue_id: str, changes: VenueUpdate) -> Venue:
        """Apply a partial update. id, created_at and created_by never change.

        Raises:
            VenueNotFoundError: if the venue does not exist
        """
        current = self.get_venue(venue_id)
        if current is None:
            raise VenueNotFoundError(venue_id)

        updated = current.model_copy(update=changes.changes())
        # Round-trip through validation so the stored record stays well-typed
        updated = Venue.model_validate(updated.model_dump())

        self.client.set(VENUE_KEY_FORMAT_V1.format(venue_id), updated.model_dump_json())
        logger.info(f"[RedisVenueDAO] Updated venue {venue_id}: {sorted(changes.changes())}")
        return updated

    def delete_venue(self, venue_id: str) -> bool:
        """Delete a venue.

        Returns:
            True if the venue was deleted, False if it did not exist
        """
        deleted = self.client.delete_and_unlink(
            VENUE_KEY_FORMAT_V1.format(venue_id), VENUES_INDEX_KEY_V1, venue_id
        )
        if not deleted:
            logger.warning(f"[RedisVenueDAO] Venue {venue_id} not found, nothing to delete")
            return False

        logger.info(f"[RedisVenueDAO] Deleted venue {venue_id}")
        return True
