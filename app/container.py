"""Dependency injection container for application components."""
import logging

import redis

from app.config import Settings
from app.db import RedisClient
from app.dao import RedisLookupDAO, RedisVenueDAO
from app.services import ExportService, VenueService
from app.handlers import VenueHandler

logger = logging.getLogger(__name__)


class Container:
    """Dependency injection container.

    Initializes and wires up all application dependencies.
    """

    def __init__(self, settings: Settings):
        """Initialize container with all dependencies.

        Args:
            settings: Application settings
        """
        logger.info("[Container] Initializing container")
        self.settings = settings

        logger.info(f"[Container] Connecting to Redis at {settings.redis_address}")
        # RedisClient pings on creation and raises if Redis is unreachable
        try:
            self.redis_client = RedisClient.from_settings(
                host=settings.redis_host,
                port=settings.redis_port,
                password=settings.redis_password,
                db=settings.redis_db,
            )
            logger.info("[Container] Redis connection successful")
        except Exception as e:
            logger.error(f"[Container] Failed to connect to Redis: {e}")
            raise

        self.redis_venue_dao = RedisVenueDAO(self.redis_client)
        self.redis_lookup_dao = RedisLookupDAO(self.redis_client)

        self.venue_service = VenueService(self.redis_venue_dao)
        self.export_service = ExportService(self.redis_venue_dao)

        self.venue_handler = VenueHandler(
            self.venue_service,
            self.export_service,
            timezone=settings.timezone,
            page_size=settings.venues_page_size,
            filename_prefix=settings.export_filename_prefix,
        )

        logger.info("[Container] Container initialized successfully")

    def shutdown(self):
        """Clean up resources on shutdown."""
        try:
            self.redis_client.client.close()
            logger.info("[Container] Redis connection closed")
        except redis.RedisError as e:
            logger.error(f"[Container] Error closing Redis connection: {e}")
