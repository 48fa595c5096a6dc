"""Data access package."""
from app.dao.redis_venue_dao import RedisVenueDAO
from app.dao.redis_lookup_dao import RedisLookupDAO

__all__ = ["RedisVenueDAO", "RedisLookupDAO"]
