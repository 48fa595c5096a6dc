"""Thin Redis client wrapper used by the DAOs."""
import logging
from typing import Optional

import redis

logger = logging.getLogger(__name__)


class RedisClient:
    """Redis client exposing the string and list commands the registry uses."""

    def __init__(self, client: redis.Redis):
        """Wrap an existing redis-py client.

        Args:
            client: redis.Redis created with decode_responses=True

        Raises:
            redis.ConnectionError if the server cannot be reached
        """
        self.client = client

        try:
            self.ping()
            logger.info("Connected to Redis")
        except redis.ConnectionError as e:
            logger.error(f"Could not connect to Redis: {e}")
            raise

    @classmethod
    def from_settings(cls, host: str, port: int, password: str = "", db: int = 0) -> "RedisClient":
        """Create the underlying redis-py client and wrap it."""
        return cls(
            redis.Redis(
                host=host,
                port=port,
                password=password or None,
                db=db,
                decode_responses=True,
            )
        )

    def set(self, key: str, value: str) -> None:
        self.client.set(key, value)

    def get(self, key: str) -> Optional[str]:
        """Get value for a given key, or None if the key doesn't exist."""
        return self.client.get(key)

    def mget(self, keys: list[str]) -> list[Optional[str]]:
        """Get values for several keys in one round trip (None for missing keys)."""
        if not keys:
            return []
        return self.client.mget(keys)

    def set_and_append(self, key: str, value: str, list_key: str, member: str) -> None:
        """Store a value and append its member id to an index list atomically.

        Args:
            key: Key holding the value
            value: String value to store
            list_key: Index list key
            member: Member appended to the index list
        """
        pipe = self.client.pipeline(transaction=True)
        pipe.set(key, value)
        pipe.rpush(list_key, member)
        pipe.execute()

    def delete_and_unlink(self, key: str, list_key: str, member: str) -> int:
        """Delete a key and remove its member from an index list atomically.

        Returns:
            Number of keys deleted (0 or 1)
        """
        pipe = self.client.pipeline(transaction=True)
        pipe.delete(key)
        pipe.lrem(list_key, 0, member)
        deleted, _ = pipe.execute()
        return deleted

    def ping(self) -> bool:
        """Check connectivity to Redis.

        Raises:
            redis.ConnectionError if connection fails
        """
        return self.client.ping()
