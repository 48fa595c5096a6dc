"""Redis-based storage of the categorical lookup lists."""
import json
import logging

from app.db import RedisClient
from app.models import DEFAULT_LOOKUPS, LookupKey

logger = logging.getLogger(__name__)

LOOKUP_KEY_FORMAT_V1 = "lookups_v1:{}"


class RedisLookupDAO:
    """Reads and edits the operators / supports / bet_types lists."""

    def __init__(self, client: RedisClient):
        self.client = client

    def get(self, key: LookupKey) -> list[str]:
        """Stored list for `key`, or its default when nothing was stored yet."""
        json_str = self.client.get(LOOKUP_KEY_FORMAT_V1.format(key.value))
        if json_str is None:
            return list(DEFAULT_LOOKUPS[key])
        return json.loads(json_str)

    def all(self) -> dict[str, list[str]]:
        return {key.value: self.get(key) for key in LookupKey}

    def add(self, key: LookupKey, value: str) -> list[str]:
        """Append a value unless it is blank or already present (case-insensitive).

        Returns:
            The resulting list
        """
        values = self.get(key)
        cleaned = value.strip()
        normalized = cleaned.lower()
        if not normalized or any(v.strip().lower() == normalized for v in values):
            return values

        values.append(cleaned)
        self._save(key, values)
        logger.info(f"[RedisLookupDAO] Added {cleaned!r} to {key.value}")
        return values

    def remove(self, key: LookupKey, value: str) -> list[str]:
        """Remove exact occurrences of `value`.

        Returns:
            The resulting list
        """
        values = [v for v in self.get(key) if v != value]
        self._save(key, values)
        logger.info(f"[RedisLookupDAO] Removed {value!r} from {key.value}")
        return values

    def _save(self, key: LookupKey, values: list[str]) -> None:
        self.client.set(LOOKUP_KEY_FORMAT_V1.format(key.value), json.dumps(values, ensure_ascii=False))
