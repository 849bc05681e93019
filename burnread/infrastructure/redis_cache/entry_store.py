from __future__ import annotations

import logging
from typing import Optional

from redis.asyncio import Redis
from redis.exceptions import RedisError

from burnread.domain.entities import Entry
from burnread.domain.errors import StorageFailure
from burnread.domain.ports.entry_store import EntryStorePort
from burnread.domain.sanitize import MAX_MESSAGE_LENGTH
from burnread.domain.services import is_well_formed, key_hint

logger = logging.getLogger(__name__)


_LUA_CONSUME = """
-- KEYS[1]: message key
local value = redis.call('GET', KEYS[1])
if not value then
  return false
end
redis.call('DEL', KEYS[1])
return value
"""


class RedisEntryStore(EntryStorePort):
    def __init__(
        self,
        redis: Redis,
        *,
        key_prefix: str = "msg:",
        max_length: int = MAX_MESSAGE_LENGTH,
    ) -> None:
        self._redis = redis
        self._prefix = key_prefix
        self._max_length = max_length
        self._consume_script = redis.register_script(_LUA_CONSUME)

    def _key(self, key: str) -> str:
        return f"{self._prefix}{key}"

    async def ensure_ready(self) -> None:
        try:
            await self._redis.ping()
        except RedisError as e:
            raise StorageFailure(f"redis unavailable: {e}") from e
        logger.info("redis entry store ready", extra={"prefix": self._prefix})

    async def create(self, key: str, content: str) -> None:
        entry = Entry(key=key, content=content, max_length=self._max_length)
        try:
            await self._redis.set(self._key(entry.key), entry.content)
        except RedisError as e:
            raise StorageFailure(f"cannot write entry: {e}") from e
        logger.debug("entry created", extra={"key": key_hint(key)})

    async def consume_once(self, key: str) -> Optional[str]:
        if not is_well_formed(key):
            return None
        # GET + DEL run as one script; Redis never interleaves scripts.
        try:
            content = await self._consume_script(keys=[self._key(key)])
        except RedisError as e:
            raise StorageFailure(f"cannot consume entry: {e}") from e
        if content is None:
            return None
        logger.debug("entry consumed", extra={"key": key_hint(key)})
        return content

    async def close(self) -> None:
        await self._redis.aclose()
