from __future__ import annotations

from burnread.domain.ports.entry_store import EntryStorePort
from burnread.infrastructure.filesystem.entry_store import FileEntryStore
from burnread.infrastructure.memory.entry_store import InMemoryEntryStore
from burnread.infrastructure.redis_cache.entry_store import RedisEntryStore
from burnread.infrastructure.redis_cache.pool import make_redis
from burnread.settings import Settings


def build_entry_store(settings: Settings) -> EntryStorePort:
    """Pick the adapter named by STORAGE_BACKEND. Not opened or checked yet."""
    backend = settings.storage_backend
    if backend == "memory":
        return InMemoryEntryStore(max_length=settings.max_message_length)
    if backend == "filesystem":
        return FileEntryStore(
            settings.messages_dir, max_length=settings.max_message_length
        )
    if backend == "redis":
        return RedisEntryStore(
            make_redis(settings.redis_url),
            key_prefix=settings.redis_key_prefix,
            max_length=settings.max_message_length,
        )
    raise ValueError(f"unknown storage backend: {backend}")
