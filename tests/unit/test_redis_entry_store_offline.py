import pytest
from redis.asyncio import Redis
from redis.asyncio.retry import Retry
from redis.backoff import NoBackoff

from burnread.domain.errors import StorageFailure
from burnread.domain.services import generate_message_id
from burnread.infrastructure.redis_cache.entry_store import RedisEntryStore

# Nothing listens on port 1: every real command fails fast.
DEAD_URL = "redis://127.0.0.1:1/0"


def make_offline_store() -> RedisEntryStore:
    r = Redis.from_url(
        DEAD_URL,
        encoding="utf-8",
        decode_responses=True,
        socket_connect_timeout=0.5,
        retry=Retry(NoBackoff(), 0),
    )
    return RedisEntryStore(r)


@pytest.mark.asyncio
async def test_ensure_ready_raises_storage_failure():
    store = make_offline_store()
    with pytest.raises(StorageFailure):
        await store.ensure_ready()
    await store.close()


@pytest.mark.asyncio
async def test_create_raises_storage_failure():
    store = make_offline_store()
    with pytest.raises(StorageFailure):
        await store.create(generate_message_id(), "hello")
    await store.close()


@pytest.mark.asyncio
async def test_consume_raises_storage_failure_not_miss():
    store = make_offline_store()
    with pytest.raises(StorageFailure):
        await store.consume_once(generate_message_id())
    await store.close()


@pytest.mark.asyncio
@pytest.mark.parametrize("key", ["../etc/passwd", "", "not-a-real-token", "*"])
async def test_malformed_key_misses_without_contacting_redis(key):
    store = make_offline_store()
    assert await store.consume_once(key) is None
    await store.close()
