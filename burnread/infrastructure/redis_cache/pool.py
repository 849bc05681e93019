from __future__ import annotations

from redis.asyncio import Redis


def make_redis(url: str) -> Redis:
    """
    Build a Redis client for the given URL.
    decode_responses=True -> we get/put str, not bytes.
    """
    return Redis.from_url(url, encoding="utf-8", decode_responses=True)
