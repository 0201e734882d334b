from __future__ import annotations

import logging

from fastapi import Request
from redis.asyncio import Redis, from_url
from redis.exceptions import ConnectionError as RedisConnectionError

from app.config import get_settings

logger = logging.getLogger(__name__)


async def init_redis() -> Redis:
    settings = get_settings()
    redis = from_url(settings.redis_url, decode_responses=True)
    if settings.env != "dev":
        return redis

    # Local development without a running Redis falls back to an in-memory fake
    try:
        await redis.ping()
    except RedisConnectionError:
        import fakeredis.aioredis

        logger.warning("Redis at %s is unreachable, using fakeredis for local development", settings.redis_url)
        await redis.aclose()
        return fakeredis.aioredis.FakeRedis(decode_responses=True)
    return redis


async def get_redis(request: Request) -> Redis:
    redis: Redis = request.app.state.redis
    return redis
