import sys
from pathlib import Path

import pytest
import pytest_asyncio
from fakeredis.aioredis import FakeRedis
from fastapi import FastAPI
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))

from app.redis_client import get_redis
from app.repositories.wishlist import WishListRepository
from app.utils.errors import install_exception_handlers
from routes.lists import router as lists_router
from routes.scrape import router as scrape_router
from routes.wishlist import router as wishlist_router


@pytest_asyncio.fixture
async def redis():
    redis = FakeRedis(decode_responses=True)
    try:
        yield redis
    finally:
        await redis.aclose()


@pytest_asyncio.fixture
async def repository(redis):
    return WishListRepository(redis, ttl_seconds=120)


@pytest.fixture
def fake_redis():
    return FakeRedis(decode_responses=True)


@pytest.fixture
def api_client(fake_redis):
    app = FastAPI()
    install_exception_handlers(app)
    app.include_router(lists_router)
    app.include_router(wishlist_router)
    app.include_router(scrape_router)

    async def _redis_override():
        return fake_redis

    app.dependency_overrides[get_redis] = _redis_override
    with TestClient(app) as client:
        yield client
