from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import get_settings
from app.redis_client import init_redis
from app.utils.errors import install_exception_handlers
from routes.lists import router as lists_router
from routes.scrape import router as scrape_router
from routes.wishlist import router as wishlist_router

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.redis = await init_redis()
    try:
        yield
    finally:
        await app.state.redis.aclose()


app = FastAPI(title="WishPocket API", version="1.0.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if "*" in settings.allowed_origins else settings.allowed_origins,
    allow_credentials="*" not in settings.allowed_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

install_exception_handlers(app)
app.include_router(lists_router)
app.include_router(wishlist_router)
app.include_router(scrape_router)


@app.get("/health")
async def health() -> dict:
    return {"status": "ok"}
