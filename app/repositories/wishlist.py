from __future__ import annotations

import logging
from typing import Any, Optional

from redis.asyncio import Redis

from app.schemas.wishlist import WishItem, WishList, new_id

logger = logging.getLogger(__name__)

LIST_KEY_PREFIX = "list:"
LIST_TTL_SECONDS = 60 * 60 * 24 * 45


class WishListRepository:
    """Wishlist records as JSON strings under ``<prefix><id>``, expiring after ``ttl_seconds``.

    Writes are plain SET with EX, so concurrent updates are last-write-wins and
    every write restarts the retention window.
    """

    def __init__(self, redis: Redis, ttl_seconds: int = LIST_TTL_SECONDS, key_prefix: str = LIST_KEY_PREFIX):
        self.redis = redis
        self.ttl_seconds = ttl_seconds
        self.key_prefix = key_prefix

    def _key(self, list_id: str) -> str:
        return f"{self.key_prefix}{list_id}"

    async def save(self, wishlist: WishList) -> WishList:
        await self.redis.set(self._key(wishlist.id), wishlist.model_dump_json(by_alias=True), ex=self.ttl_seconds)
        return wishlist

    async def get(self, list_id: str) -> Optional[WishList]:
        raw = await self.redis.get(self._key(list_id))
        if not raw:
            return None
        return WishList.model_validate_json(raw)

    async def update(self, list_id: str, fields: dict[str, Any]) -> Optional[WishList]:
        current = await self.get(list_id)
        if current is None:
            return None

        merged = current.model_dump()
        merged.update({k: v for k, v in fields.items() if k not in ("id", "created_at")})
        updated = WishList.model_validate(merged)
        return await self.save(updated)

    async def delete(self, list_id: str) -> None:
        await self.redis.delete(self._key(list_id))

    async def add_item(self, list_id: str, item: WishItem) -> Optional[WishList]:
        current = await self.get(list_id)
        if current is None:
            return None

        if any(existing.id == item.id for existing in current.items):
            item = item.model_copy(update={"id": new_id()})
        # newest first
        current.items.insert(0, item)
        return await self.save(current)

    async def remove_item(self, list_id: str, item_id: str) -> Optional[WishList]:
        current = await self.get(list_id)
        if current is None:
            return None

        remaining = [item for item in current.items if item.id != item_id]
        if len(remaining) == len(current.items):
            logger.info("Item %s not in list %s, nothing to remove", item_id, list_id)
            return current
        current.items = remaining
        return await self.save(current)
