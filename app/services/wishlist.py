from __future__ import annotations

import hmac
import logging

from app.repositories.wishlist import WishListRepository
from app.schemas.wishlist import (
    AddItemRequest,
    CreateListRequest,
    LegacyWishListPayload,
    UpdateListRequest,
    WishItem,
    WishList,
    WishListPublic,
    new_id,
    now_ms,
)
from app.utils.errors import NotFoundError

logger = logging.getLogger(__name__)


class WishListService:
    """List lifecycle on top of the repository. Every value returned here is password-free."""

    def __init__(self, repository: WishListRepository):
        self.repository = repository

    async def create(self, request: CreateListRequest) -> WishListPublic:
        wishlist = WishList(
            id=new_id(),
            owner=request.owner,
            birthday=request.birthday,
            password=request.password or None,
            items=[],
            created_at=now_ms(),
        )
        await self.repository.save(wishlist)
        logger.info("Created list %s for %s", wishlist.id, wishlist.owner)
        return wishlist.public()

    async def get(self, list_id: str) -> WishListPublic:
        return (await self._require(list_id)).public()

    async def update(self, list_id: str, request: UpdateListRequest) -> WishListPublic:
        fields = request.model_dump(exclude_unset=True)
        updated = await self.repository.update(list_id, fields)
        if updated is None:
            raise NotFoundError()
        logger.info("Updated list %s (%s)", list_id, ", ".join(sorted(fields)) or "no fields")
        return updated.public()

    async def delete(self, list_id: str) -> None:
        await self.repository.delete(list_id)
        logger.info("Deleted list %s", list_id)

    async def add_item(self, list_id: str, request: AddItemRequest) -> WishListPublic:
        payload = request.model_dump(exclude_none=True)
        item = WishItem(**payload)
        updated = await self.repository.add_item(list_id, item)
        if updated is None:
            raise NotFoundError()
        return updated.public()

    async def remove_item(self, list_id: str, item_id: str) -> WishListPublic:
        updated = await self.repository.remove_item(list_id, item_id)
        if updated is None:
            raise NotFoundError()
        return updated.public()

    async def verify_password(self, list_id: str, password: str) -> bool:
        wishlist = await self._require(list_id)
        if not wishlist.password:
            return True
        return hmac.compare_digest(wishlist.password.encode(), password.encode())

    async def save_legacy(self, payload: LegacyWishListPayload) -> WishListPublic:
        """Create-or-overwrite keyed by ``payload.id``; a missing id creates a new list."""
        list_id = payload.id or new_id()
        existing = await self.repository.get(list_id) if payload.id else None

        wishlist = WishList(
            id=list_id,
            owner=payload.owner,
            birthday=payload.birthday,
            items=payload.items,
            password=payload.password if payload.password is not None else (existing.password if existing else None),
            created_at=payload.created_at or (existing.created_at if existing else now_ms()),
        )
        await self.repository.save(wishlist)
        return wishlist.public()

    async def _require(self, list_id: str) -> WishList:
        wishlist = await self.repository.get(list_id)
        if wishlist is None:
            raise NotFoundError()
        return wishlist
