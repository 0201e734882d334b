from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from redis.asyncio import Redis

from app.config import get_settings
from app.redis_client import get_redis
from app.repositories.wishlist import WishListRepository
from app.schemas.wishlist import (
    AddItemRequest,
    ApiResponse,
    CreateListRequest,
    UpdateListRequest,
    VerifyPasswordRequest,
    WishListPublic,
)
from app.services.wishlist import WishListService

router = APIRouter(prefix="/api/list", tags=["Lists"])
logger = logging.getLogger(__name__)


async def get_wishlist_service(redis: Redis = Depends(get_redis)) -> WishListService:
    settings = get_settings()
    repository = WishListRepository(
        redis,
        ttl_seconds=settings.list_ttl_seconds,
        key_prefix=settings.list_key_prefix,
    )
    return WishListService(repository)


@router.post("", response_model=ApiResponse[WishListPublic])
async def create_list(
    data: CreateListRequest,
    service: WishListService = Depends(get_wishlist_service),
):
    return ApiResponse(success=True, data=await service.create(data))


@router.get("/{list_id}", response_model=ApiResponse[WishListPublic])
async def get_list(list_id: str, service: WishListService = Depends(get_wishlist_service)):
    return ApiResponse(success=True, data=await service.get(list_id))


@router.patch("/{list_id}", response_model=ApiResponse[WishListPublic])
async def update_list(
    list_id: str,
    data: UpdateListRequest,
    service: WishListService = Depends(get_wishlist_service),
):
    """
    Merges the fields present in the body into the stored list.
    The id never changes and the retention window restarts.
    """
    return ApiResponse(success=True, data=await service.update(list_id, data))


@router.delete("/{list_id}", response_model=ApiResponse[None])
async def delete_list(list_id: str, service: WishListService = Depends(get_wishlist_service)):
    await service.delete(list_id)
    return ApiResponse(success=True)


@router.post("/{list_id}/items", response_model=ApiResponse[WishListPublic])
async def add_item(
    list_id: str,
    data: AddItemRequest,
    service: WishListService = Depends(get_wishlist_service),
):
    return ApiResponse(success=True, data=await service.add_item(list_id, data))


@router.delete("/{list_id}/items/{item_id}", response_model=ApiResponse[WishListPublic])
async def remove_item(list_id: str, item_id: str, service: WishListService = Depends(get_wishlist_service)):
    return ApiResponse(success=True, data=await service.remove_item(list_id, item_id))


@router.post("/{list_id}/verify", response_model=ApiResponse[bool])
async def verify_password(
    list_id: str,
    data: VerifyPasswordRequest,
    service: WishListService = Depends(get_wishlist_service),
):
    valid = await service.verify_password(list_id, data.password)
    if not valid:
        logger.info("Rejected password for list %s", list_id)
    return ApiResponse(success=valid, data=valid, error=None if valid else "Invalid password")
