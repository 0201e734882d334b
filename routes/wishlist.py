from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.schemas.wishlist import ApiResponse, LegacyWishListPayload, WishListPublic
from app.services.wishlist import WishListService
from app.utils.errors import BadRequestError
from routes.lists import get_wishlist_service

# Single save/load endpoint kept for clients built against the first API
router = APIRouter(prefix="/api/wishlist", tags=["Lists"])


@router.post("", response_model=ApiResponse[WishListPublic])
async def save_wishlist(
    data: LegacyWishListPayload,
    service: WishListService = Depends(get_wishlist_service),
):
    return ApiResponse(success=True, data=await service.save_legacy(data))


@router.get("", response_model=ApiResponse[WishListPublic])
async def load_wishlist(id: Optional[str] = Query(None), service: WishListService = Depends(get_wishlist_service)):
    if not id:
        raise BadRequestError("ID missing")
    return ApiResponse(success=True, data=await service.get(id))
