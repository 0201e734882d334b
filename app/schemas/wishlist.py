from __future__ import annotations

import time
import uuid
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, Field, field_validator

from app.parsers.schemas import CamelModel, ScrapedData

T = TypeVar("T")


def new_id() -> str:
    return str(uuid.uuid4())


def now_ms() -> int:
    return int(time.time() * 1000)


class WishItem(ScrapedData):
    id: str = Field(default_factory=new_id)
    comment: Optional[str] = None
    priority: Optional[int] = Field(None, ge=0, le=1)


class WishListPublic(CamelModel):
    """What readers of a list get back: everything except the password."""

    id: str
    owner: str
    birthday: str
    items: list[WishItem] = Field(default_factory=list)
    created_at: int = Field(default_factory=now_ms)


class WishList(WishListPublic):
    password: Optional[str] = None

    @field_validator("items")
    @classmethod
    def _unique_item_ids(cls, items: list[WishItem]) -> list[WishItem]:
        _check_unique_ids(items)
        return items

    def public(self) -> WishListPublic:
        return WishListPublic.model_validate(self.model_dump(exclude={"password"}))


class CreateListRequest(CamelModel):
    owner: str = Field(..., min_length=1)
    birthday: str = Field(..., min_length=1)
    password: Optional[str] = None

    @field_validator("owner", "birthday")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        return _strip_required(value)


class UpdateListRequest(CamelModel):
    owner: Optional[str] = None
    birthday: Optional[str] = None
    items: Optional[list[WishItem]] = None
    password: Optional[str] = None

    @field_validator("owner", "birthday", "items")
    @classmethod
    def _not_null(cls, value):
        # absent means unchanged; explicit null is rejected
        if value is None:
            raise ValueError("must not be null")
        return value

    @field_validator("owner", "birthday")
    @classmethod
    def _not_blank(cls, value: Optional[str]) -> Optional[str]:
        return value if value is None else _strip_required(value)

    @field_validator("items")
    @classmethod
    def _unique_item_ids(cls, items: Optional[list[WishItem]]) -> Optional[list[WishItem]]:
        if items is not None:
            _check_unique_ids(items)
        return items


class AddItemRequest(ScrapedData):
    id: Optional[str] = None
    comment: Optional[str] = None
    priority: Optional[int] = Field(None, ge=0, le=1)


class LegacyWishListPayload(CamelModel):
    """Body of the legacy ``POST /api/wishlist`` save: create when ``id`` is absent."""

    id: Optional[str] = None
    owner: str = ""
    birthday: str = ""
    items: list[WishItem] = Field(default_factory=list)
    password: Optional[str] = None
    created_at: Optional[int] = None

    @field_validator("items")
    @classmethod
    def _unique_item_ids(cls, items: list[WishItem]) -> list[WishItem]:
        _check_unique_ids(items)
        return items


class ScrapeRequest(BaseModel):
    url: Optional[str] = None


class VerifyPasswordRequest(BaseModel):
    password: str = ""


class ApiResponse(BaseModel, Generic[T]):
    success: bool
    data: Optional[T] = None
    error: Optional[str] = None


def _strip_required(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError("must not be blank")
    return value


def _check_unique_ids(items: list[WishItem]) -> None:
    seen: set[str] = set()
    for item in items:
        if item.id in seen:
            raise ValueError(f"duplicate item id: {item.id}")
        seen.add(item.id)
