from __future__ import annotations

import logging
from typing import Any, Optional
from urllib.parse import urlparse

import httpx

from app.parsers.schemas import ScrapedData
from app.schemas.wishlist import WishItem, WishList, new_id, now_ms
from client.local_store import LocalListStore

logger = logging.getLogger(__name__)

DEMO_IMAGE = "https://via.placeholder.com/150?text=No+Image"


class WishPocketError(Exception):
    pass


class ListNotFoundError(WishPocketError):
    def __init__(self, list_id: str, local: bool = False):
        self.list_id = list_id
        self.local = local
        where = " (local)" if local else ""
        super().__init__(f"List {list_id} not found{where}")


class _BackendUnavailable(Exception):
    """Network failure, timeout, 5xx or a non-JSON body: time to use the local copy."""


def demo_record(url: str) -> ScrapedData:
    return ScrapedData(
        title="상품 정보를 가져올 수 없습니다 (Demo Mode)",
        image=DEMO_IMAGE,
        description="백엔드 서버가 연결되지 않았거나 차단되었습니다. URL을 직접 입력해보세요.",
        price="0",
        site_name=urlparse(url).netloc or url,
        url=url,
    )


class WishPocketClient:
    """HTTP client for the WishPocket API.

    Every list the API returns is mirrored into ``local_store`` so the
    offline fallback sees the latest known state.
    """

    def __init__(
        self,
        api_base: str,
        local_store: LocalListStore,
        timeout_s: float = 8.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.api_base = api_base.rstrip("/")
        self.local_store = local_store
        self.timeout_s = timeout_s
        self.transport = transport

    async def _request(self, method: str, path: str, json: Any = None) -> tuple[int, dict]:
        url = f"{self.api_base}/{path.lstrip('/')}"
        try:
            async with httpx.AsyncClient(timeout=self.timeout_s, transport=self.transport) as client:
                response = await client.request(method, url, json=json)
        except httpx.HTTPError as exc:
            raise _BackendUnavailable(str(exc)) from exc

        if response.status_code >= 500:
            raise _BackendUnavailable(f"Backend unavailable: {response.status_code}")
        try:
            body = response.json()
        except ValueError as exc:
            raise _BackendUnavailable(f"Backend unavailable: {response.status_code}") from exc
        if not isinstance(body, dict):
            raise _BackendUnavailable("Unexpected response body")
        return response.status_code, body

    async def scrape_url(self, url: str) -> ScrapedData:
        try:
            status, body = await self._request("POST", "/scrape", json={"url": url})
            if body.get("success") and body.get("data"):
                return ScrapedData.model_validate(body["data"])
            raise WishPocketError(body.get("error") or f"Server Error: {status}")
        except (_BackendUnavailable, WishPocketError) as exc:
            logger.warning("Scraping failed, falling back to demo data: %s", exc)
            return demo_record(url)

    async def create_list(self, owner: str, birthday: str, password: Optional[str] = None) -> WishList:
        payload = {"owner": owner, "birthday": birthday, "password": password or None}
        try:
            status, body = await self._request("POST", "/list", json=payload)
        except _BackendUnavailable as exc:
            logger.warning("API unavailable, creating list locally: %s", exc)
            wishlist = WishList(id=new_id(), owner=owner, birthday=birthday, password=password or None, created_at=now_ms())
            return self.local_store.save(wishlist)

        if not body.get("success"):
            raise WishPocketError(body.get("error") or f"Server Error: {status}")
        return self.local_store.save(WishList.model_validate(body["data"]))

    async def get_list(self, list_id: str) -> WishList:
        try:
            status, body = await self._request("GET", f"/list/{list_id}")
        except _BackendUnavailable as exc:
            logger.warning("API unavailable, reading list %s locally: %s", list_id, exc)
            wishlist = self.local_store.get(list_id)
            if wishlist is None:
                raise ListNotFoundError(list_id, local=True)
            return wishlist

        if status == 404:
            raise ListNotFoundError(list_id)
        if not body.get("success"):
            raise WishPocketError(body.get("error") or f"Server Error: {status}")
        return self.local_store.save(WishList.model_validate(body["data"]))

    async def update_list(self, list_id: str, fields: dict[str, Any]) -> WishList:
        payload = _jsonable(fields)
        try:
            status, body = await self._request("PATCH", f"/list/{list_id}", json=payload)
        except _BackendUnavailable as exc:
            logger.warning("API unavailable, updating list %s locally: %s", list_id, exc)
            current = self.local_store.get(list_id)
            if current is None:
                raise ListNotFoundError(list_id, local=True)
            merged = current.model_dump()
            merged.update({k: v for k, v in fields.items() if k not in ("id", "created_at", "createdAt")})
            return self.local_store.save(WishList.model_validate(merged))

        if status == 404:
            raise ListNotFoundError(list_id)
        if not body.get("success"):
            raise WishPocketError(body.get("error") or f"Server Error: {status}")
        return self.local_store.save(WishList.model_validate(body["data"]))

    async def delete_list(self, list_id: str) -> bool:
        try:
            await self._request("DELETE", f"/list/{list_id}")
        except _BackendUnavailable as exc:
            logger.warning("API unavailable, deleting list %s locally only: %s", list_id, exc)
        self.local_store.delete(list_id)
        return True

    async def add_item(
        self,
        list_id: str,
        url: str,
        comment: Optional[str] = None,
        priority: Optional[int] = None,
    ) -> WishList:
        """Scrape ``url`` and put the result at the top of the list."""
        scraped = await self.scrape_url(url)
        item = WishItem(**scraped.model_dump(), comment=comment or None, priority=priority)
        wishlist = await self.get_list(list_id)
        return await self.update_list(list_id, {"items": [item, *wishlist.items]})

    async def remove_item(self, list_id: str, item_id: str) -> WishList:
        wishlist = await self.get_list(list_id)
        items = [item for item in wishlist.items if item.id != item_id]
        return await self.update_list(list_id, {"items": items})


def _jsonable(fields: dict[str, Any]) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for key, value in fields.items():
        if isinstance(value, list):
            value = [v.model_dump(mode="json", by_alias=True) if hasattr(v, "model_dump") else v for v in value]
        out[key] = value
    return out
