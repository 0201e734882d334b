from __future__ import annotations

import logging

from fastapi import APIRouter

from app.parsers import ScrapedData, extract
from app.schemas.wishlist import ApiResponse, ScrapeRequest
from app.utils.errors import BadRequestError, UpstreamError

router = APIRouter(prefix="/api", tags=["Scrape"])
logger = logging.getLogger(__name__)


@router.post("/scrape", response_model=ApiResponse[ScrapedData])
async def scrape(data: ScrapeRequest):
    """
    Extracts a product preview from a shop URL.
    On fetch failure the error body still carries a fallback record with the URL.
    """
    url = (data.url or "").strip()
    if not url:
        raise BadRequestError("URL is required")
    if not url.startswith(("http://", "https://")):
        raise BadRequestError("Invalid URL")

    result = await extract(url)
    if not result.success:
        logger.warning("Scrape failed for %s: %s", url, result.error)
        raise UpstreamError(
            result.error or "Failed to fetch external URL",
            {"data": result.data.model_dump(by_alias=True)},
        )
    return ApiResponse(success=True, data=result.data)
