from __future__ import annotations

import abc
import logging
import re
from typing import Optional
from urllib.parse import unquote, urlparse

import httpx
from bs4 import BeautifulSoup

from app.config import get_settings
from app.parsers.schemas import ExtractionResult, ScrapedData

logger = logging.getLogger(__name__)

_NON_DIGITS = re.compile(r"[^0-9]")
_DECIMAL_TAIL = re.compile(r"(?<=\d)\.\d{1,2}(?=\D*$)")


def clean_price(raw: object) -> str:
    """Reduce a price to its digits: ``"29,900원"`` -> ``"29900"``, ``15000.0`` -> ``"15000"``."""
    if raw is None:
        return ""
    text = str(raw).strip()
    text = _DECIMAL_TAIL.sub("", text)
    return _NON_DIGITS.sub("", text)


def hostname_of(url: str) -> str:
    return urlparse(url).netloc.split("@")[-1].split(":")[0]


def title_from_url(url: str) -> str:
    parsed = urlparse(url)
    segments = [s for s in parsed.path.split("/") if s]
    if segments:
        title = unquote(segments[-1]).replace("-", " ").replace("_", " ").strip()
        if title:
            return title
    return hostname_of(url) or url


def fallback_data(url: str) -> ScrapedData:
    return ScrapedData(title=title_from_url(url), site_name=hostname_of(url), url=url)


class BaseParser(abc.ABC):
    def __init__(self, client: Optional[httpx.AsyncClient] = None, user_agent: Optional[str] = None):
        self.client = client
        self.headers = {
            "User-Agent": user_agent or get_settings().scraper_user_agent,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
            "Accept-Language": "ko-KR,ko;q=0.9,en-US;q=0.8,en;q=0.7",
        }

    async def fetch_html(self, url: str) -> str:
        if self.client is not None:
            response = await self.client.get(url, headers=self.headers, follow_redirects=True)
        else:
            async with httpx.AsyncClient(headers=self.headers, follow_redirects=True) as client:
                response = await client.get(url)
        response.raise_for_status()
        return response.text

    async def extract(self, url: str) -> ExtractionResult:
        """Fetch and parse a product URL. Never raises; failures carry a fallback record."""
        scheme = urlparse(url).scheme
        if scheme not in ("http", "https"):
            return ExtractionResult(success=False, data=fallback_data(url), error="Invalid URL")

        try:
            html = await self.fetch_html(url)
        except httpx.HTTPStatusError as exc:
            logger.warning("Fetch of %s returned %s", url, exc.response.status_code)
            return ExtractionResult(success=False, data=fallback_data(url), error="Failed to fetch external URL")
        except httpx.HTTPError as exc:
            logger.warning("Fetch of %s failed: %s", url, exc)
            return ExtractionResult(success=False, data=fallback_data(url), error="Failed to fetch external URL")

        soup = BeautifulSoup(html, "html.parser")
        data = self.parse(soup, url)
        return ExtractionResult(success=True, data=self.finalize(data))

    def finalize(self, data: ScrapedData) -> ScrapedData:
        title = data.title.strip() or title_from_url(data.url)
        return data.model_copy(
            update={
                "title": title,
                "price": clean_price(data.price),
                "description": data.description.strip(),
                "site_name": data.site_name.strip() or hostname_of(data.url),
            }
        )

    @abc.abstractmethod
    def parse(self, soup: BeautifulSoup, url: str) -> ScrapedData:
        """Build a product record from an already fetched page."""
        pass
