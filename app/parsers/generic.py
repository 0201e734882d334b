from __future__ import annotations

import json
import logging
from typing import Any, Iterator, Optional

from bs4 import BeautifulSoup

from app.parsers.base import BaseParser, hostname_of
from app.parsers.schemas import ScrapedData

logger = logging.getLogger(__name__)


def _meta(soup: BeautifulSoup, prop: str) -> str:
    tag = soup.find("meta", property=prop) or soup.find("meta", attrs={"name": prop})
    if tag and tag.get("content"):
        return tag["content"].strip()
    return ""


class GenericParser(BaseParser):
    """OpenGraph defaults overridden by schema.org Product JSON-LD."""

    def parse(self, soup: BeautifulSoup, url: str) -> ScrapedData:
        data = self._extract_open_graph(soup, url)

        json_ld = self._map_json_ld(self._iter_json_ld_products(soup))
        if json_ld:
            data = data.model_copy(update=json_ld)

        return self.apply_site_rules(soup, data)

    def apply_site_rules(self, soup: BeautifulSoup, data: ScrapedData) -> ScrapedData:
        return data

    def _extract_open_graph(self, soup: BeautifulSoup, url: str) -> ScrapedData:
        title = _meta(soup, "og:title")
        if not title and soup.title and soup.title.string:
            title = soup.title.string.strip()

        return ScrapedData(
            title=title,
            image=_meta(soup, "og:image"),
            description=_meta(soup, "og:description"),
            site_name=_meta(soup, "og:site_name") or hostname_of(url),
            url=url,
        )

    def _iter_json_ld_products(self, soup: BeautifulSoup) -> Iterator[dict[str, Any]]:
        for script in soup.find_all("script", type="application/ld+json"):
            try:
                payload = json.loads(script.string or script.get_text() or "")
            except (json.JSONDecodeError, TypeError) as exc:
                logger.debug("Skipping malformed JSON-LD block: %s", exc)
                continue
            yield from self._find_products(payload)

    def _find_products(self, payload: Any) -> Iterator[dict[str, Any]]:
        if isinstance(payload, list):
            for node in payload:
                yield from self._find_products(node)
        elif isinstance(payload, dict):
            node_type = payload.get("@type")
            types = node_type if isinstance(node_type, list) else [node_type]
            if "Product" in types:
                yield payload
            if "@graph" in payload:
                yield from self._find_products(payload["@graph"])

    def _map_json_ld(self, products: Iterator[dict[str, Any]]) -> dict[str, Any]:
        """First populated name/image/price across all Product nodes."""
        mapped: dict[str, Any] = {}
        for product in products:
            if "title" not in mapped and product.get("name"):
                mapped["title"] = str(product["name"])
            if "image" not in mapped:
                image = self._image_url(product.get("image"))
                if image:
                    mapped["image"] = image
            if "price" not in mapped:
                price = self._offer_price(product.get("offers"))
                if price:
                    mapped["price"] = price
        return mapped

    @staticmethod
    def _image_url(image: Any) -> Optional[str]:
        if isinstance(image, list):
            image = image[0] if image else None
        if isinstance(image, dict):
            image = image.get("url") or image.get("contentUrl")
        return str(image) if image else None

    @staticmethod
    def _offer_price(offers: Any) -> Optional[str]:
        if isinstance(offers, list):
            offers = offers[0] if offers else None
        if not isinstance(offers, dict):
            return None
        price = offers.get("price")
        if price in (None, ""):
            price = offers.get("lowPrice")
        return str(price) if price not in (None, "") else None


def first_text(soup: BeautifulSoup, *selectors: str) -> str:
    """Text of the first element matched by any selector, in selector order."""
    for selector in selectors:
        node = soup.select_one(selector)
        if node is None:
            continue
        if node.name == "meta":
            text = (node.get("content") or "").strip()
        else:
            text = node.get_text(strip=True)
        if text:
            return text
    return ""
