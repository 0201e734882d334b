from __future__ import annotations

from bs4 import BeautifulSoup

from app.parsers.generic import GenericParser, first_text
from app.parsers.schemas import ScrapedData


class MusinsaParser(GenericParser):
    # Prices are often rendered client-side; the static spans and the
    # product meta tag are what survives in the served HTML.
    price_selectors = (
        "#goods_price",
        ".product_article_price",
        'meta[property="product:price:amount"]',
    )
    brand_selector = ".product_info_head .item_categories a"

    def apply_site_rules(self, soup: BeautifulSoup, data: ScrapedData) -> ScrapedData:
        brand = first_text(soup, self.brand_selector)
        update = {"site_name": f"Musinsa ({brand})" if brand else "Musinsa"}
        if not data.price:
            update["price"] = first_text(soup, *self.price_selectors)
        return data.model_copy(update=update)
