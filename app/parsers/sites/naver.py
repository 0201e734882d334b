from __future__ import annotations

from bs4 import BeautifulSoup

from app.parsers.generic import GenericParser, first_text
from app.parsers.schemas import ScrapedData


class NaverParser(GenericParser):
    site_label = "Naver Shopping"

    price_selectors = ("._22kNQuEXmb", "span.lowest_price", ".price_num")

    def apply_site_rules(self, soup: BeautifulSoup, data: ScrapedData) -> ScrapedData:
        update = {"site_name": self.site_label}
        if not data.price:
            update["price"] = first_text(soup, *self.price_selectors)
        return data.model_copy(update=update)
