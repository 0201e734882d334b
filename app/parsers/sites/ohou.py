from __future__ import annotations

from bs4 import BeautifulSoup

from app.parsers.generic import GenericParser, first_text
from app.parsers.schemas import ScrapedData


class OhouParser(GenericParser):
    """Today's House (ohou.se) product pages."""

    site_label = "오늘의집"

    title_selector = ".production-selling-header__title__name"
    price_selector = ".production-selling-header__price__price .number"

    def apply_site_rules(self, soup: BeautifulSoup, data: ScrapedData) -> ScrapedData:
        update = {"site_name": self.site_label}
        if not data.title:
            update["title"] = first_text(soup, self.title_selector)
        if not data.price:
            update["price"] = first_text(soup, self.price_selector)
        return data.model_copy(update=update)
