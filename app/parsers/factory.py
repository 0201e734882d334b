from __future__ import annotations

from typing import Optional, Type

import httpx

from app.parsers.base import BaseParser, hostname_of
from app.parsers.generic import GenericParser
from app.parsers.schemas import ExtractionResult
from app.parsers.sites import MusinsaParser, NaverParser, OhouParser

# Registrable domain -> ParserClass; subdomains (smartstore.naver.com, ...) match too
PARSER_REGISTRY: dict[str, Type[BaseParser]] = {
    "naver.com": NaverParser,
    "musinsa.com": MusinsaParser,
    "ohou.se": OhouParser,
}


class ParserFactory:
    @staticmethod
    def get_parser_class(url: str) -> Type[BaseParser]:
        host = hostname_of(url).lower()
        for domain, parser_class in PARSER_REGISTRY.items():
            if host == domain or host.endswith(f".{domain}"):
                return parser_class

        # Fallback to generic
        return GenericParser

    @staticmethod
    def get_parser(url: str, client: Optional[httpx.AsyncClient] = None) -> BaseParser:
        return ParserFactory.get_parser_class(url)(client=client)


async def extract(url: str, client: Optional[httpx.AsyncClient] = None) -> ExtractionResult:
    return await ParserFactory.get_parser(url, client=client).extract(url)
