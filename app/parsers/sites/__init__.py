from app.parsers.sites.musinsa import MusinsaParser
from app.parsers.sites.naver import NaverParser
from app.parsers.sites.ohou import OhouParser

__all__ = ["MusinsaParser", "NaverParser", "OhouParser"]
