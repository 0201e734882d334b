from app.parsers.factory import ParserFactory, extract
from app.parsers.schemas import ExtractionResult, ScrapedData
from app.parsers.base import BaseParser

__all__ = ["ParserFactory", "extract", "ExtractionResult", "ScrapedData", "BaseParser"]
