from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Snake_case attributes, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ScrapedData(CamelModel):
    title: str = ""
    image: str = ""
    price: str = ""
    description: str = ""
    site_name: str = ""
    url: str


class ExtractionResult(BaseModel):
    success: bool
    data: ScrapedData
    error: Optional[str] = None
