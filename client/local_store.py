from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from app.schemas.wishlist import WishList

logger = logging.getLogger(__name__)


class LocalListStore:
    """Offline copy of lists: one JSON object ``{list_id: list}`` in a single file."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def _load(self) -> dict[str, dict]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8") or "{}")
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("Local list database %s is unreadable, starting empty: %s", self.path, exc)
            return {}
        return data if isinstance(data, dict) else {}

    def _dump(self, data: dict[str, dict]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")

    def get(self, list_id: str) -> Optional[WishList]:
        raw = self._load().get(list_id)
        if raw is None:
            return None
        try:
            return WishList.model_validate(raw)
        except ValidationError as exc:
            logger.warning("Dropping corrupt local list %s: %s", list_id, exc)
            return None

    def save(self, wishlist: WishList) -> WishList:
        data = self._load()
        data[wishlist.id] = wishlist.model_dump(mode="json", by_alias=True)
        self._dump(data)
        return wishlist

    def delete(self, list_id: str) -> None:
        data = self._load()
        if data.pop(list_id, None) is not None:
            self._dump(data)
