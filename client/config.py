from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientSettings(BaseSettings):
    api_base: str = Field("http://localhost:8000/api", alias="WISHPOCKET_API_BASE")
    frontend_base: str = Field("http://localhost:5173", alias="WISHPOCKET_FRONTEND_BASE")
    timeout: float = Field(8.0, alias="WISHPOCKET_TIMEOUT")
    local_db: Path = Field(Path.home() / ".wishpocket" / "db.json", alias="WISHPOCKET_LOCAL_DB")
    log_level: str = Field("WARNING", alias="LOG_LEVEL")

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

    def share_link(self, list_id: str) -> str:
        return f"{self.frontend_base.rstrip('/')}/#/view/{list_id}"

    def edit_link(self, list_id: str) -> str:
        return f"{self.frontend_base.rstrip('/')}/#/edit/{list_id}"


@lru_cache()
def get_client_settings() -> ClientSettings:
    return ClientSettings()
