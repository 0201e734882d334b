from functools import lru_cache

from pydantic import AnyHttpUrl, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


class Settings(BaseSettings):
    redis_url: str = Field("redis://localhost:6379/0", alias="REDIS_URL")
    frontend_base: AnyHttpUrl = Field("http://localhost:5173", alias="FRONTEND_BASE")
    cors_origins: str = Field("*", alias="CORS_ORIGINS")

    # 45 days
    list_ttl_seconds: int = Field(60 * 60 * 24 * 45, alias="LIST_TTL_SECONDS")
    list_key_prefix: str = Field("list:", alias="LIST_KEY_PREFIX")

    scraper_user_agent: str = Field(DEFAULT_USER_AGENT, alias="SCRAPER_USER_AGENT")

    log_level: str = Field("INFO", alias="LOG_LEVEL")
    env: str = Field("prod", alias="ENV")

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

    @property
    def allowed_origins(self) -> list[str]:
        origins = [str(self.frontend_base).rstrip("/")]
        for origin in self.cors_origins.split(","):
            origin = origin.strip()
            if origin and origin not in origins:
                origins.append(origin)
        return origins


@lru_cache()
def get_settings() -> Settings:
    return Settings()
