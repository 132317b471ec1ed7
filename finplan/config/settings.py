from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "Financial Planning Engine"
    log_level: str = "INFO"
    cors_origins: list[str] = ["http://localhost:3000"]
    default_projection_periods: int = 12
    # None leaves full precision in API responses
    output_decimal_places: Optional[int] = None

    model_config = SettingsConfigDict(env_prefix="FINPLAN_", env_file=".env")


@lru_cache
def get_settings() -> Settings:
    return Settings()
