from functools import lru_cache

from pydantic_settings import BaseSettings

from horno_bridge import constants as CONSTANTS


class Settings(BaseSettings):
    # Event store
    SUPABASE_URL: str = ""
    SUPABASE_ANON_KEY: str = ""
    EVENT_TABLE: str = CONSTANTS.DEFAULT_EVENT_TABLE
    STORE_TIMEOUT_SECONDS: float = CONSTANTS.DEFAULT_STORE_TIMEOUT_SECONDS

    # Logging
    LOG_MODE: str = "INFO"

    class Config:
        env_file = ".env"
        extra = "ignore"

    @property
    def debug_mode(self) -> bool:
        return self.LOG_MODE.strip().upper() == "DEBUG"

    @property
    def store_configured(self) -> bool:
        return bool(self.SUPABASE_URL.strip() and self.SUPABASE_ANON_KEY.strip())


@lru_cache
def get_settings() -> Settings:
    """Settings are read once per warm container."""
    return Settings()
