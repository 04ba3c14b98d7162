from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from expense_api import __version__


class Settings(BaseSettings):
    """Application settings loaded from environment with defaults.

    Environment variable mapping follows pydantic's rules (e.g., APP_NAME, DEBUG, PORT, API_PREFIX, LOG_JSON).
    """

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Basic app metadata
    app_name: str = "Expense Tracker API"
    debug: bool = False
    version: str = __version__

    # Standalone listener (python -m expense_api)
    host: str = "0.0.0.0"
    port: int = 3000

    # Routing
    api_prefix: str = "/api/v1"

    # Logging: JSON lines by default, plain text for local debugging
    log_json: bool = True

    @field_validator("api_prefix")
    @classmethod
    def normalize_prefix(cls, v: str) -> str:
        v = v.strip().rstrip("/")
        if v and not v.startswith("/"):
            v = "/" + v
        return v

    @field_validator("port")
    @classmethod
    def valid_port(cls, v: int) -> int:
        if not 0 < v < 65536:
            raise ValueError("port must be between 1 and 65535")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
