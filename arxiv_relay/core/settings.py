"""
Purpose:
- Centralized configuration using pydantic-settings.
- Reads from environment variables and optional .env file.
- Keeps the upstream URL, host/port and defaults tunable without code changes.
"""

from functools import lru_cache
from typing import List
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # Pydantic v2 config (env file + ignore unexpected env vars)
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # API host/port
    host: str = Field(default="0.0.0.0", description="Bind address for FastAPI/Uvicorn")
    port: int = Field(default=3000, description="Port for FastAPI/Uvicorn")

    # CORS
    cors_allow_origins: List[str] = Field(default=["*"], description="Allowed origins for browser apps")

    # --- Upstream (arXiv export API) ---
    arxiv_api_url: str = Field(
        default="https://export.arxiv.org/api/query",
        description="Base URL the built query-string is appended to."
    )
    default_limit: int = Field(default=15, description="max_results when the client sends no limit")
    default_start: int = Field(default=0, description="start offset when the client sends none")
    upstream_timeout_seconds: float = Field(default=30.0, gt=0, description="Bound on one outbound call")

    # ---- Logging ----
    log_level: str = Field(default="INFO")
    log_json: bool = Field(default=True)   # False -> human-readable console output

@lru_cache
def get_settings() -> Settings:
    return settings

settings = Settings()
