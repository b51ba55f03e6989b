from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env from repo root if present
ENV_PATH = Path(__file__).resolve().parents[3] / ".env"
if ENV_PATH.exists():
    load_dotenv(dotenv_path=ENV_PATH)


class Settings(BaseSettings):
    """Storefront settings (loaded from env, STOREFRONT_ prefix).

    Everything the service keeps is in memory except the order log, which is
    an append-only text file at ``order_log_path``.
    """

    # --- service ---
    service_name: str = Field(default="storefront", description="Service name")
    version: str = Field(default="0.1.0", description="Service version")
    host: str = Field(default="0.0.0.0", description="API bind host")
    port: int = Field(default=8080, description="API bind port")

    # Logging
    log_level: str = Field(default="INFO", description="Root log level")
    log_format: str = Field(default="text", description="text|json")

    # --- persistence ---
    order_log_path: Path = Field(
        default=Path("ecommerce.log"),
        description="Append-only text log of completed orders",
    )

    model_config = SettingsConfigDict(
        env_prefix="STOREFRONT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()

