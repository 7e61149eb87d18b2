# member_registry/config/settings.py

from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # --- Application ---
    app_name: str = "member-registry"
    environment: Literal["dev", "test", "prod"] = "dev"
    debug: bool = False
    version: str = "0.1.0"
    host: str = "0.0.0.0"
    port: int = 8080

    # --- Security ---
    admin_pin: str = Field(..., min_length=1)
    cors_origins: list[str] = ["https://evamendezs.github.io"]

    # --- Database ---
    database_url: str = "sqlite+aiosqlite:///./afiliados.db"

    # --- Seed ---
    seed_csv_path: str = "afiliados.csv"

    # --- Credential ---
    credential_title: str = "ASOCIACIÓN MUTUAL CAMIONEROS DE MENDOZA"
    credential_logo_path: Optional[str] = "assets/LogoMutual.png"
    credential_timezone: str = "America/Argentina/Buenos_Aires"

    # --- Audit ---
    audit_recent_limit: int = Field(100, ge=1)

    # --- Observability ---
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"


@lru_cache
def get_settings() -> AppSettings:
    return AppSettings()
