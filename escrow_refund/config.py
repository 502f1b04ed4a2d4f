"""
Application settings loaded from environment variables.

Uses pydantic-settings to validate and type-cast env vars at startup.
"""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Centralised application configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ── Application ───────────────────────────────────────────────────
    app_name: str = "ESCROW_REFUND_DETAIL"
    app_env: Literal["development", "staging", "production"] = "development"
    app_version: str = "1.0.0"

    # ── Server ────────────────────────────────────────────────────────
    host: str = "0.0.0.0"
    port: int = 8000

    # ── CSPC — client information system ──────────────────────────────
    cspc_base_url: str = "https://cspc.example.internal"
    cspc_client_info_path: str = "/api/v1/clients/{client_id}/information"
    cspc_api_timeout: float = 10.0
    cspc_system_name: str = "CSPC"

    # ── Depositor enrichment ──────────────────────────────────────────
    party_type_depositor: str = "depositor"
    external_system_error_template: str = (
        "Failed to retrieve data from external system {system}"
    )

    # ── Logging ───────────────────────────────────────────────────────
    log_level: str = "INFO"
    log_format: Literal["json", "console"] = "json"

    # ── CORS ──────────────────────────────────────────────────────────
    allowed_origins: str = "http://localhost:3000,http://localhost:8000"

    @property
    def cors_origins(self) -> list[str]:
        """Parse comma-separated origins into a list."""
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"

    @property
    def external_system_error_message(self) -> str:
        """Uniform error string written into depositor fields on lookup failure."""
        return self.external_system_error_template.format(
            system=self.cspc_system_name
        )


@lru_cache
def get_settings() -> Settings:
    """
    Cached singleton — settings are read once and reused.
    """
    return Settings()
