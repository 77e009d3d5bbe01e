"""
Configuration and startup security checks for the EcoRoot auth service.

Settings are read from the environment (and an optional `.env` file) through
pydantic-settings. `ensure_secure_config_on_startup` refuses obviously
insecure production deployments without burdening local development.
"""
from __future__ import annotations

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Auth service settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Environment
    ENVIRONMENT: str = "development"

    # Supabase (identity provider)
    SUPABASE_URL: str = ""
    SUPABASE_ANON_KEY: str = ""
    SUPABASE_SERVICE_ROLE_KEY: str = ""

    # HTTP surface
    API_PREFIX: str = ""
    CORS_ORIGINS: List[str] = ["*"]

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    @property
    def route_prefix(self) -> str:
        """Normalized router prefix: empty or '/segment' without trailing slash."""
        prefix = (self.API_PREFIX or "").strip().rstrip("/")
        if prefix and not prefix.startswith("/"):
            prefix = f"/{prefix}"
        return prefix

    def is_prod_like(self) -> bool:
        return _is_prod_like(self.ENVIRONMENT)


def _is_prod_like(env: str) -> bool:
    env_l = (env or "").lower()
    return env_l in {"prod", "production", "stage", "staging"}


def _is_placeholder(value: str) -> bool:
    val = (value or "").strip().upper()
    return not val or val == "DUMMY_DO_NOT_USE" or val.startswith("CHANGE_ME")


settings = Settings()


def ensure_secure_config_on_startup(cfg: Settings | None = None) -> None:
    """Fail fast on insecure production configuration.

    Checks (prod/staging only):
    - SUPABASE_URL must be set and use https.
    - Anon key and Service Role key must be set and not a known placeholder.
    """
    cfg = cfg or settings
    if not cfg.is_prod_like():
        return  # dev/test remain permissive

    url = (cfg.SUPABASE_URL or "").strip().lower()
    if not url:
        raise SystemExit("Refusing to start: SUPABASE_URL is unset in production.")
    if not url.startswith("https://"):
        raise SystemExit("Refusing to start: SUPABASE_URL must use https in production.")

    if _is_placeholder(cfg.SUPABASE_ANON_KEY):
        raise SystemExit(
            "Refusing to start: SUPABASE_ANON_KEY is unset or a placeholder in production."
        )
    if _is_placeholder(cfg.SUPABASE_SERVICE_ROLE_KEY):
        raise SystemExit(
            "Refusing to start: SUPABASE_SERVICE_ROLE_KEY is unset or a placeholder in production."
        )
