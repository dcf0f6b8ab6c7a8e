"""Application settings loaded from environment variables via pydantic-settings."""

from __future__ import annotations

from enum import Enum
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Repo root when installed in editable mode.
_PROJECT_ROOT = Path(__file__).resolve().parents[3]


class LogFormat(str, Enum):
    json = "json"
    console = "console"


class Settings(BaseSettings):
    """Central configuration — every value can be overridden with NORIFARM_* env vars."""

    model_config = SettingsConfigDict(
        env_prefix="NORIFARM_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # ── Storage ─────────────────────────────────────────────────────────────
    data_dir: Path = _PROJECT_ROOT / "data"
    uploads_dir: Path = _PROJECT_ROOT / "public" / "uploads"
    upload_url_prefix: str = "/uploads"
    max_upload_bytes: int = 5 * 1024 * 1024

    # ── Shop ────────────────────────────────────────────────────────────────
    shop_base_url: str = "https://norifarm-shop.com"
    currency: str = "KRW"
    default_user_id: str = "1"

    # ── Observability ───────────────────────────────────────────────────────
    log_level: str = "info"
    log_format: LogFormat = LogFormat.console


@lru_cache
def get_settings() -> Settings:
    """Singleton settings instance (cached after first call)."""
    return Settings()
