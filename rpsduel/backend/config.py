"""Configuration helpers for backend runtime."""

from __future__ import annotations

import os
from dataclasses import dataclass


DEFAULT_API_BASE_URL = "https://discord.com/api/v10"


@dataclass(frozen=True)
class BackendSettings:
    app_id: str
    bot_token: str
    public_key: str | None
    api_base_url: str
    host: str
    port: int
    session_ttl_seconds: float | None
    catalog: str
    log_level: str


def load_settings() -> BackendSettings:
    port_raw = os.getenv("RPSDUEL_PORT", "8000")
    ttl_raw = float(os.getenv("RPSDUEL_SESSION_TTL", "900"))
    return BackendSettings(
        app_id=os.getenv("RPSDUEL_APP_ID", ""),
        bot_token=os.getenv("RPSDUEL_BOT_TOKEN", ""),
        public_key=os.getenv("RPSDUEL_PUBLIC_KEY") or None,
        api_base_url=os.getenv("RPSDUEL_API_BASE_URL", DEFAULT_API_BASE_URL),
        host=os.getenv("RPSDUEL_HOST", "127.0.0.1"),
        port=int(port_raw),
        session_ttl_seconds=ttl_raw if ttl_raw > 0 else None,
        catalog=os.getenv("RPSDUEL_CATALOG", "classic"),
        log_level=os.getenv("RPSDUEL_LOG_LEVEL", "INFO"),
    )
