"""Runtime settings, read from the environment (and ``.env`` if present)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ROOT_DIR = Path(__file__).resolve().parents[3]
load_dotenv(dotenv_path=ROOT_DIR / ".env")

DEFAULT_PORT = 4000
DEFAULT_API_URL = f"http://localhost:{DEFAULT_PORT}/api"


def get_env(*keys: str, default: str | None = None) -> str | None:
    for k in keys:
        v = os.getenv(k)
        if v is not None and str(v).strip() != "":
            return v.strip()
    return default


def _get_int(*keys: str, default: int) -> int:
    v = get_env(*keys, default=None)
    if v is None:
        return default
    try:
        return int(v)
    except ValueError as exc:
        raise ValueError(f"{keys[0]} must be an integer, got {v!r}") from exc


@dataclass(frozen=True)
class Settings:
    host: str
    port: int
    log_level: str
    api_base_url: str


def load_settings() -> Settings:
    """Read settings from the current environment."""
    return Settings(
        host=get_env("HOST", default="0.0.0.0") or "0.0.0.0",
        port=_get_int("PORT", default=DEFAULT_PORT),
        log_level=(get_env("LOG_LEVEL", default="INFO") or "INFO").upper(),
        api_base_url=(
            get_env("STOREFRONT_API_URL", default=DEFAULT_API_URL) or DEFAULT_API_URL
        ).rstrip("/"),
    )
