"""
Centralised application settings loaded from environment / .env file.

Uses pydantic-settings so every value can be overridden via env vars
or the .env file at the project root.
"""

from __future__ import annotations

import logging
from typing import Annotated

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode

_INSECURE_DEFAULT_SECRET = "your-super-secret-jwt-key-for-liveboard"


class Settings(BaseSettings):
    # ── Project ──────────────────────────────────────────────────────
    PROJECT_NAME: str = "LiveBoard"
    VERSION: str = "1.0.0"
    API_PREFIX: str = "/api"

    # ── Server ───────────────────────────────────────────────────────
    HOST: str = "0.0.0.0"
    PORT: int = 4000

    # ── JWT ──────────────────────────────────────────────────────────
    JWT_SECRET: str = _INSECURE_DEFAULT_SECRET
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_HOURS: int = 24

    # ── Password hashing ─────────────────────────────────────────────
    BCRYPT_ROUNDS: int = 10

    # ── CORS ─────────────────────────────────────────────────────────
    CORS_ORIGINS: Annotated[list[str], NoDecode] = [
        "http://localhost:5173",
        "http://localhost:5174",
        "http://localhost:3000",
    ]

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def _parse_cors(cls, v: object) -> list[str]:
        if isinstance(v, str):
            return [o.strip() for o in v.split(",") if o.strip()]
        return v  # type: ignore[return-value]

    # ── Rate limiting ────────────────────────────────────────────────
    RATE_LIMIT_ENABLED: bool = True
    LOGIN_RATE_LIMIT: str = "5/minute"

    # ── Authorization ────────────────────────────────────────────────
    # Off by default: every authenticated user may manage users.
    ENFORCE_ADMIN_USER_MANAGEMENT: bool = False

    # ── Logging ──────────────────────────────────────────────────────
    LOG_LEVEL: str = "INFO"

    # ── Default admin + demo data (seeded on startup) ───────────────
    FIRST_ADMIN_USERNAME: str = "admin"
    FIRST_ADMIN_EMAIL: str = "admin@liveboard.local"
    FIRST_ADMIN_PASSWORD: str = "changeme123"
    SEED_SAMPLE_DATA: bool = True

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
        "extra": "ignore",
    }


settings = Settings()

if settings.JWT_SECRET == _INSECURE_DEFAULT_SECRET:
    logging.getLogger("liveboard.core.config").warning(
        "⚠️  WARNING: You are running with the default INSECURE JWT secret! "
        "Set JWT_SECRET in your environment or .env file."
    )
