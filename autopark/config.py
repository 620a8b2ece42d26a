# autopark/config.py
"""
Application configuration using Pydantic-Settings.
All settings can be overridden via environment variables or .env file.
"""

from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    # ── Storage ───────────────────────────────────────────────────────────
    STORE_BACKEND: str = "json"                  # json | memory | sql
    DATA_FILE: str = "data/db.json"              # used by the json backend
    DATABASE_URL: str = "sqlite:///./autopark.db"  # used by the sql backend

    # ── Network ───────────────────────────────────────────────────────────
    BACKEND_IP: str = "0.0.0.0"
    BACKEND_PORT: int = 5000

    # ── Security ──────────────────────────────────────────────────────────
    API_KEY: Optional[str] = None   # Set in .env to require X-API-Key on every call
    JWT_SECRET: str = "dev-secret-key-change-me"
    JWT_ALGORITHM: str = "HS256"

    # ── First run ─────────────────────────────────────────────────────────
    SEED_SAMPLE_VEHICLES: bool = True
    BOOTSTRAP_SUPERADMIN: bool = False    # Create/promote SUPERADMIN_EMAIL on startup
    SUPERADMIN_EMAIL: str = "admin@local"
    SUPERADMIN_PASSWORD: Optional[str] = None

    # ── Logging ───────────────────────────────────────────────────────────
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
