# storefront/core/config.py
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

DATA_DIR = Path(__file__).resolve().parent.parent / "data"


class Settings(BaseSettings):
    """
    Centralized application settings loaded from environment.

    Every field has a default, so the service boots without a .env file.

    Useful overrides (.env):
      - DATABASE_URL (defaults to a process-memory SQLite store)
      - SEED_ON_STARTUP / SEED_PRODUCTS_PATH
      - FREE_SHIPPING_THRESHOLD, SHIPPING_FEE, TAX_RATE
    """

    PROJECT_NAME: str = "Classic Polo Storefront API"
    API_PREFIX: str = "/api"

    # Store config
    DATABASE_URL: str = "sqlite://"
    SEED_ON_STARTUP: bool = True
    SEED_PRODUCTS_PATH: Path = DATA_DIR / "seed_products.json"

    # Carts are keyed by the `session-id` header
    DEFAULT_SESSION_ID: str = "default-session"

    # Cart totals (same currency units as product prices)
    FREE_SHIPPING_THRESHOLD: int = 1500
    SHIPPING_FEE: int = 99
    TAX_RATE: float = 0.18

    CORS_ORIGINS: list[str] = [
        "http://localhost:5000",
        "http://127.0.0.1:5000",
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """
    Cached settings loader.
    Ensures we don't re-parse .env on every import / request.
    """
    return Settings()
