"""Process configuration, read from the environment and ``.env``."""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from storefront.domain.service.order_pricing_service import MissingProductPolicy


class Settings(BaseSettings):
    APP_NAME: str = "Storefront Orders"

    # Bearer tokens
    JWT_SECRET: str = "defaultSecretKey"
    JWT_ALGORITHM: str = "HS256"

    # HTTP
    HOST: str = "0.0.0.0"
    PORT: int = 5000
    CORS_ORIGIN: str = "http://localhost:3000"

    # Document store
    DATA_DIR: Path = Path("data")

    # Ordering
    MISSING_PRODUCT_POLICY: MissingProductPolicy = MissingProductPolicy.IGNORE

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "console"  # or "json"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")
