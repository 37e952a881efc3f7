"""Tests for environment-driven settings and the composition root."""

from pathlib import Path

from storefront.domain.service.order_pricing_service import MissingProductPolicy
from storefront.infrastructure.bootstrap import build_context
from storefront.infrastructure.config import Settings
from storefront.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)


class TestSettings:

    def test_defaults(self, monkeypatch):
        for name in ("JWT_SECRET", "PORT", "CORS_ORIGIN", "MISSING_PRODUCT_POLICY"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.JWT_SECRET == "defaultSecretKey"
        assert settings.JWT_ALGORITHM == "HS256"
        assert settings.PORT == 5000
        assert settings.CORS_ORIGIN == "http://localhost:3000"
        assert settings.MISSING_PRODUCT_POLICY is MissingProductPolicy.IGNORE

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("JWT_SECRET", "s3cret")
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("MISSING_PRODUCT_POLICY", "reject")

        settings = Settings(_env_file=None)

        assert settings.JWT_SECRET == "s3cret"
        assert settings.PORT == 8080
        assert settings.MISSING_PRODUCT_POLICY is MissingProductPolicy.REJECT

    def test_env_file(self, tmp_path, monkeypatch):
        monkeypatch.delenv("JWT_SECRET", raising=False)
        env_file = tmp_path / ".env"
        env_file.write_text("JWT_SECRET=from-dotenv\n")

        assert Settings(_env_file=env_file).JWT_SECRET == "from-dotenv"


class TestBuildContext:

    def test_creates_collections_under_data_dir(self, tmp_path):
        context = build_context(Settings(_env_file=None, DATA_DIR=tmp_path))

        assert isinstance(context.order_repo, JsonOrderRepository)
        for name in ("products.json", "users.json", "orders.json"):
            assert (tmp_path / name).exists()

    def test_data_dir_is_a_path(self, tmp_path):
        settings = Settings(_env_file=None, DATA_DIR=str(tmp_path))
        assert isinstance(settings.DATA_DIR, Path)
