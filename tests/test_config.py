"""
Tests for configuration management
"""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from customer_manager.infrastructure.configuration.config import (
    Settings,
    get_config,
    reset_config,
)


class TestSettings:
    """Test Settings parsing and validation"""

    def test_defaults(self):
        """Test default values"""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)

        assert settings.database_url == "sqlite:///data/customers.db"
        assert settings.cache_names == ["customers", "customer_list"]
        assert settings.cache_ttl_seconds == 300
        assert settings.clear_caches_on_startup is False
        assert settings.environment == "development"

    def test_reads_environment(self):
        """Test values come from environment variables"""
        env = {
            "DATABASE_URL": "sqlite:///:memory:",
            "LOG_LEVEL": "debug",
            "CLEAR_CACHES_ON_STARTUP": "true",
            "CACHE_NAMES": '["customers", " reports ", "customers", ""]',
            "PORT": "9000",
        }
        with patch.dict(os.environ, env, clear=True):
            settings = Settings(_env_file=None)

        assert settings.database_url == "sqlite:///:memory:"
        assert settings.log_level == "DEBUG"
        assert settings.clear_caches_on_startup is True
        assert settings.cache_names == ["customers", "reports"]
        assert settings.port == 9000

    @pytest.mark.parametrize(
        "field,value",
        [
            ("log_level", "LOUD"),
            ("environment", "moon"),
            ("cache_ttl_seconds", 0),
            ("startup_workers", 0),
            ("port", 70000),
        ],
    )
    def test_invalid_values(self, field, value):
        """Test validation failures"""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, **{field: value})


class TestGetConfig:
    """Test the settings singleton"""

    def test_singleton(self):
        """Test the same instance is returned"""
        assert get_config() is get_config()

    def test_reset(self):
        """Test reset re-reads the environment"""
        first = get_config()
        with patch.dict(os.environ, {"APP_NAME": "Renamed"}):
            reset_config()
            second = get_config()

        assert second is not first
        assert second.app_name == "Renamed"
