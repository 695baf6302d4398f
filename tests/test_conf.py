"""
Tests for CryptoConfig.

Tests cover:
- Default settings
- Loading settings from CRYPTO_* environment variables
- Validation of password length, log level and secret path
"""
from pathlib import Path

import pytest
from pydantic import ValidationError

from navigator_crypto.conf import CryptoConfig


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove CRYPTO_* variables inherited from the environment."""
    for name in ("CRYPTO_SECRET_PATH", "CRYPTO_PASSWORD_LENGTH", "CRYPTO_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


class TestCryptoConfig:
    """Tests for defaults, environment loading and validation."""

    def test_defaults(self):
        """Test default settings."""
        config = CryptoConfig()
        assert config.secret_path == Path("data/secret.bin")
        assert config.password_length == 16
        assert config.log_level == "WARNING"

    def test_from_env_defaults(self):
        """Test that an empty environment yields the defaults."""
        assert CryptoConfig.from_env() == CryptoConfig()

    def test_from_env(self, monkeypatch, tmp_path):
        """Test loading every setting from the environment."""
        monkeypatch.setenv("CRYPTO_SECRET_PATH", str(tmp_path / "key.bin"))
        monkeypatch.setenv("CRYPTO_PASSWORD_LENGTH", "24")
        monkeypatch.setenv("CRYPTO_LOG_LEVEL", "debug")
        config = CryptoConfig.from_env()
        assert config.secret_path == tmp_path / "key.bin"
        assert config.password_length == 24
        assert config.log_level == "DEBUG"

    def test_negative_password_length(self):
        """Test that a negative password length is rejected."""
        with pytest.raises(ValidationError):
            CryptoConfig(password_length=-1)

    def test_unknown_log_level(self):
        """Test that an unknown log level name is rejected."""
        with pytest.raises(ValidationError):
            CryptoConfig(log_level="chatty")

    def test_empty_secret_path(self):
        """Test that an empty secret path is rejected."""
        with pytest.raises(ValidationError):
            CryptoConfig(secret_path="")
