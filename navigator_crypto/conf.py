"""
Crypto Configuration — Validated settings for the encryption core.

Reads settings from environment variables:
    CRYPTO_SECRET_PATH = <path to the 32-byte secret key file>
    CRYPTO_PASSWORD_LENGTH = <default length for generated passwords>
    CRYPTO_LOG_LEVEL = <logging level name>

Security Note:
    Never log key material. Only log paths and lengths.
"""
import os
import logging
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger("navigator.crypto")

DEFAULT_SECRET_PATH = Path("data/secret.bin")
DEFAULT_PASSWORD_LENGTH = 16

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


class CryptoConfig(BaseModel):
    """Validated crypto configuration."""

    secret_path: Path = Field(default=DEFAULT_SECRET_PATH)
    password_length: int = Field(default=DEFAULT_PASSWORD_LENGTH, ge=0)
    log_level: str = Field(default="WARNING")

    @field_validator("secret_path")
    @classmethod
    def validate_secret_path(cls, v: Path) -> Path:
        """Reject an empty path or one pointing at a directory name."""
        if not str(v) or str(v) == ".":
            raise ValueError("secret_path cannot be empty")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and validate the logging level name."""
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unsupported log level: {v}")
        return level

    @classmethod
    def from_env(cls) -> "CryptoConfig":
        """Create CryptoConfig by loading values from environment.

        Unset variables fall back to the field defaults.

        Returns:
            Populated CryptoConfig instance.
        """
        values = {}
        secret_path = os.environ.get("CRYPTO_SECRET_PATH")
        if secret_path:
            values["secret_path"] = secret_path
        password_length = os.environ.get("CRYPTO_PASSWORD_LENGTH")
        if password_length:
            values["password_length"] = password_length
        log_level = os.environ.get("CRYPTO_LOG_LEVEL")
        if log_level:
            values["log_level"] = log_level
        config = cls(**values)
        logger.debug("Crypto config loaded: secret_path=%s", config.secret_path)
        return config
