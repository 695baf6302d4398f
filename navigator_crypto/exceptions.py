"""
Crypto Errors — Typed failures raised by the encryption core.

Every failure carries an ``ErrorKind`` so callers that prefer explicit
results (see ``CryptoResult``) can branch on the kind without catching.

Security Note:
    Error messages never include key material, plaintext or ciphertext.
    ``DecryptionFailed`` uses one message for every cause so a caller
    controlling the input learns nothing about why decryption failed.
"""
from enum import Enum
from dataclasses import dataclass
from typing import Any, Optional


class ErrorKind(str, Enum):
    """Error taxonomy for the encryption core."""

    CONFIGURATION = "configuration"
    KEY_STORE = "key_store"
    PAYLOAD_TOO_SHORT = "payload_too_short"
    DECRYPTION_FAILED = "decryption_failed"
    ENCRYPTION_FAILED = "encryption_failed"


class CryptoError(Exception):
    """Base class for all encryption core errors."""

    kind: ErrorKind = ErrorKind.CONFIGURATION

    def __init__(self, message: str = "", *args):
        super().__init__(message or self.default_message(), *args)

    @classmethod
    def default_message(cls) -> str:
        return cls.kind.value.replace("_", " ").capitalize()

    @property
    def message(self) -> str:
        return str(self.args[0]) if self.args else ""


class ConfigurationError(CryptoError):
    """Invalid key or settings supplied at construction time."""

    kind = ErrorKind.CONFIGURATION


class InvalidKeyLength(ConfigurationError):
    """Supplied key does not decode to exactly 32 bytes."""


class KeyStoreError(CryptoError):
    """The secret key file could not be created, read or written."""

    kind = ErrorKind.KEY_STORE


class PayloadTooShort(CryptoError, ValueError):
    """Envelope is shorter than IV + tag."""

    kind = ErrorKind.PAYLOAD_TOO_SHORT


class DecryptionFailed(CryptoError):
    """Authentication or decoding failed while decrypting."""

    kind = ErrorKind.DECRYPTION_FAILED


class EncryptionFailed(CryptoError):
    """The cipher primitive failed while encrypting."""

    kind = ErrorKind.ENCRYPTION_FAILED


@dataclass(frozen=True)
class CryptoResult:
    """Outcome of a non-raising codec call.

    Exactly one of ``value`` or ``error`` is meaningful: ``error`` is
    ``None`` on success.
    """

    value: Any = None
    error: Optional[CryptoError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> Optional[ErrorKind]:
        return self.error.kind if self.error is not None else None

    def unwrap(self) -> Any:
        """Return the value, or raise the stored error."""
        if self.error is not None:
            raise self.error
        return self.value
