"""
CryptoHandler — Single access point for encrypting and decrypting values.

Binds one ``AES256`` cipher to the application secret key and adds the
``{AES256}`` marker convention for text values:

- ``encrypt_text(text)`` — ``"{AES256}" + base64(envelope)``
- ``decrypt_text(value)`` — decrypts marked values, returns anything else as-is
- ``encrypt_bytes`` / ``decrypt_bytes`` — raw envelopes, no marker

The pass-through in ``decrypt_text`` lets callers decrypt every value of a
configuration set or database row without checking which ones are encrypted.
"""
import logging
import threading
from typing import Any, Callable, Optional

from .cipher import AES256
from .keystore import SecretKeyStore
from .exceptions import CryptoError, CryptoResult

logger = logging.getLogger("navigator.crypto")

AES256_PREFIX = "{AES256}"


def _attempt(func: Callable[[Any], Any], value: Any) -> CryptoResult:
    try:
        return CryptoResult(value=func(value))
    except CryptoError as err:
        return CryptoResult(error=err)


class CryptoHandler:
    """Encrypt/decrypt service bound to a single AES-256 key.

    Build one at startup and hand it to every consumer. Use
    ``CryptoHandler.from_store()`` to bind it to the persisted key.
    """

    prefix: str = AES256_PREFIX

    def __init__(self, cipher: AES256):
        logger.debug("CryptoHandler()")
        self._cipher = cipher

    @classmethod
    def from_store(cls, store: SecretKeyStore) -> "CryptoHandler":
        """Create a handler keyed with the store's secret key.

        Raises:
            InvalidKeyLength: If the stored key is not 32 bytes.
        """
        key = store.get_key_copy()
        try:
            return cls(AES256(key))
        finally:
            key[:] = bytes(len(key))

    @classmethod
    def is_encrypted(cls, value: Any) -> bool:
        """True if ``value`` is a string carrying the encryption marker."""
        return isinstance(value, str) and value.startswith(cls.prefix)

    # ------------------------------------------------------------------
    # Text values
    # ------------------------------------------------------------------

    def encrypt_text(self, text: str) -> str:
        """Encrypt ``text`` and return the marked Base64 envelope."""
        return self.prefix + self._cipher.encrypt_text(text)

    def decrypt_text(self, value: Optional[str]) -> Optional[str]:
        """Decrypt a marked value; return unmarked values unchanged.

        Raises:
            PayloadTooShort: If the marked envelope is too short.
            DecryptionFailed: If the marked envelope fails authentication.
        """
        if self.is_encrypted(value):
            return self._cipher.decrypt_text(value[len(self.prefix):])
        return value

    # ------------------------------------------------------------------
    # Byte values
    # ------------------------------------------------------------------

    def encrypt_bytes(self, data: bytes) -> bytes:
        return self._cipher.encrypt(data)

    def decrypt_bytes(self, envelope: bytes) -> bytes:
        return self._cipher.decrypt(envelope)

    # ------------------------------------------------------------------
    # Non-raising variants
    # ------------------------------------------------------------------

    def try_encrypt_text(self, text: str) -> CryptoResult:
        return _attempt(self.encrypt_text, text)

    def try_decrypt_text(self, value: Optional[str]) -> CryptoResult:
        return _attempt(self.decrypt_text, value)

    def try_encrypt_bytes(self, data: bytes) -> CryptoResult:
        return _attempt(self.encrypt_bytes, data)

    def try_decrypt_bytes(self, envelope: bytes) -> CryptoResult:
        return _attempt(self.decrypt_bytes, envelope)


class LazyCryptoHandler:
    """Build a ``CryptoHandler`` on first use, exactly once.

    Every caller, including concurrent first callers, receives the same
    fully constructed handler.
    """

    def __init__(self, store: SecretKeyStore):
        self._store = store
        self._handler: Optional[CryptoHandler] = None
        self._lock = threading.Lock()

    def get(self) -> CryptoHandler:
        handler = self._handler
        if handler is not None:
            return handler
        with self._lock:
            if self._handler is None:
                self._handler = CryptoHandler.from_store(self._store)
            return self._handler
