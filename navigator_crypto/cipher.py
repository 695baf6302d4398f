"""
AES-256-GCM Cipher — Authenticated encryption of short payloads.

Envelope format: [IV 12B][ciphertext][GCM tag 16B]

The ciphertext has the same length as the plaintext, so every envelope is
exactly 28 bytes longer than the data it carries. Text helpers wrap the
envelope in standard Base64.

Security Note:
    Never log plaintext or ciphertext values.
    IVs are random 96-bit per call; collision probability negligible under
    normal usage. A key must never encrypt two messages under the same IV.
"""
import os
import base64
import binascii
import logging
from typing import Optional, Union

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from .exceptions import (
    DecryptionFailed,
    EncryptionFailed,
    InvalidKeyLength,
    PayloadTooShort,
)

logger = logging.getLogger("navigator.crypto")

KEY_LEN_BYTES = 32  # 256 bit
IV_LEN_BYTES = 12  # GCM recommended
TAG_LEN_BYTES = 16  # 128 bit auth tag
ENVELOPE_OVERHEAD = IV_LEN_BYTES + TAG_LEN_BYTES

_DECRYPTION_FAILED = "Decryption failed"


def _decode_key(secret: Union[bytes, bytearray, str]) -> bytes:
    if isinstance(secret, str):
        try:
            return base64.b64decode(secret, validate=True)
        except (binascii.Error, ValueError) as err:
            raise InvalidKeyLength(
                f"Secret must be {KEY_LEN_BYTES} bytes (AES-256 key), "
                "got an undecodable Base64 string"
            ) from err
    return bytes(secret)


class AES256:
    """AES-256 in Galois/Counter Mode with a 128-bit tag.

    Args:
        secret: ``None`` to generate a fresh random key, raw key bytes, or
            a Base64-encoded key string.

    Raises:
        InvalidKeyLength: If the key is not exactly 32 bytes.
    """

    def __init__(self, secret: Optional[Union[bytes, bytearray, str]] = None):
        if secret is None:
            key = AESGCM.generate_key(bit_length=256)
        else:
            key = _decode_key(secret)
            if len(key) != KEY_LEN_BYTES:
                raise InvalidKeyLength(
                    f"Secret must be {KEY_LEN_BYTES} bytes (AES-256 key), "
                    f"got {len(key)}"
                )
        self._key = key
        self._aead = AESGCM(key)

    # ------------------------------------------------------------------
    # Key export
    # ------------------------------------------------------------------

    @property
    def secret(self) -> bytes:
        """Raw 32-byte key."""
        return bytes(self._key)

    @property
    def encoded_secret(self) -> str:
        """Key as a Base64 string."""
        return base64.b64encode(self._key).decode("ascii")

    # ------------------------------------------------------------------
    # Byte envelopes
    # ------------------------------------------------------------------

    def encrypt(self, plaintext: bytes) -> bytes:
        """Encrypt ``plaintext`` into ``IV || ciphertext || tag``.

        Raises:
            TypeError: If ``plaintext`` is not bytes-like.
            EncryptionFailed: If the cipher primitive fails.
        """
        if not isinstance(plaintext, (bytes, bytearray, memoryview)):
            raise TypeError(
                f"plaintext must be bytes-like, got {type(plaintext).__name__}"
            )
        iv = os.urandom(IV_LEN_BYTES)
        try:
            ct_with_tag = self._aead.encrypt(iv, bytes(plaintext), None)
        except (TypeError, ValueError, OverflowError) as err:
            logger.error("Encryption failed: %s", type(err).__name__)
            raise EncryptionFailed("Encryption failed") from err
        return iv + ct_with_tag

    def decrypt(self, envelope: bytes) -> bytes:
        """Verify and decrypt an ``IV || ciphertext || tag`` envelope.

        Raises:
            PayloadTooShort: If the envelope cannot hold an IV and a tag.
            DecryptionFailed: On tag mismatch, wrong key or corruption.
        """
        if len(envelope) < ENVELOPE_OVERHEAD:
            raise PayloadTooShort(
                f"Encrypted payload too short: {len(envelope)} bytes "
                f"(minimum {ENVELOPE_OVERHEAD})"
            )
        envelope = bytes(envelope)
        iv = envelope[:IV_LEN_BYTES]
        ct_with_tag = envelope[IV_LEN_BYTES:]
        try:
            return self._aead.decrypt(iv, ct_with_tag, None)
        except (InvalidTag, ValueError):
            logger.debug("Decryption failed (%d byte envelope)", len(envelope))
        raise DecryptionFailed(_DECRYPTION_FAILED)

    # ------------------------------------------------------------------
    # Text envelopes
    # ------------------------------------------------------------------

    def encrypt_text(self, text: str) -> str:
        """Encrypt UTF-8 text and return the Base64 envelope."""
        envelope = self.encrypt(text.encode("utf-8"))
        return base64.b64encode(envelope).decode("ascii")

    def decrypt_text(self, encoded: str) -> str:
        """Decrypt a Base64 envelope back into text.

        Raises:
            PayloadTooShort: If the decoded envelope is too short.
            DecryptionFailed: On bad Base64, authentication failure or
                recovered bytes that are not UTF-8.
        """
        try:
            envelope = base64.b64decode(encoded, validate=True)
        except (binascii.Error, ValueError):
            envelope = None
        if envelope is None:
            raise DecryptionFailed(_DECRYPTION_FAILED)
        plaintext = self.decrypt(envelope)
        try:
            return plaintext.decode("utf-8")
        except UnicodeDecodeError:
            pass
        raise DecryptionFailed(_DECRYPTION_FAILED)
