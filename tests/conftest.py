import pytest

from navigator_crypto.cipher import AES256
from navigator_crypto.handler import CryptoHandler

ZERO_KEY = bytes(32)


@pytest.fixture
def zero_key() -> bytes:
    """Fixed all-zero 32-byte test key."""
    return ZERO_KEY


@pytest.fixture
def cipher(zero_key):
    """AES256 cipher bound to the zero key."""
    return AES256(zero_key)


@pytest.fixture
def handler(cipher):
    """CryptoHandler bound to the zero-key cipher."""
    return CryptoHandler(cipher)
