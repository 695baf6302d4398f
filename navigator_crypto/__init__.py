"""Navigator Crypto — AES-256-GCM envelopes for stored values.

Security Note (Threat Model):
    The secret key lives in a local file and in process memory. Anyone who
    can read the key file, or dump the process, can decrypt every envelope.
    Protecting the host is out of scope.
"""

from .version import __version__
from .conf import CryptoConfig
from .exceptions import (
    ErrorKind,
    CryptoError,
    ConfigurationError,
    InvalidKeyLength,
    KeyStoreError,
    PayloadTooShort,
    DecryptionFailed,
    EncryptionFailed,
    CryptoResult,
)
from .keystore import SecretKeyStore, load_or_create
from .cipher import AES256
from .handler import AES256_PREFIX, CryptoHandler, LazyCryptoHandler
from .passwords import PWCHARS, PasswordGenerator
from .properties import DecryptedProperties, decrypt_properties, load_properties
from .converters import EncryptedAttributeConverter

__all__ = [
    "__version__",
    "CryptoConfig",
    "ErrorKind",
    "CryptoError",
    "ConfigurationError",
    "InvalidKeyLength",
    "KeyStoreError",
    "PayloadTooShort",
    "DecryptionFailed",
    "EncryptionFailed",
    "CryptoResult",
    "SecretKeyStore",
    "load_or_create",
    "AES256",
    "AES256_PREFIX",
    "CryptoHandler",
    "LazyCryptoHandler",
    "PWCHARS",
    "PasswordGenerator",
    "DecryptedProperties",
    "decrypt_properties",
    "load_properties",
    "EncryptedAttributeConverter",
]
