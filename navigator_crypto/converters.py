"""Attribute converter that stores a string field encrypted."""
from typing import Optional

from .handler import CryptoHandler


class EncryptedAttributeConverter:
    """Encrypt a field on its way to storage and decrypt it on the way back.

    ``None`` is stored and restored as ``None``. Values read from storage
    without the ``{AES256}`` marker are returned unchanged, so columns
    holding legacy plaintext keep working.
    """

    def __init__(self, handler: CryptoHandler):
        self._handler = handler

    def to_database(self, attribute: Optional[str]) -> Optional[str]:
        if attribute is None:
            return None
        return self._handler.encrypt_text(attribute)

    def to_attribute(self, db_data: Optional[str]) -> Optional[str]:
        if db_data is None:
            return None
        return self._handler.decrypt_text(db_data)
