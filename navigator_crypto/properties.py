"""
Encrypted Properties — Decrypt ``{AES256}`` values found in configuration.

Configuration is a sequence of key/value sources in precedence order
(highest first). The first source that defines a key owns it; if that
value is an encrypted string it is decrypted into an overlay that is
consulted before the sources themselves.
"""
import logging
from pathlib import Path
from typing import Any, Union
from collections.abc import Iterable, Iterator, Mapping

import orjson

from .handler import CryptoHandler

logger = logging.getLogger("navigator.crypto")


def decrypt_properties(
    handler: CryptoHandler,
    sources: Iterable[Mapping[str, Any]],
) -> dict[str, str]:
    """Collect decrypted values for every encrypted property.

    Args:
        handler: Codec used to decrypt marked values.
        sources: Property mappings, highest precedence first.

    Returns:
        Mapping of property name to decrypted value. Keys whose winning
        value is not encrypted are left out.

    Raises:
        DecryptionFailed: If a marked value cannot be decrypted.
    """
    decrypted: dict[str, str] = {}
    seen: set[str] = set()
    for source in sources:
        for key, value in source.items():
            if key in seen:
                continue
            seen.add(key)
            if handler.is_encrypted(value):
                decrypted[key] = handler.decrypt_text(value)
    if decrypted:
        logger.debug("Decrypted properties: %s", sorted(decrypted))
    return decrypted


def load_properties(path: Union[str, Path]) -> dict[str, Any]:
    """Read a JSON object of properties from ``path``.

    Raises:
        ValueError: If the document is not a JSON object.
    """
    data = orjson.loads(Path(path).read_bytes())
    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a JSON object, got {type(data).__name__}")
    return data


class DecryptedProperties(Mapping[str, Any]):
    """Read-only view over property sources with encrypted values decrypted.

    Lookup order: decrypted overlay, then each source in precedence order.
    """

    def __init__(self, handler: CryptoHandler, *sources: Mapping[str, Any]):
        self._sources = list(sources)
        self._overlay = decrypt_properties(handler, self._sources)

    def __repr__(self) -> str:
        return (
            f'<DecryptedProperties [sources:{len(self._sources)}] '
            f'decrypted={sorted(self._overlay)}>'
        )

    @property
    def decrypted_keys(self) -> frozenset:
        return frozenset(self._overlay)

    def __getitem__(self, key: str) -> Any:
        if key in self._overlay:
            return self._overlay[key]
        for source in self._sources:
            if key in source:
                return source[key]
        raise KeyError(key)

    def __iter__(self) -> Iterator[str]:
        seen = set()
        for source in self._sources:
            for key in source:
                if key not in seen:
                    seen.add(key)
                    yield key

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __contains__(self, key: object) -> bool:
        return any(key in source for source in self._sources)
