"""
Secret Key Store — Load the application secret key, or create it once.

The key is 32 random bytes kept in a file (default ``data/secret.bin``).
On first run the file is created exclusively (never overwritten) and its
permissions are reduced to owner read-only.

Security Note:
    Permissions are hardened after the file is written, so the key is
    briefly readable with the process umask. This is an accepted
    residual risk on shared hosts.
    Never log key material. Only log paths and lengths.
"""
import os
import stat
import logging
import threading
from pathlib import Path
from typing import Optional, Union

from .conf import DEFAULT_SECRET_PATH
from .exceptions import KeyStoreError

logger = logging.getLogger("navigator.crypto")

KEY_LENGTH = 32  # AES-256

# r-- --- ---
_OWNER_READ_ONLY = stat.S_IRUSR


def _write_exclusive(path: Path, data: bytes) -> None:
    """Write ``data`` to a file that must not exist yet."""
    flags = os.O_WRONLY | os.O_CREAT | os.O_EXCL | getattr(os, "O_BINARY", 0)
    fd = os.open(str(path), flags, 0o600)
    # created by us: a partial key must not survive a failed write
    try:
        try:
            fp = os.fdopen(fd, "wb")
        except BaseException:
            os.close(fd)
            raise
        with fp:
            fp.write(data)
    except OSError:
        try:
            os.unlink(path)
        except OSError as err:
            logger.warning("Unable to remove partial secret file %s: %s", path, err)
        raise


def _harden_permissions(path: Path) -> None:
    """Best-effort chmod to owner read-only."""
    try:
        os.chmod(path, _OWNER_READ_ONLY)
    except OSError as err:
        logger.warning(
            "Unable to restrict permissions on secret file %s: %s", path, err,
        )


def read_or_generate(path: Union[str, Path]) -> bytes:
    """Read the secret key at ``path``, generating it if the file is missing.

    No length check happens here; ``AES256`` validates the key when it is
    constructed.

    Args:
        path: Location of the secret key file.

    Returns:
        Raw key bytes.

    Raises:
        KeyStoreError: If the directory or file cannot be created or read,
            including when another process creates the file first.
    """
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        if path.exists():
            logger.debug("Loading secret file %s", path)
            return path.read_bytes()
        secret = os.urandom(KEY_LENGTH)
        logger.info("Writing secret file %s", path)
        _write_exclusive(path, secret)
    except OSError as err:
        raise KeyStoreError(f"Secret file {path} is not usable: {err}") from err
    _harden_permissions(path)
    return secret


def load_or_create(path: Union[str, Path] = DEFAULT_SECRET_PATH) -> bytes:
    """Process-startup variant of ``read_or_generate``.

    A missing durable key is fatal: the error is logged and the process
    exits instead of encrypting with a key that would not survive a
    restart.

    Raises:
        SystemExit: On any key file I/O failure.
    """
    try:
        return read_or_generate(path)
    except KeyStoreError as err:
        logger.error("ERROR: secret file: %s", err)
        raise SystemExit(1) from err


_path_locks: dict[Path, threading.Lock] = {}
_path_locks_guard = threading.Lock()


def _lock_for(path: Path) -> threading.Lock:
    """Process-wide lock for one key file, shared by every store on it."""
    resolved = path.resolve()
    with _path_locks_guard:
        return _path_locks.setdefault(resolved, threading.Lock())


class SecretKeyStore:
    """Owner of the process secret key.

    The key is loaded lazily on first access; concurrent first callers
    share a single load/generate sequence, also across stores built on
    the same path in one process. Callers only ever receive copies of
    the key.
    """

    def __init__(self, path: Union[str, Path] = DEFAULT_SECRET_PATH, fatal: bool = True):
        self._path = Path(path)
        self._fatal = fatal
        self._key: Optional[bytes] = None
        self._lock = _lock_for(self._path)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def loaded(self) -> bool:
        return self._key is not None

    def load(self) -> bytes:
        """Load (or create) the key exactly once and return the cached value.

        Raises:
            SystemExit: On key file I/O failure when the store is fatal.
            KeyStoreError: On key file I/O failure otherwise.
        """
        key = self._key
        if key is not None:
            return key
        with self._lock:
            if self._key is None:
                if self._fatal:
                    self._key = load_or_create(self._path)
                else:
                    self._key = read_or_generate(self._path)
            return self._key

    def get_key_copy(self) -> bytearray:
        """Return a caller-owned copy of the secret key.

        The returned ``bytearray`` is independent of the store; the caller
        should zero it once it is no longer needed.
        """
        return bytearray(self.load())
