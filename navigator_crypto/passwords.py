"""
Password Generator — Random strings from an unambiguous alphabet.

The alphabet leaves out glyphs that are easy to confuse when read back
(``l``, ``o``, ``I``, ``O``, ``Q``).

Security Note:
    The default source is a process-wide ``random.Random`` seeded once,
    which is not a cryptographically secure generator. Pass
    ``secrets.SystemRandom()`` as ``rng`` where that matters.
"""
import random
import threading
from typing import Optional

PWCHARS = (
    "0123456789"
    "-.!#%/?+*"
    "abcdefghijkmnpqrstuvwxyz"
    "ABCDEFGHJKLMNPRSTUVWXYZ"
    "$&<>"
)


class PasswordGenerator:
    """Generate random passwords from ``PWCHARS``."""

    alphabet: str = PWCHARS

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng if rng is not None else random.Random()
        self._lock = threading.Lock()

    def generate(self, length: int) -> str:
        """Return ``length`` independent, uniform picks from the alphabet.

        Raises:
            ValueError: If ``length`` is negative.
        """
        if length < 0:
            raise ValueError(f"Password length cannot be negative: {length}")
        with self._lock:
            return "".join(
                self._rng.choice(self.alphabet) for _ in range(length)
            )


_default_generator = PasswordGenerator()


def generate(length: int) -> str:
    """Generate a password with the process-wide generator."""
    return _default_generator.generate(length)
