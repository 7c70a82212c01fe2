"""
Short id generation.

Ids are 6 bytes from a cryptographically secure source, encoded with the
URL-safe base64 alphabet and no padding: always 8 characters from
A-Z, a-z, 0-9, '-' and '_'.

Uniqueness is NOT checked here; the store's primary key rejects
collisions on insert.
"""

import base64
import secrets
from typing import Callable

from shortener_app.services.exceptions import RandomSourceUnavailableError

ID_BYTES = 6


class IdGenerator:
    """
    Generates short ids from a secure random byte source.

    The source is injectable so a failing entropy source can be simulated;
    it must accept a byte count and return that many bytes.
    """

    def __init__(self, random_source: Callable[[int], bytes] = secrets.token_bytes):
        self.random_source = random_source

    def generate(self) -> str:
        """
        Generate a new short id.

        Raises:
            RandomSourceUnavailableError: the random source failed or
                returned fewer than ID_BYTES bytes
        """
        try:
            data = self.random_source(ID_BYTES)
        except (OSError, NotImplementedError) as e:
            raise RandomSourceUnavailableError(f"Secure random source failed: {e}") from e

        if data is None or len(data) < ID_BYTES:
            raise RandomSourceUnavailableError(
                f"Secure random source returned {0 if data is None else len(data)} "
                f"bytes, expected {ID_BYTES}"
            )

        return base64.urlsafe_b64encode(data[:ID_BYTES]).rstrip(b"=").decode("ascii")


_default_generator = IdGenerator()


def generate_id() -> str:
    """Generate a short id using the system's secure random source."""
    return _default_generator.generate()
