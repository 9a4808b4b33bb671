"""
Byte Source

Every random symbol of a coupon code comes from a buffer of bytes that
starts as sha1(seed) and is extended by hashing again whenever it runs
short or a candidate part is rejected. The same seed therefore always
produces the same sequence of candidate parts.
"""

import hashlib
import secrets
from typing import List, Optional

from .config import PLAINTEXT_SIZE


def sha1(data: bytes) -> bytes:
    """20-byte SHA-1 digest."""
    return hashlib.sha1(data).digest()


def random_plaintext(size: int = PLAINTEXT_SIZE) -> bytes:
    return secrets.token_bytes(size)


class ByteStream:
    """Sequential reader over the iterated-hash buffer."""

    def __init__(self, seed: Optional[bytes] = None):
        if seed is None:
            seed = random_plaintext()
        self.buffer = sha1(seed)

    def __len__(self) -> int:
        return len(self.buffer)

    def peek(self, count: int) -> List[int]:
        """
        Return the next ``count`` bytes without consuming them.

        When fewer than ``count`` bytes are left, the leftover bytes are
        hashed into a fresh buffer first.

        Raises:
            ValueError: If ``count`` exceeds the digest size
        """
        if count > hashlib.sha1().digest_size:
            raise ValueError(f"Cannot read {count} bytes from a 20-byte digest")

        while len(self.buffer) < count:
            self.buffer = sha1(self.buffer)
        return list(self.buffer[:count])

    def consume(self, count: int) -> None:
        """Drop ``count`` bytes after the part built from them was accepted."""
        self.buffer = self.buffer[count:]

    def rehash(self) -> None:
        """Replace the unconsumed buffer with its hash after a rejection."""
        self.buffer = sha1(self.buffer)
