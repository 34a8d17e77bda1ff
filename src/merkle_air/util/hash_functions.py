import hashlib
from typing import Callable

DIGEST_SIZE = 32
DIGEST_BITS = 8 * DIGEST_SIZE

type HashFunction = Callable[[bytes], bytes]


def sha256(data: bytes) -> bytes:
    """Return the 32-byte SHA-256 digest of `data`."""
    return hashlib.sha256(data).digest()


def is_digest(value: object) -> bool:
    """Check whether `value` is a byte string of length `DIGEST_SIZE`."""
    return isinstance(value, (bytes, bytearray)) and len(value) == DIGEST_SIZE
