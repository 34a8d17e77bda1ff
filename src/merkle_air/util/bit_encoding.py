"""Conversion between digests and their bit decomposition.

Bits are laid out by ascending byte index, and most-significant-bit first within each byte, so that
`digest_to_bits(bytes.fromhex("80"))` is `[1, 0, 0, 0, 0, 0, 0, 0]`.
"""

from typing import Sequence


def digest_to_bits(digest: bytes) -> list[int]:
    """Decompose `digest` into `8 * len(digest)` scalars, each equal to 0 or 1.

    Args:
        digest (bytes): The byte string to decompose.

    Returns:
        The list of bits of `digest`, byte index ascending, most-significant bit first.
    """
    return [(byte >> (7 - i)) & 1 for byte in digest for i in range(8)]


def bits_to_digest(bits: Sequence[int]) -> bytes:
    """Recompose the byte string whose bit decomposition is `bits`.

    Args:
        bits (Sequence[int]): A sequence of 0/1 scalars whose length is a multiple of 8.

    Returns:
        The byte string `digest` such that `digest_to_bits(digest) == list(bits)`.

    Raises:
        AssertionError: If `len(bits)` is not a multiple of 8 or some element of `bits` is not 0 or 1.
    """
    assert len(bits) % 8 == 0, f"The number of bits must be a multiple of 8: len(bits): {len(bits)}"
    assert all(bit in (0, 1) for bit in bits), f"{list(bits)} is not a list of bits."

    out = bytearray()
    for i in range(0, len(bits), 8):
        byte = 0
        for bit in bits[i : i + 8]:
            byte = (byte << 1) | bit
        out.append(byte)

    return bytes(out)
