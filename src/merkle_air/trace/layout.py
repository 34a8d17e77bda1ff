"""Column layout shared by the trace builder and the AIR."""

from merkle_air.util.bit_encoding import digest_to_bits

WORD_BITS = 32

LEFT = slice(0, WORD_BITS)
RIGHT = slice(WORD_BITS, 2 * WORD_BITS)
DIRECTION = 2 * WORD_BITS
RESULT = slice(2 * WORD_BITS + 1, 3 * WORD_BITS + 1)

WIDTH = 3 * WORD_BITS + 1


def word_bits(digest: bytes) -> list[int]:
    """Return the bits of `digest` stored in a row region, i.e. its leading `WORD_BITS` bits."""
    return digest_to_bits(digest)[:WORD_BITS]
