"""Merkle commitment to the rows of a trace.

Leaves and internal nodes are domain separated:
    - `leaf_hash(row) = sha256(0x00 || row)`, with every cell serialised as 4 big-endian bytes,
    - `node_hash(left, right) = sha256(0x01 || left || right)`.
A node without a sibling is carried to the next level unchanged.
"""

from typing import Sequence

from merkle_air.util.hash_functions import sha256

CELL_SIZE = 4


def serialise_row(row: Sequence[int]) -> bytes:
    return b"".join(cell.to_bytes(CELL_SIZE, byteorder="big") for cell in row)


def leaf_hash(row: Sequence[int]) -> bytes:
    return sha256(b"\x00" + serialise_row(row))


def node_hash(left: bytes, right: bytes) -> bytes:
    return sha256(b"\x01" + left + right)


def commit_rows(rows: Sequence[Sequence[int]]) -> bytes:
    """Return the Merkle root of `rows`.

    Raises:
        ValueError: If `rows` is empty.
    """
    if len(rows) == 0:
        msg = "Cannot commit to an empty list of rows."
        raise ValueError(msg)

    level = [leaf_hash(row) for row in rows]
    while len(level) > 1:
        next_level = [node_hash(level[i], level[i + 1]) for i in range(0, len(level) - 1, 2)]
        if len(level) % 2 == 1:
            next_level.append(level[-1])
        level = next_level

    return level[0]
