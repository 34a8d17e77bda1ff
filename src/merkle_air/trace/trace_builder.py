import logging
from dataclasses import dataclass
from typing import Sequence

from merkle_air.fields.mersenne31 import Mersenne31, to_field_row
from merkle_air.trace.layout import DIRECTION, LEFT, RESULT, RIGHT, WIDTH, word_bits
from merkle_air.types.inclusion_path import InclusionPath, InclusionStep
from merkle_air.util.bit_encoding import bits_to_digest
from merkle_air.util.hash_functions import DIGEST_SIZE, HashFunction, is_digest, sha256

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Trace:
    """Row-major execution trace of a Merkle inclusion claim.

    Attributes:
        rows (tuple[tuple[int, ...], ...]): The rows of the trace, one per step of the inclusion path, each of length
            `WIDTH`.
    """

    rows: tuple[tuple[int, ...], ...]

    def __post_init__(self):
        rows = tuple(tuple(row) for row in self.rows)
        if len(rows) == 0:
            msg = "The trace must contain at least one row."
            raise ValueError(msg)
        for i, row in enumerate(rows):
            if len(row) != WIDTH:
                msg = f"Row {i} has the wrong width: width: {len(row)}, expected: {WIDTH}"
                raise ValueError(msg)
        object.__setattr__(self, "rows", rows)

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return WIDTH

    def row(self, index: int) -> tuple[int, ...]:
        return self.rows[index]

    def direction(self, index: int) -> int:
        return self.rows[index][DIRECTION]

    def left_word(self, index: int) -> bytes:
        """Decode the left operand region of row `index`."""
        return bits_to_digest(self.rows[index][LEFT])

    def right_word(self, index: int) -> bytes:
        """Decode the right operand region of row `index`."""
        return bits_to_digest(self.rows[index][RIGHT])

    def result_word(self, index: int) -> bytes:
        """Decode the result region of row `index`."""
        return bits_to_digest(self.rows[index][RESULT])

    def current_word(self, index: int) -> bytes:
        """Decode the operand region holding the node lifted at row `index`, as selected by its direction bit."""
        return self.left_word(index) if self.direction(index) == 0 else self.right_word(index)

    def to_field_matrix(self, field=Mersenne31) -> list[list]:
        """Return the trace as a list of rows of elements of `field`."""
        return [to_field_row(row, field) for row in self.rows]


def hash_step(current: bytes, step: InclusionStep, hash_function: HashFunction = sha256) -> tuple[bytes, bytes, bytes]:
    """Lift `current` one level up the tree.

    Args:
        current (bytes): The digest of the node being lifted.
        step (InclusionStep): The direction bit and the sibling digest at this level.
        hash_function (HashFunction): The hash function of the tree. Defaults to `sha256`.

    Returns:
        The triple `(left, right, parent)`, where `parent = hash_function(left || right)`.

    Raises:
        AssertionError: If `hash_function` does not return a digest of `DIGEST_SIZE` bytes.
    """
    left, right = step.order(current)
    parent = hash_function(left + right)
    assert is_digest(parent), f"The hash function must return {DIGEST_SIZE} bytes: output: {parent!r}"
    return left, right, parent


def _as_path(path: InclusionPath | Sequence[InclusionStep]) -> InclusionPath:
    return path if isinstance(path, InclusionPath) else InclusionPath(tuple(path))


def merkle_root(
    leaf_digest: bytes, path: InclusionPath | Sequence[InclusionStep], hash_function: HashFunction = sha256
) -> bytes:
    """Compute the root obtained by folding `leaf_digest` through `path`.

    Args:
        leaf_digest (bytes): The digest of the leaf.
        path (InclusionPath | Sequence[InclusionStep]): The inclusion path, ordered from the leaf to the root.
        hash_function (HashFunction): The hash function of the tree. Defaults to `sha256`.

    Returns:
        The full 32-byte root digest.

    Raises:
        ValueError: If `leaf_digest` is not a digest or `path` is empty.
    """
    if not is_digest(leaf_digest):
        msg = f"The leaf must be a {DIGEST_SIZE}-byte digest: leaf_digest: {leaf_digest!r}"
        raise ValueError(msg)

    state = bytes(leaf_digest)
    for step in _as_path(path):
        _, _, state = hash_step(state, step, hash_function)
    return state


def generate_inclusion_trace(
    leaf_digest: bytes, path: InclusionPath | Sequence[InclusionStep], hash_function: HashFunction = sha256
) -> Trace:
    """Generate the execution trace of the claim that `leaf_digest` is included through `path`.

    The trace is a left fold over `path`: starting from `state = leaf_digest`, each step hashes `state` with its
    sibling (in the order given by the direction bit), emits a row and replaces `state` with the resulting digest.
    The row `i + 1` therefore lifts the digest produced by the row `i`. The final row holds the root; it is not
    compared with any expected root here, this is the job of `InclusionAir`.

    Args:
        leaf_digest (bytes): The digest of the leaf.
        path (InclusionPath | Sequence[InclusionStep]): The inclusion path, ordered from the leaf to the root.
        hash_function (HashFunction): The hash function of the tree. Defaults to `sha256`.

    Returns:
        The trace, with `len(path)` rows of `WIDTH` columns each.

    Raises:
        ValueError: If `leaf_digest` is not a digest or `path` is empty.
    """
    if not is_digest(leaf_digest):
        msg = f"The leaf must be a {DIGEST_SIZE}-byte digest: leaf_digest: {leaf_digest!r}"
        raise ValueError(msg)
    path = _as_path(path)

    rows = []
    state = bytes(leaf_digest)
    for step in path:
        left, right, state = hash_step(state, step, hash_function)
        # row: [left bits, right bits, direction, result bits]
        rows.append((*word_bits(left), *word_bits(right), step.direction, *word_bits(state)))

    logger.debug("Generated inclusion trace with %d rows, root %s", len(rows), state.hex())

    return Trace(tuple(rows))
