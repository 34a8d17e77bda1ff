from dataclasses import dataclass
from typing import Sequence

from merkle_air.air.constraint_builder import ConstraintBuilder
from merkle_air.fields.mersenne31 import Mersenne31
from merkle_air.trace.layout import DIRECTION, RESULT, WIDTH, word_bits
from merkle_air.util.hash_functions import DIGEST_SIZE, is_digest


@dataclass(frozen=True)
class InclusionAir:
    """Constraint system of a Merkle inclusion claim for a fixed expected root.

    Attributes:
        expected_root (bytes): The 32-byte root the last row of the trace must declare.
        field: The field in which the constraints are evaluated, `Mersenne31`.
    """

    expected_root: bytes
    field = Mersenne31

    def __post_init__(self):
        if not is_digest(self.expected_root):
            msg = f"The expected root must be a {DIGEST_SIZE}-byte digest: expected_root: {self.expected_root!r}"
            raise ValueError(msg)
        object.__setattr__(self, "expected_root", bytes(self.expected_root))

    def width(self) -> int:
        """Return the number of columns of the trace."""
        return WIDTH

    def num_public_inputs(self) -> int:
        """Return the number of public inputs; the root is a constant of the AIR, not a public input."""
        return 0

    def eval(self, row: Sequence, is_last_row: bool) -> list:
        """Evaluate the constraints on one row of the trace.

        The evaluation is independent of every other row. The constraints are:
            - `row[64] * (1 - row[64]) = 0` on every row,
            - `row[65 + i] = bit_i(expected_root)` for `i` in `[0, 32)` when `is_last_row` is `True`.

        Args:
            row (Sequence): The row, as a sequence of `WIDTH` elements of `self.field` (or integers).
            is_last_row (bool): Whether `row` is the last row of the trace.

        Returns:
            The list of the 33 constraint values. The row satisfies the AIR if and only if they are all zero.
        """
        builder = ConstraintBuilder(self.field)

        builder.assert_bool(row[DIRECTION])

        last_row = builder.when(is_last_row)
        for result_bit, root_bit in zip(row[RESULT], word_bits(self.expected_root), strict=True):
            last_row.assert_eq(result_bit, root_bit)

        return builder.constraints
