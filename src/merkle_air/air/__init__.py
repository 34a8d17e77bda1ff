"""AIR package.

`InclusionAir` is the constraint system of a Merkle inclusion claim. It is an immutable value object parameterized by
the expected root; the prover and the verifier each construct their own instance with the same root.

For every row of the trace the AIR imposes:
    - `direction * (1 - direction) = 0`
and, on the last row only:
    - `result_bit_i = root_bit_i` for `i` in `[0, 32)`.

The AIR does not constrain the result of a row to be the hash of its operands, nor the operands of a row to contain
the result of the previous row. These properties are guaranteed by the trace builder only.
"""
