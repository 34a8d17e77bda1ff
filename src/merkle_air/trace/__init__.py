"""Trace package.

The execution trace of a Merkle inclusion claim has one row per step of the inclusion path. Each row has `WIDTH = 97`
columns:

    [0, 32)   bits of the left operand hashed at this step
    [32, 64)  bits of the right operand hashed at this step
    [64]      the direction bit of the step
    [65, 97)  bits of the digest produced at this step

Operand and result regions hold the leading `WORD_BITS = 32` bits of the corresponding 32-byte digest, in the bit
order of `merkle_air.util.bit_encoding`.

Usage example:

    >>> from merkle_air.trace.trace_builder import generate_inclusion_trace
    >>> from merkle_air.types.inclusion_path import InclusionPath
    >>> from merkle_air.util.hash_functions import sha256
    >>> trace = generate_inclusion_trace(sha256(b"1"), InclusionPath.from_pairs([(0, sha256(b"2"))]))
    >>> trace.height, trace.width
    (1, 97)
"""
