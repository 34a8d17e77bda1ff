"""merkle_air: A Python package for arithmetizing Merkle inclusion claims.

The `merkle_air` package turns a single Merkle membership claim (a leaf digest, an inclusion path of sibling
digests with direction bits, and an expected root) into an execution trace and a matching AIR, a declarative set of
constraints over the Mersenne-31 field that the trace must satisfy. The trace and the AIR are handed to a proving
backend, which produces a proof and later accepts or rejects it.

Usage example:
    Prove and verify that `sha256(26)` hashes with its sibling `sha256(8)` to the expected root:

    >>> from merkle_air.air.inclusion_air import InclusionAir
    >>> from merkle_air.backend.transparent import TransparentBackend
    >>> from merkle_air.trace.trace_builder import generate_inclusion_trace, merkle_root
    >>> from merkle_air.types.inclusion_path import InclusionPath
    >>> from merkle_air.util.hash_functions import sha256
    >>>
    >>> leaf = sha256(bytes([26]))
    >>> path = InclusionPath.from_pairs([(0, sha256(bytes([8])))])
    >>> root = merkle_root(leaf, path)
    >>>
    >>> backend = TransparentBackend()
    >>> proof = backend.prove(InclusionAir(expected_root=root), generate_inclusion_trace(leaf, path), [])
    >>> backend.verify(InclusionAir(expected_root=root), proof, [])
    True
"""
