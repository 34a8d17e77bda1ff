"""Proving backend package.

A proving backend turns an AIR and a trace satisfying it into a proof, and accepts or rejects a proof for an AIR:

- `prove(air, trace, public_inputs) -> Proof`
- `verify(air, proof, public_inputs) -> True`, or raise `ProofRejectedError` with the reason of the rejection.

`ProvingBackend` is the interface the rest of the package depends on. `TransparentBackend` is a reference
implementation: its proofs carry the whole trace together with a Merkle commitment to its rows, and the verifier
re-evaluates every constraint. It is neither succinct nor zero knowledge; a polynomial commitment / FRI based backend
can be plugged in through the same interface.
"""
