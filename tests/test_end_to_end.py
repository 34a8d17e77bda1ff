import logging

import pytest

from merkle_air.air.inclusion_air import InclusionAir
from merkle_air.backend.errors import ProofRejectedError
from merkle_air.backend.transparent import TransparentBackend
from merkle_air.trace.layout import RESULT
from merkle_air.trace.trace_builder import generate_inclusion_trace
from merkle_air.util.bit_encoding import digest_to_bits
from merkle_air.util.log import configure_logging


def test_single_step_claim(single_step_claim):
    leaf, path, root = single_step_claim
    assert root.hex() == "7e452279e3119ef55e2a60b7b7191373f05ae231527a2325d95099c430d5d9a1"

    trace = generate_inclusion_trace(leaf, path)
    assert trace.height == 1
    assert list(trace.row(0)[RESULT]) == digest_to_bits(root)[:32]

    backend = TransparentBackend()
    prover_air = InclusionAir(expected_root=root)
    verifier_air = InclusionAir(expected_root=root)
    assert prover_air is not verifier_air

    proof = backend.prove(prover_air, trace, [])
    assert backend.verify(verifier_air, proof, [])


def test_single_step_claim_with_another_root(single_step_claim):
    leaf, path, root = single_step_claim
    backend = TransparentBackend()
    proof = backend.prove(InclusionAir(expected_root=root), generate_inclusion_trace(leaf, path), [])

    with pytest.raises(ProofRejectedError):
        backend.verify(InclusionAir(expected_root=bytes(reversed(root))), proof, [])


class ListHandler(logging.Handler):
    def __init__(self):
        super().__init__()
        self.records = []

    def emit(self, record):
        self.records.append(record)


def test_logging_sink(single_step_claim):
    leaf, path, root = single_step_claim
    sink = ListHandler()
    logger = configure_logging("debug", sink=sink)

    try:
        backend = TransparentBackend()
        proof = backend.prove(InclusionAir(expected_root=root), generate_inclusion_trace(leaf, path), [])
        backend.verify(InclusionAir(expected_root=root), proof, [])
    finally:
        logger.removeHandler(sink)

    messages = [record.getMessage() for record in sink.records]
    assert any(message.startswith("Generated inclusion trace with 1 rows") for message in messages)
    assert any(message.startswith("Proved trace of 1 rows") for message in messages)
    assert any(message.startswith("Verified proof") for message in messages)
